#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Resolve image ``src`` values to embeddable data URIs.

Functions
---------
- file_uri_to_filepath: Convert a ``file://`` URI to a filesystem path
- src_to_filepath: Resolve a relative or absolute reference against a base directory
- src_to_datauri: Replace a local image reference with a base64 data URI
"""

import logging
import os
import re
from pathlib import Path
from urllib.parse import unquote

from inlinemail.constants import DATA_SCHEME_PATTERN, FILE_SCHEME_PATTERN, FILE_URI_PATTERN, HTTP_SCHEME_PATTERN
from inlinemail.exceptions import InvalidURIError, ResourceError, ResourceNotFoundError
from inlinemail.options import InlineOptions
from inlinemail.utils.images import build_data_uri, guess_mime_type

logger = logging.getLogger(__name__)

_FILE_URI_RE = re.compile(FILE_URI_PATTERN)
_HTTP_SCHEME_RE = re.compile(HTTP_SCHEME_PATTERN, re.IGNORECASE)
_DATA_SCHEME_RE = re.compile(DATA_SCHEME_PATTERN, re.IGNORECASE)
_FILE_SCHEME_RE = re.compile(FILE_SCHEME_PATTERN, re.IGNORECASE)


def file_uri_to_filepath(src: str) -> str:
    """Convert an HTML-decoded (but still URL-encoded) file URI to a path.

    Parameters
    ----------
    src : str
        A URI such as ``file:///home/me/a%20b.png`` or ``file://C:/x.png``

    Returns
    -------
    str
        The URL-decoded path part

    Raises
    ------
    InvalidURIError
        If ``src`` is not ``file://`` followed by an absolute path

    Examples
    --------
    >>> file_uri_to_filepath("file:///tmp/my%20image.png")
    '/tmp/my image.png'
    >>> file_uri_to_filepath("FILE://C:/images/logo.png")
    'C:/images/logo.png'

    """
    match = _FILE_URI_RE.match(src)
    if not match:
        raise InvalidURIError(src)

    return unquote(match.group(1))


def src_to_filepath(src: str, base_dir: str | Path) -> str:
    """Resolve an HTML-decoded (but still URL-encoded) reference to an absolute path.

    Absolute references stay where they are; relative ones are taken
    relative to ``base_dir``.
    """
    path = unquote(src)
    return os.path.normpath(os.path.join(os.path.abspath(base_dir), path))


def _skip(
    src: str,
    message: str,
    options: InlineOptions,
    file_path: str,
    original_error: Exception | None = None,
    level: int = logging.DEBUG,
) -> str:
    if options.fail_on_resource_errors:
        raise ResourceError(message, src=src, file_path=file_path, original_error=original_error)
    logger.log(level, message)
    return src


def src_to_datauri(src: str, base_dir: str | Path | None = None, options: InlineOptions | None = None) -> str:
    """Turn a local image reference into a base64 data URI.

    ``http:``/``https:`` and ``data:`` values are returned as they are.
    ``file:`` URIs and plain paths are resolved to a file which is read in
    full and embedded. Missing or unreadable files, files whose type cannot
    be guessed and files above ``options.max_asset_size_bytes`` are left as
    references
    (or raise ``ResourceError`` when ``options.fail_on_resource_errors``).

    Parameters
    ----------
    src : str
        The unescaped ``src`` attribute value
    base_dir : str, Path or None, default None
        Directory for relative references; falls back to ``options.base_dir``
        and then the current working directory
    options : InlineOptions, optional
        Inlining configuration

    Returns
    -------
    str
        A data URI, or ``src`` unchanged

    Raises
    ------
    InvalidURIError
        If ``src`` uses the ``file:`` scheme but is not a valid file URI
    ResourceError
        Only when ``options.fail_on_resource_errors`` is set

    """
    options = options or InlineOptions()
    if base_dir is None:
        base_dir = options.resolve_base_dir()

    if _HTTP_SCHEME_RE.match(src) or _DATA_SCHEME_RE.match(src):
        return src

    if _FILE_SCHEME_RE.match(src):
        full_path = file_uri_to_filepath(src)
    else:
        full_path = src_to_filepath(src, base_dir)

    path = Path(full_path)
    try:
        if not path.is_file():
            if options.fail_on_resource_errors:
                raise ResourceNotFoundError(src, full_path)
            logger.warning(f"Image not found, leaving reference unchanged: {full_path}")
            return src

        size = path.stat().st_size
        if size > options.max_asset_size_bytes:
            return _skip(
                src,
                f"Image {full_path} is {size} bytes, above the {options.max_asset_size_bytes} byte limit",
                options,
                full_path,
            )

        data = path.read_bytes()
    except OSError as e:
        # is_file() itself raises for e.g. ENAMETOOLONG
        return _skip(
            src,
            f"Could not read image {full_path} ({type(e).__name__}: {e})",
            options,
            full_path,
            original_error=e,
            level=logging.WARNING,
        )

    mime_type = guess_mime_type(path, data)
    if mime_type is None:
        return _skip(src, f"Could not determine MIME type of {full_path}", options, full_path)

    return build_data_uri(data, mime_type)
