#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/inlinemail/inline.py
"""Image inlining pipelines for HTML email bodies.

Two pipelines are provided:

- ``inline_images`` rewrites local image references (relative paths,
  absolute paths, ``file:`` URIs) into base64 data URIs.
- ``cid_images`` does the same, then pulls every base64 image back out into
  an ``AttachmentSet`` and points the ``src`` at ``cid:<identifier>``.

Remote (``http:``/``https:``) images are never fetched and never change.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from inlinemail.attachments import AttachmentSet
from inlinemail.options import InlineOptions
from inlinemail.utils.attributes import replace_attr
from inlinemail.utils.images import decode_image_data_uri
from inlinemail.utils.sources import src_to_datauri

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CidResult:
    """Output of ``cid_images``.

    Attributes
    ----------
    html : str
        The document with embedded images referenced as ``cid:...``
    html_data_uri : str
        The intermediate document with images as data URIs, suitable for a
        browser preview
    attachments : AttachmentSet
        The extracted images, in order of first appearance

    """

    html: str
    html_data_uri: str
    attachments: AttachmentSet


def _resolve(base_dir: str | Path | None, options: InlineOptions | None) -> tuple[Path, InlineOptions]:
    options = options or InlineOptions()
    if base_dir is None:
        return options.resolve_base_dir(), options
    return Path(base_dir).absolute(), options


def inline_images(html: str, base_dir: str | Path | None = None, options: InlineOptions | None = None) -> str:
    """Replace local ``<img src>`` references with base64 data URIs.

    Parameters
    ----------
    html : str
        HTML document or fragment
    base_dir : str, Path or None, default None
        Directory for relative references. Defaults to ``options.base_dir``,
        then the current working directory.
    options : InlineOptions, optional
        Inlining configuration

    Returns
    -------
    str
        The document with only the ``src`` values of local images changed

    Raises
    ------
    InvalidURIError
        If an image uses a malformed ``file:`` URI
    ResourceError
        Only when ``options.fail_on_resource_errors`` is set

    """
    resolved_dir, options = _resolve(base_dir, options)

    return replace_attr(html, "img", "src", lambda src: src_to_datauri(src, resolved_dir, options))


def _cid_transform(attachments: AttachmentSet):
    def to_cid(src: str) -> str:
        image = decode_image_data_uri(src)
        if image is None:
            return src

        return f"cid:{attachments.add(src, image.data, image.subtype)}"

    return to_cid


def cid_images(html: str, base_dir: str | Path | None = None, options: InlineOptions | None = None) -> CidResult:
    """Move every embeddable image into a deduplicated attachment set.

    Local references are first inlined with ``inline_images``. Every base64
    ``data:image/<subtype>`` source in the result is then replaced by
    ``cid:<prefix><n>.<subtype>``. Identical sources share one attachment and
    one identifier.

    Parameters
    ----------
    html : str
        HTML document or fragment
    base_dir : str, Path or None, default None
        Directory for relative references
    options : InlineOptions, optional
        Inlining configuration

    Returns
    -------
    CidResult
        CID-referencing HTML, the intermediate data-URI HTML and the images

    Examples
    --------
        >>> gif = "data:image/gif;base64,R0lGODlh"
        >>> result = cid_images(f'<img src="{gif}"><img src="{gif}">')
        >>> result.html
        '<img src="cid:img1.gif"><img src="cid:img1.gif">'
        >>> result.attachments.cids
        ['img1.gif']

    """
    resolved_dir, options = _resolve(base_dir, options)

    html_data_uri = inline_images(html, resolved_dir, options)

    attachments = AttachmentSet(cid_prefix=options.cid_prefix, hash_algorithm=options.hash_algorithm)
    html_cid = replace_attr(html_data_uri, "img", "src", _cid_transform(attachments))

    logger.debug(f"Extracted {len(attachments)} inline image(s)")
    return CidResult(html=html_cid, html_data_uri=html_data_uri, attachments=attachments)


def _read_html(html_file: Path) -> str:
    # newline="" keeps CRLF line endings byte-for-byte
    with open(html_file, encoding="utf-8", newline="") as f:
        return f.read()


def inline_images_file(html_file: str | Path, options: InlineOptions | None = None) -> str:
    """Read an HTML file and inline its images relative to the file's directory."""
    html_path = Path(html_file)
    return inline_images(_read_html(html_path), html_path.absolute().parent, options)


def cid_images_file(html_file: str | Path, options: InlineOptions | None = None) -> CidResult:
    """Read an HTML file and run ``cid_images`` relative to the file's directory."""
    html_path = Path(html_file)
    return cid_images(_read_html(html_path), html_path.absolute().parent, options)
