#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/inlinemail/utils/images.py
"""Image handling utilities for the inlining pipelines.

This module provides helpers for building and taking apart base64 data URIs
and for working out the MIME type of a local image file.

"""

from __future__ import annotations

import base64
import binascii
import logging
import mimetypes
import re
from dataclasses import dataclass
from pathlib import Path

from inlinemail.constants import CID_DATA_URI_PATTERN, IMAGE_FORMAT_TO_MIME

logger = logging.getLogger(__name__)

_CID_DATA_URI_RE = re.compile(CID_DATA_URI_PATTERN, re.DOTALL)

# Wrapped base64 (line breaks every 76 characters, indentation) is still valid
_ASCII_WHITESPACE = str.maketrans("", "", " \t\n\r\f")


@dataclass(frozen=True)
class DataUriImage:
    """A decoded ``data:image/<subtype>;base64,...`` value.

    Attributes
    ----------
    subtype : str
        Image subtype as written in the URI (``png``, ``jpeg``, ...)
    data : bytes
        Decoded image bytes

    """

    subtype: str
    data: bytes

    @property
    def content_type(self) -> str:
        return f"image/{self.subtype}"


def build_data_uri(data: bytes, mime_type: str) -> str:
    """Encode bytes as a ``data:<mime>;base64,<payload>`` URI.

    Examples
    --------
        >>> build_data_uri(b"GIF89a", "image/gif")
        'data:image/gif;base64,R0lGODlh'

    """
    payload = base64.b64encode(data).decode("ascii")
    return f"data:{mime_type};base64,{payload}"


def decode_image_data_uri(data_uri: str) -> DataUriImage | None:
    """Decode a base64 image data URI with a simple subtype.

    Only ``data:image/<word>;base64,<payload>`` is accepted. Anything else
    (remote URLs, ``image/svg+xml``, URL-encoded data URIs, broken base64)
    returns None so the caller can leave the value as it is. ASCII whitespace
    inside the payload is ignored.

    Parameters
    ----------
    data_uri : str
        Candidate attribute value

    Returns
    -------
    DataUriImage or None
        Subtype and decoded bytes, or None if the value does not qualify

    Examples
    --------
        >>> decode_image_data_uri("data:image/gif;base64,R0lGODlh")
        DataUriImage(subtype='gif', data=b'GIF89a')
        >>> decode_image_data_uri("https://example.com/a.png") is None
        True

    """
    match = _CID_DATA_URI_RE.match(data_uri)
    if not match:
        return None

    subtype, payload = match.groups()
    payload = payload.translate(_ASCII_WHITESPACE)
    if not payload:
        return None

    try:
        data = base64.b64decode(payload, validate=True)
    except (ValueError, binascii.Error) as e:
        logger.debug(f"Invalid base64 payload in data URI ({type(e).__name__}: {e})")
        return None

    return DataUriImage(subtype=subtype, data=data)


def detect_image_format_from_bytes(data: bytes) -> str | None:
    r"""Detect image format from file content using magic bytes.

    Parameters
    ----------
    data : bytes
        Image file content (the first 32 bytes are enough)

    Returns
    -------
    str or None
        Image format (lowercase extension without dot) or None if unrecognized

    Notes
    -----
    Supported signatures:

    - **PNG**: ``\x89PNG\r\n\x1a\n``
    - **JPEG**: ``\xff\xd8\xff``
    - **GIF**: ``GIF87a`` or ``GIF89a``
    - **WebP**: ``RIFF`` with ``WEBP`` at offset 8
    - **BMP**: ``BM``
    - **TIFF**: ``II*\x00`` or ``MM\x00*``
    - **ICO**: ``\x00\x00\x01\x00``
    - **SVG**: ``<svg`` or ``<?xml`` after leading whitespace

    SVG files become ``image/svg+xml`` data URIs, which ``cid_images`` leaves
    inline: only simple ``image/<word>`` subtypes become attachments.

    """
    if not data or len(data) < 4:
        return None

    if data.startswith(b"\x89PNG\r\n\x1a\n"):
        return "png"

    if data.startswith(b"\xff\xd8\xff"):
        return "jpg"

    if data.startswith((b"GIF87a", b"GIF89a")):
        return "gif"

    if len(data) >= 12 and data.startswith(b"RIFF") and data[8:12] == b"WEBP":
        return "webp"

    if data.startswith(b"BM"):
        return "bmp"

    if data.startswith((b"II*\x00", b"MM\x00*")):
        return "tiff"

    if data.startswith(b"\x00\x00\x01\x00"):
        return "ico"

    stripped = data[:256].lstrip()
    if stripped.startswith((b"<svg", b"<?xml")):
        return "svg"

    return None


def guess_mime_type(path: str | Path, data: bytes | None = None) -> str | None:
    """Guess the MIME type of a local file.

    The file extension is tried first; if it says nothing, the content's
    magic bytes are checked.

    Parameters
    ----------
    path : str or Path
        File path
    data : bytes, optional
        File content, used when the extension is unknown

    Returns
    -------
    str or None
        MIME type, or None if it cannot be determined

    Examples
    --------
        >>> guess_mime_type("photo.JPG")
        'image/jpeg'
        >>> guess_mime_type("noext", b"\\x89PNG\\r\\n\\x1a\\n")
        'image/png'

    """
    mime_type, _ = mimetypes.guess_type(Path(path).name)
    if mime_type:
        return mime_type

    if data is not None:
        image_format = detect_image_format_from_bytes(data)
        if image_format:
            return IMAGE_FORMAT_TO_MIME[image_format]

    return None
