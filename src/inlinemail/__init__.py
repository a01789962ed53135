"""inlinemail - Embed images in HTML email bodies.

inlinemail rewrites the ``src`` attributes of ``<img>`` tags in an HTML
document without building a DOM. Everything outside the rewritten values is
preserved exactly, including comments and arbitrary Unicode text.

Key Features
------------
- Local images (relative paths, absolute paths, ``file:`` URIs) inlined as
  base64 data URIs
- Data URIs converted to ``cid:`` references with a deduplicated,
  ordered attachment set ready for ``multipart/related`` messages
- Generic position-addressed attribute rewriting for any tag and attribute
- HTML character reference decoding with strict numeric validation
- Remote images and unresolvable references are left untouched

Requirements
------------
- Python 3.11+ (possessive quantifiers in ``re``)
- mistune, for Markdown message fragments

Examples
--------
Inline every local image of a document:

    >>> from inlinemail import inline_images
    >>> html = inline_images('<img src="logo.png">', base_dir="assets")

Prepare images for Content-ID embedding:

    >>> from inlinemail import cid_images
    >>> result = cid_images(html)
    >>> parts = result.attachments.to_mime_parts()

Rewrite an arbitrary attribute:

    >>> from inlinemail import replace_attr
    >>> replace_attr('<a href="x">', "a", "href", str.upper)
    '<a href="X">'

"""

#  Copyright (c) 2025 Tom Villani, Ph.D.

from inlinemail.attachments import AttachmentSet, ImageAttachment
from inlinemail.exceptions import (
    InlineMailError,
    InvalidEntityError,
    InvalidTagNameError,
    InvalidURIError,
    ResourceError,
    ResourceNotFoundError,
    ValidationError,
)
from inlinemail.inline import CidResult, cid_images, cid_images_file, inline_images, inline_images_file
from inlinemail.options import InlineOptions
from inlinemail.text import MarkdownText, PlainText, md, process_text
from inlinemail.utils.attributes import replace_attr
from inlinemail.utils.entities import html_unescape
from inlinemail.utils.sources import src_to_datauri

__version__ = "0.1.0"

__all__ = [
    "AttachmentSet",
    "CidResult",
    "ImageAttachment",
    "InlineMailError",
    "InlineOptions",
    "InvalidEntityError",
    "InvalidTagNameError",
    "InvalidURIError",
    "MarkdownText",
    "PlainText",
    "ResourceError",
    "ResourceNotFoundError",
    "ValidationError",
    "cid_images",
    "cid_images_file",
    "html_unescape",
    "inline_images",
    "inline_images_file",
    "md",
    "process_text",
    "replace_attr",
    "src_to_datauri",
    "__version__",
]
