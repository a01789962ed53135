#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Constants and default values for the inlinemail library.

Constants are organized by category:
1. Scan Patterns - Regular expressions used by the rewriting engine
2. Inlining Defaults - Default configuration values
3. Image Types - MIME type and magic-byte tables
"""

from __future__ import annotations

# =============================================================================
# Scan Patterns
# =============================================================================

# Tag names are interpolated into a scan pattern and must be plain identifiers
TAG_NAME_PATTERN = r"^[a-zA-Z]\w*$"

# One begin/self-closing tag. Possessive quantifiers keep this linear on
# inputs with many '<' characters.
TAG_PATTERN = r"\A<(\w++)([^>]*+)>\Z"

# name = "double" | 'single' | bare. Names are matched whole so that
# "data-src" never yields "src".
ATTRIBUTE_PATTERN = r"""(?<![\w:-])([\w:-]++)\s*=(?>\s*)(?:"([^"]*)"|'([^']*)'|(\S*))"""

# An HTML comment, or an unterminated one running to the end of the input
COMMENT_PATTERN = r"<!--(?s:.*?-->|.*+\Z)"

ENTITY_PATTERN = r"&#x([0-9a-f]+);|&#([0-9]+);|&([a-z0-9]+);"

HEX_CODE_PATTERN = r"^[0-9a-fA-F]{1,8}$"

FILE_URI_PATTERN = r"^[Ff][Ii][Ll][Ee]://(([A-Za-z]:)?/.*)$"

HTTP_SCHEME_PATTERN = r"^https?:"

DATA_SCHEME_PATTERN = r"^data:"

FILE_SCHEME_PATTERN = r"^file:"

# Only base64 images with a simple subtype are turned into attachments
CID_DATA_URI_PATTERN = r"^data:image/(\w+);base64,(.+)"

CID_PREFIX_PATTERN = r"^[A-Za-z][\w.-]*$"

# =============================================================================
# Inlining Defaults
# =============================================================================

DEFAULT_CID_PREFIX = "img"

DEFAULT_HASH_ALGORITHM = "sha256"

DEFAULT_MAX_ASSET_SIZE_BYTES = 50 * 1024 * 1024

DEFAULT_FAIL_ON_RESOURCE_ERRORS = False

# =============================================================================
# Image Types
# =============================================================================

IMAGE_FORMAT_TO_MIME = {
    "png": "image/png",
    "jpg": "image/jpeg",
    "jpeg": "image/jpeg",
    "gif": "image/gif",
    "webp": "image/webp",
    "svg": "image/svg+xml",
    "bmp": "image/bmp",
    "tiff": "image/tiff",
    "tif": "image/tiff",
    "ico": "image/vnd.microsoft.icon",
}
