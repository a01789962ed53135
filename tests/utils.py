"""Test utilities for the inlinemail test suite.

Small image payloads and helpers shared by unit and integration tests.
"""

import base64

# Base64 encoded 1x1 pixel PNG for testing
MINIMAL_PNG_B64 = "iVBORw0KGgoAAAANSUhEUgAAAAEAAAABCAQAAAC1HAwCAAAAC0lEQVR42mP8/w8AAn8B9FpQHLwAAAAASUVORK5CYII="
MINIMAL_PNG_BYTES = base64.b64decode(MINIMAL_PNG_B64)
PNG_DATA_URI = f"data:image/png;base64,{MINIMAL_PNG_B64}"

# Just enough of a JPEG for magic-byte detection
MINIMAL_JPEG_BYTES = b"\xff\xd8\xff\xe0\x00\x10JFIF\x00\x01\x01\x00\x00\x01\x00\x01\x00\x00\xff\xd9"
JPEG_DATA_URI = "data:image/jpeg;base64," + base64.b64encode(MINIMAL_JPEG_BYTES).decode("ascii")

MINIMAL_SVG_BYTES = b'<svg xmlns="http://www.w3.org/2000/svg" width="1" height="1"></svg>'

# 6-byte GIF header; enough for data URI tests that never render the image
GIF_DATA_URI = "data:image/gif;base64,R0lGODlh"


def img(src: str, quote: str = '"', extra: str = "") -> str:
    """Build an ``<img>`` tag with the given (already escaped) ``src``."""
    return f"<img{extra} src={quote}{src}{quote}>"
