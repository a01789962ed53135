#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/inlinemail/utils/entities.py
"""HTML character reference decoding and escaping.

Attribute values are unescaped before they reach a transform and escaped
again when the result is spliced back, so the two directions here must be
exact inverses of each other.

"""

from __future__ import annotations

import re
from html import escape as _html_escape
from html.entities import html5 as HTML5_NAMED_ENTITIES

from inlinemail.constants import ENTITY_PATTERN, HEX_CODE_PATTERN
from inlinemail.exceptions import InvalidEntityError
from inlinemail.utils.substitute import gfsub

_ENTITY_RE = re.compile(ENTITY_PATTERN, re.IGNORECASE)

_BASIC_ENTITIES = {
    "amp": "&",
    "lt": "<",
    "gt": ">",
    "quot": '"',
}

# Whitespace that attribute normalization would otherwise fold into spaces
_ATTRIBUTE_WHITESPACE = str.maketrans({"\r": "&#13;", "\n": "&#10;", "\t": "&#9;"})


def decode_hex(hex_code: str) -> str:
    """Decode a hexadecimal code point to a single character.

    The code is zero-padded to eight hex digits and decoded as one UTF-32
    (big endian) code unit, so anything that is not a Unicode scalar value is
    rejected.

    Parameters
    ----------
    hex_code : str
        Between 1 and 8 hexadecimal digits (either case)

    Returns
    -------
    str
        The decoded character

    Raises
    ------
    InvalidEntityError
        If ``hex_code`` is not 1-8 hex digits or is not a valid code point

    Examples
    --------
        >>> decode_hex("41")
        'A'
        >>> decode_hex("1F600")
        '😀'

    """
    if not isinstance(hex_code, str) or not re.fullmatch(HEX_CODE_PATTERN, hex_code):
        raise InvalidEntityError(str(hex_code))

    try:
        return bytes.fromhex(hex_code.zfill(8)).decode("utf-32-be")
    except UnicodeDecodeError as e:
        raise InvalidEntityError(
            hex_code, message=f"Character code {hex_code!r} is not a valid Unicode code point", original_error=e
        ) from e


def _decode_entity(entity: str, hex_code: str | None, dec_code: str | None, name: str | None) -> str:
    if hex_code is not None:
        return decode_hex(hex_code)

    if dec_code is not None:
        return decode_hex(format(int(dec_code), "x"))

    if name in _BASIC_ENTITIES:
        return _BASIC_ENTITIES[name]

    # Unknown names pass through untouched
    return HTML5_NAMED_ENTITIES.get(f"{name};", entity)


def html_unescape(text: str) -> str:
    """Decode numeric and named character references.

    Handles ``&#xHH;``, ``&#DD;`` and ``&name;``. Decimal references are
    re-expressed as hex and go through ``decode_hex`` so both forms share one
    validation path. Named references other than ``amp``, ``lt``, ``gt`` and
    ``quot`` are looked up in the HTML5 entity table; unknown names are left
    as they are.

    Parameters
    ----------
    text : str
        Escaped text, typically an attribute value

    Returns
    -------
    str
        Text with character references replaced

    Raises
    ------
    InvalidEntityError
        If a numeric reference is out of range

    Examples
    --------
        >>> html_unescape("a &amp; b &#65;&#x42; &unknownxyz;")
        'a & b AB &unknownxyz;'

    """
    return gfsub(text, _ENTITY_RE, _decode_entity)


def escape_attribute(text: str) -> str:
    """Escape text for use as an attribute value.

    Quotes of both kinds are escaped so the result is safe inside either
    quote style, and CR/LF/TAB are written as numeric references so they
    survive attribute value normalization.

    Parameters
    ----------
    text : str
        Raw attribute value

    Returns
    -------
    str
        Escaped value

    Examples
    --------
        >>> escape_attribute('say "hi" & <bye>')
        'say &quot;hi&quot; &amp; &lt;bye&gt;'

    """
    return _html_escape(text, quote=True).translate(_ATTRIBUTE_WHITESPACE)


def escape_html(text: str, *, enabled: bool = True) -> str:
    """Escape ``&``, ``<`` and ``>`` for text content when enabled."""
    if not enabled:
        return text
    return _html_escape(text, quote=False)
