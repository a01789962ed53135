#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/inlinemail/utils/__init__.py
"""Low-level building blocks of the rewriting engine.

This package contains the span matcher, the functional substitution engine,
the attribute scanner, the entity codec and the image source helpers.
"""

from inlinemail.utils.attributes import Tag, parse_attr, parse_tag, replace_attr, validate_tag_name
from inlinemail.utils.entities import decode_hex, escape_attribute, escape_html, html_unescape
from inlinemail.utils.spans import Match, Span, find_all, substr2
from inlinemail.utils.substitute import gfsub

__all__ = [
    "Match",
    "Span",
    "Tag",
    "decode_hex",
    "escape_attribute",
    "escape_html",
    "find_all",
    "gfsub",
    "html_unescape",
    "parse_attr",
    "parse_tag",
    "replace_attr",
    "substr2",
    "validate_tag_name",
]
