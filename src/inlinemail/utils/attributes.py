#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/inlinemail/utils/attributes.py
"""Locate and rewrite attribute values of HTML begin tags.

This is a deliberately small scanner rather than an HTML parser: it finds
begin tags with a regular expression, parses the ``name=value`` pairs inside
each one, and splices a new value in by position. Everything that is not the
rewritten value (other attributes, quotes, comments, text, odd Unicode) is
copied through untouched.

Functions
---------
- parse_attr: Map attribute names to value spans inside a tag's interior
- parse_tag: Parse one complete begin/self-closing tag
- validate_tag_name: Reject tag names that are unsafe in a scan pattern
- replace_attr: Rewrite one attribute on every matching tag in a document
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from typing import Callable

from inlinemail.constants import ATTRIBUTE_PATTERN, COMMENT_PATTERN, TAG_NAME_PATTERN, TAG_PATTERN
from inlinemail.exceptions import InvalidTagNameError
from inlinemail.utils.entities import escape_attribute, html_unescape
from inlinemail.utils.spans import Span, find_all, substr2
from inlinemail.utils.substitute import gfsub

logger = logging.getLogger(__name__)

_ATTRIBUTE_RE = re.compile(ATTRIBUTE_PATTERN)
_TAG_RE = re.compile(TAG_PATTERN)


@dataclass(frozen=True)
class Tag:
    """A parsed begin or self-closing tag.

    Attributes
    ----------
    name : str
        Tag name as written in the source
    attributes : dict[str, Span]
        Lower-cased attribute name to the span of its value, relative to the
        tag text. Only the first occurrence of a repeated name is kept.

    """

    name: str
    attributes: dict[str, Span] = field(default_factory=dict)


def parse_attr(text: str) -> dict[str, Span]:
    """Parse ``name=value`` pairs.

    Values may be double-quoted, single-quoted or bare (no whitespace).
    Whitespace around ``=`` is allowed. Attributes without a value are
    ignored.

    Parameters
    ----------
    text : str
        The interior of a tag, e.g. ``src='a.png'  alt = "x" id=foo``

    Returns
    -------
    dict[str, Span]
        Lower-cased name to the span of the value (without quotes), relative
        to ``text``

    Examples
    --------
        >>> parse_attr('src="a.png" ALT = hi')
        {'src': Span(start=5, end=10), 'alt': Span(start=18, end=20)}

    """
    attributes: dict[str, Span] = {}

    for match in find_all(text, _ATTRIBUTE_RE):
        name_span, *value_spans = match.captures
        assert name_span is not None

        value = next((span for span in value_spans if span is not None), None)
        if value is None:
            continue

        attributes.setdefault(substr2(text, name_span).lower(), value)

    return attributes


def parse_tag(tag: str) -> Tag | None:
    """Parse a single begin tag (or self-closing tag).

    Parameters
    ----------
    tag : str
        The full tag text, from ``<`` to ``>`` inclusive

    Returns
    -------
    Tag or None
        The parsed tag with attribute spans relative to ``tag``, or ``None``
        if ``tag`` is not a single well-formed begin tag

    """
    matches = find_all(tag, _TAG_RE)
    if not matches:
        return None

    name_span, interior = matches[0].captures
    assert name_span is not None and interior is not None

    attributes = {
        # Spans from parse_attr are relative to the interior, not the tag
        name: span.shift(interior.start)
        for name, span in parse_attr(substr2(tag, interior)).items()
    }
    return Tag(name=substr2(tag, name_span), attributes=attributes)


def validate_tag_name(tag_name: str) -> str:
    """Check that ``tag_name`` is a plain identifier.

    Raises
    ------
    InvalidTagNameError
        If the name is empty or contains anything but a leading letter
        followed by word characters

    """
    if not isinstance(tag_name, str) or not re.fullmatch(TAG_NAME_PATTERN, tag_name):
        raise InvalidTagNameError(str(tag_name))
    return tag_name


def replace_attr(html: str, tag_name: str, attr_name: str, func: Callable[[str], str]) -> str:
    """Rewrite the value of one attribute on every matching tag.

    Parameters
    ----------
    html : str
        An HTML document or fragment
    tag_name : str
        Case-insensitive name of the tags to rewrite (e.g. ``"img"``)
    attr_name : str
        Case-insensitive name of the attribute to rewrite (e.g. ``"src"``).
        If the attribute appears more than once on a tag only the first
        occurrence is rewritten.
    func : callable
        Receives the unescaped attribute value and returns the new unescaped
        value. The result is attribute-escaped before being spliced back.

    Returns
    -------
    str
        The document with the attribute values replaced. Tags that do not
        parse, tags without the attribute and anything inside HTML comments
        are left exactly as they were.

    Raises
    ------
    InvalidTagNameError
        If ``tag_name`` is not a simple identifier

    Examples
    --------
        >>> replace_attr("<img src='a.png'> <IMG SRC=b.png>", "img", "src", str.upper)
        "<img src='A.PNG'> <IMG SRC=B.PNG>"

    """
    validate_tag_name(tag_name)
    attr_key = attr_name.lower()

    # Comments and all other tags are matched too and passed through, so tags
    # inside comments are never touched and a "<!--" inside another tag's
    # attribute value does not open a comment. An unterminated tag runs to
    # the end of the input (and fails parse_tag) so the scan stays linear on
    # input full of "<img " with no ">".
    pattern = re.compile(
        rf"({COMMENT_PATTERN})|(<(?!{tag_name}\s)[A-Za-z][^>]*+(?:>|\Z))|<{tag_name}\s[^>]*+(?:>|\Z)",
        re.IGNORECASE,
    )

    def rewrite_tag(tag_html: str, comment: str | None, other_tag: str | None) -> str | None:
        if comment is not None or other_tag is not None:
            return None

        tag = parse_tag(tag_html)
        if tag is None:
            logger.debug(f"Could not parse tag, leaving unchanged: {tag_html[:80]}")
            return None

        attr_loc = tag.attributes.get(attr_key)
        if attr_loc is None:
            return None

        original = html_unescape(substr2(tag_html, attr_loc))
        value = func(original)
        if value == original:
            # Keep the source spelling (entity style, quotes) when nothing changed
            return None

        return substr2(tag_html, 0, attr_loc.start) + escape_attribute(value) + substr2(tag_html, attr_loc.end)

    return gfsub(html, pattern, rewrite_tag)
