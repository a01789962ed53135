#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/inlinemail/text.py
"""Plain-text and Markdown message fragments.

Text destined for an HTML email body is either plain text, which is escaped
and gets ``<br />`` breaks between paragraphs, or Markdown, which is rendered
to HTML. The caller says which one it is by wrapping the string; nothing here
inspects the content to guess.
"""

from __future__ import annotations

from dataclasses import dataclass

import mistune

from inlinemail.utils.entities import escape_html


@dataclass(frozen=True)
class PlainText:
    """Text to be escaped and shown as-is."""

    text: str


@dataclass(frozen=True)
class MarkdownText:
    """Text to be rendered from Markdown to HTML."""

    text: str


def md(*lines: str) -> MarkdownText:
    """Mark one or more lines as Markdown, joined with newlines.

    Examples
    --------
        >>> md("# Hello", "", "Some *emphasis*.")
        MarkdownText(text='# Hello\\n\\nSome *emphasis*.')

    """
    return MarkdownText("\n".join(lines))


def process_text(value: PlainText | MarkdownText | str) -> str:
    """Convert a message fragment to an HTML string.

    Parameters
    ----------
    value : PlainText, MarkdownText or str
        The fragment. A bare ``str`` is treated as plain text.

    Returns
    -------
    str
        HTML for the fragment

    Raises
    ------
    TypeError
        If ``value`` is not one of the accepted types

    Examples
    --------
        >>> process_text("Fish & chips\\n\\nTomorrow")
        'Fish &amp; chips<br />\\nTomorrow'
        >>> process_text(md("**bold**"))
        '<p><strong>bold</strong></p>\\n'

    """
    if isinstance(value, MarkdownText):
        return mistune.html(value.text)

    if isinstance(value, str):
        value = PlainText(value)

    if not isinstance(value, PlainText):
        raise TypeError(f"Expected PlainText, MarkdownText or str, got {type(value).__name__}")

    return escape_html(value.text).replace("\n\n", "<br />\n")
