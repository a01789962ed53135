#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/inlinemail/utils/spans.py
"""Position spans for regular expression matches.

The rewriting engine never builds a DOM. It works on the positions of regex
matches and capture groups inside the original string, and splices new text
in by position. Every span in the library uses the same convention: ``end``
points one past the last character, exactly like a Python slice.

"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import NamedTuple


class Span(NamedTuple):
    """Half-open ``[start, end)`` range into a string."""

    start: int
    end: int

    def shift(self, offset: int) -> Span:
        """Return the same span moved ``offset`` characters to the right."""
        return Span(self.start + offset, self.end + offset)

    @property
    def length(self) -> int:
        return self.end - self.start


@dataclass(frozen=True)
class Match:
    """Positions of one regex match.

    Attributes
    ----------
    whole : Span
        Span of the entire match
    captures : tuple[Span | None, ...]
        One entry per capturing group. ``None`` means the group did not take
        part in the match, which is different from an empty ``Span(i, i)``.

    """

    whole: Span
    captures: tuple[Span | None, ...]

    @property
    def start(self) -> int:
        return self.whole.start

    @property
    def end(self) -> int:
        return self.whole.end


def find_all(string: str, pattern: str | re.Pattern[str], ignore_case: bool = False) -> list[Match]:
    """Find the positions of all non-overlapping matches of ``pattern``.

    Like ``re.finditer`` but returns positions instead of text: the whole-match
    span plus one span (or ``None``) per capturing group.

    Parameters
    ----------
    string : str
        Text to scan
    pattern : str or re.Pattern
        Regular expression. A compiled pattern keeps its own flags.
    ignore_case : bool, default False
        Match case-insensitively (only applies to string patterns)

    Returns
    -------
    list[Match]
        Matches from left to right. Empty when nothing matches.

    Examples
    --------
        >>> find_all("1ab2cd", "([a-z])[a-z]")
        [Match(whole=Span(start=1, end=3), captures=(Span(start=1, end=2),)),
         Match(whole=Span(start=4, end=6), captures=(Span(start=4, end=5),))]

    """
    if isinstance(pattern, str):
        pattern = re.compile(pattern, re.IGNORECASE if ignore_case else 0)

    matches = []
    for m in pattern.finditer(string):
        captures = tuple(
            None if m.start(group) == -1 else Span(m.start(group), m.end(group))
            for group in range(1, pattern.groups + 1)
        )
        matches.append(Match(Span(m.start(), m.end()), captures))
    return matches


def substr2(text: str, start: int | Span, end: int | None = None) -> str:
    """Substring with an exclusive end position.

    Parameters
    ----------
    text : str
        Source string
    start : int or Span
        First position to include, or a span (then ``end`` is taken from it)
    end : int, optional
        Position one past the last character to include. ``len(text)`` means
        "through the end of the string".

    Returns
    -------
    str
        ``text[start:end]``

    Raises
    ------
    TypeError
        If ``text`` is not a single string

    """
    if not isinstance(text, str):
        raise TypeError(f"substr2 can only substring a single str, got {type(text).__name__}")

    if isinstance(start, Span):
        start, end = start
    elif end is None:
        end = len(text)

    return text[start:end]
