#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/inlinemail/utils/substitute.py
"""Functional find-and-replace over a whole document."""

from __future__ import annotations

import re
from io import StringIO
from typing import Callable, Optional

from inlinemail.utils.spans import find_all, substr2

# Called with the whole match followed by one argument per capturing group;
# groups that did not participate are passed as None.
ReplacementFunc = Callable[..., Optional[str]]


def gfsub(
    string: str,
    pattern: str | re.Pattern[str],
    func: ReplacementFunc,
    ignore_case: bool = False,
) -> str:
    """Replace every match of ``pattern`` with the result of ``func``.

    Like ``re.sub`` with a callable, except that ``func`` receives plain
    strings (``func(whole, group1, group2, ...)``) and may return ``None`` to
    leave a match unchanged. Text between matches is copied verbatim.

    Parameters
    ----------
    string : str
        Document to rewrite
    pattern : str or re.Pattern
        Regular expression to scan for
    func : callable
        Transform called once per match, left to right
    ignore_case : bool, default False
        Match case-insensitively (only applies to string patterns)

    Returns
    -------
    str
        The rewritten document

    Examples
    --------
        >>> gfsub("a1b22", r"(\\d+)", lambda whole, digits: f"<{digits}>")
        'a<1>b<22>'

    """
    out = StringIO()
    pos = 0

    for match in find_all(string, pattern, ignore_case=ignore_case):
        out.write(substr2(string, pos, match.start))

        whole = substr2(string, match.whole)
        args = [None if capture is None else substr2(string, capture) for capture in match.captures]
        replacement = func(whole, *args)

        out.write(whole if replacement is None else replacement)
        pos = match.end

    out.write(substr2(string, pos))
    return out.getvalue()
