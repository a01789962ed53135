#  Copyright (c) 2025 Tom Villani, Ph.D.

"""Unit tests for the span matcher, exclusive-end substring and gfsub."""

import re

import pytest

from inlinemail.utils.spans import Match, Span, find_all, substr2
from inlinemail.utils.substitute import gfsub


@pytest.mark.unit
class TestFindAll:
    """Test find_all position reporting."""

    def test_whole_and_capture_spans(self):
        """Each match reports the whole span and one span per group."""
        matches = find_all("1ab2cd", "([a-z])[a-z]")

        assert matches == [
            Match(Span(1, 3), (Span(1, 2),)),
            Match(Span(4, 6), (Span(4, 5),)),
        ]

    def test_no_match_is_empty_list(self):
        """No matches gives an empty list, not a zero-length match."""
        assert find_all("abc", "x") == []

    def test_zero_length_match_is_reported(self):
        """A pattern that matches the empty string yields zero-length spans."""
        matches = find_all("", "x*")

        assert len(matches) == 1
        assert matches[0].whole == Span(0, 0)

    def test_absent_group_is_none(self):
        """Groups that did not participate are None."""
        matches = find_all("ab", "(a)|(b)")

        assert matches[0].captures == (Span(0, 1), None)
        assert matches[1].captures == (None, Span(1, 2))

    def test_empty_group_is_present(self):
        """A group that matched the empty string is an empty span, not None."""
        matches = find_all("ab", "a(x*)b")

        assert matches[0].captures == (Span(1, 1),)
        assert matches[0].captures[0].length == 0

    def test_ignore_case(self):
        """String patterns honour ignore_case."""
        assert find_all("ABC", "b") == []
        assert find_all("ABC", "b", ignore_case=True) == [Match(Span(1, 2), ())]

    def test_compiled_pattern_keeps_flags(self):
        """A compiled pattern is used as given."""
        pattern = re.compile("b", re.IGNORECASE)

        assert find_all("aBc", pattern)[0].whole == Span(1, 2)

    def test_non_overlapping_left_to_right(self):
        """Matches never overlap and come out in order."""
        matches = find_all("aaaa", "aa")

        assert [m.whole for m in matches] == [Span(0, 2), Span(2, 4)]

    def test_unicode_positions_are_code_points(self):
        """Positions count characters, not UTF-8 bytes."""
        text = "héllo 😀 x"
        match = find_all(text, "x")[0]

        assert match.start == len(text) - 1
        assert substr2(text, match.whole) == "x"

    def test_span_shift(self):
        """Span.shift moves both ends."""
        assert Span(2, 5).shift(10) == Span(12, 15)


@pytest.mark.unit
class TestSubstr2:
    """Test the exclusive-end substring helper."""

    def test_basic_range(self):
        assert substr2("hello", 1, 3) == "el"

    def test_empty_range(self):
        assert substr2("hello", 2, 2) == ""

    def test_end_at_length_means_through_end(self):
        assert substr2("hello", 3, 5) == "lo"

    def test_span_argument(self):
        assert substr2("hello", Span(0, 2)) == "he"

    def test_missing_end_means_through_end(self):
        assert substr2("hello", 3) == "lo"

    def test_rejects_non_string(self):
        with pytest.raises(TypeError):
            substr2(["hello"], 0, 1)


@pytest.mark.unit
class TestGfsub:
    """Test the functional substitution engine."""

    def test_replaces_with_function_result(self):
        assert gfsub("a1b22", r"(\d+)", lambda whole, digits: f"<{digits}>") == "a<1>b<22>"

    def test_none_leaves_match_unchanged(self):
        result = gfsub("a1b2", r"\d", lambda whole: None if whole == "1" else "X")

        assert result == "a1bX"

    def test_absent_captures_passed_as_none(self):
        calls = []

        def record(whole, first, second):
            calls.append((whole, first, second))
            return whole.upper()

        assert gfsub("ab", "(a)|(b)", record) == "AB"
        assert calls == [("a", "a", None), ("b", None, "b")]

    def test_no_match_returns_input(self):
        text = "nothing to see here"

        assert gfsub(text, r"\d", lambda whole: "X") == text

    def test_unicode_preserved_around_matches(self):
        result = gfsub("héllo 😀 wörld", "ö", lambda whole: "oe")

        assert result == "héllo 😀 woerld"

    def test_empty_replacement_removes_match(self):
        assert gfsub("a-b-c", "-", lambda whole: "") == "abc"

    def test_ignore_case(self):
        assert gfsub("Cat cat CAT", "cat", lambda whole: "dog", ignore_case=True) == "dog dog dog"

    def test_function_called_left_to_right(self):
        seen = []

        def record(whole):
            seen.append(whole)
            return None

        gfsub("x1y2z3", r"\d", record)
        assert seen == ["1", "2", "3"]
