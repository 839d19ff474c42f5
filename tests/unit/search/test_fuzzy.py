"""Tests for the forward-scan and recursive fuzzy matchers."""

import pytest

from pymenu.search import ForwardScanMatcher, RecursiveFuzzyMatcher, forward_scan_score, recursive_score
from pymenu.search.recursive import _char_factor


class TestForwardScanScore:
    def test_adjacent_characters(self):
        assert forward_scan_score("ab", "ab") == 20.0

    def test_empty_query_scores_base(self):
        assert forward_scan_score("", "anything") == 1.0

    def test_missing_character(self):
        assert forward_scan_score("ab", "xyz") == 0.0

    def test_offset_reduces_score(self):
        # 'a' at 0 adds 10, 'b' three past 'a' adds 7
        assert forward_scan_score("ab", "axxb") == 18.0

    def test_view_restarts_at_found_character(self):
        # the second 'a' finds the same position again
        assert forward_scan_score("aa", "a") == 21.0

    def test_large_offsets_go_negative(self):
        assert forward_scan_score("z", "a" * 15 + "z") == -4.0


class TestForwardScanMatcher:
    def test_empty_query_keeps_input_order(self, launcher_items):
        assert ForwardScanMatcher().rank("", launcher_items) == launcher_items

    def test_closer_is_better(self):
        assert ForwardScanMatcher().rank("ab", ["axxb", "ab", "b"]) == ["ab", "axxb"]

    def test_ties_keep_input_order(self):
        assert ForwardScanMatcher().rank("a", ["ab", "ac"]) == ["ab", "ac"]

    def test_non_positive_scores_are_dropped(self):
        far = "a" * 20 + "z"
        assert ForwardScanMatcher().rank("z", [far, "z"]) == ["z"]

    def test_case_insensitive(self):
        assert ForwardScanMatcher(case_sensitive=False).rank("FB", ["foobar"]) == ["foobar"]


class TestCharFactor:
    @pytest.mark.parametrize(
        "haystack, position, expected",
        [
            ("fooBar", 3, 0.8),
            ("foo.bar", 4, 0.7),
            ("foo-bar", 4, 0.8),
            ("foo_bar", 4, 0.8),
            ("foo bar", 4, 0.8),
            ("foo1bar", 4, 0.8),
            ("foo/bar", 4, 0.9),
            ("foobar", 3, None),
            ("foobar", 0, None),
        ],
    )
    def test_boundaries(self, haystack, position, expected):
        assert _char_factor(haystack, position) == expected


class TestRecursiveScore:
    def test_empty_needle_visible_entry(self):
        assert recursive_score("file", "") == 1.0

    def test_empty_needle_hidden_entry(self):
        assert recursive_score(".hidden", "") == 0.0

    def test_full_budget_for_adjacent_characters(self):
        assert recursive_score("ab", "ab") == pytest.approx(1.0)

    def test_camel_hump(self):
        assert recursive_score("FooBar", "fb") == pytest.approx(0.6)

    def test_prefers_later_boundary_alignment(self):
        # the 'b' after '/' beats the first, distant 'b'
        assert recursive_score("axxb/b", "b") == pytest.approx(0.525)

    def test_missing_character(self):
        assert recursive_score("abc", "abd") == 0.0

    def test_needle_longer_than_haystack(self):
        assert recursive_score("ab", "abc") == 0.0

    def test_empty_haystack(self):
        assert recursive_score("", "a") == 0.0


class TestRecursiveFuzzyMatcher:
    def test_boundary_match_ranks_first(self):
        result = RecursiveFuzzyMatcher().rank("fb", ["fxxxxb", "foo/bar", "nothing"])
        assert result == ["foo/bar", "fxxxxb"]

    def test_empty_query_hides_dot_entries(self):
        assert RecursiveFuzzyMatcher().rank("", ["b", "a", ".c"]) == ["a", "b"]

    def test_ties_broken_by_text(self):
        assert RecursiveFuzzyMatcher().rank("x", ["xb", "xa"]) == ["xa", "xb"]

    def test_query_is_case_folded(self):
        assert RecursiveFuzzyMatcher().rank("FB", ["FooBar"]) == ["FooBar"]

    def test_long_candidate(self):
        candidate = "a" * 200 + "b"
        assert RecursiveFuzzyMatcher().rank("ab", [candidate]) == [candidate]

    def test_very_long_candidate(self):
        candidate = "a" * 5000
        assert RecursiveFuzzyMatcher().rank("a", [candidate]) == [candidate]

    def test_very_long_path(self):
        candidate = "x" * 6000 + "/bin"
        assert recursive_score(candidate, "b") == pytest.approx((1 / len(candidate) + 1) / 2 * 0.9)
