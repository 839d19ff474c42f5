"""Tests for pymenu.utils.layout module."""

import pytest

from pymenu.utils.layout import (
    item_width,
    page_of,
    paginate_horizontal,
    paginate_vertical,
    split_horizontal_pages,
)


class TestHorizontalLayout:
    def test_item_width_counts_cells(self):
        assert item_width("abc") == 5
        assert item_width("日本") == 6

    def test_overflowing_entry_starts_next_page(self):
        # 14 cells minus two arrows leave 10 cells, two entries of 5
        pages = split_horizontal_pages(["aaa", "bbb", "ccc"], width=14)
        assert pages == [["aaa", "bbb"], ["ccc"]]

    def test_reserved_cells(self):
        pages = split_horizontal_pages(["aaa", "bbb", "ccc"], width=19, reserved=5)
        assert pages == [["aaa", "bbb"], ["ccc"]]

    def test_no_matches_gives_one_empty_page(self):
        assert split_horizontal_pages([], width=80) == [[]]

    def test_wide_entry_gets_own_page(self):
        wide = "x" * 50
        assert split_horizontal_pages(["a", wide, "b"], width=20) == [["a"], [wide], ["b"]]

    def test_paginate(self):
        assert paginate_horizontal(["aaa", "bbb", "ccc"], 14, 1) == (["ccc"], 2)

    def test_paginate_out_of_range(self):
        assert paginate_horizontal(["aaa"], 14, 3) == ([], 1)


class TestVerticalLayout:
    def test_chunks(self):
        assert paginate_vertical(["a", "b", "c"], 2, 0) == (["a", "b"], 2)
        assert paginate_vertical(["a", "b", "c"], 2, 1) == (["c"], 2)

    def test_empty(self):
        assert paginate_vertical([], 5, 0) == ([], 1)

    def test_out_of_range(self):
        assert paginate_vertical(["a"], 5, -1) == ([], 1)

    def test_lines_must_be_positive(self):
        with pytest.raises(ValueError):
            paginate_vertical(["a"], 0, 0)


class TestPageOf:
    def test_vertical(self):
        assert page_of(5, ["x"] * 10, width=80, lines=3) == 1

    def test_horizontal(self):
        assert page_of(2, ["aaa", "bbb", "ccc"], width=14, lines=0) == 1

    def test_negative_index(self):
        assert page_of(-1, ["a"], width=80, lines=0) == 0
