"""Tests for pymenu.utils.path_tests module."""

import os
from pathlib import Path

import pytest

from pymenu.utils.path_tests import (
    PathTests,
    check,
    iter_checked,
    iter_matching,
    reference_mtime,
    split_path_list,
)


@pytest.fixture
def tree(tmp_path):
    """A directory with an executable, a plain file, an empty file, a subdirectory and a hidden file."""
    (tmp_path / "tool").write_text("#!/bin/sh\n", encoding="utf-8")
    (tmp_path / "tool").chmod(0o755)
    (tmp_path / "notes").write_text("text\n", encoding="utf-8")
    (tmp_path / "notes").chmod(0o644)
    (tmp_path / "empty").write_text("", encoding="utf-8")
    (tmp_path / "sub").mkdir()
    (tmp_path / ".hidden").write_text("x", encoding="utf-8")
    return tmp_path


class TestCheck:
    def test_no_tests_passes_visible_paths(self, tree):
        assert check(tree / "notes", PathTests()) is True

    def test_hidden_names_need_all_files(self, tree):
        assert check(tree / ".hidden", PathTests()) is False
        assert check(tree / ".hidden", PathTests(all_files=True)) is True

    def test_regular_and_directory(self, tree):
        assert check(tree / "notes", PathTests(regular=True)) is True
        assert check(tree / "sub", PathTests(regular=True)) is False
        assert check(tree / "sub", PathTests(directory=True)) is True
        assert check(tree / "notes", PathTests(directory=True)) is False

    def test_executable(self, tree):
        assert check(tree / "tool", PathTests(regular=True, executable=True)) is True
        assert check(tree / "notes", PathTests(executable=True)) is False

    def test_nonempty(self, tree):
        assert check(tree / "notes", PathTests(nonempty=True)) is True
        assert check(tree / "empty", PathTests(nonempty=True)) is False

    def test_exists(self, tree):
        assert check(tree / "missing", PathTests(exists=True)) is False

    def test_special_files(self, tree):
        tests = PathTests(block=True)
        assert check(tree / "notes", tests) is False
        assert check(tree / "notes", PathTests(char=True)) is False
        assert check(tree / "notes", PathTests(pipe=True)) is False

    def test_setid_bits(self, tree):
        assert check(tree / "tool", PathTests(suid=True)) is False
        assert check(tree / "tool", PathTests(sgid=True)) is False

    @pytest.mark.skipif(not hasattr(os, "symlink"), reason="symlinks unavailable")
    def test_symlink(self, tree):
        link = tree / "link"
        link.symlink_to(tree / "notes")
        assert check(link, PathTests(symlink=True)) is True
        assert check(tree / "notes", PathTests(symlink=True)) is False

    def test_newer_and_older(self, tree):
        os.utime(tree / "notes", (1_000, 1_000))
        os.utime(tree / "tool", (2_000, 2_000))
        reference = reference_mtime(tree / "notes")
        assert check(tree / "tool", PathTests(newer_than=reference)) is True
        assert check(tree / "notes", PathTests(newer_than=reference)) is False
        assert check(tree / "notes", PathTests(older_than=reference_mtime(tree / "tool"))) is True

    def test_missing_reference(self, tmp_path):
        assert reference_mtime(tmp_path / "missing") is None
        assert reference_mtime(None) is None


class TestIterMatching:
    def test_input_order(self, tree):
        paths = [tree / "tool", tree / "notes", tree / "sub"]
        assert list(iter_matching(paths, PathTests(regular=True))) == [tree / "tool", tree / "notes"]

    def test_missing_paths_skipped(self, tree):
        assert list(iter_matching([tree / "missing", tree / "notes"], PathTests())) == [tree / "notes"]

    def test_list_directory_contents(self, tree):
        names = [p.name for p in iter_matching([tree], PathTests(list_dirs=True, regular=True))]
        assert names == ["empty", "notes", "tool"]

    def test_list_with_hidden(self, tree):
        names = [p.name for p in iter_matching([tree], PathTests(list_dirs=True, all_files=True, regular=True))]
        assert names == [".hidden", "empty", "notes", "tool"]

    def test_executables_on_a_path_list(self, tree):
        tests = PathTests(list_dirs=True, regular=True, executable=True)
        found = iter_matching(split_path_list(f"{tree}::{tree / 'missing'}"), tests)
        assert [p.name for p in found] == ["tool"]

    def test_unreadable_directory_is_empty(self, tree, monkeypatch):
        locked = tree / "sub"
        (locked / "inner").write_text("x", encoding="utf-8")
        list_entries = Path.iterdir

        def iterdir(self):
            if self == locked:
                raise PermissionError(13, "Permission denied", str(self))
            return list_entries(self)

        monkeypatch.setattr(Path, "iterdir", iterdir)
        tests = PathTests(list_dirs=True, regular=True, executable=True)
        assert [p.name for p in iter_matching([locked, tree], tests)] == ["tool"]

    @pytest.mark.skipif(os.name != "posix" or os.geteuid() == 0, reason="needs unprivileged POSIX user")
    def test_mode_000_directory(self, tree):
        locked = tree / "sub"
        locked.chmod(0)
        try:
            tests = PathTests(list_dirs=True, regular=True)
            assert [p.name for p in iter_matching([locked, tree], tests)] == ["empty", "notes", "tool"]
        finally:
            locked.chmod(0o755)


class TestIterChecked:
    def test_missing_path_judged_by_name(self, tree):
        paths = [tree / "missing", tree / ".missing", tree / "notes"]
        assert list(iter_checked(paths, PathTests(regular=True))) == [tree / "missing", tree / "notes"]

    def test_exists_flag_drops_missing(self, tree):
        assert list(iter_checked([tree / "missing"], PathTests(exists=True))) == []

    def test_directories_are_not_listed(self, tree):
        assert list(iter_checked([tree], PathTests(list_dirs=True))) == [tree]


class TestSplitPathList:
    def test_drops_empty_entries(self):
        assert split_path_list("/bin::/usr/bin:") == ["/bin", "/usr/bin"]

    def test_empty(self):
        assert split_path_list("") == []
