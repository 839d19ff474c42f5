"""Tests for pymenu.utils.error_handling module."""

import builtins
from pathlib import Path

from pymenu.utils.error_handling import (
    ConfigurationError,
    EncodingError,
    ErrorCategory,
    ErrorSeverity,
    FileAccessError,
    MenuError,
    PermissionError,
    classify_file_error,
)


class TestMenuError:
    def test_defaults(self):
        err = MenuError("boom")
        assert str(err) == "boom"
        assert err.category == ErrorCategory.UNKNOWN
        assert err.severity == ErrorSeverity.MEDIUM
        assert err.suggestions == []
        assert err.context == {}
        assert err.timestamp > 0

    def test_subclasses(self):
        path = Path("items.txt")
        assert FileAccessError("x", path).category == ErrorCategory.FILE_ACCESS
        assert PermissionError("x", path).category == ErrorCategory.PERMISSION
        assert EncodingError("x", path, encoding="latin-1").context == {"encoding": "latin-1"}
        cfg = ConfigurationError("x", context={"field": "lines"})
        assert cfg.category == ErrorCategory.CONFIGURATION
        assert cfg.severity == ErrorSeverity.HIGH
        assert cfg.suggestions

    def test_all_are_menu_errors(self):
        for err in (FileAccessError("x", Path("p")), ConfigurationError("x")):
            assert isinstance(err, MenuError)


class TestClassifyFileError:
    def test_not_found(self):
        err = classify_file_error(Path("p"), "read", FileNotFoundError("gone"))
        assert isinstance(err, FileAccessError)
        assert "read" in err.message

    def test_is_directory(self):
        assert isinstance(classify_file_error(Path("p"), "read", IsADirectoryError()), FileAccessError)

    def test_permission(self):
        err = classify_file_error(Path("p"), "list", builtins.PermissionError("denied"))
        assert isinstance(err, PermissionError)

    def test_decode(self):
        exc = UnicodeDecodeError("utf-8", b"\xff", 0, 1, "invalid start byte")
        assert isinstance(classify_file_error(Path("p"), "read", exc), EncodingError)

    def test_other(self):
        err = classify_file_error(Path("p"), "read", OSError("disk on fire"))
        assert type(err) is MenuError
        assert err.file_path == Path("p")
