"""
Shared test fixtures for pymenu tests.
"""

import logging

import pytest

from pymenu.utils import logging_config

LAUNCHER_ITEMS = [
    "firefox",
    "fish",
    "vim",
    "vimdiff",
    "gvim",
    "foo/bar",
    ".hidden",
    "FooBar",
]


@pytest.fixture
def launcher_items() -> list[str]:
    return list(LAUNCHER_ITEMS)


@pytest.fixture
def items_file(tmp_path):
    path = tmp_path / "items.txt"
    path.write_text("\n".join(LAUNCHER_ITEMS) + "\n", encoding="utf-8")
    return path


@pytest.fixture(autouse=True)
def reset_global_logger():
    """Drop the global logger so handlers bound to captured streams do not leak."""
    yield
    logging_config._global_logger = None
    logging.getLogger("pymenu").handlers.clear()
