"""
Page layout for a list of matches.

A horizontal bar shows as many entries as fit next to the prompt and the
input field; an entry that would overflow starts the next page. A vertical
list shows a fixed number of entries per page. Widths are terminal cells
as measured by rich, so wide characters count double.
"""

from __future__ import annotations

from collections.abc import Sequence

from rich.cells import cell_len

ITEM_PADDING = 2  # one cell on each side of an entry
ARROW_WIDTH = 2  # "<" or ">" plus a separating cell


def item_width(item: str) -> int:
    return cell_len(item) + ITEM_PADDING


def split_horizontal_pages(matches: Sequence[str], width: int, reserved: int = 0) -> list[list[str]]:
    """
    Split matches into pages that fit in ``width`` cells.

    ``reserved`` cells (prompt and input field) are unavailable on every
    page, as is room for the page arrows. An entry wider than a whole page
    gets a page of its own.
    """
    available = max(1, width - reserved - 2 * ARROW_WIDTH)
    pages: list[list[str]] = []
    current: list[str] = []
    used = 0
    for item in matches:
        needed = item_width(item)
        if current and used + needed > available:
            pages.append(current)
            current = []
            used = 0
        current.append(item)
        used += needed
    if current or not pages:
        pages.append(current)
    return pages


def paginate_horizontal(
    matches: Sequence[str], width: int, page: int, reserved: int = 0
) -> tuple[list[str], int]:
    """Return the entries shown on ``page`` and the total page count."""
    pages = split_horizontal_pages(matches, width, reserved)
    if page < 0 or page >= len(pages):
        return [], len(pages)
    return pages[page], len(pages)


def paginate_vertical(matches: Sequence[str], lines: int, page: int) -> tuple[list[str], int]:
    """Return the ``lines`` entries shown on ``page`` and the total page count."""
    if lines <= 0:
        raise ValueError("lines must be positive for a vertical layout")
    page_count = max(1, -(-len(matches) // lines))
    if page < 0 or page >= page_count:
        return [], page_count
    start = page * lines
    return list(matches[start : start + lines]), page_count


def page_of(index: int, matches: Sequence[str], width: int, lines: int, reserved: int = 0) -> int:
    """Page number holding the entry at ``index``."""
    if index < 0:
        return 0
    if lines > 0:
        return index // lines
    seen = 0
    for number, entries in enumerate(split_horizontal_pages(matches, width, reserved)):
        seen += len(entries)
        if index < seen:
            return number
    return 0
