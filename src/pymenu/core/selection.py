"""
Keystroke-level state of a launcher session.

Selection keeps the input text and cursor, the current ordered matches and
which of them is highlighted. Every edit of the text re-ranks the full
candidate list from scratch; the highlighted candidate survives a re-rank
when it is still among the matches and otherwise falls back to the first
match. Positions are tracked by index, so duplicate candidates stay
distinguishable while navigating.

Example:
    >>> from pymenu import Menu, MenuConfig
    >>> from pymenu.core.selection import Selection
    >>> state = Selection(Menu(MenuConfig(), items=["vim", "vimdiff", "view"]))
    >>> state.insert("vi")
    >>> _ = state.select_next()
    >>> state.accept()
    'vimdiff'
"""

from __future__ import annotations

from rich.cells import cell_len

from ..utils import layout
from .api import Menu
from .types import RankResult


class Selection:
    def __init__(self, menu: Menu, text: str = "") -> None:
        self.menu = menu
        self.text = text
        self.cursor = len(text)
        self.matches: list[str] = []
        self.result: RankResult | None = None
        self.selected_index: int | None = None
        self.refresh()

    # ------------------------------------------------------------------
    # Ranking
    # ------------------------------------------------------------------

    @property
    def selected(self) -> str | None:
        if self.selected_index is None:
            return None
        return self.matches[self.selected_index]

    def refresh(self) -> None:
        """Re-rank for the current text and carry the highlight over."""
        previous = self.selected
        self.result = self.menu.rank(self.text)
        self.matches = self.result.matches
        if previous is not None and previous in self.matches:
            self.selected_index = self.matches.index(previous)
        elif self.matches:
            self.selected_index = 0
        else:
            self.selected_index = None

    def set_text(self, text: str) -> None:
        self.text = text
        self.cursor = len(text)
        self.refresh()

    def _edit(self, text: str, cursor: int) -> None:
        changed = text != self.text
        self.text = text
        self.cursor = cursor
        if changed:
            self.refresh()

    # ------------------------------------------------------------------
    # Text editing
    # ------------------------------------------------------------------

    def insert(self, chars: str) -> None:
        """Insert printable characters at the cursor."""
        chars = "".join(c for c in chars if c.isprintable())
        if not chars:
            return
        text = self.text[: self.cursor] + chars + self.text[self.cursor :]
        self._edit(text, self.cursor + len(chars))

    def backspace(self) -> None:
        if self.cursor == 0:
            return
        self._edit(self.text[: self.cursor - 1] + self.text[self.cursor :], self.cursor - 1)

    def delete(self) -> None:
        if self.cursor >= len(self.text):
            return
        self._edit(self.text[: self.cursor] + self.text[self.cursor + 1 :], self.cursor)

    def delete_word(self) -> None:
        """Delete the word left of the cursor, with the blanks before it."""
        start = self.cursor
        while start > 0 and self.text[start - 1] == " ":
            start -= 1
        while start > 0 and self.text[start - 1] != " ":
            start -= 1
        self._edit(self.text[:start] + self.text[self.cursor :], start)

    def kill_to_end(self) -> None:
        self._edit(self.text[: self.cursor], self.cursor)

    def kill_to_start(self) -> None:
        self._edit(self.text[self.cursor :], 0)

    def move_cursor_left(self) -> None:
        self.cursor = max(0, self.cursor - 1)

    def move_cursor_right(self) -> None:
        self.cursor = min(len(self.text), self.cursor + 1)

    # ------------------------------------------------------------------
    # Navigation
    # ------------------------------------------------------------------

    def select_next(self) -> bool:
        if self.selected_index is None or self.selected_index + 1 >= len(self.matches):
            return False
        self.selected_index += 1
        return True

    def select_prev(self) -> bool:
        if not self.selected_index:
            return False
        self.selected_index -= 1
        return True

    def select_first(self) -> None:
        if self.matches:
            self.selected_index = 0

    def select_last(self) -> None:
        if self.matches:
            self.selected_index = len(self.matches) - 1

    def home(self) -> None:
        """Jump to the first match, or to the start of the text when already there."""
        if self.selected_index in (None, 0):
            self.cursor = 0
        else:
            self.select_first()

    def end(self) -> None:
        """Jump to the end of the text, or to the last match when already there."""
        if self.cursor < len(self.text):
            self.cursor = len(self.text)
        else:
            self.select_last()

    def next_page(self) -> bool:
        """Highlight the first entry of the following page."""
        return self._goto_page(self.page + 1)

    def prev_page(self) -> bool:
        """Highlight the first entry of the preceding page."""
        return self._goto_page(self.page - 1)

    def _goto_page(self, number: int) -> bool:
        pages = self._pages()
        if not self.matches or number < 0 or number >= len(pages):
            return False
        self.selected_index = sum(len(entries) for entries in pages[:number])
        return True

    # ------------------------------------------------------------------
    # Completion and result
    # ------------------------------------------------------------------

    def complete(self) -> None:
        """Replace the text with the highlighted candidate."""
        if self.selected is not None:
            self.set_text(self.selected)

    def accept(self, use_text: bool = False) -> str:
        """
        Return the chosen entry.

        The raw input text is returned instead when ``use_text`` is set or
        when nothing matches.
        """
        if use_text or self.selected is None:
            return self.text
        return self.selected

    # ------------------------------------------------------------------
    # Layout
    # ------------------------------------------------------------------

    def reserved_width(self) -> int:
        """Cells taken by the prompt and the input field on a horizontal bar."""
        config = self.menu.config
        prompt = cell_len(config.prompt) + 1 if config.prompt else 0
        longest = max((cell_len(item) for item in self.menu.items), default=0)
        field = max(cell_len(self.text), min(longest, config.width // 3)) + 1
        return prompt + field

    def _pages(self) -> list[list[str]]:
        config = self.menu.config
        if config.lines > 0:
            return [
                self.matches[start : start + config.lines]
                for start in range(0, max(len(self.matches), 1), config.lines)
            ]
        return layout.split_horizontal_pages(self.matches, config.width, self.reserved_width())

    @property
    def page(self) -> int:
        if self.selected_index is None:
            return 0
        config = self.menu.config
        return layout.page_of(
            self.selected_index, self.matches, config.width, config.lines, self.reserved_width()
        )

    def visible(self) -> tuple[list[str], int]:
        """Entries on the page holding the highlight, and the page count."""
        config = self.menu.config
        if config.lines > 0:
            return layout.paginate_vertical(self.matches, config.lines, self.page)
        return layout.paginate_horizontal(
            self.matches, config.width, self.page, self.reserved_width()
        )
