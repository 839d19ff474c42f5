"""
Output formatting module for pymenu.

This module renders ranking results for the command line in three formats:

    - TEXT: one match per line, the way dmenu prints to a pipe
    - JSON: matches, query and timing statistics for scripts
    - HIGHLIGHT: a rich console bar or list with the query words
      highlighted and the selected entry drawn in the selection colours

Example:
    >>> from pymenu.utils.formatter import format_result
    >>> print(format_result(result, OutputFormat.TEXT))
"""

from __future__ import annotations

from typing import Any

import orjson
from rich.color import Color, ColorParseError
from rich.console import Console
from rich.style import Style
from rich.text import Text

from ..core.config import MenuConfig
from ..core.types import OutputFormat, RankResult


def to_rich_color(value: str) -> Color | None:
    """
    Translate an X11 colour spec into a rich Color.

    ``rgb:r/g/b`` channels of one to four hex digits are scaled to 8 bits;
    other specs are handed to rich as-is. Unknown names yield None so the
    terminal default is used.
    """
    if value.startswith("rgb:"):
        channels = []
        for part in value[4:].split("/"):
            maximum = 16 ** len(part) - 1
            channels.append(round(int(part, 16) * 255 / maximum))
        return Color.from_rgb(*channels)
    try:
        return Color.parse(value)
    except ColorParseError:
        return None


def to_json_bytes(result: RankResult, selected: str | None = None) -> bytes:
    """Serialize a ranking result with orjson."""
    payload: dict[str, Any] = {
        "query": result.query,
        "matcher": result.matcher.value,
        "matches": result.matches,
        "selected": selected,
        "stats": {
            "candidates": result.stats.candidates,
            "matches": result.stats.matches,
            "elapsed_ms": round(result.stats.elapsed_ms, 3),
        },
    }
    return orjson.dumps(payload, option=orjson.OPT_INDENT_2)


def format_text(matches: list[str]) -> str:
    return "\n".join(matches)


def format_result(
    result: RankResult, fmt: OutputFormat, matches: list[str] | None = None, selected: str | None = None
) -> str:
    """
    Format a ranking result as text or JSON.

    ``matches`` restricts the text output to a page of the result.
    """
    if fmt == OutputFormat.JSON:
        return to_json_bytes(result, selected).decode("utf-8")
    return format_text(result.matches if matches is None else matches)


def render_highlight_console(
    query: str,
    entries: list[str],
    config: MenuConfig,
    selected: str | None = None,
    page: int = 0,
    page_count: int = 1,
    console: Console | None = None,
) -> None:
    """
    Draw the visible entries like the launcher bar.

    A horizontal bar (``config.lines == 0``) prints prompt, input and
    entries on one line with '<'/'>' page markers; otherwise each entry
    gets its own line below the input.
    """
    console = console or Console()
    normal = Style(
        color=to_rich_color(config.normal_foreground),
        bgcolor=to_rich_color(config.normal_background),
    )
    highlighted = Style(
        color=to_rich_color(config.selected_foreground),
        bgcolor=to_rich_color(config.selected_background),
    )
    words = query.split()

    def entry_text(entry: str, is_selected: bool) -> Text:
        text = Text(f" {entry} ", style=highlighted if is_selected else normal)
        if words:
            text.highlight_words(words, style="bold underline", case_sensitive=config.case_sensitive)
        return text

    header = Text(style=normal)
    if config.prompt:
        header.append(f"{config.prompt} ", style=highlighted)
    header.append(query or " ")

    if config.lines > 0:
        console.print(header)
        for entry in entries:
            console.print(entry_text(entry, entry == selected))
        return

    bar = header
    bar.append("  ")
    if page > 0:
        bar.append("< ")
    for entry in entries:
        bar.append_text(entry_text(entry, entry == selected))
    if page + 1 < page_count:
        bar.append(" >")
    console.print(bar, overflow="crop", no_wrap=True)
