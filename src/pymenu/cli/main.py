"""
Command-line interface for pymenu.

This module provides the CLI commands for pymenu. It is the entry point for
command-line usage: candidates come from a file or stdin, the chosen
strategy ranks them against a query, and the result is printed for the next
program in the pipeline.

Main Commands:
    filter: Rank candidates against a query
    stest: Filter a list of paths by file tests

Example Usage:
    Rank the executables on $PATH:
        $ pymenu stest -flx "$PATH" | sort -u | pymenu filter --query fi --matcher dmenu

    Pick the best fuzzy match:
        $ ls | pymenu filter --query rdme --matcher fuzzy-recursive --accept

    Show one page of a vertical list with the third entry highlighted:
        $ pymenu filter --cache items.txt --lines 5 --select 2 --format highlight

For more information, run: pymenu filter --help
"""

from __future__ import annotations

import sys
from pathlib import Path

import click

from .. import __version__
from ..core.api import Menu
from ..core.config import MenuConfig
from ..core.selection import Selection
from ..core.types import MatcherKind, OutputFormat
from ..utils import layout
from ..utils.error_handling import MenuError
from ..utils.formatter import format_result, render_highlight_console
from ..utils.path_tests import PathTests, iter_checked, iter_matching, reference_mtime, split_path_list


@click.group()
@click.version_option(__version__, prog_name="pymenu")
def cli() -> None:
    """pymenu - Rank and filter launcher candidates"""
    pass


@cli.command("filter")
@click.option("--cache", "cache_file", default="-", show_default=True, help="Candidate file, '-' for stdin")
@click.option("--query", "-q", default="", help="Input text to rank the candidates against")
@click.option(
    "--matcher",
    type=click.Choice([kind.value for kind in MatcherKind]),
    default=MatcherKind.SIMPLE.value,
    show_default=True,
    help="Ranking strategy",
)
@click.option("--case-insensitive", "-i", is_flag=True, default=False, help="Match case-insensitively")
@click.option(
    "--format",
    "fmt",
    type=click.Choice([e.value for e in OutputFormat]),
    default=OutputFormat.TEXT.value,
    help="Output format",
)
@click.option("--lines", "-l", type=int, default=0, help="Entries per page of a vertical list, 0 for a bar")
@click.option("--prompt", "-p", default="", help="Prompt shown left of the input")
@click.option("--page", type=int, default=None, help="Print only this page of the matches")
@click.option("--width", type=int, default=80, show_default=True, help="Bar width in terminal cells")
@click.option("--select", "select", type=int, default=0, help="Move the highlight down N entries")
@click.option("--accept", is_flag=True, default=False, help="Print only the accepted entry")
@click.option("--stats", is_flag=True, default=False, help="Print ranking statistics to stderr")
# Logging and debugging options
@click.option("--debug", is_flag=True, default=False, help="Enable debug logging")
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"]),
    default="WARNING",
    help="Log level",
)
@click.option("--log-file", help="Log file path")
@click.option(
    "--log-format",
    type=click.Choice(["simple", "detailed", "json", "structured"]),
    default="simple",
    help="Log format",
)
def filter_cmd(
    cache_file: str,
    query: str,
    matcher: str,
    case_insensitive: bool,
    fmt: str,
    lines: int,
    prompt: str,
    page: int | None,
    width: int,
    select: int,
    accept: bool,
    stats: bool,
    debug: bool,
    log_level: str,
    log_file: str | None,
    log_format: str,
) -> None:
    """Rank candidates read from a file or stdin against a query."""
    if debug:
        log_level = "DEBUG"

    from ..utils.logging_config import LogFormat, LogLevel, configure_logging

    try:
        configure_logging(
            level=LogLevel(log_level),
            format_type=LogFormat(log_format),
            log_file=Path(log_file) if log_file else None,
            enable_file=bool(log_file),
            enable_console=True,
        )
    except (OSError, ValueError) as e:
        click.echo(f"Error configuring logging: {e}", err=True)
        sys.exit(1)

    cfg = MenuConfig(
        matcher=MatcherKind(matcher),
        case_sensitive=not case_insensitive,
        cache_file=cache_file,
        lines=lines,
        width=width,
        prompt=prompt,
        output_format=OutputFormat(fmt),
    )

    try:
        menu = Menu(cfg)
        state = Selection(menu, query)
    except MenuError as e:
        click.echo(f"Error: {e.message}", err=True)
        sys.exit(1)

    for _ in range(max(0, select)):
        if not state.select_next():
            break

    if accept:
        click.echo(state.accept())
        return

    result = state.result
    if page is not None:
        if lines > 0:
            entries, page_count = layout.paginate_vertical(state.matches, lines, page)
        else:
            entries, page_count = layout.paginate_horizontal(
                state.matches, width, page, state.reserved_width()
            )
        current_page = page
    else:
        entries, page_count = state.visible()
        current_page = state.page

    output = OutputFormat(fmt)
    if output == OutputFormat.HIGHLIGHT and sys.stdout.isatty():
        render_highlight_console(
            state.text, entries, cfg, state.selected, current_page, page_count
        )
    elif output == OutputFormat.JSON:
        click.echo(format_result(result, output, selected=state.selected))
    else:
        text = format_result(result, OutputFormat.TEXT, matches=entries if page is not None else None)
        if text:
            click.echo(text)

    if stats:
        s = result.stats
        click.echo(
            f"# matcher={result.matcher.value} candidates={s.candidates} matches={s.matches} "
            f"page={current_page + 1}/{page_count} elapsed_ms={s.elapsed_ms:.2f}",
            err=True,
        )


@cli.command("stest")
@click.option("-a", "all_files", is_flag=True, help="Include hidden entries")
@click.option("-b", "block", is_flag=True, help="Test for block special files")
@click.option("-c", "char", is_flag=True, help="Test for character special files")
@click.option("-d", "directory", is_flag=True, help="Test for directories")
@click.option("-e", "exists", is_flag=True, help="Test for existing files")
@click.option("-f", "regular", is_flag=True, help="Test for regular files")
@click.option("-g", "sgid", is_flag=True, help="Test for the set-group-ID flag")
@click.option("-h", "symlink", is_flag=True, help="Test for symbolic links")
@click.option("-l", "list_dirs", is_flag=True, help="Test the contents of directories")
@click.option("-n", "newer", type=click.Path(), default=None, help="Test for files newer than FILE")
@click.option("-o", "older", type=click.Path(), default=None, help="Test for files older than FILE")
@click.option("-p", "pipe", is_flag=True, help="Test for named pipes")
@click.option("-q", "quiet", is_flag=True, help="Print nothing, exit on the first match")
@click.option("-r", "readable", is_flag=True, help="Test for readable files")
@click.option("-s", "nonempty", is_flag=True, help="Test for non-empty files")
@click.option("-u", "suid", is_flag=True, help="Test for the set-user-ID flag")
@click.option("-w", "writable", is_flag=True, help="Test for writable files")
@click.option("-x", "executable", is_flag=True, help="Test for executable files")
@click.argument("paths", nargs=-1)
def stest_cmd(newer: str | None, older: str | None, paths: tuple[str, ...], **flags: bool) -> None:
    """
    Print the base names of PATHS that pass every given test.

    Each argument may be a colon-separated list such as $PATH. Without
    arguments, paths are read from stdin one per line. Exits 0 when at
    least one path matched and 1 otherwise.
    """
    tests = PathTests(
        newer_than=reference_mtime(newer),
        older_than=reference_mtime(older),
        **flags,
    )

    if paths:
        candidates = [part for arg in paths for part in split_path_list(arg)]
        matching = iter_matching(candidates, tests)
    else:
        lines = [line.rstrip("\r\n") for line in click.get_text_stream("stdin") if line.strip()]
        matching = iter_checked(lines, tests)

    found = False
    for path in matching:
        found = True
        if tests.quiet:
            break
        click.echo(path.name)

    sys.exit(0 if found else 1)


def main() -> None:
    """Main entry point for the pymenu CLI."""
    cli(prog_name="pymenu")


if __name__ == "__main__":
    main()
