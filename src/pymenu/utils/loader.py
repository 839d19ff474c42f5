from __future__ import annotations

import sys
from collections.abc import Iterable
from pathlib import Path
from typing import TextIO

from .error_handling import EncodingError, classify_file_error

STDIN = "-"


def split_items(lines: Iterable[str]) -> list[str]:
    """Strip line terminators, keeping order, duplicates and blank entries."""
    return [line.rstrip("\r\n") for line in lines]


def read_items(source: str | Path = STDIN, stream: TextIO | None = None) -> list[str]:
    """
    Read one candidate per line from a file, or from stdin when source is '-'.

    Args:
        source: Path of the candidate file or '-' for standard input
        stream: Stream used instead of ``sys.stdin`` for '-'

    Returns:
        Candidates in input order

    Raises:
        FileAccessError: If the file does not exist
        PermissionError: If the file cannot be opened
        EncodingError: If the input is not valid UTF-8 text
    """
    if str(source) == STDIN:
        stream = stream or sys.stdin
        try:
            return split_items(stream)
        except UnicodeDecodeError as exc:
            raise EncodingError(f"Encoding error reading stdin: {exc}", None) from exc

    path = Path(source)
    try:
        with path.open("r", encoding="utf-8", newline="") as handle:
            return split_items(handle)
    except (OSError, UnicodeError) as exc:
        raise classify_file_error(path, "read", exc) from exc
