from __future__ import annotations

import logging
import re
from typing import Sequence

from .inline_parser import format_inline
from .model import TableBlock

SEPARATOR_CELL_RE = re.compile(r":?-+:?")


def is_table_line(line: str) -> bool:
    return "|" in line


def is_separator(line: str) -> bool:
    """Dash groups (with optional alignment colons) between pipes, nothing else."""
    return all(SEPARATOR_CELL_RE.fullmatch(cell) for cell in split_row(line))


def split_row(line: str) -> list[str]:
    """Split a pipe row into trimmed cells, dropping one outer pipe on each side."""
    row = line.strip()
    if row.startswith("|"):
        row = row[1:]
    if row.endswith("|"):
        row = row[:-1]
    return [cell.strip() for cell in row.split("|")]


def recognize_table(lines: Sequence[str]) -> TableBlock | None:
    """Build a table from a run of pipe lines, or return None if the run is not one.

    The second line must be a dash separator and every body row must have the
    same number of cells as the header. Nothing is padded or truncated.
    """
    if len(lines) < 2 or not is_separator(lines[1]):
        logging.debug("Rejected table run of %d lines: missing separator row", len(lines))
        return None

    header = split_row(lines[0])
    rows = [split_row(line) for line in lines[2:] if line.strip()]
    for idx, row in enumerate(rows, start=1):
        if len(row) != len(header):
            logging.debug(
                "Rejected table run: row %d has %d cells, header has %d", idx, len(row), len(header)
            )
            return None

    return TableBlock(
        header=tuple(format_inline(cell) for cell in header),
        rows=tuple(tuple(format_inline(cell) for cell in row) for row in rows),
    )
