# src/lexnote/core/layout.py
"""
Row grouping for card display: entries are laid out six to a row.
"""

from typing import Iterable

from lexnote.core.entry import Entry


ROW_SIZE = 6


def batch_index(position: int, size: int = ROW_SIZE) -> int:
    return position // size


def batch_rows(entries: Iterable[Entry], size: int = ROW_SIZE) -> list[list[Entry]]:
    rows = []
    for position, entry in enumerate(entries):
        if batch_index(position, size) == len(rows):
            rows.append([])
        rows[-1].append(entry)
    return rows
