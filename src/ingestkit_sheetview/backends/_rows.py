"""Shared row-shaping helpers for decoder backends."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import Any


def _is_empty_cell(val: object) -> bool:
    return val is None or (isinstance(val, str) and val == "")


def trim_row(row: Sequence[Any]) -> list[Any]:
    """Drop trailing empty cells so short rows stay short."""
    end = len(row)
    while end > 0 and _is_empty_cell(row[end - 1]):
        end -= 1
    return list(row[:end])


def trim_rows(rows: Iterable[Sequence[Any]]) -> list[list[Any]]:
    """Trim every row and drop empty rows at the end of the sheet.

    Empty rows between data rows are kept so row positions are preserved.
    """
    trimmed = [trim_row(row) for row in rows]
    while trimmed and not trimmed[-1]:
        trimmed.pop()
    return trimmed
