"""Row normalization against the derived column set."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from ingestkit_sheetview.models import ColumnDescriptor, NormalizedRow


def normalize_row(
    row: Sequence[Any],
    columns: Sequence[ColumnDescriptor],
    column_index: Sequence[int],
) -> NormalizedRow:
    """Align a raw row to the columns.

    Position *i* holds ``row[column_index[i]]``, or ``""`` when that index
    is past the end of a short row or the cell is ``None``.  Cells beyond
    the header width are dropped.  Falsy values such as ``0`` are kept.
    """
    width = len(row)
    values: list[Any] = []
    for position in range(len(columns)):
        source = column_index[position]
        value = row[source] if source < width else None
        values.append("" if value is None else value)
    return tuple(values)
