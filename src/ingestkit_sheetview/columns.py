"""Column derivation from a sheet's header row.

``derive_columns()`` turns row 0 into ``ColumnDescriptor`` objects and
``build_column_index()`` resolves each column name to its header position
once per ingestion, applying the duplicate-header policy.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any, Literal

from ingestkit_sheetview.errors import DecodeError, ErrorCode
from ingestkit_sheetview.models import ColumnDescriptor


def _header_name(cell: Any) -> str:
    if cell is None:
        return ""
    if isinstance(cell, str):
        return cell
    return str(cell)


def derive_columns(header: Sequence[Any]) -> list[ColumnDescriptor]:
    """Build one descriptor per header cell, preserving header order.

    The label is the name with every underscore replaced by a space; no
    other formatting is applied.  An empty header yields an empty list.
    """
    columns: list[ColumnDescriptor] = []
    for cell in header:
        name = _header_name(cell)
        columns.append(ColumnDescriptor(name=name, label=name.replace("_", " ")))
    return columns


def find_duplicate_names(columns: Sequence[ColumnDescriptor]) -> list[str]:
    """Return names that occur more than once, in first-seen order."""
    seen: set[str] = set()
    duplicates: list[str] = []
    for column in columns:
        if column.name in seen and column.name not in duplicates:
            duplicates.append(column.name)
        seen.add(column.name)
    return duplicates


def build_column_index(
    columns: Sequence[ColumnDescriptor],
    policy: Literal["first_match", "reject"] = "first_match",
) -> list[int]:
    """Resolve each column to the header index its values are read from.

    Parameters
    ----------
    columns:
        Descriptors as returned by :func:`derive_columns`.
    policy:
        ``"first_match"`` maps every column to the first header cell with
        the same name, so later duplicates repeat the first one's values.
        ``"reject"`` raises instead.

    Returns
    -------
    list[int]
        ``index[i]`` is the header position for ``columns[i]``.

    Raises
    ------
    DecodeError
        With ``E_DECODE_DUPLICATE_HEADER`` when *policy* is ``"reject"``
        and the header repeats a name.
    """
    duplicates = find_duplicate_names(columns)
    if duplicates and policy == "reject":
        raise DecodeError(
            code=ErrorCode.E_DECODE_DUPLICATE_HEADER,
            message=f"Duplicate header names: {duplicates}",
            stage="columns",
        )

    first_index: dict[str, int] = {}
    for position, column in enumerate(columns):
        first_index.setdefault(column.name, position)
    return [first_index[column.name] for column in columns]
