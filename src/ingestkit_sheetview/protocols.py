"""Collaborator protocols for the ingestkit-sheetview pipeline.

Defines the three structural-subtyping interfaces the router depends on.
All protocols are ``@runtime_checkable`` so callers can optionally verify
conformance with ``isinstance`` checks.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from ingestkit_sheetview.models import DecodedSheet, TableSnapshot


@runtime_checkable
class ByteFetcher(Protocol):
    """Interface for fetching raw file content (e.g. over HTTP)."""

    async def fetch(self, resource: str) -> bytes:
        """Return the bytes at *resource*. Raises ``NetworkError`` on failure."""
        ...


@runtime_checkable
class SheetDecoder(Protocol):
    """Interface for spreadsheet decoders (e.g. openpyxl, pandas)."""

    def decode(self, content: bytes) -> DecodedSheet:
        """Decode the first sheet of *content*. Raises ``DecodeError`` on failure."""
        ...


@runtime_checkable
class TableRenderer(Protocol):
    """Interface for consumers that redraw as the table grows."""

    def render(self, snapshot: TableSnapshot) -> None:
        """Redraw from *snapshot*."""
        ...
