"""Pydantic data models and stage artifacts for ingestkit-sheetview.

Defines the column descriptor, the read-only ``TableSnapshot`` handed to
observers, the decoder output, the scheduler stage artifact, the
deterministic ``IngestKey``, and the final ``ProcessingResult``.
"""

from __future__ import annotations

import hashlib
from typing import Any

from pydantic import BaseModel, ConfigDict

from ingestkit_sheetview.errors import IngestError

RawRow = list[Any]
RawSheet = list[RawRow]
NormalizedRow = tuple[Any, ...]


# ---------------------------------------------------------------------------
# Table Models
# ---------------------------------------------------------------------------


class ColumnDescriptor(BaseModel):
    """One column of the table: the verbatim header name and its display label."""

    model_config = ConfigDict(frozen=True)

    name: str
    label: str


class TableSnapshot(BaseModel):
    """Immutable view of a ``TableState`` at one observation point."""

    model_config = ConfigDict(frozen=True)

    columns: tuple[ColumnDescriptor, ...] = ()
    rows: tuple[NormalizedRow, ...] = ()
    processing: bool = True

    @property
    def is_ready(self) -> bool:
        return len(self.columns) > 0


class TablePage(BaseModel):
    """A single page of rows as presented by ``PagedTableView``."""

    title: str
    index: int
    page_count: int
    total_rows: int
    columns: list[ColumnDescriptor]
    rows: list[NormalizedRow]


# ---------------------------------------------------------------------------
# Stage Artifacts
# ---------------------------------------------------------------------------


class DecodedSheet(BaseModel):
    """Output of a ``SheetDecoder``: the first sheet's name and its rows."""

    name: str
    rows: RawSheet
    decoder: str
    warnings: list[IngestError] = []


class ChunkStageResult(BaseModel):
    """Typed output of the incremental chunk stage."""

    increments: int = 0
    rows_appended: int = 0
    chunk_sizes: list[int] = []
    duration_seconds: float = 0.0


# ---------------------------------------------------------------------------
# Idempotency
# ---------------------------------------------------------------------------


class IngestKey(BaseModel):
    """Deterministic key for deduplication.

    Combines content hash, source URI, parser version, and optional tenant ID
    into a single SHA-256 digest that callers can use to detect duplicate
    ingestion runs.
    """

    content_hash: str
    source_uri: str
    parser_version: str
    tenant_id: str | None = None

    @property
    def key(self) -> str:
        """Deterministic string key for dedup lookups."""
        parts = [self.content_hash, self.source_uri, self.parser_version]
        if self.tenant_id:
            parts.append(self.tenant_id)
        return hashlib.sha256("|".join(parts).encode()).hexdigest()


# ---------------------------------------------------------------------------
# Result Models
# ---------------------------------------------------------------------------


class ProcessingResult(BaseModel):
    """Final result of one ingestion via ``SheetViewRouter.aprocess()``."""

    source_uri: str
    ingest_key: str
    ingest_run_id: str
    tenant_id: str | None = None
    sheet_name: str | None = None
    column_count: int = 0
    total_rows: int = 0
    rows_ingested: int = 0
    chunk_result: ChunkStageResult | None = None
    errors: list[str] = []
    warnings: list[str] = []
    error_details: list[IngestError] = []
    processing_time_seconds: float = 0.0
