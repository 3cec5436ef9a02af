"""Shared test fixtures for ingestkit-sheetview tests.

Provides in-memory collaborators that satisfy the ``ByteFetcher`` and
``SheetDecoder`` protocols, a default config, and .xlsx byte generators.
"""

from __future__ import annotations

import io
from pathlib import Path
from typing import Any

import openpyxl
import pytest

from ingestkit_sheetview.config import SheetViewConfig
from ingestkit_sheetview.errors import ErrorCode, NetworkError
from ingestkit_sheetview.models import DecodedSheet


# ---------------------------------------------------------------------------
# Mock Collaborators
# ---------------------------------------------------------------------------


class StaticFetcher:
    """Returns fixed bytes for any resource and records what was asked for."""

    def __init__(self, content: bytes) -> None:
        self.content = content
        self.calls: list[str] = []

    async def fetch(self, resource: str) -> bytes:
        self.calls.append(resource)
        return self.content


class FailingFetcher:
    """Always fails the way a non-2xx response does."""

    def __init__(self, status_code: int = 404) -> None:
        self.status_code = status_code

    async def fetch(self, resource: str) -> bytes:
        raise NetworkError(
            code=ErrorCode.E_FETCH_STATUS,
            message=f"Network response was not ok: HTTP {self.status_code}",
            stage="fetch",
        )


class ListDecoder:
    """Returns a pre-built sheet regardless of the bytes it is given."""

    name = "list"

    def __init__(self, rows: list[list[Any]], sheet_name: str = "Sheet1") -> None:
        self.rows = rows
        self.sheet_name = sheet_name
        self.calls = 0

    def decode(self, content: bytes) -> DecodedSheet:
        self.calls += 1
        return DecodedSheet(name=self.sheet_name, rows=self.rows, decoder=self.name)


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def build_xlsx_bytes(rows: list[list[Any]], title: str = "Data") -> bytes:
    """Create an .xlsx workbook in memory with *rows* on its first sheet."""
    wb = openpyxl.Workbook()
    ws = wb.active
    ws.title = title
    for row in rows:
        ws.append(row)
    buffer = io.BytesIO()
    wb.save(buffer)
    wb.close()
    return buffer.getvalue()


def numbered_rows(count: int) -> list[list[Any]]:
    """Header plus *count* data rows, each tagged with its position."""
    rows: list[list[Any]] = [["id", "first_name"]]
    rows.extend([str(i), f"name-{i}"] for i in range(1, count + 1))
    return rows


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture()
def default_config() -> SheetViewConfig:
    """Return a SheetViewConfig with all defaults."""
    return SheetViewConfig()


@pytest.fixture()
def xlsx_bytes():
    """Factory fixture returning .xlsx bytes for the given rows."""
    return build_xlsx_bytes


@pytest.fixture()
def tmp_xlsx_file(tmp_path: Path):
    """Factory fixture to write an .xlsx file under tmp_path and return its name."""

    def _write(rows: list[list[Any]], filename: str = "data.xlsx") -> str:
        (tmp_path / filename).write_bytes(build_xlsx_bytes(rows))
        return filename

    return _write
