"""Normalized error codes and structured error model for the ingestkit-sheetview pipeline.

``IngestError`` is a Pydantic model (data structure).  ``IngestException``
wraps it so it can be used with ``raise``/``except``; ``NetworkError`` and
``DecodeError`` are the two fatal kinds the router catches.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel


class ErrorCode(str, Enum):
    """Normalized error codes for the ingestkit-sheetview pipeline.

    Values equal their names so they are stable strings suitable for
    metrics and alerting.  ``E_`` prefix = fatal, ``W_`` prefix = warning.
    """

    # Fetch
    E_FETCH_STATUS = "E_FETCH_STATUS"
    E_FETCH_CONNECT = "E_FETCH_CONNECT"
    E_FETCH_TIMEOUT = "E_FETCH_TIMEOUT"
    E_FETCH_NOT_FOUND = "E_FETCH_NOT_FOUND"

    # Decode
    E_DECODE_CORRUPT = "E_DECODE_CORRUPT"
    E_DECODE_EMPTY = "E_DECODE_EMPTY"
    E_DECODE_TOO_LARGE = "E_DECODE_TOO_LARGE"
    E_DECODE_BAD_MAGIC = "E_DECODE_BAD_MAGIC"
    E_DECODE_NO_SHEET = "E_DECODE_NO_SHEET"
    E_DECODE_DUPLICATE_HEADER = "E_DECODE_DUPLICATE_HEADER"

    # Ingestion
    E_INGEST_FAILED = "E_INGEST_FAILED"

    # Warnings (non-fatal)
    W_EMPTY_HEADER = "W_EMPTY_HEADER"
    W_DUPLICATE_HEADER = "W_DUPLICATE_HEADER"
    W_DECODER_FALLBACK = "W_DECODER_FALLBACK"


class IngestError(BaseModel):
    """Structured error with code, message, and context.

    Each error carries an ``ErrorCode``, a human-readable message, and
    optional context about which sheet and pipeline stage produced it.
    """

    code: ErrorCode
    message: str
    sheet_name: str | None = None
    stage: str | None = None
    recoverable: bool = False


class IngestException(Exception):
    """Raisable exception wrapping an ``IngestError`` data model.

    The structured error is available as ``.error``; ``code``, ``message``
    and ``stage`` delegate to it.  ``warnings`` holds non-fatal errors
    collected by the failing call before it gave up.
    """

    def __init__(
        self, warnings: list[IngestError] | None = None, **kwargs: object
    ) -> None:
        self.error = IngestError(**kwargs)  # type: ignore[arg-type]
        self.warnings = list(warnings or [])
        super().__init__(self.error.message)

    @property
    def code(self) -> ErrorCode:
        return self.error.code

    @property
    def message(self) -> str:
        return self.error.message

    @property
    def stage(self) -> str | None:
        return self.error.stage


class NetworkError(IngestException):
    """The fetch capability did not return the file content."""


class DecodeError(IngestException):
    """The content is not a usable spreadsheet."""
