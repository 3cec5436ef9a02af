"""SheetViewRouter -- orchestrator and public API for the ingestkit-sheetview pipeline.

Routes one spreadsheet through the incremental ingestion pipeline:

1. Fetch raw bytes via the injected :class:`ByteFetcher`.
2. Content scan via :class:`ContentScanner`.
3. Compute deterministic :class:`IngestKey` for deduplication.
4. Decode the first sheet via :class:`SheetDecoder` (off the event loop).
5. Derive columns from the header row and publish them.
6. Feed the data rows into the :class:`TableState` via :class:`ChunkScheduler`.
7. Assemble and return :class:`ProcessingResult`.

``NetworkError`` and ``DecodeError`` are caught once, here.  Nothing is
retried; the state is marked done and the codes are reported in the
result.  Rows already published stay in the state.
"""

from __future__ import annotations

import asyncio
import logging
import time
import uuid

from ingestkit_sheetview.backends.chain import DecoderChain
from ingestkit_sheetview.backends.openpyxl_decoder import OpenpyxlDecoder
from ingestkit_sheetview.backends.pandas_decoder import PandasDecoder
from ingestkit_sheetview.columns import build_column_index, derive_columns, find_duplicate_names
from ingestkit_sheetview.config import SheetViewConfig
from ingestkit_sheetview.errors import (
    DecodeError,
    ErrorCode,
    IngestError,
    NetworkError,
)
from ingestkit_sheetview.idempotency import compute_ingest_key
from ingestkit_sheetview.models import ChunkStageResult, DecodedSheet, ProcessingResult
from ingestkit_sheetview.protocols import ByteFetcher, SheetDecoder
from ingestkit_sheetview.scheduler import ChunkScheduler
from ingestkit_sheetview.security import ContentScanner
from ingestkit_sheetview.state import TableState

logger = logging.getLogger("ingestkit_sheetview")


def default_decoder(config: SheetViewConfig) -> SheetDecoder:
    """openpyxl, with a pandas fallback unless ``decoder_fallback`` is off."""
    if config.decoder_fallback:
        return DecoderChain([OpenpyxlDecoder(), PandasDecoder()])
    return OpenpyxlDecoder()


class SheetViewRouter:
    """Top-level orchestrator for the ingestkit-sheetview pipeline.

    Parameters
    ----------
    fetcher:
        Backend that returns the spreadsheet bytes.
    decoder:
        Backend that turns bytes into the first sheet's rows.  Uses
        :func:`default_decoder` when *None*.
    config:
        Pipeline configuration.  Uses defaults when *None*.
    """

    def __init__(
        self,
        fetcher: ByteFetcher,
        decoder: SheetDecoder | None = None,
        config: SheetViewConfig | None = None,
    ) -> None:
        self._config = config or SheetViewConfig()
        self._fetcher = fetcher
        self._decoder = decoder or default_decoder(self._config)
        self._scanner = ContentScanner(self._config)
        self._scheduler = ChunkScheduler(self._config)

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    async def aprocess(
        self,
        resource: str | None = None,
        state: TableState | None = None,
    ) -> ProcessingResult:
        """Ingest *resource* into *state*, chunk by chunk.

        Parameters
        ----------
        resource:
            Location to fetch.  Defaults to ``config.source_uri``.
        state:
            Accumulation target.  Pass one with subscribers attached to
            observe the table as it grows; a fresh one is created when
            *None*.

        Returns
        -------
        ProcessingResult
            Outcome of the run.  ``state.processing`` is false on return
            whether the run succeeded or failed.
        """
        overall_start = time.monotonic()
        config = self._config
        source_uri = resource or config.source_uri
        state = state if state is not None else TableState()
        result = ProcessingResult(
            source_uri=source_uri,
            ingest_key="",
            ingest_run_id=str(uuid.uuid4()),
            tenant_id=config.tenant_id,
        )
        warnings: list[IngestError] = []

        try:
            # ==========================================================
            # Step 1: Fetch
            # ==========================================================
            logger.info("ingestkit_sheetview | source=%s | fetching", source_uri)
            content = await self._fetcher.fetch(source_uri)

            # ==========================================================
            # Step 2: Content Scan
            # ==========================================================
            scan_errors = self._scanner.scan(content)
            if scan_errors:
                first = scan_errors[0]
                raise DecodeError(**first.model_dump())

            # ==========================================================
            # Step 3: Compute Ingest Key
            # ==========================================================
            result.ingest_key = compute_ingest_key(
                content=content,
                source_uri=source_uri,
                parser_version=config.parser_version,
                tenant_id=config.tenant_id,
            ).key

            # ==========================================================
            # Step 4: Decode
            # ==========================================================
            try:
                sheet = await asyncio.to_thread(self._decoder.decode, content)
            except DecodeError as exc:
                # Fallback warnings are reported even when every decoder fails.
                warnings.extend(exc.warnings)
                raise
            warnings.extend(sheet.warnings)
            result.sheet_name = sheet.name
            result.total_rows = max(len(sheet.rows) - 1, 0)
            logger.info(
                "ingestkit_sheetview | source=%s | sheet=%s | decoder=%s | rows=%d",
                source_uri,
                sheet.name,
                sheet.decoder,
                result.total_rows,
            )

            # ==========================================================
            # Step 5-6: Columns and Chunks
            # ==========================================================
            result.chunk_result = await self._ingest_sheet(
                sheet, state, warnings, source_uri
            )
        except (NetworkError, DecodeError) as exc:
            self._record_failure(result, exc.error, source_uri)
        except Exception as exc:
            err = IngestError(
                code=ErrorCode.E_INGEST_FAILED,
                message=f"Error fetching or processing the spreadsheet: {exc}",
                stage="ingest",
            )
            logger.exception(
                "ingestkit_sheetview | source=%s | code=%s | detail=%s",
                source_uri,
                err.code.value,
                err.message,
            )
            result.errors.append(err.code.value)
            result.error_details.append(err)
        finally:
            state.mark_done()

        # ==============================================================
        # Step 7: Assemble Result
        # ==============================================================
        result.column_count = len(state.columns)
        result.rows_ingested = state.row_count
        result.warnings = [w.code.value for w in warnings]
        result.error_details.extend(warnings)
        result.processing_time_seconds = time.monotonic() - overall_start

        if not result.errors:
            logger.info(
                "ingestkit_sheetview | source=%s | ingest_key=%s | columns=%d | "
                "rows=%d | chunks=%d | time=%.1fs",
                source_uri,
                result.ingest_key[:8],
                result.column_count,
                result.rows_ingested,
                result.chunk_result.increments if result.chunk_result else 0,
                result.processing_time_seconds,
            )
        return result

    def process(self, resource: str | None = None) -> tuple[ProcessingResult, TableState]:
        """Blocking wrapper around :meth:`aprocess` for callers without a loop."""
        state = TableState()
        result = asyncio.run(self.aprocess(resource, state))
        return result, state

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    async def _ingest_sheet(
        self,
        sheet: DecodedSheet,
        state: TableState,
        warnings: list[IngestError],
        source_uri: str,
    ) -> ChunkStageResult | None:
        header = sheet.rows[0] if sheet.rows else []
        columns = derive_columns(header)

        if not columns:
            logger.warning(
                "ingestkit_sheetview | source=%s | code=%s | detail=%s",
                source_uri,
                ErrorCode.W_EMPTY_HEADER.value,
                "header row is empty, nothing to show",
            )
            warnings.append(
                IngestError(
                    code=ErrorCode.W_EMPTY_HEADER,
                    message="Header row is empty; no table will be shown.",
                    sheet_name=sheet.name,
                    stage="columns",
                    recoverable=True,
                )
            )
            return None

        column_index = build_column_index(columns, self._config.duplicate_headers)
        duplicates = find_duplicate_names(columns)
        if duplicates:
            logger.warning(
                "ingestkit_sheetview | source=%s | code=%s | detail=%s",
                source_uri,
                ErrorCode.W_DUPLICATE_HEADER.value,
                duplicates,
            )
            warnings.append(
                IngestError(
                    code=ErrorCode.W_DUPLICATE_HEADER,
                    message=(
                        f"Duplicate header names {duplicates}; later columns "
                        "repeat the first match."
                    ),
                    sheet_name=sheet.name,
                    stage="columns",
                    recoverable=True,
                )
            )

        state.set_columns(columns)

        data_rows = sheet.rows[1:]
        if self._config.log_sample_data and data_rows:
            logger.debug(
                "ingestkit_sheetview | source=%s | sample_row=%r",
                source_uri,
                data_rows[0],
            )
        return await self._scheduler.run(data_rows, columns, column_index, state)

    @staticmethod
    def _record_failure(
        result: ProcessingResult, err: IngestError, source_uri: str
    ) -> None:
        logger.error(
            "ingestkit_sheetview | source=%s | code=%s | detail=%s",
            source_uri,
            err.code.value,
            err.message,
        )
        result.errors.append(err.code.value)
        result.error_details.append(err)
