"""Incremental chunk scheduler.

Normalizes data rows in fixed-size batches and publishes each batch into a
``TableState``, yielding to the event loop between batches so that other
pending work (redraws, input) runs while a large sheet is ingested.

Batches are processed strictly in order from a single coroutine, so batch
*k+1* never starts before batch *k* has been appended and published.
"""

from __future__ import annotations

import asyncio
import logging
import math
import time
from collections.abc import Sequence
from typing import Any

from ingestkit_sheetview.config import SheetViewConfig
from ingestkit_sheetview.models import ChunkStageResult, ColumnDescriptor
from ingestkit_sheetview.normalizer import normalize_row
from ingestkit_sheetview.state import TableState

logger = logging.getLogger("ingestkit_sheetview")


def plan_chunks(total: int, chunk_size: int) -> list[tuple[int, int]]:
    """Return the half-open ``(start, end)`` ranges covering *total* rows.

    There are exactly ``ceil(total / chunk_size)`` ranges; the last one is
    clamped to *total*.
    """
    if chunk_size <= 0:
        raise ValueError(f"chunk_size must be positive, got {chunk_size}")
    count = math.ceil(total / chunk_size)
    return [
        (index * chunk_size, min((index + 1) * chunk_size, total))
        for index in range(count)
    ]


class ChunkScheduler:
    """Drives bounded increments of rows into a ``TableState``.

    Parameters
    ----------
    config:
        Pipeline configuration providing ``chunk_size`` and
        ``idle_delay_seconds``.  Uses defaults when *None*.
    """

    def __init__(self, config: SheetViewConfig | None = None) -> None:
        self._config = config or SheetViewConfig()

    @property
    def chunk_size(self) -> int:
        return self._config.chunk_size

    async def run(
        self,
        data_rows: Sequence[Sequence[Any]],
        columns: Sequence[ColumnDescriptor],
        column_index: Sequence[int],
        state: TableState,
    ) -> ChunkStageResult:
        """Normalize and append *data_rows* to *state* chunk by chunk.

        The state is marked done when the last chunk has been appended, and
        also when a chunk fails or the task is cancelled; in those cases
        the exception propagates and rows committed so far stay in place.

        Parameters
        ----------
        data_rows:
            Raw rows after the header.
        columns:
            Descriptors already published on *state*.
        column_index:
            Header position for each column, from ``build_column_index``.
        state:
            Accumulation target.

        Returns
        -------
        ChunkStageResult
            Number and sizes of the increments applied.
        """
        start_time = time.monotonic()
        ranges = plan_chunks(len(data_rows), self._config.chunk_size)
        chunk_sizes: list[int] = []

        try:
            for number, (start, end) in enumerate(ranges, start=1):
                # Normalize the full batch before touching the state.
                batch = [
                    normalize_row(row, columns, column_index)
                    for row in data_rows[start:end]
                ]
                chunk_sizes.append(state.append_rows(batch))
                logger.debug(
                    "ingestkit_sheetview | chunk=%d/%d | rows=%d-%d | total=%d",
                    number,
                    len(ranges),
                    start,
                    end,
                    state.row_count,
                )
                if number < len(ranges):
                    await asyncio.sleep(self._config.idle_delay_seconds)
        finally:
            state.mark_done()

        return ChunkStageResult(
            increments=len(chunk_sizes),
            rows_appended=sum(chunk_sizes),
            chunk_sizes=chunk_sizes,
            duration_seconds=time.monotonic() - start_time,
        )
