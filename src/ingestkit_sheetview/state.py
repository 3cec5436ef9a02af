"""Mutable accumulation target for one ingestion.

``TableState`` is written by exactly one party (the pipeline, and through
it the ``ChunkScheduler``) and observed by any number of subscribers.  The
row buffer is append-only: every observer sees a prefix of the final rows.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Sequence

from ingestkit_sheetview.models import ColumnDescriptor, NormalizedRow, TableSnapshot

Listener = Callable[[TableSnapshot], None]


class TableState:
    """Columns, accumulated rows, and the processing flag.

    Created with ``processing=True`` and no columns or rows.  Columns are
    set at most once, rows only grow, and ``processing`` flips to false at
    most once.
    """

    def __init__(self) -> None:
        self._columns: tuple[ColumnDescriptor, ...] = ()
        self._columns_set = False
        self._rows: list[NormalizedRow] = []
        self._processing = True
        self._listeners: list[Listener] = []

    # ------------------------------------------------------------------
    # Read side
    # ------------------------------------------------------------------

    @property
    def columns(self) -> tuple[ColumnDescriptor, ...]:
        return self._columns

    @property
    def rows(self) -> tuple[NormalizedRow, ...]:
        """Snapshot of the rows appended so far."""
        return tuple(self._rows)

    @property
    def row_count(self) -> int:
        return len(self._rows)

    @property
    def processing(self) -> bool:
        return self._processing

    @property
    def is_ready(self) -> bool:
        """True once there are columns to render a table with."""
        return len(self._columns) > 0

    def snapshot(self) -> TableSnapshot:
        # Built without validation; the state already guarantees the shape.
        return TableSnapshot.model_construct(
            columns=self._columns,
            rows=tuple(self._rows),
            processing=self._processing,
        )

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register *listener* for every published change.

        Returns a callable that removes the listener again.
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    # ------------------------------------------------------------------
    # Write side
    # ------------------------------------------------------------------

    def set_columns(self, columns: Sequence[ColumnDescriptor]) -> None:
        if self._columns_set:
            raise RuntimeError("Columns have already been set for this table.")
        self._columns = tuple(columns)
        self._columns_set = True
        self._publish()

    def append_rows(self, batch: Iterable[NormalizedRow]) -> int:
        """Append a whole batch and publish it.  Returns the batch size."""
        if not self._processing:
            raise RuntimeError("Cannot append rows to a finished table.")
        rows = list(batch)
        self._rows.extend(rows)
        self._publish()
        return len(rows)

    def mark_done(self) -> bool:
        """Clear the processing flag.  Returns False if it was already clear."""
        if not self._processing:
            return False
        self._processing = False
        self._publish()
        return True

    def _publish(self) -> None:
        if not self._listeners:
            return
        snapshot = self.snapshot()
        for listener in list(self._listeners):
            listener(snapshot)
