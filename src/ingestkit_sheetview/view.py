"""Paged table view: a ``TableRenderer`` that keeps the latest snapshot.

Pagination is independent of ingestion.  Pages are cut from whatever rows
have been published so far, so the page count grows while ``processing``
is still true.
"""

from __future__ import annotations

import math

from ingestkit_sheetview.config import SheetViewConfig
from ingestkit_sheetview.models import TablePage, TableSnapshot

LOADING_MORE_TEXT = "Loading more data..."


class PagedTableView:
    """Holds the most recent ``TableSnapshot`` and slices it into pages.

    Satisfies :class:`~ingestkit_sheetview.protocols.TableRenderer`.  Hook
    it up with ``state.subscribe(view.render)``.
    """

    def __init__(self, config: SheetViewConfig | None = None) -> None:
        self._config = config or SheetViewConfig()
        self._snapshot = TableSnapshot()
        self.render_count = 0

    def render(self, snapshot: TableSnapshot) -> None:
        self._snapshot = snapshot
        self.render_count += 1

    @property
    def snapshot(self) -> TableSnapshot:
        return self._snapshot

    @property
    def is_loading(self) -> bool:
        """True while there are no columns; the table is not shown yet."""
        return not self._snapshot.is_ready

    @property
    def status_text(self) -> str:
        return LOADING_MORE_TEXT if self._snapshot.processing else ""

    @property
    def rows_per_page(self) -> int:
        if not self._config.pagination:
            return max(len(self._snapshot.rows), 1)
        return self._config.rows_per_page

    @property
    def page_count(self) -> int:
        return max(math.ceil(len(self._snapshot.rows) / self.rows_per_page), 1)

    def page(self, index: int = 0) -> TablePage:
        if index < 0 or index >= self.page_count:
            raise IndexError(f"Page {index} out of range (0..{self.page_count - 1})")
        size = self.rows_per_page
        rows = self._snapshot.rows[index * size : (index + 1) * size]
        return TablePage(
            title=self._config.title,
            index=index,
            page_count=self.page_count,
            total_rows=len(self._snapshot.rows),
            columns=list(self._snapshot.columns),
            rows=list(rows),
        )
