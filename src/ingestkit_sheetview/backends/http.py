"""HTTP backend for the ByteFetcher protocol.

Fetches the spreadsheet with an ``httpx.AsyncClient``.  Failures are not
retried; they surface as ``NetworkError`` for the router to handle once.
"""

from __future__ import annotations

import logging

import httpx

from ingestkit_sheetview.config import SheetViewConfig
from ingestkit_sheetview.errors import ErrorCode, NetworkError

logger = logging.getLogger("ingestkit_sheetview")


class HttpFetcher:
    """httpx-backed fetcher.

    Satisfies :class:`~ingestkit_sheetview.protocols.ByteFetcher` via
    structural subtyping (no inheritance required).

    Parameters
    ----------
    base_url:
        Optional base that relative resources are joined onto
        (e.g. ``"http://localhost:3000"``).
    client:
        Optional pre-built client.  When *None* a client is opened and
        closed around every fetch.
    config:
        Pipeline configuration providing ``fetch_timeout_seconds``.
    """

    def __init__(
        self,
        base_url: str | None = None,
        client: httpx.AsyncClient | None = None,
        config: SheetViewConfig | None = None,
    ) -> None:
        self._base_url = base_url
        self._client = client
        self._config = config or SheetViewConfig()

    def _resolve(self, resource: str) -> str:
        if self._base_url is None:
            return resource
        return str(httpx.URL(self._base_url).join(resource))

    async def fetch(self, resource: str) -> bytes:
        url = self._resolve(resource)
        logger.info("ingestkit_sheetview | fetching %s", url)
        if self._client is not None:
            return await self._get(self._client, url)
        async with httpx.AsyncClient(timeout=self._config.fetch_timeout_seconds) as client:
            return await self._get(client, url)

    async def _get(self, client: httpx.AsyncClient, url: str) -> bytes:
        try:
            response = await client.get(url)
        except httpx.TimeoutException as exc:
            raise NetworkError(
                code=ErrorCode.E_FETCH_TIMEOUT,
                message=f"Timed out fetching {url}: {exc}",
                stage="fetch",
                recoverable=True,
            ) from exc
        except httpx.HTTPError as exc:
            raise NetworkError(
                code=ErrorCode.E_FETCH_CONNECT,
                message=f"Could not fetch {url}: {exc}",
                stage="fetch",
                recoverable=True,
            ) from exc

        if not response.is_success:
            raise NetworkError(
                code=ErrorCode.E_FETCH_STATUS,
                message=f"Network response was not ok: HTTP {response.status_code} for {url}",
                stage="fetch",
            )
        return response.content
