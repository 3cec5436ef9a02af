"""Local filesystem backend for the ByteFetcher protocol."""

from __future__ import annotations

import asyncio
import logging
from pathlib import Path

from ingestkit_sheetview.errors import ErrorCode, NetworkError

logger = logging.getLogger("ingestkit_sheetview")


class FileFetcher:
    """Reads resources from disk, relative to *base_path* when given.

    Satisfies :class:`~ingestkit_sheetview.protocols.ByteFetcher` via
    structural subtyping.  A leading ``/`` on the resource is treated as
    relative to *base_path*, matching how a web server maps ``/data.xlsx``.
    """

    def __init__(self, base_path: str | None = None) -> None:
        self._base_path = Path(base_path) if base_path is not None else None

    def _resolve(self, resource: str) -> Path | None:
        """Map *resource* to a path, or *None* if it escapes *base_path*."""
        if self._base_path is None:
            return Path(resource)
        base = self._base_path.resolve()
        path = (base / resource.lstrip("/")).resolve()
        if not path.is_relative_to(base):
            return None
        return path

    async def fetch(self, resource: str) -> bytes:
        path = self._resolve(resource)
        if path is None:
            logger.warning(
                "ingestkit_sheetview | resource=%s | outside base path, refused",
                resource,
            )
            raise NetworkError(
                code=ErrorCode.E_FETCH_NOT_FOUND,
                message=f"File not found: {resource}",
                stage="fetch",
            )
        logger.info("ingestkit_sheetview | reading %s", path)
        if not path.is_file():
            raise NetworkError(
                code=ErrorCode.E_FETCH_NOT_FOUND,
                message=f"File not found: {path}",
                stage="fetch",
            )
        try:
            return await asyncio.to_thread(path.read_bytes)
        except OSError as exc:
            raise NetworkError(
                code=ErrorCode.E_FETCH_CONNECT,
                message=f"Could not read {path}: {exc}",
                stage="fetch",
            ) from exc
