"""Pre-decode content checks for fetched spreadsheet bytes.

``ContentScanner.scan()`` returns structured errors rather than raising so
the router decides how to surface them.  All checks here are fatal.
"""

from __future__ import annotations

import logging

from ingestkit_sheetview.config import SheetViewConfig
from ingestkit_sheetview.errors import ErrorCode, IngestError

logger = logging.getLogger("ingestkit_sheetview")

# .xlsx is a ZIP container.  Legacy .xls is an OLE2 compound document, which
# no bundled decoder reads.
_ZIP_MAGIC = b"PK\x03\x04"
_OLE2_MAGIC = b"\xd0\xcf\x11\xe0\xa1\xb1\x1a\xe1"


class ContentScanner:
    """Validates size and container signature before decoding."""

    def __init__(self, config: SheetViewConfig | None = None) -> None:
        self._config = config or SheetViewConfig()

    def scan(self, content: bytes) -> list[IngestError]:
        if not content:
            return [
                IngestError(
                    code=ErrorCode.E_DECODE_EMPTY,
                    message="Fetched content is empty (0 bytes).",
                    stage="security",
                )
            ]

        errors: list[IngestError] = []
        max_bytes = self._config.max_file_size_mb * 1024 * 1024
        if len(content) > max_bytes:
            errors.append(
                IngestError(
                    code=ErrorCode.E_DECODE_TOO_LARGE,
                    message=(
                        f"Content is {len(content)} bytes, limit is "
                        f"{self._config.max_file_size_mb} MB."
                    ),
                    stage="security",
                )
            )

        if content.startswith(_OLE2_MAGIC):
            errors.append(
                IngestError(
                    code=ErrorCode.E_DECODE_BAD_MAGIC,
                    message=(
                        "Legacy .xls (OLE2) workbooks are not supported; "
                        "save as .xlsx."
                    ),
                    stage="security",
                )
            )
        elif not content.startswith(_ZIP_MAGIC):
            logger.debug(
                "ingestkit_sheetview | unrecognized signature: %r", content[:8]
            )
            errors.append(
                IngestError(
                    code=ErrorCode.E_DECODE_BAD_MAGIC,
                    message="Content is not an .xlsx (ZIP) spreadsheet container.",
                    stage="security",
                )
            )

        return errors
