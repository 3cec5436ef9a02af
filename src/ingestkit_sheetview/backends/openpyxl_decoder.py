"""openpyxl backend for the SheetDecoder protocol.

Opens the workbook in read-only, data-only mode (cached formula values,
no styles) and reads the first worksheet only.
"""

from __future__ import annotations

import io
import logging

import openpyxl

from ingestkit_sheetview.backends._rows import trim_rows
from ingestkit_sheetview.errors import DecodeError, ErrorCode
from ingestkit_sheetview.models import DecodedSheet

logger = logging.getLogger("ingestkit_sheetview")


class OpenpyxlDecoder:
    """Decodes ``.xlsx`` bytes with openpyxl."""

    name = "openpyxl"

    def decode(self, content: bytes) -> DecodedSheet:
        try:
            wb = openpyxl.load_workbook(
                io.BytesIO(content), read_only=True, data_only=True
            )
        except Exception as exc:
            raise DecodeError(
                code=ErrorCode.E_DECODE_CORRUPT,
                message=f"openpyxl could not open workbook: {exc}",
                stage="decode",
            ) from exc

        try:
            if not wb.worksheets:
                raise DecodeError(
                    code=ErrorCode.E_DECODE_NO_SHEET,
                    message="Workbook contains no worksheets.",
                    stage="decode",
                )
            ws = wb.worksheets[0]
            try:
                rows = trim_rows(ws.iter_rows(values_only=True))
            except Exception as exc:
                raise DecodeError(
                    code=ErrorCode.E_DECODE_CORRUPT,
                    message=f"openpyxl could not read sheet '{ws.title}': {exc}",
                    stage="decode",
                    sheet_name=ws.title,
                ) from exc
            logger.debug(
                "ingestkit_sheetview | decoder=openpyxl | sheet=%s | rows=%d",
                ws.title,
                len(rows),
            )
            return DecodedSheet(name=ws.title, rows=rows, decoder=self.name)
        finally:
            wb.close()
