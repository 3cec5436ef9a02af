"""pandas backend for the SheetDecoder protocol.

Reduced-fidelity alternative to :class:`OpenpyxlDecoder`: reads the first
sheet via ``pandas.ExcelFile`` with no header inference and maps missing
cells (NaN) back to ``None``.
"""

from __future__ import annotations

import io
import logging

import pandas as pd

from ingestkit_sheetview.backends._rows import trim_rows
from ingestkit_sheetview.errors import DecodeError, ErrorCode
from ingestkit_sheetview.models import DecodedSheet

logger = logging.getLogger("ingestkit_sheetview")


class PandasDecoder:
    """Decodes spreadsheet bytes with ``pandas.read_excel`` semantics."""

    name = "pandas"

    def decode(self, content: bytes) -> DecodedSheet:
        try:
            with pd.ExcelFile(io.BytesIO(content)) as xls:
                if not xls.sheet_names:
                    raise DecodeError(
                        code=ErrorCode.E_DECODE_NO_SHEET,
                        message="Workbook contains no sheets.",
                        stage="decode",
                    )
                sheet_name = str(xls.sheet_names[0])
                df = xls.parse(sheet_name, header=None, dtype=object)
        except DecodeError:
            raise
        except Exception as exc:
            raise DecodeError(
                code=ErrorCode.E_DECODE_CORRUPT,
                message=f"pandas could not read workbook: {exc}",
                stage="decode",
            ) from exc

        df = df.astype(object).where(df.notna(), None)
        rows = trim_rows(df.values.tolist())
        logger.debug(
            "ingestkit_sheetview | decoder=pandas | sheet=%s | rows=%d",
            sheet_name,
            len(rows),
        )
        return DecodedSheet(name=sheet_name, rows=rows, decoder=self.name)
