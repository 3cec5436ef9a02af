"""ingestkit-sheetview -- Incremental spreadsheet ingestion into a table model.

Public API re-exports for convenient access.
"""

from ingestkit_sheetview.backends import (
    DecoderChain,
    FileFetcher,
    HttpFetcher,
    OpenpyxlDecoder,
    PandasDecoder,
)
from ingestkit_sheetview.columns import build_column_index, derive_columns
from ingestkit_sheetview.config import SheetViewConfig
from ingestkit_sheetview.errors import (
    DecodeError,
    ErrorCode,
    IngestError,
    IngestException,
    NetworkError,
)
from ingestkit_sheetview.idempotency import compute_ingest_key
from ingestkit_sheetview.models import (
    ChunkStageResult,
    ColumnDescriptor,
    DecodedSheet,
    IngestKey,
    ProcessingResult,
    TablePage,
    TableSnapshot,
)
from ingestkit_sheetview.normalizer import normalize_row
from ingestkit_sheetview.protocols import ByteFetcher, SheetDecoder, TableRenderer
from ingestkit_sheetview.router import SheetViewRouter
from ingestkit_sheetview.scheduler import ChunkScheduler, plan_chunks
from ingestkit_sheetview.security import ContentScanner
from ingestkit_sheetview.state import TableState
from ingestkit_sheetview.view import PagedTableView

__all__ = [
    # Router
    "SheetViewRouter",
    # Pipeline pieces
    "derive_columns",
    "build_column_index",
    "normalize_row",
    "ChunkScheduler",
    "plan_chunks",
    "TableState",
    "ContentScanner",
    "PagedTableView",
    # Models
    "ColumnDescriptor",
    "TableSnapshot",
    "TablePage",
    "DecodedSheet",
    "ChunkStageResult",
    "IngestKey",
    "ProcessingResult",
    "compute_ingest_key",
    # Backends
    "HttpFetcher",
    "FileFetcher",
    "OpenpyxlDecoder",
    "PandasDecoder",
    "DecoderChain",
    # Errors
    "ErrorCode",
    "IngestError",
    "IngestException",
    "NetworkError",
    "DecodeError",
    # Config
    "SheetViewConfig",
    # Protocols
    "ByteFetcher",
    "SheetDecoder",
    "TableRenderer",
]
