"""Concrete fetcher and decoder backends for ingestkit-sheetview."""

from __future__ import annotations

from ingestkit_sheetview.backends.chain import DecoderChain
from ingestkit_sheetview.backends.filesystem import FileFetcher
from ingestkit_sheetview.backends.http import HttpFetcher
from ingestkit_sheetview.backends.openpyxl_decoder import OpenpyxlDecoder
from ingestkit_sheetview.backends.pandas_decoder import PandasDecoder

__all__ = [
    "HttpFetcher",
    "FileFetcher",
    "OpenpyxlDecoder",
    "PandasDecoder",
    "DecoderChain",
]
