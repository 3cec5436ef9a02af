"""Configuration model for the ingestkit-sheetview pipeline.

Provides ``SheetViewConfig`` with all tunable parameters and sensible
defaults.  Supports loading overrides from YAML or JSON files via the
``from_file()`` classmethod.
"""

from __future__ import annotations

import json
import pathlib
from typing import Literal

from pydantic import BaseModel, Field


class SheetViewConfig(BaseModel):
    """All tunable parameters with sensible defaults for sheet ingestion."""

    # --- Identity ---
    parser_version: str = "ingestkit_sheetview:1.0.0"
    tenant_id: str | None = None

    # --- Source ---
    source_uri: str = "data.xlsx"
    fetch_timeout_seconds: float = 30.0

    # --- Security / Resource Limits ---
    max_file_size_mb: int = 100

    # --- Decoding ---
    duplicate_headers: Literal["first_match", "reject"] = "first_match"
    decoder_fallback: bool = True

    # --- Incremental Ingestion ---
    chunk_size: int = Field(default=50, gt=0)
    idle_delay_seconds: float = Field(default=0.0, ge=0.0)

    # --- Display ---
    title: str = "FMSCA Records"
    pagination: bool = True
    rows_per_page: int = Field(default=15, gt=0)

    # --- Logging / PII Safety ---
    log_sample_data: bool = False

    @classmethod
    def from_file(cls, path: str) -> SheetViewConfig:
        """Load configuration from a YAML or JSON file.

        File format is detected by extension: ``.yaml`` / ``.yml`` for YAML,
        ``.json`` for JSON.  Any keys present in the file override the
        corresponding defaults; keys not present retain their defaults.
        """
        file_path = pathlib.Path(path)
        if not file_path.exists():
            raise FileNotFoundError(f"Config file not found: {path}")

        suffix = file_path.suffix.lower()

        if suffix in (".yaml", ".yml"):
            import yaml

            with open(file_path) as fh:
                data = yaml.safe_load(fh)
        elif suffix == ".json":
            with open(file_path) as fh:
                data = json.load(fh)
        else:
            raise ValueError(
                f"Unsupported config file extension '{suffix}'. "
                "Use .yaml, .yml, or .json."
            )

        if data is None:
            data = {}

        return cls(**data)
