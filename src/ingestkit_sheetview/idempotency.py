"""Deterministic ingest-key computation for deduplication.

The key is computed from the fetched bytes rather than a path on disk,
since the content may arrive from a remote location.  The package
**provides** the key but does **not** enforce any deduplication policy.
"""

from __future__ import annotations

import hashlib

from ingestkit_sheetview.models import IngestKey


def compute_ingest_key(
    content: bytes,
    source_uri: str,
    parser_version: str,
    tenant_id: str | None = None,
) -> IngestKey:
    """Compute a deterministic ingest key for deduplication.

    Parameters
    ----------
    content:
        Raw bytes of the spreadsheet file.
    source_uri:
        Location the bytes were fetched from.
    parser_version:
        Parser version string (e.g. ``"ingestkit_sheetview:1.0.0"``).
    tenant_id:
        Optional tenant identifier for multi-tenant scenarios.

    Returns
    -------
    IngestKey
        A populated :class:`IngestKey` whose :pyattr:`~IngestKey.key`
        property yields the composite SHA-256 hex digest.
    """
    content_hash = hashlib.sha256(content).hexdigest()
    return IngestKey(
        content_hash=content_hash,
        source_uri=source_uri,
        parser_version=parser_version,
        tenant_id=tenant_id,
    )
