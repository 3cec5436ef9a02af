"""Tests for ingestkit_sheetview.idempotency."""

from __future__ import annotations

import hashlib

from ingestkit_sheetview.idempotency import compute_ingest_key


class TestComputeIngestKey:
    """compute_ingest_key() determinism and sensitivity."""

    def test_content_hash(self):
        key = compute_ingest_key(b"abc", "data.xlsx", "v1")
        assert key.content_hash == hashlib.sha256(b"abc").hexdigest()

    def test_deterministic(self):
        first = compute_ingest_key(b"abc", "data.xlsx", "v1", "t1")
        second = compute_ingest_key(b"abc", "data.xlsx", "v1", "t1")
        assert first.key == second.key

    def test_content_changes_key(self):
        assert (
            compute_ingest_key(b"abc", "data.xlsx", "v1").key
            != compute_ingest_key(b"abd", "data.xlsx", "v1").key
        )

    def test_source_and_version_change_key(self):
        base = compute_ingest_key(b"abc", "data.xlsx", "v1").key
        assert compute_ingest_key(b"abc", "other.xlsx", "v1").key != base
        assert compute_ingest_key(b"abc", "data.xlsx", "v2").key != base

    def test_tenant_changes_key(self):
        assert (
            compute_ingest_key(b"abc", "data.xlsx", "v1").key
            != compute_ingest_key(b"abc", "data.xlsx", "v1", "tenant").key
        )
