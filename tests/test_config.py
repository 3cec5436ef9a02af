"""Tests for SheetViewConfig defaults, validation, and from_file()."""

from __future__ import annotations

import json

import pytest
import yaml
from pydantic import ValidationError

from ingestkit_sheetview.config import SheetViewConfig


class TestConfigDefaults:
    """SheetViewConfig() with no args."""

    def test_parser_version(self, default_config: SheetViewConfig) -> None:
        assert default_config.parser_version == "ingestkit_sheetview:1.0.0"

    def test_tenant_id(self, default_config: SheetViewConfig) -> None:
        assert default_config.tenant_id is None

    def test_source_uri(self, default_config: SheetViewConfig) -> None:
        assert default_config.source_uri == "data.xlsx"

    def test_chunk_size(self, default_config: SheetViewConfig) -> None:
        assert default_config.chunk_size == 50

    def test_idle_delay(self, default_config: SheetViewConfig) -> None:
        assert default_config.idle_delay_seconds == 0.0

    def test_duplicate_headers(self, default_config: SheetViewConfig) -> None:
        assert default_config.duplicate_headers == "first_match"

    def test_display(self, default_config: SheetViewConfig) -> None:
        assert default_config.pagination is True
        assert default_config.rows_per_page == 15
        assert default_config.title == "FMSCA Records"

    def test_log_sample_data(self, default_config: SheetViewConfig) -> None:
        assert default_config.log_sample_data is False


class TestConfigValidation:
    """Field constraints."""

    @pytest.mark.parametrize("value", [0, -1])
    def test_chunk_size_must_be_positive(self, value):
        with pytest.raises(ValidationError):
            SheetViewConfig(chunk_size=value)

    def test_idle_delay_not_negative(self):
        with pytest.raises(ValidationError):
            SheetViewConfig(idle_delay_seconds=-0.1)

    def test_rows_per_page_must_be_positive(self):
        with pytest.raises(ValidationError):
            SheetViewConfig(rows_per_page=0)

    def test_unknown_duplicate_policy(self):
        with pytest.raises(ValidationError):
            SheetViewConfig(duplicate_headers="last_match")


class TestFromFile:
    """from_file() with YAML and JSON."""

    def test_yaml(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text(yaml.safe_dump({"chunk_size": 200, "tenant_id": "t1"}))
        config = SheetViewConfig.from_file(str(path))
        assert config.chunk_size == 200
        assert config.tenant_id == "t1"
        assert config.rows_per_page == 15

    def test_yml_extension(self, tmp_path):
        path = tmp_path / "config.yml"
        path.write_text("rows_per_page: 25\n")
        assert SheetViewConfig.from_file(str(path)).rows_per_page == 25

    def test_json(self, tmp_path):
        path = tmp_path / "config.json"
        path.write_text(json.dumps({"source_uri": "/fmcsa.xlsx"}))
        assert SheetViewConfig.from_file(str(path)).source_uri == "/fmcsa.xlsx"

    def test_empty_yaml_uses_defaults(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("")
        assert SheetViewConfig.from_file(str(path)) == SheetViewConfig()

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            SheetViewConfig.from_file(str(tmp_path / "nope.yaml"))

    def test_unsupported_extension(self, tmp_path):
        path = tmp_path / "config.toml"
        path.write_text("chunk_size = 5")
        with pytest.raises(ValueError, match="Unsupported"):
            SheetViewConfig.from_file(str(path))

    def test_invalid_value_in_file(self, tmp_path):
        path = tmp_path / "config.json"
        path.write_text(json.dumps({"chunk_size": 0}))
        with pytest.raises(ValidationError):
            SheetViewConfig.from_file(str(path))
