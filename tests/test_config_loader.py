"""Tests for YAML settings and environment credentials."""

from __future__ import annotations

from pathlib import Path

import pytest

from event_export.config_loader import (
    AirtableCredentials,
    build_export_config,
    load_config,
    load_credentials,
)
from event_export.errors import MissingConfigError

CREDS = AirtableCredentials(api_key="keyX", base_id="appX")


class TestLoadCredentials:

    def test_both_present(self) -> None:
        creds = load_credentials({"AIRTABLE_API_KEY": "key1", "AIRTABLE_BASE_ID": "app1"})
        assert creds == AirtableCredentials(api_key="key1", base_id="app1")

    def test_missing_api_key(self) -> None:
        with pytest.raises(MissingConfigError, match="AIRTABLE_API_KEY"):
            load_credentials({"AIRTABLE_BASE_ID": "app1"})

    def test_empty_base_id_counts_as_missing(self) -> None:
        with pytest.raises(MissingConfigError, match="AIRTABLE_BASE_ID"):
            load_credentials({"AIRTABLE_API_KEY": "key1", "AIRTABLE_BASE_ID": ""})

    def test_reads_process_environment(self, monkeypatch) -> None:
        monkeypatch.setenv("AIRTABLE_API_KEY", "envkey")
        monkeypatch.setenv("AIRTABLE_BASE_ID", "envbase")
        assert load_credentials().api_key == "envkey"


class TestBuildExportConfig:

    def test_repo_config_matches_defaults(self) -> None:
        config = build_export_config(load_config(), CREDS)
        assert config.table_name == "Events"
        assert config.filter_formula == '{Status} = "Approved"'
        assert config.sort_field == "Start"
        assert config.sort_direction == "asc"
        assert config.timeout is None
        assert config.display_timezone == "Europe/London"
        assert config.date_format == "%Y-%m-%d"
        assert config.time_format == "%H:%M"
        assert config.output_path == Path("events.json")

    def test_empty_config_uses_defaults(self) -> None:
        config = build_export_config({}, CREDS)
        assert config.api_key == "keyX"
        assert config.base_id == "appX"
        assert config.output_path == Path("events.json")

    def test_yaml_overrides(self, tmp_path: Path) -> None:
        path = tmp_path / "export.yaml"
        path.write_text(
            "airtable:\n"
            "  table_name: Gigs\n"
            "  timeout: 15\n"
            "display:\n"
            "  timezone: Europe/Dublin\n"
            "output:\n"
            "  path: site/data/events.json\n",
            encoding="utf-8",
        )
        config = build_export_config(load_config(path), CREDS)
        assert config.table_name == "Gigs"
        assert config.timeout == 15.0
        assert config.display_timezone == "Europe/Dublin"
        assert config.output_path == Path("site/data/events.json")
        assert config.sort_field == "Start"

    def test_missing_config_file(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError):
            load_config(tmp_path / "nope.yaml")

    def test_missing_default_config_uses_defaults(self, tmp_path: Path, monkeypatch) -> None:
        """Installed outside a checkout there is no config/export.yaml next to the package."""
        monkeypatch.setattr("event_export.config_loader.REPO_ROOT", tmp_path)
        assert load_config() == {}

    def test_relative_path_resolves_against_cwd(self, tmp_path: Path, monkeypatch) -> None:
        (tmp_path / "site.yaml").write_text("airtable:\n  table_name: Gigs\n", encoding="utf-8")
        monkeypatch.chdir(tmp_path)
        assert load_config("site.yaml")["airtable"]["table_name"] == "Gigs"
