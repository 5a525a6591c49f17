"""Shared fixtures: export config and canned Airtable responses."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
import requests

from event_export.config_loader import ExportConfig


def make_response(status_code: int, payload: dict | None = None) -> requests.Response:
    """Build a real requests.Response so .ok / .json() behave as in production."""
    resp = requests.Response()
    resp.status_code = status_code
    resp._content = json.dumps(payload or {}).encode("utf-8")
    resp.encoding = "utf-8"
    return resp


@pytest.fixture
def export_config(tmp_path: Path) -> ExportConfig:
    return ExportConfig(
        api_key="keyTEST",
        base_id="appTEST",
        output_path=tmp_path / "events.json",
    )
