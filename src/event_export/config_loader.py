"""Load export config: non-secret settings from YAML, credentials from the environment."""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Mapping

import yaml

from .errors import MissingConfigError

API_KEY_ENV = "AIRTABLE_API_KEY"
BASE_ID_ENV = "AIRTABLE_BASE_ID"

REPO_ROOT = Path(__file__).resolve().parent.parent.parent


@dataclass(frozen=True)
class AirtableCredentials:
    api_key: str
    base_id: str


@dataclass(frozen=True)
class ExportConfig:
    api_key: str
    base_id: str
    table_name: str = "Events"
    filter_formula: str = '{Status} = "Approved"'
    sort_field: str = "Start"
    sort_direction: str = "asc"
    timeout: float | None = None
    api_url: str = "https://api.airtable.com/v0"
    display_timezone: str = "Europe/London"
    date_format: str = "%Y-%m-%d"
    time_format: str = "%H:%M"
    output_path: Path = Path("events.json")


def load_config(config_path: str | Path | None = None) -> dict[str, Any]:
    """
    Read YAML settings. An explicit path (relative to the working directory) must exist.
    Without one, config/export.yaml at the repo root is used if present, else {} so the
    ExportConfig defaults apply (e.g. when installed outside a checkout).
    """
    if config_path:
        path = Path(config_path).resolve()
    else:
        path = REPO_ROOT / "config" / "export.yaml"
        if not path.exists():
            return {}
    with open(path, encoding="utf-8") as f:
        return yaml.safe_load(f) or {}


def load_credentials(environ: Mapping[str, str] | None = None) -> AirtableCredentials:
    """
    Read AIRTABLE_API_KEY and AIRTABLE_BASE_ID. Empty values count as missing.
    Raises MissingConfigError before anything touches the network.
    """
    env = os.environ if environ is None else environ
    api_key = env.get(API_KEY_ENV, "")
    base_id = env.get(BASE_ID_ENV, "")
    missing = [name for name, value in ((API_KEY_ENV, api_key), (BASE_ID_ENV, base_id)) if not value]
    if missing:
        raise MissingConfigError(f"Missing {' or '.join(missing)}")
    return AirtableCredentials(api_key=api_key, base_id=base_id)


def build_export_config(config: dict[str, Any], credentials: AirtableCredentials) -> ExportConfig:
    """Overlay YAML sections (airtable, display, output) on the ExportConfig defaults."""
    airtable = config.get("airtable") or {}
    display = config.get("display") or {}
    output = config.get("output") or {}

    overrides: dict[str, Any] = {}
    for key in ("table_name", "filter_formula", "sort_field", "sort_direction", "api_url"):
        if airtable.get(key):
            overrides[key] = airtable[key]
    if airtable.get("timeout") is not None:
        overrides["timeout"] = float(airtable["timeout"])
    if display.get("timezone"):
        overrides["display_timezone"] = display["timezone"]
    for key in ("date_format", "time_format"):
        if display.get(key):
            overrides[key] = display[key]
    if output.get("path"):
        overrides["output_path"] = Path(output["path"])

    return ExportConfig(api_key=credentials.api_key, base_id=credentials.base_id, **overrides)
