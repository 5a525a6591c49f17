"""Load: write the events envelope as JSON for the static site."""

import json
from datetime import datetime, timezone
from pathlib import Path
from typing import Any


def format_last_updated(now: datetime) -> str:
    """UTC instant with millisecond precision, e.g. 2024-03-10T12:00:00.000Z."""
    if now.tzinfo is None:
        now = now.replace(tzinfo=timezone.utc)
    utc = now.astimezone(timezone.utc)
    return utc.strftime("%Y-%m-%dT%H:%M:%S.") + f"{utc.microsecond // 1000:03d}Z"


def build_envelope(events: list[dict[str, str]], now: datetime) -> dict[str, Any]:
    return {"lastUpdated": format_last_updated(now), "events": events}


def write_events_json(envelope: dict[str, Any], out_path: Path) -> None:
    # Plain overwrite, not atomic.
    out_path.parent.mkdir(parents=True, exist_ok=True)
    with open(out_path, "w", encoding="utf-8") as f:
        json.dump(envelope, f, indent=2, ensure_ascii=False)
