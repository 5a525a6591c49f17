"""Single pipeline: extract → transform → filter → load. No shared state, repeatable runs."""

import sys
from datetime import datetime, timezone
from typing import Any

import requests

from .config_loader import ExportConfig, build_export_config, load_config, load_credentials
from .errors import MissingConfigError
from .extract_airtable import fetch_approved_records
from .load import build_envelope, write_events_json
from .transform import filter_recent_and_future, previous_month_start, transform_events


def run_pipeline(
    config: ExportConfig,
    now: datetime | None = None,
    session: requests.Session | None = None,
) -> dict[str, Any]:
    """
    Run the export: fetch approved records → transform → keep previous month onwards → write JSON.
    Returns run summary (counts, threshold, output path). The file is only written once
    every earlier stage has succeeded.
    """
    now = now or datetime.now(timezone.utc)

    print("Fetching approved events from Airtable...")
    records = fetch_approved_records(config, session=session)
    print(f"Found {len(records)} approved events")

    events = transform_events(
        records,
        tz=config.display_timezone,
        date_format=config.date_format,
        time_format=config.time_format,
    )
    skipped = len(records) - len(events)
    if skipped:
        print(f"Skipped {skipped} events with no Start")

    print(f"Today: {now.astimezone(timezone.utc).date().isoformat()}")
    threshold = previous_month_start(now, tz=config.display_timezone, date_format=config.date_format)
    recent = filter_recent_and_future(events, threshold)
    print(
        f"{len(recent)} events from {threshold} onwards "
        "(including past events this month and last month)"
    )

    write_events_json(build_envelope(recent, now), config.output_path)
    print(f"Written to {config.output_path}")

    return {
        "fetched": len(records),
        "threshold": threshold,
        "exported": len(recent),
        "output": str(config.output_path),
    }


def main(argv: list[str] | None = None) -> int:
    """Usage: python -m event_export [path/to/export.yaml]. Returns the process exit code."""
    args = sys.argv[1:] if argv is None else argv
    try:
        credentials = load_credentials()
    except MissingConfigError as e:
        print(e, file=sys.stderr)
        return 1

    try:
        config = build_export_config(load_config(args[0] if args else None), credentials)
        run_pipeline(config)
    except Exception as e:
        print(f"Export failed: {e}", file=sys.stderr)
        return 1
    return 0


def cli() -> None:
    sys.exit(main())
