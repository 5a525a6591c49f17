"""Extract approved events from the Airtable API."""

from typing import Any
from urllib.parse import quote

import requests

from .config_loader import ExportConfig
from .errors import AirtableAPIError


def build_params(config: ExportConfig, offset: str | None = None) -> dict[str, str]:
    params = {
        "filterByFormula": config.filter_formula,
        "sort[0][field]": config.sort_field,
        "sort[0][direction]": config.sort_direction,
    }
    if offset:
        params["offset"] = offset
    return params


def fetch_approved_records(
    config: ExportConfig,
    session: requests.Session | None = None,
) -> list[dict[str, Any]]:
    """
    Fetch every record matching config.filter_formula, sorted server-side by config.sort_field.
    Follows Airtable's offset pagination until a page comes back without one.
    Records are returned as-is ({"id": ..., "fields": {...}}) in server order.
    Any non-2xx response raises AirtableAPIError; nothing is retried.
    """
    url = f"{config.api_url}/{config.base_id}/{quote(config.table_name, safe='')}"
    headers = {"Authorization": f"Bearer {config.api_key}"}
    records: list[dict[str, Any]] = []
    offset = None

    own_session = session is None
    sess = requests.Session() if own_session else session
    try:
        while True:
            resp = sess.get(url, headers=headers, params=build_params(config, offset), timeout=config.timeout)
            if not resp.ok:
                raise AirtableAPIError(resp.status_code)
            data = resp.json()
            records.extend(data.get("records", []))
            offset = data.get("offset")
            if not offset:
                break
    finally:
        if own_session:
            sess.close()

    return records
