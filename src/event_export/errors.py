"""Exceptions raised by the export pipeline. main() is the only place they are caught."""


class ExportError(Exception):
    """Base class for export failures."""


class MissingConfigError(ExportError):
    """A required environment variable is unset or empty."""


class AirtableAPIError(ExportError):
    def __init__(self, status_code: int):
        super().__init__(f"Airtable API error: {status_code}")
        self.status_code = status_code
