from __future__ import annotations

from typing import Any, Dict


class TrackerError(Exception):
    """Base class for failures surfaced to API callers as error payloads."""


class NotFoundError(TrackerError):
    def __init__(self, sheet_name: str):
        self.sheet_name = sheet_name
        super().__init__(f"Sheet '{sheet_name}' not found")


class ColumnNotFoundError(TrackerError):
    def __init__(self, field_key: str):
        self.field_key = field_key
        super().__init__(f"Column '{field_key}' not found")


class WriteError(TrackerError):
    pass


class UnknownError(TrackerError):
    pass


def error_payload(exc: BaseException) -> Dict[str, Any]:
    """Convert any exception into the `{error, type}` payload returned to clients."""
    if not isinstance(exc, TrackerError):
        exc = UnknownError(str(exc) or type(exc).__name__)
    return {"error": str(exc), "type": type(exc).__name__}
