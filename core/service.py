"""Public operations consumed by the front end.

Every function takes the store handle explicitly and returns a plain,
JSON-serializable dict: a success payload, or `{"error", "type"}` on failure.
Exceptions never escape this module.
"""

from __future__ import annotations

import logging
from datetime import date
from typing import Any, Callable, Dict, Mapping, Optional

from core.config import load_settings
from core.errors import NotFoundError, TrackerError, error_payload
from core.filters import compute_filter_options
from core.metrics import compute_summary_stats, projects_in_month
from core.mutations import add_record, update_cell as write_cell, update_status
from core.records import get_records
from core.store import CellValue, SheetStore

logger = logging.getLogger(__name__)

Payload = Dict[str, Any]


def _guarded(op: str, fn: Callable[[], Payload]) -> Payload:
    try:
        return fn()
    except TrackerError as exc:
        logger.warning("%s failed: %s", op, exc)
        return error_payload(exc)
    except Exception as exc:
        logger.exception("%s failed", op)
        return error_payload(exc)


def _require_sheet(store: SheetStore) -> None:
    if not store.sheet_exists(store.sheet_name):
        raise NotFoundError(store.sheet_name)


def get_projects(store: SheetStore) -> Payload:
    def run() -> Payload:
        result = get_records(store)
        return {"data": result.records, "headers": result.headers}

    return _guarded("get_projects", run)


def get_filter_options(store: SheetStore) -> Payload:
    return _guarded("get_filter_options", lambda: compute_filter_options(get_records(store).records))


def get_summary_stats(store: SheetStore, today: Optional[date] = None) -> Payload:
    return _guarded("get_summary_stats", lambda: compute_summary_stats(get_records(store).records, today=today))


def get_projects_by_month(store: SheetStore, month: int, year: int) -> Payload:
    def run() -> Payload:
        records = get_records(store).records
        return {"data": projects_in_month(records, int(month), int(year))}

    return _guarded("get_projects_by_month", run)


def update_project_status(store: SheetStore, row_index: int, status: str, *, status_column: Optional[int] = None) -> Payload:
    def run() -> Payload:
        _require_sheet(store)
        column = status_column if status_column is not None else load_settings().status_column
        update_status(store, int(row_index), status, status_column=column)
        return {"success": True}

    return _guarded("update_project_status", run)


def update_cell(store: SheetStore, row_index: int, column_key: str, value: CellValue) -> Payload:
    def run() -> Payload:
        _require_sheet(store)
        write_cell(store, int(row_index), column_key, value)
        return {"success": True}

    return _guarded("update_cell", run)


def add_project(store: SheetStore, fields: Mapping[str, Any]) -> Payload:
    def run() -> Payload:
        _require_sheet(store)
        row_index = add_record(store, fields)
        return {"success": True, "rowIndex": row_index}

    return _guarded("add_project", run)
