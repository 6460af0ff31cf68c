from __future__ import annotations

import logging
from typing import Any, Mapping

from core.errors import ColumnNotFoundError, TrackerError, WriteError
from core.headers import normalize_header
from core.store import HEADER_ROW, CellValue, SheetStore

logger = logging.getLogger(__name__)


def _check_data_row(row_index: int) -> None:
    if row_index <= HEADER_ROW:
        raise WriteError(f"Row {row_index} is not a data row")


def _write(store: SheetStore, row_index: int, col: int, value: CellValue) -> None:
    _check_data_row(row_index)
    try:
        store.set_cell(row_index, col, value)
    except TrackerError:
        raise
    except Exception as exc:
        raise WriteError(f"Failed to write row {row_index}, column {col}: {exc}") from exc


def find_column(store: SheetStore, field_key: str) -> int:
    """1-based position of the first header whose normalized key is `field_key`."""
    for pos, header in enumerate(store.get_header_row(), start=1):
        if normalize_header(header) == field_key:
            return pos
    raise ColumnNotFoundError(field_key)


def update_status(store: SheetStore, row_index: int, new_status: str, *, status_column: int) -> None:
    _write(store, row_index, status_column, new_status)
    logger.info("Updated status of row %s to %r", row_index, new_status)


def update_cell(store: SheetStore, row_index: int, field_key: str, value: CellValue) -> None:
    col = find_column(store, field_key)
    _write(store, row_index, col, value)
    logger.info("Updated row %s column %s (%s)", row_index, col, field_key)


def build_row(headers: list[str], fields: Mapping[str, Any]) -> list[CellValue]:
    row: list[CellValue] = []
    for header in headers:
        value = fields.get(normalize_header(header))
        row.append("" if value is None else value)
    return row


def add_record(store: SheetStore, fields: Mapping[str, Any]) -> int:
    row = build_row(store.get_header_row(), fields)
    try:
        row_index = store.append_row(row)
    except TrackerError:
        raise
    except Exception as exc:
        raise WriteError(f"Failed to append row: {exc}") from exc
    logger.info("Appended project at row %s", row_index)
    return row_index
