from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import Any, Dict, List

import pandas as pd

from core.dates import format_date
from core.errors import NotFoundError
from core.headers import normalize_header
from core.store import HEADER_ROW, CellValue, SheetStore

Record = Dict[str, Any]

NAME_FIELD = "projectActivityName"
ROW_INDEX_FIELD = "rowIndex"


@dataclass(frozen=True)
class RecordSet:
    headers: List[Dict[str, str]] = field(default_factory=list)
    records: List[Record] = field(default_factory=list)


def _is_blank(value: object) -> bool:
    return value is None or value == ""


def _cell_value(value: CellValue) -> CellValue:
    if isinstance(value, date):
        return format_date(value)
    return value


def row_to_record(keys: List[str], row: List[CellValue], row_index: int) -> Record:
    record: Record = {}
    for i, key in enumerate(keys):
        if not key:
            continue
        record[key] = _cell_value(row[i]) if i < len(row) else ""
    record[ROW_INDEX_FIELD] = row_index
    return record


def get_records(store: SheetStore) -> RecordSet:
    """Read the sheet into keyed records, skipping rows without a project name."""
    if not store.sheet_exists(store.sheet_name):
        raise NotFoundError(store.sheet_name)

    header_row = store.get_header_row()
    rows = store.get_data_rows()
    if not rows:
        return RecordSet()

    headers = [{"original": h, "normalized": normalize_header(h)} for h in header_row]
    keys = [h["normalized"] for h in headers]

    records: List[Record] = []
    for offset, row in enumerate(rows):
        record = row_to_record(keys, row, HEADER_ROW + 1 + offset)
        if _is_blank(record.get(NAME_FIELD)):
            continue
        records.append(record)
    return RecordSet(headers=headers, records=records)


def records_frame(records: List[Record]) -> pd.DataFrame:
    """Records as a DataFrame (one column per field key) for aggregation."""
    if not records:
        return pd.DataFrame()
    return pd.DataFrame.from_records(records)
