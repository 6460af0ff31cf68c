from __future__ import annotations

from typing import Any, Dict, List

import pandas as pd

from core.records import Record, records_frame

FILTER_FIELDS = (
    "category",
    "status",
    "functionalOwnerOfDeliverable",
    "programOwnerLeadContact",
    "effort",
)
HELP_NEEDED_FIELD = "helpNeeded"
HELP_NEEDED_OPTIONS = ["Yes", "No"]


def is_truthy(value: object) -> bool:
    if value is None:
        return False
    try:
        if pd.isna(value):
            return False
    except (TypeError, ValueError):
        pass
    return bool(value)


def _plain(value: object) -> object:
    # numpy scalars -> python
    return value.item() if hasattr(value, "item") else value


def distinct_values(df: pd.DataFrame, field: str) -> List[Any]:
    if df.empty or field not in df.columns:
        return []
    # keyed by type too: pandas treats 1 and True as the same value
    seen = set()
    values: List[Any] = []
    for v in df[field].tolist():
        v = _plain(v)
        if not is_truthy(v) or (type(v), v) in seen:
            continue
        seen.add((type(v), v))
        values.append(v)
    return sorted(values, key=str)


def compute_filter_options(records: List[Record]) -> Dict[str, List[Any]]:
    df = records_frame(records)
    options: Dict[str, List[Any]] = {field: distinct_values(df, field) for field in FILTER_FIELDS}
    options[HELP_NEEDED_FIELD] = list(HELP_NEEDED_OPTIONS)
    return options
