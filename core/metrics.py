from __future__ import annotations

import calendar
from datetime import date, datetime
from typing import Any, Dict, List, Optional

import pandas as pd

from core.dates import parse_date
from core.filters import HELP_NEEDED_FIELD, is_truthy
from core.records import Record, records_frame

UNKNOWN_BUCKET = "Unknown"
AT_RISK = "At Risk"
COMPLETED_STATUSES = {"complete", "completed"}


def _counts_by(df: pd.DataFrame, field: str) -> Dict[Any, int]:
    if df.empty:
        return {}
    if field not in df.columns:
        return {UNKNOWN_BUCKET: int(len(df))}
    bucketed = df[field].map(lambda v: v if is_truthy(v) else UNKNOWN_BUCKET)
    counts = bucketed.value_counts(sort=False)
    return {(k.item() if hasattr(k, "item") else k): int(v) for k, v in counts.items()}


def _count_equal(df: pd.DataFrame, field: str, value: str) -> int:
    if df.empty or field not in df.columns:
        return 0
    return int((df[field] == value).sum())


def _completed_in_month(record: Record, month: int, year: int) -> bool:
    status = record.get("status")
    if not isinstance(status, str) or status.strip().lower() not in COMPLETED_STATUSES:
        return False
    end = parse_date(record.get("endDate"))
    return end is not None and end.month == month and end.year == year


def compute_summary_stats(records: List[Record], today: Optional[date] = None) -> Dict[str, Any]:
    today = today or date.today()
    df = records_frame(records)
    return {
        "total": len(records),
        "byStatus": _counts_by(df, "status"),
        "byCategory": _counts_by(df, "category"),
        "byEffort": _counts_by(df, "effort"),
        "helpNeeded": _count_equal(df, HELP_NEEDED_FIELD, "Yes"),
        "atRisk": _count_equal(df, "status", AT_RISK),
        "completedThisMonth": sum(1 for r in records if _completed_in_month(r, today.month, today.year)),
    }


def month_bounds(month: int, year: int) -> tuple[datetime, datetime]:
    if not 1 <= month <= 12:
        raise ValueError(f"month must be between 1 and 12, got {month}")
    last_day = calendar.monthrange(year, month)[1]
    return datetime(year, month, 1), datetime(year, month, last_day)


def _has_value(value: object) -> bool:
    return value is not None and value != ""


def overlaps_month(record: Record, month: int, year: int) -> bool:
    """True if the record's start/end dates touch the given month.

    A date that is present but unparseable never matches.
    """
    first, last = month_bounds(month, year)
    raw_start, raw_end = record.get("startDate"), record.get("endDate")
    start, end = parse_date(raw_start), parse_date(raw_end)
    if (_has_value(raw_start) and start is None) or (_has_value(raw_end) and end is None):
        return False

    if start and end:
        return start <= last and end >= first
    if start:
        return start.month == month and start.year == year
    if end:
        return end.month == month and end.year == year
    return False


def projects_in_month(records: List[Record], month: int, year: int) -> List[Record]:
    month_bounds(month, year)
    return [r for r in records if overlaps_month(r, month, year)]
