from __future__ import annotations

import numbers
from datetime import date, datetime
from typing import Optional

import pandas as pd


def _is_empty(value: object) -> bool:
    if value is None:
        return True
    if isinstance(value, str):
        return value == ""
    try:
        return bool(pd.isna(value))
    except (TypeError, ValueError):
        return False


def format_date(value: object) -> str:
    """Render a date instant as M/D/YYYY; strings pass through untouched."""
    if _is_empty(value):
        return ""
    if isinstance(value, str):
        return value
    if isinstance(value, numbers.Number):
        # bare numbers are not epoch instants
        return str(value)
    if not isinstance(value, date):
        try:
            value = pd.Timestamp(value)
        except (TypeError, ValueError):
            return ""
        if pd.isna(value):
            return ""
    return f"{value.month}/{value.day}/{value.year:04d}"


def _full_year(year: int, token: str) -> int:
    """Two-digit years use the spreadsheet pivot: 00-29 -> 2000s, 30-99 -> 1900s."""
    if len(token) > 2:
        return year
    return 2000 + year if year < 30 else 1900 + year


def parse_date(value: object) -> Optional[datetime]:
    """Parse a cell value into a datetime at midnight, or None when unrecognized.

    Slash strings are always read US-style (month/day/year). Anything else goes
    through pandas' parser, so ISO-8601 strings like "2024-03-04" work too.
    """
    if _is_empty(value):
        return None
    if isinstance(value, datetime):
        return value
    if isinstance(value, date):
        return datetime(value.year, value.month, value.day)

    s = str(value).strip()
    if not s:
        return None
    # a trailing time ("3/4/2024 10:00") is dropped; slash dates land on midnight
    parts = s.split()[0].split("/")
    if len(parts) == 3:
        try:
            month, day, year = (int(p) for p in parts)
            return datetime(_full_year(year, parts[2]), month, day)
        except ValueError:
            return None

    parsed = pd.to_datetime(s, errors="coerce")
    if pd.isna(parsed):
        return None
    return parsed.to_pydatetime().replace(tzinfo=None)
