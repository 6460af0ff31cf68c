from __future__ import annotations

import os
from dataclasses import dataclass, field
from functools import lru_cache
from pathlib import Path
from typing import List

DATA_DIR = Path(__file__).resolve().parents[1]
WORKBOOK_NAME = "projects.xlsx"
SHEET_NAME = "Projects"

# 1-based column of "Status" in DEFAULT_HEADERS.
STATUS_COLUMN = 3

DEFAULT_HEADERS = [
    "Project / Activity Name",
    "Category",
    "Status",
    "Functional Owner of Deliverable",
    "Program Owner / Lead Contact",
    "Effort",
    "Help Needed",
    "Start Date",
    "End Date",
    "Notes",
]

CORS_ORIGINS = ["http://localhost:3000", "http://127.0.0.1:3000"]


@dataclass(frozen=True)
class Settings:
    workbook_path: Path = DATA_DIR / WORKBOOK_NAME
    sheet_name: str = SHEET_NAME
    status_column: int = STATUS_COLUMN
    create_if_missing: bool = True
    cors_origins: List[str] = field(default_factory=lambda: list(CORS_ORIGINS))


def settings_from_env(env: dict | None = None) -> Settings:
    env = os.environ if env is None else env
    workbook = env.get("PROJECTS_WORKBOOK")
    status_column = env.get("PROJECTS_STATUS_COLUMN", STATUS_COLUMN)
    try:
        status_column = int(status_column)
    except (TypeError, ValueError):
        raise ValueError(f"PROJECTS_STATUS_COLUMN must be an integer, got {status_column!r}")
    if status_column < 1:
        raise ValueError("PROJECTS_STATUS_COLUMN must be >= 1")
    return Settings(
        workbook_path=Path(workbook) if workbook else DATA_DIR / WORKBOOK_NAME,
        sheet_name=env.get("PROJECTS_SHEET") or SHEET_NAME,
        status_column=status_column,
    )


@lru_cache(maxsize=1)
def load_settings() -> Settings:
    return settings_from_env()
