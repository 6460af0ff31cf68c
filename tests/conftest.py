"""Pytest configuration and fixtures."""

from __future__ import annotations

from datetime import date
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from core.config import DEFAULT_HEADERS
from core.store import ExcelSheetStore, InMemorySheetStore

# Row 4 has no project name and must never show up in any view.
SAMPLE_ROWS = [
    ["Website Refresh", "Digital", "Active", "Marketing", "Jane Doe", "High", "Yes", date(2024, 1, 15), date(2024, 2, 10), ""],
    ["ERP Upgrade", "Systems", "Active", "Finance", "John Roe", "Medium", "No", "3/1/2024", "", "phase 1"],
    ["", "Digital", "At Risk", "Ops", "", "Low", "Yes", "", "", "blank name"],
    ["Vendor Audit", "Compliance", "At Risk", "Finance", "", "", "No", "", "4/30/2024", ""],
]


@pytest.fixture
def memory_store() -> InMemorySheetStore:
    return InMemorySheetStore(DEFAULT_HEADERS, SAMPLE_ROWS)


@pytest.fixture
def workbook_store(tmp_path: Path) -> ExcelSheetStore:
    store = ExcelSheetStore(tmp_path / "projects.xlsx", "Projects", create_headers=DEFAULT_HEADERS)
    for row in SAMPLE_ROWS:
        store.append_row(row)
    return store


@pytest.fixture
def client(memory_store: InMemorySheetStore):
    from api.main import app, get_store

    app.dependency_overrides[get_store] = lambda: memory_store
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()
