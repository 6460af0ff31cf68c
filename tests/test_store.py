from __future__ import annotations

from datetime import datetime
from pathlib import Path

import pytest
from openpyxl import Workbook, load_workbook

from core import service
from core.config import DEFAULT_HEADERS
from core.errors import WriteError
from core.store import ExcelSheetStore, InMemorySheetStore, coerce_cell


def test_coerce_cell():
    assert coerce_cell(None) == ""
    assert coerce_cell(3) == 3
    assert coerce_cell(datetime(2024, 1, 1)) == datetime(2024, 1, 1)
    assert coerce_cell(Path("x")) == "x"


def test_in_memory_set_cell_bounds():
    store = InMemorySheetStore(["A"], [["x"]])
    with pytest.raises(WriteError):
        store.set_cell(3, 1, "y")
    with pytest.raises(WriteError):
        store.set_cell(2, 0, "y")
    store.set_cell(2, 3, "z")
    assert store.get_data_rows() == [["x", "", "z"]]


def test_workbook_created_with_default_headers(tmp_path: Path):
    store = ExcelSheetStore(tmp_path / "new" / "projects.xlsx", "Projects", create_headers=DEFAULT_HEADERS)
    assert store.sheet_exists("Projects")
    assert not store.sheet_exists("Other")
    assert store.get_header_row() == DEFAULT_HEADERS
    assert store.get_data_rows() == []


def test_workbook_round_trip(workbook_store: ExcelSheetStore):
    payload = service.get_projects(workbook_store)
    assert [r["rowIndex"] for r in payload["data"]] == [2, 3, 5]
    assert payload["data"][0]["startDate"] == "1/15/2024"
    assert payload["data"][1]["startDate"] == "3/1/2024"


def test_workbook_writes_persist(workbook_store: ExcelSheetStore):
    assert service.update_cell(workbook_store, 3, "notes", "phase 2") == {"success": True}
    assert service.add_project(workbook_store, {"projectActivityName": "Roadmap"}) == {"success": True, "rowIndex": 6}

    reopened = ExcelSheetStore(workbook_store.path, "Projects")
    assert reopened.get_cell(3, 10) == "phase 2"
    assert reopened.get_cell(6, 1) == "Roadmap"


def test_workbook_write_out_of_range(workbook_store: ExcelSheetStore):
    with pytest.raises(WriteError):
        workbook_store.set_cell(50, 1, "x")


def test_workbook_missing_file(tmp_path: Path):
    store = ExcelSheetStore(tmp_path / "absent.xlsx", "Projects")
    assert service.get_projects(store)["type"] == "NotFoundError"


def test_workbook_missing_sheet(tmp_path: Path):
    path = tmp_path / "other.xlsx"
    wb = Workbook()
    wb.active.title = "Summary"
    wb.save(path)
    store = ExcelSheetStore(path, "Projects", create_headers=DEFAULT_HEADERS)
    assert service.get_summary_stats(store) == {"error": "Sheet 'Projects' not found", "type": "NotFoundError"}


def test_workbook_writes_keep_formulas(workbook_store: ExcelSheetStore):
    wb = load_workbook(workbook_store.path)
    wb["Projects"]["K1"] = "=COUNTA(A:A)"
    wb.save(workbook_store.path)

    workbook_store.set_cell(2, 3, "Done")
    assert load_workbook(workbook_store.path)["Projects"]["K1"].value == "=COUNTA(A:A)"
