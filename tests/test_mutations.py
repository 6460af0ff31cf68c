from __future__ import annotations

import pytest

from core.errors import ColumnNotFoundError, WriteError
from core.mutations import add_record, build_row, find_column, update_cell, update_status


class RejectingStore:
    sheet_name = "Projects"

    def get_header_row(self):
        return ["Project / Activity Name", "Status"]

    def set_cell(self, row, col, value):
        raise IndexError("out of range")

    def append_row(self, values):
        raise IOError("disk full")


def test_find_column(memory_store):
    assert find_column(memory_store, "projectActivityName") == 1
    assert find_column(memory_store, "helpNeeded") == 7
    with pytest.raises(ColumnNotFoundError):
        find_column(memory_store, "ProjectActivityName")


def test_build_row_follows_header_order():
    headers = ["Project / Activity Name", "Status", "Notes"]
    assert build_row(headers, {"notes": "n", "projectActivityName": "P", "extra": 1}) == ["P", "", "n"]


def test_update_status_uses_fixed_column(memory_store):
    update_status(memory_store, 5, "Complete", status_column=3)
    assert memory_store.get_cell(5, 3) == "Complete"


def test_store_faults_become_write_errors():
    store = RejectingStore()
    with pytest.raises(WriteError):
        update_cell(store, 2, "status", "Done")
    with pytest.raises(WriteError):
        add_record(store, {"projectActivityName": "P"})
