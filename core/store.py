from __future__ import annotations

import logging
from datetime import date, datetime
from pathlib import Path
from typing import List, Optional, Protocol, Sequence, Union

from openpyxl import Workbook, load_workbook
from openpyxl.worksheet.worksheet import Worksheet

from core.errors import NotFoundError, WriteError

logger = logging.getLogger(__name__)

CellValue = Union[str, int, float, bool, date, datetime]

HEADER_ROW = 1


def coerce_cell(value: object) -> CellValue:
    """Validate a raw cell at the store boundary: blanks become "", exotic types become str."""
    if value is None:
        return ""
    if isinstance(value, (str, bool, int, float, date)):
        return value
    return str(value)


class SheetStore(Protocol):
    """A 2D grid of cells addressed by 1-based (row, column); row 1 holds the headers."""

    sheet_name: str

    def sheet_exists(self, name: str) -> bool: ...

    def get_header_row(self) -> List[str]: ...

    def get_data_rows(self) -> List[List[CellValue]]: ...

    def get_cell(self, row: int, col: int) -> CellValue: ...

    def set_cell(self, row: int, col: int, value: CellValue) -> None: ...

    def append_row(self, values: Sequence[CellValue]) -> int: ...


class InMemorySheetStore:
    def __init__(self, headers: Sequence[str], rows: Optional[Sequence[Sequence[object]]] = None, *, sheet_name: str = "Projects", exists: bool = True):
        self.sheet_name = sheet_name
        self._exists = exists
        self._grid: List[List[CellValue]] = [[coerce_cell(h) for h in headers]]
        for row in rows or []:
            self._grid.append([coerce_cell(v) for v in row])

    def sheet_exists(self, name: str) -> bool:
        return self._exists and name == self.sheet_name

    def get_header_row(self) -> List[str]:
        return [str(h) for h in self._grid[0]]

    def get_data_rows(self) -> List[List[CellValue]]:
        return [list(r) for r in self._grid[1:]]

    def _check(self, row: int, col: int) -> None:
        if row < 1 or row > len(self._grid) or col < 1:
            raise WriteError(f"Invalid cell coordinates ({row}, {col})")

    def get_cell(self, row: int, col: int) -> CellValue:
        self._check(row, col)
        cells = self._grid[row - 1]
        return cells[col - 1] if col <= len(cells) else ""

    def set_cell(self, row: int, col: int, value: CellValue) -> None:
        self._check(row, col)
        cells = self._grid[row - 1]
        if col > len(cells):
            cells.extend([""] * (col - len(cells)))
        cells[col - 1] = coerce_cell(value)

    def append_row(self, values: Sequence[CellValue]) -> int:
        self._grid.append([coerce_cell(v) for v in values])
        return len(self._grid)


class ExcelSheetStore:
    """XLSX-backed store; the workbook is re-opened on every call so reads are never stale."""

    def __init__(self, path: Union[str, Path], sheet_name: str, *, create_headers: Optional[Sequence[str]] = None):
        self.path = Path(path)
        self.sheet_name = sheet_name
        if create_headers is not None and not self.path.exists():
            self._create(create_headers)

    def _create(self, headers: Sequence[str]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        wb = Workbook()
        ws = wb.active
        ws.title = self.sheet_name
        ws.append(list(headers))
        wb.save(self.path)
        logger.info("Created workbook %s with sheet %s", self.path, self.sheet_name)

    def _worksheet(self, wb: Workbook) -> Worksheet:
        if self.sheet_name not in wb.sheetnames:
            raise NotFoundError(self.sheet_name)
        return wb[self.sheet_name]

    def _load(self, for_write: bool = False) -> Workbook:
        if not self.path.exists():
            raise NotFoundError(self.sheet_name)
        # formulas must survive a save, so only reads take cached values
        return load_workbook(self.path, data_only=not for_write)

    def sheet_exists(self, name: str) -> bool:
        if not self.path.exists():
            return False
        wb = load_workbook(self.path, read_only=True)
        try:
            return name in wb.sheetnames
        finally:
            wb.close()

    def get_header_row(self) -> List[str]:
        wb = self._load()
        ws = self._worksheet(wb)
        values = next(ws.iter_rows(min_row=HEADER_ROW, max_row=HEADER_ROW, values_only=True), ())
        return ["" if v is None else str(v) for v in values]

    def get_data_rows(self) -> List[List[CellValue]]:
        wb = self._load()
        ws = self._worksheet(wb)
        if ws.max_row <= HEADER_ROW:
            return []
        return [
            [coerce_cell(v) for v in row]
            for row in ws.iter_rows(min_row=HEADER_ROW + 1, max_row=ws.max_row, max_col=ws.max_column, values_only=True)
        ]

    def get_cell(self, row: int, col: int) -> CellValue:
        wb = self._load()
        ws = self._worksheet(wb)
        if row < 1 or row > ws.max_row or col < 1:
            raise WriteError(f"Invalid cell coordinates ({row}, {col})")
        return coerce_cell(ws.cell(row=row, column=col).value)

    def set_cell(self, row: int, col: int, value: CellValue) -> None:
        wb = self._load(for_write=True)
        ws = self._worksheet(wb)
        if row < 1 or row > ws.max_row or col < 1:
            raise WriteError(f"Invalid cell coordinates ({row}, {col})")
        ws.cell(row=row, column=col, value=value)
        wb.save(self.path)

    def append_row(self, values: Sequence[CellValue]) -> int:
        wb = self._load(for_write=True)
        ws = self._worksheet(wb)
        ws.append(list(values))
        wb.save(self.path)
        return ws.max_row
