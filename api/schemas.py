from __future__ import annotations

from typing import Union

from pydantic import BaseModel, Field

CellValueModel = Union[str, int, float, bool, None]


class StatusUpdateModel(BaseModel):
    status: str


class CellUpdateModel(BaseModel):
    column_key: str = Field(min_length=1)
    value: CellValueModel = ""
