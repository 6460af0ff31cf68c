from __future__ import annotations

import logging
import math
from typing import Any, Dict

import numpy as np
import pandas as pd
from fastapi import Body, Depends, FastAPI, Query
from fastapi.encoders import jsonable_encoder
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from api.schemas import CellUpdateModel, StatusUpdateModel
from core import service
from core.config import DEFAULT_HEADERS, Settings, load_settings
from core.store import ExcelSheetStore, SheetStore


app = FastAPI(title="Project Tracker API", version="0.1.0")
logger = logging.getLogger(__name__)

app.add_middleware(
    CORSMiddleware,
    allow_origins=load_settings().cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

ERROR_STATUS = {
    "NotFoundError": 404,
    "ColumnNotFoundError": 400,
    "WriteError": 400,
}


def get_settings() -> Settings:
    return load_settings()


def get_store(settings: Settings = Depends(get_settings)) -> SheetStore:
    create_headers = DEFAULT_HEADERS if settings.create_if_missing else None
    return ExcelSheetStore(settings.workbook_path, settings.sheet_name, create_headers=create_headers)


def _json(data: Dict[str, Any]) -> JSONResponse:
    """Return JSON with safe encoding for pandas/numpy objects; error payloads get a 4xx/5xx."""

    def _safe_float(value: object) -> float | None:
        try:
            out = float(value)  # type: ignore[arg-type]
        except Exception:
            return None
        if math.isnan(out) or math.isinf(out):
            return None
        return out

    status_code = 200
    if "error" in data:
        status_code = ERROR_STATUS.get(data.get("type", ""), 500)
    return JSONResponse(
        status_code=status_code,
        content=jsonable_encoder(
            data,
            custom_encoder={
                type(pd.NA): lambda _: None,
                np.integer: int,
                float: _safe_float,
                np.floating: _safe_float,
                np.bool_: bool,
                pd.Timestamp: lambda ts: ts.isoformat(),
            },
        ),
    )


@app.get("/projects")
def projects(store: SheetStore = Depends(get_store)):
    return _json(service.get_projects(store))


@app.get("/filter-options")
def filter_options(store: SheetStore = Depends(get_store)):
    return _json(service.get_filter_options(store))


@app.get("/summary-stats")
def summary_stats(store: SheetStore = Depends(get_store)):
    return _json(service.get_summary_stats(store))


@app.get("/projects/by-month")
def projects_by_month(
    month: int = Query(ge=1, le=12),
    year: int = Query(ge=1),
    store: SheetStore = Depends(get_store),
):
    return _json(service.get_projects_by_month(store, month, year))


@app.post("/projects/{row_index}/status")
def update_project_status(
    row_index: int,
    body: StatusUpdateModel,
    store: SheetStore = Depends(get_store),
    settings: Settings = Depends(get_settings),
):
    return _json(service.update_project_status(store, row_index, body.status, status_column=settings.status_column))


@app.post("/projects/{row_index}/cells")
def update_cell(row_index: int, body: CellUpdateModel, store: SheetStore = Depends(get_store)):
    value = "" if body.value is None else body.value
    return _json(service.update_cell(store, row_index, body.column_key, value))


@app.post("/projects")
def add_project(fields: Dict[str, Any] = Body(...), store: SheetStore = Depends(get_store)):
    return _json(service.add_project(store, fields))
