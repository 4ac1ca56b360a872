"""FastAPI application exposing the report endpoints."""
from __future__ import annotations

import logging
from typing import List

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import Response

from .aggregator import build_aggregate
from .invoices import build_invoice_rows
from .reports import REPORT_FILENAMES, ReportKind, render_csv
from .schemas import AggregateReport, InvoiceRow, OrderData, WaybillRow
from .settings import get_settings
from .waybill import build_waybill_rows

logger = logging.getLogger(__name__)

app = FastAPI(title="Waybill Report Service", version="0.1.0")

# Browser front-end posts extracted orders from another origin
app.add_middleware(
    CORSMiddleware,
    allow_origins=get_settings().cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok"}


@app.post("/reports/waybill", response_model=List[WaybillRow])
def waybill_report(orders: List[OrderData]):
    return build_waybill_rows(orders)


@app.post("/reports/aggregate", response_model=AggregateReport)
def aggregate_report(orders: List[OrderData]):
    return build_aggregate(orders)


@app.post("/reports/invoice", response_model=List[InvoiceRow])
def invoice_report(orders: List[OrderData]):
    return build_invoice_rows(orders)


@app.post("/reports/{kind}/csv")
def report_csv(kind: ReportKind, orders: List[OrderData]) -> Response:
    """Same rows as the JSON endpoints, as a CSV download."""
    filename = REPORT_FILENAMES[kind]
    logger.info("Rendering %s for %d orders", filename, len(orders))
    return Response(
        content=render_csv(kind, orders),
        media_type="text/csv; charset=utf-8",
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )
