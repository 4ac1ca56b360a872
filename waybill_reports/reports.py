"""Loading extracted orders and exporting the three reports as CSV files."""
from __future__ import annotations

import json
import logging
from enum import Enum
from pathlib import Path
from typing import Any, Callable, Dict, List, Sequence

from pydantic import ValidationError

from .aggregator import aggregate_csv
from .invoices import invoice_csv
from .schemas import OrderData
from .waybill import waybill_csv

logger = logging.getLogger(__name__)


class ReportKind(str, Enum):
    WAYBILL = "waybill"
    AGGREGATE = "aggregate"
    INVOICE = "invoice"


# Download names users and their spreadsheets already expect.
REPORT_FILENAMES: Dict[ReportKind, str] = {
    ReportKind.WAYBILL: "waybill_report.csv",
    ReportKind.AGGREGATE: "aggregate_report.csv",
    ReportKind.INVOICE: "invoice_list_report.csv",
}

CSV_RENDERERS: Dict[ReportKind, Callable[[Sequence[OrderData]], str]] = {
    ReportKind.WAYBILL: waybill_csv,
    ReportKind.AGGREGATE: aggregate_csv,
    ReportKind.INVOICE: invoice_csv,
}


class OrderLoadError(ValueError):
    """Raised when an extraction payload cannot be read as a list of orders."""


def parse_orders(payload: Any) -> List[OrderData]:
    """Accept either a bare list of orders or an object with an ``orders`` list."""
    if isinstance(payload, dict) and "orders" in payload:
        payload = payload["orders"]
    if not isinstance(payload, list):
        raise OrderLoadError("expected a JSON list of orders")
    orders: List[OrderData] = []
    for position, item in enumerate(payload, start=1):
        if not isinstance(item, dict):
            raise OrderLoadError(f"order #{position} is not a JSON object")
        try:
            orders.append(OrderData.model_validate(item))
        except ValidationError as exc:
            raise OrderLoadError(f"order #{position} is malformed: {exc}") from exc
    return orders


def load_orders(json_path: str | Path) -> List[OrderData]:
    path = Path(json_path)
    try:
        payload = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise OrderLoadError(f"{path} is not valid JSON: {exc}") from exc
    orders = parse_orders(payload)
    logger.info("Loaded %d orders from %s", len(orders), path)
    return orders


def render_csv(kind: ReportKind, orders: Sequence[OrderData]) -> str:
    return CSV_RENDERERS[ReportKind(kind)](orders)


def export_csv(kind: ReportKind, orders: Sequence[OrderData], out_dir: str | Path) -> Path:
    kind = ReportKind(kind)
    out_dir = Path(out_dir)
    out_dir.mkdir(parents=True, exist_ok=True)
    path = out_dir / REPORT_FILENAMES[kind]
    path.write_text(render_csv(kind, orders), encoding="utf-8")
    logger.info("Wrote %s report for %d orders to %s", kind.value, len(orders), path)
    return path
