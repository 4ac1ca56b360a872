"""Waybill projection: one shipping-label row per scanned order."""
from __future__ import annotations

import logging
from typing import List, Optional, Sequence

from .csv_encoder import BareField, to_csv
from .schemas import CarrierCategory, OrderData, WaybillRow
from .utils import NOT_AVAILABLE, UNKNOWN_CARRIER, UNKNOWN_CUSTOMER

logger = logging.getLogger(__name__)

READY = "Ready"
WAYBILL_HEADER = ["Line No", "Order ID", "Customer Name", "Customer Address", "Courier Service", "Status"]

# Checked in order; first fragment contained in the carrier string wins.
CARRIER_FRAGMENTS = [
    ("SPX", CarrierCategory.SPX),
    ("J&T", CarrierCategory.JNT),
    ("FLASH", CarrierCategory.FLASH),
    ("LEX", CarrierCategory.LEX),
    ("Ninja", CarrierCategory.NINJA),
    ("Kerry", CarrierCategory.KERRY),
]


def classify_carrier(carrier: Optional[str]) -> CarrierCategory:
    """Display category for a courier name (case-sensitive substring match)."""
    if not carrier:
        return CarrierCategory.UNKNOWN
    for fragment, category in CARRIER_FRAGMENTS:
        if fragment in carrier:
            return category
    return CarrierCategory.UNKNOWN


def build_waybill_rows(orders: Sequence[OrderData]) -> List[WaybillRow]:
    rows = [
        WaybillRow(
            line_no=index,
            order_id=order.invoice_number or NOT_AVAILABLE,
            customer_name=(order.customer_name or "").strip() or UNKNOWN_CUSTOMER,
            customer_address=order.customer_address or "",
            carrier=order.carrier or UNKNOWN_CARRIER,
            status=READY,
            carrier_category=classify_carrier(order.carrier),
        )
        for index, order in enumerate(orders, start=1)
    ]
    logger.debug("Built %d waybill rows", len(rows))
    return rows


def waybill_csv(orders: Sequence[OrderData]) -> str:
    """CSV export; carries the raw extracted fields rather than display placeholders."""
    return to_csv(
        WAYBILL_HEADER,
        (
            [
                BareField(index),
                order.invoice_number,
                order.customer_name,
                order.customer_address,
                order.carrier,
                BareField(READY),
            ]
            for index, order in enumerate(orders, start=1)
        ),
    )
