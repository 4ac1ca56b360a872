"""Invoice list: one row per order item with the fixed-rate VAT split."""
from __future__ import annotations

import logging
from typing import List, Sequence

from .csv_encoder import BareField, to_csv
from .schemas import InvoiceRow, OrderData, OrderItem
from .utils import DASH, format_money, format_number

logger = logging.getLogger(__name__)

VAT_RATE = 0.12
INVOICE_HEADER = [
    "Customer Name",
    "Order ID",
    "Product Name",
    "Variation",
    "Qty",
    "Unit Price",
    "Total Price",
    "Net VAT",
    "VAT",
]


class InvoiceFlattener:
    """Expand orders into item rows.

    Net VAT is ``vat_rate`` of the line total and VAT is the remainder, so the
    two always add back up to the total price.
    """

    def __init__(self, vat_rate: float = VAT_RATE) -> None:
        self.vat_rate = vat_rate

    def flatten(self, orders: Sequence[OrderData]) -> List[InvoiceRow]:
        rows: List[InvoiceRow] = []
        for order in orders:
            if not order.items:
                rows.append(
                    InvoiceRow(
                        customer_name=order.customer_name,
                        order_id=order.invoice_number,
                        currency=order.currency or "",
                    )
                )
                continue
            rows.extend(self._item_row(order, item) for item in order.items)
        logger.debug("Flattened %d orders into %d invoice rows", len(orders), len(rows))
        return rows

    def _item_row(self, order: OrderData, item: OrderItem) -> InvoiceRow:
        qty = item.quantity or 0
        unit_price = item.unit_price or 0
        total_price = item.total or qty * unit_price
        net_vat = total_price * self.vat_rate
        return InvoiceRow(
            customer_name=order.customer_name,
            order_id=order.invoice_number,
            product_name=item.description,
            variation=item.variation,
            qty=qty,
            unit_price=unit_price,
            total_price=total_price,
            net_vat=net_vat,
            vat=total_price - net_vat,
            currency=order.currency or "",
        )


def build_invoice_rows(orders: Sequence[OrderData]) -> List[InvoiceRow]:
    return InvoiceFlattener().flatten(orders)


def invoice_csv(orders: Sequence[OrderData]) -> str:
    return to_csv(
        INVOICE_HEADER,
        (
            [
                row.customer_name or DASH,
                row.order_id or DASH,
                row.product_name or DASH,
                row.variation or DASH,
                BareField(format_number(row.qty) if row.qty else DASH),
                format_money(row.unit_price),
                format_money(row.total_price),
                format_money(row.net_vat),
                format_money(row.vat),
            ]
            for row in build_invoice_rows(orders)
        ),
    )
