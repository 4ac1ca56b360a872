"""Customer and product aggregation over a batch of scanned orders."""
from __future__ import annotations

import logging
from typing import Dict, List, Sequence, Tuple

from .csv_encoder import encode_row, to_csv
from .schemas import (
    AggregateReport,
    AggregateRow,
    ConsolidatedCustomer,
    OrderData,
    OrderItem,
    ProductSummary,
)
from .utils import NOT_AVAILABLE, UNKNOWN_CUSTOMER, UNKNOWN_PRODUCT, collation_key

logger = logging.getLogger(__name__)

AGGREGATE_HEADER = ["Name", "Order ID", "Product Name", "Variation", "QTY"]
SUMMARY_TITLE = "Final Product Release Summary"
SUMMARY_HEADER = ["Product Name", "Variation", "Final Release Qty"]


class CustomerAggregator:
    """Group orders by customer name and items by product + variation."""

    def __init__(
        self,
        unknown_customer: str = UNKNOWN_CUSTOMER,
        unknown_product: str = UNKNOWN_PRODUCT,
        placeholder: str = NOT_AVAILABLE,
    ) -> None:
        self.unknown_customer = unknown_customer
        self.unknown_product = unknown_product
        self.placeholder = placeholder

    def aggregate(self, orders: Sequence[OrderData]) -> AggregateReport:
        customers: Dict[str, ConsolidatedCustomer] = {}
        products: Dict[Tuple[str, str], ProductSummary] = {}

        for order in orders:
            name = self.customer_key(order)
            customer = customers.get(name)
            if customer is None:
                customer = customers[name] = ConsolidatedCustomer(name=name)

            if order.invoice_number and order.invoice_number not in customer.order_ids:
                customer.order_ids.append(order.invoice_number)

            customer.items.extend(order.items)
            for item in order.items:
                self._add_to_summary(products, item)

        report = AggregateReport(
            customers=list(customers.values()),
            rows=self._flatten(customers.values()),
            summary=sorted(products.values(), key=lambda p: collation_key(p.name)),
        )
        logger.debug(
            "Aggregated %d orders into %d customers and %d products",
            len(orders),
            len(report.customers),
            len(report.summary),
        )
        return report

    def customer_key(self, order: OrderData) -> str:
        return (order.customer_name or "").strip() or self.unknown_customer

    def _add_to_summary(self, products: Dict[Tuple[str, str], ProductSummary], item: OrderItem) -> None:
        variation = item.variation or self.placeholder
        key = (item.description or "", variation)
        summary = products.get(key)
        if summary is None:
            summary = products[key] = ProductSummary(
                name=item.description or self.unknown_product,
                variation=variation,
            )
        summary.total_qty += item.quantity or 0

    def _flatten(self, customers) -> List[AggregateRow]:
        rows: List[AggregateRow] = []
        for customer in customers:
            order_ids = customer.order_ids_display or self.placeholder
            if not customer.items:
                rows.append(
                    AggregateRow(
                        name=customer.name,
                        order_ids=order_ids,
                        product_name=self.placeholder,
                        variation=self.placeholder,
                        qty=self.placeholder,
                        is_first_row_for_customer=True,
                    )
                )
                continue
            for idx, item in enumerate(customer.items):
                rows.append(
                    AggregateRow(
                        name=customer.name,
                        order_ids=order_ids,
                        product_name=item.description or self.placeholder,
                        variation=item.variation or self.placeholder,
                        qty=item.quantity or self.placeholder,
                        is_first_row_for_customer=idx == 0,
                    )
                )
        return rows


def build_aggregate(orders: Sequence[OrderData]) -> AggregateReport:
    return CustomerAggregator().aggregate(orders)


def aggregate_csv(orders: Sequence[OrderData]) -> str:
    """Customer rows, two blank lines, then the product release summary block."""
    report = build_aggregate(orders)
    main = to_csv(
        AGGREGATE_HEADER,
        ([row.name, row.order_ids, row.product_name, row.variation, row.qty] for row in report.rows),
    )
    summary_lines = [encode_row([p.name, p.variation, p.total_qty]) for p in report.summary]
    return "\n".join([main, "", "", SUMMARY_TITLE, ",".join(SUMMARY_HEADER), *summary_lines])
