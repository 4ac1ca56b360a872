"""Data models used across the report builders, CLI, and API."""
from __future__ import annotations

from enum import Enum
from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .utils import format_currency, format_number, format_qty, format_text, to_number, to_text


class OrderItem(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True, frozen=True)

    description: Optional[str] = None
    variation: Optional[str] = None
    quantity: Optional[float] = None
    unit_price: Optional[float] = Field(default=None, alias="unitPrice")
    total: Optional[float] = None
    sku: Optional[str] = None

    @field_validator("quantity", "unit_price", "total", mode="before")
    @classmethod
    def _coerce_number(cls, value: Any) -> Optional[float]:
        return to_number(value)

    @field_validator("description", "variation", "sku", mode="before")
    @classmethod
    def _coerce_text(cls, value: Any) -> Optional[str]:
        return to_text(value)


class OrderData(BaseModel):
    """One scanned waybill, as returned by the extraction service."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    invoice_number: Optional[str] = Field(default=None, alias="invoiceNumber")
    date: Optional[str] = None
    customer_name: Optional[str] = Field(default=None, alias="customerName")
    customer_address: Optional[str] = Field(default=None, alias="customerAddress")
    customer_email: Optional[str] = Field(default=None, alias="customerEmail")
    items: List[OrderItem] = Field(default_factory=list)
    subtotal: Optional[float] = None
    tax: Optional[float] = None
    shipping_cost: Optional[float] = Field(default=None, alias="shippingCost")
    grand_total: Optional[float] = Field(default=None, alias="grandTotal")
    currency: Optional[str] = None
    tracking_number: Optional[str] = Field(default=None, alias="trackingNumber")
    carrier: Optional[str] = None
    weight: Optional[str] = None

    @field_validator("subtotal", "tax", "shipping_cost", "grand_total", mode="before")
    @classmethod
    def _coerce_number(cls, value: Any) -> Optional[float]:
        return to_number(value)

    @field_validator(
        "invoice_number",
        "date",
        "customer_name",
        "customer_address",
        "customer_email",
        "currency",
        "tracking_number",
        "carrier",
        "weight",
        mode="before",
    )
    @classmethod
    def _coerce_text(cls, value: Any) -> Optional[str]:
        return to_text(value)

    @field_validator("items", mode="before")
    @classmethod
    def _coerce_items(cls, value: Any) -> List[Any]:
        if not isinstance(value, (list, tuple)):
            return []
        return [item for item in value if isinstance(item, (dict, OrderItem))]


class CarrierCategory(str, Enum):
    SPX = "spx"
    JNT = "jnt"
    FLASH = "flash"
    LEX = "lex"
    NINJA = "ninja"
    KERRY = "kerry"
    UNKNOWN = "unknown"


class WaybillRow(BaseModel):
    line_no: int
    order_id: str
    customer_name: str
    customer_address: str
    carrier: str
    status: str = "Ready"
    carrier_category: CarrierCategory = CarrierCategory.UNKNOWN


class AggregateRow(BaseModel):
    name: str
    order_ids: str
    product_name: str
    variation: str
    qty: Union[float, str]
    # Name and order ids are only shown on the first row of each customer
    is_first_row_for_customer: bool

    @property
    def qty_display(self) -> str:
        return self.qty if isinstance(self.qty, str) else format_number(self.qty)


class ProductSummary(BaseModel):
    name: str
    variation: str
    total_qty: float = 0


class ConsolidatedCustomer(BaseModel):
    name: str
    order_ids: List[str] = Field(default_factory=list)
    items: List[OrderItem] = Field(default_factory=list)

    @property
    def order_ids_display(self) -> str:
        return ", ".join(self.order_ids)


class AggregateReport(BaseModel):
    customers: List[ConsolidatedCustomer] = Field(default_factory=list)
    rows: List[AggregateRow] = Field(default_factory=list)
    summary: List[ProductSummary] = Field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        return not self.rows


class InvoiceRow(BaseModel):
    customer_name: Optional[str] = None
    order_id: Optional[str] = None
    product_name: Optional[str] = None
    variation: Optional[str] = None
    qty: float = 0
    unit_price: float = 0
    total_price: float = 0
    net_vat: float = 0
    vat: float = 0
    currency: str = ""

    def display(self) -> Dict[str, str]:
        """Formatted cells for table rendering; zero amounts and blanks show as '-'."""
        return {
            "customer_name": format_text(self.customer_name),
            "order_id": format_text(self.order_id),
            "product_name": format_text(self.product_name),
            "variation": format_text(self.variation),
            "qty": format_qty(self.qty),
            "unit_price": format_currency(self.unit_price, self.currency),
            "total_price": format_currency(self.total_price, self.currency),
            "net_vat": format_currency(self.net_vat, self.currency),
            "vat": format_currency(self.vat, self.currency),
        }
