from waybill_reports.schemas import OrderData, OrderItem
from waybill_reports.utils import collation_key, format_currency, format_money, format_qty, format_text, to_number


def test_camel_case_and_snake_case_are_both_accepted():
    camel = OrderData.model_validate({"invoiceNumber": "X1", "customerName": "Eve", "shippingCost": 45})
    snake = OrderData.model_validate({"invoice_number": "X1", "customer_name": "Eve", "shipping_cost": 45})
    assert camel == snake
    assert camel.shipping_cost == 45


def test_non_numeric_values_are_treated_as_missing():
    item = OrderItem.model_validate({"description": "Cap", "quantity": "abc", "unitPrice": {"v": 1}, "total": True})
    assert item.quantity is None
    assert item.unit_price is None
    assert item.total is None


def test_numeric_strings_are_parsed():
    item = OrderItem.model_validate({"quantity": "3", "unitPrice": "1,200.50", "total": "64,00"})
    assert item.quantity == 3
    assert item.unit_price == 1200.5
    assert item.total == 64


def test_items_default_to_empty_and_skip_non_objects():
    assert OrderData.model_validate({"items": None}).items == []
    order = OrderData.model_validate({"items": ["junk", {"description": "Cap"}]})
    assert [i.description for i in order.items] == ["Cap"]


def test_numeric_text_fields_are_stringified():
    order = OrderData.model_validate({"invoiceNumber": 5781234, "customerName": ["nope"]})
    assert order.invoice_number == "5781234"
    assert order.customer_name is None


def test_to_number_rejects_nan_and_inf():
    assert to_number(float("nan")) is None
    assert to_number("inf") is None


def test_display_formatters():
    assert format_currency(0, "₱") == "-"
    assert format_currency(None, "₱") == "-"
    assert format_currency(20, "₱") == "₱20.00"
    assert format_money(None) == "0.00"
    assert format_money(2.4) == "2.40"
    assert format_text("") == "-"
    assert format_qty(0) == "-"
    assert format_qty(3.0) == "3"


def test_collation_ignores_case_and_accents():
    names = ["banana", "Cherry", "éclair", "Apple"]
    assert sorted(names, key=collation_key) == ["Apple", "banana", "Cherry", "éclair"]


def test_money_rounds_exact_halves_up():
    assert format_money(0.125) == "0.13"
    assert format_money(0.375) == "0.38"
    assert format_currency(0.125, "₱") == "₱0.13"
    # 2.675 is stored just below the half, so it stays at 2.67
    assert format_money(2.675) == "2.67"
