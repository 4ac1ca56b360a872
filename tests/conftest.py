import pytest

from waybill_reports.reports import parse_orders


@pytest.fixture
def bob_payload():
    return [
        {
            "invoiceNumber": "A1",
            "customerName": "Bob",
            "items": [{"description": "Shirt", "variation": "Red", "quantity": 2, "unitPrice": 10, "total": 20}],
        },
        {
            "invoiceNumber": "A2",
            "customerName": "Bob",
            "items": [{"description": "Shirt", "variation": "Red", "quantity": 3, "unitPrice": 10, "total": 30}],
        },
    ]


@pytest.fixture
def bob_orders(bob_payload):
    return parse_orders(bob_payload)


@pytest.fixture
def mixed_payload():
    return [
        {
            "invoiceNumber": "SP-100",
            "customerName": "  Ana Cruz ",
            "customerAddress": "12 Rizal St, Makati",
            "carrier": "SPX Express",
            "currency": "₱",
            "items": [
                {"description": "Mug", "variation": "Blue", "quantity": 1, "unitPrice": 150, "total": 150},
                {"description": "apron", "quantity": 2, "unitPrice": 200},
            ],
        },
        {
            "invoiceNumber": "",
            "customerName": "",
            "carrier": "Ninja Van",
            "items": [],
        },
        {
            "invoiceNumber": "SP-101",
            "customerName": "Ana Cruz",
            "carrier": "J&T Express",
            "currency": "₱",
            "items": [{"description": "Mug", "variation": "Blue", "quantity": 4, "unitPrice": 150, "total": 600}],
        },
        {
            "invoiceNumber": "SP-100",
            "customerName": "Ana Cruz",
            "items": [{"description": "Élan Tote", "variation": None, "quantity": None, "unitPrice": 99}],
        },
        {
            "invoiceNumber": "LZ-7",
            "customerName": "Dan",
            "carrier": "DHL",
            "items": [],
        },
    ]


@pytest.fixture
def mixed_orders(mixed_payload):
    return parse_orders(mixed_payload)
