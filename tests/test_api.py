import pytest
from fastapi.testclient import TestClient

from waybill_reports.api import app


@pytest.fixture
def client():
    return TestClient(app)


def test_health(client):
    assert client.get("/health").json() == {"status": "ok"}


def test_waybill_endpoint(client, mixed_payload):
    rows = client.post("/reports/waybill", json=mixed_payload).json()
    assert [row["line_no"] for row in rows] == [1, 2, 3, 4, 5]
    assert rows[0]["carrier_category"] == "spx"
    assert rows[1]["order_id"] == "N/A"


def test_aggregate_endpoint(client, bob_payload):
    body = client.post("/reports/aggregate", json=bob_payload).json()
    assert [row["order_ids"] for row in body["rows"]] == ["A1, A2", "A1, A2"]
    assert [row["is_first_row_for_customer"] for row in body["rows"]] == [True, False]
    assert body["summary"] == [{"name": "Shirt", "variation": "Red", "total_qty": 5}]


def test_invoice_endpoint(client, bob_payload):
    rows = client.post("/reports/invoice", json=bob_payload).json()
    assert len(rows) == 2
    assert rows[1]["total_price"] == 30
    assert rows[1]["net_vat"] == pytest.approx(3.6)


def test_empty_input(client):
    assert client.post("/reports/waybill", json=[]).json() == []
    assert client.post("/reports/invoice", json=[]).json() == []
    body = client.post("/reports/aggregate", json=[]).json()
    assert body["rows"] == [] and body["summary"] == []


@pytest.mark.parametrize(
    "kind, filename",
    [
        ("waybill", "waybill_report.csv"),
        ("aggregate", "aggregate_report.csv"),
        ("invoice", "invoice_list_report.csv"),
    ],
)
def test_csv_download(client, bob_payload, kind, filename):
    response = client.post(f"/reports/{kind}/csv", json=bob_payload)
    assert response.status_code == 200
    assert response.headers["content-type"].startswith("text/csv")
    assert filename in response.headers["content-disposition"]
    assert response.text.startswith(("Line No", "Name", "Customer Name"))


def test_unknown_report_kind_is_rejected(client, bob_payload):
    assert client.post("/reports/shipping/csv", json=bob_payload).status_code == 422


def test_non_list_body_is_rejected(client):
    assert client.post("/reports/waybill", json={"invoiceNumber": "A1"}).status_code == 422
