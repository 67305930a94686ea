"""Tests for the HTTP surface."""

from decimal import Decimal

import pytest
from fastapi.testclient import TestClient

from amortizer.api.app import app


@pytest.fixture
def client():
    return TestClient(app)


@pytest.fixture
def interest_only_body():
    return {
        "loan_amount": 10000,
        "interest_rate": 10,
        "start_date": "2018-01-10",
        "adjustment_date": "2018-01-15",
        "term_in_months": 12,
        "interest_only": True,
        "payment_frequency": 12,
    }


@pytest.fixture
def amortized_body():
    return {
        "loan_amount": 10000,
        "interest_rate": 10,
        "start_date": "2018-01-01",
        "adjustment_date": "2018-01-01",
        "term_in_months": 12,
        "amortization_period_months": 240,
        "compounding_periods_per_year": 2,
        "payment_frequency": 24,
    }


class TestHealth:
    def test_ok(self, client):
        resp = client.get("/health")
        assert resp.status_code == 200
        assert resp.json() == {"status": "ok"}


class TestFrequencies:
    def test_list(self, client):
        resp = client.get("/api/v1/frequencies")
        assert resp.status_code == 200
        data = resp.json()
        assert [f["periods_per_year"] for f in data] == [52, 26, 24, 12, 6, 4, 2, 1]
        assert data[3] == {"periods_per_year": 12, "label": "monthly", "is_compounding_period": True}


class TestPeriodicPayment:
    def test_interest_only(self, client, interest_only_body):
        resp = client.post("/api/v1/periodic-payment", json=interest_only_body)
        assert resp.status_code == 200
        assert Decimal(resp.json()["periodic_payment"]) == Decimal("83.34")

    def test_amortized(self, client, amortized_body):
        amortized_body["payment_frequency"] = 12
        resp = client.post("/api/v1/periodic-payment", json=amortized_body)
        assert Decimal(resp.json()["periodic_payment"]) == Decimal("95.17")

    def test_unsupported_frequency(self, client, amortized_body):
        amortized_body["payment_frequency"] = 3
        resp = client.post("/api/v1/periodic-payment", json=amortized_body)
        assert resp.status_code == 400
        assert "payment_frequency" in resp.json()["detail"]


class TestPerDiem:
    def test_per_diem(self, client):
        resp = client.post("/api/v1/per-diem", json={"loan_amount": 10000, "interest_rate": 10})
        assert resp.status_code == 200
        assert Decimal(resp.json()["per_diem"]) == Decimal("2.74")

    def test_missing_amount(self, client):
        resp = client.post("/api/v1/per-diem", json={"interest_rate": 10})
        assert resp.status_code == 400
        assert "loan_amount" in resp.json()["detail"]

    def test_malformed_amount(self, client):
        resp = client.post("/api/v1/per-diem", json={"loan_amount": "lots", "interest_rate": 10})
        assert resp.status_code == 422


class TestPayments:
    def test_interest_only_schedule(self, client, interest_only_body):
        resp = client.post("/api/v1/payments", json=interest_only_body)
        assert resp.status_code == 200
        data = resp.json()

        payments = data["payments"]
        assert len(payments) == 13
        assert payments[0]["payment_number"] == 0
        assert payments[0]["date"] == "2018-01-15"
        assert Decimal(payments[0]["interest"]) == Decimal("13.70")
        assert payments[1]["date"] == "2018-02-15"
        assert Decimal(payments[12]["balance"]) == Decimal("10000")

        summary = data["summary"]
        assert summary["payment_count"] == 12
        assert Decimal(summary["total_interest"]) == Decimal("1013.78")
        assert summary["paid_off"] is False
        assert [y["year"] for y in data["yearly"]] == [2018, 2019]

    def test_semi_monthly_schedule(self, client, amortized_body):
        resp = client.post("/api/v1/payments", json=amortized_body)
        assert resp.status_code == 200
        last = resp.json()["payments"][24]
        assert last["date"] == "2019-01-01"
        assert Decimal(last["interest"]) == Decimal("40.09")
        assert Decimal(last["principal"]) == Decimal("7.40")
        assert Decimal(last["balance"]) == Decimal("9830.33")

    def test_adjustment_before_start(self, client, interest_only_body):
        interest_only_body["adjustment_date"] = "2018-01-01"
        resp = client.post("/api/v1/payments", json=interest_only_body)
        assert resp.status_code == 400
        assert "adjustment_date" in resp.json()["detail"]


class TestOutOfRangeInput:
    def test_tiny_rate(self, client, amortized_body):
        amortized_body["interest_rate"] = "1e-30"
        amortized_body["payment_frequency"] = 12
        resp = client.post("/api/v1/periodic-payment", json=amortized_body)
        assert resp.status_code == 200
        assert Decimal(resp.json()["periodic_payment"]) == Decimal("833.34")

    def test_tiny_rate_schedule(self, client, amortized_body):
        amortized_body["interest_rate"] = "1e-30"
        resp = client.post("/api/v1/payments", json=amortized_body)
        assert resp.status_code == 200
        assert resp.json()["summary"]["paid_off"] is True

    def test_huge_amount(self, client):
        resp = client.post("/api/v1/per-diem", json={"loan_amount": "1e30", "interest_rate": 10})
        assert resp.status_code == 400
        assert "loan_amount" in resp.json()["detail"]

    def test_product_beyond_cent_precision(self, client):
        resp = client.post("/api/v1/per-diem", json={"loan_amount": "1e25", "interest_rate": "1e25"})
        assert resp.status_code == 400
