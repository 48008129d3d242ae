"""Tests for the REST endpoints."""

import pytest
from fastapi.testclient import TestClient

from pathwise.api.app import app


@pytest.fixture
def client():
    return TestClient(app)


def _loan(**overrides) -> dict:
    raw = {
        "Id": "loan-1",
        "Provider": "Bank",
        "Name": "Car",
        "InterestRate": 6,
        "Principal": 10000,
        "StartDate": "2025-01-01",
        "EndDate": "2025-12-01",
    }
    raw.update(overrides)
    return raw


def _investment(**overrides) -> dict:
    raw = {
        "Id": "inv-1",
        "Provider": "Brokerage",
        "Name": "Index",
        "StartDate": "2025-01-01",
        "StartingBalance": 10000,
        "AverageReturnRate": 4.23,
        "CompoundingPeriod": "annually",
    }
    raw.update(overrides)
    return raw


class TestHealth:
    def test_health(self, client):
        resp = client.get("/health")
        assert resp.status_code == 200
        assert resp.json() == {"status": "ok"}


class TestLoanRoutes:
    def test_payment(self, client):
        resp = client.post(
            "/api/v1/loans/payment",
            json={"principal": 10000, "interest_rate": 6, "term_count": 12},
        )
        assert resp.status_code == 200
        assert resp.json() == {"monthly_payment": 860.66, "computable": True}

    def test_payment_not_computable(self, client):
        resp = client.post(
            "/api/v1/loans/payment",
            json={"principal": 10000, "interest_rate": 0, "term_count": 12},
        )
        assert resp.json()["computable"] is False

    def test_schedule_derives_payment(self, client):
        resp = client.post("/api/v1/loans/schedule", json={"loan": _loan(), "term_limit": 2})
        assert resp.status_code == 200
        body = resp.json()
        assert body["monthly_payment"] == 860.66
        assert len(body["schedule"]) == 2
        assert body["schedule"][0] == {
            "Term": 1,
            "PrincipalPayment": 810.66,
            "InterestPayment": 50.0,
            "RemainingBalance": 9189.34,
        }

    def test_schedule_rejects_bad_loan(self, client):
        resp = client.post("/api/v1/loans/schedule", json={"loan": _loan(EndDate="2024-01-01")})
        assert resp.status_code == 422

    def test_pit(self, client):
        resp = client.post("/api/v1/loans/pit", json={"loan": _loan(), "as_of": "2025-07-01"})
        body = resp.json()
        assert body["paid_terms"] == 7
        assert body["remaining_terms"] == 5


class TestInvestmentRoutes:
    def test_growth(self, client):
        resp = client.post(
            "/api/v1/investments/growth",
            json={"investment": _investment(), "end_date": "2030-01-01"},
        )
        growth = resp.json()["growth"]
        assert len(growth) == 6
        assert growth[-1]["TotalValue"] == 12301.66

    def test_pit(self, client):
        resp = client.post(
            "/api/v1/investments/pit",
            json={"investment": _investment(), "as_of": "2026-01-01"},
        )
        body = resp.json()
        assert body["current_periods"] == 2
        assert body["current_value"] == 10423.0
        assert body["projected_annual_return"] == 4.23


class TestVisualizationRoute:
    def test_series(self, client):
        resp = client.post(
            "/api/v1/visualization",
            json={
                "loans": [_loan()],
                "investments": [_investment()],
                "start_date": "2025-01-01",
                "end_date": "2026-01-01",
                "cadence": "monthly",
            },
        )
        assert resp.status_code == 200
        points = resp.json()
        assert len(points) == 13
        assert points[0]["loan_values"] == {"loan-1": 10000.0}
        assert points[-1]["overall_position"] == 10423.0


class TestPortfolioRoutes:
    def test_import(self, client):
        resp = client.post(
            "/api/v1/portfolio/import",
            json={"loans": [_loan()], "investments": [_investment(RecurringContribution=50)]},
        )
        assert resp.status_code == 200
        assert resp.json()["investments"][0]["ContributionFrequency"] == "monthly"

    def test_import_reports_message(self, client):
        resp = client.post(
            "/api/v1/portfolio/import",
            json={"loans": [_loan(Id="")], "investments": []},
        )
        assert resp.status_code == 422
        assert resp.json()["detail"].startswith("Invalid or missing ID in loan at index 0")

    def test_merge(self, client):
        resp = client.post(
            "/api/v1/portfolio/merge",
            json={
                "existing": {"loans": [_loan()], "investments": []},
                "imported": {
                    "loans": [_loan(Name="Car (refi)"), _loan(Id="loan-2")],
                    "investments": [_investment()],
                },
            },
        )
        body = resp.json()
        assert body["loans_result"] == {"added": 1, "updated": 1}
        assert body["investments_result"] == {"added": 1, "updated": 0}
        assert [loan["Name"] for loan in body["loans"]] == ["Car (refi)", "Car"]
