import pytest
from fastapi.testclient import TestClient

from src.api.app import app


@pytest.fixture
def client() -> TestClient:
    return TestClient(app)


class TestHealth:
    def test_ok(self, client):
        assert client.get("/health").json() == {"status": "ok"}


class TestScheduleRoute:
    def test_zero_rate(self, client):
        resp = client.post(
            "/api/v1/emi/schedule",
            json={"principal": 120000, "annual_rate_percent": 0, "term_months": 12},
        )
        assert resp.status_code == 200
        body = resp.json()
        assert body["payment"] == 10000
        assert body["total_interest"] == 0
        assert body["total_amount"] == 120000
        assert len(body["entries"]) == 12
        assert body["entries"][0] == {
            "month": 1,
            "payment": 10000,
            "principal": 10000,
            "interest": 0,
            "balance": 110000,
        }
        assert len(body["yearly"]) == 1

    def test_mortgage(self, client):
        resp = client.post(
            "/api/v1/emi/schedule",
            json={"principal": 400000, "annual_rate_percent": 7, "term_months": 360},
        )
        body = resp.json()
        assert body["payment"] == pytest.approx(2661.21, abs=0.01)
        assert body["principal_share"] + body["interest_share"] == pytest.approx(100)
        assert body["entries"][-1]["balance"] == 0
        assert len(body["yearly"]) == 30

    def test_schema_validation(self, client):
        resp = client.post(
            "/api/v1/emi/schedule",
            json={"principal": -1, "annual_rate_percent": 7, "term_months": 12},
        )
        assert resp.status_code == 422

    def test_engine_error_maps_to_422(self, client):
        resp = client.post(
            "/api/v1/emi/schedule",
            json={"principal": 1000, "annual_rate_percent": 1e300, "term_months": 360},
        )
        assert resp.status_code == 422
        assert "overflows" in resp.json()["detail"]


class TestExportRoute:
    def test_csv_download(self, client):
        resp = client.post(
            "/api/v1/emi/schedule/export",
            json={"principal": 120000, "annual_rate_percent": 0, "term_months": 12},
        )
        assert resp.status_code == 200
        assert resp.headers["content-type"].startswith("text/csv")
        assert "emi-breakdown.csv" in resp.headers["content-disposition"]
        lines = resp.text.split("\n")
        assert lines[0] == "Month,Payment,Principal,Interest,Balance"
        assert lines[-1] == "12,10000.00,10000.00,0.00,0.00"


class TestSolverRoutes:
    def test_max_principal(self, client):
        resp = client.post(
            "/api/v1/emi/solve/principal",
            json={"target_payment": 1000, "annual_rate_percent": 0, "term_months": 12},
        )
        assert resp.json() == {"principal": 12000}

    def test_tenure(self, client):
        resp = client.post(
            "/api/v1/emi/solve/tenure",
            json={"principal": 100000, "target_payment": 5000, "annual_rate_percent": 8.5},
        )
        body = resp.json()
        assert body["whole_months"] == 22
        assert body["tenure"] == pytest.approx(21.64, abs=0.01)

    def test_unamortizable(self, client):
        resp = client.post(
            "/api/v1/emi/solve/tenure",
            json={"principal": 100000, "target_payment": 500, "annual_rate_percent": 12},
        )
        assert resp.status_code == 422
        assert "never be repaid" in resp.json()["detail"]


class TestCalculateRoute:
    def test_emi_mode_in_years(self, client):
        resp = client.post(
            "/api/v1/emi/calculate",
            json={
                "calculation_type": "emi",
                "loan_amount": 400000,
                "interest_rate": 7,
                "loan_tenure": 30,
                "tenure_unit": "years",
            },
        )
        assert resp.status_code == 200
        body = resp.json()
        assert body["term_months"] == 360
        assert body["solved_tenure"] is None

    def test_tenure_mode(self, client):
        resp = client.post(
            "/api/v1/emi/calculate",
            json={
                "calculation_type": "tenure",
                "loan_amount": 100000,
                "interest_rate": 8.5,
                "target_emi": 5000,
            },
        )
        body = resp.json()
        assert body["term_months"] == 22
        assert body["schedule"]["payment"] <= 5000

    def test_rate_out_of_bounds(self, client):
        resp = client.post(
            "/api/v1/emi/calculate",
            json={"loan_amount": 1000, "interest_rate": 75, "loan_tenure": 12},
        )
        assert resp.status_code == 422

    def test_unknown_mode(self, client):
        resp = client.post(
            "/api/v1/emi/calculate",
            json={"calculation_type": "flat", "loan_amount": 1000, "loan_tenure": 12},
        )
        assert resp.status_code == 422
