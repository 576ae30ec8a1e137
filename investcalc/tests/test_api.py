from __future__ import annotations

from math import isclose

from flask.testing import FlaskClient


def plan_payload() -> dict:
    return {
        "growth": {
            "investmentAmount": 1000,
            "roiPercentage": 10,
            "duration": 12,
            "frequency": "once",
            "startDate": "2026-01-01",
        },
        "projection": {
            "frequency": "yearly",
            "duration": 3,
            "strategy": {"strategy": "take-salary", "salaryAmount": 150},
        },
    }


def test_growth_endpoint_returns_series_and_summary(client: FlaskClient):
    resp = client.post(
        "/api/growth",
        json={"investmentAmount": 1000, "roiPercentage": 10, "duration": 12, "frequency": "once"},
    )

    assert resp.status_code == 200
    body = resp.get_json()
    assert len(body["series"]) == 13
    assert body["series"][0]["date"] == "2026-01-01"
    assert body["series"][-1]["currentValue"] == 1100
    assert body["summary"]["totalReturn"] == 10.0


def test_solve_endpoint_reports_withdrawals(client: FlaskClient):
    resp = client.post(
        "/api/solve",
        json={
            "startBalance": 10000,
            "targetAmount": 10000,
            "periods": 5,
            "roiPercentage": 10,
            "frequency": "yearly",
        },
    )

    assert resp.status_code == 200
    body = resp.get_json()
    assert body["direction"] == "withdraw"
    assert isclose(body["amount"], -1000.0, rel_tol=1e-9)
    assert isclose(body["totalAmount"], 5000.0, rel_tol=1e-9)
    assert body["percentOfBalance"] == -10.0


def test_plan_endpoint_applies_strategy(client: FlaskClient):
    resp = client.post("/api/plan", json=plan_payload())

    assert resp.status_code == 200
    body = resp.get_json()
    rows = body["projections"]
    assert [row["period"] for row in rows] == [1, 2, 3]
    assert rows[1]["cashOut"] == 150
    assert rows[1]["endValue"] == 1060  # 1100 * 1.1 - 150
    assert body["projectionSummary"]["totalCashOut"] == 300
    assert body["startingBalance"] == 1000
    assert body["referenceBalance"] == 1100
    assert body["description"].startswith("Withdraw a fixed $150")


def test_plan_defaults_to_all_in(client: FlaskClient):
    payload = plan_payload()
    del payload["projection"]["strategy"]

    resp = client.post("/api/plan", json=payload)

    assert resp.status_code == 200
    rows = resp.get_json()["projections"]
    assert all(row["newCash"] == 0 and row["cashOut"] == 0 for row in rows[1:])


def test_unknown_strategy_returns_422(client: FlaskClient):
    payload = plan_payload()
    payload["projection"]["strategy"] = {"strategy": "moonshot"}

    resp = client.post("/api/plan", json=payload)

    assert resp.status_code == 422
    assert "detail" in resp.get_json()


def test_parameters_do_not_leak_between_strategies(client: FlaskClient):
    payload = plan_payload()
    payload["projection"]["strategy"] = {"strategy": "all-in", "salaryAmount": 150}

    resp = client.post("/api/plan", json=payload)

    assert resp.status_code == 422


def test_non_json_body_returns_400(client: FlaskClient):
    resp = client.post("/api/growth", data="not json", content_type="text/plain")

    assert resp.status_code == 400
    assert "detail" in resp.get_json()


def test_long_doubling_plan_does_not_error(client: FlaskClient):
    payload = plan_payload()
    payload["projection"] = {"frequency": "daily", "duration": 1100, "strategy": {"strategy": "2x"}}

    resp = client.post("/api/plan", json=payload)

    assert resp.status_code == 200
    assert len(resp.get_json()["projections"]) == 1100
