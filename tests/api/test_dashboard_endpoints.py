#!/usr/bin/env python3
"""API tests for the dashboard endpoint.

The metrics engine itself is covered by unit tests; these check
authentication, the store round trip and the response shape.
"""

from datetime import date, timedelta


def test_health_reports_version(test_client) -> None:
    response = test_client.get("/health")

    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "healthy"
    assert "version" in data


def test_dashboard_requires_token(test_client) -> None:
    response = test_client.get("/v1/dashboard")

    assert response.status_code == 401


def test_dashboard_rejects_invalid_token(test_client) -> None:
    response = test_client.get("/v1/dashboard", headers={"Authorization": "Bearer nope"})

    assert response.status_code == 401


def test_dashboard_without_business_asks_for_setup(test_client, fake_store, auth_headers) -> None:
    fake_store.business = None

    response = test_client.get("/v1/dashboard", headers=auth_headers)

    assert response.status_code == 404
    assert response.json()["detail"] == "Business setup required"


def test_dashboard_empty_history(test_client, auth_headers) -> None:
    response = test_client.get("/v1/dashboard", headers=auth_headers)

    assert response.status_code == 200
    data = response.json()
    assert data["business_name"] == "Padaria Central"
    assert data["metrics"]["last_entry"] is None
    assert data["metrics"]["month_total"] == 0
    assert data["metrics"]["insights"] == []
    assert data["goal_pace"]["pace_pct"] is None
    assert data["banner"] is None
    assert data["recent_entries"] == []


def test_dashboard_with_entries_and_goal(test_client, fake_store, auth_headers) -> None:
    fake_store.settings = fake_store.settings.model_copy(update={"target_monthly_revenue": 30000.0})
    for day in range(1, 4):
        fake_store.add_entry(f"2024-04-{day:02d}", 1000.0)

    response = test_client.get("/v1/dashboard", headers=auth_headers)

    assert response.status_code == 200
    data = response.json()
    metrics = data["metrics"]
    assert metrics["last_entry"]["entry_date"] == "2024-04-03"
    assert metrics["month_total"] == 3000
    assert metrics["last7_revenue_avg"] == 1000
    assert metrics["last_vs28_pct"] == 0
    assert [i["title"] for i in metrics["insights"]] == ["Construindo referência"]
    assert metrics["insights"][0]["level"] == "warning"

    pace = data["goal_pace"]
    assert pace["projected_month_total"] == 30000
    assert pace["goal_pct"] == 10
    assert pace["pace_status"] == "success"

    assert data["target_monthly_revenue"] == 30000
    assert data["banner"]["title"] == "Ritmo do mês"
    assert data["banner"]["message"].endswith("R$ 30.000,00 (estimativa preliminar).")


def test_dashboard_lists_latest_ten_entries_newest_first(test_client, fake_store, auth_headers) -> None:
    start = date(2024, 3, 1)
    for offset in range(15):
        fake_store.add_entry((start + timedelta(days=offset)).isoformat(), 100.0 + offset)

    response = test_client.get("/v1/dashboard", headers=auth_headers)

    recent = response.json()["recent_entries"]
    assert len(recent) == 10
    assert recent[0]["entry_date"] == "2024-03-15"
    assert recent[-1]["entry_date"] == "2024-03-06"


def test_dashboard_store_failure_is_bad_gateway(test_client, fake_store, auth_headers) -> None:
    fake_store.fail = True

    response = test_client.get("/v1/dashboard", headers=auth_headers)

    assert response.status_code == 502
