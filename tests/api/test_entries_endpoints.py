#!/usr/bin/env python3
"""API tests for recording daily entries."""

import pytest


def test_save_entry_parses_pt_br_amount(test_client, fake_store, auth_headers) -> None:
    payload = {"entry_date": "2024-03-05", "revenue": "3.300,50", "orders": "39", "notes": "   "}

    response = test_client.post("/v1/entries", json=payload, headers=auth_headers)

    assert response.status_code == 200
    data = response.json()
    assert data["entry"]["revenue"] == 3300.5
    assert data["entry"]["orders"] == 39
    assert data["entry"]["notes"] is None
    assert data["next_entry_date"] == "2024-03-06"
    assert data["message"] == "Salvo R$ 3.300,50 em 2024-03-05"
    assert fake_store.entries["2024-03-05"].business_id == "biz-1"


def test_save_entry_overwrites_same_day(test_client, fake_store, auth_headers) -> None:
    test_client.post(
        "/v1/entries",
        json={"entry_date": "2024-03-05", "revenue": 100, "orders": 2},
        headers=auth_headers,
    )
    test_client.post(
        "/v1/entries",
        json={"entry_date": "2024-03-05", "revenue": 250, "orders": 5, "notes": "promoção"},
        headers=auth_headers,
    )

    assert len(fake_store.entries) == 1
    assert fake_store.entries["2024-03-05"].revenue == 250
    assert fake_store.entries["2024-03-05"].notes == "promoção"


def test_blank_orders_count_as_zero(test_client, auth_headers) -> None:
    response = test_client.post(
        "/v1/entries",
        json={"entry_date": "2024-03-05", "revenue": "0", "orders": ""},
        headers=auth_headers,
    )

    assert response.status_code == 200
    assert response.json()["entry"]["orders"] == 0


@pytest.mark.parametrize(
    "payload",
    [
        {"entry_date": "2024-03-05", "revenue": "abc", "orders": 1},
        {"entry_date": "2024-03-05", "revenue": "", "orders": 1},
        {"entry_date": "2024-03-05", "revenue": -10, "orders": 1},
        {"entry_date": "2024-03-05", "revenue": 10, "orders": "3.5"},
        {"entry_date": "2024-03-05", "revenue": 10, "orders": -1},
        {"entry_date": "2024-03-05", "revenue": 10, "orders": "dez"},
        {"entry_date": "05/03/2024", "revenue": 10, "orders": 1},
        {"revenue": 10, "orders": 1},
    ],
)
def test_invalid_entries_are_rejected(test_client, fake_store, auth_headers, payload) -> None:
    response = test_client.post("/v1/entries", json=payload, headers=auth_headers)

    assert response.status_code == 422
    assert fake_store.entries == {}


def test_save_entry_store_failure(test_client, fake_store, auth_headers) -> None:
    fake_store.fail = True

    response = test_client.post(
        "/v1/entries",
        json={"entry_date": "2024-03-05", "revenue": 10, "orders": 1},
        headers=auth_headers,
    )

    assert response.status_code == 502
