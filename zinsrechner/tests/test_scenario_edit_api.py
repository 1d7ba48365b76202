from __future__ import annotations

from flask.testing import FlaskClient


def test_valid_edit_is_applied(client: FlaskClient, scenario_payload: dict):
    resp = client.post(
        "/api/scenario/edit",
        json={"scenario": scenario_payload, "field": "interestRate", "value": "5,5"},
    )

    assert resp.status_code == 200
    body = resp.get_json()
    assert body["accepted"] is True
    assert body["projection"]["scenario"]["interestRate"] == 5.5
    assert "zu 5,5% investierst" in body["projection"]["summary"]


def test_unparsable_edit_keeps_previous_value(client: FlaskClient, scenario_payload: dict):
    resp = client.post(
        "/api/scenario/edit",
        json={"scenario": scenario_payload, "field": "interestRate", "value": "8.6abc"},
    )

    assert resp.status_code == 200
    body = resp.get_json()
    assert body["accepted"] is False
    assert body["projection"]["scenario"]["interestRate"] == 8.6
    assert body["projection"]["final"]["totalAmount"] == 498431


def test_years_edit_is_clamped(client: FlaskClient, scenario_payload: dict):
    resp = client.post(
        "/api/scenario/edit",
        json={"scenario": scenario_payload, "field": "years", "value": 1000},
    )

    assert resp.status_code == 200
    projection = resp.get_json()["projection"]
    assert projection["scenario"]["years"] == 122
    assert len(projection["data"]) == 123


def test_unknown_field_returns_400(client: FlaskClient, scenario_payload: dict):
    resp = client.post(
        "/api/scenario/edit",
        json={"scenario": scenario_payload, "field": "taxRate", "value": 25},
    )

    assert resp.status_code == 400
    assert "taxRate" in resp.get_json()["detail"]


def test_invalid_base_scenario_returns_422(client: FlaskClient, scenario_payload: dict):
    resp = client.post(
        "/api/scenario/edit",
        json={"scenario": {**scenario_payload, "years": 0}, "field": "years", "value": 5},
    )

    assert resp.status_code == 422


def test_huge_amount_edit_is_clamped_not_a_server_error(client: FlaskClient, scenario_payload: dict):
    base = {**scenario_payload, "years": 122, "interestRate": 100}
    resp = client.post(
        "/api/scenario/edit",
        json={"scenario": base, "field": "initialCapital", "value": "1e300"},
    )

    assert resp.status_code == 200
    body = resp.get_json()
    assert body["accepted"] is True
    assert body["projection"]["scenario"]["initialCapital"] == 1e15
    assert len(body["projection"]["data"]) == 123


def test_returned_scenario_is_accepted_by_the_next_edit(client: FlaskClient, scenario_payload: dict):
    first = client.post(
        "/api/scenario/edit",
        json={"scenario": scenario_payload, "field": "initialCapital", "value": "-500"},
    )

    assert first.status_code == 200
    scenario = first.get_json()["projection"]["scenario"]
    assert scenario["initialCapital"] == 0

    second = client.post(
        "/api/scenario/edit",
        json={"scenario": scenario, "field": "monthlyContribution", "value": "300"},
    )

    assert second.status_code == 200
    body = second.get_json()
    assert body["projection"]["scenario"]["initialCapital"] == 0
    assert body["projection"]["scenario"]["monthlyContribution"] == 300
