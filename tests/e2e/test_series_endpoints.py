from __future__ import annotations

import pytest
from dependency_injector import providers
from fastapi.testclient import TestClient

from src.main.app import create_app
from src.main.container import get_container


@pytest.fixture()
def client(metering_config):
    app = create_app()
    container = get_container()
    container.metering_config.override(providers.Object(metering_config))

    with TestClient(app) as test_client:
        yield test_client

    container.metering_config.reset_override()


def test_align_day_series(client):
    response = client.post(
        "/series/day/2022/3/2/align",
        params={"field": "gas"},
        json=[
            ["2022-03-02T02:00:00", 12],
            ["2022-03-02T05:00:00", 15],
            ["2022-03-02T10:00:00", 10],
        ],
    )

    assert response.status_code == 200
    body = response.json()
    values = [entry["value"] for entry in body["entries"]]
    assert len(values) == 24
    assert values[2] == 12 and values[5] == 15 and values[10] == 10
    assert sum(values) == 37
    assert body["printable_total"] == "37 m³"


def test_align_month_series_has_calendar_length(client):
    response = client.post("/series/month/2024/2/align", json=[])
    assert len(response.json()["entries"]) == 29


def test_align_rejects_bad_timestamp(client):
    response = client.post(
        "/series/day/2022/3/2/align", json=[["tomorrow-ish", 1]]
    )
    assert response.status_code == 400


def test_align_rejects_malformed_body(client):
    response = client.post("/series/day/2022/3/2/align", json={"not": "a list"})
    assert response.status_code == 422


def test_align_many(client):
    response = client.post(
        "/series/day/2022/3/2/align-many",
        json={"living": [["2022-03-02T08:00:00", 19.5]], "attic": []},
    )

    assert response.status_code == 200
    body = response.json()
    assert body["bucket_count"] == 24
    assert body["series"]["living"][8]["value"] == 19.5


@pytest.mark.parametrize("value", [True, False, "12", None])
def test_align_rejects_non_numeric_values(client, value):
    response = client.post(
        "/series/day/2022/3/2/align", json=[["2022-03-02T02:00:00", value]]
    )
    assert response.status_code == 400


def test_align_many_rejects_boolean_values(client):
    response = client.post(
        "/series/day/2022/3/2/align-many",
        json={"living": [["2022-03-02T08:00:00", True]]},
    )
    assert response.status_code == 400
