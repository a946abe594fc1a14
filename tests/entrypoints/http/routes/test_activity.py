"""Test suite for the /v1/activity routes (full application, in-memory store)."""

from __future__ import annotations

from datetime import datetime

from fastapi.testclient import TestClient

from carbay.store.car_store import CarStore


def test_views_are_most_recent_first(api_client: TestClient) -> None:
    for car_id in ("car-1", "car-2", "car-1"):
        api_client.get(f"/v1/cars/{car_id}")

    entries = api_client.get("/v1/activity/views").json()["entries"]

    assert [entry["car_id"] for entry in entries] == ["car-1", "car-2"]
    assert entries[0]["car"]["model"] == "Swift"
    assert datetime.fromisoformat(entries[0]["timestamp"]) > datetime.fromisoformat(entries[1]["timestamp"])


def test_views_skip_unknown_ids(api_client: TestClient, store: CarStore) -> None:
    store.add_to_view_history("car-2")
    store.add_to_view_history("ghost")

    entries = api_client.get("/v1/activity/views").json()["entries"]

    assert [entry["car_id"] for entry in entries] == ["car-2"]


def test_clear_views(api_client: TestClient, store: CarStore) -> None:
    api_client.get("/v1/cars/car-1")

    response = api_client.delete("/v1/activity/views")

    assert response.status_code == 204
    assert store.view_history == ()


def test_clear_compares(api_client: TestClient, store: CarStore) -> None:
    api_client.put("/v1/compare/car-1")

    response = api_client.delete("/v1/activity/compares")

    assert response.status_code == 204
    assert store.compare_history == ()
    # the compare set itself is untouched
    assert store.compare_list == ("car-1",)


def test_register_interest(api_client: TestClient) -> None:
    response = api_client.put("/v1/activity/interests/car-3")

    assert response.status_code == 200
    data = response.json()
    assert data["changed"] is True
    assert [(entry["car_id"], entry["status"]) for entry in data["entries"]] == [("car-3", "Interested")]


def test_repeated_interest_keeps_first_record(api_client: TestClient) -> None:
    first = api_client.put("/v1/activity/interests/car-3").json()

    second = api_client.put("/v1/activity/interests/car-3").json()

    assert second["changed"] is False
    assert second["entries"] == first["entries"]


def test_list_and_clear_interests(api_client: TestClient) -> None:
    api_client.put("/v1/activity/interests/car-1")
    api_client.put("/v1/activity/interests/car-2")

    listed = api_client.get("/v1/activity/interests").json()
    cleared = api_client.delete("/v1/activity/interests")

    assert [entry["car_id"] for entry in listed["entries"]] == ["car-2", "car-1"]
    assert listed["changed"] is False
    assert cleared.status_code == 204
    assert api_client.get("/v1/activity/interests").json()["entries"] == []
