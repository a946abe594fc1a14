from __future__ import annotations

from collections.abc import Iterator

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from carbay.entrypoints.http.app import build_app
from carbay.store.car_store import CarStore


@pytest.fixture
def api(store: CarStore) -> FastAPI:
    """Full application wired to the in-memory test store."""
    return build_app(store_factory=lambda: store)


@pytest.fixture
def api_client(api: FastAPI) -> Iterator[TestClient]:
    """Client with the application lifespan running."""
    with TestClient(api, raise_server_exceptions=False) as client:
        yield client
