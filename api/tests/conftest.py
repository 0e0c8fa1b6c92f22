"""
Shared fixtures: an in-memory store seeded with two sellers and a few
listings, and a TestClient wired to it through the app factory.
"""

from typing import Any

import pytest
from fastapi.testclient import TestClient

from carmarket.core.db import DatabaseError
from carmarket.main import create_app
from carmarket.storage.memory import InMemoryStore


@pytest.fixture(autouse=True)
def fast_bcrypt(monkeypatch):
    """Minimum bcrypt cost keeps account tests quick."""
    monkeypatch.setenv("BCRYPT_ROUNDS", "4")


def _seed_seller(store: InMemoryStore, username: str, display_name: str, review_level: int) -> None:
    store.users[username] = {
        "username": username,
        "password": "not-used",
        "displayName": display_name,
        "reviewLevel": review_level,
    }


@pytest.fixture
def store() -> InMemoryStore:
    store = InMemoryStore()
    _seed_seller(store, "dealer", "Downtown Motors", 4)
    _seed_seller(store, "privateseller", "Pat", 1)
    store.add_vehicle(username="dealer", price=8500, make="Honda", model="Civic", year=2014)
    store.add_vehicle(username="dealer", price=15000, make="Toyota", model="Camry", year=2018)
    store.add_vehicle(username="privateseller", price=32000, make="BMW", model="X5", year=2020)
    return store


@pytest.fixture
def client(store):
    with TestClient(create_app(store=store)) as test_client:
        yield test_client


class BrokenStore(InMemoryStore):
    """Every data call fails the way a lost DB connection would."""

    def _fail(self, *args: Any, **kwargs: Any):
        raise DatabaseError("connection reset by peer")

    async def get_user(self, *args, **kwargs):
        self._fail()

    async def create_user(self, *args, **kwargs):
        self._fail()

    async def search_vehicles(self, *args, **kwargs):
        self._fail()

    async def save_car(self, *args, **kwargs):
        self._fail()

    async def remove_saved_car(self, *args, **kwargs):
        self._fail()

    async def list_saved_cars(self, *args, **kwargs):
        self._fail()

    async def upsert_preference(self, *args, **kwargs):
        self._fail()

    async def list_preferences(self, *args, **kwargs):
        self._fail()


@pytest.fixture
def broken_client():
    with TestClient(create_app(store=BrokenStore())) as test_client:
        yield test_client


@pytest.fixture
def register(client):
    def _register(username: str, password: str):
        return client.post("/api/create-account", json={"username": username, "password": password})

    return _register
