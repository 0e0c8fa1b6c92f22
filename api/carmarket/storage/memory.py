"""
In-memory store for local development and tests.

Mirrors the constraints the relational schema enforces: unique usernames,
unique (username, vehicleID) pairs, foreign keys and the likes/dislikes
check. Operations contain no awaits, so each one runs atomically on the
event loop.
"""

from __future__ import annotations

import logging
from typing import Any, Dict

from carmarket.core.db import DatabaseError, ForeignKeyViolation, UniqueViolation

from .base import PREFERENCE_VALUES

logger = logging.getLogger(__name__)


class InMemoryStore:
    """Simple dict-backed store."""

    def __init__(self) -> None:
        self.users: Dict[str, dict[str, Any]] = {}
        self.vehicles: Dict[int, dict[str, Any]] = {}
        self.saved_cars: Dict[tuple[str, int], None] = {}
        self.preferences: Dict[tuple[str, int], str] = {}
        self._next_vehicle_id = 1

    async def open(self) -> None:
        logger.info("store_opened backend=memory")

    async def close(self) -> None:
        logger.info("store_closed backend=memory")

    def reset(self) -> None:
        """Clear all stored data (useful in tests)."""
        self.users.clear()
        self.vehicles.clear()
        self.saved_cars.clear()
        self.preferences.clear()
        self._next_vehicle_id = 1

    def add_vehicle(self, *, username: str, price: int, **attributes: Any) -> dict[str, Any]:
        """
        Insert a listing. Listings are managed outside the API, so this is
        only used for seeding.
        """
        if username not in self.users:
            raise ForeignKeyViolation(f"vehicle seller {username!r} does not exist")
        vehicle_id = self._next_vehicle_id
        self._next_vehicle_id += 1
        row = {"vehicleID": vehicle_id, "username": username, "price": price, **attributes}
        self.vehicles[vehicle_id] = row
        return dict(row)

    def _check_references(self, username: str, vehicle_id: int) -> None:
        if username not in self.users:
            raise ForeignKeyViolation(f"user {username!r} does not exist")
        if vehicle_id not in self.vehicles:
            raise ForeignKeyViolation(f"vehicle {vehicle_id} does not exist")

    async def get_user(self, username: str) -> dict[str, Any] | None:
        row = self.users.get(username)
        return dict(row) if row is not None else None

    async def create_user(
        self,
        *,
        username: str,
        password: str,
        display_name: str,
        review_level: int = 0,
    ) -> None:
        if username in self.users:
            raise UniqueViolation(f"duplicate username {username!r}")
        self.users[username] = {
            "username": username,
            "password": password,
            "displayName": display_name,
            "reviewLevel": review_level,
        }

    async def search_vehicles(self, *, max_price: int) -> list[dict[str, Any]]:
        rows: list[dict[str, Any]] = []
        for vehicle in self.vehicles.values():
            seller = self.users.get(vehicle["username"])
            if seller is None or vehicle["price"] > max_price:
                continue
            rows.append(
                {
                    **vehicle,
                    "displayName": seller["displayName"],
                    "reviewLevel": seller["reviewLevel"],
                }
            )
        return rows

    async def save_car(self, *, username: str, vehicle_id: int) -> None:
        if (username, vehicle_id) in self.saved_cars:
            raise UniqueViolation(f"car {vehicle_id} already saved by {username!r}")
        self._check_references(username, vehicle_id)
        self.saved_cars[(username, vehicle_id)] = None

    async def remove_saved_car(self, *, username: str, vehicle_id: int) -> bool:
        key = (username, vehicle_id)
        if key not in self.saved_cars:
            return False
        del self.saved_cars[key]
        return True

    async def list_saved_cars(self, username: str) -> list[dict[str, Any]]:
        return [
            dict(self.vehicles[vehicle_id])
            for (owner, vehicle_id) in self.saved_cars
            if owner == username and vehicle_id in self.vehicles
        ]

    async def upsert_preference(self, *, username: str, vehicle_id: int, likes_or_dislikes: str) -> None:
        if likes_or_dislikes not in PREFERENCE_VALUES:
            raise DatabaseError(f"invalid likesOrDislikes value {likes_or_dislikes!r}")
        self._check_references(username, vehicle_id)
        self.preferences[(username, vehicle_id)] = likes_or_dislikes

    async def list_preferences(self, username: str) -> list[dict[str, Any]]:
        return [
            {**self.vehicles[vehicle_id], "likesOrDislikes": value}
            for (owner, vehicle_id), value in self.preferences.items()
            if owner == username and vehicle_id in self.vehicles
        ]
