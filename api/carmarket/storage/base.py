"""
Storage interface shared by the Postgres and in-memory backends.

Rows are plain dicts keyed by column name (`vehicleID`, `displayName`, ...),
returned to clients unchanged. Write operations raise the typed errors from
`core.db` (`UniqueViolation`, `ForeignKeyViolation`, `DatabaseError`).
"""

from __future__ import annotations

from typing import Any, Protocol

LIKES = "likes"
DISLIKES = "dislikes"
PREFERENCE_VALUES = (LIKES, DISLIKES)


class MarketStore(Protocol):
    async def open(self) -> None:
        ...

    async def close(self) -> None:
        ...

    async def get_user(self, username: str) -> dict[str, Any] | None:
        ...

    async def create_user(
        self,
        *,
        username: str,
        password: str,
        display_name: str,
        review_level: int = 0,
    ) -> None:
        ...

    async def search_vehicles(self, *, max_price: int) -> list[dict[str, Any]]:
        ...

    async def save_car(self, *, username: str, vehicle_id: int) -> None:
        ...

    async def remove_saved_car(self, *, username: str, vehicle_id: int) -> bool:
        ...

    async def list_saved_cars(self, username: str) -> list[dict[str, Any]]:
        ...

    async def upsert_preference(self, *, username: str, vehicle_id: int, likes_or_dislikes: str) -> None:
        ...

    async def list_preferences(self, username: str) -> list[dict[str, Any]]:
        ...

# Range of the INTEGER "vehicleID" column.
VEHICLE_ID_MIN = -(2**31)
VEHICLE_ID_MAX = 2**31 - 1
