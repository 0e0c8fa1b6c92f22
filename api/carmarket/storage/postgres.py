"""
Marketplace persistence (raw SQL, Postgres).

Each operation is a single statement, so no explicit transactions are used.
Identifiers that are camelCase or reserved (`user`) are quoted so column
names reach clients exactly as stored.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

from carmarket.core import config
from carmarket.core.db import Database

logger = logging.getLogger(__name__)


class PostgresStore:
    def __init__(self, database: Database, *, schema_file: str | None = None) -> None:
        self.db = database
        self.schema_file = schema_file

    async def open(self) -> None:
        await self.db.connect()
        if self.schema_file:
            await self.apply_schema(self.schema_file)
        logger.info("store_opened backend=postgres")

    async def close(self) -> None:
        await self.db.close()
        logger.info("store_closed backend=postgres")

    async def apply_schema(self, path: str) -> None:
        sql = Path(path).read_text(encoding="utf-8")
        await self.db.execute(sql)
        logger.info("schema_applied path=%s", path)

    async def get_user(self, username: str) -> dict[str, Any] | None:
        return await self.db.fetch_one(
            """
            SELECT username, password, "displayName", "reviewLevel"
            FROM "user"
            WHERE username = $1
            """,
            username,
        )

    async def create_user(
        self,
        *,
        username: str,
        password: str,
        display_name: str,
        review_level: int = 0,
    ) -> None:
        await self.db.execute(
            """
            INSERT INTO "user" (username, password, "displayName", "reviewLevel")
            VALUES ($1, $2, $3, $4)
            """,
            username,
            password,
            display_name,
            review_level,
        )

    async def search_vehicles(self, *, max_price: int) -> list[dict[str, Any]]:
        return await self.db.fetch_all(
            """
            SELECT vehicle.*, "user"."displayName", "user"."reviewLevel"
            FROM vehicle
            JOIN "user" ON vehicle.username = "user".username
            WHERE vehicle.price <= $1::numeric
            """,
            max_price,
        )

    async def save_car(self, *, username: str, vehicle_id: int) -> None:
        await self.db.execute(
            """
            INSERT INTO saved_cars (username, "vehicleID")
            VALUES ($1, $2)
            """,
            username,
            vehicle_id,
        )

    async def remove_saved_car(self, *, username: str, vehicle_id: int) -> bool:
        row = await self.db.fetch_one(
            """
            DELETE FROM saved_cars
            WHERE username = $1
              AND "vehicleID" = $2
            RETURNING "vehicleID"
            """,
            username,
            vehicle_id,
        )
        return row is not None

    async def list_saved_cars(self, username: str) -> list[dict[str, Any]]:
        return await self.db.fetch_all(
            """
            SELECT vehicle.*
            FROM saved_cars
            JOIN vehicle ON saved_cars."vehicleID" = vehicle."vehicleID"
            WHERE saved_cars.username = $1
            """,
            username,
        )

    async def upsert_preference(self, *, username: str, vehicle_id: int, likes_or_dislikes: str) -> None:
        await self.db.execute(
            """
            INSERT INTO preference (username, "vehicleID", "likesOrDislikes")
            VALUES ($1, $2, $3)
            ON CONFLICT (username, "vehicleID")
            DO UPDATE SET "likesOrDislikes" = excluded."likesOrDislikes"
            """,
            username,
            vehicle_id,
            likes_or_dislikes,
        )

    async def list_preferences(self, username: str) -> list[dict[str, Any]]:
        return await self.db.fetch_all(
            """
            SELECT vehicle.*, preference."likesOrDislikes"
            FROM preference
            JOIN vehicle ON preference."vehicleID" = vehicle."vehicleID"
            WHERE preference.username = $1
            """,
            username,
        )


def build_postgres_store() -> PostgresStore:
    return PostgresStore(Database(), schema_file=config.db_schema_file())
