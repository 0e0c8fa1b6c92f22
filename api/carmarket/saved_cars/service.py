"""
Saved-car list: save, remove, list.
"""

from __future__ import annotations

import logging
from typing import Any

from fastapi import status

from carmarket.core.db import DatabaseError, UniqueViolation
from carmarket.core.errors import http_error
from carmarket.storage.base import MarketStore

from . import schemas

logger = logging.getLogger(__name__)


def _require_fields(payload: schemas.SavedCarRequest) -> tuple[str, int]:
    if not payload.username or payload.vehicleID is None:
        raise http_error(status.HTTP_400_BAD_REQUEST, "Missing username or vehicleID")
    return payload.username, payload.vehicleID


async def save_car(store: MarketStore, payload: schemas.SavedCarRequest) -> dict[str, str]:
    username, vehicle_id = _require_fields(payload)

    try:
        await store.save_car(username=username, vehicle_id=vehicle_id)
    except UniqueViolation as exc:
        raise http_error(status.HTTP_400_BAD_REQUEST, "Car is already saved.") from exc
    except DatabaseError as exc:
        logger.exception("save_car_failed username=%s vehicle_id=%s", username, vehicle_id)
        raise http_error(status.HTTP_500_INTERNAL_SERVER_ERROR, "Database error", str(exc)) from exc

    return {"message": "Car saved successfully"}


async def remove_saved_car(store: MarketStore, payload: schemas.SavedCarRequest) -> dict[str, str]:
    username, vehicle_id = _require_fields(payload)

    try:
        removed = await store.remove_saved_car(username=username, vehicle_id=vehicle_id)
    except DatabaseError as exc:
        logger.exception("remove_saved_car_failed username=%s vehicle_id=%s", username, vehicle_id)
        raise http_error(status.HTTP_500_INTERNAL_SERVER_ERROR, "Failed to remove car", str(exc)) from exc

    if not removed:
        raise http_error(status.HTTP_404_NOT_FOUND, "Car not found in saved list")
    return {"message": "Car removed successfully"}


async def list_saved_cars(store: MarketStore, username: str | None) -> dict[str, Any]:
    logger.debug("saved_cars_requested username=%s", username)
    if not username:
        raise http_error(status.HTTP_400_BAD_REQUEST, "Missing username in request")

    try:
        rows = await store.list_saved_cars(username)
    except DatabaseError as exc:
        logger.exception("list_saved_cars_failed username=%s", username)
        raise http_error(
            status.HTTP_500_INTERNAL_SERVER_ERROR,
            "Failed to retrieve saved cars",
            str(exc),
        ) from exc

    return {"message": "success", "data": rows}
