"""
Like/dislike preferences: upsert and list.
"""

from __future__ import annotations

import logging
from typing import Any

from fastapi import status

from carmarket.core.db import DatabaseError
from carmarket.core.errors import http_error
from carmarket.storage.base import PREFERENCE_VALUES, MarketStore

from . import schemas

logger = logging.getLogger(__name__)


async def set_preference(store: MarketStore, payload: schemas.PreferenceRequest) -> dict[str, str]:
    if not payload.username or payload.vehicleID is None or not payload.likesOrDislikes:
        raise http_error(status.HTTP_400_BAD_REQUEST, "Missing username, vehicleID, or likesOrDislikes")

    if payload.likesOrDislikes not in PREFERENCE_VALUES:
        raise http_error(
            status.HTTP_400_BAD_REQUEST,
            'Invalid value for likesOrDislikes. Use "likes" or "dislikes".',
        )

    try:
        await store.upsert_preference(
            username=payload.username,
            vehicle_id=payload.vehicleID,
            likes_or_dislikes=payload.likesOrDislikes,
        )
    except DatabaseError as exc:
        logger.exception(
            "preference_update_failed username=%s vehicle_id=%s",
            payload.username,
            payload.vehicleID,
        )
        raise http_error(status.HTTP_500_INTERNAL_SERVER_ERROR, "Failed to update preference", str(exc)) from exc

    return {"message": "Preference updated successfully"}


async def list_preferences(store: MarketStore, username: str | None) -> dict[str, Any]:
    if not username:
        raise http_error(status.HTTP_400_BAD_REQUEST, "Missing username in request")

    try:
        rows = await store.list_preferences(username)
    except DatabaseError as exc:
        logger.exception("list_preferences_failed username=%s", username)
        raise http_error(
            status.HTTP_500_INTERNAL_SERVER_ERROR,
            "Failed to retrieve preferences",
            str(exc),
        ) from exc

    return {"message": "success", "data": rows}
