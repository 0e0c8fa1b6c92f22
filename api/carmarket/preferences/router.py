"""
Preference endpoints.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, Query

from carmarket.storage.base import MarketStore
from carmarket.storage.dependencies import get_store

from . import schemas, service

router = APIRouter()


@router.post("/preference")
async def set_preference(
    payload: schemas.PreferenceRequest,
    store: MarketStore = Depends(get_store),
) -> dict:
    return await service.set_preference(store, payload)


@router.get("/preferences")
async def list_preferences(
    username: str | None = Query(default=None),
    store: MarketStore = Depends(get_store),
) -> dict:
    return await service.list_preferences(store, username)
