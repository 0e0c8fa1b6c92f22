"""
Saved-car endpoints.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, Query, status

from carmarket.storage.base import MarketStore
from carmarket.storage.dependencies import get_store

from . import schemas, service

router = APIRouter()


@router.post("/save-car", status_code=status.HTTP_201_CREATED)
async def save_car(
    payload: schemas.SavedCarRequest,
    store: MarketStore = Depends(get_store),
) -> dict:
    return await service.save_car(store, payload)


@router.post("/remove-saved-car")
async def remove_saved_car(
    payload: schemas.SavedCarRequest,
    store: MarketStore = Depends(get_store),
) -> dict:
    return await service.remove_saved_car(store, payload)


@router.get("/saved-cars")
async def list_saved_cars(
    username: str | None = Query(default=None),
    store: MarketStore = Depends(get_store),
) -> dict:
    return await service.list_saved_cars(store, username)
