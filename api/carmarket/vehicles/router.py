"""
Vehicle listing endpoints.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, Query

from carmarket.storage.base import MarketStore
from carmarket.storage.dependencies import get_store

from . import service

router = APIRouter()


@router.get("/vehicles")
async def search_vehicles(
    budget: str | None = Query(default=None),
    store: MarketStore = Depends(get_store),
) -> dict:
    return await service.search_by_budget(store, budget)
