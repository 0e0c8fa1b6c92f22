"""
Account API endpoints.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, status

from carmarket.storage.base import MarketStore
from carmarket.storage.dependencies import get_store

from . import schemas, service

router = APIRouter()


@router.post("/login")
async def login(
    payload: schemas.CredentialsRequest,
    store: MarketStore = Depends(get_store),
) -> dict:
    return await service.login(store, payload)


@router.post("/create-account", status_code=status.HTTP_201_CREATED)
async def create_account(
    payload: schemas.CredentialsRequest,
    store: MarketStore = Depends(get_store),
) -> dict:
    return await service.create_account(store, payload)
