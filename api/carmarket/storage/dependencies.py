"""
Store wiring for FastAPI routes.
"""

from __future__ import annotations

from fastapi import Request

from carmarket.core import config

from .base import MarketStore
from .memory import InMemoryStore
from .postgres import build_postgres_store


def build_store() -> MarketStore:
    backend = config.storage_backend()
    if backend == "memory":
        return InMemoryStore()
    if backend == "postgres":
        return build_postgres_store()
    raise RuntimeError(f"Unknown STORAGE_BACKEND: {backend!r}")


def get_store(request: Request) -> MarketStore:
    store = getattr(request.app.state, "store", None)
    if store is None:
        raise RuntimeError("Store is not initialized. The app lifespan opens it on startup.")
    return store
