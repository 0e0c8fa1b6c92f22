from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from pathlib import Path

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from carmarket.accounts import router as accounts_router
from carmarket.core import config
from carmarket.core.errors import install_exception_handlers
from carmarket.core.log import configure_logging
from carmarket.preferences import router as preferences_router
from carmarket.saved_cars import router as saved_cars_router
from carmarket.storage.base import MarketStore
from carmarket.storage.dependencies import build_store
from carmarket.vehicles import router as vehicles_router

logger = logging.getLogger(__name__)


def create_app(store: MarketStore | None = None) -> FastAPI:
    configure_logging()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        # One store (and DB pool) per process.
        active = store if store is not None else build_store()
        await active.open()
        app.state.store = active
        try:
            yield
        finally:
            await active.close()
            app.state.store = None

    app = FastAPI(title="Car Market API", lifespan=lifespan)
    install_exception_handlers(app)

    origins = config.cors_origins()
    if origins:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=origins,
            allow_credentials=True,
            allow_methods=["*"],
            allow_headers=["*"],
        )

    app.include_router(accounts_router.router, prefix="/api", tags=["accounts"])
    app.include_router(vehicles_router.router, prefix="/api", tags=["vehicles"])
    app.include_router(saved_cars_router.router, prefix="/api", tags=["saved-cars"])
    app.include_router(preferences_router.router, prefix="/api", tags=["preferences"])

    @app.get("/health")
    def health() -> dict:
        return {"status": "ok"}

    # Mounted last so the API routes above take precedence.
    static_dir = Path(config.static_dir())
    if static_dir.is_dir():
        app.mount("/", StaticFiles(directory=static_dir, html=True), name="public")
        logger.info("static_mounted directory=%s", static_dir)
    else:
        logger.warning("static_dir_missing directory=%s", static_dir)

    return app


app = create_app()


def run() -> None:
    # uvicorn turns SIGINT/SIGTERM into a graceful shutdown, which runs the
    # lifespan exit and closes the store before the process exits.
    uvicorn.run(app, host=config.host(), port=config.port())


if __name__ == "__main__":
    run()
