from __future__ import annotations

import logging

from fastapi import FastAPI

from dotenv import load_dotenv

logger = logging.getLogger(__name__)


def create_app(store=None) -> FastAPI:
    """
    Build the HTTP app. Without an explicit store, one is created from the
    KVSTORE_* environment (local.env is read first if present).
    """
    load_dotenv("local.env")

    from endpoints.errors import register_exception_handlers
    from endpoints.store_endpoints import router as store_router
    from kvstore.factory import create_store
    from kvstore.repositories import AsyncKeyValueStore
    from kvstore.settings import get_settings

    settings = get_settings()
    logging.basicConfig(level=settings.log_level)

    if store is None:
        store = create_store(settings)

    app = FastAPI()
    app.state.store = AsyncKeyValueStore(store)

    @app.get("/health")
    async def health():
        return {"status": "ok", "backend": type(store).__name__}

    register_exception_handlers(app)
    app.include_router(store_router)

    return app


app = create_app()
