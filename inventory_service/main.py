"""Inventory Service API: FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map InventoryError and router errors to structured JSON
    - Connection pool and blob store created in lifespan startup, pool disposed on shutdown
    - Cache directory exists before the first request is served
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from inventory_service.api.error_handlers import register_error_handlers
from inventory_service.api.routes import forms, health, inventory
from inventory_service.config import get_settings
from inventory_service.infrastructure.blob_store import FileBlobStore
from inventory_service.infrastructure.database import close_db, init_db
from inventory_service.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)

    blob_store = FileBlobStore(settings.cache_dir)
    blob_store.ensure_root()
    app.state.blob_store = blob_store

    init_db(
        settings.resolved_database_url,
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
        pool_timeout=settings.database_pool_timeout,
    )
    logger.info(f"Server running at http://{settings.host}:{settings.port}/")
    logger.info(
        f"Cache directory: {blob_store.root}",
        extra={"cache_dir": blob_store.root},
    )
    yield
    logger.info("Inventory Service shutting down")
    await close_db()


app = FastAPI(
    title="Inventory Service",
    description="Simple inventory API: items, photos and an HTML search page",
    version="1.0.0",
    docs_url="/docs",
    lifespan=lifespan,
)

settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health.router)
app.include_router(forms.router)
app.include_router(inventory.router)

register_error_handlers(app)
