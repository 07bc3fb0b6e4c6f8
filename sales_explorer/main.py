"""
Sales Explorer — FastAPI app factory.

The dataset is not read at startup: the first /api/sales or /api/filters
request triggers the one-time load through the DatasetCache.
"""
from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from pathlib import Path
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from sales_explorer.config import CORS_ORIGINS, DATA_FILE, LOG_LEVEL
from sales_explorer.data.errors import DatasetError
from sales_explorer.data.store import DatasetCache
from sales_explorer.logging_config import configure_logging
from sales_explorer.api.router_meta import router as meta_router
from sales_explorer.api.router_sales import router as sales_router

logger = logging.getLogger(__name__)


async def dataset_error_handler(request: Request, exc: DatasetError) -> JSONResponse:
    logger.error("Sales data unavailable for %s: %s", request.url.path, exc)
    return JSONResponse(status_code=503, content={"error": "Sales data is currently unavailable"})


def create_app(cache: Optional[DatasetCache] = None, source: Optional[Path] = None) -> FastAPI:
    """Build the app around ``cache`` (or a fresh cache over ``source``)."""

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        configure_logging(LOG_LEVEL)
        if getattr(app.state, "cache", None) is None:
            app.state.cache = DatasetCache(source or DATA_FILE)
        logger.info("Sales Explorer ready, data source %s (loaded on first request)", app.state.cache.source)
        yield

    app = FastAPI(
        title="Sales Explorer API",
        description="Paginated, filtered, sorted views of retail sales transactions",
        version="1.0.0",
        lifespan=lifespan,
    )
    if cache is not None:
        app.state.cache = cache

    app.add_middleware(
        CORSMiddleware,
        allow_origins=CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(DatasetError, dataset_error_handler)

    app.include_router(meta_router)
    app.include_router(sales_router)

    return app


app = create_app()
