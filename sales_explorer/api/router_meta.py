"""
Meta endpoints: health.
"""
from __future__ import annotations

from fastapi import APIRouter, Depends

from sales_explorer.data.store import DatasetCache
from sales_explorer.api.dependencies import get_cache
from sales_explorer.api.response_models import HealthResponse

router = APIRouter(prefix="/api", tags=["meta"])


@router.get("/health", response_model=HealthResponse)
def health(cache: DatasetCache = Depends(get_cache)):
    """Report cache state without triggering a load."""
    return HealthResponse(
        status="ok",
        loaded=cache.is_loaded,
        rows=cache.row_count(),
        source=str(cache.source),
    )
