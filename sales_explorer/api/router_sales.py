"""
Sales endpoints: paginated transaction list and filter options.
"""
from __future__ import annotations

from fastapi import APIRouter, Depends

from sales_explorer.analytics.sales import get_filter_options, get_sales_page
from sales_explorer.api.dependencies import SalesQuery, get_cache, parse_sales_query
from sales_explorer.api.response_models import (
    ErrorResponse, FilterOptionsResponse, SalesPageResponse,
)
from sales_explorer.data.store import DatasetCache

router = APIRouter(prefix="/api", tags=["sales"])

_UNAVAILABLE = {503: {"model": ErrorResponse, "description": "Sales data could not be loaded"}}


@router.get("/sales", response_model=SalesPageResponse, responses=_UNAVAILABLE)
def list_sales(
    query: SalesQuery = Depends(parse_sales_query),
    cache: DatasetCache = Depends(get_cache),
):
    """Searched, filtered, sorted, paginated transactions."""
    page = get_sales_page(
        cache,
        page=query.page,
        limit=query.limit,
        sort_key=query.sort_key,
        search=query.search,
        filters=query.filters,
    )
    return page.as_dict()


@router.get("/filters", response_model=FilterOptionsResponse, responses=_UNAVAILABLE)
def filter_options(cache: DatasetCache = Depends(get_cache)):
    """Distinct values for each filterable field."""
    return get_filter_options(cache).as_dict()
