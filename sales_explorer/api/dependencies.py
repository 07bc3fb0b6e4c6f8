"""
FastAPI dependencies — DatasetCache injection, list-query parsing.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from fastapi import HTTPException, Query, Request

from sales_explorer.config import DEFAULT_LIMIT, DEFAULT_PAGE, DEFAULT_SORT
from sales_explorer.data.schemas import (
    FilterSet, SortKey, build_filter_set, parse_positive_int, parse_sort_key,
)
from sales_explorer.data.store import DatasetCache


# ---------------------------------------------------------------------------
# Cache (created in the app lifespan, stored on app.state)
# ---------------------------------------------------------------------------

def get_cache(request: Request) -> DatasetCache:
    cache = getattr(request.app.state, "cache", None)
    if cache is None:
        raise HTTPException(503, "Server not initialized yet")
    return cache


# ---------------------------------------------------------------------------
# List-query parsing: every value arrives as a string and degrades on error
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class SalesQuery:
    page: int
    limit: int
    sort_key: SortKey
    search: str
    filters: FilterSet


def parse_sales_query(
    page: Optional[str] = Query(None, description="Page number, 1-based"),
    limit: Optional[str] = Query(None, description="Rows per page"),
    sortBy: Optional[str] = Query(None, description="date_desc|date_asc|quantity_desc|quantity_asc|name_asc|name_desc"),
    search: Optional[str] = Query(None, description="Customer name or phone substring"),
    regions: Optional[str] = Query(None, description="Comma-separated regions"),
    genders: Optional[str] = Query(None, description="Comma-separated genders"),
    categories: Optional[str] = Query(None, description="Comma-separated product categories"),
    tags: Optional[str] = Query(None, description="Comma-separated tags"),
    paymentMethods: Optional[str] = Query(None, description="Comma-separated payment methods"),
    ageMin: Optional[str] = Query(None),
    ageMax: Optional[str] = Query(None),
    dateStart: Optional[str] = Query(None, description="YYYY-MM-DD"),
    dateEnd: Optional[str] = Query(None, description="YYYY-MM-DD, inclusive"),
) -> SalesQuery:
    """Parse list-query parameters into a SalesQuery."""
    return SalesQuery(
        page=parse_positive_int(page, DEFAULT_PAGE),
        limit=parse_positive_int(limit, DEFAULT_LIMIT),
        sort_key=parse_sort_key(sortBy, DEFAULT_SORT),
        search=search or "",
        filters=build_filter_set(
            regions=regions,
            genders=genders,
            categories=categories,
            tags=tags,
            payment_methods=paymentMethods,
            age_min=ageMin,
            age_max=ageMax,
            date_start=dateStart,
            date_end=dateEnd,
        ),
    )
