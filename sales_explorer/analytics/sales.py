"""
Sales listing service — ties the dataset cache to query and pagination.
"""
from __future__ import annotations

import logging

from sales_explorer.analytics.pagination import Page, paginate
from sales_explorer.analytics.query import run_query
from sales_explorer.data.schemas import FilterOptions, FilterSet, SortKey
from sales_explorer.data.store import DatasetCache

logger = logging.getLogger(__name__)


def get_sales_page(
    cache: DatasetCache,
    page: int,
    limit: int,
    sort_key: SortKey = SortKey.DATE_DESC,
    search: str = "",
    filters: FilterSet | None = None,
) -> Page:
    """One page of searched, filtered, sorted sales."""
    df = cache.get_dataset()
    matched = run_query(df, search, filters, sort_key)
    logger.debug(
        "sales query search=%r sort=%s -> %d of %d rows",
        search, sort_key.value, len(matched), len(df),
    )
    return paginate(matched, page, limit)


def get_filter_options(cache: DatasetCache) -> FilterOptions:
    return cache.filter_options()
