"""
Page slicing and pagination metadata.
"""
from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any

import pandas as pd

from sales_explorer.data.schemas import RECORD_FIELDS


@dataclass
class Pagination:
    current_page: int
    total_pages: int
    total_items: int
    items_per_page: int

    def as_dict(self) -> dict[str, int]:
        return {
            "currentPage": self.current_page,
            "totalPages": self.total_pages,
            "totalItems": self.total_items,
            "itemsPerPage": self.items_per_page,
        }


@dataclass
class Page:
    items: list[dict[str, Any]]
    pagination: Pagination

    def as_dict(self) -> dict[str, Any]:
        return {
            "data": self.items,
            "pagination": self.pagination.as_dict(),
        }


def frame_to_records(df: pd.DataFrame) -> list[dict[str, Any]]:
    """Rows as canonical record dicts (derived ``_`` columns dropped)."""
    if df.empty:
        return []
    return df[RECORD_FIELDS].to_dict(orient="records")


def paginate(df: pd.DataFrame, page: int, limit: int) -> Page:
    """Slice rows [(page-1)*limit, page*limit); past the end yields no items.

    ``page`` and ``limit`` must be positive; callers normalize them first.
    """
    total = len(df)
    start = (page - 1) * limit
    chunk = df.iloc[start:start + limit]
    return Page(
        items=frame_to_records(chunk),
        pagination=Pagination(
            current_page=page,
            total_pages=math.ceil(total / limit),
            total_items=total,
            items_per_page=limit,
        ),
    )
