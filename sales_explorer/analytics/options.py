"""
Filter options — distinct categorical values offered as filter choices.
"""
from __future__ import annotations

import pandas as pd

from sales_explorer.data.schemas import FilterOptions


def _distinct(values: pd.Series) -> list[str]:
    """Non-empty unique values, sorted by plain string order."""
    values = values.dropna().astype(str)
    return sorted(values[values != ""].unique().tolist())


def derive_options(df: pd.DataFrame) -> FilterOptions:
    """Compute filter choices from the dataset. Tags are exploded and trimmed."""
    if df.empty:
        return FilterOptions()
    tags = df["tags"].astype(str).str.split(",").explode().str.strip()
    return FilterOptions(
        regions=_distinct(df["customerRegion"]),
        genders=_distinct(df["gender"]),
        categories=_distinct(df["category"]),
        tags=_distinct(tags),
        payment_methods=_distinct(df["paymentMethod"]),
    )
