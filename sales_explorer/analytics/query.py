"""
Query engine — row selection and ordering over the in-memory sales frame.

Every stage returns a new frame; the cached dataset is never modified.
Search and filter keep the incoming row order, and all sorts are stable.
"""
from __future__ import annotations

import unicodedata

import numpy as np
import pandas as pd

from sales_explorer.data.schemas import FilterSet, SortKey


# ---------------------------------------------------------------------------
# Stage 1: free-text search
# ---------------------------------------------------------------------------

def search_records(df: pd.DataFrame, search: str | None) -> pd.DataFrame:
    """Keep rows whose customer name or phone contains ``search`` (case-insensitive)."""
    term = (search or "").lower()
    if not term:
        return df
    name_hit = df["customerName"].astype(str).str.lower().str.contains(term, regex=False)
    phone_hit = df["phoneNumber"].astype(str).str.lower().str.contains(term, regex=False)
    return df[(name_hit | phone_hit).to_numpy(dtype=bool)]


# ---------------------------------------------------------------------------
# Stage 2: structured filters
# ---------------------------------------------------------------------------

_VALUE_SET_COLUMNS = [
    ("regions", "customerRegion"),
    ("genders", "gender"),
    ("categories", "category"),
    ("payment_methods", "paymentMethod"),
]


def _day_bounds(filters: FilterSet) -> tuple[pd.Timestamp | None, pd.Timestamp | None]:
    """Start of ``date_start`` and the last millisecond of ``date_end``, in UTC."""
    start = pd.Timestamp(filters.date_start, tz="UTC") if filters.date_start else None
    end = None
    if filters.date_end:
        end = pd.Timestamp(filters.date_end, tz="UTC") + pd.Timedelta(days=1) - pd.Timedelta(milliseconds=1)
    return start, end


def filter_mask(df: pd.DataFrame, filters: FilterSet) -> np.ndarray:
    """Boolean row mask satisfying every populated constraint."""
    mask = np.ones(len(df), dtype=bool)

    for attr, column in _VALUE_SET_COLUMNS:
        allowed = getattr(filters, attr)
        if allowed:
            mask &= df[column].isin(allowed).to_numpy()

    if filters.tags:
        wanted = frozenset(filters.tags)
        mask &= np.fromiter(
            (not wanted.isdisjoint(tag_set) for tag_set in df["_tagSet"]),
            dtype=bool,
            count=len(df),
        )

    if filters.age_min is not None:
        mask &= (df["age"] >= filters.age_min).to_numpy()
    if filters.age_max is not None:
        mask &= (df["age"] <= filters.age_max).to_numpy()

    # Rows with an unparsable date are not excluded by date bounds
    start, end = _day_bounds(filters)
    if start is not None or end is not None:
        ts = df["_timestamp"]
        undated = ts.isna()
        if start is not None:
            mask &= (undated | (ts >= start)).to_numpy()
        if end is not None:
            mask &= (undated | (ts <= end)).to_numpy()

    return mask


def apply_filters(df: pd.DataFrame, filters: FilterSet | None) -> pd.DataFrame:
    if filters is None or filters.is_empty:
        return df
    return df[filter_mask(df, filters)]


# ---------------------------------------------------------------------------
# Stage 3: sort
# ---------------------------------------------------------------------------

def _collation_key(name: object) -> str:
    """Case- and accent-insensitive sort key for a customer name.

    Compares base letters first ("Émile" sorts with "E"), then the accented
    form, so names differing only by accent order deterministically.
    """
    text = str(name or "").casefold()
    base = "".join(ch for ch in unicodedata.normalize("NFKD", text) if not unicodedata.combining(ch))
    return base + "\x00" + unicodedata.normalize("NFC", text)


def sort_records(df: pd.DataFrame, sort_key: SortKey) -> pd.DataFrame:
    """Stable sort by the selected key; SortKey.NONE keeps the incoming order."""
    if sort_key in (SortKey.DATE_DESC, SortKey.DATE_ASC):
        return df.sort_values(
            "_timestamp",
            ascending=sort_key == SortKey.DATE_ASC,
            kind="stable",
            na_position="last",
        )
    if sort_key in (SortKey.QUANTITY_DESC, SortKey.QUANTITY_ASC):
        return df.sort_values("quantity", ascending=sort_key == SortKey.QUANTITY_ASC, kind="stable")
    if sort_key in (SortKey.NAME_ASC, SortKey.NAME_DESC):
        return df.sort_values(
            "customerName",
            ascending=sort_key == SortKey.NAME_ASC,
            kind="stable",
            key=lambda names: names.map(_collation_key),
        )
    return df


# ---------------------------------------------------------------------------
# Full pipeline
# ---------------------------------------------------------------------------

def run_query(
    df: pd.DataFrame,
    search: str | None = None,
    filters: FilterSet | None = None,
    sort_key: SortKey = SortKey.DATE_DESC,
) -> pd.DataFrame:
    """Search, then filter, then sort. Always returns a frame distinct from ``df``."""
    result = search_records(df, search)
    result = apply_filters(result, filters)
    result = sort_records(result, sort_key)
    if result is df:
        result = df.copy(deep=False)
    return result
