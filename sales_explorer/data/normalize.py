"""
Key-variant resolution and type coercion into the canonical record schema.
"""
from __future__ import annotations

import math
import re
from collections.abc import Mapping
from typing import Any, Callable, Sequence

import numpy as np
import pandas as pd

from sales_explorer.data.errors import MalformedSourceError
from sales_explorer.data.schemas import LEADING_INT_RE, RECORD_FIELDS, TransactionRecord


# ---------------------------------------------------------------------------
# Coercers: total functions, never raise
# ---------------------------------------------------------------------------

_LEADING_FLOAT_RE = re.compile(r"^\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")


def _text(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def _count(value: Any) -> int:
    """Integer with parseInt-style leniency; unparsable or negative → 0."""
    if value is None or isinstance(value, bool):
        return 0
    if isinstance(value, int):
        return max(value, 0)
    if isinstance(value, float):
        return max(int(value), 0) if math.isfinite(value) else 0
    m = LEADING_INT_RE.match(str(value))
    if not m:
        return 0
    return max(int(m.group(1)), 0)


def _amount(value: Any) -> float:
    """Float with parseFloat-style leniency; unparsable or negative → 0.0."""
    if value is None or isinstance(value, bool):
        return 0.0
    if isinstance(value, (int, float)):
        out = float(value)
    else:
        m = _LEADING_FLOAT_RE.match(str(value))
        if not m:
            return 0.0
        out = float(m.group(1))
    if not math.isfinite(out):
        return 0.0
    return max(out, 0.0)


# ---------------------------------------------------------------------------
# Field table: (canonical field, candidate keys in priority order, coercer)
# Canonical key first, then the Title Case export headers, snake_case, extras.
# ---------------------------------------------------------------------------

FieldSpec = tuple[str, tuple[str, ...], Callable[[Any], Any]]

FIELD_SPECS: list[FieldSpec] = [
    ("customerId", ("customerId", "Customer ID", "customer_id"), _text),
    ("customerName", ("customerName", "Customer Name", "customer_name"), _text),
    ("phoneNumber", ("phoneNumber", "Phone Number", "phone_number"), _text),
    ("gender", ("gender", "Gender"), _text),
    ("age", ("age", "Age"), _count),
    ("customerRegion", ("customerRegion", "Customer Region", "customer_region", "region"), _text),
    ("customerType", ("customerType", "Customer Type", "customer_type"), _text),
    ("productId", ("productId", "Product ID", "product_id"), _text),
    ("productName", ("productName", "Product Name", "product_name"), _text),
    ("brand", ("brand", "Brand"), _text),
    ("category", ("category", "Product Category", "product_category", "productCategory"), _text),
    ("tags", ("tags", "Tags"), _text),
    ("quantity", ("quantity", "Quantity"), _count),
    ("pricePerUnit", ("pricePerUnit", "Price per Unit", "price_per_unit"), _amount),
    ("discountPercentage", ("discountPercentage", "Discount Percentage", "discount_percentage"), _amount),
    ("totalAmount", ("totalAmount", "Total Amount", "total_amount"), _amount),
    ("finalAmount", ("finalAmount", "Final Amount", "final_amount"), _amount),
    ("date", ("date", "Date"), _text),
    ("paymentMethod", ("paymentMethod", "Payment Method", "payment_method"), _text),
    ("orderStatus", ("orderStatus", "Order Status", "order_status"), _text),
    ("deliveryType", ("deliveryType", "Delivery Type", "delivery_type"), _text),
    ("storeId", ("storeId", "Store ID", "store_id"), _text),
    ("storeLocation", ("storeLocation", "Store Location", "store_location"), _text),
    ("salespersonId", ("salespersonId", "Salesperson ID", "salesperson_id"), _text),
    ("employeeName", ("employeeName", "Employee Name", "employee_name"), _text),
]


def _is_absent(value: Any) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


def resolve_field(item: Mapping[str, Any], keys: Sequence[str]) -> Any:
    """Return the first non-absent value among candidate keys, else None."""
    for key in keys:
        value = item.get(key)
        if not _is_absent(value):
            return value
    return None


def normalize_record(item: Mapping[str, Any]) -> TransactionRecord:
    """Map one loosely-typed source object onto the canonical schema."""
    values = {name: coerce(resolve_field(item, keys)) for name, keys, coerce in FIELD_SPECS}
    return TransactionRecord(**values)


def normalize_records(items: Any) -> list[TransactionRecord]:
    """Normalize a whole source payload, one record per input object.

    Raises MalformedSourceError if the payload is not a list of objects.
    """
    if not isinstance(items, list):
        raise MalformedSourceError(
            f"Expected a JSON array of records, got {type(items).__name__}"
        )
    records: list[TransactionRecord] = []
    for i, item in enumerate(items):
        if not isinstance(item, Mapping):
            raise MalformedSourceError(
                f"Record {i} is {type(item).__name__}, expected an object"
            )
        records.append(normalize_record(item))
    return records


# ---------------------------------------------------------------------------
# Frame construction
# ---------------------------------------------------------------------------

def explode_tags(tags: str) -> list[str]:
    """Split a comma-separated tag string into trimmed, non-empty labels."""
    if not tags:
        return []
    return [t.strip() for t in tags.split(",") if t.strip()]


def records_to_frame(records: Sequence[TransactionRecord]) -> pd.DataFrame:
    """Build the in-memory dataset frame with derived query columns.

    ``_timestamp`` holds the parsed date (UTC, NaT when unparsable) and
    ``_tagSet`` the exploded tags as a frozenset.
    """
    df = pd.DataFrame(
        [[getattr(r, name) for name in RECORD_FIELDS] for r in records],
        columns=RECORD_FIELDS,
    )
    df["age"] = df["age"].astype(np.int64)
    df["quantity"] = df["quantity"].astype(np.int64)
    for col in ("pricePerUnit", "discountPercentage", "totalAmount", "finalAmount"):
        df[col] = df[col].astype(np.float64)

    df["_timestamp"] = pd.to_datetime(df["date"], errors="coerce", utc=True, format="mixed")
    df["_tagSet"] = [frozenset(explode_tags(t)) for t in df["tags"]]
    return df
