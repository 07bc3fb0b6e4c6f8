"""
Canonical record schema and request-scoped query schemas.
"""
from __future__ import annotations

import datetime as dt
import re
from dataclasses import dataclass, field, fields
from enum import Enum
from typing import Iterable, Optional


@dataclass(frozen=True)
class TransactionRecord:
    """One normalized sale. Field names are the wire (camelCase) names."""
    customerId: str = ""
    customerName: str = ""
    phoneNumber: str = ""
    gender: str = ""
    age: int = 0
    customerRegion: str = ""
    customerType: str = ""
    productId: str = ""
    productName: str = ""
    brand: str = ""
    category: str = ""
    tags: str = ""
    quantity: int = 0
    pricePerUnit: float = 0.0
    discountPercentage: float = 0.0
    totalAmount: float = 0.0
    finalAmount: float = 0.0
    date: str = ""
    paymentMethod: str = ""
    orderStatus: str = ""
    deliveryType: str = ""
    storeId: str = ""
    storeLocation: str = ""
    salespersonId: str = ""
    employeeName: str = ""


RECORD_FIELDS: list[str] = [f.name for f in fields(TransactionRecord)]


class SortKey(str, Enum):
    DATE_DESC = "date_desc"
    DATE_ASC = "date_asc"
    QUANTITY_DESC = "quantity_desc"
    QUANTITY_ASC = "quantity_asc"
    NAME_ASC = "name_asc"
    NAME_DESC = "name_desc"
    NONE = "none"               # unrecognized sortBy: keep incoming order


@dataclass(frozen=True)
class FilterSet:
    """Optional per-field constraints for one list query.

    Empty tuples and ``None`` bounds mean "no constraint". Values inside one
    field are OR'ed; distinct fields are AND'ed.
    """
    regions: tuple[str, ...] = ()
    genders: tuple[str, ...] = ()
    categories: tuple[str, ...] = ()
    tags: tuple[str, ...] = ()
    payment_methods: tuple[str, ...] = ()
    age_min: Optional[int] = None
    age_max: Optional[int] = None
    date_start: Optional[dt.date] = None
    date_end: Optional[dt.date] = None      # inclusive through end of day

    @property
    def is_empty(self) -> bool:
        return not (
            self.regions or self.genders or self.categories or self.tags
            or self.payment_methods
            or self.age_min is not None or self.age_max is not None
            or self.date_start is not None or self.date_end is not None
        )


@dataclass
class FilterOptions:
    """Distinct sorted values usable as filter choices."""
    regions: list[str] = field(default_factory=list)
    genders: list[str] = field(default_factory=list)
    categories: list[str] = field(default_factory=list)
    tags: list[str] = field(default_factory=list)
    payment_methods: list[str] = field(default_factory=list)

    def as_dict(self) -> dict[str, list[str]]:
        return {
            "regions": list(self.regions),
            "genders": list(self.genders),
            "categories": list(self.categories),
            "tags": list(self.tags),
            "paymentMethods": list(self.payment_methods),
        }


# ---------------------------------------------------------------------------
# Lenient parameter parsing: malformed values degrade, never raise
# ---------------------------------------------------------------------------

def split_values(raw: Optional[str | Iterable[str]]) -> tuple[str, ...]:
    """Split a comma-separated parameter into trimmed, non-empty values."""
    if not raw:
        return ()
    pieces = raw.split(",") if isinstance(raw, str) else raw
    return tuple(p.strip() for p in pieces if p is not None and p.strip())


LEADING_INT_RE = re.compile(r"^\s*([+-]?\d+)")


def parse_int(raw: object, default: Optional[int] = None) -> Optional[int]:
    """Leading integer of ``raw`` ("18.5" → 18, "25 yrs" → 25); none → ``default``."""
    if raw is None or isinstance(raw, bool):
        return default
    if isinstance(raw, int):
        return raw
    m = LEADING_INT_RE.match(str(raw))
    return int(m.group(1)) if m else default


def parse_positive_int(raw: object, default: int) -> int:
    value = parse_int(raw, default)
    return value if value is not None and value >= 1 else default


def parse_date(raw: Optional[str | dt.date]) -> Optional[dt.date]:
    """Parse a YYYY-MM-DD (or ISO datetime) string; unparsable → None."""
    if raw is None:
        return None
    if isinstance(raw, dt.datetime):
        return raw.date()
    if isinstance(raw, dt.date):
        return raw
    text = str(raw).strip()
    if not text:
        return None
    try:
        return dt.date.fromisoformat(text)
    except ValueError:
        pass
    try:
        return dt.datetime.fromisoformat(text.replace("Z", "+00:00")).date()
    except ValueError:
        return None


def parse_sort_key(raw: Optional[str], default: str = SortKey.DATE_DESC.value) -> SortKey:
    """Absent/blank → default; unrecognized → SortKey.NONE (no reordering)."""
    if raw is None or not str(raw).strip():
        return SortKey(default)
    try:
        return SortKey(str(raw).strip())
    except ValueError:
        return SortKey.NONE


def build_filter_set(
    regions: Optional[str | Iterable[str]] = None,
    genders: Optional[str | Iterable[str]] = None,
    categories: Optional[str | Iterable[str]] = None,
    tags: Optional[str | Iterable[str]] = None,
    payment_methods: Optional[str | Iterable[str]] = None,
    age_min: object = None,
    age_max: object = None,
    date_start: Optional[str | dt.date] = None,
    date_end: Optional[str | dt.date] = None,
) -> FilterSet:
    """Normalize raw request values into a FilterSet."""
    return FilterSet(
        regions=split_values(regions),
        genders=split_values(genders),
        categories=split_values(categories),
        tags=split_values(tags),
        payment_methods=split_values(payment_methods),
        age_min=parse_int(age_min),
        age_max=parse_int(age_max),
        date_start=parse_date(date_start),
        date_end=parse_date(date_end),
    )
