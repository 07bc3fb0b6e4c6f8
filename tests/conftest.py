"""
Pytest configuration and fixtures for sales-explorer tests.

Provides raw source payloads (with mixed key spellings), the normalized
frame built from them, a sales.json on disk, and a DatasetCache over it.
"""
import json
from pathlib import Path
from typing import Callable

import pandas as pd
import pytest

from sales_explorer.data.normalize import normalize_records, records_to_frame
from sales_explorer.data.store import DatasetCache


# =======================
# RAW SOURCE DATA
# =======================

RAW_SALES = [
    {
        "Customer ID": "C001",
        "Customer Name": "Priya Shah",
        "Phone Number": "9876543210",
        "Gender": "Female",
        "Age": "29",
        "Customer Region": "North",
        "Customer Type": "Returning",
        "Product ID": "P100",
        "Product Name": "Face Serum",
        "Brand": "Glow",
        "Product Category": "Beauty",
        "Tags": "skincare, organic",
        "Quantity": "2",
        "Price per Unit": "25.50",
        "Discount Percentage": "10",
        "Total Amount": "51.00",
        "Final Amount": "45.90",
        "Date": "2024-02-15",
        "Payment Method": "UPI",
        "Order Status": "Completed",
        "Delivery Type": "Standard",
        "Store ID": "S1",
        "Store Location": "Mumbai",
        "Salesperson ID": "E10",
        "Employee Name": "Ravi",
    },
    {
        "customer_id": "C002",
        "customer_name": "Arjun Mehta",
        "phone_number": 9123456780,
        "gender": "Male",
        "age": 41,
        "customer_region": "South",
        "customer_type": "New",
        "product_id": "P200",
        "product_name": "Running Shoes",
        "brand": "Stride",
        "product_category": "Sports",
        "tags": "footwear",
        "quantity": 5,
        "price_per_unit": 80,
        "total_amount": 400,
        "final_amount": 400,
        "date": "2024-01-10",
        "payment_method": "Credit Card",
        "order_status": "Completed",
        "delivery_type": "Express",
    },
    {
        "customerId": "C003",
        "customerName": "PRIYA SHAH",
        "phoneNumber": "5550001111",
        "gender": "Female",
        "age": "18",
        "customerRegion": "North",
        "customerType": "New",
        "productName": "Yoga Mat",
        "brand": "Stride",
        "category": "Sports",
        "tags": "fitness, organic",
        "quantity": "2",
        "pricePerUnit": "30",
        "date": "2024-03-10T18:30:00",
        "paymentMethod": "Cash",
    },
    {
        "customerId": "C004",
        "customerName": "bob stone",
        "phoneNumber": "5559876000",
        "gender": "Male",
        "age": "not known",
        "region": "East",
        "category": "Electronics",
        "tags": "",
        "quantity": "1",
        "date": "2024-03-11",
        "paymentMethod": "UPI",
    },
    {
        "customerId": "C005",
        "customerName": "Alice Young",
        "phoneNumber": "5552223333",
        "gender": "Female",
        "age": 30,
        "customerRegion": "East",
        "category": "Beauty",
        "tags": "skincare",
        "quantity": 7,
        "date": "sometime last week",
        "paymentMethod": "Debit Card",
    },
]


@pytest.fixture
def raw_sales() -> list[dict]:
    """Fresh copy of the raw source payload."""
    return json.loads(json.dumps(RAW_SALES))


@pytest.fixture
def make_frame() -> Callable[[list[dict]], pd.DataFrame]:
    """Build a normalized dataset frame from raw source objects."""
    def _make(items: list[dict]) -> pd.DataFrame:
        return records_to_frame(normalize_records(items))
    return _make


@pytest.fixture
def sales_df(raw_sales, make_frame) -> pd.DataFrame:
    return make_frame(raw_sales)


# =======================
# FILESYSTEM FIXTURES
# =======================

@pytest.fixture
def sales_file(tmp_path, raw_sales) -> Path:
    """sales.json written to a temporary directory."""
    path = tmp_path / "sales.json"
    path.write_text(json.dumps(raw_sales), encoding="utf-8")
    return path


@pytest.fixture
def cache(sales_file) -> DatasetCache:
    cache = DatasetCache(sales_file)
    yield cache
    cache.reset()
