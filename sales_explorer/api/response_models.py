"""
Pydantic response schemas for the API.
"""
from __future__ import annotations

from pydantic import BaseModel


class HealthResponse(BaseModel):
    status: str
    loaded: bool
    rows: int
    source: str


class TransactionOut(BaseModel):
    customerId: str
    customerName: str
    phoneNumber: str
    gender: str
    age: int
    customerRegion: str
    customerType: str
    productId: str
    productName: str
    brand: str
    category: str
    tags: str
    quantity: int
    pricePerUnit: float
    discountPercentage: float
    totalAmount: float
    finalAmount: float
    date: str
    paymentMethod: str
    orderStatus: str
    deliveryType: str
    storeId: str
    storeLocation: str
    salespersonId: str
    employeeName: str


class PaginationOut(BaseModel):
    currentPage: int
    totalPages: int
    totalItems: int
    itemsPerPage: int


class SalesPageResponse(BaseModel):
    data: list[TransactionOut]
    pagination: PaginationOut


class FilterOptionsResponse(BaseModel):
    regions: list[str]
    genders: list[str]
    categories: list[str]
    tags: list[str]
    paymentMethods: list[str]


class ErrorResponse(BaseModel):
    error: str
