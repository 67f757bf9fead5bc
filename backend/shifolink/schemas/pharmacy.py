"""Module: pharmacy."""

import uuid
from datetime import date
from decimal import Decimal

from pydantic import BaseModel, Field


class DrugStoreCreate(BaseModel):
    name: str = Field(min_length=1, max_length=200)
    description: str | None = None


class DrugStoreUpdate(BaseModel):
    name: str | None = Field(default=None, min_length=1, max_length=200)
    description: str | None = None


class DrugStoreBranchCreate(BaseModel):
    drug_store_id: uuid.UUID
    address: str | None = None
    phone: str | None = None


class DrugStoreBranchUpdate(BaseModel):
    drug_store_id: uuid.UUID | None = None
    address: str | None = None
    phone: str | None = None


class DrugCreate(BaseModel):
    drug_store_branch_id: uuid.UUID
    name: str = Field(min_length=1, max_length=200)
    description: str | None = None
    count: int = Field(default=0, ge=0)
    price: Decimal | None = Field(default=None, ge=0, max_digits=12, decimal_places=2)
    date_of_manufacture: date | None = None
    best_before: date | None = None


# Manufacture and expiry dates are fixed per stock line.
class DrugUpdate(BaseModel):
    drug_store_branch_id: uuid.UUID | None = None
    name: str | None = Field(default=None, min_length=1, max_length=200)
    description: str | None = None
    count: int | None = Field(default=None, ge=0)
    price: Decimal | None = Field(default=None, ge=0, max_digits=12, decimal_places=2)


class OrdersCreate(BaseModel):
    pharmacist_id: uuid.UUID
    customer_id: uuid.UUID


class OrdersUpdate(BaseModel):
    pharmacist_id: uuid.UUID | None = None
    customer_id: uuid.UUID | None = None


class OrderDrugCreate(BaseModel):
    drug_id: uuid.UUID
    orders_id: uuid.UUID


class OrderDrugUpdate(BaseModel):
    drug_id: uuid.UUID | None = None
    orders_id: uuid.UUID | None = None
