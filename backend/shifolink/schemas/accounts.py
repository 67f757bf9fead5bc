"""
Payloads for account-bearing entities.

Create shapes carry the password and birth date; update shapes only carry the
mutable contact fields (password goes through the PATCH password change).
"""

import uuid
from datetime import date

from pydantic import BaseModel, Field


class AccountCreate(BaseModel):
    first_name: str = Field(min_length=1, max_length=120)
    last_name: str = Field(min_length=1, max_length=120)
    email: str | None = None
    password: str
    phone: str | None = None
    gender: str | None = None
    birth_date: date | None = None
    address: str | None = None


class AccountUpdate(BaseModel):
    first_name: str | None = Field(default=None, min_length=1, max_length=120)
    last_name: str | None = Field(default=None, min_length=1, max_length=120)
    email: str | None = None
    phone: str | None = None
    address: str | None = None


class AuthorCreate(AccountCreate):
    pass


class AuthorUpdate(AccountUpdate):
    pass


class CustomerCreate(AccountCreate):
    pass


class CustomerUpdate(AccountUpdate):
    pass


class ClinicAdminCreate(AccountCreate):
    clinic_branch_id: uuid.UUID
    doctor_type_id: uuid.UUID | None = None


class ClinicAdminUpdate(AccountUpdate):
    clinic_branch_id: uuid.UUID | None = None
    doctor_type_id: uuid.UUID | None = None


class DoctorCreate(AccountCreate):
    doctor_type_id: uuid.UUID
    working_time: str | None = None
    status: str | None = None


class DoctorUpdate(AccountUpdate):
    doctor_type_id: uuid.UUID | None = None
    working_time: str | None = None
    status: str | None = None


class PharmacistCreate(AccountCreate):
    drug_store_branch_id: uuid.UUID


class PharmacistUpdate(AccountUpdate):
    drug_store_branch_id: uuid.UUID | None = None


class SuperAdminCreate(AccountCreate):
    clinic_id: uuid.UUID | None = None
    drug_store_id: uuid.UUID | None = None
    author_id: uuid.UUID | None = None


class SuperAdminUpdate(AccountUpdate):
    clinic_id: uuid.UUID | None = None
    drug_store_id: uuid.UUID | None = None
    author_id: uuid.UUID | None = None
