"""Module: clinics."""

import uuid
from datetime import datetime

from pydantic import BaseModel, Field


class ClinicCreate(BaseModel):
    name: str = Field(min_length=1, max_length=200)
    description: str | None = None


class ClinicUpdate(BaseModel):
    name: str | None = Field(default=None, min_length=1, max_length=200)
    description: str | None = None


class ClinicBranchCreate(BaseModel):
    clinic_id: uuid.UUID
    address: str | None = None
    phone: str | None = None
    working_time: str | None = None


class ClinicBranchUpdate(BaseModel):
    clinic_id: uuid.UUID | None = None
    address: str | None = None
    phone: str | None = None
    working_time: str | None = None


class DoctorTypeCreate(BaseModel):
    name: str = Field(min_length=1, max_length=200)
    description: str | None = None
    clinic_branch_id: uuid.UUID


class DoctorTypeUpdate(BaseModel):
    name: str | None = Field(default=None, min_length=1, max_length=200)
    description: str | None = None
    clinic_branch_id: uuid.UUID | None = None


class QueueCreate(BaseModel):
    customer_id: uuid.UUID
    doctor_id: uuid.UUID
    queue_number: str = Field(min_length=1, max_length=60)
    queue_time: datetime | None = None


# Queue number is fixed once issued.
class QueueUpdate(BaseModel):
    customer_id: uuid.UUID | None = None
    doctor_id: uuid.UUID | None = None
    queue_time: datetime | None = None
