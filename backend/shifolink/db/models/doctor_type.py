"""Module: doctor_type."""

import uuid

from sqlalchemy import ForeignKey, String, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from shifolink.db.base import AuditMixin, Base


# Speciality offered by a clinic branch (cardiologist, dentist, ...).
class DoctorType(AuditMixin, Base):
    __tablename__ = "doctor_type"

    name: Mapped[str] = mapped_column(String, nullable=False)
    description: Mapped[str | None] = mapped_column(String, nullable=True)
    clinic_branch_id: Mapped[uuid.UUID] = mapped_column(Uuid, ForeignKey("clinic_branch.id"), nullable=False)
