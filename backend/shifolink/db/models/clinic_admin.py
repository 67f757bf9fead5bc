"""Module: clinic_admin."""

import uuid

from sqlalchemy import ForeignKey, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from shifolink.db.base import AccountMixin, AuditMixin, Base


class ClinicAdmin(AuditMixin, AccountMixin, Base):
    __tablename__ = "clinic_admin"

    clinic_branch_id: Mapped[uuid.UUID] = mapped_column(Uuid, ForeignKey("clinic_branch.id"), nullable=False)
    doctor_type_id: Mapped[uuid.UUID | None] = mapped_column(Uuid, ForeignKey("doctor_type.id"), nullable=True)
