"""Module: clinic_branch."""

import uuid

from sqlalchemy import ForeignKey, String, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from shifolink.db.base import AuditMixin, Base


class ClinicBranch(AuditMixin, Base):
    __tablename__ = "clinic_branch"

    clinic_id: Mapped[uuid.UUID] = mapped_column(Uuid, ForeignKey("clinic.id"), nullable=False)
    address: Mapped[str | None] = mapped_column(String, nullable=True)
    phone: Mapped[str | None] = mapped_column(String, nullable=True)
    working_time: Mapped[str | None] = mapped_column(String, nullable=True)
