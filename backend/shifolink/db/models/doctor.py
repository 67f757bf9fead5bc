"""Module: doctor."""

import uuid

from sqlalchemy import ForeignKey, String, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from shifolink.db.base import AccountMixin, AuditMixin, Base


class Doctor(AuditMixin, AccountMixin, Base):
    __tablename__ = "doctor"

    doctor_type_id: Mapped[uuid.UUID] = mapped_column(Uuid, ForeignKey("doctor_type.id"), nullable=False)
    working_time: Mapped[str | None] = mapped_column(String, nullable=True)
    status: Mapped[str | None] = mapped_column(String, nullable=True)
