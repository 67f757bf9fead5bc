"""Module: super_admin."""

import uuid

from sqlalchemy import ForeignKey, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from shifolink.db.base import AccountMixin, AuditMixin, Base


# Platform-wide administrator, optionally scoped to a clinic/drug store/author.
class SuperAdmin(AuditMixin, AccountMixin, Base):
    __tablename__ = "super_admin"

    clinic_id: Mapped[uuid.UUID | None] = mapped_column(Uuid, ForeignKey("clinic.id"), nullable=True)
    drug_store_id: Mapped[uuid.UUID | None] = mapped_column(Uuid, ForeignKey("drug_store.id"), nullable=True)
    author_id: Mapped[uuid.UUID | None] = mapped_column(Uuid, ForeignKey("author.id"), nullable=True)
