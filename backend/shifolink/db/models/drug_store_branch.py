"""Module: drug_store_branch."""

import uuid

from sqlalchemy import ForeignKey, String, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from shifolink.db.base import AuditMixin, Base


class DrugStoreBranch(AuditMixin, Base):
    __tablename__ = "drug_store_branch"

    drug_store_id: Mapped[uuid.UUID] = mapped_column(Uuid, ForeignKey("drug_store.id"), nullable=False)
    address: Mapped[str | None] = mapped_column(String, nullable=True)
    phone: Mapped[str | None] = mapped_column(String, nullable=True)
