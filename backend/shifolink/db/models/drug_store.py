"""Module: drug_store."""

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from shifolink.db.base import AuditMixin, Base


class DrugStore(AuditMixin, Base):
    __tablename__ = "drug_store"

    name: Mapped[str] = mapped_column(String, nullable=False)
    description: Mapped[str | None] = mapped_column(String, nullable=True)
