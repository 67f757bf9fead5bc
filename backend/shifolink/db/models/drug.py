"""Module: drug."""

import uuid
from datetime import date
from decimal import Decimal

from sqlalchemy import Date, ForeignKey, Integer, Numeric, String, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from shifolink.db.base import AuditMixin, Base


# Stock line of a drug store branch.
class Drug(AuditMixin, Base):
    __tablename__ = "drug"

    drug_store_branch_id: Mapped[uuid.UUID] = mapped_column(
        Uuid,
        ForeignKey("drug_store_branch.id"),
        nullable=False,
    )
    name: Mapped[str] = mapped_column(String, nullable=False)
    description: Mapped[str | None] = mapped_column(String, nullable=True)
    count: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    price: Mapped[Decimal | None] = mapped_column(Numeric(12, 2), nullable=True)
    date_of_manufacture: Mapped[date | None] = mapped_column(Date, nullable=True)
    best_before: Mapped[date | None] = mapped_column(Date, nullable=True)
