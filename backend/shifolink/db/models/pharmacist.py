"""Module: pharmacist."""

import uuid

from sqlalchemy import ForeignKey, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from shifolink.db.base import AccountMixin, AuditMixin, Base


class Pharmacist(AuditMixin, AccountMixin, Base):
    __tablename__ = "pharmacist"

    drug_store_branch_id: Mapped[uuid.UUID] = mapped_column(
        Uuid,
        ForeignKey("drug_store_branch.id"),
        nullable=False,
    )
