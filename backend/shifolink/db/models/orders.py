"""Module: orders."""

import uuid

from sqlalchemy import ForeignKey, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from shifolink.db.base import AuditMixin, Base


# Drug order placed by a customer and handled by a pharmacist.
# Creating an order does not touch drug stock counts.
class Orders(AuditMixin, Base):
    __tablename__ = "orders"

    pharmacist_id: Mapped[uuid.UUID] = mapped_column(Uuid, ForeignKey("pharmacist.id"), nullable=False)
    customer_id: Mapped[uuid.UUID] = mapped_column(Uuid, ForeignKey("customer.id"), nullable=False)
