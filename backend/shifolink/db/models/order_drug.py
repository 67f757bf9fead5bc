"""Module: order_drug."""

import uuid

from sqlalchemy import ForeignKey, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from shifolink.db.base import AuditMixin, Base


# Link table between orders and the drugs they contain.
class OrderDrug(AuditMixin, Base):
    __tablename__ = "order_drug"

    drug_id: Mapped[uuid.UUID] = mapped_column(Uuid, ForeignKey("drug.id"), nullable=False)
    orders_id: Mapped[uuid.UUID] = mapped_column(Uuid, ForeignKey("orders.id"), nullable=False)
