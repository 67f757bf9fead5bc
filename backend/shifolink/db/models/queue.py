"""Module: queue."""

import uuid
from datetime import datetime

from sqlalchemy import DateTime, ForeignKey, String, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from shifolink.db.base import AuditMixin, Base


# A customer's place in a doctor's appointment queue.
class Queue(AuditMixin, Base):
    __tablename__ = "queue"

    customer_id: Mapped[uuid.UUID] = mapped_column(Uuid, ForeignKey("customer.id"), nullable=False)
    doctor_id: Mapped[uuid.UUID] = mapped_column(Uuid, ForeignKey("doctor.id"), nullable=False)
    queue_number: Mapped[str] = mapped_column(String, nullable=False)
    queue_time: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)
