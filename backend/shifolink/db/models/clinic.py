"""Module: clinic."""

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from shifolink.db.base import AuditMixin, Base


class Clinic(AuditMixin, Base):
    __tablename__ = "clinic"

    name: Mapped[str] = mapped_column(String, nullable=False)
    description: Mapped[str | None] = mapped_column(String, nullable=True)
