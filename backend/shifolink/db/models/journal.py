"""Module: journal."""

import uuid

from sqlalchemy import ForeignKey, String, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from shifolink.db.base import AuditMixin, Base


class Journal(AuditMixin, Base):
    __tablename__ = "journal"

    author_id: Mapped[uuid.UUID] = mapped_column(Uuid, ForeignKey("author.id"), nullable=False)
    theme: Mapped[str] = mapped_column(String, nullable=False)
    article: Mapped[str | None] = mapped_column(Text, nullable=True)
