"""Module: author."""

from shifolink.db.base import AccountMixin, AuditMixin, Base


# Journal authors; account-bearing.
class Author(AuditMixin, AccountMixin, Base):
    __tablename__ = "author"
