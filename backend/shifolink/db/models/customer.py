"""Module: customer."""

from shifolink.db.base import AccountMixin, AuditMixin, Base


# Patients and buyers; account-bearing.
class Customer(AuditMixin, AccountMixin, Base):
    __tablename__ = "customer"
