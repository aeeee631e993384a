"""Customer and account domain models owned by the accounts service."""

from typing import Optional

from sqlalchemy import BigInteger, ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from eazybank.db.base import AuditMixin, Base


class Customer(AuditMixin, Base):
    """Bank customer identified externally by mobile number."""

    __tablename__ = "customer"

    customer_id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(100), nullable=False)
    email: Mapped[str] = mapped_column(String(100), nullable=False)
    mobile_number: Mapped[str] = mapped_column(
        String(20), nullable=False, unique=True, index=True
    )

    def __repr__(self) -> str:
        return f"<Customer(customer_id={self.customer_id}, mobile_number={self.mobile_number!r})>"


class Account(AuditMixin, Base):
    """Deposit account belonging to exactly one customer."""

    __tablename__ = "accounts"

    account_number: Mapped[int] = mapped_column(
        BigInteger, primary_key=True, autoincrement=False
    )
    customer_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("customer.customer_id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    account_type: Mapped[str] = mapped_column(String(100), nullable=False)
    branch_address: Mapped[Optional[str]] = mapped_column(String(200), nullable=True)

    def __repr__(self) -> str:
        return f"<Account(account_number={self.account_number}, type={self.account_type!r})>"
