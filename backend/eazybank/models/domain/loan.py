"""Loan domain model owned by the loans service."""

from decimal import Decimal

from sqlalchemy import Integer, Numeric, String
from sqlalchemy.orm import Mapped, mapped_column

from eazybank.db.base import AuditMixin, Base


class Loan(AuditMixin, Base):
    """Loan taken out against a customer's mobile number."""

    __tablename__ = "loans"

    loan_id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    mobile_number: Mapped[str] = mapped_column(
        String(15), nullable=False, unique=True, index=True
    )
    loan_number: Mapped[str] = mapped_column(
        String(100), nullable=False, unique=True, index=True
    )
    loan_type: Mapped[str] = mapped_column(String(100), nullable=False)

    # Amounts
    total_loan: Mapped[Decimal] = mapped_column(Numeric(15, 2), nullable=False)
    amount_paid: Mapped[Decimal] = mapped_column(Numeric(15, 2), nullable=False)
    outstanding_amount: Mapped[Decimal] = mapped_column(Numeric(15, 2), nullable=False)

    def __repr__(self) -> str:
        return f"<Loan(loan_id={self.loan_id}, loan_number={self.loan_number!r})>"
