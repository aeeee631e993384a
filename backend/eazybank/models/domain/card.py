"""Card domain model owned by the cards service."""

from decimal import Decimal

from sqlalchemy import Integer, Numeric, String
from sqlalchemy.orm import Mapped, mapped_column

from eazybank.db.base import AuditMixin, Base


class Card(AuditMixin, Base):
    """Card issued against a customer's mobile number."""

    __tablename__ = "cards"

    card_id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    mobile_number: Mapped[str] = mapped_column(
        String(15), nullable=False, unique=True, index=True
    )
    card_number: Mapped[str] = mapped_column(
        String(100), nullable=False, unique=True, index=True
    )
    card_type: Mapped[str] = mapped_column(String(100), nullable=False)

    # Limits
    total_limit: Mapped[Decimal] = mapped_column(Numeric(15, 2), nullable=False)
    amount_used: Mapped[Decimal] = mapped_column(Numeric(15, 2), nullable=False)
    available_amount: Mapped[Decimal] = mapped_column(Numeric(15, 2), nullable=False)

    def __repr__(self) -> str:
        return f"<Card(card_id={self.card_id}, card_number={self.card_number!r})>"
