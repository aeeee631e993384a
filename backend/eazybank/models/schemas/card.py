"""Pydantic schemas for cards."""

from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from eazybank.core.constants import CARD_NUMBER_PATTERN, MOBILE_NUMBER_PATTERN
from eazybank.core.enums import CardType


class CardResponse(BaseModel):
    """Schema for card response."""

    mobile_number: str = Field(..., pattern=MOBILE_NUMBER_PATTERN)
    card_number: str = Field(..., pattern=CARD_NUMBER_PATTERN)
    card_type: CardType
    total_limit: Decimal = Field(..., ge=0)
    amount_used: Decimal = Field(..., ge=0)
    available_amount: Decimal = Field(..., ge=0)

    model_config = ConfigDict(from_attributes=True)


class CardUpdate(BaseModel):
    """
    Schema for updating a card.

    ``card_number`` identifies the record; the available amount is derived
    from the limit and the amount used.
    """

    card_number: str = Field(..., pattern=CARD_NUMBER_PATTERN)
    card_type: Optional[CardType] = None
    total_limit: Optional[Decimal] = Field(None, ge=0, max_digits=15, decimal_places=2)
    amount_used: Optional[Decimal] = Field(None, ge=0, max_digits=15, decimal_places=2)

    model_config = ConfigDict(use_enum_values=True)
