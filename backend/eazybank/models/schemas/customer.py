"""Pydantic schema for the aggregated customer view."""

from typing import Optional

from pydantic import BaseModel, Field

from eazybank.core.constants import MOBILE_NUMBER_PATTERN
from eazybank.models.schemas.account import AccountResponse
from eazybank.models.schemas.card import CardResponse
from eazybank.models.schemas.loan import LoanResponse


class CustomerDetailsResponse(BaseModel):
    """Customer with their account, card and loan details."""

    name: str
    email: str
    mobile_number: str = Field(..., pattern=MOBILE_NUMBER_PATTERN)
    account: AccountResponse
    card: Optional[CardResponse] = None
    loan: Optional[LoanResponse] = None
