"""Pydantic schemas for loans."""

from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from eazybank.core.constants import LOAN_NUMBER_PATTERN, MOBILE_NUMBER_PATTERN
from eazybank.core.enums import LoanType


class LoanResponse(BaseModel):
    """Schema for loan response."""

    mobile_number: str = Field(..., pattern=MOBILE_NUMBER_PATTERN)
    loan_number: str = Field(..., pattern=LOAN_NUMBER_PATTERN)
    loan_type: LoanType
    total_loan: Decimal = Field(..., ge=0)
    amount_paid: Decimal = Field(..., ge=0)
    outstanding_amount: Decimal = Field(..., ge=0)

    model_config = ConfigDict(from_attributes=True)


class LoanUpdate(BaseModel):
    """
    Schema for updating a loan.

    ``loan_number`` identifies the record; the outstanding amount is derived
    from the total and the amount paid.
    """

    loan_number: str = Field(..., pattern=LOAN_NUMBER_PATTERN)
    loan_type: Optional[LoanType] = None
    total_loan: Optional[Decimal] = Field(None, ge=0, max_digits=15, decimal_places=2)
    amount_paid: Optional[Decimal] = Field(None, ge=0, max_digits=15, decimal_places=2)

    model_config = ConfigDict(use_enum_values=True)
