"""Pydantic schemas for customers and their accounts."""

from typing import Optional

from pydantic import BaseModel, ConfigDict, EmailStr, Field

from eazybank.core.constants import MOBILE_NUMBER_PATTERN
from eazybank.core.enums import AccountType

ACCOUNT_NUMBER_MIN = 1_000_000_000
ACCOUNT_NUMBER_MAX = 9_999_999_999


# ==================== Account Schemas ====================


class AccountResponse(BaseModel):
    """Account details embedded in a customer response."""

    account_number: int = Field(..., ge=ACCOUNT_NUMBER_MIN, le=ACCOUNT_NUMBER_MAX)
    account_type: AccountType
    branch_address: Optional[str] = None

    model_config = ConfigDict(from_attributes=True)


class AccountUpdate(BaseModel):
    """Schema for updating an account (number identifies the record)."""

    account_number: int = Field(..., ge=ACCOUNT_NUMBER_MIN, le=ACCOUNT_NUMBER_MAX)
    account_type: Optional[AccountType] = None
    branch_address: Optional[str] = Field(None, min_length=1, max_length=200)

    model_config = ConfigDict(use_enum_values=True)


# ==================== Customer Schemas ====================


class CustomerBase(BaseModel):
    """Base schema for customer with common fields."""

    name: str = Field(..., min_length=5, max_length=30)
    email: EmailStr
    mobile_number: str = Field(..., pattern=MOBILE_NUMBER_PATTERN)


class CustomerCreate(CustomerBase):
    """Schema for onboarding a customer with a new account."""

    pass


class CustomerUpdate(BaseModel):
    """
    Schema for updating a customer and their account.

    Without an ``account`` block there is nothing to update and the
    operation reports failure.
    """

    name: Optional[str] = Field(None, min_length=5, max_length=30)
    email: Optional[EmailStr] = None
    account: Optional[AccountUpdate] = None


class CustomerResponse(CustomerBase):
    """Schema for customer response with the embedded account."""

    account: Optional[AccountResponse] = None

    model_config = ConfigDict(from_attributes=True)
