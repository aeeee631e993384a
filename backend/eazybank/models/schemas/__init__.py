"""Pydantic schemas for API validation and serialization."""

from eazybank.models.schemas.account import (
    AccountResponse,
    AccountUpdate,
    CustomerCreate,
    CustomerResponse,
    CustomerUpdate,
)
from eazybank.models.schemas.card import CardResponse, CardUpdate
from eazybank.models.schemas.common import (
    ContactDetails,
    ContactInfoResponse,
    ErrorResponse,
    StatusResponse,
)
from eazybank.models.schemas.customer import CustomerDetailsResponse
from eazybank.models.schemas.loan import LoanResponse, LoanUpdate

__all__ = [
    # Common schemas
    "StatusResponse",
    "ErrorResponse",
    "ContactDetails",
    "ContactInfoResponse",
    # Account schemas
    "AccountResponse",
    "AccountUpdate",
    "CustomerCreate",
    "CustomerUpdate",
    "CustomerResponse",
    # Card schemas
    "CardResponse",
    "CardUpdate",
    # Loan schemas
    "LoanResponse",
    "LoanUpdate",
    # Aggregate schemas
    "CustomerDetailsResponse",
]
