"""Domain models for the banking services."""

from eazybank.models.domain.card import Card
from eazybank.models.domain.customer import Account, Customer
from eazybank.models.domain.loan import Loan

__all__ = [
    "Customer",
    "Account",
    "Card",
    "Loan",
]
