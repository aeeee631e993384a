"""Service layer for business logic."""

from eazybank.services.accounts_service import AccountsService
from eazybank.services.cards_service import CardsService
from eazybank.services.customer_service import CustomerService
from eazybank.services.loans_service import LoansService

__all__ = ["AccountsService", "CardsService", "LoansService", "CustomerService"]
