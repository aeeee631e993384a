from .base import BaseRepository
from .card_repository import CardRepository
from .customer_repository import AccountRepository, CustomerRepository
from .loan_repository import LoanRepository

__all__ = [
    "BaseRepository",
    "CustomerRepository",
    "AccountRepository",
    "CardRepository",
    "LoanRepository",
]
