"""Core enums for type safety across the application."""

from enum import Enum


class AccountType(str, Enum):
    """Deposit account types."""

    SAVINGS = "Savings"
    CURRENT = "Current"


class CardType(str, Enum):
    """Card product types."""

    CREDIT_CARD = "Credit Card"
    DEBIT_CARD = "Debit Card"


class LoanType(str, Enum):
    """Loan product types."""

    HOME_LOAN = "Home Loan"
    VEHICLE_LOAN = "Vehicle Loan"
    PERSONAL_LOAN = "Personal Loan"
    EDUCATION_LOAN = "Education Loan"
