"""Dependency injection for FastAPI endpoints."""

from typing import Annotated, AsyncGenerator

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from eazybank.config import settings
from eazybank.core.audit import Auditor, FixedAuditor
from eazybank.db.session import get_db
from eazybank.services.accounts_service import AccountsService
from eazybank.services.cards_service import CardsService
from eazybank.services.customer_service import CustomerService
from eazybank.services.loans_service import LoansService

__all__ = [
    "get_db",
    "get_session",
    "get_accounts_auditor",
    "get_cards_auditor",
    "get_loans_auditor",
    "get_accounts_service",
    "get_cards_service",
    "get_loans_service",
    "get_customer_service",
]


async def get_session() -> AsyncGenerator[AsyncSession, None]:
    """
    Get database session dependency.

    This is an alias for get_db for clarity in endpoint signatures.
    """
    async for session in get_db():
        yield session


# ==================== Auditors ====================


def get_accounts_auditor() -> Auditor:
    return FixedAuditor(settings.ACCOUNTS_AUDITOR)


def get_cards_auditor() -> Auditor:
    return FixedAuditor(settings.CARDS_AUDITOR)


def get_loans_auditor() -> Auditor:
    return FixedAuditor(settings.LOANS_AUDITOR)


# ==================== Services ====================


def get_accounts_service(
    db: Annotated[AsyncSession, Depends(get_session)],
    auditor: Annotated[Auditor, Depends(get_accounts_auditor)],
) -> AccountsService:
    return AccountsService(db, auditor=auditor)


def get_cards_service(
    db: Annotated[AsyncSession, Depends(get_session)],
    auditor: Annotated[Auditor, Depends(get_cards_auditor)],
) -> CardsService:
    return CardsService(db, auditor=auditor)


def get_loans_service(
    db: Annotated[AsyncSession, Depends(get_session)],
    auditor: Annotated[Auditor, Depends(get_loans_auditor)],
) -> LoansService:
    return LoansService(db, auditor=auditor)


def get_customer_service(
    accounts: Annotated[AccountsService, Depends(get_accounts_service)],
    cards: Annotated[CardsService, Depends(get_cards_service)],
    loans: Annotated[LoansService, Depends(get_loans_service)],
) -> CustomerService:
    return CustomerService(accounts, cards, loans)
