"""Repository for loan data access."""

from typing import Optional

from sqlalchemy.ext.asyncio import AsyncSession

from eazybank.core.audit import Auditor
from eazybank.models.domain.loan import Loan
from eazybank.repositories.base import BaseRepository


class LoanRepository(BaseRepository[Loan]):
    """Repository for Loan with lookups by mobile and loan number."""

    def __init__(self, db: AsyncSession, auditor: Auditor):
        super().__init__(Loan, db, auditor)

    async def get_by_mobile_number(self, mobile_number: str) -> Optional[Loan]:
        return await self.find_one_by(mobile_number=mobile_number)

    async def get_by_loan_number(self, loan_number: str) -> Optional[Loan]:
        return await self.find_one_by(loan_number=loan_number)
