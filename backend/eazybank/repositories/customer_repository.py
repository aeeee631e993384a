"""Repositories for customer and account data access."""

from typing import Optional

from sqlalchemy import delete
from sqlalchemy.ext.asyncio import AsyncSession

from eazybank.core.audit import Auditor
from eazybank.models.domain.customer import Account, Customer
from eazybank.repositories.base import BaseRepository


class CustomerRepository(BaseRepository[Customer]):
    """Repository for Customer keyed by mobile number."""

    def __init__(self, db: AsyncSession, auditor: Auditor):
        super().__init__(Customer, db, auditor)

    async def get_by_mobile_number(self, mobile_number: str) -> Optional[Customer]:
        """
        Retrieve a customer by mobile number.

        Args:
            mobile_number: 10-digit mobile number

        Returns:
            The customer if found, None otherwise
        """
        return await self.find_one_by(mobile_number=mobile_number)


class AccountRepository(BaseRepository[Account]):
    """Repository for Account, whose primary key is the account number."""

    def __init__(self, db: AsyncSession, auditor: Auditor):
        super().__init__(Account, db, auditor)

    async def get_by_customer_id(self, customer_id: int) -> Optional[Account]:
        """
        Retrieve the account owned by a customer.

        Args:
            customer_id: Identifier of the owning customer

        Returns:
            The account if found, None otherwise
        """
        return await self.find_one_by(customer_id=customer_id)

    async def delete_by_customer_id(self, customer_id: int) -> int:
        """
        Delete every account owned by a customer.

        Args:
            customer_id: Identifier of the owning customer

        Returns:
            Number of deleted accounts
        """
        stmt = delete(Account).where(Account.customer_id == customer_id)
        result = await self.db.execute(stmt)
        await self.db.flush()
        return result.rowcount
