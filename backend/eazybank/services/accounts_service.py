"""Accounts service: customer onboarding and account maintenance."""

import logging
from typing import Optional

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from eazybank.config import settings
from eazybank.core.audit import Auditor, FixedAuditor
from eazybank.core.constants import DEFAULT_ACCOUNT_TYPE, DEFAULT_BRANCH_ADDRESS
from eazybank.core.exceptions import ResourceAlreadyExistsError, ResourceNotFoundError
from eazybank.core.numbers import (
    NumberGenerator,
    account_number_generator,
    next_unused_number,
)
from eazybank.models.domain.customer import Customer
from eazybank.models.schemas.account import (
    AccountResponse,
    CustomerCreate,
    CustomerResponse,
    CustomerUpdate,
)
from eazybank.repositories.customer_repository import (
    AccountRepository,
    CustomerRepository,
)

logger = logging.getLogger(__name__)


class AccountsService:
    """
    Accounts service managing customers and their deposit accounts.

    A customer and its account are created, updated and deleted together;
    each write operation commits exactly once so the pair never ends up
    half-written.
    """

    def __init__(
        self,
        db: AsyncSession,
        auditor: Optional[Auditor] = None,
        number_generator: Optional[NumberGenerator] = None,
    ):
        """
        Initialize the accounts service.

        Args:
            db: Async database session
            auditor: Actor provider for audit columns (defaults to ACCOUNTS_AUDITOR)
            number_generator: Source of account numbers (defaults to random 10-digit)
        """
        self.db = db
        auditor = auditor or FixedAuditor(settings.ACCOUNTS_AUDITOR)
        self.customer_repo = CustomerRepository(db, auditor)
        self.account_repo = AccountRepository(db, auditor)
        self.number_generator = number_generator or account_number_generator()

    async def create_account(self, customer_data: CustomerCreate) -> None:
        """
        Onboard a customer and open a default savings account.

        Args:
            customer_data: Customer name, email and mobile number

        Raises:
            ResourceAlreadyExistsError: If the mobile number is already registered
        """
        mobile_number = customer_data.mobile_number
        if await self.customer_repo.get_by_mobile_number(mobile_number):
            raise ResourceAlreadyExistsError(
                f"Customer already registered with given mobile number {mobile_number}"
            )

        try:
            customer = await self.customer_repo.create(
                name=customer_data.name,
                email=customer_data.email,
                mobile_number=mobile_number,
            )
            account_number = await next_unused_number(
                self.number_generator,
                lambda number: self.account_repo.exists_by(account_number=number),
            )
            await self.account_repo.create(
                account_number=account_number,
                customer_id=customer.customer_id,
                account_type=DEFAULT_ACCOUNT_TYPE.value,
                branch_address=DEFAULT_BRANCH_ADDRESS,
            )
            await self.db.commit()
        except IntegrityError as e:
            # Mobile number or account number taken by a concurrent create
            await self.db.rollback()
            raise ResourceAlreadyExistsError(
                f"Customer or account already exists for mobile number {mobile_number}"
            ) from e
        except Exception:
            await self.db.rollback()
            raise

        logger.info(f"Created account {account_number} for customer {customer.customer_id}")

    async def fetch_account(self, mobile_number: str) -> CustomerResponse:
        """
        Retrieve a customer and their account by mobile number.

        Args:
            mobile_number: 10-digit mobile number

        Returns:
            Customer details with the embedded account

        Raises:
            ResourceNotFoundError: If the customer or their account is missing
        """
        customer = await self._get_customer(mobile_number)
        account = await self.account_repo.get_by_customer_id(customer.customer_id)
        if not account:
            raise ResourceNotFoundError("Account", "customer_id", customer.customer_id)

        return CustomerResponse(
            name=customer.name,
            email=customer.email,
            mobile_number=customer.mobile_number,
            account=AccountResponse.model_validate(account),
        )

    async def update_account(self, update_data: CustomerUpdate) -> bool:
        """
        Update an account and its owning customer.

        The account is identified by its account number; the customer's
        mobile number and the account number itself never change.

        Args:
            update_data: New customer fields and the embedded account block

        Returns:
            True if updated, False if no account block was supplied

        Raises:
            ResourceNotFoundError: If the account or its customer is missing
        """
        if update_data.account is None:
            return False

        account_number = update_data.account.account_number
        account = await self.account_repo.get_by_id(account_number)
        if not account:
            raise ResourceNotFoundError("Account", "account_number", account_number)

        customer = await self.customer_repo.get_by_id(account.customer_id)
        if not customer:
            raise ResourceNotFoundError("Customer", "customer_id", account.customer_id)

        account_updates = update_data.account.model_dump(
            exclude_unset=True, exclude_none=True, exclude={"account_number"}
        )
        for key, value in account_updates.items():
            setattr(account, key, value)

        customer_updates = update_data.model_dump(
            exclude_unset=True, exclude_none=True, exclude={"account"}
        )
        for key, value in customer_updates.items():
            setattr(customer, key, value)

        await self.account_repo.save(account)
        await self.customer_repo.save(customer)
        await self.db.commit()

        logger.info(f"Updated account {account_number}")
        return True

    async def delete_account(self, mobile_number: str) -> bool:
        """
        Delete a customer and their accounts.

        Args:
            mobile_number: 10-digit mobile number

        Returns:
            True once deleted

        Raises:
            ResourceNotFoundError: If no customer has this mobile number
        """
        customer = await self._get_customer(mobile_number)

        await self.account_repo.delete_by_customer_id(customer.customer_id)
        await self.customer_repo.delete(customer.customer_id)
        await self.db.commit()

        logger.info(f"Deleted customer {customer.customer_id} and their accounts")
        return True

    async def _get_customer(self, mobile_number: str) -> Customer:
        customer = await self.customer_repo.get_by_mobile_number(mobile_number)
        if not customer:
            raise ResourceNotFoundError("Customer", "mobile_number", mobile_number)
        return customer
