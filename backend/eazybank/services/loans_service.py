"""Loans service for opening and maintaining customer loans."""

import logging
from decimal import Decimal
from typing import Optional

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from eazybank.config import settings
from eazybank.core.audit import Auditor, FixedAuditor
from eazybank.core.constants import DEFAULT_LOAN_TYPE, NEW_LOAN_LIMIT
from eazybank.core.exceptions import (
    InvalidAmountError,
    ResourceAlreadyExistsError,
    ResourceNotFoundError,
)
from eazybank.core.numbers import (
    NumberGenerator,
    next_unused_number,
    record_number_generator,
)
from eazybank.models.domain.loan import Loan
from eazybank.models.schemas.loan import LoanResponse, LoanUpdate
from eazybank.repositories.loan_repository import LoanRepository

logger = logging.getLogger(__name__)


class LoansService:
    """
    Loans service with one loan per mobile number.

    New loans are home loans for the standard amount with nothing repaid.
    """

    def __init__(
        self,
        db: AsyncSession,
        auditor: Optional[Auditor] = None,
        number_generator: Optional[NumberGenerator] = None,
    ):
        self.db = db
        self.repo = LoanRepository(db, auditor or FixedAuditor(settings.LOANS_AUDITOR))
        self.number_generator = number_generator or record_number_generator()

    async def create_loan(self, mobile_number: str) -> None:
        """
        Open a new loan for a mobile number.

        Args:
            mobile_number: 10-digit mobile number

        Raises:
            ResourceAlreadyExistsError: If a loan already exists for the number
        """
        if await self.repo.get_by_mobile_number(mobile_number):
            raise ResourceAlreadyExistsError(
                f"Loan already registered with given mobile number {mobile_number}"
            )

        try:
            loan_number = await next_unused_number(
                self.number_generator,
                lambda number: self.repo.exists_by(loan_number=str(number)),
            )
            await self.repo.create(
                mobile_number=mobile_number,
                loan_number=str(loan_number),
                loan_type=DEFAULT_LOAN_TYPE.value,
                total_loan=NEW_LOAN_LIMIT,
                amount_paid=Decimal("0"),
                outstanding_amount=NEW_LOAN_LIMIT,
            )
            await self.db.commit()
        except IntegrityError as e:
            await self.db.rollback()
            raise ResourceAlreadyExistsError(
                f"Loan already registered with given mobile number {mobile_number}"
            ) from e

        logger.info(f"Opened loan {loan_number}")

    async def fetch_loan(self, mobile_number: str) -> LoanResponse:
        """Retrieve the loan for a mobile number."""
        return LoanResponse.model_validate(await self._get_loan(mobile_number))

    async def update_loan(self, update_data: LoanUpdate) -> bool:
        """
        Update a loan identified by its loan number.

        Only supplied fields change; the outstanding amount is recomputed.

        Raises:
            ResourceNotFoundError: If no loan has this loan number
            InvalidAmountError: If the amount paid would exceed the total loan
        """
        loan = await self.repo.get_by_loan_number(update_data.loan_number)
        if not loan:
            raise ResourceNotFoundError("Loan", "loan_number", update_data.loan_number)

        updates = update_data.model_dump(
            exclude_unset=True, exclude_none=True, exclude={"loan_number"}
        )
        total_loan = updates.get("total_loan", loan.total_loan)
        amount_paid = updates.get("amount_paid", loan.amount_paid)
        if amount_paid > total_loan:
            raise InvalidAmountError(
                f"Amount paid {amount_paid} exceeds total loan {total_loan}"
            )

        for key, value in updates.items():
            setattr(loan, key, value)
        loan.outstanding_amount = total_loan - amount_paid

        await self.repo.save(loan)
        await self.db.commit()

        logger.info(f"Updated loan {loan.loan_number}")
        return True

    async def delete_loan(self, mobile_number: str) -> bool:
        """Delete the loan for a mobile number."""
        loan = await self._get_loan(mobile_number)

        await self.repo.delete(loan.loan_id)
        await self.db.commit()

        logger.info(f"Deleted loan {loan.loan_number}")
        return True

    async def _get_loan(self, mobile_number: str) -> Loan:
        loan = await self.repo.get_by_mobile_number(mobile_number)
        if not loan:
            raise ResourceNotFoundError("Loan", "mobile_number", mobile_number)
        return loan
