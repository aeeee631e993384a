"""Customer aggregator combining account, card and loan details."""

import logging
from typing import Awaitable, Callable, Optional, TypeVar

from eazybank.core.exceptions import ResourceNotFoundError
from eazybank.models.schemas.customer import CustomerDetailsResponse
from eazybank.services.accounts_service import AccountsService
from eazybank.services.cards_service import CardsService
from eazybank.services.loans_service import LoansService

logger = logging.getLogger(__name__)

T = TypeVar("T")


class CustomerService:
    """
    Read-only view over the accounts, cards and loans services.

    Only the public fetch operations of each service are used. A customer
    must have an account; cards and loans are optional.
    """

    def __init__(
        self,
        accounts: AccountsService,
        cards: CardsService,
        loans: LoansService,
    ):
        self.accounts = accounts
        self.cards = cards
        self.loans = loans

    async def fetch_customer_details(
        self, mobile_number: str, correlation_id: Optional[str] = None
    ) -> CustomerDetailsResponse:
        """
        Build the composite view for a mobile number.

        Args:
            mobile_number: 10-digit mobile number
            correlation_id: Request correlation id, logged for tracing

        Returns:
            Customer details with account and, when present, card and loan

        Raises:
            ResourceNotFoundError: If the customer or their account is missing
        """
        logger.debug(f"eazybank-correlation-id found: {correlation_id}")

        customer = await self.accounts.fetch_account(mobile_number)
        card = await self._fetch_optional(self.cards.fetch_card, mobile_number)
        loan = await self._fetch_optional(self.loans.fetch_loan, mobile_number)

        return CustomerDetailsResponse(
            name=customer.name,
            email=customer.email,
            mobile_number=customer.mobile_number,
            account=customer.account,
            card=card,
            loan=loan,
        )

    @staticmethod
    async def _fetch_optional(
        fetch: Callable[[str], Awaitable[T]], mobile_number: str
    ) -> Optional[T]:
        try:
            return await fetch(mobile_number)
        except ResourceNotFoundError:
            return None
