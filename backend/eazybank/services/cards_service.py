"""Cards service for issuing and maintaining customer cards."""

import logging
from decimal import Decimal
from typing import Optional

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from eazybank.config import settings
from eazybank.core.audit import Auditor, FixedAuditor
from eazybank.core.constants import DEFAULT_CARD_TYPE, NEW_CARD_LIMIT
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
from eazybank.models.domain.card import Card
from eazybank.models.schemas.card import CardResponse, CardUpdate
from eazybank.repositories.card_repository import CardRepository

logger = logging.getLogger(__name__)


class CardsService:
    """
    Cards service with one card per mobile number.

    New cards are credit cards with the standard limit and nothing used.
    """

    def __init__(
        self,
        db: AsyncSession,
        auditor: Optional[Auditor] = None,
        number_generator: Optional[NumberGenerator] = None,
    ):
        """
        Initialize the cards service.

        Args:
            db: Async database session
            auditor: Actor provider for audit columns (defaults to CARDS_AUDITOR)
            number_generator: Source of card numbers (defaults to random 12-digit)
        """
        self.db = db
        self.repo = CardRepository(db, auditor or FixedAuditor(settings.CARDS_AUDITOR))
        self.number_generator = number_generator or record_number_generator()

    async def create_card(self, mobile_number: str) -> None:
        """
        Issue a new card for a mobile number.

        Args:
            mobile_number: 10-digit mobile number

        Raises:
            ResourceAlreadyExistsError: If a card already exists for the number
        """
        if await self.repo.get_by_mobile_number(mobile_number):
            raise ResourceAlreadyExistsError(
                f"Card already registered with given mobile number {mobile_number}"
            )

        try:
            card_number = await next_unused_number(
                self.number_generator,
                lambda number: self.repo.exists_by(card_number=str(number)),
            )
            await self.repo.create(
                mobile_number=mobile_number,
                card_number=str(card_number),
                card_type=DEFAULT_CARD_TYPE.value,
                total_limit=NEW_CARD_LIMIT,
                amount_used=Decimal("0"),
                available_amount=NEW_CARD_LIMIT,
            )
            await self.db.commit()
        except IntegrityError as e:
            await self.db.rollback()
            raise ResourceAlreadyExistsError(
                f"Card already registered with given mobile number {mobile_number}"
            ) from e

        logger.info(f"Issued card {card_number}")

    async def fetch_card(self, mobile_number: str) -> CardResponse:
        """
        Retrieve the card for a mobile number.

        Raises:
            ResourceNotFoundError: If no card exists for the number
        """
        return CardResponse.model_validate(await self._get_card(mobile_number))

    async def update_card(self, update_data: CardUpdate) -> bool:
        """
        Update a card identified by its card number.

        Only supplied fields change; the available amount is recomputed.

        Args:
            update_data: Card number and the fields to change

        Returns:
            True once updated

        Raises:
            ResourceNotFoundError: If no card has this card number
            InvalidAmountError: If the amount used would exceed the limit
        """
        card = await self.repo.get_by_card_number(update_data.card_number)
        if not card:
            raise ResourceNotFoundError("Card", "card_number", update_data.card_number)

        updates = update_data.model_dump(
            exclude_unset=True, exclude_none=True, exclude={"card_number"}
        )
        total_limit = updates.get("total_limit", card.total_limit)
        amount_used = updates.get("amount_used", card.amount_used)
        if amount_used > total_limit:
            raise InvalidAmountError(
                f"Amount used {amount_used} exceeds total limit {total_limit}"
            )

        for key, value in updates.items():
            setattr(card, key, value)
        card.available_amount = total_limit - amount_used

        await self.repo.save(card)
        await self.db.commit()

        logger.info(f"Updated card {card.card_number}")
        return True

    async def delete_card(self, mobile_number: str) -> bool:
        """
        Delete the card for a mobile number.

        Raises:
            ResourceNotFoundError: If no card exists for the number
        """
        card = await self._get_card(mobile_number)

        await self.repo.delete(card.card_id)
        await self.db.commit()

        logger.info(f"Deleted card {card.card_number}")
        return True

    async def _get_card(self, mobile_number: str) -> Card:
        card = await self.repo.get_by_mobile_number(mobile_number)
        if not card:
            raise ResourceNotFoundError("Card", "mobile_number", mobile_number)
        return card
