"""Repository for card data access."""

from typing import Optional

from sqlalchemy.ext.asyncio import AsyncSession

from eazybank.core.audit import Auditor
from eazybank.models.domain.card import Card
from eazybank.repositories.base import BaseRepository


class CardRepository(BaseRepository[Card]):
    """Repository for Card with lookups by mobile and card number."""

    def __init__(self, db: AsyncSession, auditor: Auditor):
        super().__init__(Card, db, auditor)

    async def get_by_mobile_number(self, mobile_number: str) -> Optional[Card]:
        return await self.find_one_by(mobile_number=mobile_number)

    async def get_by_card_number(self, card_number: str) -> Optional[Card]:
        return await self.find_one_by(card_number=card_number)
