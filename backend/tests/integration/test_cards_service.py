from decimal import Decimal

import pytest
from sqlalchemy import select

from eazybank.core.exceptions import (
    InvalidAmountError,
    ResourceAlreadyExistsError,
    ResourceNotFoundError,
)
from eazybank.models.domain.card import Card
from eazybank.models.schemas.card import CardUpdate
from tests.helpers import MOBILE_NUMBER


@pytest.mark.asyncio
async def test_create_then_fetch_returns_defaults(cards_service):
    assert await cards_service.create_card(MOBILE_NUMBER) is None

    card = await cards_service.fetch_card(MOBILE_NUMBER)

    assert card.mobile_number == MOBILE_NUMBER
    assert card.card_number == "100000000001"
    assert card.card_type == "Credit Card"
    assert card.total_limit == Decimal("100000")
    assert card.amount_used == Decimal("0")
    assert card.available_amount == Decimal("100000")


@pytest.mark.asyncio
async def test_create_twice_raises_already_exists(cards_service):
    await cards_service.create_card(MOBILE_NUMBER)

    with pytest.raises(ResourceAlreadyExistsError):
        await cards_service.create_card(MOBILE_NUMBER)


@pytest.mark.asyncio
async def test_operations_on_missing_card_are_not_found(cards_service):
    with pytest.raises(ResourceNotFoundError):
        await cards_service.fetch_card(MOBILE_NUMBER)
    with pytest.raises(ResourceNotFoundError):
        await cards_service.update_card(CardUpdate(card_number="100000000001"))
    with pytest.raises(ResourceNotFoundError):
        await cards_service.delete_card(MOBILE_NUMBER)


@pytest.mark.asyncio
async def test_update_recomputes_available_amount(cards_service, db):
    await cards_service.create_card(MOBILE_NUMBER)
    original = (await db.execute(select(Card))).scalar_one()
    card_id = original.card_id

    updated = await cards_service.update_card(
        CardUpdate(card_number="100000000001", amount_used=Decimal("2500"))
    )

    assert updated is True
    card = await cards_service.fetch_card(MOBILE_NUMBER)
    assert card.amount_used == Decimal("2500")
    assert card.available_amount == Decimal("97500")
    assert card.total_limit == Decimal("100000")
    assert card.card_type == "Credit Card"
    assert card.card_number == "100000000001"
    assert card.mobile_number == MOBILE_NUMBER

    stored = (await db.execute(select(Card))).scalar_one()
    assert stored.card_id == card_id
    assert stored.updated_by == "CARDS_MS"


@pytest.mark.asyncio
async def test_update_rejects_usage_above_limit(cards_service):
    await cards_service.create_card(MOBILE_NUMBER)

    with pytest.raises(InvalidAmountError):
        await cards_service.update_card(
            CardUpdate(card_number="100000000001", total_limit=Decimal("1000"), amount_used=Decimal("1001"))
        )

    card = await cards_service.fetch_card(MOBILE_NUMBER)
    assert card.total_limit == Decimal("100000")


@pytest.mark.asyncio
async def test_delete_then_fetch_is_not_found(cards_service):
    await cards_service.create_card(MOBILE_NUMBER)

    assert await cards_service.delete_card(MOBILE_NUMBER) is True

    with pytest.raises(ResourceNotFoundError):
        await cards_service.fetch_card(MOBILE_NUMBER)


async def no_existing_record(mobile_number):
    return None


@pytest.mark.asyncio
async def test_concurrent_create_fails_on_unique_mobile_number(cards_service, db, monkeypatch):
    await cards_service.create_card(MOBILE_NUMBER)
    # Second writer missed the first one in its existence check
    monkeypatch.setattr(cards_service.repo, "get_by_mobile_number", no_existing_record)

    with pytest.raises(ResourceAlreadyExistsError):
        await cards_service.create_card(MOBILE_NUMBER)

    cards = (await db.execute(select(Card))).scalars().all()
    assert len(cards) == 1
