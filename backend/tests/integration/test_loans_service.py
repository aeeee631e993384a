from decimal import Decimal

import pytest
from sqlalchemy import select

from eazybank.core.exceptions import (
    InvalidAmountError,
    ResourceAlreadyExistsError,
    ResourceNotFoundError,
)
from eazybank.models.domain.loan import Loan
from eazybank.models.schemas.loan import LoanUpdate
from tests.helpers import MOBILE_NUMBER, OTHER_MOBILE_NUMBER


@pytest.mark.asyncio
async def test_loan_lifecycle(loans_service):
    await loans_service.create_loan(MOBILE_NUMBER)

    loan = await loans_service.fetch_loan(MOBILE_NUMBER)
    assert loan.loan_number == "100000000101"
    assert loan.loan_type == "Home Loan"
    assert loan.total_loan == Decimal("100000")
    assert loan.amount_paid == Decimal("0")
    assert loan.outstanding_amount == Decimal("100000")

    assert await loans_service.update_loan(
        LoanUpdate(loan_number=loan.loan_number, loan_type="Vehicle Loan", amount_paid=Decimal("40000"))
    )
    loan = await loans_service.fetch_loan(MOBILE_NUMBER)
    assert loan.loan_type == "Vehicle Loan"
    assert loan.outstanding_amount == Decimal("60000")

    assert await loans_service.delete_loan(MOBILE_NUMBER) is True
    with pytest.raises(ResourceNotFoundError):
        await loans_service.fetch_loan(MOBILE_NUMBER)


@pytest.mark.asyncio
async def test_create_twice_raises_already_exists(loans_service):
    await loans_service.create_loan(MOBILE_NUMBER)

    with pytest.raises(ResourceAlreadyExistsError):
        await loans_service.create_loan(MOBILE_NUMBER)


@pytest.mark.asyncio
async def test_each_mobile_number_gets_its_own_loan(loans_service):
    await loans_service.create_loan(MOBILE_NUMBER)
    await loans_service.create_loan(OTHER_MOBILE_NUMBER)

    first = await loans_service.fetch_loan(MOBILE_NUMBER)
    second = await loans_service.fetch_loan(OTHER_MOBILE_NUMBER)
    assert first.loan_number != second.loan_number


@pytest.mark.asyncio
async def test_update_unknown_loan_number_is_not_found(loans_service):
    await loans_service.create_loan(MOBILE_NUMBER)

    with pytest.raises(ResourceNotFoundError):
        await loans_service.update_loan(LoanUpdate(loan_number="199999999999"))


@pytest.mark.asyncio
async def test_update_rejects_overpayment(loans_service):
    await loans_service.create_loan(MOBILE_NUMBER)

    with pytest.raises(InvalidAmountError):
        await loans_service.update_loan(
            LoanUpdate(loan_number="100000000101", amount_paid=Decimal("100001"))
        )


@pytest.mark.asyncio
async def test_concurrent_create_fails_on_unique_mobile_number(loans_service, db, monkeypatch):
    await loans_service.create_loan(MOBILE_NUMBER)

    async def no_existing_loan(mobile_number):
        return None

    monkeypatch.setattr(loans_service.repo, "get_by_mobile_number", no_existing_loan)

    with pytest.raises(ResourceAlreadyExistsError):
        await loans_service.create_loan(MOBILE_NUMBER)

    loans = (await db.execute(select(Loan))).scalars().all()
    assert [loan.loan_number for loan in loans] == ["100000000101"]
