import pytest

from eazybank.core.exceptions import ResourceNotFoundError
from eazybank.models.schemas.account import CustomerCreate
from eazybank.services.customer_service import CustomerService
from tests.helpers import MOBILE_NUMBER


@pytest.fixture
def customer_service(accounts_service, cards_service, loans_service):
    return CustomerService(accounts_service, cards_service, loans_service)


async def onboard(accounts_service) -> None:
    await accounts_service.create_account(
        CustomerCreate(name="John Doe", email="john@example.com", mobile_number=MOBILE_NUMBER)
    )


@pytest.mark.asyncio
async def test_details_combine_all_services(
    customer_service, accounts_service, cards_service, loans_service
):
    await onboard(accounts_service)
    await cards_service.create_card(MOBILE_NUMBER)
    await loans_service.create_loan(MOBILE_NUMBER)

    details = await customer_service.fetch_customer_details(MOBILE_NUMBER, "corr-1")

    assert details.name == "John Doe"
    assert details.account.account_number == 1234567890
    assert details.card.card_number == "100000000001"
    assert details.loan.loan_number == "100000000101"


@pytest.mark.asyncio
async def test_details_without_card_or_loan(customer_service, accounts_service):
    await onboard(accounts_service)

    details = await customer_service.fetch_customer_details(MOBILE_NUMBER)

    assert details.account is not None
    assert details.card is None
    assert details.loan is None


@pytest.mark.asyncio
async def test_details_for_unknown_customer_is_not_found(customer_service, cards_service):
    await cards_service.create_card(MOBILE_NUMBER)

    with pytest.raises(ResourceNotFoundError):
        await customer_service.fetch_customer_details(MOBILE_NUMBER)
