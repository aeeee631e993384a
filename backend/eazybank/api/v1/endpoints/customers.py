"""Customer details endpoint aggregating accounts, cards and loans."""

from typing import Annotated, Optional

from fastapi import APIRouter, Depends, Header, Query, Response

from eazybank.core.constants import CORRELATION_ID_HEADER, MOBILE_NUMBER_PATTERN
from eazybank.deps import get_customer_service
from eazybank.models.schemas.customer import CustomerDetailsResponse
from eazybank.services.customer_service import CustomerService

router = APIRouter()


@router.get(
    "/details",
    response_model=CustomerDetailsResponse,
    summary="Fetch customer details",
    description="Retrieve a customer's account, card and loan details by mobile number",
)
async def fetch_customer_details(
    mobile_number: Annotated[str, Query(pattern=MOBILE_NUMBER_PATTERN)],
    response: Response,
    service: Annotated[CustomerService, Depends(get_customer_service)],
    correlation_id: Annotated[
        Optional[str], Header(alias=CORRELATION_ID_HEADER)
    ] = None,
) -> CustomerDetailsResponse:
    """
    Fetch the composite customer view.

    Card and loan are null when the customer has none. The correlation id
    header is echoed back when supplied.
    """
    details = await service.fetch_customer_details(mobile_number, correlation_id)
    if correlation_id:
        response.headers[CORRELATION_ID_HEADER] = correlation_id
    return details
