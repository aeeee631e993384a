"""Card CRUD endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, Path, Query, Response, status

from eazybank.api.v1.endpoints.info import add_info_routes
from eazybank.core.constants import (
    MESSAGE_200,
    MESSAGE_417_DELETE,
    MESSAGE_417_UPDATE,
    MOBILE_NUMBER_PATTERN,
    STATUS_200,
    STATUS_201,
    STATUS_417,
)
from eazybank.deps import get_cards_service
from eazybank.models.schemas.card import CardResponse, CardUpdate
from eazybank.models.schemas.common import StatusResponse
from eazybank.services.cards_service import CardsService

router = APIRouter()

add_info_routes(router, "cards")


@router.post(
    "/",
    response_model=StatusResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create card",
    description="Issue a new credit card for a mobile number",
)
async def create_card(
    mobile_number: Annotated[
        str, Query(pattern=MOBILE_NUMBER_PATTERN, description="10-digit mobile number")
    ],
    service: Annotated[CardsService, Depends(get_cards_service)],
) -> StatusResponse:
    await service.create_card(mobile_number)
    return StatusResponse(
        status_code=STATUS_201, status_message="Card created successfully"
    )


@router.get(
    "/{mobile_number}",
    response_model=CardResponse,
    summary="Fetch card",
    description="Retrieve card details by mobile number",
)
async def fetch_card(
    mobile_number: Annotated[str, Path(pattern=MOBILE_NUMBER_PATTERN)],
    service: Annotated[CardsService, Depends(get_cards_service)],
) -> CardResponse:
    return await service.fetch_card(mobile_number)


@router.put(
    "/",
    response_model=StatusResponse,
    summary="Update card",
    description="Update card details identified by card number",
)
async def update_card(
    update_data: CardUpdate,
    response: Response,
    service: Annotated[CardsService, Depends(get_cards_service)],
) -> StatusResponse:
    if await service.update_card(update_data):
        return StatusResponse(status_code=STATUS_200, status_message=MESSAGE_200)

    response.status_code = status.HTTP_417_EXPECTATION_FAILED
    return StatusResponse(status_code=STATUS_417, status_message=MESSAGE_417_UPDATE)


@router.delete(
    "/{mobile_number}",
    response_model=StatusResponse,
    summary="Delete card",
    description="Delete card details by mobile number",
)
async def delete_card(
    mobile_number: Annotated[str, Path(pattern=MOBILE_NUMBER_PATTERN)],
    response: Response,
    service: Annotated[CardsService, Depends(get_cards_service)],
) -> StatusResponse:
    if await service.delete_card(mobile_number):
        return StatusResponse(status_code=STATUS_200, status_message=MESSAGE_200)

    response.status_code = status.HTTP_417_EXPECTATION_FAILED
    return StatusResponse(status_code=STATUS_417, status_message=MESSAGE_417_DELETE)
