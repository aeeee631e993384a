"""Account CRUD endpoints."""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, Path, Response, status

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
from eazybank.deps import get_accounts_service
from eazybank.models.schemas.account import (
    CustomerCreate,
    CustomerResponse,
    CustomerUpdate,
)
from eazybank.models.schemas.common import StatusResponse
from eazybank.services.accounts_service import AccountsService

logger = logging.getLogger(__name__)

router = APIRouter()

add_info_routes(router, "accounts")

MobileNumber = Annotated[
    str, Path(pattern=MOBILE_NUMBER_PATTERN, description="10-digit mobile number")
]


@router.post(
    "/",
    response_model=StatusResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create account",
    description="Onboard a customer and open a new savings account",
)
async def create_account(
    customer_data: CustomerCreate,
    service: Annotated[AccountsService, Depends(get_accounts_service)],
) -> StatusResponse:
    """
    Create a customer with a default account.

    The account number is generated; fetch the account to read it.
    """
    await service.create_account(customer_data)
    return StatusResponse(
        status_code=STATUS_201, status_message="Account created successfully"
    )


@router.get(
    "/{mobile_number}",
    response_model=CustomerResponse,
    summary="Fetch account",
    description="Retrieve customer and account details by mobile number",
)
async def fetch_account(
    mobile_number: MobileNumber,
    service: Annotated[AccountsService, Depends(get_accounts_service)],
) -> CustomerResponse:
    return await service.fetch_account(mobile_number)


@router.put(
    "/",
    response_model=StatusResponse,
    summary="Update account",
    description="Update account details and the owning customer's name or email",
    responses={
        status.HTTP_417_EXPECTATION_FAILED: {
            "model": StatusResponse,
            "description": "No account details were supplied",
        }
    },
)
async def update_account(
    update_data: CustomerUpdate,
    response: Response,
    service: Annotated[AccountsService, Depends(get_accounts_service)],
) -> StatusResponse:
    """
    Update an account identified by the embedded account number.

    Responds with 417 when the request carries no account block.
    """
    if await service.update_account(update_data):
        return StatusResponse(status_code=STATUS_200, status_message=MESSAGE_200)

    logger.warning("Account update requested without account details")
    response.status_code = status.HTTP_417_EXPECTATION_FAILED
    return StatusResponse(status_code=STATUS_417, status_message=MESSAGE_417_UPDATE)


@router.delete(
    "/{mobile_number}",
    response_model=StatusResponse,
    summary="Delete account",
    description="Delete a customer and their accounts by mobile number",
)
async def delete_account(
    mobile_number: MobileNumber,
    response: Response,
    service: Annotated[AccountsService, Depends(get_accounts_service)],
) -> StatusResponse:
    if await service.delete_account(mobile_number):
        return StatusResponse(status_code=STATUS_200, status_message=MESSAGE_200)

    response.status_code = status.HTTP_417_EXPECTATION_FAILED
    return StatusResponse(status_code=STATUS_417, status_message=MESSAGE_417_DELETE)
