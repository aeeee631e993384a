"""Loan CRUD endpoints."""

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
from eazybank.deps import get_loans_service
from eazybank.models.schemas.common import StatusResponse
from eazybank.models.schemas.loan import LoanResponse, LoanUpdate
from eazybank.services.loans_service import LoansService

router = APIRouter()

add_info_routes(router, "loans")

MobileNumber = Annotated[
    str, Path(pattern=MOBILE_NUMBER_PATTERN, description="10-digit mobile number")
]


@router.post(
    "/",
    response_model=StatusResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create loan",
    description="Open a new home loan for a mobile number",
)
async def create_loan(
    mobile_number: Annotated[str, Query(pattern=MOBILE_NUMBER_PATTERN)],
    service: Annotated[LoansService, Depends(get_loans_service)],
) -> StatusResponse:
    """
    Create a loan with the default type and amount.

    The loan number is generated; fetch the loan to read it.
    """
    await service.create_loan(mobile_number)
    return StatusResponse(
        status_code=STATUS_201, status_message="Loan created successfully"
    )


@router.get(
    "/{mobile_number}",
    response_model=LoanResponse,
    summary="Fetch loan",
    description="Retrieve loan details by mobile number",
)
async def fetch_loan(
    mobile_number: MobileNumber,
    service: Annotated[LoansService, Depends(get_loans_service)],
) -> LoanResponse:
    return await service.fetch_loan(mobile_number)


@router.put(
    "/",
    response_model=StatusResponse,
    summary="Update loan",
    description="Update loan details identified by loan number",
)
async def update_loan(
    update_data: LoanUpdate,
    response: Response,
    service: Annotated[LoansService, Depends(get_loans_service)],
) -> StatusResponse:
    if await service.update_loan(update_data):
        return StatusResponse(status_code=STATUS_200, status_message=MESSAGE_200)

    response.status_code = status.HTTP_417_EXPECTATION_FAILED
    return StatusResponse(status_code=STATUS_417, status_message=MESSAGE_417_UPDATE)


@router.delete(
    "/{mobile_number}",
    response_model=StatusResponse,
    summary="Delete loan",
    description="Delete loan details by mobile number",
)
async def delete_loan(
    mobile_number: MobileNumber,
    response: Response,
    service: Annotated[LoansService, Depends(get_loans_service)],
) -> StatusResponse:
    if await service.delete_loan(mobile_number):
        return StatusResponse(status_code=STATUS_200, status_message=MESSAGE_200)

    response.status_code = status.HTTP_417_EXPECTATION_FAILED
    return StatusResponse(status_code=STATUS_417, status_message=MESSAGE_417_DELETE)
