"""FastAPI application entry point."""

import logging
from datetime import datetime, timezone

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from eazybank.api.v1.router import api_router
from eazybank.config import settings
from eazybank.core.constants import MESSAGE_500
from eazybank.core.exceptions import (
    BankingError,
    InvalidAmountError,
    ResourceAlreadyExistsError,
    ResourceNotFoundError,
)
from eazybank.core.logging_config import setup_logging
from eazybank.models.schemas.common import ErrorResponse

setup_logging(settings.LOG_LEVEL, settings.LOG_FILE or None)

logger = logging.getLogger(__name__)

# Create FastAPI application
app = FastAPI(
    title="EazyBank Services API",
    description="Accounts, cards and loans microservices REST API",
    version=settings.BUILD_VERSION,
    docs_url="/api/docs",
    redoc_url="/api/redoc",
    openapi_url="/api/openapi.json",
)

# Configure CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins_list,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include API router with v1 prefix
app.include_router(api_router, prefix="/api/v1")


def error_response(request: Request, status_code: int, message: str) -> JSONResponse:
    """Render an ErrorResponse body for the failed request."""
    body = ErrorResponse(
        api_path=request.url.path,
        error_code=status_code,
        error_message=message,
        error_time=datetime.now(timezone.utc),
    )
    return JSONResponse(status_code=status_code, content=body.model_dump(mode="json"))


@app.exception_handler(ResourceNotFoundError)
async def resource_not_found_handler(
    request: Request, exc: ResourceNotFoundError
) -> JSONResponse:
    return error_response(request, status.HTTP_404_NOT_FOUND, exc.message)


@app.exception_handler(ResourceAlreadyExistsError)
async def resource_already_exists_handler(
    request: Request, exc: ResourceAlreadyExistsError
) -> JSONResponse:
    return error_response(request, status.HTTP_400_BAD_REQUEST, exc.message)


@app.exception_handler(InvalidAmountError)
async def invalid_amount_handler(
    request: Request, exc: InvalidAmountError
) -> JSONResponse:
    return error_response(request, status.HTTP_400_BAD_REQUEST, exc.message)


@app.exception_handler(BankingError)
async def banking_error_handler(request: Request, exc: BankingError) -> JSONResponse:
    logger.error(f"Error handling {request.url.path}: {exc.message}")
    return error_response(request, status.HTTP_500_INTERNAL_SERVER_ERROR, exc.message)


@app.exception_handler(RequestValidationError)
async def validation_error_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    messages = [
        f"{'.'.join(str(part) for part in error['loc'])}: {error['msg']}"
        for error in exc.errors()
    ]
    return error_response(request, status.HTTP_400_BAD_REQUEST, "; ".join(messages))


@app.exception_handler(Exception)
async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error(f"Unhandled error on {request.url.path}: {str(exc)}", exc_info=exc)
    return error_response(request, status.HTTP_500_INTERNAL_SERVER_ERROR, MESSAGE_500)


@app.get("/")
async def root() -> dict:
    """Root endpoint."""
    return {
        "message": "EazyBank Services API",
        "version": settings.BUILD_VERSION,
        "docs": "/api/docs",
    }
