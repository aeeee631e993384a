"""Pydantic schemas shared by every service."""

from datetime import datetime

from pydantic import BaseModel, Field


class StatusResponse(BaseModel):
    """Status code and message returned by write operations."""

    status_code: str = Field(..., description="HTTP status code of the response")
    status_message: str = Field(..., description="Detailed message about the response")


class ErrorResponse(BaseModel):
    """Error details rendered by the application exception handlers."""

    api_path: str = Field(..., description="API path where the error occurred")
    error_code: int = Field(..., description="HTTP status code representing the error")
    error_message: str = Field(..., description="Detailed error message")
    error_time: datetime = Field(..., description="Time when the error occurred")


class ContactDetails(BaseModel):
    """Primary support contact."""

    name: str
    email: str


class ContactInfoResponse(BaseModel):
    """Support contact information for a service."""

    message: str
    contact_details: ContactDetails
    on_call_support: list[str] = Field(default_factory=list)
