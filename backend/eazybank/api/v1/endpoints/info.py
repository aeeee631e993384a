"""Build and contact information routes shared by every service router."""

from fastapi import APIRouter

from eazybank.config import settings
from eazybank.models.schemas.common import ContactDetails, ContactInfoResponse


def add_info_routes(router: APIRouter, service_name: str) -> None:
    """
    Register ``/build-info`` and ``/contact-info`` on a service router.

    Must be called before any ``/{mobile_number}`` route is added so the
    literal paths take precedence.
    """

    @router.get(
        "/build-info",
        response_model=str,
        summary="Get build information",
        description=f"Build version of the {service_name} service",
    )
    async def get_build_info() -> str:
        return settings.BUILD_VERSION

    @router.get(
        "/contact-info",
        response_model=ContactInfoResponse,
        summary="Get contact information",
        description=f"Support contact details for the {service_name} service",
    )
    async def get_contact_info() -> ContactInfoResponse:
        return ContactInfoResponse(
            message=settings.CONTACT_MESSAGE,
            contact_details=ContactDetails(
                name=settings.CONTACT_NAME,
                email=settings.CONTACT_EMAIL,
            ),
            on_call_support=settings.on_call_support_list,
        )
