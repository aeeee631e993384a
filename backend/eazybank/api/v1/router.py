"""API v1 router configuration."""

from fastapi import APIRouter

from eazybank.api.v1.endpoints import accounts, cards, customers, health, loans

api_router = APIRouter()

# Include endpoint routers
api_router.include_router(
    health.router,
    tags=["health"],
)

api_router.include_router(
    accounts.router,
    prefix="/accounts",
    tags=["accounts"],
)

api_router.include_router(
    cards.router,
    prefix="/cards",
    tags=["cards"],
)

api_router.include_router(
    loans.router,
    prefix="/loans",
    tags=["loans"],
)

api_router.include_router(
    customers.router,
    prefix="/customers",
    tags=["customers"],
)
