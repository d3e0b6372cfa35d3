"""API v1 router configuration."""

from fastapi import APIRouter

from credit_cards.api.v1.endpoints import evaluations, health, validator

api_router = APIRouter()

# Include endpoint routers
api_router.include_router(
    health.router,
    tags=["health"],
)

api_router.include_router(
    evaluations.router,
    prefix="/evaluations",
    tags=["evaluations"],
)

api_router.include_router(
    validator.router,
    prefix="/validator",
    tags=["validator"],
)
