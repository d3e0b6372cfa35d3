"""Health check endpoint."""

from typing import Annotated

from fastapi import APIRouter, Depends

from credit_cards.config import settings
from credit_cards.deps import get_validator
from credit_cards.services.validators import FrequentFlyerNumberValidator

router = APIRouter()


@router.get("/health")
async def health_check(
    validator: Annotated[FrequentFlyerNumberValidator, Depends(get_validator)],
) -> dict:
    """
    Health check endpoint.

    Verifies that the API is running and the frequent flyer validator is
    licensed. An expired license leaves the API usable but every
    non-trivial application is referred to a human.

    Returns:
        dict: Health status with API and validator status
    """
    if validator.get_license_status() == settings.EXPIRED_LICENSE_KEY:
        validator_status = "unhealthy: license expired"
    else:
        validator_status = "healthy"

    return {
        "status": "healthy" if validator_status == "healthy" else "degraded",
        "api": "healthy",
        "validator": validator_status,
    }
