"""Frequent flyer validator status endpoint."""

from typing import Annotated

from fastapi import APIRouter, Depends

from credit_cards.config import settings
from credit_cards.deps import get_validator
from credit_cards.models.schemas.application import ValidatorStatusResponse
from credit_cards.services.validators import FrequentFlyerNumberValidator

router = APIRouter()


@router.get(
    "/status",
    response_model=ValidatorStatusResponse,
    summary="Get frequent flyer validator status",
)
async def get_validator_status(
    validator: Annotated[FrequentFlyerNumberValidator, Depends(get_validator)],
) -> ValidatorStatusResponse:
    """Report the validator's license status and default validation mode."""
    license_status = validator.get_license_status()
    return ValidatorStatusResponse(
        license_status=license_status,
        license_expired=license_status == settings.EXPIRED_LICENSE_KEY,
        validation_mode=validator.validation_mode,
    )
