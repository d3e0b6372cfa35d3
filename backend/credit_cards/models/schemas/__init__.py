"""Pydantic schemas for API validation and serialization."""

from credit_cards.models.schemas.application import (
    CreditCardApplicationCreate,
    EvaluationResponse,
    ValidatorStatusResponse,
)

__all__ = [
    "CreditCardApplicationCreate",
    "EvaluationResponse",
    "ValidatorStatusResponse",
]
