"""Dependency injection for FastAPI endpoints."""

from typing import Annotated

from fastapi import Depends

from credit_cards.config import settings
from credit_cards.services.evaluator import CreditCardApplicationEvaluator, EvaluationPolicy
from credit_cards.services.validators import (
    FrequentFlyerNumberValidator,
    PrefixFrequentFlyerNumberValidator,
)

# Built at import so a misconfigured policy fails at startup
evaluation_policy = EvaluationPolicy.from_settings(settings)


def get_validator() -> FrequentFlyerNumberValidator:
    """
    Get a frequent flyer validator dependency.

    A fresh validator is built per request because evaluations write its
    validation mode.
    """
    return PrefixFrequentFlyerNumberValidator.from_settings(settings)


def get_evaluator(
    validator: Annotated[FrequentFlyerNumberValidator, Depends(get_validator)],
) -> CreditCardApplicationEvaluator:
    """Get an evaluator bound to the request's validator."""
    return CreditCardApplicationEvaluator(validator, policy=evaluation_policy)
