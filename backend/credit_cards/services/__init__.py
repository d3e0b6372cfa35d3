"""Service layer for business logic."""

from credit_cards.services.evaluator import (
    CreditCardApplicationEvaluator,
    EvaluationOutcome,
    EvaluationPolicy,
)

__all__ = ["CreditCardApplicationEvaluator", "EvaluationOutcome", "EvaluationPolicy"]
