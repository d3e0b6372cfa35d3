"""Domain models for credit card applications."""

from credit_cards.models.domain.application import CreditCardApplication

__all__ = ["CreditCardApplication"]
