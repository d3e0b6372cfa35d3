"""Core enums for type safety across the application."""

from enum import Enum


class CreditCardApplicationDecision(str, Enum):
    """Outcome of evaluating a credit card application."""

    AUTO_ACCEPTED = "AutoAccepted"
    AUTO_DECLINED = "AutoDeclined"
    REFERRED_TO_HUMAN = "ReferredToHuman"


class ValidationMode(str, Enum):
    """Depth hint for frequent flyer number validation."""

    QUICK = "Quick"
    DETAILED = "Detailed"
