"""Frequent flyer number validators."""

from .base import FrequentFlyerNumberValidator, License, ServiceInformation, ValidityResult
from .prefix_validator import PrefixFrequentFlyerNumberValidator

__all__ = [
    "FrequentFlyerNumberValidator",
    "License",
    "PrefixFrequentFlyerNumberValidator",
    "ServiceInformation",
    "ValidityResult",
]
