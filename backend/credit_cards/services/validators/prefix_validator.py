"""Prefix-based frequent flyer number validator."""

import logging
from typing import Iterable, Optional

from credit_cards.config import Settings, settings as default_settings
from credit_cards.core.enums import ValidationMode
from credit_cards.services.validators.base import (
    FrequentFlyerNumberValidator,
    License,
    ServiceInformation,
    ValidityResult,
)

logger = logging.getLogger(__name__)


class PrefixFrequentFlyerNumberValidator(FrequentFlyerNumberValidator):
    """
    Validator accepting numbers that start with a known airline prefix.

    Quick mode only checks the prefix. Detailed mode also requires the
    whole number to be alphanumeric.
    """

    def __init__(self, accepted_prefixes: Iterable[str], license_key: str):
        """
        Initialize the validator.

        Args:
            accepted_prefixes: Prefixes a valid number may start with
            license_key: Key of the license backing this validator
        """
        self.accepted_prefixes = tuple(accepted_prefixes)
        self.service_information = ServiceInformation(
            license=License(license_key=license_key)
        )
        self.validation_mode = ValidationMode.QUICK

    @classmethod
    def from_settings(
        cls, settings: Optional[Settings] = None
    ) -> "PrefixFrequentFlyerNumberValidator":
        """Build a validator from application settings."""
        settings = settings or default_settings
        return cls(
            accepted_prefixes=settings.validator_accepted_prefixes_list,
            license_key=settings.VALIDATOR_LICENSE_KEY,
        )

    def is_valid(self, frequent_flyer_number: Optional[str]) -> bool:
        if not frequent_flyer_number:
            logger.debug("Frequent flyer number missing")
            return False

        if not frequent_flyer_number.startswith(self.accepted_prefixes):
            logger.debug(f"Frequent flyer number has unknown prefix ({self.validation_mode.value} mode)")
            return False

        if self.validation_mode == ValidationMode.DETAILED:
            return frequent_flyer_number.isalnum()

        return True

    def is_valid_out(
        self, frequent_flyer_number: Optional[str], result: ValidityResult
    ) -> None:
        result.is_valid = self.is_valid(frequent_flyer_number)

    def get_license_status(self) -> str:
        return self.service_information.license.license_key
