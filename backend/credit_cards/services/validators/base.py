"""Frequent flyer number validator capability consumed by the evaluator."""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional

from credit_cards.core.enums import ValidationMode


@dataclass
class License:
    """License backing a validator service."""

    license_key: str


@dataclass
class ServiceInformation:
    """Status information published by a validator service."""

    license: License


@dataclass
class ValidityResult:
    """
    Output holder for validators reporting validity through an argument.

    Starts out invalid; a validator that never writes to it leaves the
    number unverified.
    """

    is_valid: bool = False


class FrequentFlyerNumberValidator(ABC):
    """
    Abstract validator for frequent flyer numbers.

    Implementations are owned outside the evaluator and usually outlive a
    single evaluation. The evaluator writes ``validation_mode`` before asking
    for validity, so an instance shared by concurrent evaluations will see
    those writes interleave. Use one validator per evaluation, or serialize
    access, when evaluating concurrently.

    Attributes:
        validation_mode: Depth of checking requested for the next validation
    """

    validation_mode: ValidationMode = ValidationMode.QUICK

    @abstractmethod
    def is_valid(self, frequent_flyer_number: Optional[str]) -> bool:
        """
        Check whether a frequent flyer number is valid.

        Args:
            frequent_flyer_number: Number to check, possibly None or empty

        Returns:
            True if the number is valid
        """
        pass

    @abstractmethod
    def is_valid_out(
        self, frequent_flyer_number: Optional[str], result: ValidityResult
    ) -> None:
        """
        Check a frequent flyer number, writing validity into ``result``.

        Args:
            frequent_flyer_number: Number to check, possibly None or empty
            result: Holder that receives the outcome in ``is_valid``
        """
        pass

    @abstractmethod
    def get_license_status(self) -> str:
        """
        Return the license key of the service backing this validator.

        Returns:
            License key string, e.g. "EXPIRED" when the license has lapsed
        """
        pass
