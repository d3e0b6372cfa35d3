"""Credit card application evaluator."""

import logging
from dataclasses import dataclass, field
from decimal import Decimal
from typing import Optional

from credit_cards.config import Settings, settings as default_settings
from credit_cards.core.enums import CreditCardApplicationDecision, ValidationMode
from credit_cards.models.domain.application import CreditCardApplication
from credit_cards.services.validators.base import (
    FrequentFlyerNumberValidator,
    ValidityResult,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class EvaluationPolicy:
    """
    Thresholds applied by the evaluator.

    Attributes:
        auto_accept_min_income: Income at or above which applications are accepted outright
        auto_decline_below_income: Income below which validated applications are declined
        refer_below_age: Age below which validated applications go to a human
        detailed_validation_min_age: Age from which detailed validation is requested
        expired_license_key: License status meaning the validator cannot be trusted
    """

    auto_accept_min_income: Decimal = field(default=Decimal("100000"))
    auto_decline_below_income: Decimal = field(default=Decimal("20000"))
    refer_below_age: int = 20
    detailed_validation_min_age: int = 30
    expired_license_key: str = "EXPIRED"

    def __post_init__(self):
        """Ensure income thresholds are Decimals and consistently ordered."""
        for name in ("auto_accept_min_income", "auto_decline_below_income"):
            value = getattr(self, name)
            if not isinstance(value, Decimal):
                object.__setattr__(self, name, Decimal(str(value)))

        if self.auto_decline_below_income > self.auto_accept_min_income:
            raise ValueError(
                "auto_decline_below_income cannot exceed auto_accept_min_income "
                f"({self.auto_decline_below_income} > {self.auto_accept_min_income})"
            )

    @classmethod
    def from_settings(cls, settings: Optional[Settings] = None) -> "EvaluationPolicy":
        """Build a policy from application settings."""
        settings = settings or default_settings
        return cls(
            auto_accept_min_income=settings.AUTO_ACCEPT_MIN_INCOME,
            auto_decline_below_income=settings.AUTO_DECLINE_BELOW_INCOME,
            refer_below_age=settings.REFER_BELOW_AGE,
            detailed_validation_min_age=settings.DETAILED_VALIDATION_MIN_AGE,
            expired_license_key=settings.EXPIRED_LICENSE_KEY,
        )


@dataclass
class EvaluationOutcome:
    """
    Decision reached for an application, with the reason behind it.

    Attributes:
        decision: The decision
        reason: Human-readable explanation of the decision
        validation_mode: Mode requested from the validator, or None if it was not consulted
    """

    decision: CreditCardApplicationDecision
    reason: str
    validation_mode: Optional[ValidationMode] = None


class CreditCardApplicationEvaluator:
    """
    Decide credit card applications from income, age and frequent flyer validity.

    Checks run in a fixed order and the first match wins:
    1. High income is accepted without contacting the validator
    2. An expired validator license refers the application to a human
    3. The validation mode is set from the applicant's age
    4. An invalid frequent flyer number refers the application to a human
    5. Young applicants are referred to a human
    6. Low income is declined
    7. Everything else is referred to a human
    """

    def __init__(
        self,
        validator: FrequentFlyerNumberValidator,
        policy: Optional[EvaluationPolicy] = None,
    ):
        """
        Initialize the evaluator.

        Args:
            validator: Frequent flyer number validator to consult
            policy: Decision thresholds (defaults to EvaluationPolicy())
        """
        self._validator = validator
        self.policy = policy or EvaluationPolicy()

    def evaluate(
        self, application: CreditCardApplication
    ) -> CreditCardApplicationDecision:
        """
        Evaluate an application, reading validity from the validator's return value.

        Args:
            application: The application to evaluate

        Returns:
            The decision for the application
        """
        return self.evaluate_with_reason(application).decision

    def evaluate_using_out(
        self, application: CreditCardApplication
    ) -> CreditCardApplicationDecision:
        """
        Evaluate an application, reading validity from an output holder.

        Same decision table as evaluate(); only the validator call differs.

        Args:
            application: The application to evaluate

        Returns:
            The decision for the application
        """
        return self.evaluate_with_reason(application, use_out=True).decision

    def evaluate_with_reason(
        self,
        application: CreditCardApplication,
        use_out: bool = False,
    ) -> EvaluationOutcome:
        """
        Evaluate an application and explain the decision.

        Args:
            application: The application to evaluate
            use_out: Obtain validity through is_valid_out() instead of is_valid()

        Returns:
            EvaluationOutcome with decision, reason and requested validation mode
        """
        outcome = self._decide(application, use_out)

        logger.info(f"Application decided as {outcome.decision.value}: {outcome.reason}")
        return outcome

    def _check_validity_out(self, frequent_flyer_number: Optional[str]) -> bool:
        result = ValidityResult()
        self._validator.is_valid_out(frequent_flyer_number, result)
        return result.is_valid

    def _decide(
        self,
        application: CreditCardApplication,
        use_out: bool,
    ) -> EvaluationOutcome:
        policy = self.policy
        income = application.gross_annual_income
        age = application.age

        if income >= policy.auto_accept_min_income:
            return EvaluationOutcome(
                decision=CreditCardApplicationDecision.AUTO_ACCEPTED,
                reason=f"Income {income} meets auto-accept threshold of {policy.auto_accept_min_income}",
            )

        # Validator answers are only trusted while its license is active
        if self._validator.get_license_status() == policy.expired_license_key:
            logger.warning("Frequent flyer validator license expired, referring application")
            return EvaluationOutcome(
                decision=CreditCardApplicationDecision.REFERRED_TO_HUMAN,
                reason="Frequent flyer validator license has expired",
            )

        if age >= policy.detailed_validation_min_age:
            mode = ValidationMode.DETAILED
        else:
            mode = ValidationMode.QUICK
        self._validator.validation_mode = mode
        logger.debug(f"Requested {mode.value} frequent flyer validation for age {age}")

        if use_out:
            is_valid = self._check_validity_out(application.frequent_flyer_number)
        else:
            is_valid = self._validator.is_valid(application.frequent_flyer_number)

        if not is_valid:
            return EvaluationOutcome(
                decision=CreditCardApplicationDecision.REFERRED_TO_HUMAN,
                reason="Frequent flyer number could not be validated",
                validation_mode=mode,
            )

        if age < policy.refer_below_age:
            return EvaluationOutcome(
                decision=CreditCardApplicationDecision.REFERRED_TO_HUMAN,
                reason=f"Applicant age {age} is below minimum of {policy.refer_below_age}",
                validation_mode=mode,
            )

        if income < policy.auto_decline_below_income:
            return EvaluationOutcome(
                decision=CreditCardApplicationDecision.AUTO_DECLINED,
                reason=f"Income {income} is below auto-decline threshold of {policy.auto_decline_below_income}",
                validation_mode=mode,
            )

        return EvaluationOutcome(
            decision=CreditCardApplicationDecision.REFERRED_TO_HUMAN,
            reason="No automatic rule applies",
            validation_mode=mode,
        )
