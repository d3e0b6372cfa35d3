"""Pydantic schemas for credit card application evaluation."""

from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, Field

from credit_cards.core.enums import CreditCardApplicationDecision, ValidationMode
from credit_cards.models.domain.application import CreditCardApplication


class CreditCardApplicationCreate(BaseModel):
    """Schema for submitting an application for evaluation."""

    age: int = Field(0, ge=0, le=150)
    gross_annual_income: Decimal = Field(Decimal("0"), ge=0, allow_inf_nan=False)
    frequent_flyer_number: Optional[str] = Field(None, max_length=50)

    def to_domain(self) -> CreditCardApplication:
        """Convert to the domain value object."""
        return CreditCardApplication(
            age=self.age,
            gross_annual_income=self.gross_annual_income,
            frequent_flyer_number=self.frequent_flyer_number,
        )


class EvaluationResponse(BaseModel):
    """Schema for an evaluation decision."""

    decision: CreditCardApplicationDecision
    reason: str
    validation_mode: Optional[ValidationMode] = Field(
        None, description="Mode requested from the validator, null if it was not consulted"
    )


class ValidatorStatusResponse(BaseModel):
    """Schema for frequent flyer validator status."""

    license_status: str
    license_expired: bool
    validation_mode: ValidationMode
