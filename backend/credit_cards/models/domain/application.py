"""Credit card application value object."""

from dataclasses import dataclass, field
from decimal import Decimal
from typing import Optional


@dataclass(frozen=True)
class CreditCardApplication:
    """
    Credit card application as submitted by an applicant.

    Holds plain data only. Income must be a finite number; nothing else is
    validated here. Zero age, zero income and a missing frequent flyer
    number are all legitimate inputs for the evaluator.

    Attributes:
        age: Applicant age in years
        gross_annual_income: Gross yearly income
        frequent_flyer_number: Airline loyalty number, if the applicant has one
    """

    age: int = 0
    gross_annual_income: Decimal = field(default=Decimal("0"))
    frequent_flyer_number: Optional[str] = None

    def __post_init__(self):
        """Ensure income is a finite Decimal."""
        if not isinstance(self.gross_annual_income, Decimal):
            object.__setattr__(
                self, "gross_annual_income", Decimal(str(self.gross_annual_income))
            )

        if not self.gross_annual_income.is_finite():
            raise ValueError(
                f"gross_annual_income must be a finite number, got {self.gross_annual_income}"
            )
