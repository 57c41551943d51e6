"""Pydantic schemas for validating upstream customer data."""
from pydantic import BaseModel, ConfigDict, Field

from credit_engine.scoring.calculator import Customer
from credit_engine.scoring.tables import MINIMUM_AGE


class CustomerRecord(BaseModel):
    """Customer payload as received from an upstream service or batch file.

    Accepts camelCase keys (``bureauScore``) or snake_case field names.
    Validating here lets callers reject bad data before it reaches the engine.
    """
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    bureau_score: int = Field(..., ge=0, alias="bureauScore", description="Credit bureau score")
    missed_payment_count: int = Field(
        ..., ge=0, alias="missedPaymentCount", description="Number of missed payments"
    )
    completed_payment_count: int = Field(
        ..., ge=0, alias="completedPaymentCount", description="Number of completed payments"
    )
    age_in_years: int = Field(
        ..., ge=MINIMUM_AGE, alias="ageInYears", description="Customer age in years"
    )

    def to_customer(self) -> Customer:
        """Build the engine's Customer value from this record."""
        return Customer(
            bureau_score=self.bureau_score,
            missed_payment_count=self.missed_payment_count,
            completed_payment_count=self.completed_payment_count,
            age_in_years=self.age_in_years,
        )
