"""Credit point scoring for available-credit decisions."""
from credit_engine.scoring.calculator import (
    CreditBreakdown,
    CreditCalculator,
    Customer,
    calculate_credit,
    score_breakdown,
)
from credit_engine.scoring.points import (
    point_cap_from_age,
    point_from_bureau_score,
    point_from_completed_payment_count,
    point_from_missed_payment_count,
)

__all__ = [
    "CreditBreakdown",
    "CreditCalculator",
    "Customer",
    "calculate_credit",
    "point_cap_from_age",
    "point_from_bureau_score",
    "point_from_completed_payment_count",
    "point_from_missed_payment_count",
    "score_breakdown",
]
