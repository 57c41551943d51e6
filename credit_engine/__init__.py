"""Credit limit scoring engine."""
from credit_engine.exceptions import CreditEngineError, InvalidArgumentError
from credit_engine.scoring import CreditCalculator, Customer, calculate_credit

__all__ = [
    "CreditCalculator",
    "CreditEngineError",
    "Customer",
    "InvalidArgumentError",
    "calculate_credit",
]
