"""
Credit Calculator

Turns a customer's risk signals into an available credit amount.

METHODOLOGY:
------------
1. Eligibility gate
   A bureau score below the lowest bureau boundary (451) means the customer
   cannot use credit at all. The result is $0 and nothing else is looked up,
   so an ineligible customer with otherwise invalid fields still gets $0.

2. Raw points
   bureau points (0 to 3)
   + missed payment points (0 to -6)
   + completed payment points (0 to 4)
   The total can be negative.

3. Age cap
   The raw total is capped at the age bracket's point cap (3 to 6).

4. Conversion
   Effective points x $100, floored at $0.

Example: bureau 750, 1 missed, 3 completed, age 29
   2 - 1 + 4 = 5 raw points, capped at 4 for age 26-35 -> $400
"""
import time
from dataclasses import dataclass
from decimal import Decimal
from typing import Optional

import structlog

from credit_engine import metrics
from credit_engine.exceptions import InvalidArgumentError
from credit_engine.logging import get_logger
from credit_engine.scoring.points import (
    point_cap_from_age,
    point_from_bureau_score,
    point_from_completed_payment_count,
    point_from_missed_payment_count,
)
from credit_engine.scoring.tables import CREDIT_PER_POINT, MINIMUM_BUREAU_SCORE


@dataclass(frozen=True)
class Customer:
    """Risk signals for a single applicant, supplied by the caller."""
    bureau_score: int
    missed_payment_count: int
    completed_payment_count: int
    age_in_years: int


@dataclass(frozen=True)
class CreditBreakdown:
    """Every intermediate value of a credit calculation."""
    eligible: bool
    bureau_points: int
    missed_payment_points: int
    completed_payment_points: int
    point_cap: int
    credit: Decimal

    @property
    def raw_points(self) -> int:
        """Sum of the signal points before the age cap."""
        return self.bureau_points + self.missed_payment_points + self.completed_payment_points

    @property
    def effective_points(self) -> int:
        """Points after the age cap; may be negative."""
        return min(self.raw_points, self.point_cap)


INELIGIBLE = CreditBreakdown(
    eligible=False,
    bureau_points=0,
    missed_payment_points=0,
    completed_payment_points=0,
    point_cap=0,
    credit=Decimal(0),
)


def score_breakdown(customer: Customer) -> CreditBreakdown:
    """
    Calculate credit for a customer and keep every intermediate value.

    Raises:
        InvalidArgumentError: If an eligible customer has a negative payment
            count or is younger than 18
    """
    if customer.bureau_score < MINIMUM_BUREAU_SCORE:
        return INELIGIBLE

    bureau_points = point_from_bureau_score(customer.bureau_score)
    missed_points = point_from_missed_payment_count(customer.missed_payment_count)
    completed_points = point_from_completed_payment_count(customer.completed_payment_count)
    point_cap = point_cap_from_age(customer.age_in_years)

    effective_points = min(bureau_points + missed_points + completed_points, point_cap)
    credit = max(Decimal(effective_points * CREDIT_PER_POINT), Decimal(0))

    return CreditBreakdown(
        eligible=True,
        bureau_points=bureau_points,
        missed_payment_points=missed_points,
        completed_payment_points=completed_points,
        point_cap=point_cap,
        credit=credit,
    )


def calculate_credit(customer: Customer) -> Decimal:
    """Return the available credit in dollars for a customer (never negative)."""
    return score_breakdown(customer).credit


class CreditCalculator:
    """
    Calculates available credit for customers of an embedding service.

    Results are exactly those of calculate_credit(); the calculator only adds
    a structured log event and Prometheus metrics per calculation.
    """

    def __init__(self, logger: Optional[structlog.stdlib.BoundLogger] = None):
        self.logger = logger or get_logger(__name__)

    def calculate_credit(self, customer: Customer) -> Decimal:
        """
        Calculate the available credit (in $) for a given customer.

        Args:
            customer: The customer for whom we are calculating credit

        Returns:
            Available credit amount in $

        Raises:
            InvalidArgumentError: Propagated from the point lookups
        """
        start_time = time.perf_counter()
        try:
            breakdown = score_breakdown(customer)
        except InvalidArgumentError as e:
            metrics.record_invalid_argument()
            self.logger.warning("credit_calculation_rejected", error=str(e))
            raise

        metrics.record_calculation(breakdown, time.perf_counter() - start_time)

        if not breakdown.eligible:
            self.logger.info(
                "customer_ineligible",
                bureau_score=customer.bureau_score,
                minimum_bureau_score=MINIMUM_BUREAU_SCORE,
            )
            return breakdown.credit

        self.logger.info(
            "credit_calculated",
            credit=str(breakdown.credit),
            bureau_points=breakdown.bureau_points,
            missed_payment_points=breakdown.missed_payment_points,
            completed_payment_points=breakdown.completed_payment_points,
            raw_points=breakdown.raw_points,
            point_cap=breakdown.point_cap,
            effective_points=breakdown.effective_points,
        )
        return breakdown.credit
