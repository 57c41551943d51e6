"""
Prometheus metrics for the credit engine.

Only CreditCalculator records metrics; the scoring functions stay pure.
The embedding service exposes them through its own /metrics endpoint.
"""
from prometheus_client import Counter, Histogram

from credit_engine.config import settings

# Counter: Calculations by outcome
CALCULATION_TOTAL = Counter(
    "credit_engine_calculations_total",
    "Total credit calculations",
    ["outcome"]  # ineligible, zero_credit, approved, invalid
)

# Histogram: Credit amounts granted, one bucket per point
CREDIT_AMOUNT = Histogram(
    "credit_engine_credit_amount_dollars",
    "Distribution of calculated credit amounts",
    buckets=[0, 100, 200, 300, 400, 500, 600]
)

# Histogram: Effective points after the age cap
EFFECTIVE_POINTS = Histogram(
    "credit_engine_effective_points",
    "Distribution of effective credit points after the age cap",
    buckets=[-6, -3, -1, 0, 1, 2, 3, 4, 5, 6]
)

# Histogram: Calculation latency
CALCULATION_LATENCY = Histogram(
    "credit_engine_calculation_latency_seconds",
    "Time to calculate available credit",
    buckets=[0.00001, 0.0001, 0.001, 0.01, 0.1]
)


def calculation_outcome(eligible: bool, credit) -> str:
    """Label a calculation result for the outcome counter."""
    if not eligible:
        return "ineligible"
    if credit == 0:
        return "zero_credit"
    return "approved"


def record_calculation(breakdown, latency_seconds: float) -> None:
    """
    Record all metrics for a single credit calculation.

    Args:
        breakdown: The CreditBreakdown produced for the customer
        latency_seconds: Time taken to calculate
    """
    if not settings.metrics_enabled:
        return

    outcome = calculation_outcome(breakdown.eligible, breakdown.credit)
    CALCULATION_TOTAL.labels(outcome=outcome).inc()
    CREDIT_AMOUNT.observe(float(breakdown.credit))
    if breakdown.eligible:
        EFFECTIVE_POINTS.observe(breakdown.effective_points)
    CALCULATION_LATENCY.observe(latency_seconds)


def record_invalid_argument() -> None:
    """Record a calculation rejected because of an out-of-domain input."""
    if not settings.metrics_enabled:
        return

    CALCULATION_TOTAL.labels(outcome="invalid").inc()
