"""Point lookups for each risk signal.

Every function here is pure: it reads only the constant tables and its
argument, and raises InvalidArgumentError for out-of-domain input.
"""
from bisect import bisect_right
from typing import Sequence

from credit_engine.exceptions import InvalidArgumentError
from credit_engine.scoring.tables import (
    AGE_GROUP_BOUNDARIES,
    AGE_GROUP_POINT_CAPS,
    BUREAU_SCORE_BOUNDARIES,
    BUREAU_SCORE_POINTS,
    COMPLETED_PAYMENT_POINTS,
    MINIMUM_AGE,
    MISSED_PAYMENT_POINTS,
)


def _bracket_lookup(value: int, boundaries: Sequence[int], values: Sequence[int]) -> int:
    # bisect_right is the index of the first boundary strictly greater than
    # value, or len(boundaries) when there is none, which is the last slot
    # of values.
    return values[bisect_right(boundaries, value)]


def _saturating_lookup(count: int, table: Sequence[int]) -> int:
    return table[min(count, len(table) - 1)]


def point_from_bureau_score(bureau_score: int) -> int:
    """
    Map a bureau score to credit points.

    Args:
        bureau_score: Score issued by the credit bureau, 0 or more

    Returns:
        Points from 0 to 3

    Raises:
        InvalidArgumentError: If the score is negative

    Example:
        >>> point_from_bureau_score(700)
        1
        >>> point_from_bureau_score(701)
        2
    """
    if bureau_score < 0:
        raise InvalidArgumentError("bureau score must be non-negative")

    return _bracket_lookup(bureau_score, BUREAU_SCORE_BOUNDARIES, BUREAU_SCORE_POINTS)


def point_from_missed_payment_count(missed_payment_count: int) -> int:
    """
    Return the (zero or negative) points for a number of missed payments.

    Raises:
        InvalidArgumentError: If the count is negative
    """
    if missed_payment_count < 0:
        raise InvalidArgumentError("missed payment count must be non-negative")

    return _saturating_lookup(missed_payment_count, MISSED_PAYMENT_POINTS)


def point_from_completed_payment_count(completed_payment_count: int) -> int:
    """
    Return the (zero or positive) points for a number of completed payments.

    Raises:
        InvalidArgumentError: If the count is negative
    """
    if completed_payment_count < 0:
        raise InvalidArgumentError("completed payment count must be non-negative")

    return _saturating_lookup(completed_payment_count, COMPLETED_PAYMENT_POINTS)


def point_cap_from_age(age_in_years: int) -> int:
    """
    Return the maximum number of points creditable at a given age.

    Raises:
        InvalidArgumentError: If the customer is younger than 18
    """
    if age_in_years < MINIMUM_AGE:
        raise InvalidArgumentError(f"customer must be {MINIMUM_AGE} or older")

    return _bracket_lookup(age_in_years, AGE_GROUP_BOUNDARIES, AGE_GROUP_POINT_CAPS)
