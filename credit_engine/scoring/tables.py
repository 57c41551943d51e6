"""
Point Tables

The complete credit policy: how many points each risk signal is worth and
how many points an applicant's age bracket allows.

BOUNDARY TABLES:
----------------
A boundary table holds ascending thresholds. A value belongs to the bracket
of the first boundary strictly greater than it, so a value equal to a
boundary falls into the next bracket:

- Bureau score 450 -> bracket 0 (0 points, ineligible)
- Bureau score 451 -> bracket 1 (1 point)

Each paired point table has one entry more than its boundary table. The
extra last entry applies to every value at or above the highest boundary.

PAYMENT TABLES:
---------------
Indexed directly by payment count. Counts past the end of the table use the
last entry: the missed-payment penalty stops worsening after 3, the
completed-payment bonus stops growing after 3.
"""
from typing import Sequence

from credit_engine.exceptions import PointTableError

# Currency credited for each effective point, in dollars
CREDIT_PER_POINT = 100

# Indexed by payment count, saturating at the last entry
MISSED_PAYMENT_POINTS = (0, -1, -3, -6)
COMPLETED_PAYMENT_POINTS = (0, 2, 3, 4)

# Bureau score brackets: <451, 451-700, 701-850, 851+
BUREAU_SCORE_BOUNDARIES = (451, 701, 851)
BUREAU_SCORE_POINTS = (0, 1, 2, 3)

# Age brackets: <18, 18-25, 26-35, 36-50, 51+
AGE_GROUP_BOUNDARIES = (18, 26, 36, 51)
AGE_GROUP_POINT_CAPS = (0, 3, 4, 5, 6)

# Scores below this are declined before any points are computed
MINIMUM_BUREAU_SCORE = BUREAU_SCORE_BOUNDARIES[0]

MINIMUM_AGE = AGE_GROUP_BOUNDARIES[0]


def validate_boundary_table(
    name: str,
    boundaries: Sequence[int],
    values: Sequence[int],
) -> None:
    """
    Check that a boundary table can be searched and paired with its values.

    Args:
        name: Table name used in the error message
        boundaries: Thresholds, must be non-empty and strictly ascending
        values: Paired values, must hold exactly len(boundaries) + 1 entries

    Raises:
        PointTableError: If either condition does not hold
    """
    if not boundaries:
        raise PointTableError(f"{name}: boundary table is empty")

    for lower, upper in zip(boundaries, boundaries[1:]):
        if lower >= upper:
            raise PointTableError(
                f"{name}: boundaries must be strictly ascending, got {lower} before {upper}"
            )

    if len(values) != len(boundaries) + 1:
        raise PointTableError(
            f"{name}: expected {len(boundaries) + 1} values for "
            f"{len(boundaries)} boundaries, got {len(values)}"
        )


validate_boundary_table("bureau_score", BUREAU_SCORE_BOUNDARIES, BUREAU_SCORE_POINTS)
validate_boundary_table("age_group", AGE_GROUP_BOUNDARIES, AGE_GROUP_POINT_CAPS)
