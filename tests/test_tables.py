"""Tests for the point tables and their consistency checks."""
import pytest

from credit_engine.exceptions import PointTableError
from credit_engine.scoring import tables
from credit_engine.scoring.tables import validate_boundary_table


class TestPointTables:
    """The shipped tables satisfy the pairing rules."""

    def test_boundary_tables_are_paired(self):
        assert len(tables.BUREAU_SCORE_POINTS) == len(tables.BUREAU_SCORE_BOUNDARIES) + 1
        assert len(tables.AGE_GROUP_POINT_CAPS) == len(tables.AGE_GROUP_BOUNDARIES) + 1

    def test_payment_tables_signs(self):
        assert all(points <= 0 for points in tables.MISSED_PAYMENT_POINTS)
        assert all(points >= 0 for points in tables.COMPLETED_PAYMENT_POINTS)

    def test_tables_are_immutable(self):
        """Tables are tuples so no caller can change the policy at runtime."""
        with pytest.raises(TypeError):
            tables.BUREAU_SCORE_POINTS[0] = 5

    def test_minimums(self):
        assert tables.MINIMUM_BUREAU_SCORE == 451
        assert tables.MINIMUM_AGE == 18
        assert tables.CREDIT_PER_POINT == 100


class TestValidateBoundaryTable:
    """Test rejection of malformed boundary tables."""

    def test_valid_table_passes(self):
        validate_boundary_table("test", (1, 2, 3), (0, 1, 2, 3))

    def test_empty_boundaries(self):
        with pytest.raises(PointTableError, match="empty"):
            validate_boundary_table("test", (), (0,))

    def test_unsorted_boundaries(self):
        with pytest.raises(PointTableError, match="strictly ascending"):
            validate_boundary_table("test", (10, 5, 20), (0, 1, 2, 3))

    def test_duplicate_boundaries(self):
        with pytest.raises(PointTableError, match="strictly ascending"):
            validate_boundary_table("test", (10, 10), (0, 1, 2))

    def test_wrong_value_count(self):
        with pytest.raises(PointTableError, match="expected 4 values"):
            validate_boundary_table("test", (1, 2, 3), (0, 1, 2))
        with pytest.raises(PointTableError, match="got 5"):
            validate_boundary_table("test", (1, 2, 3), (0, 1, 2, 3, 4))
