"""
Tests for the Gaussian elimination kernel.

Validates:
    - Forward pass against hand-computed echelon forms
    - Forward pass against scipy.linalg.lu (same partial pivoting)
    - Pivot diagnostics (pivot rows, pivot values, swap count)
    - Singular detection and error attributes
    - Backward scaling pass, including all-zero rows
    - Small-pivot warnings, timing, input left untouched
"""

import numpy as np
import pytest
from numpy.testing import assert_allclose, assert_array_equal
from scipy.linalg import lu

from pymatrix.core.compute.elimination import EliminationParams, gauss_eliminate
from pymatrix.core.exceptions import DimensionError, SingularMatrixError, ValidationError


# ═══════════════════════════════════════════════════════════════════════
# Forward pass
# ═══════════════════════════════════════════════════════════════════════


class TestForward:

    def test_no_swap_needed(self):
        result = gauss_eliminate([[2, 1], [1, 3]])
        assert_array_equal(result.params.echelon, [[2.0, 1.0], [0.0, 2.5]])
        assert result.params.pivot_rows == (0, 1)
        assert result.params.pivots == (2.0, 2.5)
        assert result.info["swaps"] == 0

    def test_partial_pivoting_swaps_largest_up(self):
        result = gauss_eliminate([[1, 2], [3, 4]])
        assert_allclose(result.params.echelon, [[3.0, 4.0], [0.0, 2.0 / 3.0]])
        assert result.params.pivot_rows == (1, 1)
        assert result.info["swaps"] == 1

    def test_pivot_on_negative_entry(self):
        """Magnitude decides, not sign."""
        result = gauss_eliminate([[1, 1], [-4, 2]])
        assert result.params.pivot_rows[0] == 1
        assert result.params.pivots[0] == -4.0

    def test_first_maximum_wins_ties(self):
        result = gauss_eliminate([[1, 0], [0, 1], [1, 1]])
        assert result.params.pivot_rows == (0, 1)

    def test_upper_triangular(self, rng):
        A = rng.standard_normal((5, 5))
        U = gauss_eliminate(A).params.echelon
        assert_array_equal(np.tril(U, -1), np.zeros((5, 5)))
        assert np.all(np.diag(U) != 0)

    def test_info(self):
        result = gauss_eliminate(np.ones((3, 5)) + np.eye(3, 5))
        assert result.info["method"] == "gauss"
        assert result.info["reduce"] is False
        assert result.info["steps"] == 3
        assert result.backend_name == "cpu_numpy"


class TestAgainstScipy:
    """Partial pivoting matches LAPACK getrf, so U agrees with scipy's lu()."""

    def test_square(self, rng):
        A = rng.standard_normal((6, 6))
        _, _, U = lu(A)
        assert_allclose(gauss_eliminate(A).params.echelon, U, rtol=1e-10, atol=1e-12)

    def test_wide(self, rng):
        A = rng.standard_normal((3, 5))
        _, _, U = lu(A)
        assert_allclose(gauss_eliminate(A).params.echelon, U, rtol=1e-10, atol=1e-12)

    def test_tall(self, rng):
        A = rng.standard_normal((5, 3))
        _, _, U = lu(A)
        echelon = gauss_eliminate(A).params.echelon
        assert_allclose(echelon[:3], U, rtol=1e-10, atol=1e-12)
        assert_array_equal(echelon[3:], np.zeros((2, 3)))


# ═══════════════════════════════════════════════════════════════════════
# Singular input
# ═══════════════════════════════════════════════════════════════════════


class TestSingular:

    def test_dependent_rows(self):
        with pytest.raises(SingularMatrixError, match="singular") as exc_info:
            gauss_eliminate([[1, 2], [2, 4]])
        assert exc_info.value.rank == 1
        assert exc_info.value.expected_rank == 2
        assert exc_info.value.matrix_name == "A"

    def test_zero_first_column(self):
        with pytest.raises(SingularMatrixError) as exc_info:
            gauss_eliminate([[0, 1], [0, 2]], matrix_name="B")
        assert exc_info.value.rank == 0
        assert "B" in str(exc_info.value)

    def test_zero_matrix(self):
        with pytest.raises(SingularMatrixError):
            gauss_eliminate(np.zeros((3, 3)))

    def test_rejects_1d(self):
        with pytest.raises(DimensionError):
            gauss_eliminate([1.0, 2.0])


# ═══════════════════════════════════════════════════════════════════════
# Backward scaling pass
# ═══════════════════════════════════════════════════════════════════════


class TestReduce:

    def test_two_by_two(self):
        result = gauss_eliminate([[2, 1], [1, 3]], reduce=True)
        assert_allclose(result.params.echelon, [[1.0, 0.5], [0.0, 1.0]])
        assert result.info["reduce"] is True

    def test_leading_entries_are_one(self, rng):
        A = rng.standard_normal((4, 6))
        R = gauss_eliminate(A, reduce=True).params.echelon
        for row in R:
            leading = row[np.flatnonzero(row)[0]]
            assert leading == pytest.approx(1.0, rel=1e-12)

    def test_rows_are_forward_rows_over_leading_entry(self, rng):
        """Scaling row k-1 by row k's pivot is undone when row k-1 is normalized."""
        A = rng.standard_normal((4, 4))
        U = gauss_eliminate(A).params.echelon
        R = gauss_eliminate(A, reduce=True).params.echelon
        expected = U / np.diag(U)[:, None]
        assert_allclose(R, expected, rtol=1e-10, atol=1e-12)

    def test_zero_rows_left_alone(self):
        with np.errstate(all="raise"):
            result = gauss_eliminate([[1, 0], [0, 1], [1, 1]], reduce=True)
        assert_array_equal(
            result.params.echelon, [[1.0, 0.0], [0.0, 1.0], [0.0, 0.0]]
        )

    def test_timing_sections(self):
        forward_only = gauss_eliminate([[2, 1], [1, 3]])
        reduced = gauss_eliminate([[2, 1], [1, 3]], reduce=True)
        assert "forward" in forward_only.timing
        assert "backward" not in forward_only.timing
        assert "backward" in reduced.timing


# ═══════════════════════════════════════════════════════════════════════
# Diagnostics and purity
# ═══════════════════════════════════════════════════════════════════════


class TestDiagnostics:

    def test_small_pivot_warns(self):
        with pytest.warns(RuntimeWarning, match="pivot"):
            result = gauss_eliminate([[1.0, 0.0], [0.0, 1e-13]])
        assert result.has_warning("column 1")

    def test_no_warning_for_well_scaled(self):
        result = gauss_eliminate([[2, 1], [1, 3]])
        assert result.warnings == ()

    def test_input_not_modified(self):
        A = np.array([[1.0, 2.0], [3.0, 4.0]])
        before = A.copy()
        gauss_eliminate(A, reduce=True)
        assert_array_equal(A, before)

    def test_params_type(self):
        result = gauss_eliminate(np.eye(2))
        assert isinstance(result.params, EliminationParams)

    def test_empty(self):
        result = gauss_eliminate(np.empty((0, 0)))
        assert result.params.echelon.shape == (0, 0)
        assert result.info["steps"] == 0

    def test_rejects_non_finite(self):
        with pytest.raises(ValidationError, match="non-finite"):
            gauss_eliminate([[1.0, np.nan], [0.0, 1.0]])
