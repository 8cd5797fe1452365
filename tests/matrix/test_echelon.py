"""
Tests for reduced row-echelon form.

Validates:
    - Reduced form on square, singular and rectangular input
    - Pivot columns, rank and row-swap bookkeeping
    - Zero tolerance selection (per type and explicit)
    - Input is never mutated
"""

from fractions import Fraction

import numpy as np
import pytest

from pylinear import EchelonResult, Matrix, row_echelon_form


def assert_reduced(matrix, pivot_columns):
    """Each pivot column holds a single 1 in its pivot row and zeros elsewhere."""
    for pivot_row, j in enumerate(pivot_columns):
        column = matrix.column(j)
        for r, value in enumerate(column):
            if r == pivot_row:
                assert value == pytest.approx(1.0)
            else:
                assert value == pytest.approx(0.0, abs=1e-9)


# ═══════════════════════════════════════════════════════════════════════
# Reduced form
# ═══════════════════════════════════════════════════════════════════════


class TestReducedForm:

    def test_identity(self):
        identity = Matrix.from_rows([[1, 0, 0], [0, 1, 0], [0, 0, 1]])
        assert identity.row_echelon() == identity

    def test_invertible_two_by_two(self):
        m = Matrix.from_rows([[1.0, 2.0], [3.0, 4.0]])
        assert m.row_echelon() == Matrix.from_rows([[1.0, 0.0], [0.0, 1.0]])

    def test_rank_deficient_two_by_two(self):
        m = Matrix.from_rows([[1.0, 2.0], [2.0, 4.0]])
        assert m.row_echelon() == Matrix.from_rows([[1.0, 2.0], [0.0, 0.0]])

    def test_wide_matrix(self):
        m = Matrix.from_rows([
            [8.0, 5.0, -2.0, 4.0, 28.0],
            [4.0, 2.5, 20.0, 4.0, -4.0],
            [8.0, 5.0, 1.0, 4.0, 17.0],
        ])
        result = row_echelon_form(m)
        np.testing.assert_allclose(
            result.matrix.to_numpy(),
            [
                [1.0, 0.625, 0.0, 0.0, -12.1666667],
                [0.0, 0.0, 1.0, 0.0, -3.6666667],
                [0.0, 0.0, 0.0, 1.0, 29.5],
            ],
            atol=1e-7,
        )
        assert result.pivot_columns == (0, 2, 3)
        assert_reduced(result.matrix, result.pivot_columns)

    def test_early_stop_on_last_row(self):
        m = Matrix.from_rows([[1.0, 2.0, 3.0], [4.0, 5.0, 6.0]])
        assert m.row_echelon() == Matrix.from_rows([[1.0, 0.0, -1.0], [0.0, 1.0, 2.0]])

    def test_tall_matrix(self):
        m = Matrix.from_rows([[1.0, 2.0], [3.0, 4.0], [5.0, 6.0]])
        result = row_echelon_form(m)
        assert result.matrix == Matrix.from_rows([[1.0, 0.0], [0.0, 1.0], [0.0, 0.0]])
        assert result.rank == 2

    def test_singular(self, singular_matrix):
        result = row_echelon_form(singular_matrix)
        assert result.matrix == Matrix.from_rows([
            [1.0, 0.0, -1.0],
            [0.0, 1.0, 2.0],
            [0.0, 0.0, 0.0],
        ])
        assert result.pivot_columns == (0, 1)
        assert result.rank == 2

    def test_integer_input_reduces_to_identity(self, integer_matrix):
        result = row_echelon_form(integer_matrix)
        np.testing.assert_allclose(result.matrix.to_numpy(), np.eye(3), atol=1e-12)
        assert_reduced(result.matrix, result.pivot_columns)

    def test_fractions_are_exact(self, integer_matrix):
        exact = Matrix.from_rows(
            [[Fraction(value) for value in row] for row in integer_matrix.to_list()]
        )
        reduced = exact.row_echelon()
        assert reduced == Matrix.from_rows([[1, 0, 0], [0, 1, 0], [0, 0, 1]])
        assert all(isinstance(value, Fraction) for column in reduced for value in column)

    def test_zero_matrix(self):
        zero = Matrix.filled(0.0, 2, 3)
        result = row_echelon_form(zero)
        assert result.matrix == zero
        assert result.rank == 0
        assert result.pivot_columns == ()

    def test_empty_matrix(self):
        result = row_echelon_form(Matrix())
        assert result.rank == 0
        assert result.matrix.size() == 0


# ═══════════════════════════════════════════════════════════════════════
# Bookkeeping and policy
# ═══════════════════════════════════════════════════════════════════════


class TestPivoting:

    def test_returns_echelon_result(self):
        assert isinstance(row_echelon_form(Matrix.from_flat([1, 2, 3, 4])), EchelonResult)

    def test_swap_brings_first_nonzero_up(self):
        result = row_echelon_form(Matrix.from_rows([[0, 1], [1, 0]]))
        assert result.swaps == 1
        assert result.matrix == Matrix.from_rows([[1, 0], [0, 1]])

    def test_whole_row_is_swapped(self):
        m = Matrix.from_rows([[0.0, 0.0, 1.0], [0.0, 2.0, 4.0]])
        result = row_echelon_form(m)
        assert result.swaps == 1
        assert result.pivot_columns == (1, 2)
        assert result.matrix == Matrix.from_rows([[0.0, 1.0, 0.0], [0.0, 0.0, 1.0]])

    def test_first_nonzero_not_largest(self):
        """Pivot is the first non-zero entry, not the largest in magnitude."""
        m = Matrix.from_rows([[1.0, 1.0], [100.0, 3.0]])
        assert row_echelon_form(m).swaps == 0

    def test_default_tolerance_treats_tiny_as_zero(self):
        m = Matrix.from_rows([[1e-12, 1.0], [0.0, 0.0]])
        result = row_echelon_form(m)
        assert result.pivot_columns == (1,)

    def test_explicit_tolerance(self):
        m = Matrix.from_rows([[1e-12, 1.0], [0.0, 0.0]])
        result = row_echelon_form(m, tol=0.0)
        assert result.pivot_columns == (0,)
        assert result.matrix[0, 0] == 1.0

    def test_input_not_mutated(self, integer_matrix):
        before = integer_matrix.copy()
        integer_matrix.row_echelon()
        assert integer_matrix == before


class TestRank:

    def test_full_rank(self, random_square):
        m, data = random_square
        assert m.rank() == np.linalg.matrix_rank(data) == 5

    def test_rank_deficient(self, singular_matrix):
        assert singular_matrix.rank() == 2

    def test_rank_of_outer_product(self):
        m = Matrix.from_rows([[1.0, 2.0, 3.0], [2.0, 4.0, 6.0], [-1.0, -2.0, -3.0]])
        assert m.rank() == 1

    def test_rank_matches_numpy(self, rng):
        data = rng.standard_normal((4, 2)) @ rng.standard_normal((2, 6))
        assert Matrix.from_array(data).rank() == np.linalg.matrix_rank(data) == 2
