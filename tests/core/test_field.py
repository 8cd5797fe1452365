"""
Tests for field operations, tolerance tiers and shape descriptors.
"""

import math
from decimal import Decimal
from fractions import Fraction

import numpy as np
import pytest

from pylinear.core.compute.tolerances import (
    DEFAULT_TOLERANCE,
    EXACT,
    FP32,
    FP64,
    select_tolerance,
)
from pylinear.core.dimension import OneD, TwoD
from pylinear.core.field import absolute, is_zero, sqrt
from pylinear.core.protocols import Field, VectorSpace
from pylinear import Matrix, Vector


class Mod7:
    """Minimal user-defined field element with its own zero test."""

    def __init__(self, value):
        self.value = value % 7

    def is_zero(self):
        return self.value == 0


# ═══════════════════════════════════════════════════════════════════════
# Tolerance tiers
# ═══════════════════════════════════════════════════════════════════════


class TestSelectTolerance:

    @pytest.mark.parametrize("value", [0, 5, True, Fraction(1, 3), np.int64(2)])
    def test_exact_types(self, value):
        assert select_tolerance(value) is EXACT

    @pytest.mark.parametrize("value", [1.0, 1j, Decimal("1.5"), np.float64(1.0)])
    def test_double_precision(self, value):
        assert select_tolerance(value) is FP64

    @pytest.mark.parametrize("value", [np.float32(1.0), np.float16(1.0), np.complex64(1.0)])
    def test_single_precision(self, value):
        assert select_tolerance(value) is FP32

    def test_default_matches_historical_cutoff(self):
        assert DEFAULT_TOLERANCE.atol == 1e-10
        assert EXACT.atol == 0.0


# ═══════════════════════════════════════════════════════════════════════
# is_zero
# ═══════════════════════════════════════════════════════════════════════


class TestIsZero:

    def test_integer_exact(self):
        assert is_zero(0)
        assert not is_zero(1)

    def test_fraction_exact(self):
        assert is_zero(Fraction(0))
        assert not is_zero(Fraction(1, 10**20))

    def test_float_within_tolerance(self):
        assert is_zero(1e-11)
        assert is_zero(-1e-11)
        assert not is_zero(1e-9)

    def test_explicit_tolerance(self):
        assert is_zero(1e-4, atol=1e-3)
        assert not is_zero(1e-11, atol=0.0)

    def test_decimal(self):
        assert is_zero(Decimal("1e-12"))
        assert not is_zero(Decimal("0.001"))

    def test_numpy_scalars(self):
        assert is_zero(np.float64(1e-12))
        assert is_zero(np.float32(1e-6))
        assert is_zero(np.int32(0))
        assert not is_zero(np.int32(1))

    def test_complex(self):
        assert is_zero(1e-12 + 1e-12j)
        assert not is_zero(1j)

    def test_user_type_method_preferred(self):
        assert is_zero(Mod7(14))
        assert not is_zero(Mod7(3))


# ═══════════════════════════════════════════════════════════════════════
# sqrt / absolute
# ═══════════════════════════════════════════════════════════════════════


class TestSqrt:

    def test_int_and_float(self):
        assert sqrt(9) == 3.0
        assert sqrt(2.0) == pytest.approx(math.sqrt(2.0))

    def test_fraction(self):
        assert sqrt(Fraction(1, 4)) == pytest.approx(0.5)

    def test_decimal_uses_method(self):
        result = sqrt(Decimal(2))
        assert isinstance(result, Decimal)
        assert result == Decimal(2).sqrt()

    def test_numpy_scalar(self):
        result = sqrt(np.float32(4.0))
        assert isinstance(result, np.floating)
        assert result == 2.0

    def test_complex(self):
        assert sqrt(-4 + 0j) == pytest.approx(2j)

    def test_absolute(self):
        assert absolute(-3) == 3
        assert absolute(Fraction(-1, 2)) == Fraction(1, 2)


# ═══════════════════════════════════════════════════════════════════════
# Protocols and shapes
# ═══════════════════════════════════════════════════════════════════════


class TestProtocols:

    @pytest.mark.parametrize("value", [1, 1.5, Fraction(1, 2), Decimal(1), np.float64(1)])
    def test_numbers_are_fields(self, value):
        assert isinstance(value, Field)

    def test_containers_are_vector_spaces(self):
        assert isinstance(Vector([1, 2]), VectorSpace)
        assert isinstance(Matrix.from_flat([1, 2, 3, 4]), VectorSpace)


class TestDimension:

    def test_one_d(self):
        shape = OneD(3)
        assert shape.size == 3
        assert str(shape) == "(3,)"

    def test_two_d(self):
        shape = TwoD(2, 3)
        assert shape.size == 6
        assert not shape.is_square
        assert str(shape) == "(2, 3)"

    def test_value_equality(self):
        assert TwoD(2, 2) == TwoD(2, 2)
        assert TwoD(2, 2) != OneD(4)
