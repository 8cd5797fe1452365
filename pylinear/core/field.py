"""
Field operations that Python scalars do not carry as methods.

Vector and Matrix need a square root (norms) and a near-zero predicate
(pivot search) for every element type. Built-in numbers expose neither
uniformly, so these helpers dispatch on the scalar's type:

    sqrt:     x.sqrt() if defined, numpy.sqrt for NumPy scalars,
              cmath.sqrt for complex, math.sqrt otherwise
    is_zero:  exact comparison for integer and rational types,
              abs(x) <= atol for inexact types (Decimal included), and
              x.is_zero() for non-numeric user types that define it
"""

from __future__ import annotations

import cmath
import math
from numbers import Number
from typing import Any

import numpy as np

from pylinear.core.compute.tolerances import select_tolerance


def sqrt(value: Any) -> Any:
    """
    Square root of a field element.

    Args:
        value: Field element, non-negative for real types

    Returns:
        Square root in the type's natural result type (float for int and
        Fraction, Decimal for Decimal, NumPy scalar for NumPy scalars)
    """
    method = getattr(value, 'sqrt', None)
    if callable(method):
        return method()
    if isinstance(value, np.generic):
        return np.sqrt(value)
    if isinstance(value, complex):
        return cmath.sqrt(value)
    return math.sqrt(value)


def absolute(value: Any) -> Any:
    """Absolute value of a field element."""
    return abs(value)


def is_zero(value: Any, atol: float | None = None) -> bool:
    """
    Check whether a field element is zero, within tolerance.

    Args:
        value: Field element
        atol: Absolute tolerance. None selects the tier for the value's
              type via select_tolerance (exact for integers and
              rationals, 1e-10 for double precision).

    Returns:
        True if the element is treated as zero
    """
    if not isinstance(value, (Number, np.generic)):
        method = getattr(value, 'is_zero', None)
        if callable(method):
            return bool(method())

    if atol is None:
        atol = select_tolerance(value).atol

    if atol == 0.0:
        return bool(value == 0)
    return bool(abs(value) <= atol)
