"""
Tolerance tiers for the zero test.

Defines how close to zero a scalar must be before elimination treats it
as zero:
- Exact types (int, Fraction, NumPy integers): exact comparison
- Double precision (float, complex, Decimal, float64): 1e-10
- Single precision (float32, float16, complex64): relaxed

Used by the field zero test, row-echelon pivot search, and the test suite.
"""

from dataclasses import dataclass
from numbers import Rational
from typing import Any

import numpy as np


@dataclass(frozen=True)
class ToleranceTier:
    """Absolute tolerance specification for the zero test."""
    atol: float
    name: str
    description: str


# Exact arithmetic: zero means zero
EXACT = ToleranceTier(
    atol=0.0,
    name='exact',
    description='Exact types — compared with the additive identity',
)

# Double precision: the historical 1e-10 cut-off
FP64 = ToleranceTier(
    atol=1e-10,
    name='fp64',
    description='Double precision — absolute tolerance 1e-10',
)

# Single precision and narrower NumPy floats
FP32 = ToleranceTier(
    atol=1e-5,
    name='fp32',
    description='Single precision — absolute tolerance 1e-5',
)

DEFAULT_TOLERANCE = FP64


def select_tolerance(value: Any) -> ToleranceTier:
    """
    Select the tolerance tier for a scalar value.

    Args:
        value: A field element

    Returns:
        EXACT for integer and rational types, FP32 for NumPy floats
        narrower than 64 bits, DEFAULT_TOLERANCE otherwise.
    """
    if isinstance(value, (bool, int, Rational, np.integer, np.bool_)):
        return EXACT
    if isinstance(value, np.inexact):
        if np.finfo(value.dtype).bits < 64:
            return FP32
        return FP64
    return DEFAULT_TOLERANCE
