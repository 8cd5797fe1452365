"""
Numerical configuration for pylinear.

Submodules:
    tolerances: Zero-tolerance tiers used by the field zero test
"""

from pylinear.core.compute.tolerances import (
    ToleranceTier,
    EXACT,
    FP64,
    FP32,
    DEFAULT_TOLERANCE,
    select_tolerance,
)

__all__ = [
    "ToleranceTier",
    "EXACT",
    "FP64",
    "FP32",
    "DEFAULT_TOLERANCE",
    "select_tolerance",
]
