"""
Core infrastructure for pylinear.

This module provides the shared abstractions used by the vector and
matrix packages.

Key components:
    protocols: Field and VectorSpace protocols
    field: sqrt / absolute / is_zero field operations
    dimension: OneD / TwoD shape descriptors
    exceptions: Exception hierarchy
    validation: Shape and input validators
    compute: Tolerance tiers
"""

from pylinear.core.protocols import Field, VectorSpace
from pylinear.core.dimension import Dimension, OneD, TwoD
from pylinear.core.exceptions import (
    PyLinearError,
    ValidationError,
    ShapeMismatchError,
    IncompatibleShapeError,
    DimensionError,
    NotSquareError,
    EmptyOperandError,
    ConstructionError,
    NumericalError,
    ZeroNormError,
    CofactorCostWarning,
)

__all__ = [
    # Protocols
    "Field",
    "VectorSpace",
    # Shapes
    "Dimension",
    "OneD",
    "TwoD",
    # Exceptions
    "PyLinearError",
    "ValidationError",
    "ShapeMismatchError",
    "IncompatibleShapeError",
    "DimensionError",
    "NotSquareError",
    "EmptyOperandError",
    "ConstructionError",
    "NumericalError",
    "ZeroNormError",
    "CofactorCostWarning",
]
