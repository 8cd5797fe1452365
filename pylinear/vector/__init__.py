"""
Vector module.

Dense, fixed-length vectors over a generic field, plus free functions
that combine several vectors.

Public API:
    Vector                 - the container
    vector_of(*values)     - builder from elements
    linear_combination()   - sum of scaled vectors
    lerp(u, v, t)          - linear interpolation
    cross_product(u, v)    - 3D cross product
    angle_cos(u, v)        - cosine of the angle between two vectors
"""

from pylinear.vector.vector import Vector, vector_of
from pylinear.vector.operations import (
    linear_combination,
    lerp,
    cross_product,
    angle_cos,
)

__all__ = [
    "Vector",
    "vector_of",
    "linear_combination",
    "lerp",
    "cross_product",
    "angle_cos",
]
