"""
Free functions over vectors.

These operate on two or more vectors and always return new objects; the
operands are never mutated.
"""

from __future__ import annotations

from typing import Any, Sequence

from pylinear.core.dimension import OneD
from pylinear.core.exceptions import ShapeMismatchError, ZeroNormError
from pylinear.core.protocols import K
from pylinear.core.validation import check_length, check_non_empty, check_same_shape
from pylinear.vector.vector import Vector


def linear_combination(
    vectors: Sequence[Vector[K]],
    coefficients: Sequence[K],
) -> Vector[K]:
    """
    Compute sum_i coefficients[i] * vectors[i].

    Args:
        vectors: Vectors of equal length
        coefficients: One field element per vector

    Returns:
        New vector holding the combination

    Raises:
        ShapeMismatchError: If the two sequences differ in length, or the
            vectors differ in size
        EmptyOperandError: If no vectors are given
    """
    if len(vectors) != len(coefficients):
        raise ShapeMismatchError(
            f"linear_combination: got {len(vectors)} vectors but "
            f"{len(coefficients)} coefficients",
            expected=OneD(len(vectors)),
            received=OneD(len(coefficients)),
        )
    check_non_empty(vectors, 'linear_combination')

    shape = vectors[0].shape()
    for i, vector in enumerate(vectors[1:], start=1):
        check_same_shape(shape, vector.shape(), f"vectors[{i}]")

    result = vectors[0].copy()
    result.scale(coefficients[0])
    for vector, coefficient in zip(vectors[1:], coefficients[1:]):
        term = vector.copy()
        term.scale(coefficient)
        result.add(term)
    return result


def lerp(u: Vector[K], v: Vector[K], t: Any) -> Vector[K]:
    """
    Linear interpolation u + t * (v - u).

    t = 0 gives u, t = 1 gives v; values outside [0, 1] extrapolate.

    Raises:
        ShapeMismatchError: If u and v differ in length
    """
    check_same_shape(u.shape(), v.shape(), 'v')
    step = v.copy()
    step.sub(u)
    step.scale(t)
    result = u.copy()
    result.add(step)
    return result


def cross_product(u: Vector[K], v: Vector[K]) -> Vector[K]:
    """
    Cross product of two 3-dimensional vectors.

    Raises:
        DimensionError: If either vector does not have exactly 3 elements
    """
    check_length(u, 3, 'u')
    check_length(v, 3, 'v')
    u0, u1, u2 = u.fields
    v0, v1, v2 = v.fields
    return Vector([
        u1 * v2 - u2 * v1,
        u2 * v0 - u0 * v2,
        u0 * v1 - u1 * v0,
    ])


def angle_cos(u: Vector[K], v: Vector[K]) -> Any:
    """
    Cosine of the angle between u and v: dot(u, v) / (|u| * |v|).

    Raises:
        ShapeMismatchError: If u and v differ in length
        EmptyOperandError: If the vectors are empty
        ZeroNormError: If either vector has norm zero
    """
    check_same_shape(u.shape(), v.shape(), 'v')
    norm_u = u.norm()
    norm_v = v.norm()
    if norm_u == 0 or norm_v == 0:
        raise ZeroNormError(
            f"angle_cos: undefined for a zero vector (|u| = {norm_u}, |v| = {norm_v})"
        )
    return u.dot(v) / (norm_u * norm_v)
