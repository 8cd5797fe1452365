"""
Input validation utilities for pylinear.

These validators follow the "fail fast, fail loud" principle. They raise
immediately with clear error messages rather than silently truncating,
padding or guessing. Every Vector and Matrix operation runs its checks
before mutating anything.

Design principles:
    - No silent truncation or padding of mismatched operands
    - Clear, actionable error messages with actual values
    - Each function validates ONE thing
    - Parameter names included in all error messages
"""

from __future__ import annotations

import math
from typing import Any, Sized

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pylinear.core.dimension import Dimension, TwoD
from pylinear.core.exceptions import (
    ConstructionError,
    DimensionError,
    EmptyOperandError,
    IncompatibleShapeError,
    NotSquareError,
    ShapeMismatchError,
    ValidationError,
)


def check_array(array: ArrayLike, name: str) -> NDArray[Any]:
    """
    Validate and convert input to a numeric numpy array.

    Args:
        array: Input to validate
        name: Parameter name for error messages

    Returns:
        numpy.ndarray with numeric dtype (integer, floating or complex)

    Raises:
        ValidationError: If input cannot be converted to a numeric array
    """
    try:
        result = np.asarray(array)
    except (ValueError, TypeError) as e:
        raise ValidationError(f"{name}: cannot convert to array: {e}") from e

    if result.dtype == object:
        raise ValidationError(
            f"{name}: converted to object dtype, indicating ragged rows or non-numeric data"
        )

    if not np.issubdtype(result.dtype, np.number):
        raise ValidationError(
            f"{name}: non-numeric dtype {result.dtype}, expected numeric data"
        )

    return result


def check_ndim(array: NDArray[Any], ndim: int, name: str) -> None:
    """
    Verify array has exactly the specified number of dimensions.

    Raises:
        DimensionError: If array has wrong number of dimensions
    """
    if array.ndim != ndim:
        raise DimensionError(
            f"{name}: expected {ndim}D array, got {array.ndim}D with shape {array.shape}",
            expected=ndim,
            received=array.ndim,
        )


def check_same_shape(expected: Dimension, received: Dimension, name: str) -> None:
    """
    Verify an operand's shape equals the receiver's.

    Args:
        expected: Shape of the receiver
        received: Shape of the operand
        name: Parameter name for error messages

    Raises:
        ShapeMismatchError: If the shapes differ
    """
    if expected != received:
        raise ShapeMismatchError(
            f"{name}: received incompatible shape {received}, expected {expected}",
            expected=expected,
            received=received,
        )


def check_length(container: Sized, length: int, name: str) -> None:
    """
    Verify a fixed-arity operand has exactly ``length`` elements.

    Raises:
        DimensionError: If the operand has a different number of elements
    """
    n = len(container)
    if n != length:
        raise DimensionError(
            f"{name}: expected exactly {length} elements, got {n}",
            expected=length,
            received=n,
        )


def check_non_empty(container: Sized, operation: str) -> None:
    """
    Verify a container holds at least one element.

    Raises:
        EmptyOperandError: If the container is empty
    """
    if len(container) == 0:
        raise EmptyOperandError(
            f"{operation}: requires at least one element, got an empty operand",
            operation=operation,
        )


def check_square(shape: TwoD, operation: str) -> None:
    """
    Verify a matrix shape is square and non-empty.

    Raises:
        EmptyOperandError: If the matrix has no elements
        NotSquareError: If rows != cols
    """
    if shape.size == 0:
        raise EmptyOperandError(
            f"{operation}: requires a non-empty matrix, got shape {shape}",
            operation=operation,
        )
    if not shape.is_square:
        raise NotSquareError(
            f"{operation}: requires a square matrix, got shape {shape}",
            shape=shape,
        )


def check_inner_dimensions(left: TwoD, right: TwoD) -> None:
    """
    Verify two matrices can be multiplied (left.cols == right.rows).

    Raises:
        EmptyOperandError: If either operand has no elements
        IncompatibleShapeError: If the inner dimensions disagree
    """
    if left.size == 0 or right.size == 0:
        raise EmptyOperandError(
            f"mul_mat: operands must be non-empty, got shapes {left} and {right}",
            operation='mul_mat',
        )
    if left.cols != right.rows:
        raise IncompatibleShapeError(
            f"mul_mat: inner dimensions disagree, {left} @ {right} "
            f"(left has {left.cols} columns, right has {right.rows} rows)",
            left=left,
            right=right,
        )


def check_rectangular(lengths: list[int], name: str) -> None:
    """
    Verify every row (or column) has the same length.

    Raises:
        ConstructionError: If lengths are not uniform
    """
    if len(set(lengths)) > 1:
        raise ConstructionError(
            f"{name}: shapes are not uniform, got lengths {lengths}"
        )


def perfect_square_root(length: int) -> int | None:
    """Integer square root of length, or None if length is not a perfect square."""
    root = math.isqrt(length)
    if root * root == length:
        return root
    return None
