"""
Determinant by cofactor (Laplace) expansion along the first row.

    det[a]            = a
    det[[a, b],
        [c, d]]       = a*d - b*c
    det(M), n > 2     = sum_j (-1)^j * M[0, j] * det(minor(M, 0, j))

Each minor is a fresh copy of the matrix without one row and one column.
The expansion costs O(n!) and is only practical for small matrices; it
keeps the field type (an integer matrix has an integer determinant).
"""

from __future__ import annotations

import warnings
from typing import TYPE_CHECKING, Any

from pylinear.core.exceptions import CofactorCostWarning, ValidationError
from pylinear.core.validation import check_square
from pylinear.vector import Vector

if TYPE_CHECKING:
    from pylinear.matrix.matrix import Matrix

# Sizes above this trigger a CofactorCostWarning
COFACTOR_WARNING_SIZE = 9


def minor(matrix: 'Matrix[Any]', row: int, col: int) -> 'Matrix[Any]':
    """
    Copy of ``matrix`` with row ``row`` and column ``col`` discarded.

    Args:
        matrix: Source matrix (rows x cols), not mutated
        row: Index of the row to discard
        col: Index of the column to discard

    Returns:
        New matrix of shape (rows - 1, cols - 1)

    Raises:
        ValidationError: If either index is out of range
    """
    shape = matrix.shape()
    if not 0 <= row < shape.rows:
        raise ValidationError(f"row: index {row} out of range for shape {shape}")
    if not 0 <= col < shape.cols:
        raise ValidationError(f"col: index {col} out of range for shape {shape}")

    columns = [
        Vector(value for i, value in enumerate(column.fields) if i != row)
        for j, column in enumerate(matrix.vectors)
        if j != col
    ]
    return type(matrix)._from_vectors(columns)


def _expand(matrix: 'Matrix[Any]') -> Any:
    n = matrix.rows
    if n == 1:
        return matrix[0, 0]
    if n == 2:
        return matrix[0, 0] * matrix[1, 1] - matrix[0, 1] * matrix[1, 0]

    total = matrix[0, 0] * _expand(minor(matrix, 0, 0))
    for j in range(1, n):
        term = matrix[0, j] * _expand(minor(matrix, 0, j))
        if j % 2:
            total = total - term
        else:
            total = total + term
    return total


def determinant(matrix: 'Matrix[Any]') -> Any:
    """
    Determinant of a square matrix by cofactor expansion.

    Raises:
        EmptyOperandError: If the matrix is empty
        NotSquareError: If the matrix is not square

    Warns:
        CofactorCostWarning: If the matrix is larger than
            COFACTOR_WARNING_SIZE x COFACTOR_WARNING_SIZE
    """
    shape = matrix.shape()
    check_square(shape, 'determinant')
    if shape.rows > COFACTOR_WARNING_SIZE:
        warnings.warn(
            f"determinant: cofactor expansion of a {shape.rows}x{shape.cols} "
            f"matrix is O(n!) and may be very slow",
            CofactorCostWarning,
            stacklevel=2,
        )
    return _expand(matrix)
