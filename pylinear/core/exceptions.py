"""
Exception hierarchy for pylinear.

All exceptions inherit from PyLinearError to allow catching any
library-specific error. Shape and size problems are detected before an
operation touches its receiver, so catching one of these never leaves a
half-mutated vector or matrix behind.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
    - Never catch and re-raise with less information
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pylinear.core.dimension import Dimension


class PyLinearError(Exception):
    """Base exception for all pylinear errors."""
    pass


class ValidationError(PyLinearError):
    """
    Input validation failed.

    Raised when operands fail a precondition that can be checked before
    any computation starts.
    """
    pass


class ShapeMismatchError(ValidationError):
    """
    Two operands have differing shapes.

    Raised by elementwise operations (add, sub, mul, div, dot) when the
    operand's size or shape differs from the receiver's.

    Attributes:
        expected: Shape the operation required (usually the receiver's)
        received: Shape of the offending operand
    """

    def __init__(
        self,
        message: str,
        expected: Dimension | None = None,
        received: Dimension | None = None
    ):
        super().__init__(message)
        self.expected = expected
        self.received = received


class IncompatibleShapeError(ShapeMismatchError):
    """
    Inner dimensions of a matrix product disagree.

    Attributes:
        left: Shape of the left operand
        right: Shape of the right operand
    """

    def __init__(
        self,
        message: str,
        left: Dimension | None = None,
        right: Dimension | None = None
    ):
        super().__init__(message, expected=left, received=right)
        self.left = left
        self.right = right


class DimensionError(ValidationError):
    """
    A fixed-arity operation received input of the wrong length.

    Attributes:
        expected: Required number of elements
        received: Actual number of elements
    """

    def __init__(
        self,
        message: str,
        expected: int | None = None,
        received: int | None = None
    ):
        super().__init__(message)
        self.expected = expected
        self.received = received


class NotSquareError(ValidationError):
    """
    A square-only operation (trace, determinant) got a non-square matrix.

    Attributes:
        shape: Shape of the offending matrix
    """

    def __init__(self, message: str, shape: Dimension | None = None):
        super().__init__(message)
        self.shape = shape


class EmptyOperandError(ValidationError):
    """
    An operation requiring at least one element got an empty container.

    Attributes:
        operation: Name of the operation that was attempted
    """

    def __init__(self, message: str, operation: str | None = None):
        super().__init__(message)
        self.operation = operation


class ConstructionError(ValidationError):
    """
    Initial data cannot form a valid container.

    Raised for a flat sequence whose length is not a perfect square, or
    for a set of rows/columns that is not rectangular.

    Attributes:
        length: Offending length, if the failure is length-based
    """

    def __init__(self, message: str, length: int | None = None):
        super().__init__(message)
        self.length = length


class NumericalError(PyLinearError):
    """
    Numerical computation failed.

    Base class for errors arising from the values themselves rather than
    from the shapes of the operands.
    """
    pass


class ZeroNormError(NumericalError):
    """
    A computation divided by the norm of a zero-length vector.

    Raised by angle_cos when either operand has norm zero.
    """
    pass


class CofactorCostWarning(UserWarning):
    """
    Cofactor expansion was requested on a large matrix.

    The expansion is O(n!), so it is only practical for small matrices.
    """
    pass
