"""
Vector: dense, fixed-length sequence of field elements.

Named methods (add, sub, mul, div, scale) mutate the receiver in place
after validating the operand. Operators are thin wrappers: ``+ - * /``
return new vectors, ``+= -= *= /=`` mutate, ``@`` is the dot product.

Reductions (sum, sqsum, dot and the norms) fold from the first element
rather than from a literal zero, so the result keeps the field type
(a Fraction vector sums to a Fraction). As a consequence they are
undefined on empty vectors, which raise EmptyOperandError.
"""

from __future__ import annotations

from typing import Any, Generic, Iterable, Iterator, overload

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pylinear.core.dimension import OneD
from pylinear.core.exceptions import ValidationError
from pylinear.core.field import absolute, sqrt
from pylinear.core.protocols import K
from pylinear.core.validation import (
    check_array,
    check_ndim,
    check_non_empty,
    check_same_shape,
)
from pylinear.formatting import format_vector


class Vector(Generic[K]):
    """
    Dense vector over a field K.

    Construction:
        Vector([1, 2, 3])
        Vector.filled(0.0, 3)
        Vector.from_array(np.array([1.0, 2.0]))
        vector_of(1, 2, 3)
    """

    __slots__ = ('fields',)

    # Make numpy scalars defer to __rmul__ instead of coercing to an array
    __array_ufunc__ = None

    def __init__(self, values: Iterable[K] = ()):
        self.fields: list[K] = list(values)

    @classmethod
    def filled(cls, value: K, length: int) -> Vector[K]:
        """Vector of ``length`` copies of ``value``."""
        if length < 0:
            raise ValidationError(f"length: must be non-negative, got {length}")
        return cls([value] * length)

    @classmethod
    def from_array(cls, array: ArrayLike) -> Vector[Any]:
        """
        Build a Vector from a 1D numeric array-like.

        Elements are converted to Python scalars (int, float, complex).

        Raises:
            ValidationError: If the input is not numeric
            DimensionError: If the input is not 1D
        """
        arr = check_array(array, 'array')
        check_ndim(arr, 1, 'array')
        return cls(arr.tolist())

    # --- Shape ---

    def shape(self) -> OneD:
        return OneD(len(self.fields))

    def size(self) -> int:
        return len(self.fields)

    def is_compatible(self, other: Vector[K]) -> bool:
        """True if ``other`` can be combined elementwise with this vector."""
        return self.shape() == other.shape()

    def check_compatibility(self, other: Vector[K], name: str = 'other') -> None:
        """
        Raise if ``other`` cannot be combined elementwise with this vector.

        Raises:
            ShapeMismatchError: If the lengths differ
        """
        check_same_shape(self.shape(), other.shape(), name)

    # --- Container protocol ---

    def __len__(self) -> int:
        return len(self.fields)

    def __iter__(self) -> Iterator[K]:
        return iter(self.fields)

    @overload
    def __getitem__(self, index: int) -> K: ...

    @overload
    def __getitem__(self, index: slice) -> Vector[K]: ...

    def __getitem__(self, index):
        if isinstance(index, slice):
            return Vector(self.fields[index])
        return self.fields[index]

    def __setitem__(self, index: int, value: K) -> None:
        self.fields[index] = value

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vector):
            return NotImplemented
        return self.fields == other.fields

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Vector({self.fields!r})"

    def __str__(self) -> str:
        return format_vector(self.fields)

    def copy(self) -> Vector[K]:
        return Vector(self.fields)

    def append(self, value: K) -> None:
        """Grow the vector by one element. Used when assembling matrix rows."""
        self.fields.append(value)

    def to_list(self) -> list[K]:
        return list(self.fields)

    def to_numpy(self, dtype: Any = None) -> NDArray[Any]:
        """Copy the elements into a 1D numpy array."""
        return np.asarray(self.fields, dtype=dtype)

    # --- In-place arithmetic ---

    def add(self, other: Vector[K]) -> None:
        """
        Elementwise addition, in place.

        Raises:
            ShapeMismatchError: If lengths differ (receiver left unchanged)
        """
        self.check_compatibility(other)
        self.fields = [a + b for a, b in zip(self.fields, other.fields)]

    def sub(self, other: Vector[K]) -> None:
        """Elementwise subtraction, in place."""
        self.check_compatibility(other)
        self.fields = [a - b for a, b in zip(self.fields, other.fields)]

    def mul(self, other: Vector[K]) -> None:
        """Elementwise (Hadamard) product, in place."""
        self.check_compatibility(other)
        self.fields = [a * b for a, b in zip(self.fields, other.fields)]

    def div(self, other: Vector[K]) -> None:
        """Elementwise division, in place."""
        self.check_compatibility(other)
        self.fields = [a / b for a, b in zip(self.fields, other.fields)]

    def scale(self, scalar: K) -> None:
        """Multiply every element by ``scalar``, in place."""
        self.fields = [a * scalar for a in self.fields]

    # --- Reductions ---

    def sum(self) -> K:
        """Sum of the elements."""
        check_non_empty(self.fields, 'sum')
        total = self.fields[0]
        for value in self.fields[1:]:
            total = total + value
        return total

    def sqsum(self) -> K:
        """Sum of the squared elements."""
        check_non_empty(self.fields, 'sqsum')
        first = self.fields[0]
        total = first * first
        for value in self.fields[1:]:
            total = total + value * value
        return total

    def dot(self, other: Vector[K]) -> K:
        """
        Dot product.

        Raises:
            ShapeMismatchError: If lengths differ
            EmptyOperandError: If both vectors are empty
        """
        self.check_compatibility(other)
        check_non_empty(self.fields, 'dot')
        total = self.fields[0] * other.fields[0]
        for a, b in zip(self.fields[1:], other.fields[1:]):
            total = total + a * b
        return total

    def norm_1(self) -> Any:
        """Manhattan norm: sum of absolute values."""
        check_non_empty(self.fields, 'norm_1')
        total = absolute(self.fields[0])
        for value in self.fields[1:]:
            total = total + absolute(value)
        return total

    def norm_inf(self) -> Any:
        """Supremum norm: largest absolute value."""
        check_non_empty(self.fields, 'norm_inf')
        return max(absolute(value) for value in self.fields)

    def norm(self) -> Any:
        """Euclidean norm: square root of sqsum."""
        check_non_empty(self.fields, 'norm')
        return sqrt(self.sqsum())

    # --- Operators ---

    def __add__(self, other: Vector[K]) -> Vector[K]:
        if not isinstance(other, Vector):
            return NotImplemented
        result = self.copy()
        result.add(other)
        return result

    def __sub__(self, other: Vector[K]) -> Vector[K]:
        if not isinstance(other, Vector):
            return NotImplemented
        result = self.copy()
        result.sub(other)
        return result

    def __mul__(self, scalar: K) -> Vector[K]:
        if isinstance(scalar, Vector):
            return NotImplemented
        result = self.copy()
        result.scale(scalar)
        return result

    def __rmul__(self, scalar: K) -> Vector[K]:
        if isinstance(scalar, Vector):
            return NotImplemented
        return Vector([scalar * a for a in self.fields])

    def __truediv__(self, scalar: K) -> Vector[K]:
        if isinstance(scalar, Vector):
            return NotImplemented
        return Vector([a / scalar for a in self.fields])

    def __matmul__(self, other: Vector[K]) -> K:
        if not isinstance(other, Vector):
            return NotImplemented
        return self.dot(other)

    def __neg__(self) -> Vector[K]:
        return Vector([-a for a in self.fields])

    def __iadd__(self, other: Vector[K]) -> Vector[K]:
        if not isinstance(other, Vector):
            return NotImplemented
        self.add(other)
        return self

    def __isub__(self, other: Vector[K]) -> Vector[K]:
        if not isinstance(other, Vector):
            return NotImplemented
        self.sub(other)
        return self

    def __imul__(self, scalar: K) -> Vector[K]:
        if isinstance(scalar, Vector):
            return NotImplemented
        self.scale(scalar)
        return self

    def __itruediv__(self, scalar: K) -> Vector[K]:
        if isinstance(scalar, Vector):
            return NotImplemented
        self.fields = [a / scalar for a in self.fields]
        return self


def vector_of(*values: K) -> Vector[K]:
    """Build a vector from its elements: ``vector_of(1, 2, 3)``."""
    return Vector(values)
