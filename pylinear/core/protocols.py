"""
Core protocols for pylinear.

These define structural interfaces that scalar types and containers must
satisfy. We use Protocol (structural typing) rather than ABC (nominal
typing) so that built-in numbers, Fraction, Decimal and NumPy scalars
qualify without registration.

Design Principles:
    - Minimal contracts: prescribe only what's truly universal
    - Square root and the zero test live in pylinear.core.field, since
      Python's numeric tower does not expose them as methods
    - Type-safe: use generics to preserve the element type through results
"""

from __future__ import annotations

from typing import Any, Protocol, TypeVar, runtime_checkable

from pylinear.core.dimension import Dimension

K = TypeVar('K')  # Field element type


@runtime_checkable
class Field(Protocol):
    """
    Capability set a scalar type must provide to be used as a field element.

    Vector and Matrix are generic over any type with these operators:
    equality and ordering (norm comparisons), negation, the four
    arithmetic operators and absolute value. Compound assignment falls
    back to the binary operators for immutable Python numbers.

    Types may additionally define ``sqrt()`` and ``is_zero()`` methods;
    pylinear.core.field prefers them over its built-in dispatch.
    """

    def __eq__(self, other: Any) -> bool: ...

    def __lt__(self, other: Any) -> bool: ...

    def __neg__(self) -> Any: ...

    def __add__(self, other: Any) -> Any: ...

    def __sub__(self, other: Any) -> Any: ...

    def __mul__(self, other: Any) -> Any: ...

    def __truediv__(self, other: Any) -> Any: ...

    def __abs__(self) -> Any: ...


@runtime_checkable
class VectorSpace(Protocol):
    """
    Shared contract of Vector and Matrix.

    Both containers report a shape and a total element count, and support
    in-place addition, subtraction and scaling by a field element.
    """

    def shape(self) -> Dimension:
        """OneD for vectors, TwoD for matrices."""
        ...

    def size(self) -> int:
        """Total number of stored elements."""
        ...

    def add(self, other: Any) -> None: ...

    def sub(self, other: Any) -> None: ...

    def scale(self, scalar: Any) -> None: ...
