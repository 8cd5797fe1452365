"""
Shape descriptors.

A Dimension is either OneD (vectors) or TwoD (matrices). Both are
immutable and compare by value, so shapes can be checked with ``==`` and
embedded in error messages directly.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True)
class OneD:
    """Shape of a vector."""
    length: int

    @property
    def size(self) -> int:
        return self.length

    def __str__(self) -> str:
        return f"({self.length},)"


@dataclass(frozen=True)
class TwoD:
    """Shape of a matrix, rows first."""
    rows: int
    cols: int

    @property
    def size(self) -> int:
        return self.rows * self.cols

    @property
    def is_square(self) -> bool:
        return self.rows == self.cols

    def __str__(self) -> str:
        return f"({self.rows}, {self.cols})"


Dimension = Union[OneD, TwoD]
