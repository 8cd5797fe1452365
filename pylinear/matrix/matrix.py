"""
Matrix: dense rectangular container over a generic field.

Storage is column-major: ``vectors`` holds one Vector per column, each of
length ``rows``. Public indexing is row-first (``m[i, j]`` is row i,
column j). Transposition rebuilds the column list eagerly; it is a real
data reshuffle, not a view.

A matrix with no columns is the empty matrix of shape (0, 0). Every
elementwise operation validates shapes before touching the receiver.
"""

from __future__ import annotations

from typing import Any, Callable, Generic, Iterable, Iterator, Sequence

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pylinear.core.dimension import OneD, TwoD
from pylinear.core.exceptions import ConstructionError, EmptyOperandError, ValidationError
from pylinear.core.protocols import K
from pylinear.core.validation import (
    check_array,
    check_inner_dimensions,
    check_ndim,
    check_rectangular,
    check_same_shape,
    check_square,
    perfect_square_root,
)
from pylinear.formatting import format_matrix
from pylinear.matrix._determinant import determinant, minor
from pylinear.matrix._echelon import row_echelon_form
from pylinear.vector import Vector


def _as_vector(values: Vector[K] | Iterable[K]) -> Vector[K]:
    if isinstance(values, Vector):
        return values.copy()
    return Vector(values)


class Matrix(Generic[K]):
    """
    Dense matrix over a field K, stored as a list of column vectors.

    Construction:
        Matrix.from_rows([[1, 2], [3, 4]])
        Matrix.from_flat([1, 2, 3, 4])        # square reshape, row-major
        Matrix.from_columns([[1, 3], [2, 4]])
        Matrix.filled(0.0, rows=2, cols=3)
        Matrix.from_array(np.eye(3))
        matrix_of([1, 2], [3, 4])
    """

    __slots__ = ('vectors',)

    # Make numpy scalars defer to __rmul__ instead of coercing to an array
    __array_ufunc__ = None

    def __init__(self, columns: Iterable[Vector[K] | Iterable[K]] = ()):
        vectors = [_as_vector(column) for column in columns]
        check_rectangular([len(v) for v in vectors], 'columns')
        self.vectors: list[Vector[K]] = vectors

    @classmethod
    def _from_vectors(cls, vectors: list[Vector[K]]) -> Matrix[K]:
        """Adopt already-validated columns without copying."""
        matrix = cls.__new__(cls)
        matrix.vectors = vectors
        return matrix

    @classmethod
    def from_columns(cls, columns: Iterable[Vector[K] | Iterable[K]]) -> Matrix[K]:
        return cls(columns)

    @classmethod
    def from_rows(cls, rows: Iterable[Vector[K] | Iterable[K]]) -> Matrix[K]:
        """
        Build a matrix from equal-length rows.

        Raises:
            ConstructionError: If the rows are not all the same length
        """
        row_list = [_as_vector(row) for row in rows]
        check_rectangular([len(r) for r in row_list], 'rows')
        if not row_list:
            return cls._from_vectors([])
        n_cols = len(row_list[0])
        columns = [Vector(row.fields[j] for row in row_list) for j in range(n_cols)]
        return cls._from_vectors(columns)

    @classmethod
    def from_flat(cls, values: Iterable[K]) -> Matrix[K]:
        """
        Reshape a flat sequence into a square matrix, row-major.

        ``from_flat([1, 2, 3, 4])`` has rows [1, 2] and [3, 4]. An empty
        sequence gives the empty matrix.

        Raises:
            ConstructionError: If the length is not a perfect square
        """
        flat = list(values)
        root = perfect_square_root(len(flat))
        if root is None:
            raise ConstructionError(
                f"values: length {len(flat)} is not a perfect square, "
                f"cannot form a square matrix",
                length=len(flat),
            )
        return cls.from_rows(flat[i * root:(i + 1) * root] for i in range(root))

    @classmethod
    def filled(cls, value: K, rows: int, cols: int) -> Matrix[K]:
        """Matrix of the given shape with every entry set to ``value``."""
        if rows < 0 or cols < 0:
            raise ValidationError(
                f"shape: rows and cols must be non-negative, got ({rows}, {cols})"
            )
        return cls._from_vectors([Vector.filled(value, rows) for _ in range(cols)])

    @classmethod
    def from_array(cls, array: ArrayLike) -> Matrix[Any]:
        """
        Build a matrix from a 2D numeric array-like.

        Elements are converted to Python scalars (int, float, complex).

        Raises:
            ValidationError: If the input is ragged or not numeric
            DimensionError: If the input is not 2D
        """
        arr = check_array(array, 'array')
        check_ndim(arr, 2, 'array')
        return cls.from_rows(arr.tolist())

    # --- Shape ---

    def shape(self) -> TwoD:
        return TwoD(self.rows, self.cols)

    def size(self) -> int:
        return self.rows * self.cols

    @property
    def rows(self) -> int:
        """Number of rows (length of each column vector)."""
        return len(self.vectors[0]) if self.vectors else 0

    @property
    def cols(self) -> int:
        """Number of columns."""
        return len(self.vectors)

    def is_square(self) -> bool:
        return self.rows == self.cols

    def is_compatible(self, other: Matrix[K]) -> bool:
        """True if ``other`` can be combined elementwise with this matrix."""
        return self.shape() == other.shape()

    def check_compatibility(self, other: Matrix[K], name: str = 'other') -> None:
        """
        Raise if ``other`` cannot be combined elementwise with this matrix.

        Raises:
            ShapeMismatchError: If the shapes differ
        """
        check_same_shape(self.shape(), other.shape(), name)

    # --- Element access ---

    def __getitem__(self, index: tuple[int, int]) -> K:
        i, j = index
        return self.vectors[j][i]

    def __setitem__(self, index: tuple[int, int], value: K) -> None:
        i, j = index
        self.vectors[j][i] = value

    def row(self, i: int) -> Vector[K]:
        """Copy of row i."""
        return Vector(column.fields[i] for column in self.vectors)

    def column(self, j: int) -> Vector[K]:
        """Copy of column j."""
        return self.vectors[j].copy()

    def iter_rows(self) -> Iterator[Vector[K]]:
        for i in range(self.rows):
            yield self.row(i)

    def __iter__(self) -> Iterator[Vector[K]]:
        """Iterate over copies of the columns, left to right."""
        for column in self.vectors:
            yield column.copy()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.vectors == other.vectors

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Matrix.from_rows({self.to_list()!r})"

    def __str__(self) -> str:
        return format_matrix(self.vectors)

    def copy(self) -> Matrix[K]:
        return self._from_vectors([column.copy() for column in self.vectors])

    def to_list(self) -> list[list[K]]:
        """Row-major nested list."""
        return [self.row(i).fields for i in range(self.rows)]

    def to_numpy(self, dtype: Any = None) -> NDArray[Any]:
        """Copy the entries into a 2D numpy array of shape (rows, cols)."""
        return np.asarray(self.to_list(), dtype=dtype).reshape(self.rows, self.cols)

    # --- Structural operations ---

    def transpose(self) -> Matrix[K]:
        """New matrix with rows and columns exchanged."""
        return self._from_vectors([self.row(i) for i in range(self.rows)])

    @property
    def T(self) -> Matrix[K]:
        return self.transpose()

    def transpose_inplace(self) -> None:
        """Rebuild this matrix's columns from its rows."""
        self.vectors = self.transpose().vectors

    def append_col(self, column: Vector[K] | Iterable[K]) -> None:
        """
        Append a column on the right.

        Raises:
            ShapeMismatchError: If the column length differs from ``rows``
                on a non-empty matrix
        """
        vector = _as_vector(column)
        if self.vectors:
            check_same_shape(OneD(self.rows), vector.shape(), 'column')
        self.vectors.append(vector)

    def swap_rows(self, i: int, j: int) -> None:
        """Exchange rows i and j across every column, in place."""
        for column in self.vectors:
            column.fields[i], column.fields[j] = column.fields[j], column.fields[i]

    # --- In-place arithmetic ---

    def _combine(self, other: Matrix[K], name: str, op: Callable[[Any, Any], Any]) -> None:
        self.check_compatibility(other, name)
        self.vectors = [
            Vector(op(a, b) for a, b in zip(mine.fields, theirs.fields))
            for mine, theirs in zip(self.vectors, other.vectors)
        ]

    def add(self, other: Matrix[K]) -> None:
        """
        Elementwise addition, in place.

        Raises:
            ShapeMismatchError: If shapes differ (receiver left unchanged)
        """
        self._combine(other, 'other', lambda a, b: a + b)

    def sub(self, other: Matrix[K]) -> None:
        """Elementwise subtraction, in place."""
        self._combine(other, 'other', lambda a, b: a - b)

    def mul(self, other: Matrix[K]) -> None:
        """Elementwise (Hadamard) product, in place."""
        self._combine(other, 'other', lambda a, b: a * b)

    def div(self, other: Matrix[K]) -> None:
        """Elementwise division, in place."""
        self._combine(other, 'other', lambda a, b: a / b)

    def scale(self, scalar: K) -> None:
        """Multiply every entry by ``scalar``, in place."""
        for column in self.vectors:
            column.scale(scalar)

    def scale_columns(self, vector: Vector[K]) -> None:
        """
        Multiply every column elementwise by ``vector``, in place.

        Raises:
            ShapeMismatchError: If ``len(vector) != rows``
        """
        check_same_shape(OneD(self.rows), vector.shape(), 'vector')
        for column in self.vectors:
            column.mul(vector)

    # --- Products and reductions ---

    def mul_vec(self, vector: Vector[K]) -> Vector[K]:
        """
        Matrix-vector product: entry i is sum_j M[i, j] * vector[j].

        Computed by transposing a copy, scaling each of its columns (the
        original rows) by ``vector`` and summing them.

        Raises:
            ShapeMismatchError: If ``len(vector) != cols``
            EmptyOperandError: If the matrix is empty
        """
        check_same_shape(OneD(self.cols), vector.shape(), 'vector')
        if self.size() == 0:
            raise EmptyOperandError(
                f"mul_vec: requires a non-empty matrix, got shape {self.shape()}",
                operation='mul_vec',
            )
        rows_as_columns = self.transpose()
        rows_as_columns.scale_columns(vector)
        return Vector(column.sum() for column in rows_as_columns.vectors)

    def mul_mat(self, other: Matrix[K]) -> Matrix[K]:
        """
        Matrix-matrix product, shape (self.rows, other.cols).

        Each result entry is the dot product of a row of self and a
        column of other.

        Raises:
            EmptyOperandError: If either operand is empty
            IncompatibleShapeError: If ``self.cols != other.rows``
        """
        check_inner_dimensions(self.shape(), other.shape())
        self_rows = self.transpose().vectors
        return self._from_vectors([
            Vector(row.dot(column) for row in self_rows)
            for column in other.vectors
        ])

    def trace(self) -> K:
        """
        Sum of the diagonal.

        Raises:
            EmptyOperandError: If the matrix is empty
            NotSquareError: If the matrix is not square
        """
        check_square(self.shape(), 'trace')
        total = self[0, 0]
        for i in range(1, self.rows):
            total = total + self[i, i]
        return total

    def row_echelon(self, tol: float | None = None) -> Matrix[Any]:
        """
        Reduced row-echelon form, as a new matrix.

        See pylinear.matrix.row_echelon_form for the algorithm and for
        pivot/rank details.
        """
        return row_echelon_form(self, tol=tol).matrix

    def rank(self, tol: float | None = None) -> int:
        """Number of pivots found by row-echelon reduction."""
        return row_echelon_form(self, tol=tol).rank

    def minor(self, row: int, col: int) -> Matrix[K]:
        """Copy of this matrix without the given row and column."""
        return minor(self, row, col)

    def determinant(self) -> K:
        """Determinant by cofactor expansion (O(n!), small matrices only)."""
        return determinant(self)

    # --- Operators ---

    def __add__(self, other: Matrix[K]) -> Matrix[K]:
        if not isinstance(other, Matrix):
            return NotImplemented
        result = self.copy()
        result.add(other)
        return result

    def __sub__(self, other: Matrix[K]) -> Matrix[K]:
        if not isinstance(other, Matrix):
            return NotImplemented
        result = self.copy()
        result.sub(other)
        return result

    def __mul__(self, scalar: K) -> Matrix[K]:
        if isinstance(scalar, (Matrix, Vector)):
            return NotImplemented
        result = self.copy()
        result.scale(scalar)
        return result

    def __rmul__(self, scalar: K) -> Matrix[K]:
        if isinstance(scalar, (Matrix, Vector)):
            return NotImplemented
        return self._from_vectors([scalar * column for column in self.vectors])

    def __matmul__(self, other: Matrix[K] | Vector[K]) -> Matrix[K] | Vector[K]:
        if isinstance(other, Matrix):
            return self.mul_mat(other)
        if isinstance(other, Vector):
            return self.mul_vec(other)
        return NotImplemented

    def __neg__(self) -> Matrix[K]:
        return self._from_vectors([-column for column in self.vectors])

    def __iadd__(self, other: Matrix[K]) -> Matrix[K]:
        if not isinstance(other, Matrix):
            return NotImplemented
        self.add(other)
        return self

    def __isub__(self, other: Matrix[K]) -> Matrix[K]:
        if not isinstance(other, Matrix):
            return NotImplemented
        self.sub(other)
        return self

    def __imul__(self, scalar: K) -> Matrix[K]:
        if isinstance(scalar, (Matrix, Vector)):
            return NotImplemented
        self.scale(scalar)
        return self


def matrix_of(*rows: Sequence[K]) -> Matrix[K]:
    """Build a matrix from its rows: ``matrix_of([1, 2], [3, 4])``."""
    return Matrix.from_rows(rows)
