"""
Gauss-Jordan elimination to reduced row-echelon form.

The reduction works on a row-major copy of the input, column by column:

    1. pivot search: first entry at or below row i that is not zero
       within tolerance (no magnitude pivoting)
    2. whole-row swap of the pivot row into row i
    3. normalize row i from column j rightward so the pivot is 1
    4. eliminate the column above row i (rows with a non-zero entry)
    5. eliminate the column below row i
    6. stop once row i is the last row

Eliminating above as each pivot is placed produces the reduced form in a
single pass, with no separate back-substitution. Choosing the first
non-zero entry rather than the largest one keeps the method simple but
not numerically optimal on ill-conditioned floating-point input. Integer
input is promoted by Python's true division; use Fraction entries for an
exact reduction.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from pylinear.core.field import is_zero

if TYPE_CHECKING:
    from pylinear.matrix.matrix import Matrix


@dataclass(frozen=True)
class EchelonResult:
    """
    Result of row-echelon reduction.

    Attributes:
        matrix: Reduced row-echelon form (a new matrix)
        pivot_columns: Column index of each pivot, in row order
        rank: Number of pivots
        swaps: Number of row exchanges performed
    """
    matrix: 'Matrix[Any]'
    pivot_columns: tuple[int, ...]
    rank: int
    swaps: int


def _find_pivot(rows: list[list[Any]], start: int, j: int, tol: float | None) -> int | None:
    """Index of the first row at or below ``start`` with a non-zero entry in column j."""
    for r in range(start, len(rows)):
        if not is_zero(rows[r][j], tol):
            return r
    return None


def _normalize(row: list[Any], j: int) -> None:
    pivot = row[j]
    for k in range(j, len(row)):
        row[k] = row[k] / pivot


def _eliminate(target: list[Any], pivot_row: list[Any], j: int) -> None:
    """target -= target[j] * pivot_row, restricted to columns >= j."""
    factor = target[j]
    for k in range(j, len(target)):
        target[k] = target[k] - factor * pivot_row[k]


def row_echelon_form(matrix: 'Matrix[Any]', tol: float | None = None) -> EchelonResult:
    """
    Reduce a matrix to reduced row-echelon form.

    Args:
        matrix: Matrix to reduce; never mutated
        tol: Absolute tolerance under which an entry counts as zero.
             None selects the tier for each entry's type (exact for
             integers and rationals, 1e-10 for double precision).

    Returns:
        EchelonResult with the reduced matrix, pivot columns, rank and
        number of row swaps
    """
    n_rows, n_cols = matrix.rows, matrix.cols
    rows = [matrix.row(r).fields for r in range(n_rows)]

    pivot_columns: list[int] = []
    swaps = 0
    i = 0

    if n_rows > 0:
        for j in range(n_cols):
            found = _find_pivot(rows, i, j, tol)
            if found is None:
                continue

            if found != i:
                rows[i], rows[found] = rows[found], rows[i]
                swaps += 1

            _normalize(rows[i], j)

            for r in range(i):
                if not is_zero(rows[r][j], tol):
                    _eliminate(rows[r], rows[i], j)
            for r in range(i + 1, n_rows):
                _eliminate(rows[r], rows[i], j)

            pivot_columns.append(j)
            if i == n_rows - 1:
                break
            i += 1

    return EchelonResult(
        matrix=type(matrix).from_rows(rows),
        pivot_columns=tuple(pivot_columns),
        rank=len(pivot_columns),
        swaps=swaps,
    )
