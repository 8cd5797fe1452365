"""
Human-readable rendering of vectors and matrices.

Vectors render as ``[a, b, c]`` using each element's str(). Matrices
render one bracketed line per row; real numbers are shown with two
decimals and every column is right-aligned to its widest cell.
"""

from __future__ import annotations

from decimal import Decimal
from numbers import Real
from typing import Any, Iterable, Sequence


def format_scalar(value: Any) -> str:
    """Two-decimal rendering for real numbers, str() for anything else."""
    if isinstance(value, Decimal):
        return format(value, '.2f')
    if isinstance(value, Real):
        return f"{float(value):.2f}"
    return str(value)


def format_vector(values: Iterable[Any]) -> str:
    return "[" + ", ".join(str(value) for value in values) + "]"


def format_matrix(columns: Sequence[Sequence[Any]]) -> str:
    """
    Render column-major data as aligned rows.

    Args:
        columns: Sequence of equal-length columns

    Returns:
        One line per row, e.g. for [[1, 20], [3, 4]] given by rows::

            [1.00 20.00]
            [3.00  4.00]
    """
    if not columns or not columns[0]:
        return "[]"

    cells = [[format_scalar(value) for value in column] for column in columns]
    widths = [max(len(cell) for cell in column) for column in cells]

    lines = []
    for i in range(len(cells[0])):
        row = " ".join(column[i].rjust(width) for column, width in zip(cells, widths))
        lines.append(f"[{row}]")
    return "\n".join(lines)
