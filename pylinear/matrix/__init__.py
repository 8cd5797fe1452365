"""
Matrix module.

Dense rectangular matrices over a generic field, stored column-major.

Public API:
    Matrix                    - the container
    matrix_of(*rows)          - builder from rows
    row_echelon_form(m, tol)  - reduced row-echelon form with pivot info
    EchelonResult             - result of row_echelon_form
    determinant(m)            - cofactor expansion
    minor(m, row, col)        - submatrix without one row and column
"""

from pylinear.matrix._echelon import EchelonResult, row_echelon_form
from pylinear.matrix._determinant import COFACTOR_WARNING_SIZE, determinant, minor
from pylinear.matrix.matrix import Matrix, matrix_of

__all__ = [
    "Matrix",
    "matrix_of",
    "EchelonResult",
    "row_echelon_form",
    "determinant",
    "minor",
    "COFACTOR_WARNING_SIZE",
]
