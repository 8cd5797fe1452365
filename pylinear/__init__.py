"""
pylinear: generic dense vectors and matrices for Python.

Vectors and matrices over any scalar type with field arithmetic (int,
float, Fraction, Decimal, NumPy scalars, or user types), with norms,
products, reduced row-echelon form, determinant and trace.

Submodules:
    core: Field protocol, shapes, exceptions, validation, tolerances
    vector: Vector and vector functions
    matrix: Matrix, row-echelon reduction, determinant
"""

__version__ = "0.1.0"

from pylinear.core import (
    Dimension,
    OneD,
    TwoD,
    PyLinearError,
    ValidationError,
    ShapeMismatchError,
    IncompatibleShapeError,
    DimensionError,
    NotSquareError,
    EmptyOperandError,
    ConstructionError,
    NumericalError,
    ZeroNormError,
    CofactorCostWarning,
)
from pylinear.vector import (
    Vector,
    vector_of,
    linear_combination,
    lerp,
    cross_product,
    angle_cos,
)
from pylinear.matrix import (
    Matrix,
    matrix_of,
    EchelonResult,
    row_echelon_form,
    determinant,
    minor,
)

__all__ = [
    "__version__",
    # Containers
    "Vector",
    "Matrix",
    "vector_of",
    "matrix_of",
    # Vector functions
    "linear_combination",
    "lerp",
    "cross_product",
    "angle_cos",
    # Matrix algorithms
    "EchelonResult",
    "row_echelon_form",
    "determinant",
    "minor",
    # Shapes
    "Dimension",
    "OneD",
    "TwoD",
    # Exceptions and warnings
    "PyLinearError",
    "ValidationError",
    "ShapeMismatchError",
    "IncompatibleShapeError",
    "DimensionError",
    "NotSquareError",
    "EmptyOperandError",
    "ConstructionError",
    "NumericalError",
    "ZeroNormError",
    "CofactorCostWarning",
]
