"""
pymatrix: dense matrix and vector arithmetic for Python.

A small numeric library meant to be embedded in larger numeric code.

Submodules:
    dense: Vector and Matrix types
    core: Exceptions, validation, result envelope, compute kernels
"""

__version__ = "0.1.0"

from pymatrix.dense import Vector, Matrix
from pymatrix.core.exceptions import (
    PyMatrixError,
    ValidationError,
    DimensionError,
    IndexOutOfBoundsError,
    NumericalError,
    SingularMatrixError,
)

__all__ = [
    "__version__",
    "Vector",
    "Matrix",
    "PyMatrixError",
    "ValidationError",
    "DimensionError",
    "IndexOutOfBoundsError",
    "NumericalError",
    "SingularMatrixError",
]
