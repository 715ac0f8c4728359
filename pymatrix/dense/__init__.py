"""
Dense matrix and vector arithmetic.

Public API:
    Vector                  - fixed-length float64 sequence
    Matrix(*args)           - rows from Vectors, sizes, or nested sequences
    Matrix.from_rows(rows)  - build directly from existing rows
    Matrix.zeros_of(n)      - n x n zero matrix
    Matrix.from_nested(seq) - build from a 2-D nested sequence
    Matrix.identity(n)      - n x n identity matrix
"""

from pymatrix.dense.vector import Vector
from pymatrix.dense.matrix import Matrix

__all__ = [
    "Vector",
    "Matrix",
]
