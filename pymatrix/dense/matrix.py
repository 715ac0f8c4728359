"""
Dense matrix built from row Vectors.

A Matrix is an ordered list of Vector rows, all of the same length.
Algebraic operations return new matrices and leave the receiver untouched;
set(), swap(), zeros() and ones() mutate in place and return the receiver.

Construction
------------
Matrix(*args) interprets each argument by kind:

    Vector              appended as a row, reference kept
    int N               N zero rows of length N
    nested sequence     each inner sequence becomes a new row

Anything else raises ValidationError. The named factories from_rows(),
zeros_of(), from_nested() and identity() cover the same cases explicitly.

Rows handed in as Vectors are shared with the caller, not copied.
"""

from __future__ import annotations

from typing import Any, Callable, Iterable, Sequence

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pymatrix.core.compute.elimination import gauss_eliminate
from pymatrix.core.compute.tolerances import ToleranceTier
from pymatrix.core.exceptions import DimensionError, IndexOutOfBoundsError, ValidationError
from pymatrix.core.validation import check_2d, check_array, check_row_index, check_size
from pymatrix.dense.vector import Vector


class Matrix:
    """
    Dense matrix of float64 values stored row by row.

    Parameters
    ----------
    *args : Vector, int, or nested sequence
        See the module docstring for how each kind is interpreted.

    Attributes
    ----------
    rows : list of Vector
        Row storage; row index is list position.

    Examples
    --------
    >>> A = Matrix([[1, 2], [3, 4]])
    >>> A.get(1, 0)
    3.0
    >>> A.multiply(Matrix.identity(2)).equals(A)
    True
    """

    def __init__(self, *args: Any):
        self.rows: list[Vector] = []
        for position, argument in enumerate(args):
            self.rows.extend(_rows_from_argument(argument, f"args[{position}]"))

    # ------------------------------------------------------------------
    # Factories
    # ------------------------------------------------------------------

    @classmethod
    def from_rows(cls, rows: Iterable[Vector | ArrayLike]) -> Matrix:
        """
        Build a matrix directly from an ordered sequence of rows.

        Vectors are kept as-is; any other row is converted to a new Vector.
        """
        matrix = cls()
        matrix.rows = [
            row if isinstance(row, Vector) else Vector(row) for row in rows
        ]
        return matrix

    construct = from_rows

    @classmethod
    def zeros_of(cls, n: int) -> Matrix:
        """n x n zero matrix."""
        return cls().zeros(n, n)

    @classmethod
    def from_nested(cls, values: ArrayLike) -> Matrix:
        """Build from a 2-D nested numeric sequence; every row is a fresh Vector."""
        return cls.from_rows(_rows_from_nested(values, "values"))

    @classmethod
    def identity(cls, size: int) -> Matrix:
        """size x size identity matrix."""
        matrix = cls().zeros(size, size)
        for i in range(size):
            matrix.set(i, i, 1)
        return matrix

    def zeros(self, i: int, j: int) -> Matrix:
        """Replace contents with ``i`` zero rows of length ``j``. Returns self."""
        n_rows = check_size(i, "i")
        self.rows = [Vector().zeros(j) for _ in range(n_rows)]
        return self

    def ones(self, i: int, j: int) -> Matrix:
        """Replace contents with ``i`` rows of ``j`` ones. Returns self."""
        n_rows = check_size(i, "i")
        self.rows = [Vector().ones(j) for _ in range(n_rows)]
        return self

    def copy(self) -> Matrix:
        return Matrix.from_rows(row.copy() for row in self.rows)

    # ------------------------------------------------------------------
    # Shape
    # ------------------------------------------------------------------

    @property
    def n_rows(self) -> int:
        return len(self.rows)

    @property
    def n_cols(self) -> int:
        return len(self.rows[0]) if self.rows else 0

    @property
    def shape(self) -> tuple[int, int]:
        return (self.n_rows, self.n_cols)

    def __len__(self) -> int:
        return self.n_rows

    # ------------------------------------------------------------------
    # Elementwise operations
    # ------------------------------------------------------------------

    def add(self, other: Matrix) -> Matrix:
        return Matrix.from_rows(
            row.add(other.rows[index]) for index, row in enumerate(self.rows)
        )

    def subtract(self, other: Matrix) -> Matrix:
        return Matrix.from_rows(
            row.subtract(other.rows[index]) for index, row in enumerate(self.rows)
        )

    def scale(self, scalar: float) -> Matrix:
        return Matrix.from_rows(row.scale(scalar) for row in self.rows)

    def map(self, callback: Callable[[float], float]) -> Matrix:
        return Matrix.from_rows(row.map(callback) for row in self.rows)

    # ------------------------------------------------------------------
    # Products and rearrangements
    # ------------------------------------------------------------------

    def multiply(self, other: Matrix) -> Matrix:
        """
        Matrix product ``self @ other``.

        Each entry is summed over k in ascending order, row-major, so floating
        point results are reproducible.

        Raises:
            DimensionError: If self.n_cols != other.n_rows
        """
        if self.n_cols != other.n_rows:
            raise DimensionError(
                f"dimension mismatch: left operand has {self.n_cols} columns, "
                f"right operand has {other.n_rows} rows",
                expected=self.n_cols,
                actual=other.n_rows,
            )

        product = Matrix().zeros(self.n_rows, other.n_cols)
        for i in range(self.n_rows):
            for j in range(other.n_cols):
                total = 0.0
                for k in range(self.n_cols):
                    total += self.get(i, k) * other.get(k, j)
                product.set(i, j, total)

        return product

    def transpose(self) -> Matrix:
        transposed = Matrix().zeros(self.n_cols, self.n_rows)
        for i in range(self.n_rows):
            for j in range(self.n_cols):
                transposed.set(j, i, self.get(i, j))
        return transposed

    def gauss(self, reduce: bool = False) -> Matrix:
        """
        Row-echelon form by Gaussian elimination with partial pivoting.

        With ``reduce=True`` every pivot row is divided by its leading entry
        and the row directly above it is divided by the same value, giving
        leading ones. See pymatrix.core.compute.elimination for the exact
        procedure and for pivot diagnostics.

        The receiver is not modified.

        Raises:
            SingularMatrixError: If a pivot column has no nonzero candidate
        """
        result = gauss_eliminate(self.to_numpy(), reduce=reduce)
        return Matrix.from_nested(result.params.echelon)

    def augment(self, other: Matrix) -> Matrix:
        """
        Place ``other`` to the right of this matrix.

        Raises:
            DimensionError: If the row counts differ
        """
        if self.n_rows != other.n_rows:
            raise DimensionError(
                f"size mismatch: cannot augment {self.n_rows} rows with {other.n_rows} rows",
                expected=self.n_rows,
                actual=other.n_rows,
            )
        return Matrix.from_rows(
            row.append(other.rows[index]) for index, row in enumerate(self.rows)
        )

    # ------------------------------------------------------------------
    # Vectors and scalars
    # ------------------------------------------------------------------

    def diag(self) -> Vector:
        return Vector([self.get(i, i) for i in range(min(self.n_rows, self.n_cols))])

    def trace(self) -> float:
        return float(sum(self.diag()))

    # ------------------------------------------------------------------
    # Equality
    # ------------------------------------------------------------------

    def equals(self, other: Matrix, tolerance: ToleranceTier | None = None) -> bool:
        """
        True if both matrices have the same rows.

        Exact by default; pass a ToleranceTier for approximate comparison.
        """
        if self.n_rows != other.n_rows:
            return False
        return all(
            row.equals(other.rows[index], tolerance)
            for index, row in enumerate(self.rows)
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.equals(other)

    __hash__ = None  # mutable

    # ------------------------------------------------------------------
    # Element and row access
    # ------------------------------------------------------------------

    def get(self, i: int, j: int) -> float:
        return self.rows[i].get(j)

    def set(self, i: int, j: int, value: float) -> Matrix:
        self.rows[i].set(j, value)
        return self

    def swap(self, i: int, j: int) -> Matrix:
        """
        Exchange rows ``i`` and ``j`` in place. Returns self.

        Raises:
            IndexOutOfBoundsError: If either index is not an existing,
                non-empty row
        """
        for name, index in (("i", i), ("j", j)):
            check_row_index(index, self.n_rows, name)
            if not len(self.rows[index]):
                raise IndexOutOfBoundsError(
                    f"{name}: index out of bounds, row {index} is empty",
                    index=index,
                    size=self.n_rows,
                )

        self.rows[i], self.rows[j] = self.rows[j], self.rows[i]
        return self

    # ------------------------------------------------------------------
    # Conversion and display
    # ------------------------------------------------------------------

    def to_numpy(self) -> NDArray[np.floating[Any]]:
        """Copy of the contents as a 2-D float64 array."""
        if not self.rows:
            return np.empty((0, 0), dtype=np.float64)
        return np.array([row.values for row in self.rows], dtype=np.float64)

    def __str__(self) -> str:
        return "[" + ", \n".join(str(row) for row in self.rows) + "]"

    def __repr__(self) -> str:
        n_rows, n_cols = self.shape
        return f"Matrix({n_rows}x{n_cols}, {self})"


def _rows_from_nested(values: ArrayLike, name: str) -> list[Vector]:
    array = check_array(values, name)
    check_2d(array, name)
    return [Vector(row) for row in array]


def _rows_from_argument(argument: Any, name: str) -> list[Vector]:
    if isinstance(argument, Vector):
        return [argument]
    if isinstance(argument, (int, np.integer)) and not isinstance(argument, (bool, np.bool_)):
        n = check_size(argument, name)
        return [Vector().zeros(n) for _ in range(n)]
    if isinstance(argument, (Sequence, np.ndarray)) and not isinstance(argument, (str, bytes)):
        if len(argument) == 0:
            return []
        return _rows_from_nested(argument, name)
    raise ValidationError(
        f"{name}: unsupported argument of type {type(argument).__name__}; "
        f"expected Vector, int, or nested sequence of numbers"
    )
