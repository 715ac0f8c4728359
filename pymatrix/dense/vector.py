"""
Dense vector of float64 values.

A Vector is the row type of Matrix: a fixed-length, ordered sequence of
numbers stored as a 1-D numpy array. Elementwise operations return new
Vectors; only zeros(), ones() and set() mutate the receiver, and they
return it so calls can be chained.
"""

from __future__ import annotations

from typing import Any, Callable, Iterator

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pymatrix.core.compute.tolerances import ToleranceTier
from pymatrix.core.validation import (
    check_1d,
    check_array,
    check_same_length,
    check_size,
)


class Vector:
    """
    Ordered, fixed-length sequence of float64 values.

    Parameters
    ----------
    values : array-like
        1-D numeric data. Integers are promoted to float64.

    Examples
    --------
    >>> v = Vector([1, 2, 3])
    >>> str(v.scale(2))
    '[2, 4, 6]'
    """

    def __init__(self, values: ArrayLike = ()):
        array = check_array(values, "values")
        check_1d(array, "values")
        self.values: NDArray[np.floating[Any]] = np.array(array, dtype=np.float64)

    @classmethod
    def construct(cls, values: ArrayLike) -> Vector:
        """Build a Vector from any 1-D numeric sequence."""
        return cls(values)

    @classmethod
    def _wrap(cls, array: NDArray[np.floating[Any]]) -> Vector:
        # Adopt an already-validated array without copying it again.
        vector = cls.__new__(cls)
        vector.values = array
        return vector

    # ------------------------------------------------------------------
    # In-place fills
    # ------------------------------------------------------------------

    def zeros(self, n: int) -> Vector:
        """Reset to ``n`` zeros. Returns self."""
        self.values = np.zeros(check_size(n, "n"), dtype=np.float64)
        return self

    def ones(self, n: int) -> Vector:
        """Reset to ``n`` ones. Returns self."""
        self.values = np.ones(check_size(n, "n"), dtype=np.float64)
        return self

    # ------------------------------------------------------------------
    # Elementwise arithmetic
    # ------------------------------------------------------------------

    def add(self, other: Vector) -> Vector:
        check_same_length(len(self), len(other), ("self", "other"))
        return Vector._wrap(self.values + other.values)

    def subtract(self, other: Vector) -> Vector:
        check_same_length(len(self), len(other), ("self", "other"))
        return Vector._wrap(self.values - other.values)

    def scale(self, scalar: float) -> Vector:
        return Vector._wrap(self.values * scalar)

    def append(self, other: Vector) -> Vector:
        """Concatenate ``other`` after this vector's values."""
        return Vector._wrap(np.concatenate([self.values, other.values]))

    def map(self, callback: Callable[[float], float]) -> Vector:
        """
        Apply ``callback`` to every element.

        The callback receives each value as a Python float and must return
        a number.
        """
        return Vector([callback(float(value)) for value in self.values])

    # ------------------------------------------------------------------
    # Access
    # ------------------------------------------------------------------

    def get(self, i: int) -> float:
        return float(self.values[i])

    def set(self, i: int, value: float) -> Vector:
        self.values[i] = value
        return self

    @property
    def length(self) -> int:
        return int(self.values.shape[0])

    def __len__(self) -> int:
        return self.length

    def __iter__(self) -> Iterator[float]:
        return (float(value) for value in self.values)

    def copy(self) -> Vector:
        return Vector._wrap(self.values.copy())

    # ------------------------------------------------------------------
    # Equality and display
    # ------------------------------------------------------------------

    def equals(self, other: Vector, tolerance: ToleranceTier | None = None) -> bool:
        """
        Elementwise equality.

        Exact by default. With a tolerance tier, values are compared with
        ``numpy.allclose`` using the tier's rtol/atol. Vectors of different
        length are never equal.
        """
        if len(self) != len(other):
            return False
        if tolerance is None:
            return bool(np.array_equal(self.values, other.values))
        return bool(np.allclose(
            self.values, other.values, rtol=tolerance.rtol, atol=tolerance.atol
        ))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vector):
            return NotImplemented
        return self.equals(other)

    __hash__ = None  # mutable

    def __str__(self) -> str:
        return "[" + ", ".join(
            np.format_float_positional(value, trim='-') for value in self.values
        ) + "]"

    def __repr__(self) -> str:
        return f"Vector({self})"
