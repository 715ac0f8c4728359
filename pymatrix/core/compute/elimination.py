"""
Gaussian elimination with partial pivoting.

Reduces a dense 2-D array to row-echelon form and, on request, scales it
towards reduced row-echelon form. Used by Matrix.gauss(); callable directly
when pivot diagnostics or timing are wanted.

Forward pass, for each pivot column k < min(n_rows, n_cols):
    1. pick the row at or below k with the largest |a[i, k]|
    2. fail with SingularMatrixError if that magnitude is exactly zero
    3. swap it into row k
    4. a[i, j] -= a[k, j] * (a[i, k] / a[k, k])  for i > k, j > k;
       then a[i, k] = 0

Backward pass (reduce=True), for k from the last row up to 0:
    divide row k by its first nonzero entry, and divide row k-1 by the
    same value. Only the row directly above a pivot row is touched; other
    rows are not eliminated. All-zero rows are left as they are.
"""

import warnings
from dataclasses import dataclass
from typing import Any

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pymatrix.core.compute.timing import Timer
from pymatrix.core.compute.tolerances import PIVOT_WARNING_THRESHOLD
from pymatrix.core.exceptions import SingularMatrixError
from pymatrix.core.result import Result
from pymatrix.core.validation import check_2d, check_array, check_finite


@dataclass(frozen=True)
class EliminationParams:
    """
    Output of gauss_eliminate.

    Attributes:
        echelon: Transformed copy of the input (n_rows x n_cols)
        pivot_rows: Row selected at each step, before it was swapped into place
        pivots: Pivot value used at each step of the forward pass
    """
    echelon: NDArray[np.floating[Any]]
    pivot_rows: tuple[int, ...]
    pivots: tuple[float, ...]


def _leading_value(row: NDArray[np.floating[Any]]) -> float | None:
    nonzero = np.flatnonzero(row)
    if len(nonzero) == 0:
        return None
    return float(row[nonzero[0]])


def gauss_eliminate(
    A: ArrayLike,
    reduce: bool = False,
    matrix_name: str = 'A',
) -> Result[EliminationParams]:
    """
    Gaussian elimination with partial pivoting (CPU, NumPy).

    The input is copied; it is never modified.

    Args:
        A: Matrix to reduce (n_rows x n_cols)
        reduce: If True, run the backward scaling pass after elimination
        matrix_name: Name used in error and warning messages

    Returns:
        Result[EliminationParams] with the echelon form, pivot diagnostics,
        forward/backward timing, and small-pivot warnings

    Raises:
        SingularMatrixError: If a pivot column has no nonzero candidate
        ValidationError: If the input is non-numeric or contains NaN/Inf
    """
    work = np.array(check_array(A, matrix_name), dtype=np.float64)
    check_2d(work, matrix_name)
    check_finite(work, matrix_name)

    n_rows, n_cols = work.shape
    n_steps = min(n_rows, n_cols)
    magnitude = float(np.max(np.abs(work))) if work.size else 0.0

    pivot_rows: list[int] = []
    pivots: list[float] = []
    notes: list[str] = []
    swaps = 0

    timer = Timer()
    timer.start()

    with timer.section('forward'):
        for k in range(n_steps):
            argmax = k
            max_abs = 0.0
            for i in range(k, n_rows):
                candidate = abs(work[i, k])
                if candidate > max_abs:
                    argmax = i
                    max_abs = candidate

            if max_abs == 0.0:
                raise SingularMatrixError(
                    f"{matrix_name} is singular: column {k} has no nonzero pivot "
                    f"at or below row {k} (found {k} of {n_steps} pivots)",
                    matrix_name=matrix_name,
                    rank=k,
                    expected_rank=n_steps,
                )

            pivot_rows.append(argmax)
            if argmax != k:
                work[[k, argmax]] = work[[argmax, k]]
                swaps += 1

            pivot = float(work[k, k])
            pivots.append(pivot)

            if max_abs < PIVOT_WARNING_THRESHOLD * magnitude:
                msg = (
                    f"{matrix_name}: pivot {pivot:.3e} in column {k} is below "
                    f"{PIVOT_WARNING_THRESHOLD:.0e} of the largest entry "
                    f"({magnitude:.3e}); result may be inaccurate"
                )
                notes.append(msg)
                warnings.warn(msg, RuntimeWarning, stacklevel=2)

            for i in range(k + 1, n_rows):
                factor = work[i, k] / work[k, k]
                work[i, k + 1:] -= work[k, k + 1:] * factor
                work[i, k] = 0.0

    if reduce:
        with timer.section('backward'):
            for k in range(n_rows - 1, -1, -1):
                pivot = _leading_value(work[k])
                if pivot is None:
                    continue
                if k:
                    work[k - 1] = work[k - 1] * (1 / pivot)
                work[k] = work[k] * (1 / pivot)

    timer.stop()

    return Result(
        params=EliminationParams(
            echelon=work,
            pivot_rows=tuple(pivot_rows),
            pivots=tuple(pivots),
        ),
        info={
            'method': 'gauss',
            'reduce': reduce,
            'steps': n_steps,
            'swaps': swaps,
        },
        timing=timer.result(),
        backend_name='cpu_numpy',
        warnings=tuple(notes),
    )
