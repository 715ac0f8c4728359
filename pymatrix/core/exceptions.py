"""
Exception hierarchy for pymatrix.

All exceptions inherit from PyMatrixError to allow catching any
library-specific error. Domain-specific exceptions should inherit from
the appropriate base class here.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
    - Never catch and re-raise with less information
"""


class PyMatrixError(Exception):
    """Base exception for all pymatrix errors."""
    pass


class ValidationError(PyMatrixError):
    """
    Input validation failed.

    Raised when user-provided inputs fail validation checks, including
    constructor arguments of an unsupported kind.
    """
    pass


class DimensionError(ValidationError):
    """
    Dimensions are incorrect or inconsistent.

    Raised when two operands have incompatible shapes: vector lengths in
    elementwise operations, inner dimensions in a matrix product, or row
    counts in augmentation.

    Attributes:
        expected: Expected size, if known
        actual: Actual size, if known
    """

    def __init__(
        self,
        message: str,
        expected: int | None = None,
        actual: int | None = None
    ):
        super().__init__(message)
        self.expected = expected
        self.actual = actual


class IndexOutOfBoundsError(ValidationError, IndexError):
    """
    Row index refers to an absent or empty row.

    Also an IndexError, so callers using the builtin protocol can catch it.

    Attributes:
        index: The offending index
        size: Number of rows at the time of the call
    """

    def __init__(
        self,
        message: str,
        index: int | None = None,
        size: int | None = None
    ):
        super().__init__(message)
        self.index = index
        self.size = size


class NumericalError(PyMatrixError):
    """
    Numerical computation failed.

    Base class for errors arising from numerical issues during computation.
    """
    pass


class SingularMatrixError(NumericalError):
    """
    Matrix is singular.

    Raised when Gaussian elimination finds an exact-zero pivot after searching
    the pivot column for the largest-magnitude candidate.

    Attributes:
        matrix_name: Name/description of the problematic matrix
        rank: Number of nonzero pivots found before failure
        expected_rank: Pivots required (min(n_rows, n_cols))
    """

    def __init__(
        self,
        message: str,
        matrix_name: str | None = None,
        rank: int | None = None,
        expected_rank: int | None = None
    ):
        super().__init__(message)
        self.matrix_name = matrix_name
        self.rank = rank
        self.expected_rank = expected_rank
