"""
Shared compute infrastructure for pymatrix.

This module provides timing utilities, tolerance tiers and the numeric
kernels that the dense types delegate to.

Submodules:
    timing: Execution timing utilities
    tolerances: Tolerance tiers for approximate comparison
    elimination: Gaussian elimination with partial pivoting
"""

from pymatrix.core.compute.timing import Timer, timed
from pymatrix.core.compute.tolerances import (
    EXACT,
    FP64,
    FP64_ILL_CONDITIONED,
    ToleranceTier,
    select_tolerance,
)
from pymatrix.core.compute.elimination import EliminationParams, gauss_eliminate

__all__ = [
    # Timing
    "Timer",
    "timed",
    # Tolerances
    "ToleranceTier",
    "EXACT",
    "FP64",
    "FP64_ILL_CONDITIONED",
    "select_tolerance",
    # Elimination
    "EliminationParams",
    "gauss_eliminate",
]
