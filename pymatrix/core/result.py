"""
Generic result container for pymatrix kernels.

The Result class provides a standardized envelope for compute kernels that
report more than a bare value (pivots, row swaps, timing, non-fatal warnings).
Kernels define their own parameter payloads.

Design decisions:
    - Generic over parameter payload P for type safety
    - info dict for flexible metadata (method, step counts)
    - timing is optional (don't burden unit tests)
    - Immutable (frozen=True)
"""

from dataclasses import dataclass, field
from typing import TypeVar, Generic, Any

P = TypeVar('P')  # Parameter payload type


@dataclass(frozen=True)
class Result(Generic[P]):
    """
    Immutable result envelope for matrix computations.

    Type Parameters:
        P: The kernel-specific parameter payload type

    Attributes:
        params: Kernel-specific payload (transformed rows, pivots, etc.)
        info: Structured metadata (method, step counts, swaps)
        timing: Execution timing breakdown, or None if not measured
        backend_name: Identifier of the kernel that produced this result
        warnings: Non-fatal issues encountered during computation

    Examples:
        >>> Result(
        ...     params=EliminationParams(rows=rows, pivot_rows=(1, 1), pivots=(2.0, 2.5)),
        ...     info={'method': 'gauss', 'reduce': False, 'steps': 2, 'swaps': 1},
        ...     timing={'total_seconds': 0.0001, 'forward': 0.00008},
        ...     backend_name='cpu_python'
        ... )
    """
    params: P
    info: dict[str, Any]
    timing: dict[str, float] | None
    backend_name: str
    warnings: tuple[str, ...] = field(default_factory=tuple)

    def has_warning(self, substring: str) -> bool:
        """Check if any warning contains the given substring."""
        return any(substring in w for w in self.warnings)
