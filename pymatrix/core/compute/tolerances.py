"""
Tolerance tiers for numerical comparison.

Defines precision expectations used by approximate equality:
- EXACT: bitwise-equal values only (the default for equals())
- FP64: double precision round-off from a handful of operations
- FP64 ill-conditioned: relaxed for elimination with small pivots

Used by Vector.equals / Matrix.equals, the test suite, and the elimination
kernel's small-pivot warning.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class ToleranceTier:
    """Tolerance specification for numerical comparison."""
    rtol: float
    atol: float
    name: str
    description: str


EXACT = ToleranceTier(
    rtol=0.0,
    atol=0.0,
    name='exact',
    description='Exact equality, no round-off allowed',
)

FP64 = ToleranceTier(
    rtol=1e-10,
    atol=1e-12,
    name='fp64',
    description='Double precision, well-conditioned',
)

# Elimination with pivots far below the largest entry (cond > 1e4)
FP64_ILL_CONDITIONED = ToleranceTier(
    rtol=1e-4,
    atol=1e-6,
    name='fp64_ill_conditioned',
    description='Double precision, ill-conditioned (cond > 1e4)',
)

# A pivot smaller than this fraction of the largest input magnitude is
# reported as a warning. Elimination still proceeds.
PIVOT_WARNING_THRESHOLD = 1e-12


def select_tolerance(
    exact: bool = False,
    is_ill_conditioned: bool = False,
) -> ToleranceTier:
    """Select appropriate tolerance tier for a comparison."""
    if exact:
        return EXACT
    if is_ill_conditioned:
        return FP64_ILL_CONDITIONED
    return FP64
