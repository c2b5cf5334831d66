"""
Tolerance tiers for numerical comparison.

Defines precision expectations for the different compute paths:
- Exact: operations that only move or sign-flip cells (transpose,
  concatenation, views) reproduce values bit for bit
- Gauss-Jordan: the pivot-free elimination accumulates rounding per
  pivot round, so its absolute tolerance scales with n
- Polyfit: normal-equation coefficients for well-conditioned data

Used by the test suite and by callers that want to check an inverse.
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
    description='Cell moves only, bit-exact',
)

# atol is per pivot round; see inverse_tolerance()
GAUSS_JORDAN = ToleranceTier(
    rtol=1e-9,
    atol=1e-6,
    name='gauss_jordan',
    description='Pivot-free Gauss-Jordan inverse, per dimension',
)

POLYFIT = ToleranceTier(
    rtol=1e-9,
    atol=1e-6,
    name='polyfit',
    description='Normal-equation polynomial coefficients',
)


def inverse_tolerance(n: int) -> ToleranceTier:
    """Tolerance for A @ inverse(A) against identity(n)."""
    return ToleranceTier(
        rtol=GAUSS_JORDAN.rtol,
        atol=GAUSS_JORDAN.atol * max(n, 1),
        name=f'{GAUSS_JORDAN.name}_{n}',
        description=f'{GAUSS_JORDAN.description} (n={n})',
    )
