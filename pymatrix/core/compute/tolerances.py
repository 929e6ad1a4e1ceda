"""
Tolerance tiers for numerical comparison.

Defines precision expectations for different compute paths:
- CPU FP64 (reference): pure elimination in double precision
- LAPACK FP64: blocked getrf, different operation order than the reference
- DISPLAY: five-significant-digit agreement, for published reference values

Used by is_close() and the backend cross-checks in the test suite.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class ToleranceTier:
    """Tolerance specification for numerical comparison."""
    rtol: float
    atol: float
    name: str
    description: str


# Reference elimination in double precision
CPU_FP64 = ToleranceTier(
    rtol=1e-10,
    atol=1e-12,
    name='cpu_fp64',
    description='CPU double precision: reference elimination',
)

# LAPACK getrf: same pivots, different summation order
LAPACK_FP64 = ToleranceTier(
    rtol=1e-9,
    atol=1e-11,
    name='lapack_fp64',
    description='LAPACK double precision: matches CPU reference',
)

# Hand-transcribed reference values printed to about five digits
DISPLAY = ToleranceTier(
    rtol=0.0,
    atol=1e-5,
    name='display',
    description='Absolute 1e-5, for values transcribed from printed tables',
)
