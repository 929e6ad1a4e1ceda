"""
Shared compute infrastructure for pymatrix.

This module provides timing utilities and tolerance tiers that are shared
by every backend and by the test suite.

IMPORTANT: This is NOT where factorization backends live. Those go in
pymatrix/linalg/backends/. This module contains shared NUMERIC infrastructure.

Submodules:
    timing: Execution timing utilities
    tolerances: Tolerance tiers for numerical comparison
"""

from pymatrix.core.compute.timing import Timer
from pymatrix.core.compute.tolerances import (
    ToleranceTier,
    CPU_FP64,
    LAPACK_FP64,
    DISPLAY,
)

__all__ = [
    # Timing
    "Timer",
    # Tolerances
    "ToleranceTier",
    "CPU_FP64",
    "LAPACK_FP64",
    "DISPLAY",
]
