"""
Generic result container for pymatrix factorizations.

The Result class provides a standardized envelope that every backend
returns. Shared tooling (timing, diagnostics, summaries) reads the
envelope while each factorization defines its own parameter payload.

Design decisions:
    - Generic over parameter payload P for type safety
    - info dict for flexible metadata (method, swap count, failing column)
    - timing is optional (don't burden unit tests)
    - Immutable (frozen=True) so a cached factorization cannot drift
"""

from dataclasses import dataclass, field
from typing import TypeVar, Generic, Any

P = TypeVar('P')  # Parameter payload type


@dataclass(frozen=True)
class Result(Generic[P]):
    """
    Immutable result envelope for matrix factorizations.

    Type Parameters:
        P: The factorization-specific parameter payload type

    Attributes:
        params: Factor payload (L, U, permutation, ...)
        info: Structured metadata (method, n, n_swaps, ...)
        timing: Execution timing breakdown, or None if not measured
        backend_name: Identifier of the backend that produced this result
        warnings: Non-fatal issues encountered during computation

    Examples:
        >>> Result(
        ...     params=LUPFactors(l=l, u=u, perm_order=(1, 0, 2), n_swaps=1),
        ...     info={'method': 'lup_partial_pivot', 'n': 3, 'n_swaps': 1},
        ...     timing={'total_seconds': 0.001, 'elimination': 0.0008},
        ...     backend_name='cpu_lup'
        ... )
    """
    params: P
    info: dict[str, Any]
    timing: dict[str, float] | None
    backend_name: str
    warnings: tuple[str, ...] = field(default_factory=tuple)
