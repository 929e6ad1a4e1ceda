"""
LUP factorization backends.

Available backends:
    CPULUPBackend: reference partial-pivot elimination over permuted views
    LAPACKLUPBackend: LAPACK getrf via SciPy, used as a cross-check
"""

from typing import Literal

from pymatrix.core.exceptions import ValidationError
from pymatrix.linalg.backends.cpu import CPULUPBackend
from pymatrix.linalg.backends.lapack import LAPACKLUPBackend

BackendChoice = Literal['cpu', 'lapack']


def get_backend(backend: BackendChoice):
    """Select backend based on preference."""
    if backend == 'cpu':
        return CPULUPBackend()
    if backend == 'lapack':
        return LAPACKLUPBackend()
    raise ValidationError(f"Unknown backend: {backend!r}. Must be 'cpu' or 'lapack'.")


__all__ = [
    "BackendChoice",
    "CPULUPBackend",
    "LAPACKLUPBackend",
    "get_backend",
]
