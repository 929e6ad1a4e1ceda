"""
SquareDesign: validated input for square-matrix factorizations.

Wraps a real, finite, square float array and records the properties the
backends and the Cholesky path need. Follows the pymatrix Design pattern:
construct through classmethods, immutable afterwards.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

import numpy as np
from numpy.typing import NDArray

from pymatrix.core.validation import (
    check_array,
    check_real,
    check_2d,
    check_square,
    check_finite,
)
from pymatrix.matrix.representable import as_array


@dataclass(frozen=True)
class SquareDesign:
    """
    Design for square real-matrix factorizations.

    Holds an owned, read-only n x n float64 array. Never aliases the
    caller's storage, so factorizing in place cannot leak back out.

    Construction:
        SquareDesign.from_array(matrix_or_array)
    """
    _a: NDArray[np.floating[Any]]
    _n: int

    @classmethod
    def from_array(cls, data: Any, *, name: str = "A") -> SquareDesign:
        """
        Build SquareDesign from a Matrix, any MatrixRepresentable, a 2D
        array or nested rows. Integer and float32 input is stored as float64.

        Raises:
            ValidationError: If data is non-numeric, complex or non-finite
            DimensionError: If data is not 2D
            NonSquareMatrixError: If rows != cols
        """
        return cls._build(check_array(as_array(data, name), name), name)

    @classmethod
    def _build(cls, a: NDArray, name: str) -> SquareDesign:
        """Internal builder with validation."""
        check_2d(a, name)
        check_square(a, name)
        check_real(a, name)
        check_finite(a, name)

        owned = np.array(a, dtype=np.float64, copy=True)
        owned.setflags(write=False)
        return cls(_a=owned, _n=owned.shape[0])

    @property
    def a(self) -> NDArray[np.floating[Any]]:
        """The matrix (n x n), read-only."""
        return self._a

    @property
    def n(self) -> int:
        """Row (and column) count."""
        return self._n

    @property
    def is_symmetric(self) -> bool:
        """Exact symmetry A == A'."""
        return bool(np.array_equal(self._a, self._a.T))
