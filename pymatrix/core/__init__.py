"""
Core infrastructure for pymatrix.

This module provides shared abstractions and utilities used by both the
generic container layer (pymatrix.matrix) and the factorization engine
(pymatrix.linalg).

Key components:
    protocols: MatrixRepresentable, Backend protocols
    result: Generic Result[P] envelope
    exceptions: Exception hierarchy
    validation: Input validators
    compute: Timing and tolerance tiers
"""

from pymatrix.core.protocols import MatrixRepresentable, Backend
from pymatrix.core.result import Result
from pymatrix.core.exceptions import (
    PyMatrixError,
    ValidationError,
    DimensionError,
    NonSquareMatrixError,
    NonconformingMatricesError,
    AsymmetricMatrixError,
    NumericalError,
    FactorizationUndefinedError,
    SingularMatrixError,
    NotPositiveDefiniteError,
)

__all__ = [
    # Protocols
    "MatrixRepresentable",
    "Backend",
    # Result
    "Result",
    # Exceptions
    "PyMatrixError",
    "ValidationError",
    "DimensionError",
    "NonSquareMatrixError",
    "NonconformingMatricesError",
    "AsymmetricMatrixError",
    "NumericalError",
    "FactorizationUndefinedError",
    "SingularMatrixError",
    "NotPositiveDefiniteError",
]
