"""
Solver dispatch for square real matrices.

Functional entry points over SquareRealMatrix: lup(), det(), trace(),
solve(), inv(), cholesky(). Each accepts either a SquareRealMatrix (whose
cached factorization is reused) or raw input, which is validated and
factored once per call.
"""

from __future__ import annotations

from typing import Any
import warnings

from pymatrix.linalg.backends import BackendChoice
from pymatrix.linalg.solution import LUPFactors
from pymatrix.linalg.square import SquareRealMatrix
from pymatrix.matrix.matrix import Matrix


def _ensure_square(a: Any, backend: BackendChoice) -> SquareRealMatrix:
    """Convert raw input to SquareRealMatrix if needed."""
    if isinstance(a, SquareRealMatrix):
        return a
    return SquareRealMatrix(a, backend=backend)


def lup(a: Any, *, backend: BackendChoice = 'cpu') -> LUPFactors:
    """
    LUP factors of a square matrix, P A = L U.

    Parameters
    ----------
    a : SquareRealMatrix, Matrix, MatrixRepresentable or array-like
        Square real matrix.
    backend : str
        'cpu' (partial-pivot reference) or 'lapack' (getrf via SciPy).
        Ignored when a is already a SquareRealMatrix.

    Returns
    -------
    LUPFactors

    Raises
    ------
    FactorizationUndefinedError
        If some column has no nonzero pivot.
    """
    return _ensure_square(a, backend).lup()


def det(a: Any, *, backend: BackendChoice = 'cpu') -> float:
    """Determinant; 0.0 for a matrix with no LUP factorization."""
    return _ensure_square(a, backend).determinant()


def trace(a: Any) -> float:
    """Sum of the main diagonal of a square matrix."""
    return _ensure_square(a, 'cpu').trace()


def solve(a: Any, b: Any, *, backend: BackendChoice = 'cpu') -> Matrix:
    """
    Solve A X = B.

    Parameters
    ----------
    a : SquareRealMatrix, Matrix, MatrixRepresentable or array-like
        Square coefficient matrix (n x n).
    b : Matrix, MatrixRepresentable or array-like
        Right-hand sides (n x m), or a length-n vector.
    backend : str
        'cpu' or 'lapack'.

    Returns
    -------
    Matrix
        Solution (n x m).

    Raises
    ------
    NonconformingMatricesError
        If b does not have n rows.
    SingularMatrixError
        If a has no LUP factorization.
    """
    return _ensure_square(a, backend).solve(b)


def inv(a: Any, *, backend: BackendChoice = 'cpu') -> Matrix:
    """Inverse of a nonsingular square matrix."""
    return _ensure_square(a, backend).inverse()


def cholesky(a: Any, *, strict: bool = True) -> Matrix:
    """
    Lower triangular Cholesky factor L with L L' = A.

    Parameters
    ----------
    a : SquareRealMatrix, Matrix, MatrixRepresentable or array-like
        Symmetric matrix.
    strict : bool
        If True (default), a matrix that is not positive definite raises
        NotPositiveDefiniteError. If False, the factor is returned with
        NaN/inf entries and a RuntimeWarning is issued.

    Raises
    ------
    AsymmetricMatrixError
        If A != A'.
    NotPositiveDefiniteError
        If strict and A is not positive definite.
    """
    result = _ensure_square(a, 'cpu').cholesky_factorization(strict=strict)
    for message in result.warnings:
        warnings.warn(message, RuntimeWarning, stacklevel=2)
    return result.params.l
