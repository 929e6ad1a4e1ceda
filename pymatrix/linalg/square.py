"""
SquareRealMatrix: a square real matrix with a cached LUP factorization.

Most queries on a square matrix (determinant, solve, inverse) depend on
its LUP factorization, which costs O(n^3). The factorization is therefore
attempted once, when the matrix is constructed, and its outcome is kept
for the lifetime of the instance:

    - Result[LUPFactors] when elimination succeeded
    - None when some column had no nonzero pivot (the matrix is singular)

Construction never fails because of singularity; only the square shape
and finite real values are preconditions. Queries that need an inverse
raise SingularMatrixError against the undefined state.
"""

from __future__ import annotations

from typing import Any
import warnings

import numpy as np
from numpy.typing import NDArray

from pymatrix.core.exceptions import (
    AsymmetricMatrixError,
    FactorizationUndefinedError,
    SingularMatrixError,
)
from pymatrix.core.protocols import MatrixRepresentable
from pymatrix.core.result import Result
from pymatrix.core.validation import (
    check_array,
    check_2d,
    check_real,
    check_finite,
    check_equal_rows,
)
from pymatrix.linalg.backends import BackendChoice, get_backend
from pymatrix.linalg.design import SquareDesign
from pymatrix.linalg.solution import LUPFactors, CholeskyFactor
from pymatrix.linalg._cholesky import factor_cholesky
from pymatrix.linalg._substitution import forward_solve, backward_solve
from pymatrix.matrix.matrix import Matrix
from pymatrix.matrix.representable import as_array


def _rhs_array(b: Any) -> NDArray[np.floating[Any]]:
    """Right-hand side as a finite real 2D array; 1D input becomes one column."""
    if isinstance(b, MatrixRepresentable):
        arr = check_array(as_array(b, "b"), "b")
    else:
        arr = check_array(b, "b")
        if arr.ndim == 1:
            arr = arr.reshape(-1, 1)
    check_2d(arr, "b")
    check_real(arr, "b")
    check_finite(arr, "b")
    return arr


class SquareRealMatrix:
    """
    Square real matrix with its LUP factorization computed at construction.

    Accepts a Matrix, any MatrixRepresentable, a 2D numpy array or nested
    rows. The input is copied; later changes to the caller's data are not
    seen. Conforms to MatrixRepresentable itself.

    Example:
        >>> sq = SquareRealMatrix([[1, 2, 4], [4, 5, 6], [7, 8, 12]])
        >>> round(sq.determinant(), 10)
        -12.0
        >>> x = sq.solve([1, 0, 0])

    Raises (constructor):
        NonSquareMatrixError: If rows != cols
        ValidationError: If values are non-numeric, complex or non-finite
    """

    def __init__(self, matrix: Any, *, backend: BackendChoice = 'cpu'):
        self._design = SquareDesign.from_array(matrix)
        be = get_backend(backend)
        self._backend_name = be.name
        self._undefined: FactorizationUndefinedError | None = None
        self._cholesky: Result[CholeskyFactor] | None = None

        try:
            self._factorization: Result[LUPFactors] | None = be.solve(self._design)
        except FactorizationUndefinedError as e:
            self._factorization = None
            self._undefined = e

    # === Shape and contents ===

    @property
    def n(self) -> int:
        """Row (and column) count."""
        return self._design.n

    @property
    def matrix(self) -> Matrix:
        """The input values as a Matrix."""
        return Matrix.from_array(self._design.a)

    @property
    def all_rows(self) -> tuple[tuple[float, ...], ...]:
        return self.matrix.all_rows

    @property
    def is_symmetric(self) -> bool:
        return self._design.is_symmetric

    # === Cached factorization ===

    @property
    def factorization(self) -> Result[LUPFactors] | None:
        """Full Result envelope of the LUP attempt, or None if undefined."""
        return self._factorization

    @property
    def is_singular(self) -> bool:
        """True when no LUP factorization exists under partial pivoting."""
        return self._factorization is None

    @property
    def backend_name(self) -> str:
        return self._backend_name

    def lup(self) -> LUPFactors:
        """
        The LUP factors (L, U, perm_order, n_swaps) with P A = L U.

        An explicit P is available as factors.permutation_matrix or
        Matrix.permutation(factors.perm_order).

        Raises:
            FactorizationUndefinedError: If the matrix has no LUP factorization
        """
        if self._factorization is None:
            raise FactorizationUndefinedError(
                f"LUP factorization undefined: {self._undefined}",
                column=self._undefined.column,
            )
        return self._factorization.params

    # === Queries ===

    def determinant(self) -> float:
        """
        Determinant from the cached factors.

        det(A) = sign(P) * prod(diag(L)) * prod(diag(U)); diag(L) is all
        ones. A matrix with no LUP factorization is singular, so its
        determinant is 0.
        """
        if self._factorization is None:
            return 0.0
        f = self._factorization.params
        det_l = float(np.prod(np.diagonal(f.l.array)))
        det_u = float(np.prod(np.diagonal(f.u.array)))
        return f.sign * det_l * det_u

    def trace(self) -> float:
        """Sum of the main diagonal."""
        return float(np.trace(self._design.a))

    def solve(self, b: Any) -> Matrix:
        """
        Find X with A X = B.

        Args:
            b: Right-hand sides (n x m) as a Matrix, MatrixRepresentable,
               2D array, nested rows, or a length-n vector (one column)

        Returns:
            Solution matrix (n x m)

        Raises:
            NonconformingMatricesError: If b does not have n rows
            SingularMatrixError: If the factorization is undefined
        """
        rhs = _rhs_array(b)
        check_equal_rows(self._design.a, rhs, 'linear_system')

        if self._factorization is None:
            raise SingularMatrixError(
                f"A: singular matrix cannot be solved against ({self._undefined})",
                matrix_name='A',
                column=self._undefined.column,
            )

        f = self._factorization.params
        pb = rhs[list(f.perm_order)]
        y = forward_solve(f.l.array, pb)
        x = backward_solve(f.u.array, y)
        return Matrix.from_array(x)

    def inverse(self) -> Matrix:
        """
        A^-1, computed as solve(identity(n)).

        Raises:
            SingularMatrixError: If the factorization is undefined
        """
        return self.solve(Matrix.identity(self.n))

    def cholesky_factorization(self, *, strict: bool = True) -> Result[CholeskyFactor]:
        """
        Cholesky factorization as a Result envelope, without issuing warnings.

        A positive-definite factor is cached and returned on later calls.
        With strict=False a matrix that is not positive definite yields a
        Result whose warnings describe the NaN/inf entries; it is not
        cached.

        Raises:
            AsymmetricMatrixError: If A != A'
            NotPositiveDefiniteError: If strict and A is not positive definite
        """
        if not self._design.is_symmetric:
            raise AsymmetricMatrixError(
                "A: Cholesky factorization requires a symmetric matrix",
                matrix_name='A',
            )

        if self._cholesky is not None:
            return self._cholesky

        result = factor_cholesky(self._design, strict=strict)
        if result.params.positive_definite:
            self._cholesky = result
        return result

    def cholesky(self, *, strict: bool = True) -> Matrix:
        """
        Lower triangular L with L L' = A, for symmetric positive-definite A.

        Computed on first successful request and cached. Independent of
        the LUP factors.

        Args:
            strict: Raise NotPositiveDefiniteError when A is not positive
                definite. With strict=False the factor is returned anyway
                with NaN/inf entries and a RuntimeWarning is issued.

        Raises:
            AsymmetricMatrixError: If A != A'
            NotPositiveDefiniteError: If strict and A is not positive definite
        """
        result = self.cholesky_factorization(strict=strict)
        for message in result.warnings:
            warnings.warn(message, RuntimeWarning, stacklevel=2)
        return result.params.l

    # === Display ===

    def summary(self) -> str:
        """Human-readable report of the cached factorization."""
        lines = []
        lines.append(f"SquareRealMatrix: {self.n} x {self.n}")
        lines.append(f"  backend: {self._backend_name}")
        if self._factorization is None:
            lines.append(f"  factorization: undefined (no pivot in column {self._undefined.column})")
        else:
            lines.append(
                f"  factorization: defined, {self._factorization.params.n_swaps} row swaps"
            )
        lines.append(f"  determinant: {self.determinant():.6g}")
        lines.append(f"  trace: {self.trace():.6g}")
        return "\n".join(lines)

    def __str__(self) -> str:
        return str(self.matrix)

    def __repr__(self) -> str:
        return (
            f"SquareRealMatrix(n={self.n}, "
            f"singular={self.is_singular}, "
            f"backend={self._backend_name!r})"
        )
