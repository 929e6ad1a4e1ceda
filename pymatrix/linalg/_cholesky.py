"""
Cholesky factorization of a symmetric matrix.

Independent of the LUP path. Builds L row by row, and within a row column
by column up to the diagonal:

    L[i,j] = (A[i,j] - sum_{k<j} L[i,k] L[j,k]) / L[j,j]     (j < i)
    L[i,i] = sqrt(A[i,i] - sum_{k<i} L[i,k]^2)
"""

from __future__ import annotations

from typing import Any

import numpy as np
from numpy.typing import NDArray

from pymatrix.core.exceptions import NotPositiveDefiniteError
from pymatrix.core.result import Result
from pymatrix.core.compute.timing import Timer
from pymatrix.linalg.design import SquareDesign
from pymatrix.linalg.solution import CholeskyFactor
from pymatrix.matrix.matrix import Matrix

NOT_POSITIVE_DEFINITE = (
    "A is not positive definite; the Cholesky factor contains NaN or inf entries."
)


def cholesky_lower(
    a: NDArray[np.floating[Any]],
    *,
    strict: bool = True,
) -> tuple[NDArray[np.floating[Any]], bool]:
    """
    Lower triangular L with L L' = A.

    The caller is responsible for checking symmetry.

    Args:
        a: Symmetric matrix (n x n)
        strict: Raise on a non-positive diagonal radicand. When False the
            square root of the radicand is taken anyway and the factor
            carries NaN/inf from that row on.

    Returns:
        (L, positive_definite) where positive_definite is False if any
        radicand was <= 0 (only possible with strict=False)

    Raises:
        NotPositiveDefiniteError: If strict and a radicand is <= 0
    """
    n = a.shape[0]
    l = np.zeros((n, n), dtype=np.result_type(a, np.float64))
    positive_definite = True

    with np.errstate(invalid='ignore', divide='ignore'):
        for i in range(n):
            for j in range(i + 1):
                s = l[i, :j] @ l[j, :j]
                if i == j:
                    radicand = a[i, i] - s
                    if not radicand > 0:
                        if strict:
                            raise NotPositiveDefiniteError(
                                f"A: not positive definite, diagonal radicand "
                                f"{float(radicand):.6g} at row {i}",
                                matrix_name='A',
                                row=i,
                                pivot=float(radicand),
                            )
                        positive_definite = False
                    l[i, i] = np.sqrt(radicand)
                else:
                    l[i, j] = (a[i, j] - s) / l[j, j]

    return l, positive_definite


def factor_cholesky(design: SquareDesign, *, strict: bool = True) -> Result[CholeskyFactor]:
    """
    Cholesky factorization of a validated design.

    Symmetry is the caller's concern, as for cholesky_lower. A factor
    computed with strict=False for a matrix that is not positive definite
    is returned with NOT_POSITIVE_DEFINITE in Result.warnings.

    Raises:
        NotPositiveDefiniteError: If strict and a radicand is <= 0
    """
    timer = Timer()
    timer.start()

    with timer.section('cholesky'):
        l, positive_definite = cholesky_lower(design.a, strict=strict)

    timer.stop()

    return Result(
        params=CholeskyFactor(l=Matrix.from_array(l), positive_definite=positive_definite),
        info={'method': 'cholesky_row_by_row', 'n': design.n, 'strict': strict},
        timing=timer.result(),
        backend_name='cpu_cholesky',
        warnings=() if positive_definite else (NOT_POSITIVE_DEFINITE,),
    )
