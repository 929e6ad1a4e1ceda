"""
Forward and backward substitution for triangular systems.

Both routines solve T X = B for a triangular T with nonzero diagonal and
any number of right-hand-side columns. Each column is solved
independently; the loops run over rows and update all columns at once.
They are pure functions, so one factor can be reused against many
right-hand sides.
"""

from __future__ import annotations

from typing import Any

import numpy as np
from numpy.typing import NDArray

from pymatrix.core.exceptions import SingularMatrixError
from pymatrix.core.validation import check_2d, check_square, check_equal_rows


def _check_triangular_system(
    t: NDArray[np.floating[Any]],
    b: NDArray[np.floating[Any]],
    name: str,
) -> None:
    check_2d(t, name)
    check_2d(b, "b")
    check_square(t, name)
    check_equal_rows(t, b, 'linear_system')

    zero = np.flatnonzero(np.diagonal(t) == 0)
    if zero.size > 0:
        raise SingularMatrixError(
            f"{name}: triangular factor has an exact zero on the diagonal "
            f"at position {int(zero[0])}",
            matrix_name=name,
            column=int(zero[0]),
        )


def forward_solve(
    l: NDArray[np.floating[Any]],
    b: NDArray[np.floating[Any]],
) -> NDArray[np.floating[Any]]:
    """
    Solve L X = B where L is lower triangular with nonzero diagonal.

    x[i] = (b[i] - sum_{k<i} L[i,k] x[k]) / L[i,i], for i = 0, 1, ...

    Args:
        l: Lower triangular matrix (n x n)
        b: Right-hand sides (n x m)

    Returns:
        Solution X (n x m)

    Raises:
        NonSquareMatrixError: If l is not square
        NonconformingMatricesError: If l and b have different row counts
        SingularMatrixError: If l has a zero on its diagonal
    """
    _check_triangular_system(l, b, "L")
    n = l.shape[0]
    x = np.zeros(b.shape, dtype=np.result_type(l, b, np.float64))
    for i in range(n):
        x[i] = (b[i] - l[i, :i] @ x[:i]) / l[i, i]
    return x


def backward_solve(
    u: NDArray[np.floating[Any]],
    b: NDArray[np.floating[Any]],
) -> NDArray[np.floating[Any]]:
    """
    Solve U X = B where U is upper triangular with nonzero diagonal.

    x[i] = (b[i] - sum_{k>i} U[i,k] x[k]) / U[i,i], for i = n-1, n-2, ...

    Args:
        u: Upper triangular matrix (n x n)
        b: Right-hand sides (n x m)

    Returns:
        Solution X (n x m)

    Raises:
        NonSquareMatrixError: If u is not square
        NonconformingMatricesError: If u and b have different row counts
        SingularMatrixError: If u has a zero on its diagonal
    """
    _check_triangular_system(u, b, "U")
    n = u.shape[0]
    x = np.zeros(b.shape, dtype=np.result_type(u, b, np.float64))
    for i in range(n - 1, -1, -1):
        x[i] = (b[i] - u[i, i + 1:] @ x[i + 1:]) / u[i, i]
    return x
