"""
LAPACK backend for LUP factorization.

Delegates elimination to getrf through scipy.linalg.lu_factor and
converts its pivot vector into the order-array form used everywhere else.
getrf picks the first maximal |pivot| in each column, the same tie-break
as the CPU reference, so both backends produce the same permutation.
"""

from typing import Any
import warnings

import numpy as np
from scipy.linalg import lu_factor, LinAlgWarning

from pymatrix.core.exceptions import FactorizationUndefinedError
from pymatrix.core.result import Result
from pymatrix.core.compute.timing import Timer
from pymatrix.linalg.design import SquareDesign
from pymatrix.linalg.solution import LUPFactors
from pymatrix.matrix.matrix import Matrix


def _pivots_to_order(piv: np.ndarray) -> tuple[tuple[int, ...], int]:
    """
    Replay LAPACK row interchanges on 0..n-1.

    Returns:
        (perm_order, n_swaps)
    """
    order = list(range(piv.shape[0]))
    n_swaps = 0
    for i, p in enumerate(piv):
        p = int(p)
        if p != i:
            order[i], order[p] = order[p], order[i]
            n_swaps += 1
    return tuple(order), n_swaps


class LAPACKLUPBackend:
    """
    Backend using LAPACK getrf via SciPy.

    Implements the Backend protocol for SquareDesign -> LUPFactors.
    """

    @property
    def name(self) -> str:
        return 'lapack_lup'

    def solve(self, design: SquareDesign) -> Result[LUPFactors]:
        """
        Compute P A = L U with LAPACK.

        getrf does not stop at a zero pivot; it finishes and reports one.
        The first exactly-zero diagonal entry of U is turned into
        FactorizationUndefinedError for that column.

        Raises:
            FactorizationUndefinedError: If U has an exact zero on its diagonal
        """
        timer = Timer()
        timer.start()

        n = design.n

        if n == 0:
            lu = np.empty((0, 0))
            piv = np.empty(0, dtype=np.int32)
        else:
            with timer.section('getrf'):
                with warnings.catch_warnings():
                    # Singularity is reported through the zero-diagonal check.
                    warnings.simplefilter('ignore', LinAlgWarning)
                    lu, piv = lu_factor(design.a, check_finite=False)

        zero = np.flatnonzero(np.diagonal(lu) == 0)
        if zero.size > 0:
            column = int(zero[0])
            raise FactorizationUndefinedError(
                f"No nonzero pivot in column {column}: getrf reported an exact zero",
                column=column,
            )

        with timer.section('materialize'):
            perm_order, n_swaps = _pivots_to_order(piv)
            l = np.tril(lu, k=-1) + np.eye(n, dtype=lu.dtype)
            u = np.triu(lu)
            params = LUPFactors(
                l=Matrix.from_array(l),
                u=Matrix.from_array(u),
                perm_order=perm_order,
                n_swaps=n_swaps,
            )

        timer.stop()

        info: dict[str, Any] = {
            'method': 'lup_getrf',
            'n': n,
            'n_swaps': n_swaps,
        }

        return Result(
            params=params,
            info=info,
            timing=timer.result(),
            backend_name=self.name,
            warnings=(),
        )
