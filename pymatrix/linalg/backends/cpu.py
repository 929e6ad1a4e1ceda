"""
CPU reference backend for LUP factorization.

Gaussian elimination with partial pivoting over PermutedView working
copies of U and L. This is the reference implementation; the LAPACK
backend is checked against it.
"""

from typing import Any

import numpy as np

from pymatrix.core.exceptions import FactorizationUndefinedError
from pymatrix.core.result import Result
from pymatrix.core.compute.timing import Timer
from pymatrix.linalg.design import SquareDesign
from pymatrix.linalg.solution import LUPFactors
from pymatrix.linalg._permuted import PermutedView
from pymatrix.matrix.matrix import Matrix


class CPULUPBackend:
    """
    CPU backend using partial-pivot elimination.

    Implements the Backend protocol for SquareDesign -> LUPFactors.
    """

    @property
    def name(self) -> str:
        return 'cpu_lup'

    def solve(self, design: SquareDesign) -> Result[LUPFactors]:
        """
        Compute P A = L U.

        Algorithm, for each pivot column i < n-1:
            1. Find the first row at or below i with maximal |U[r,i]|
            2. Swap that row into position i in U and L, and swap the
               matching columns of L so that the multipliers already
               written stay below the diagonal
            3. Eliminate U[j,i] for j > i, recording -coef in L[j,i]

        Args:
            design: Validated square design

        Returns:
            Result containing LUPFactors

        Raises:
            FactorizationUndefinedError: If some column has no nonzero pivot
        """
        timer = Timer()
        timer.start()

        n = design.n

        with timer.section('setup'):
            u_view = PermutedView(design.a)
            l_view = PermutedView.identity(n)
            n_swaps = 0

        with timer.section('elimination'):
            for i in range(n - 1):
                candidates = np.abs(u_view.column(i, start=i))
                offset = int(np.argmax(candidates))
                max_index = i + offset
                max_value = candidates[offset]

                if max_value == 0:
                    raise FactorizationUndefinedError(
                        f"No nonzero pivot in column {i}: rows {i}..{n - 1} are all zero",
                        column=i,
                    )

                if max_index != i:
                    u_view.swap_rows(i, max_index)
                    l_view.swap_rows(i, max_index)
                    l_view.swap_cols(i, max_index)
                    n_swaps += 1

                pivot = u_view[i, i]
                for j in range(i + 1, n):
                    coef = -u_view[j, i] / pivot
                    u_view.add_to_row(j, i, coef)
                    u_view[j, i] = 0.0
                    l_view[j, i] = -coef

            # The last column has no pivot choice, but it still needs one.
            if n > 0 and u_view[n - 1, n - 1] == 0:
                raise FactorizationUndefinedError(
                    f"No nonzero pivot in column {n - 1}: final diagonal entry is zero",
                    column=n - 1,
                )

        with timer.section('materialize'):
            params = LUPFactors(
                l=Matrix.from_array(l_view.materialize()),
                u=Matrix.from_array(u_view.materialize()),
                perm_order=u_view.row_order,
                n_swaps=n_swaps,
            )

        timer.stop()

        info: dict[str, Any] = {
            'method': 'lup_partial_pivot',
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
