"""
Factorization payload types.

Contains the parameter payloads that backends place in Result envelopes.
"""

from __future__ import annotations

from dataclasses import dataclass

from pymatrix.matrix.matrix import Matrix


@dataclass(frozen=True)
class LUPFactors:
    """
    Parameter payload for an LUP factorization.

    For the factored matrix A, P A = L U where P is the permutation matrix
    implied by perm_order: row i of P A is row perm_order[i] of A.

    The permutation is kept as an order array rather than a dense 0/1
    matrix; permutation_matrix builds P on demand.

    Attributes:
        l: Unit lower triangular factor (n x n)
        u: Upper triangular factor (n x n)
        perm_order: Row order of P A
        n_swaps: Row transpositions performed during elimination
    """
    l: Matrix
    u: Matrix
    perm_order: tuple[int, ...]
    n_swaps: int

    @property
    def n(self) -> int:
        return self.u.rows

    @property
    def sign(self) -> float:
        """Determinant of P: +1 for an even number of swaps, -1 for odd."""
        return 1.0 if self.n_swaps % 2 == 0 else -1.0

    @property
    def permutation_matrix(self) -> Matrix:
        """Dense P such that P A = L U."""
        return Matrix.permutation(self.perm_order)


@dataclass(frozen=True)
class CholeskyFactor:
    """
    Parameter payload for a Cholesky factorization.

    Attributes:
        l: Lower triangular factor with l @ l' == A
        positive_definite: False when the permissive path left NaN entries
    """
    l: Matrix
    positive_definite: bool = True
