"""
Square real-matrix linear algebra.

Provides SquareRealMatrix, which computes its LUP factorization once at
construction and answers determinant, solve and inverse queries from the
cached factors, plus an independent Cholesky factorization.

Public API:
    SquareRealMatrix(a)   - Square matrix with cached LUP factors
    lup(a)                - LUP factors (L, U, perm_order, n_swaps)
    det(a)                - Determinant
    trace(a)              - Sum of the main diagonal
    solve(a, b)           - Solve A X = B
    inv(a)                - Inverse
    cholesky(a)           - Lower Cholesky factor
"""

from pymatrix.linalg.design import SquareDesign
from pymatrix.linalg.solution import LUPFactors, CholeskyFactor
from pymatrix.linalg.square import SquareRealMatrix
from pymatrix.linalg.backends import BackendChoice
from pymatrix.linalg.solvers import (
    lup,
    det,
    trace,
    solve,
    inv,
    cholesky,
)

__all__ = [
    "SquareRealMatrix",
    "lup",
    "det",
    "trace",
    "solve",
    "inv",
    "cholesky",
    "SquareDesign",
    "LUPFactors",
    "CholeskyFactor",
    "BackendChoice",
]
