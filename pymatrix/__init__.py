"""
PyMatrix: dense matrices and LUP factorization for Python.

A generic rectangular matrix container plus a square real-matrix engine
that factors once (LUP with partial pivoting) and answers determinant,
solve and inverse queries from the cached factors.

Submodules:
    matrix: Generic rectangular Matrix and shape-checked operations
    linalg: SquareRealMatrix, LUP/Cholesky factorizations, solvers
"""

__version__ = "0.1.0"

from pymatrix import matrix
from pymatrix import linalg
from pymatrix.matrix import Matrix
from pymatrix.linalg import SquareRealMatrix

__all__ = [
    "__version__",
    "matrix",
    "linalg",
    "Matrix",
    "SquareRealMatrix",
]
