"""
Derived operations over the MatrixRepresentable contract.

Any object exposing all_rows gets row and column counts, element access,
transpose, submatrix derivation and the symmetry check from these free
functions. Matrix instances and numpy arrays take a fast path that skips
the row-by-row conversion.
"""

from __future__ import annotations

from typing import Any, Sequence

import numpy as np
from numpy.typing import NDArray

from pymatrix.core.protocols import MatrixRepresentable
from pymatrix.core.validation import check_2d
from pymatrix.matrix.matrix import Matrix


def as_matrix(source: Any) -> Matrix:
    """
    Convert a Matrix, MatrixRepresentable, 2D ndarray or nested row
    sequence into a Matrix.

    Raises:
        DimensionError: If the source is not rectangular or not 2D
    """
    if isinstance(source, Matrix):
        return source
    if isinstance(source, np.ndarray):
        return Matrix.from_array(source)
    if isinstance(source, MatrixRepresentable):
        return Matrix.from_representable(source)
    return Matrix(source)


def as_array(source: Any, name: str = "matrix") -> NDArray[Any]:
    """
    2D numpy array for any accepted matrix source.

    Matrix sources return their read-only backing array without copying.

    Raises:
        DimensionError: If the source is not rectangular or not 2D
    """
    if isinstance(source, Matrix):
        return source.array
    if isinstance(source, np.ndarray):
        check_2d(source, name)
        return source
    return as_matrix(source).array


def shape(source: Any) -> tuple[int, int]:
    return as_matrix(source).shape


def n_rows(source: Any) -> int:
    """Number of rows."""
    return as_matrix(source).rows


def n_cols(source: Any) -> int:
    """Number of columns (0 for the empty matrix)."""
    return as_matrix(source).cols


def is_square(source: Any) -> bool:
    return as_matrix(source).is_square


def element(source: Any, row: int, col: int) -> Any:
    """
    Element at (row, col).

    Raises:
        IndexError: If the position is out of range
    """
    return as_matrix(source)[row, col]


def get_row(source: Any, row: int) -> tuple[Any, ...]:
    return as_matrix(source).row(row)


def get_col(source: Any, col: int) -> tuple[Any, ...]:
    return as_matrix(source).col(col)


def all_cols(source: Any) -> tuple[tuple[Any, ...], ...]:
    return as_matrix(source).all_cols


def main_diagonal(source: Any) -> tuple[Any, ...]:
    return as_matrix(source).main_diagonal


def vectorized(source: Any) -> tuple[Any, ...]:
    return as_matrix(source).vectorized


def transpose(source: Any) -> Matrix:
    return as_matrix(source).transpose


def select_rows(source: Any, row_indexes: Sequence[int]) -> Matrix:
    return as_matrix(source).select_rows(row_indexes)


def select_cols(source: Any, col_indexes: Sequence[int]) -> Matrix:
    return as_matrix(source).select_cols(col_indexes)


def submatrix(
    source: Any,
    row_indexes: Sequence[int],
    col_indexes: Sequence[int],
) -> Matrix:
    return as_matrix(source).submatrix(row_indexes, col_indexes)


def is_symmetric(source: MatrixRepresentable | Any) -> bool:
    """Exact symmetry check; False for non-square input."""
    return as_matrix(source).is_symmetric
