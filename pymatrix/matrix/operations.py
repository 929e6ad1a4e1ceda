"""
Generic matrix arithmetic and concatenation.

Plain named functions instead of operator overloads. Operands may be any
Matrix, MatrixRepresentable, 2D ndarray or nested row sequence; results
are always Matrix. Element types only need the Python operators the
operation uses, so integer, fraction and object grids work as well as
floats.

Dimension checks run first and raise NonconformingMatricesError with the
violated rule attached.
"""

from __future__ import annotations

from typing import Any

import numpy as np

from pymatrix.core.compute.tolerances import ToleranceTier, CPU_FP64
from pymatrix.core.validation import (
    check_equal_shape,
    check_equal_rows,
    check_equal_columns,
    check_multiplication_conformance,
)
from pymatrix.matrix.matrix import Matrix
from pymatrix.matrix.representable import as_array, as_matrix


def add(lhs: Any, rhs: Any) -> Matrix:
    """
    Elementwise sum.

    Raises:
        NonconformingMatricesError: rule='addition' if shapes differ
    """
    a, b = as_array(lhs, "lhs"), as_array(rhs, "rhs")
    check_equal_shape(a, b, 'addition')
    return Matrix.from_array(a + b)


def subtract(lhs: Any, rhs: Any) -> Matrix:
    """
    Elementwise difference lhs - rhs.

    Raises:
        NonconformingMatricesError: rule='addition' if shapes differ
    """
    a, b = as_array(lhs, "lhs"), as_array(rhs, "rhs")
    check_equal_shape(a, b, 'addition')
    return Matrix.from_array(a - b)


def multiply(lhs: Any, rhs: Any) -> Matrix:
    """
    Matrix product lhs @ rhs.

    Raises:
        NonconformingMatricesError: rule='multiplication' if lhs.cols != rhs.rows
    """
    a, b = as_array(lhs, "lhs"), as_array(rhs, "rhs")
    check_multiplication_conformance(a, b)
    return Matrix.from_array(a @ b)


def scale(source: Any, factor: Any) -> Matrix:
    """Multiply every element by a scalar."""
    return Matrix.from_array(factor * as_array(source, "source"))


def divide(source: Any, divisor: Any) -> Matrix:
    """Divide every element by a scalar."""
    return Matrix.from_array(as_array(source, "source") / divisor)


def horizontal_concat(lhs: Any, rhs: Any) -> Matrix:
    """
    Place rhs to the right of lhs.

    An empty operand yields the other operand unchanged.

    Raises:
        NonconformingMatricesError: rule='horizontal_concatenation' if row
            counts differ
    """
    left, right = as_matrix(lhs), as_matrix(rhs)
    if left.is_empty:
        return right
    if right.is_empty:
        return left
    check_equal_rows(left.array, right.array, 'horizontal_concatenation')
    return Matrix.from_array(np.hstack([left.array, right.array]))


def vertical_concat(lhs: Any, rhs: Any) -> Matrix:
    """
    Place rhs below lhs.

    An empty operand yields the other operand unchanged.

    Raises:
        NonconformingMatricesError: rule='vertical_concatenation' if column
            counts differ
    """
    top, bottom = as_matrix(lhs), as_matrix(rhs)
    if top.is_empty:
        return bottom
    if bottom.is_empty:
        return top
    check_equal_columns(top.array, bottom.array, 'vertical_concatenation')
    return Matrix.from_array(np.vstack([top.array, bottom.array]))


def is_close(
    lhs: Any,
    rhs: Any,
    *,
    tolerance: ToleranceTier = CPU_FP64,
) -> bool:
    """
    Numerical closeness of two matrices under a tolerance tier.

    Matrices of different shape are never close.
    """
    a = np.asarray(as_array(lhs, "lhs"), dtype=np.float64)
    b = np.asarray(as_array(rhs, "rhs"), dtype=np.float64)
    if a.shape != b.shape:
        return False
    return bool(np.allclose(a, b, rtol=tolerance.rtol, atol=tolerance.atol))
