"""
Input validation utilities for pymatrix.

These validators follow the "fail fast, fail loud" principle. They raise
immediately with clear error messages rather than silently correcting
or making assumptions about user intent.

Design principles:
    - No silent type coercion (except integer -> float promotion)
    - Shape checks run before any computation
    - Clear, actionable error messages with actual values
    - Each function validates ONE thing
    - Parameter names included in all error messages
"""

from typing import Any, Sequence

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pymatrix.core.exceptions import (
    ValidationError,
    DimensionError,
    NonSquareMatrixError,
    NonconformingMatricesError,
    ConformanceRule,
)


def check_array(
    array: ArrayLike,
    name: str,
) -> NDArray[np.floating[Any]]:
    """
    Validate and convert input to a numeric numpy array.

    Accepts any array-like and converts to numpy array. Rejects inputs
    that result in object dtype (indicating mixed types or non-numeric data).

    Args:
        array: Input to validate
        name: Parameter name for error messages

    Returns:
        numpy.ndarray with numeric dtype (integers promoted to float64)

    Raises:
        ValidationError: If input cannot be converted to numeric array
    """
    try:
        result = np.asarray(array)
    except (ValueError, TypeError) as e:
        raise ValidationError(f"{name}: cannot convert to array: {e}") from e

    if result.dtype == object:
        raise ValidationError(
            f"{name}: converted to object dtype, indicating mixed types or non-numeric data"
        )

    if not np.issubdtype(result.dtype, np.number) and result.dtype != np.bool_:
        raise ValidationError(
            f"{name}: non-numeric dtype {result.dtype}, expected numeric data"
        )

    if not np.issubdtype(result.dtype, np.inexact):
        result = result.astype(np.float64)

    return result


def check_real(array: NDArray[Any], name: str) -> None:
    """
    Verify array holds real (not complex) values.

    Raises:
        ValidationError: If array has a complex dtype
    """
    if np.iscomplexobj(array):
        raise ValidationError(
            f"{name}: complex dtype {array.dtype}, expected real floating-point data"
        )


def check_finite(array: NDArray[np.floating[Any]], name: str) -> None:
    """
    Verify array contains no NaN or Inf values.

    Args:
        array: Array to check
        name: Parameter name for error messages

    Raises:
        ValidationError: If array contains non-finite values
    """
    if not np.all(np.isfinite(array)):
        n_nan = int(np.sum(np.isnan(array)))
        n_inf = int(np.sum(np.isinf(array)))
        raise ValidationError(
            f"{name}: contains non-finite values ({n_nan} NaN, {n_inf} Inf)"
        )


def check_2d(array: NDArray[Any], name: str) -> None:
    """
    Verify array is 2-dimensional.

    Raises:
        DimensionError: If array is not 2D
    """
    if array.ndim != 2:
        raise DimensionError(
            f"{name}: expected 2D array, got {array.ndim}D with shape {array.shape}"
        )


def check_rectangular(rows: Sequence[Sequence[Any]], name: str) -> int:
    """
    Verify every row of a nested sequence has the same length.

    Args:
        rows: Row sequences
        name: Parameter name for error messages

    Returns:
        The common row length (0 for no rows)

    Raises:
        DimensionError: If row lengths differ
    """
    if len(rows) == 0:
        return 0
    cols = len(rows[0])
    ragged = [i for i, row in enumerate(rows) if len(row) != cols]
    if ragged:
        raise DimensionError(
            f"{name}: inconsistent row lengths, row 0 has {cols} elements "
            f"but rows {ragged} differ"
        )
    return cols


def check_square(array: NDArray[Any], name: str) -> None:
    """
    Verify a 2D array has as many rows as columns.

    Raises:
        NonSquareMatrixError: If rows != cols
    """
    rows, cols = array.shape
    if rows != cols:
        raise NonSquareMatrixError(
            f"{name}: square matrix required, got {rows} x {cols}",
            shape=(rows, cols),
        )


def check_equal_rows(
    lhs: NDArray[Any],
    rhs: NDArray[Any],
    rule: ConformanceRule,
) -> None:
    """
    Verify two 2D arrays have the same number of rows.

    Raises:
        NonconformingMatricesError: If row counts differ
    """
    if lhs.shape[0] != rhs.shape[0]:
        raise NonconformingMatricesError(
            f"{rule}: row counts differ ({lhs.shape[0]} vs {rhs.shape[0]})",
            rule=rule,
            lhs_shape=lhs.shape,
            rhs_shape=rhs.shape,
        )


def check_equal_columns(
    lhs: NDArray[Any],
    rhs: NDArray[Any],
    rule: ConformanceRule,
) -> None:
    """
    Verify two 2D arrays have the same number of columns.

    Raises:
        NonconformingMatricesError: If column counts differ
    """
    if lhs.shape[1] != rhs.shape[1]:
        raise NonconformingMatricesError(
            f"{rule}: column counts differ ({lhs.shape[1]} vs {rhs.shape[1]})",
            rule=rule,
            lhs_shape=lhs.shape,
            rhs_shape=rhs.shape,
        )


def check_equal_shape(
    lhs: NDArray[Any],
    rhs: NDArray[Any],
    rule: ConformanceRule,
) -> None:
    """
    Verify two 2D arrays have identical shapes.

    Raises:
        NonconformingMatricesError: If shapes differ
    """
    if lhs.shape != rhs.shape:
        raise NonconformingMatricesError(
            f"{rule}: shapes differ ({lhs.shape[0]} x {lhs.shape[1]} vs "
            f"{rhs.shape[0]} x {rhs.shape[1]})",
            rule=rule,
            lhs_shape=lhs.shape,
            rhs_shape=rhs.shape,
        )


def check_multiplication_conformance(
    lhs: NDArray[Any],
    rhs: NDArray[Any],
) -> None:
    """
    Verify lhs columns match rhs rows.

    Raises:
        NonconformingMatricesError: If lhs.cols != rhs.rows
    """
    if lhs.shape[1] != rhs.shape[0]:
        raise NonconformingMatricesError(
            f"multiplication: left operand is {lhs.shape[0]} x {lhs.shape[1]} "
            f"but right operand is {rhs.shape[0]} x {rhs.shape[1]}",
            rule='multiplication',
            lhs_shape=lhs.shape,
            rhs_shape=rhs.shape,
        )


def check_permutation_order(order: Sequence[int], name: str) -> NDArray[np.intp]:
    """
    Verify a sequence is a permutation of 0..n-1.

    Args:
        order: Candidate order array
        name: Parameter name for error messages

    Returns:
        The order as an integer numpy array

    Raises:
        ValidationError: If order is not a bijection on 0..n-1
    """
    result = np.asarray(order)
    if result.size == 0:
        return np.zeros(0, dtype=np.intp)
    if result.ndim != 1 or not np.issubdtype(result.dtype, np.integer):
        raise ValidationError(
            f"{name}: expected a 1D sequence of integers, got dtype {result.dtype} "
            f"with shape {result.shape}"
        )
    n = result.shape[0]
    if not np.array_equal(np.sort(result), np.arange(n)):
        raise ValidationError(
            f"{name}: {result.tolist()} is not a permutation of 0..{n - 1}"
        )
    return result.astype(np.intp)
