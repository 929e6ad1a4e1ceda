"""
Matrix: immutable rectangular container.

Stores a dense 2-D grid of elements of any value type. Numeric grids are
kept as ordinary numpy arrays; anything else (strings, fractions, user
objects) is kept in an object-dtype array so that numpy's elementwise
machinery still applies. The backing array is always an owned copy and
is marked read-only, so a Matrix never changes after construction.

Construction:
    Matrix([[1, 2], [3, 4]])
    Matrix.from_values(rows=2, cols=2, values=[1, 2, 3, 4])
    Matrix.from_array(ndarray)
    Matrix.identity(3), Matrix.zeros(2, 3), Matrix.permutation([2, 0, 1])
"""

from __future__ import annotations

from typing import Any, Callable, Iterable, Iterator, Sequence

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pymatrix.core.exceptions import DimensionError
from pymatrix.core.validation import (
    check_2d,
    check_rectangular,
    check_permutation_order,
)
from pymatrix.matrix._format import describe


def _python_value(value: Any) -> Any:
    """Unwrap numpy scalars so callers see plain Python values."""
    if isinstance(value, np.generic):
        return value.item()
    return value


def _freeze(grid: NDArray[Any]) -> NDArray[Any]:
    """Normalize empty grids to 0 x 0 and mark the array read-only."""
    if grid.shape[0] == 0 or grid.shape[1] == 0:
        grid = np.empty((0, 0), dtype=grid.dtype)
    grid.setflags(write=False)
    return grid


def _grid_from_rows(rows: Iterable[Sequence[Any]]) -> NDArray[Any]:
    """Build an owned 2-D array from row sequences."""
    try:
        row_tuples = [tuple(row) for row in rows]
    except TypeError as e:
        raise DimensionError(f"rows: expected a sequence of row sequences: {e}") from e

    cols = check_rectangular(row_tuples, "rows")
    n = len(row_tuples)
    if n == 0 or cols == 0:
        return np.empty((0, 0), dtype=np.float64)

    try:
        grid = np.array(row_tuples)
    except (ValueError, TypeError):
        grid = None

    # Fall back to object storage when numpy would reshape nested elements
    # or coerce mixed values to strings.
    if grid is None or grid.shape != (n, cols) or grid.dtype.kind in ('U', 'S'):
        grid = np.empty((n, cols), dtype=object)
        for i, row in enumerate(row_tuples):
            for j, value in enumerate(row):
                grid[i, j] = value

    return grid


class Matrix:
    """
    Immutable dense matrix of arbitrary values.

    Every row has the same length. A grid with zero rows or zero columns
    is the empty 0 x 0 matrix. Two matrices are equal iff they have the
    same shape and pointwise-equal elements.

    Conforms to MatrixRepresentable through all_rows.
    """

    __slots__ = ('_grid',)
    __hash__ = None  # type: ignore[assignment]

    def __init__(self, rows: Iterable[Sequence[Any]] = ()):
        self._grid = _freeze(_grid_from_rows(rows))

    @classmethod
    def _wrap(cls, grid: NDArray[Any]) -> Matrix:
        """Adopt an array the caller already owns (no copy)."""
        matrix = cls.__new__(cls)
        matrix._grid = _freeze(grid)
        return matrix

    # === Constructors ===

    @classmethod
    def from_rows(cls, rows: Iterable[Sequence[Any]]) -> Matrix:
        """
        Build a Matrix from a balanced 2D sequence of values.

        Raises:
            DimensionError: If rows have inconsistent lengths
        """
        return cls(rows)

    @classmethod
    def from_values(cls, rows: int, cols: int, values: Sequence[Any]) -> Matrix:
        """
        Build a Matrix from row-major flat values.

        Args:
            rows: Number of rows
            cols: Number of columns
            values: rows * cols values, first row first

        Raises:
            DimensionError: If len(values) != rows * cols
        """
        values = list(values)
        if rows < 0 or cols < 0 or len(values) != rows * cols:
            raise DimensionError(
                f"values: expected {rows} x {cols} = {rows * cols} values, "
                f"got {len(values)}"
            )
        return cls(values[r * cols:(r + 1) * cols] for r in range(rows))

    @classmethod
    def from_array(cls, array: ArrayLike) -> Matrix:
        """
        Build a Matrix from a 2D numpy array (copied).

        Raises:
            DimensionError: If array is not 2D
        """
        grid = np.array(array, copy=True)
        check_2d(grid, "array")
        return cls._wrap(grid)

    @classmethod
    def from_representable(cls, source: Any) -> Matrix:
        """Build a Matrix from anything exposing all_rows."""
        if isinstance(source, Matrix):
            return source
        return cls(source.all_rows)

    @classmethod
    def constant(cls, rows: int, cols: int, value: Any) -> Matrix:
        """A rows x cols matrix with every element equal to value."""
        return cls([value] * cols for _ in range(rows))

    @classmethod
    def zeros(cls, rows: int, cols: int, dtype: Any = np.float64) -> Matrix:
        """A matrix of zeros."""
        return cls._wrap(np.zeros((rows, cols), dtype=dtype))

    @classmethod
    def ones(cls, rows: int, cols: int, dtype: Any = np.float64) -> Matrix:
        """A matrix of ones."""
        return cls._wrap(np.ones((rows, cols), dtype=dtype))

    @classmethod
    def identity(cls, size: int, dtype: Any = np.float64) -> Matrix:
        """Square matrix with ones on the main diagonal and zeros elsewhere."""
        return cls._wrap(np.eye(size, dtype=dtype))

    @classmethod
    def diagonal(cls, values: Sequence[Any], dtype: Any = np.float64) -> Matrix:
        """Square matrix with values on the main diagonal."""
        values = np.asarray(values, dtype=dtype)
        return cls._wrap(np.diag(values))

    @classmethod
    def permutation(cls, order: Sequence[int], dtype: Any = np.float64) -> Matrix:
        """
        Permutation matrix for an order array.

        Row i has its single 1 in column order[i], so that
        permutation(order) @ A reorders the rows of A as A[order]. This is
        how LUPFactors.perm_order is turned into an explicit P.

        Raises:
            ValidationError: If order is not a permutation of 0..n-1
        """
        idx = check_permutation_order(order, "order")
        n = idx.shape[0]
        grid = np.zeros((n, n), dtype=dtype)
        grid[np.arange(n), idx] = 1
        return cls._wrap(grid)

    @classmethod
    def empty(cls) -> Matrix:
        """The empty 0 x 0 matrix."""
        return cls._wrap(np.empty((0, 0), dtype=np.float64))

    # === Shape ===

    @property
    def shape(self) -> tuple[int, int]:
        return (self._grid.shape[0], self._grid.shape[1])

    @property
    def rows(self) -> int:
        """Number of rows."""
        return self._grid.shape[0]

    @property
    def cols(self) -> int:
        """Number of columns."""
        return self._grid.shape[1]

    @property
    def is_square(self) -> bool:
        return self.rows == self.cols

    @property
    def is_empty(self) -> bool:
        return self._grid.size == 0

    @property
    def dtype(self) -> np.dtype:
        return self._grid.dtype

    @property
    def array(self) -> NDArray[Any]:
        """Read-only view of the backing array."""
        return self._grid

    # === Value access ===

    def _check_index(self, row: int, col: int) -> None:
        if not (0 <= row < self.rows and 0 <= col < self.cols):
            raise IndexError(
                f"Accessed out of range element ({row}, {col}) of a "
                f"{self.rows} x {self.cols} matrix"
            )

    @staticmethod
    def _axis_key(index: Any, size: int, label: str) -> slice:
        """Slice for one axis of a submatrix key; an int selects one line."""
        if isinstance(index, slice):
            return index
        if not 0 <= index < size:
            raise IndexError(f"{label} {index} out of range for {size} {label.lower()}s")
        return slice(index, index + 1)

    def __getitem__(self, key: Any) -> Any:
        """
        m[i, j] -> element; m[rows, cols] with a slice on either axis ->
        submatrix; m[i] -> row i as a tuple; m[rows] with a slice ->
        submatrix of those rows.

        Integer components must lie in 0..size-1; negative indexes are
        out of range, as for element access.
        """
        if isinstance(key, tuple):
            if len(key) != 2:
                raise IndexError(f"Matrix index takes 2 components, got {len(key)}")
            row, col = key
            if isinstance(row, slice) or isinstance(col, slice):
                rows = self._axis_key(row, self.rows, "Row")
                cols = self._axis_key(col, self.cols, "Column")
                return Matrix._wrap(self._grid[rows, cols].copy())
            self._check_index(row, col)
            return _python_value(self._grid[row, col])

        if isinstance(key, slice):
            return Matrix._wrap(self._grid[key, :].copy())
        if not isinstance(key, (int, np.integer)):
            raise TypeError(
                f"Matrix indexes must be int, slice or (row, col), not {type(key).__name__}"
            )
        if not 0 <= key < self.rows:
            raise IndexError(f"Row {key} out of range for {self.rows} rows")
        return self.row(key)

    def __len__(self) -> int:
        return self.rows

    def __iter__(self) -> Iterator[tuple[Any, ...]]:
        for i in range(self.rows):
            yield self.row(i)

    def row(self, row: int) -> tuple[Any, ...]:
        """Row as a tuple; empty tuple if row is out of range."""
        if not 0 <= row < self.rows:
            return ()
        return tuple(_python_value(v) for v in self._grid[row])

    def col(self, col: int) -> tuple[Any, ...]:
        """Column as a tuple; empty tuple if col is out of range."""
        if not 0 <= col < self.cols:
            return ()
        return tuple(_python_value(v) for v in self._grid[:, col])

    @property
    def all_rows(self) -> tuple[tuple[Any, ...], ...]:
        """All rows, top to bottom."""
        return tuple(self.row(i) for i in range(self.rows))

    @property
    def all_cols(self) -> tuple[tuple[Any, ...], ...]:
        """All columns, left to right (the rows of the transpose)."""
        return tuple(self.col(j) for j in range(self.cols))

    @property
    def main_diagonal(self) -> tuple[Any, ...]:
        return tuple(_python_value(v) for v in np.diagonal(self._grid))

    @property
    def vectorized(self) -> tuple[Any, ...]:
        """Elements with rows laid end to end."""
        return tuple(_python_value(v) for v in self._grid.ravel())

    # === Derived matrices ===

    @property
    def transpose(self) -> Matrix:
        return Matrix._wrap(self._grid.T.copy())

    def _check_rows(self, indexes: Sequence[int]) -> list[int]:
        indexes = list(indexes)
        bad = [i for i in indexes if not 0 <= i < self.rows]
        if bad:
            raise IndexError(f"Row indexes {bad} out of range for {self.rows} rows")
        return indexes

    def _check_cols(self, indexes: Sequence[int]) -> list[int]:
        indexes = list(indexes)
        bad = [j for j in indexes if not 0 <= j < self.cols]
        if bad:
            raise IndexError(f"Column indexes {bad} out of range for {self.cols} columns")
        return indexes

    def select_rows(self, row_indexes: Sequence[int]) -> Matrix:
        """Submatrix of the given rows, in the given order."""
        idx = self._check_rows(row_indexes)
        return Matrix._wrap(self._grid[idx, :].copy())

    def select_cols(self, col_indexes: Sequence[int]) -> Matrix:
        """Submatrix of the given columns, in the given order."""
        idx = self._check_cols(col_indexes)
        return Matrix._wrap(self._grid[:, idx].copy())

    def submatrix(self, row_indexes: Sequence[int], col_indexes: Sequence[int]) -> Matrix:
        """Submatrix of selected rows and columns, in the given orders."""
        rows = self._check_rows(row_indexes)
        cols = self._check_cols(col_indexes)
        return Matrix._wrap(self._grid[np.ix_(rows, cols)].copy())

    def element_map(self, transform: Callable[[Any], Any]) -> Matrix:
        """Apply transform to every element."""
        return Matrix([transform(v) for v in row] for row in self.all_rows)

    # === Equality and symmetry ===

    @property
    def is_symmetric(self) -> bool:
        """Exact symmetry; False for non-square matrices."""
        if not self.is_square:
            return False
        return bool(np.all(self._grid == self._grid.T))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        if self.shape != other.shape:
            return False
        return bool(np.all(self._grid == other._grid))

    # === numpy interop and display ===

    def __array__(self, dtype: Any = None, copy: bool | None = None) -> NDArray[Any]:
        if dtype is not None:
            return self._grid.astype(dtype)
        if copy:
            return self._grid.copy()
        return self._grid

    def __str__(self) -> str:
        return describe(self.rows, self.cols, self.all_rows)

    def __repr__(self) -> str:
        return f"Matrix(rows={self.rows}, cols={self.cols}, dtype={self.dtype})"
