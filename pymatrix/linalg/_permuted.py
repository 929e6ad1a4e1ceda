"""
Permuted working view for in-place elimination.

A PermutedView keeps a private copy of a square array plus two index
arrays, one for rows and one for columns. Logical element (i, j) lives at
physical position (row_index[i], col_index[j]). Swapping two logical rows
or columns only exchanges two index entries; no data moves.

Only the LUP backend uses this, and only while it is eliminating. Once
the factors are materialized the view is dropped.
"""

from __future__ import annotations

from typing import Any

import numpy as np
from numpy.typing import NDArray


class PermutedView:
    """Index-indirection layer over an owned backing array."""

    __slots__ = ('_data', '_row_index', '_col_index')

    def __init__(self, data: NDArray[np.floating[Any]]):
        self._data = np.array(data, dtype=np.result_type(data, np.float64), copy=True)
        self._row_index = np.arange(self._data.shape[0])
        self._col_index = np.arange(self._data.shape[1])

    @classmethod
    def identity(cls, n: int) -> PermutedView:
        return cls(np.eye(n))

    @property
    def shape(self) -> tuple[int, int]:
        return (self._row_index.shape[0], self._col_index.shape[0])

    @property
    def row_order(self) -> tuple[int, ...]:
        """Physical row behind each logical row."""
        return tuple(int(r) for r in self._row_index)

    def __getitem__(self, key: tuple[int, int]) -> float:
        i, j = key
        return self._data[self._row_index[i], self._col_index[j]]

    def __setitem__(self, key: tuple[int, int], value: float) -> None:
        i, j = key
        self._data[self._row_index[i], self._col_index[j]] = value

    def column(self, j: int, start: int = 0) -> NDArray[np.floating[Any]]:
        """Logical column j from logical row start downward (a copy)."""
        return self._data[self._row_index[start:], self._col_index[j]]

    def swap_rows(self, row0: int, row1: int) -> None:
        self._row_index[[row0, row1]] = self._row_index[[row1, row0]]

    def swap_cols(self, col0: int, col1: int) -> None:
        self._col_index[[col0, col1]] = self._col_index[[col1, col0]]

    def add_to_row(self, row0: int, row1: int, coef: float) -> None:
        """Replace row0 with row0 + coef * row1."""
        # A whole-row update touches every column, so the column mapping
        # does not matter and the physical rows can be combined directly.
        p0, p1 = self._row_index[row0], self._row_index[row1]
        self._data[p0] += coef * self._data[p1]

    def materialize(self) -> NDArray[np.floating[Any]]:
        """Logical contents as a fresh array."""
        return self._data[np.ix_(self._row_index, self._col_index)]
