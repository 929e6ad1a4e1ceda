"""
Tests for the Matrix container.

Validates:
    - Construction from rows, flat values, arrays and helpers
    - Empty-grid normalization and ragged-row rejection
    - Element, row, column and slice access with their range rules
    - Derived matrices (transpose, selections, element_map)
    - Equality, immutability and unhashability
    - Non-numeric element types
"""

from fractions import Fraction

import numpy as np
import pytest

from pymatrix.core.exceptions import DimensionError, ValidationError
from pymatrix.matrix import Matrix


@pytest.fixture
def m23():
    return Matrix([[1, 2, 3], [4, 5, 6]])


# ═══════════════════════════════════════════════════════════════════════
# Construction
# ═══════════════════════════════════════════════════════════════════════


class TestConstruction:

    def test_from_rows(self, m23):
        assert m23.shape == (2, 3)
        assert m23.rows == 2
        assert m23.cols == 3
        assert m23.all_rows == ((1, 2, 3), (4, 5, 6))

    def test_from_rows_classmethod_matches_init(self, m23):
        assert Matrix.from_rows([[1, 2, 3], [4, 5, 6]]) == m23

    def test_from_values_row_major(self, m23):
        assert Matrix.from_values(2, 3, [1, 2, 3, 4, 5, 6]) == m23

    def test_from_values_wrong_count(self):
        with pytest.raises(DimensionError, match="expected 2 x 3 = 6 values, got 5"):
            Matrix.from_values(2, 3, [1, 2, 3, 4, 5])

    def test_ragged_rows_rejected(self):
        with pytest.raises(DimensionError, match="inconsistent row lengths"):
            Matrix([[1, 2], [3]])

    def test_non_iterable_rows_rejected(self):
        with pytest.raises(DimensionError):
            Matrix([1, 2, 3])

    def test_from_array_copies(self):
        data = np.array([[1.0, 2.0], [3.0, 4.0]])
        m = Matrix.from_array(data)
        data[0, 0] = 99.0
        assert m[0, 0] == 1.0

    def test_from_array_rejects_1d(self):
        with pytest.raises(DimensionError, match="expected 2D"):
            Matrix.from_array(np.arange(3))

    def test_constant(self):
        m = Matrix.constant(2, 3, 7)
        assert m.shape == (2, 3)
        assert set(m.vectorized) == {7}

    def test_zeros_ones(self):
        assert Matrix.zeros(2, 2).vectorized == (0.0,) * 4
        assert Matrix.ones(1, 3).vectorized == (1.0,) * 3

    def test_identity(self):
        np.testing.assert_array_equal(Matrix.identity(3).array, np.eye(3))

    def test_diagonal(self):
        m = Matrix.diagonal([1, 2, 3])
        assert m.main_diagonal == (1.0, 2.0, 3.0)
        assert m[0, 1] == 0.0

    def test_permutation_reorders_rows(self):
        a = np.arange(9.0).reshape(3, 3)
        p = Matrix.permutation([2, 0, 1])
        np.testing.assert_array_equal(p.array @ a, a[[2, 0, 1]])

    def test_permutation_rejects_invalid_order(self):
        with pytest.raises(ValidationError):
            Matrix.permutation([0, 0, 1])


class TestEmpty:
    """Any grid with zero rows or zero columns is the 0 x 0 matrix."""

    @pytest.mark.parametrize("rows", [[], [[]], [[], []]])
    def test_normalized(self, rows):
        m = Matrix(rows)
        assert m.shape == (0, 0)
        assert m.is_empty

    def test_empty_helpers_agree(self):
        assert Matrix.empty() == Matrix()
        assert Matrix.zeros(0, 4) == Matrix.empty()
        assert Matrix.identity(0).is_empty

    def test_empty_accessors(self):
        m = Matrix.empty()
        assert len(m) == 0
        assert m.all_rows == ()
        assert m.all_cols == ()
        assert m.row(0) == ()


# ═══════════════════════════════════════════════════════════════════════
# Access
# ═══════════════════════════════════════════════════════════════════════


class TestAccess:

    def test_element(self, m23):
        assert m23[1, 2] == 6
        assert isinstance(m23[1, 2], int)

    @pytest.mark.parametrize("key", [(2, 0), (0, 3), (-1, 0)])
    def test_element_out_of_range(self, m23, key):
        with pytest.raises(IndexError, match="out of range"):
            m23[key]

    def test_row_by_int(self, m23):
        assert m23[1] == (4, 5, 6)

    def test_row_by_int_out_of_range(self, m23):
        with pytest.raises(IndexError):
            m23[2]

    def test_row_and_col_out_of_range_are_empty(self, m23):
        assert m23.row(5) == ()
        assert m23.col(-1) == ()

    def test_col(self, m23):
        assert m23.col(1) == (2, 5)

    def test_slices_give_submatrix(self, m23):
        assert m23[0:2, 1:3] == Matrix([[2, 3], [5, 6]])

    def test_int_with_slice_is_one_wide(self, m23):
        assert m23[:, 1] == Matrix([[2], [5]])
        assert m23[0, :] == Matrix([[1, 2, 3]])

    def test_negative_int_with_slice_out_of_range(self, m23):
        with pytest.raises(IndexError, match="Row -1 out of range"):
            m23[-1, :]

    def test_int_with_slice_out_of_range(self, m23):
        with pytest.raises(IndexError, match="Row 5 out of range for 2 rows"):
            m23[5, :]
        with pytest.raises(IndexError, match="Column 3 out of range for 3 columns"):
            m23[:, 3]

    def test_last_row_as_submatrix(self, m23):
        assert m23[1, :] == Matrix([[4, 5, 6]])

    def test_bare_slice_selects_rows(self, m23):
        assert m23[0:1] == Matrix([[1, 2, 3]])
        assert m23[1:] == Matrix([[4, 5, 6]])
        assert m23[:] == m23

    def test_non_integer_key(self, m23):
        with pytest.raises(TypeError, match="Matrix indexes must be int"):
            m23["0"]

    def test_len_and_iteration(self, m23):
        assert len(m23) == 2
        assert list(m23) == [(1, 2, 3), (4, 5, 6)]

    def test_all_cols(self, m23):
        assert m23.all_cols == ((1, 4), (2, 5), (3, 6))

    def test_main_diagonal_of_rectangle(self, m23):
        assert m23.main_diagonal == (1, 5)

    def test_vectorized(self, m23):
        assert m23.vectorized == (1, 2, 3, 4, 5, 6)


# ═══════════════════════════════════════════════════════════════════════
# Derived matrices
# ═══════════════════════════════════════════════════════════════════════


class TestDerived:

    def test_transpose(self, m23):
        t = m23.transpose
        assert t.shape == (3, 2)
        assert t.all_rows == m23.all_cols

    def test_select_rows_in_given_order(self, m23):
        assert m23.select_rows([1, 0]) == Matrix([[4, 5, 6], [1, 2, 3]])

    def test_select_cols(self, m23):
        assert m23.select_cols([2]) == Matrix([[3], [6]])

    def test_submatrix(self, m23):
        assert m23.submatrix([1], [0, 2]) == Matrix([[4, 6]])

    def test_select_out_of_range(self, m23):
        with pytest.raises(IndexError, match=r"\[2\]"):
            m23.select_rows([0, 2])
        with pytest.raises(IndexError):
            m23.submatrix([0], [3])

    def test_element_map(self, m23):
        assert m23.element_map(lambda v: v * 10) == Matrix([[10, 20, 30], [40, 50, 60]])


# ═══════════════════════════════════════════════════════════════════════
# Equality and immutability
# ═══════════════════════════════════════════════════════════════════════


class TestEquality:

    def test_equal_across_numeric_types(self):
        assert Matrix([[1, 2]]) == Matrix([[1.0, 2.0]])

    def test_shape_matters(self):
        assert Matrix([[1, 2]]) != Matrix([[1], [2]])

    def test_not_equal_to_other_types(self, m23):
        assert m23 != [[1, 2, 3], [4, 5, 6]]

    def test_unhashable(self, m23):
        with pytest.raises(TypeError):
            hash(m23)

    def test_is_symmetric(self):
        assert Matrix([[1, 2], [2, 1]]).is_symmetric
        assert not Matrix([[1, 2], [3, 1]]).is_symmetric
        assert not Matrix([[1, 2, 3]]).is_symmetric


class TestImmutability:

    def test_backing_array_read_only(self, m23):
        with pytest.raises(ValueError):
            m23.array[0, 0] = 100

    def test_numpy_interop(self, m23):
        arr = np.asarray(m23, dtype=np.float64)
        assert arr.dtype == np.float64
        np.testing.assert_array_equal(arr, [[1, 2, 3], [4, 5, 6]])


# ═══════════════════════════════════════════════════════════════════════
# Non-numeric elements
# ═══════════════════════════════════════════════════════════════════════


class TestGenericElements:

    def test_strings_kept_as_objects(self):
        m = Matrix([["a", "b"], ["c", "d"]])
        assert m.dtype == object
        assert m[1, 0] == "c"
        assert m.transpose.all_rows == (("a", "c"), ("b", "d"))

    def test_fractions(self):
        m = Matrix([[Fraction(1, 2), Fraction(1, 3)]])
        assert m[0, 1] == Fraction(1, 3)

    def test_mixed_types_stay_unconverted(self):
        m = Matrix([[1, "x"]])
        assert m[0, 0] == 1
        assert m[0, 1] == "x"
