"""
Tests for the PermutedView working copy used during elimination.
"""

import numpy as np
import pytest

from pymatrix.linalg._permuted import PermutedView


@pytest.fixture
def base():
    return np.arange(9.0).reshape(3, 3)


class TestPermutedView:

    def test_owns_a_copy(self, base):
        view = PermutedView(base)
        view[0, 0] = 100.0
        assert base[0, 0] == 0.0

    def test_integer_input_promoted(self):
        view = PermutedView(np.eye(2, dtype=np.int64))
        view[0, 1] = 0.5
        assert view[0, 1] == 0.5

    def test_identity(self):
        np.testing.assert_array_equal(PermutedView.identity(3).materialize(), np.eye(3))

    def test_swap_rows_is_index_only(self, base):
        view = PermutedView(base)
        view.swap_rows(0, 2)
        assert view.row_order == (2, 1, 0)
        assert view[0, 0] == 6.0
        np.testing.assert_array_equal(view.materialize(), base[[2, 1, 0]])

    def test_swap_cols(self, base):
        view = PermutedView(base)
        view.swap_cols(0, 1)
        assert view[0, 0] == base[0, 1]
        np.testing.assert_array_equal(view.materialize(), base[:, [1, 0, 2]])

    def test_set_through_both_mappings(self, base):
        view = PermutedView(base)
        view.swap_rows(0, 1)
        view.swap_cols(0, 2)
        view[0, 0] = -1.0
        # logical (0, 0) is physical (1, 2)
        assert view.materialize()[0, 0] == -1.0
        view.swap_rows(0, 1)
        view.swap_cols(0, 2)
        assert view.materialize()[1, 2] == -1.0

    def test_column_from_start(self, base):
        view = PermutedView(base)
        view.swap_rows(0, 2)
        np.testing.assert_array_equal(view.column(1, start=1), [4.0, 1.0])

    def test_add_to_row(self, base):
        view = PermutedView(base)
        view.swap_rows(0, 1)
        view.add_to_row(1, 0, -2.0)
        expected = base[[1, 0, 2]].copy()
        expected[1] += -2.0 * expected[0]
        np.testing.assert_array_equal(view.materialize(), expected)

    def test_shape(self):
        assert PermutedView(np.zeros((0, 0))).shape == (0, 0)
        assert PermutedView(np.zeros((4, 4))).shape == (4, 4)
