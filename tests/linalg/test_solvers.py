"""
Tests for the functional API: lup, det, trace, solve, inv, cholesky.
"""

import numpy as np
import pytest

from pymatrix.core.exceptions import (
    FactorizationUndefinedError,
    SingularMatrixError,
    ValidationError,
)
from pymatrix.linalg import (
    LUPFactors,
    SquareRealMatrix,
    cholesky,
    det,
    inv,
    lup,
    solve,
    trace,
)
from pymatrix.matrix import Matrix


class TestRawInput:

    def test_det(self, small_matrix):
        assert det(small_matrix) == pytest.approx(-12.0)

    def test_det_nested_lists(self):
        assert det([[2, 0], [0, 3]]) == pytest.approx(6.0)

    def test_trace(self, small_matrix):
        assert trace(small_matrix) == 18.0

    def test_lup(self, small_matrix):
        factors = lup(small_matrix)
        assert isinstance(factors, LUPFactors)
        assert factors.perm_order == (2, 0, 1)

    def test_lup_undefined(self, zero_row_matrix):
        with pytest.raises(FactorizationUndefinedError):
            lup(zero_row_matrix)

    def test_solve(self, random_square, rng):
        b = rng.standard_normal(8)
        x = solve(random_square, b)
        assert isinstance(x, Matrix)
        np.testing.assert_allclose(random_square @ x.array[:, 0], b, rtol=1e-10, atol=1e-10)

    def test_inv(self, four_by_four):
        np.testing.assert_allclose(inv(four_by_four).array, np.linalg.inv(four_by_four),
                                   rtol=1e-9, atol=1e-12)

    def test_inv_singular(self, zero_row_matrix):
        with pytest.raises(SingularMatrixError):
            inv(zero_row_matrix)

    def test_cholesky(self, spd_matrix):
        l = cholesky(spd_matrix).array
        np.testing.assert_allclose(l @ l.T, spd_matrix, rtol=1e-10, atol=1e-10)

    def test_cholesky_permissive_warning_points_at_caller(self):
        with pytest.warns(RuntimeWarning, match="not positive definite") as record:
            l = cholesky([[1.0, 2.0], [2.0, 1.0]], strict=False)
        assert record[0].filename == __file__
        assert np.isnan(l[1, 1])


class TestBackendSelection:

    @pytest.mark.parametrize("backend", ['cpu', 'lapack'])
    def test_det_backends_agree(self, backend, four_by_four):
        assert det(four_by_four, backend=backend) == pytest.approx(-8629346.0, rel=1e-9)

    def test_unknown_backend(self, small_matrix):
        with pytest.raises(ValidationError):
            det(small_matrix, backend='cuda')


class TestExistingInstance:
    """A SquareRealMatrix is used as-is, reusing its cached factors."""

    def test_factorization_reused(self, small_matrix):
        sq = SquareRealMatrix(small_matrix, backend='lapack')
        assert lup(sq) is sq.lup()
        assert det(sq) == sq.determinant()

    def test_solve_with_instance(self, small_matrix):
        sq = SquareRealMatrix(small_matrix)
        assert solve(sq, [1.0, 0.0, 0.0]) == sq.solve([1.0, 0.0, 0.0])
