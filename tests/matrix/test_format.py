"""
Tests for Matrix text rendering.
"""

import numpy as np

from pymatrix.matrix import Matrix


class TestDescribe:

    def test_empty(self):
        assert str(Matrix.empty()) == "Empty Matrix"

    def test_small_matrix(self):
        m = Matrix([[1.0, 2.0], [3.0, 4.0]])
        assert str(m) == (
            "2 x 2 Matrix:\n"
            "[  1.0    2.0    ]\n"
            "[  3.0    4.0    ]"
        )

    def test_long_cells_truncated(self):
        m = Matrix([[123456789]])
        assert str(m).splitlines()[1] == "[  123456 ]"

    def test_large_matrix_truncated(self):
        m = Matrix.from_array(np.zeros((7, 8)))
        lines = str(m).splitlines()
        assert lines[0] == "7 x 8 Matrix:"
        # header + 5 rows + trailing row marker
        assert len(lines) == 7
        assert lines[-1] == "..."
        assert all(line.endswith(" ...") for line in lines[1:6])
        assert lines[1].count("0.0") == 5

    def test_repr(self):
        assert repr(Matrix([[1, 2]])) == "Matrix(rows=1, cols=2, dtype=int64)"
