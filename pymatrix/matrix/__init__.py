"""
Generic rectangular matrices.

Public API:
    Matrix              - immutable rectangular container of any value type
    as_matrix(x)        - Matrix from any MatrixRepresentable / array-like
    transpose(x), submatrix(x, rows, cols), is_symmetric(x), ...
    add, subtract, multiply, scale, divide
    horizontal_concat, vertical_concat
    is_close(a, b)      - tolerance-tier comparison
"""

from pymatrix.matrix.matrix import Matrix
from pymatrix.matrix.representable import (
    as_matrix,
    as_array,
    shape,
    n_rows,
    n_cols,
    is_square,
    element,
    get_row,
    get_col,
    all_cols,
    main_diagonal,
    vectorized,
    transpose,
    select_rows,
    select_cols,
    submatrix,
    is_symmetric,
)
from pymatrix.matrix.operations import (
    add,
    subtract,
    multiply,
    scale,
    divide,
    horizontal_concat,
    vertical_concat,
    is_close,
)

__all__ = [
    "Matrix",
    # Capability-contract functions
    "as_matrix",
    "as_array",
    "shape",
    "n_rows",
    "n_cols",
    "is_square",
    "element",
    "get_row",
    "get_col",
    "all_cols",
    "main_diagonal",
    "vectorized",
    "transpose",
    "select_rows",
    "select_cols",
    "submatrix",
    "is_symmetric",
    # Arithmetic and concatenation
    "add",
    "subtract",
    "multiply",
    "scale",
    "divide",
    "horizontal_concat",
    "vertical_concat",
    "is_close",
]
