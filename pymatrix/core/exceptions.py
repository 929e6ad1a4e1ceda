"""
Exception hierarchy for pymatrix.

All exceptions inherit from PyMatrixError to allow catching any
library-specific error. Shape problems derive from ValidationError,
numerical problems from NumericalError.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
    - Never catch and re-raise with less information
"""

from typing import Literal


ConformanceRule = Literal[
    'addition',
    'multiplication',
    'horizontal_concatenation',
    'vertical_concatenation',
    'linear_system',
]


class PyMatrixError(Exception):
    """Base exception for all pymatrix errors."""
    pass


class ValidationError(PyMatrixError):
    """
    Input validation failed.

    Raised when user-provided inputs fail validation checks.
    """
    pass


class DimensionError(ValidationError):
    """
    Array dimensions are incorrect or inconsistent.

    Raised when a grid has ragged rows, when a flat value list does not
    match the requested shape, or when operand shapes don't fit together.
    """
    pass


class NonSquareMatrixError(DimensionError):
    """
    A square-only operation received a non-square matrix.

    Attributes:
        shape: (rows, cols) of the offending matrix
    """

    def __init__(
        self,
        message: str,
        shape: tuple[int, int] | None = None
    ):
        super().__init__(message)
        self.shape = shape


class NonconformingMatricesError(DimensionError):
    """
    Two operands have incompatible dimensions.

    Attributes:
        rule: Which conformance rule was violated ('addition',
              'multiplication', 'horizontal_concatenation',
              'vertical_concatenation', 'linear_system')
        lhs_shape: Shape of the left operand
        rhs_shape: Shape of the right operand
    """

    def __init__(
        self,
        message: str,
        rule: ConformanceRule | None = None,
        lhs_shape: tuple[int, int] | None = None,
        rhs_shape: tuple[int, int] | None = None
    ):
        super().__init__(message)
        self.rule = rule
        self.lhs_shape = lhs_shape
        self.rhs_shape = rhs_shape


class AsymmetricMatrixError(ValidationError):
    """
    A symmetric-only operation received a non-symmetric matrix.

    Attributes:
        matrix_name: Name/description of the problematic matrix
    """

    def __init__(self, message: str, matrix_name: str | None = None):
        super().__init__(message)
        self.matrix_name = matrix_name


class NumericalError(PyMatrixError):
    """
    Numerical computation failed.

    Base class for errors arising from numerical issues during computation.
    """
    pass


class FactorizationUndefinedError(NumericalError):
    """
    Partial-pivot elimination found a column with no nonzero pivot.

    SquareRealMatrix catches this during construction and caches the
    undefined state instead; it only escapes from an explicit lup() call.

    Attributes:
        column: Pivot column where every candidate was exactly zero
    """

    def __init__(self, message: str, column: int | None = None):
        super().__init__(message)
        self.column = column


class SingularMatrixError(NumericalError):
    """
    Matrix is singular.

    Raised when solve() or inverse() is requested for a matrix whose
    factorization is undefined, or when a triangular factor has an exact
    zero on its diagonal.

    Attributes:
        matrix_name: Name/description of the problematic matrix
        column: Column with no usable pivot, if known
    """

    def __init__(
        self,
        message: str,
        matrix_name: str | None = None,
        column: int | None = None
    ):
        super().__init__(message)
        self.matrix_name = matrix_name
        self.column = column


class NotPositiveDefiniteError(NumericalError):
    """
    Matrix is not positive definite.

    Raised by the Cholesky factorization when a diagonal radicand is not
    strictly positive.

    Attributes:
        matrix_name: Name/description of the problematic matrix
        row: Row at which the factorization broke down
        pivot: The non-positive radicand A[i,i] - sum(L[i,k]^2)
    """

    def __init__(
        self,
        message: str,
        matrix_name: str | None = None,
        row: int | None = None,
        pivot: float | None = None
    ):
        super().__init__(message)
        self.matrix_name = matrix_name
        self.row = row
        self.pivot = pivot
