"""
Core protocols for pymatrix.

These define structural interfaces that concrete types must satisfy.
We use Protocol (structural typing) rather than ABC (nominal typing) so
that any object able to produce its rows can be handed to the library
without inheriting from anything.

Design Principles:
    - Minimal contracts: prescribe only what's truly universal
    - Derived behaviour lives in free functions over the contract
    - Type-safe: use generics to preserve type information through pipelines
"""

from typing import Protocol, TypeVar, Any, Sequence, runtime_checkable

# Type variables for generic payloads
P = TypeVar('P')  # Parameter payload type
D = TypeVar('D')  # Design type


@runtime_checkable
class MatrixRepresentable(Protocol):
    """
    Minimal protocol for anything that can be viewed as a matrix.

    An implementation provides every row as a sequence of equal length.
    Row and column counts, element access, transpose, submatrices and the
    symmetry check all follow from this one property; see
    pymatrix.matrix.representable.

    Matrix, SquareRealMatrix and user-defined containers all conform.
    """

    @property
    def all_rows(self) -> Sequence[Sequence[Any]]:
        """
        All rows of the matrix, top to bottom.

        Every inner sequence must have the same length (the column count).
        An empty outer sequence denotes the empty matrix.
        """
        ...


@runtime_checkable
class Backend(Protocol[D, P]):
    """
    Protocol for factorization backends.

    Each backend knows how to take a validated design and produce a
    parameter payload wrapped in a Result. Backends are stateless, which
    makes them easy to test and swap.

    Type Parameters:
        D: The design type this backend accepts
        P: The parameter payload type this backend produces
    """

    @property
    def name(self) -> str:
        """
        Backend identifier.

        Convention: '{engine}_{algorithm}'
        Examples: 'cpu_lup', 'lapack_lup'
        """
        ...

    def solve(self, design: D) -> 'Result[P]':
        """
        Execute the factorization.

        Args:
            design: Validated input container

        Returns:
            Result envelope containing parameter payload and metadata

        Raises:
            FactorizationUndefinedError: If no nonzero pivot exists in some column
        """
        ...
