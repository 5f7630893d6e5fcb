# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BUSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

"""
Dense matrix over a generic numeric element type.

The element type (``dtype``) only has to provide ``dtype(0)``, ``dtype(1)``,
``+``, ``-`` and ``*``: int, float, complex, Fraction, Decimal and NumPy
scalar types all work.
"""

import logging
import numbers
from typing import Iterable, List, Sequence, Tuple

import numpy as np

from . import matrix_functions
from .errors import IndexOutOfBoundsError, MalformedInputError, ShapeMismatchError
from .selection import complement, normalize_indices, require_nonempty, validate_indices
from .text import format_matrix, parse_rows
from .utils import Size, infer_dtype, one_of, zero_of

logger = logging.getLogger(__name__)


class Matrix:
    """
    Rectangular grid of values with value semantics.

    Example
    -------
    >>> A = Matrix([[1, 4, 2, 3], [8, 0, 0, 1], [-6, -10, 4, 7]])
    >>> A.size
    Size(rows=3, columns=4)
    >>> A.choose(rows=[1, 2], columns=[0, 3])
    Matrix([[8, 1], [-6, 7]])
    """

    # keep numpy scalars from broadcasting over us in `np.float64(2) * A`
    __array_ufunc__ = None
    # mutable, so unhashable
    __hash__ = None

    def __init__(self, rows: Iterable[Sequence], dtype=None):
        """
        Parameters
        ----------
        rows : iterable of sequences
            Row data; every row must have the same, non-zero length.
            The data is copied.
        dtype : callable | None
            Element type. Defaults to the widest numeric type among the
            cells (see `infer_dtype`).

        Raises
        ------
        MalformedInputError : rows that are not sequences, empty input,
            empty rows or rows of unequal length.
        """
        try:
            storage = [list(row) for row in rows]
        except TypeError as e:
            raise MalformedInputError(
                "Matrix: expected an iterable of rows, each an iterable of values"
            ) from e
        if not storage:
            raise MalformedInputError("Matrix: array of rows is empty")
        columns = len(storage[0])
        for i, row in enumerate(storage):
            if len(row) != columns:
                raise MalformedInputError(
                    f"Matrix: rows have different size (row 0 has {columns}, "
                    f"row {i} has {len(row)})"
                )
        if columns == 0:
            raise MalformedInputError("Matrix: rows must contain at least one element")

        self._storage: List[list] = storage
        self._size = Size(len(storage), columns)
        self._dtype = dtype if dtype is not None else infer_dtype(storage)
        self._is_transposed = False

    @classmethod
    def _from_storage(cls, storage: List[list], dtype=None) -> "Matrix":
        # caller guarantees a rectangular, non-empty, unshared storage;
        # dtype=None re-infers it from the cells (arithmetic results)
        A = cls.__new__(cls)
        A._storage = storage
        A._size = Size(len(storage), len(storage[0]))
        A._dtype = dtype if dtype is not None else infer_dtype(storage)
        A._is_transposed = False
        return A

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------
    @classmethod
    def zeros(cls, size: Tuple[int, int], dtype=int) -> "Matrix":
        """Matrix of the given (rows, columns) with every cell dtype(0)."""
        rows, columns = size
        if rows < 1 or columns < 1:
            raise MalformedInputError(
                f"zeros(): rows and columns must be >= 1, got {rows}x{columns}"
            )
        zero = zero_of(dtype)
        return cls._from_storage([[zero] * columns for _ in range(rows)], dtype)

    @classmethod
    def identity(cls, order: int, dtype=int) -> "Matrix":
        """Square matrix with dtype(1) on the diagonal, dtype(0) elsewhere."""
        if order < 1:
            raise MalformedInputError(f"identity(): order must be >= 1, got {order}")
        zero, one = zero_of(dtype), one_of(dtype)
        storage = [[one if i == j else zero for j in range(order)] for i in range(order)]
        return cls._from_storage(storage, dtype)

    @classmethod
    def from_string(cls, text: str, dtype=int) -> "Matrix":
        """Build from whitespace separated cells, one row per line."""
        return cls(parse_rows(text, dtype), dtype=dtype)

    @classmethod
    def from_numpy(cls, array: np.ndarray) -> "Matrix":
        array = np.asarray(array)
        if array.ndim != 2:
            raise MalformedInputError(
                f"from_numpy(): expected a 2-D array, got ndim={array.ndim}"
            )
        return cls(array.tolist())

    def to_numpy(self, dtype=None) -> np.ndarray:
        return np.array(self._storage, dtype=dtype)

    # ------------------------------------------------------------------
    # Storage & shape
    # ------------------------------------------------------------------
    @property
    def storage(self) -> List[list]:
        """Copy of the rows; mutating it never touches the matrix."""
        return [list(row) for row in self._storage]

    @property
    def size(self) -> Size:
        return self._size

    @property
    def dtype(self):
        return self._dtype

    @property
    def is_transposed(self) -> bool:
        """True after transpose() has been applied an odd number of times."""
        return self._is_transposed

    @property
    def is_square(self) -> bool:
        return self._size.rows == self._size.columns

    # ------------------------------------------------------------------
    # Element access
    # ------------------------------------------------------------------
    def _check_position(self, row: int, column: int, caller: str) -> None:
        if not 0 <= row < self._size.rows:
            raise IndexOutOfBoundsError(
                f"{caller}: Row index out of range (got {row}, size {self._size})"
            )
        if not 0 <= column < self._size.columns:
            raise IndexOutOfBoundsError(
                f"{caller}: Column index out of range (got {column}, size {self._size})"
            )

    def __getitem__(self, position: Tuple[int, int]):
        row, column = position
        self._check_position(row, column, "__getitem__")
        return self._storage[row][column]

    def __setitem__(self, position: Tuple[int, int], value) -> None:
        row, column = position
        self._check_position(row, column, "__setitem__")
        self._storage[row][column] = value

    # ------------------------------------------------------------------
    # Equality
    # ------------------------------------------------------------------
    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        if self._size != other._size:
            logger.debug(
                "Matrices have different size (%s vs %s); treating them as not equal",
                self._size,
                other._size,
            )
            return False
        return all(
            a == b
            for left_row, right_row in zip(self._storage, other._storage)
            for a, b in zip(left_row, right_row)
        )

    # ------------------------------------------------------------------
    # Arithmetic
    # ------------------------------------------------------------------
    def _require_same_size(self, other: "Matrix", operation: str) -> None:
        if self._size != other._size:
            raise ShapeMismatchError(
                f"{operation} requires matrices of the same size, "
                f"got {self._size} and {other._size}"
            )

    def __add__(self, other: "Matrix") -> "Matrix":
        if not isinstance(other, Matrix):
            return NotImplemented
        self._require_same_size(other, "Addition")
        storage = [
            [a + b for a, b in zip(left_row, right_row)]
            for left_row, right_row in zip(self._storage, other._storage)
        ]
        return Matrix._from_storage(storage)

    def __sub__(self, other: "Matrix") -> "Matrix":
        if not isinstance(other, Matrix):
            return NotImplemented
        self._require_same_size(other, "Subtraction")
        storage = [
            [a - b for a, b in zip(left_row, right_row)]
            for left_row, right_row in zip(self._storage, other._storage)
        ]
        return Matrix._from_storage(storage)

    def _matmul(self, other: "Matrix") -> "Matrix":
        """
        Plain triple loop: C[i, j] = sum_k A[i, k] * B[k, j].

        Raises
        ------
        ShapeMismatchError : if A.columns != B.rows.
        """
        m, n = self._size
        n_other, q = other._size
        if n != n_other:
            raise ShapeMismatchError(
                "Matrices aren't coupled: A(m x n) * B(n x q) = C(m x q) needs "
                f"A.columns == B.rows, got {self._size} and {other._size}"
            )
        zero = zero_of(self._dtype)
        B = other._storage
        storage = []
        for i in range(m):
            A_i = self._storage[i]
            line = []
            for j in range(q):
                element = zero
                for k in range(n):
                    element += A_i[k] * B[k][j]
                line.append(element)
            storage.append(line)
        return Matrix._from_storage(storage)

    def __matmul__(self, other: "Matrix") -> "Matrix":
        if not isinstance(other, Matrix):
            return NotImplemented
        return self._matmul(other)

    def __rmul__(self, scalar) -> "Matrix":
        # scalar * A; lists, strings etc. are not scalars
        if not isinstance(scalar, numbers.Number):
            return NotImplemented
        storage = [[value * scalar for value in row] for row in self._storage]
        return Matrix._from_storage(storage)

    def __mul__(self, other) -> "Matrix":
        if isinstance(other, Matrix):
            return self._matmul(other)
        # A * scalar is scalar * A; elements are assumed to commute
        return self.__rmul__(other)

    def __imul__(self, other) -> "Matrix":
        if isinstance(other, Matrix):
            return self._matmul(other)
        if not isinstance(other, numbers.Number):
            return NotImplemented
        storage = [[value * other for value in row] for row in self._storage]
        self._storage, self._dtype = storage, infer_dtype(storage)
        return self

    def __neg__(self) -> "Matrix":
        return -one_of(self._dtype) * self

    # ------------------------------------------------------------------
    # Transpose
    # ------------------------------------------------------------------
    def transposed(self) -> "Matrix":
        """New (columns, rows) matrix; self and its is_transposed flag are untouched."""
        storage = [list(column) for column in zip(*self._storage)]
        return Matrix._from_storage(storage, self._dtype)

    def transpose(self) -> None:
        """Transpose in place and flip is_transposed."""
        storage = [list(column) for column in zip(*self._storage)]
        # swap storage and size together
        self._storage, self._size = storage, Size(self._size.columns, self._size.rows)
        self._is_transposed = not self._is_transposed

    # ------------------------------------------------------------------
    # Submatrix selection / removal
    # ------------------------------------------------------------------
    def choose(self, rows: Iterable[int], columns: Iterable[int]) -> "Matrix":
        """
        Matrix from the intersection of the chosen rows and columns.

        Duplicate indices are ignored and order does not matter:
        ``choose([2, 1], [3, 0])`` equals ``choose([1, 2], [0, 3])``.

        Raises
        ------
        EmptySelectionError : if rows or columns is empty.
        IndexOutOfBoundsError : if any index is outside the matrix.
        """
        rows, columns = list(rows), list(columns)
        require_nonempty(rows, columns, "choose")
        rows, columns = normalize_indices(rows), normalize_indices(columns)
        validate_indices(rows, self._size.rows, "Row", "choose")
        validate_indices(columns, self._size.columns, "Column", "choose")
        return self._choose_unchecked(rows, columns)

    def remove(self, rows: Iterable[int], columns: Iterable[int]) -> "Matrix":
        """
        Matrix of what is left after crossing off the given rows and columns.

        Raises
        ------
        EmptySelectionError : if rows or columns is empty, or nothing is left.
        IndexOutOfBoundsError : if any index is outside the matrix.
        """
        rows, columns = list(rows), list(columns)
        require_nonempty(rows, columns, "remove")
        validate_indices(rows, self._size.rows, "Row", "remove")
        validate_indices(columns, self._size.columns, "Column", "remove")
        return self.choose(
            complement(rows, self._size.rows),
            complement(columns, self._size.columns),
        )

    def _choose_unchecked(self, rows: Iterable[int], columns: Iterable[int]) -> "Matrix":
        # no emptiness / range checks: callers guarantee valid indices
        rows, columns = normalize_indices(rows), normalize_indices(columns)
        storage = [[self._storage[i][j] for j in columns] for i in rows]
        return Matrix._from_storage(storage, self._dtype)

    def _remove_unchecked(self, rows: Iterable[int], columns: Iterable[int]) -> "Matrix":
        return self._choose_unchecked(
            complement(rows, self._size.rows),
            complement(columns, self._size.columns),
        )

    # ------------------------------------------------------------------
    # Determinant & predicates
    # ------------------------------------------------------------------
    def determinant(self):
        return matrix_functions.det(self)

    @property
    def is_degenerate(self) -> bool:
        return matrix_functions.is_degenerate(self)

    @property
    def is_symmetric(self) -> bool:
        return matrix_functions.is_symmetric(self)

    @property
    def is_antisymmetric(self) -> bool:
        return matrix_functions.is_antisymmetric(self)

    # ------------------------------------------------------------------
    # Text
    # ------------------------------------------------------------------
    def __str__(self) -> str:
        return format_matrix(self)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self._storage!r})"
