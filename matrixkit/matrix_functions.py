# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BUSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

import logging

from .errors import NotSquareError
from .utils import DETERMINANT_WARN_ORDER, cofactor_sign, zero_of

logger = logging.getLogger(__name__)


def det(A):
    """
    Calculate the determinant of n-by-n Matrix A by Laplace (cofactor)
    expansion along the first row:

        det(A) = sum_j (-1)^j * A[0, j] * det(minor(A, 0, j))

    This is O(n!) on purpose: no elimination, no pivoting, so the result is
    exact for int / Fraction / Decimal elements.

    Raises
    ------
    NotSquareError : if A is not square.
    """
    if not A.is_square:
        raise NotSquareError(
            f"The determinant is undefined for non-square matrices (got {A.size})."
        )
    n = A.size.rows
    if n > DETERMINANT_WARN_ORDER:
        logger.warning("det(): cofactor expansion on a %dx%d matrix – O(n!)", n, n)
    return _cofactor_expansion(A)


def _cofactor_expansion(A):
    # A is square here; every minor is built with the unchecked remove
    first_row = A._storage[0]
    if A.size.rows == 1:
        return first_row[0]

    result = zero_of(A.dtype)
    for j, element in enumerate(first_row):
        cofactor = cofactor_sign(j) * _cofactor_expansion(A._remove_unchecked([0], [j]))
        result += element * cofactor
    return result


def minor(A, row: int, column: int):
    """Submatrix of A without `row` and `column` (validated)."""
    return A.remove([row], [column])


def is_degenerate(A) -> bool:
    """True iff det(A) is the additive identity. Non-square raises NotSquareError."""
    return det(A) == zero_of(A.dtype)


def is_symmetric(A) -> bool:
    return A.is_square and A.transposed() == A


def is_antisymmetric(A) -> bool:
    return A.is_square and -A.transposed() == A
