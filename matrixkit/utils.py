# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

import numbers
from typing import Any, NamedTuple

# Cofactor expansion is O(n!); above this order determinant() logs a warning.
DETERMINANT_WARN_ORDER: int = 8


class Size(NamedTuple):
    """Matrix dimensions as (rows, columns)."""

    rows: int
    columns: int

    def __str__(self) -> str:
        return f"{self.rows}x{self.columns}"


def zero_of(dtype) -> Any:
    """Additive identity of the element type."""
    return dtype(0)


def one_of(dtype) -> Any:
    """Multiplicative identity of the element type."""
    return dtype(1)


def _width(dtype) -> int:
    # int < Fraction < float < complex; types outside the tower (Decimal) rank last
    return sum(
        not issubclass(dtype, abc)
        for abc in (numbers.Integral, numbers.Rational, numbers.Real, numbers.Complex)
    )


def infer_dtype(storage) -> Any:
    """
    Element type of a grid: the widest type among its cells.

    [[1, 0.5]] is float, [[1, Fraction(1, 2)]] is Fraction.
    """
    types = {type(value) for row in storage for value in row}
    if len(types) == 1:
        return types.pop()
    # reverse name order so ties go to e.g. int rather than bool
    return max(sorted(types, key=lambda t: t.__name__, reverse=True), key=_width)


def cofactor_sign(j: int) -> int:
    """Return +1 or -1 for the j-th term of a first-row expansion."""
    return -1 if j & 1 else 1
