# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

from decimal import Decimal
from fractions import Fraction

import pytest

from matrixkit import MalformedInputError, Matrix, format_matrix, parse_rows


def test_parse_rows():
    text = """
    1 4 2 3
    8 0 0 1

    -6 -10 4 7
    """
    rows = parse_rows(text)
    assert rows == [[1, 4, 2, 3], [8, 0, 0, 1], [-6, -10, 4, 7]]
    assert Matrix(rows).size == (3, 4)


def test_parse_rows_dtype():
    assert parse_rows("0.5 1", dtype=float) == [[0.5, 1.0]]
    assert parse_rows("1/3 2", dtype=Fraction) == [[Fraction(1, 3), Fraction(2)]]


@pytest.mark.parametrize("text,dtype", [("1 x 3", int), ("1.5 2", int), ("abc", Decimal)])
def test_parse_rows_bad_token(text, dtype):
    with pytest.raises(MalformedInputError, match="line 1"):
        parse_rows(text, dtype=dtype)


def test_format_matrix_alignment():
    A = Matrix([[1, -10], [100, 2]])
    assert format_matrix(A) == "  1  -10\n100    2"


@pytest.mark.parametrize(
    "rows",
    [
        [[12, 65, 3], [29, 40, 22], [33, 76, 99]],
        [[-1, 0, 123456]],
        [[Fraction(1, 3)], [Fraction(-7, 2)]],
        [[1, 0.5], [-2, 3]],
    ],
)
def test_text_round_trip(rows):
    A = Matrix(rows)
    assert Matrix.from_string(format_matrix(A), dtype=A.dtype) == A
