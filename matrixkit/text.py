# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

"""
Text form of a matrix: one row per line, cells separated by whitespace.

    12 65  3
    29 40 22
"""

import logging
from typing import List

from .errors import MalformedInputError

logger = logging.getLogger(__name__)


def parse_rows(text: str, dtype=int) -> List[list]:
    """
    Split `text` into rows of `dtype` values. Blank lines are skipped.

    Shape is not checked here; Matrix(rows) rejects ragged input.

    Raises
    ------
    MalformedInputError : if a token cannot be converted with `dtype`.
    """
    rows = []
    for lineno, line in enumerate(text.splitlines(), start=1):
        tokens = line.split()
        if not tokens:
            continue
        try:
            rows.append([dtype(token) for token in tokens])
        except (ValueError, TypeError, ArithmeticError) as e:
            name = getattr(dtype, "__name__", repr(dtype))
            raise MalformedInputError(
                f"line {lineno}: cannot read {line.strip()!r} as {name}"
            ) from e
    logger.debug("parse_rows(): read %d rows", len(rows))
    return rows


def format_matrix(matrix) -> str:
    """Rows on separate lines, each column right-aligned to its widest cell."""
    cells = [[str(value) for value in row] for row in matrix.storage]
    widths = [max(len(row[j]) for row in cells) for j in range(len(cells[0]))]
    return "\n".join(
        "  ".join(value.rjust(width) for value, width in zip(row, widths))
        for row in cells
    )
