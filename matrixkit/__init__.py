# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BUSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

"""
matrixkit
=========

A small, exact matrix type over any numeric element type (int, Fraction,
Decimal, float, complex, NumPy scalars).

Public API
~~~~~~~~~~
- The `Matrix` type
    - construction: `Matrix(rows)`, `Matrix.zeros`, `Matrix.identity`,
      `Matrix.from_string`, `Matrix.from_numpy`
    - arithmetic: `+`, `-`, unary `-`, `*` / `@`, scalar `*`, `*=`
    - `transposed`, `transpose`, `choose`, `remove`, `determinant`
- Matrix functions
    - `det`, `minor`, `is_degenerate`, `is_symmetric`, `is_antisymmetric`
- Text helpers
    - `parse_rows`, `format_matrix`
- Errors
    - `MatrixError` and its subclasses

Example
-------
>>> import matrixkit as mk
>>> A = mk.Matrix([[2, -5, 4, 3], [3, -4, 7, 5], [4, -9, 8, 5], [-3, 2, -5, 3]])
>>> A.is_degenerate
False
>>> mk.Matrix.identity(3).determinant()
1
"""

from importlib.metadata import version as _pkg_version

from .errors import (
    EmptySelectionError,
    IndexOutOfBoundsError,
    MalformedInputError,
    MatrixError,
    NotSquareError,
    ShapeMismatchError,
)
from .matrix import Matrix
from .matrix_functions import (
    det,
    is_antisymmetric,
    is_degenerate,
    is_symmetric,
    minor,
)
from .text import format_matrix, parse_rows
from .utils import DETERMINANT_WARN_ORDER, Size

__all__ = [
    "Matrix",
    "Size",
    "det",
    "minor",
    "is_degenerate",
    "is_symmetric",
    "is_antisymmetric",
    "parse_rows",
    "format_matrix",
    "MatrixError",
    "MalformedInputError",
    "ShapeMismatchError",
    "EmptySelectionError",
    "IndexOutOfBoundsError",
    "NotSquareError",
    "DETERMINANT_WARN_ORDER",
]

# ---------------------------------------------------------------------
# Version string (helps “pip show matrixkit”, Sphinx, etc.)
# ---------------------------------------------------------------------
try:  # installed via pip / build backend
    __version__ = _pkg_version(__name__)
except Exception:  # running from a checkout
    __version__ = "0.0.0.dev0"

# ---------------------------------------------------------------------
# Lightweight default logging config so users see diagnostics
# only if they deliberately enable them.
# ---------------------------------------------------------------------
import logging as _logging

_logging.getLogger(__name__).addHandler(_logging.NullHandler())
