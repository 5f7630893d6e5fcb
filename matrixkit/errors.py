# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

"""
Failure kinds raised by matrixkit.

Every class derives from ``ValueError`` so callers that only care about
"bad input" can keep catching that, while code that needs to react to a
specific kind can catch the subclass.
"""


class MatrixError(ValueError):
    """Base class for every matrixkit failure."""


class MalformedInputError(MatrixError):
    """Rows are missing, empty, or of unequal length."""


class ShapeMismatchError(MatrixError):
    """Operand sizes are incompatible for the requested operation."""


class EmptySelectionError(MatrixError):
    """A row or column index set passed to choose/remove is empty."""


class IndexOutOfBoundsError(MatrixError, IndexError):
    """A row or column index lies outside the matrix."""


class NotSquareError(MatrixError):
    """The operation is only defined for square matrices."""
