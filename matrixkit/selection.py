# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

"""
Index bookkeeping shared by Matrix.choose / Matrix.remove and their
unchecked counterparts.
"""

import logging
from typing import Iterable, List

from .errors import EmptySelectionError, IndexOutOfBoundsError

logger = logging.getLogger(__name__)


def normalize_indices(indices: Iterable[int]) -> List[int]:
    """Drop duplicates and sort ascending; caller order never matters."""
    return sorted(set(indices))


def require_nonempty(rows, columns, caller: str) -> None:
    if not rows or not columns:
        logger.debug("%s: rejected empty selection rows=%s columns=%s", caller, rows, columns)
        raise EmptySelectionError(f"{caller}: row and column index sets must be non-empty")


def validate_indices(indices: Iterable[int], bound: int, axis: str, caller: str) -> None:
    """
    Raise IndexOutOfBoundsError unless every index satisfies 0 <= i < bound.

    Parameters
    ----------
    indices : iterable of int
    bound : int
        Number of rows (or columns) of the matrix.
    axis : str
        "Row" or "Column", used in the message.
    caller : str
        Name of the public operation, used in the message.
    """
    for i in indices:
        if not 0 <= i < bound:
            logger.debug("%s: %s index %s outside 0..%d", caller, axis.lower(), i, bound - 1)
            raise IndexOutOfBoundsError(
                f"{caller}: {axis} index out of range (got {i}, valid 0..{bound - 1})"
            )


def complement(indices: Iterable[int], bound: int) -> List[int]:
    """Sorted indices of range(bound) that are not in `indices`."""
    crossed_off = set(indices)
    return [i for i in range(bound) if i not in crossed_off]
