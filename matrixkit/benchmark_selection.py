#!/usr/bin/python3
# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

import platform
import time

import numpy as np
import pandas as pd

from matrixkit import Matrix

REPEATS = 5  # best of 5 runs leads to stable numbers
ORDERS = [3, 5, 7]


def wall(f, *args, **kwargs):
    t0 = time.perf_counter()
    f(*args, **kwargs)
    return time.perf_counter() - t0


def run(orders=ORDERS, repeats=REPEATS, seed=0) -> pd.DataFrame:
    """
    Time checked vs unchecked selection and the cofactor determinant.

    Returns
    -------
    DataFrame with columns kernel, order, sec, sec/checked
    """
    rng = np.random.default_rng(seed)
    records = []
    for n in orders:
        A = Matrix.from_numpy(rng.integers(-9, 10, size=(n, n)))
        rows = list(range(1, n))
        columns = list(range(n - 1))

        t_checked = min(wall(A.choose, rows, columns) for _ in range(repeats))
        t_unchecked = min(wall(A._choose_unchecked, rows, columns) for _ in range(repeats))
        records.append(("choose", n, t_checked, 1.0))
        ratio = t_unchecked / t_checked if t_checked else float("nan")
        records.append(("_choose_unchecked", n, t_unchecked, ratio))

        # determinant, cofactor expansion: O(n!)
        t_det = min(wall(A.determinant) for _ in range(repeats))
        records.append(("determinant", n, t_det, float("nan")))

    return pd.DataFrame(records, columns=["kernel", "order", "sec", "sec/checked"])


if __name__ == "__main__":
    print(f"python {platform.python_version()} on {platform.machine()}")
    df = run()
    print(df.to_string(index=False))
    df.to_csv("bench_results.csv", index=False)
