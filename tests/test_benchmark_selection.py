# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

import pandas as pd

from matrixkit.benchmark_selection import run


def test_benchmark_table():
    df = run(orders=[2, 3], repeats=1)
    assert isinstance(df, pd.DataFrame)
    assert list(df.columns) == ["kernel", "order", "sec", "sec/checked"]
    assert len(df) == 6
    assert set(df["kernel"]) == {"choose", "_choose_unchecked", "determinant"}
    assert (df["sec"] >= 0).all()
