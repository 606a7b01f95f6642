#!/usr/bin/env python3
#
# Copyright 2022 Max Planck Insitute Magdeburg
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
#
#
#
"""Pivot order optimization

Before elimination starts, and after every nulling step, the visiting order of
columns and rows is recomputed from the zero pattern of the coefficients.
Columns that are already zero in many rows are visited first, so elimination
reaches zero rows early and intermediate numbers stay small. Rows are visited
in ascending order of the number of leading pivot columns they are zero in,
which lays the rows out as a staircase.
"""

import logging
from typing import Dict, FrozenSet, List, Sequence, Tuple
from exactsolve.row import Row

LOG = logging.getLogger(__name__)


def zero_pattern(rows: Sequence[Row]) -> List[FrozenSet[int]]:
    """Returns, for every coefficient column, the set of rows that are zero there"""
    num_cols = len(rows[0].left)
    return [frozenset(i for i, r in enumerate(rows) if r[c].is_zero()) for c in range(num_cols)]


def order_columns(rows: Sequence[Row]) -> Tuple[int, ...]:
    """Computes the column visiting order

    At every depth of the search the unchosen columns are scored by the number
    of rows that are zero in all previously chosen columns and in the
    candidate. Only candidates with the maximum score are followed; ties are
    explored recursively and the branch with the greatest cumulative score
    wins (the lower column index on equal totals). The cumulative score only
    depends on the set of chosen columns, so branches are memoized by that set.

    Args:
        rows (list of Row):
            Rows of the matrix.

    Returns:
        (tuple of int):
        A permutation of the coefficient column indices.
    """
    zeros = zero_pattern(rows)
    num_cols = len(zeros)
    memo: Dict[FrozenSet[int], Tuple[int, Tuple[int, ...]]] = {}

    def search(chosen: FrozenSet[int], zero_rows: FrozenSet[int]) -> Tuple[int, Tuple[int, ...]]:
        if chosen in memo:
            return memo[chosen]
        remaining = [c for c in range(num_cols) if c not in chosen]
        if not remaining:
            return 0, ()
        counts = {c: len(zero_rows & zeros[c]) for c in remaining}
        best = max(counts.values())
        if best == 0:
            # deeper counts can only be zero as well
            result = (0, tuple(remaining))
        else:
            result = None
            for c in remaining:
                if counts[c] != best:
                    continue
                score, order = search(chosen | {c}, zero_rows & zeros[c])
                if result is None or best + score > result[0]:
                    result = (best + score, (c,) + order)
        memo[chosen] = result
        return result

    return search(frozenset(), frozenset(range(len(rows))))[1]


def leading_zeros(row: Row, pivot_columns: Sequence[int]) -> int:
    """Number of consecutive pivot columns, from the first one, in which the row is zero"""
    count = 0
    for c in pivot_columns:
        if not row[c].is_zero():
            break
        count += 1
    return count


def order_rows(rows: Sequence[Row], col_sequence: Sequence[int]) -> Tuple[int, ...]:
    """Sorts rows ascending by their leading zeros in the pivot columns (stable)"""
    pivot_columns = col_sequence[:len(rows)]
    return tuple(sorted(range(len(rows)), key=lambda i: leading_zeros(rows[i], pivot_columns)))


def optimize_sequences(rows: Sequence[Row]) -> Tuple[Tuple[int, ...], Tuple[int, ...]]:
    """Computes row and column visiting order for the given rows

    Returns:
        (Tuple):
        (row_sequence, col_sequence)
    """
    col_sequence = order_columns(rows)
    row_sequence = order_rows(rows, col_sequence)
    LOG.debug(f"Pivot order: rows {list(row_sequence)}, columns {list(col_sequence)}")
    return row_sequence, col_sequence
