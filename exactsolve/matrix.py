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
"""Augmented matrix and the elimination state machine

A Matrix is an immutable snapshot of a Gauss-Jordan elimination. Its
``calculate_next`` method performs exactly one step and returns the following
snapshot, so a solve is a chain of snapshots that can be inspected and
replayed. The phases of the elimination are

    Initial -> Null(k) ... -> NormalizeRow(k) / ReInsertRow(k) ... -> Done

Forward elimination (Null) multiplies rows instead of dividing them
(``row * pivot - pivot_row * row[column]``), division happens only when a row
is normalized. Rows are never moved: ``row_sequence`` and ``col_sequence``
map visiting positions to row and column indices and are recomputed by the
pivot optimizer after every nulling step.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Optional, Sequence, Tuple
from exactsolve.errors import ConfigurationError, SingularSystemError
from exactsolve.pivoting import optimize_sequences
from exactsolve.row import Row

LOG = logging.getLogger(__name__)


class Phase(Enum):
    """Phases of the elimination"""
    INITIAL = 'Initial'
    NULL = 'Null'
    NORMALIZE_ROW = 'NormalizeRow'
    REINSERT_ROW = 'ReInsertRow'
    DONE = 'Done'


@dataclass(frozen=True)
class MatrixState:
    """Elimination phase plus the visiting position it works on

    ``index`` is a position in ``row_sequence``/``col_sequence``, not a row or
    column number. It is None for the Initial and Done phases.
    """
    phase: Phase
    index: Optional[int] = None

    def __post_init__(self):
        positional = self.phase in (Phase.NULL, Phase.NORMALIZE_ROW, Phase.REINSERT_ROW)
        if positional and (self.index is None or self.index < 0):
            raise ValueError(f"State {self.phase.value} needs a non-negative position.")
        if not positional and self.index is not None:
            raise ValueError(f"State {self.phase.value} takes no position.")

    @classmethod
    def initial(cls) -> 'MatrixState':
        return cls(Phase.INITIAL)

    @classmethod
    def null(cls, index: int) -> 'MatrixState':
        return cls(Phase.NULL, index)

    @classmethod
    def normalize_row(cls, index: int) -> 'MatrixState':
        return cls(Phase.NORMALIZE_ROW, index)

    @classmethod
    def reinsert_row(cls, index: int) -> 'MatrixState':
        return cls(Phase.REINSERT_ROW, index)

    @classmethod
    def done(cls) -> 'MatrixState':
        return cls(Phase.DONE)

    def __str__(self) -> str:
        if self.phase == Phase.INITIAL:
            return 'Initial matrix'
        if self.phase == Phase.NULL:
            return f'Nulling column {self.index + 1}'
        if self.phase == Phase.NORMALIZE_ROW:
            return f'Normalizing row {self.index + 1}'
        if self.phase == Phase.REINSERT_ROW:
            return f'Using nulled rows to reinsert row {self.index + 1}'
        return 'Done'


def nulling_state(rows: Sequence[Row], row_sequence: Sequence[int], col_sequence: Sequence[int]) -> MatrixState:
    """State after a nulling step

    The next column to null is the first pivot column that is still non-zero
    in a row visited after its pivot row. If there is none, forward
    elimination is complete and the last row gets normalized.
    """
    n = len(rows)
    for j in range(n - 1):
        col = col_sequence[j]
        if any(not rows[r][col].is_zero() for r in row_sequence[j + 1:]):
            return MatrixState.null(j)
    return MatrixState.normalize_row(n - 1)


def normalizing_state(rows: Sequence[Row], row_sequence: Sequence[int], col_sequence: Sequence[int]) -> MatrixState:
    """State after a normalizing or reinserting step

    Scans the visiting positions from the last to the first. A row that still
    holds a value in a later pivot column is reinserted, a row whose pivot is
    not exactly one is normalized. Done if no row needs either.
    """
    n = len(rows)
    for p in reversed(range(n)):
        row = rows[row_sequence[p]]
        if any(not row[c].is_zero() for c in col_sequence[p + 1:n]):
            return MatrixState.reinsert_row(p)
        if not row[col_sequence[p]].is_one():
            return MatrixState.normalize_row(p)
    return MatrixState.done()


def _is_permutation(sequence: Sequence[int], size: int) -> bool:
    return sorted(sequence) == list(range(size))


class Matrix:
    """Immutable snapshot of an augmented matrix during elimination

    Use ``Matrix.from_rows`` (or ``exactsolve.parse``) to set up a system, the
    constructor takes a snapshot as is.

    Args:
        rows (iterable of Row):
            The equations. Rows keep their position for the whole solve.

        state (optional (MatrixState)): (Default: Initial)
            Elimination state of the snapshot.

        row_sequence (optional (list of int)): (Default: identity)
            Row visiting order.

        col_sequence (optional (list of int)): (Default: identity)
            Column visiting order. The first ``len(rows)`` entries are the
            pivot columns, any further entries are free columns.

        optimize (optional (bool)): (Default: True)
            Recompute the visiting orders after every nulling step.
    """

    def __init__(self,
                 rows: Iterable[Row],
                 state: Optional[MatrixState] = None,
                 row_sequence: Optional[Sequence[int]] = None,
                 col_sequence: Optional[Sequence[int]] = None,
                 optimize: bool = True):
        self._rows = tuple(rows)
        num_cols = len(self._rows[0].left) if self._rows else 0
        self._state = state if state is not None else MatrixState.initial()
        self._row_sequence = tuple(row_sequence) if row_sequence is not None else tuple(range(len(self._rows)))
        self._col_sequence = tuple(col_sequence) if col_sequence is not None else tuple(range(num_cols))
        self._optimize = optimize
        if not _is_permutation(self._row_sequence, len(self._rows)):
            raise ConfigurationError(f"Row sequence {list(self._row_sequence)} is no permutation of the rows.")
        if not _is_permutation(self._col_sequence, num_cols):
            raise ConfigurationError(f"Column sequence {list(self._col_sequence)} is no permutation of the columns.")

    @classmethod
    def from_rows(cls, rows: Iterable[Row], optimize: bool = True) -> 'Matrix':
        """Sets up a system for solving

        Checks that the coefficient side is at least square and that all rows
        have the same shape, then computes the visiting orders.

        Args:
            rows (iterable of Row):
                The equations.

            optimize (optional (bool)): (Default: True)
                Use the pivot optimizer. Without it rows and columns are
                visited in their given order.

        Returns:
            (Matrix):
            A matrix in the Initial state.
        """
        rows = tuple(rows)
        if not rows:
            raise ConfigurationError("A matrix needs at least one row.")
        n = len(rows)
        for i, r in enumerate(rows):
            if len(r.left) < n:
                raise ConfigurationError(f"Row {i + 1} needs at least {n} elements on the left side.")
            if not r.right:
                raise ConfigurationError(f"Row {i + 1} has no right hand side.")
        if len({len(r.left) for r in rows}) > 1 or len({len(r.right) for r in rows}) > 1:
            raise ConfigurationError("All rows must have the same number of elements on each side.")
        if optimize:
            row_sequence, col_sequence = optimize_sequences(rows)
        else:
            row_sequence, col_sequence = None, None
        return cls(rows, MatrixState.initial(), row_sequence, col_sequence, optimize)

    @property
    def rows(self) -> Tuple[Row, ...]:
        return self._rows

    @property
    def state(self) -> MatrixState:
        return self._state

    @property
    def row_sequence(self) -> Tuple[int, ...]:
        return self._row_sequence

    @property
    def col_sequence(self) -> Tuple[int, ...]:
        return self._col_sequence

    @property
    def optimize(self) -> bool:
        return self._optimize

    @property
    def dimension(self) -> int:
        """Number of rows, which is also the number of pivot columns"""
        return len(self._rows)

    @property
    def pivot_columns(self) -> Tuple[int, ...]:
        return self._col_sequence[:len(self._rows)]

    @property
    def free_columns(self) -> Tuple[int, ...]:
        return self._col_sequence[len(self._rows):]

    def ordered_rows(self) -> Tuple[Row, ...]:
        """Rows in visiting order"""
        return tuple(self._rows[i] for i in self._row_sequence)

    def is_done(self) -> bool:
        return self._state.phase == Phase.DONE

    def _next(self, rows: Tuple[Row, ...], state: MatrixState) -> 'Matrix':
        return Matrix(rows, state, self._row_sequence, self._col_sequence, self._optimize)

    def _null_column(self, k: int) -> 'Matrix':
        pivot_row = self._rows[self._row_sequence[k]]
        col = self._col_sequence[k]
        pivot = pivot_row[col]
        if pivot.is_zero():
            raise SingularSystemError(
                f"Pivot in row {self._row_sequence[k] + 1}, column {col + 1} is zero.", self._state)
        later = set(self._row_sequence[k + 1:])
        rows = tuple(r * pivot - pivot_row * r[col] if i in later else r for i, r in enumerate(self._rows))
        if self._optimize:
            row_sequence, col_sequence = optimize_sequences(rows)
        else:
            row_sequence, col_sequence = self._row_sequence, self._col_sequence
        state = nulling_state(rows, row_sequence, col_sequence)
        return Matrix(rows, state, row_sequence, col_sequence, self._optimize)

    def _normalize_row(self, k: int) -> 'Matrix':
        target = self._row_sequence[k]
        pivot = self._rows[target][self._col_sequence[k]]
        if pivot.is_zero():
            raise SingularSystemError(
                f"Row {target + 1} cannot be normalized, its pivot in column {self._col_sequence[k] + 1} is zero.",
                self._state)
        rows = tuple(r / pivot if i == target else r for i, r in enumerate(self._rows))
        for i, r in enumerate(rows):
            if r.is_zero():
                raise SingularSystemError(f"Row {i + 1} has no non-zero coefficient left.", self._state)
        return self._next(rows, normalizing_state(rows, self._row_sequence, self._col_sequence))

    def _reinsert_row(self, k: int) -> 'Matrix':
        # rows visited after k are already reinserted: a lone pivot in their own column
        target = self._row_sequence[k]
        row = self._rows[target]
        for i in range(k, self.dimension - 1):
            other = self._rows[self._row_sequence[i + 1]]
            col = self._col_sequence[i + 1]
            row = row * other[col] - other * row[col]
        rows = tuple(row if i == target else r for i, r in enumerate(self._rows))
        return self._next(rows, normalizing_state(rows, self._row_sequence, self._col_sequence))

    def calculate_next(self) -> Optional['Matrix']:
        """Performs one elimination step

        Returns:
            (Matrix or None):
            The next snapshot, None if this matrix is Done.

        Raises:
            SingularSystemError: the step met a zero pivot or a zero row.
            ArithmeticOverflowError: a number left the fixed integer width.
        """
        phase, k = self._state.phase, self._state.index
        if phase == Phase.DONE:
            return None
        if phase == Phase.INITIAL:
            new = self._next(self._rows, MatrixState.null(0) if self.dimension > 1 else MatrixState.normalize_row(0))
        elif phase == Phase.NULL:
            new = self._null_column(k)
        elif phase == Phase.NORMALIZE_ROW:
            new = self._normalize_row(k)
        else:
            new = self._reinsert_row(k)
        LOG.debug(f"{self._state} -> {new.state}")
        return new

    def __eq__(self, other) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self._rows == other._rows and self._state == other._state

    def __hash__(self) -> int:
        return hash((self._rows, self._state))

    def __str__(self) -> str:
        from exactsolve.report import format_matrix
        return format_matrix(self)

    def __repr__(self) -> str:
        return (f"Matrix({len(self._rows)} rows, state={self._state}, "
                f"row_sequence={list(self._row_sequence)}, col_sequence={list(self._col_sequence)})")
