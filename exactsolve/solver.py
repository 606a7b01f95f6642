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
"""Solve driver keeping the history of all elimination steps (MatrixSolver)"""

import logging
from typing import Iterator, List
from exactsolve.errors import (ArithmeticOverflowError, ConfigurationError, SingularSystemError, StepLimitError)
from exactsolve.fraction import Fraction, IntegerWidth
from exactsolve.matrix import Matrix
from exactsolve.names import *

LOG = logging.getLogger(__name__)


class MatrixSolver(object):
    """History of a solve
    
    The solver owns an append-only list of Matrix snapshots. Index 0 is the
    input, every further entry is the result of one ``calculate_next`` call on
    its predecessor. Snapshots can be looked up by position, negative positions
    count from the end.

    After ``solve`` the outcome is available as ``status``:

        DONE: the last snapshot is in reduced row echelon form.

        SINGULAR: a step met a zero pivot or zero row, the system has no
        unique solution. The exception is kept in ``error``.

        OVERFLOW: a numerator or denominator left the integer width.

        STEP_LIMIT: the solve did not finish within ``max_steps`` steps.

    Args:
        initial (Matrix):
            The system to solve, usually fresh from ``Matrix.from_rows`` or
            ``exactsolve.parse``.
    """

    def __init__(self, initial: Matrix):
        self._matrices: List[Matrix] = [initial]
        self.status = DONE if initial.is_done() else PENDING
        self.error = None
        self.bits = None

    def solve(self, **kwargs) -> str:
        """Performs elimination steps until the system is solved or a step fails

        Args:
            int_bits (optional (int)): (Default: current Fraction.bits)
                Width of the unsigned integers holding numerators and
                denominators during the solve.

            max_steps (optional (int)): (Default: 4*n*n+8)
                Maximum number of steps of the whole history.

        Returns:
            (str):
            The outcome status (DONE, SINGULAR, OVERFLOW or STEP_LIMIT).
        """
        allowed_keys = {INT_BITS, MAX_STEPS}
        for key in kwargs:
            if key not in allowed_keys:
                raise ConfigurationError("Key " + key + " is not supported.")
        if self.status != PENDING:
            return self.status
        bits = kwargs.get(INT_BITS, Fraction.bits)
        n = self._matrices[0].dimension
        max_steps = kwargs.get(MAX_STEPS)
        if max_steps is None:
            max_steps = 4 * n * n + 8
        elif not isinstance(max_steps, int) or max_steps < 1:
            raise ConfigurationError(f"max_steps must be a positive integer, got {max_steps}.")

        self.bits = bits
        LOG.info(f"Solving system of {n} equation(s) using {bits} bit integers.")
        with IntegerWidth(bits):
            try:
                while True:
                    if len(self._matrices) - 1 >= max_steps and not self._matrices[-1].is_done():
                        raise StepLimitError(f"Solve did not finish within {max_steps} steps.")
                    new_matrix = self._matrices[-1].calculate_next()
                    if new_matrix is None:
                        break
                    self._matrices.append(new_matrix)
                self.status = DONE
            except SingularSystemError as e:
                self.status, self.error = SINGULAR, e
            except ArithmeticOverflowError as e:
                self.status, self.error = OVERFLOW, e
            except StepLimitError as e:
                self.status, self.error = STEP_LIMIT, e
        if self.status == DONE:
            LOG.info(f"  Solved in {len(self._matrices) - 1} steps.")
        else:
            LOG.warning(f"Solve stopped after {len(self._matrices) - 1} steps ({self.status}): {self.error}")
        return self.status

    def is_solved(self) -> bool:
        return self.status == DONE

    @property
    def final(self) -> Matrix:
        """The most recent snapshot"""
        return self._matrices[-1]

    @property
    def history(self) -> tuple:
        return tuple(self._matrices)

    def get(self, index: int) -> Matrix:
        return self._matrices[index]

    def __getitem__(self, index: int) -> Matrix:
        return self._matrices[index]

    def __len__(self) -> int:
        return len(self._matrices)

    def __iter__(self) -> Iterator[Matrix]:
        return iter(self._matrices)

    def __str__(self) -> str:
        from exactsolve.report import format_history
        return format_history(self)


def solve_with_history(matrix: Matrix, **kwargs) -> MatrixSolver:
    """Solves a system and returns the solver with all intermediate snapshots

    Failed solves are not raised, check ``status`` of the returned solver.
    Keyword arguments are passed on to ``MatrixSolver.solve``.
    """
    solver = MatrixSolver(matrix)
    solver.solve(**kwargs)
    return solver


def solve(matrix: Matrix, **kwargs) -> Matrix:
    """Solves a system and returns the final snapshot

    Raises:
        SingularSystemError, ArithmeticOverflowError, StepLimitError:
        The solve did not end in the Done state.
    """
    solver = solve_with_history(matrix, **kwargs)
    if solver.status != DONE:
        raise solver.error
    return solver.final
