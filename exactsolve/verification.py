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
"""Cross-checking exact solutions

Exact solutions can be checked two ways: exactly, by substituting them into
the input equations with Fraction arithmetic, and approximately, by
comparing them to a floating point solve with scipy.
"""

from typing import List, Tuple
import numpy as np
from scipy import linalg
from exactsolve.errors import ConfigurationError
from exactsolve.fraction import Fraction


def to_arrays(matrix) -> Tuple[np.ndarray, np.ndarray]:
    """Returns coefficients and right hand sides as float arrays (left, right)"""
    left = np.array([[float(v) for v in r.left] for r in matrix.rows], dtype=float)
    right = np.array([[float(v) for v in r.right] for r in matrix.rows], dtype=float)
    return left, right


def exact_solution(matrix) -> List[Tuple[Fraction, ...]]:
    """Reads the solution off a solved matrix

    Args:
        matrix (Matrix):
            A matrix in the Done state.

    Returns:
        (list of tuples):
        For every coefficient column the values of its variable, one per right
        hand side. Free variables are set to zero.
    """
    if not matrix.is_done():
        raise ConfigurationError(f"Matrix is not solved (state: {matrix.state}).")
    num_rhs = len(matrix.rows[0].right)
    solution = [(Fraction.ZERO,) * num_rhs for _ in matrix.col_sequence]
    for p, r in enumerate(matrix.row_sequence):
        solution[matrix.col_sequence[p]] = matrix.rows[r].right
    return solution


def residual(initial, final) -> List[Tuple[Fraction, ...]]:
    """Exact residual A*x - b of the solution of ``final`` in the system ``initial``"""
    solution = exact_solution(final)
    result = []
    for row in initial.rows:
        values = []
        for rhs, b in enumerate(row.right):
            total = Fraction.ZERO
            for col, a in enumerate(row.left):
                total = total + a * solution[col][rhs]
            values.append(total - b)
        result.append(tuple(values))
    return result


def is_exact_solution(initial, final) -> bool:
    """True if the solution of ``final`` satisfies every equation of ``initial`` exactly"""
    return all(v.is_zero() for values in residual(initial, final) for v in values)


def float_solution(matrix) -> np.ndarray:
    """Solves the system in floating point with scipy.linalg.solve

    Returns:
        (numpy.ndarray):
        Array of shape (columns, right hand sides).
    """
    left, right = to_arrays(matrix)
    if left.shape[0] != left.shape[1]:
        raise ConfigurationError(f"Floating point check needs a square system, got {left.shape[0]}x{left.shape[1]}.")
    return linalg.solve(left, right)


def check_solution(initial, final, rtol: float = 1e-9, atol: float = 1e-12) -> bool:
    """Compares the exact solution of ``final`` with a floating point solve of ``initial``"""
    exact = np.array([[float(v) for v in values] for values in exact_solution(final)], dtype=float)
    return bool(np.allclose(exact, float_solution(initial), rtol=rtol, atol=atol))
