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
"""Text output of matrices, solve histories and solutions"""

from string import ascii_lowercase
from typing import List, Sequence
from exactsolve.fraction import Fraction
from exactsolve.names import FIRST_FREE_VARIABLE


def to_text(matrix) -> str:
    """The matrix in the input format of ``exactsolve.parse``"""
    return '\n'.join(str(r) for r in matrix.rows)


def _pad_cells(values: Sequence[Fraction], width: int) -> str:
    return ' '.join(format(v, f'>{width}') for v in values)


def format_matrix(matrix) -> str:
    """Renders the rows as ``(left | right)`` with all cells aligned"""
    width = max((len(str(v)) for r in matrix.rows for v in r.left + r.right), default=0)
    return '\n'.join(f"({_pad_cells(r.left, width)} | {_pad_cells(r.right, width)})" for r in matrix.rows)


def free_variable_names(count: int) -> List[str]:
    """Letters naming free variables, starting at ``t``"""
    start = ascii_lowercase.index(FIRST_FREE_VARIABLE)
    letters = ascii_lowercase[start:] + ascii_lowercase[:start]
    return [letters[i] if i < len(letters) else f'{FIRST_FREE_VARIABLE}{i}' for i in range(count)]


def _solution_lines(matrix, rhs: int) -> List[str]:
    n = matrix.dimension
    free = matrix.free_columns
    names = free_variable_names(len(free))
    cells = []
    for p, r in enumerate(matrix.row_sequence):
        row = matrix.rows[r]
        terms = [(False, str(row.right[rhs]))]
        for col, name in zip(free, names):
            # x_pivot + a*x_free = b  =>  x_pivot = b - a*x_free
            coeff = -row[col]
            if coeff.is_zero():
                terms.append((False, ''))
            elif abs(coeff).is_one():
                terms.append((coeff.is_negative(), name))
            else:
                terms.append((coeff.is_negative(), f'{abs(coeff)}{name}'))
        cells.append(terms)
    widths = [max(len(c[i][1]) for c in cells) for i in range(len(cells[0]))]
    digits = len(str(max(matrix.pivot_columns) + 1))
    lines = []
    for p, terms in enumerate(cells):
        text = f'{terms[0][1]:>{widths[0]}}'
        for (negative, term), width in zip(terms[1:], widths[1:]):
            if not term:
                text += ' ' * (width + 3)
            else:
                text += f" {'-' if negative else '+'} {term:>{width}}"
        lines.append(f'x_{matrix.col_sequence[p] + 1:0{digits}d} = {text.rstrip()}')
    return lines


def format_solution(matrix) -> str:
    """Renders a solved matrix as ``x_i = ...`` assignments

    One line per pivot column in row visiting order. Free columns appear as
    letters on the right side. With several right hand sides every side gets
    its own block. Matrices that are not Done render a failure notice.
    """
    if not matrix.is_done():
        return 'Failed to solve matrix.'
    num_rhs = len(matrix.rows[0].right)
    if num_rhs == 1:
        return '\n'.join(_solution_lines(matrix, 0))
    blocks = []
    for rhs in range(num_rhs):
        blocks.append(f'Right hand side {rhs + 1}:\n' + '\n'.join(_solution_lines(matrix, rhs)))
    return '\n\n'.join(blocks)


def format_history(solver) -> str:
    """Renders every snapshot of a solve followed by the solution"""
    parts = []
    for matrix in solver:
        parts.append(f'{matrix.state}:\n{format_matrix(matrix)}')
    result = format_solution(solver.final)
    if solver.error is not None:
        result += f'\n{solver.error}'
    parts.append(result)
    return '\n\n'.join(parts)
