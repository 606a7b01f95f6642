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
"""Plotting the growth of numerators and denominators during a solve"""

from typing import List, Tuple
import logging
import matplotlib.pyplot as plt
from matplotlib import use as set_matplotlib_backend


def max_bits(matrix) -> int:
    """Largest bit length of any numerator or denominator in the matrix"""
    return max((max(v.numerator.bit_length(), v.denominator.bit_length())
                for r in matrix.rows
                for v in r.left + r.right),
               default=0)


def plot_growth(solver, **kwargs) -> Tuple[List[int], List[int], object]:
    """Plots the largest bit length of the matrix entries for every step of a solve

    Cross-multiplication during forward elimination lets numbers grow with
    every step. The plot shows how close a solve came to the integer width.

    Example:
        plot_growth(solve_with_history(parse('(1;2|3)\\n(4;5|6)')), show=False)

    Args:
        solver (MatrixSolver):
            A (solved) history.

        plt_backend (optional (str)):
            The matplotlib backend that should be used for plotting, e.g. 'agg'
            for non-interactive environments.

        show (optional (bool)): (Default: True)
            Should matplotlib show the plot or should it stop after plot generation.

    Returns:
        (Tuple):
        (steps, bits, plot). Step numbers, bit lengths and the matplotlib line.
    """
    if 'plt_backend' in kwargs:
        set_matplotlib_backend(kwargs['plt_backend'])
    show = kwargs.get('show', True)

    steps = list(range(len(solver)))
    bits = [max_bits(m) for m in solver]
    plot1 = plt.plot(steps, bits, marker='o')[0]
    if solver.bits is not None:
        plot1.axes.axhline(solver.bits, linestyle='--', color='grey')
    plot1.axes.set_xlabel('step')
    plot1.axes.set_ylabel('bits of largest numerator/denominator')
    if show:
        try:
            plt.show()
        except UserWarning as e:
            if 'FigureCanvasAgg is non-interactive' in str(e):
                logging.warning('warning: Interactive plot not supported in current execution environment.')
            else:
                raise
    return steps, bits, plot1
