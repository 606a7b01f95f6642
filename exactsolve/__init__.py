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
"""exactsolve package for exact Gauss-Jordan elimination with fractions"""

import logging
from .names import *


class DisableLogger():
    """Environment in which logging is disabled"""

    def __enter__(self):
        logging.disable(logging.CRITICAL)

    def __exit__(self, exit_type, exit_value, exit_traceback):
        logging.disable(logging.NOTSET)


from .errors import *
from .fraction import Fraction, IntegerWidth, to_fraction
from .row import Row
from .matrix import Matrix, MatrixState, Phase
from .pivoting import optimize_sequences
from .solver import MatrixSolver, solve, solve_with_history
from .parser import parse, parse_file
from .report import format_history, format_matrix, format_solution, to_text
