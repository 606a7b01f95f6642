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
"""Command line interface: exactsolve [FILE]"""

import argparse
import logging
import sys
from exactsolve import DisableLogger
from exactsolve.errors import ConfigurationError, ParseError
from exactsolve.fraction import IntegerWidth
from exactsolve.names import DEFAULT_INT_BITS
from exactsolve.parser import parse
from exactsolve.report import format_history
from exactsolve.solver import solve_with_history
from exactsolve.verification import check_solution


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(prog="exactsolve",
                                     description="Solve linear equation systems exactly by Gauss-Jordan elimination")
    parser.add_argument("file", nargs="?", help="Matrix file with one '(a;b|c)' row per line, stdin if omitted")
    parser.add_argument("--bits", type=int, default=DEFAULT_INT_BITS, help="Integer width of numerators and denominators")
    parser.add_argument("--max-steps", type=int, default=None, help="Abort the solve after this many steps")
    parser.add_argument("--no-optimize", action="store_true", help="Visit rows and columns in their given order")
    parser.add_argument("--check", action="store_true", help="Compare the result with a floating point solve")
    parser.add_argument("-q", "--quiet", action="store_true", help="Disable logging")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log every elimination step")
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO, format="%(message)s")

    try:
        if args.file:
            with open(args.file, 'r') as fs:
                text = fs.read()
        else:
            text = sys.stdin.read()
        with IntegerWidth(args.bits):
            matrix = parse(text, optimize=not args.no_optimize)
    except (OSError, ParseError, ConfigurationError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 2

    try:
        if args.quiet:
            with DisableLogger():
                solver = solve_with_history(matrix, int_bits=args.bits, max_steps=args.max_steps)
        else:
            solver = solve_with_history(matrix, int_bits=args.bits, max_steps=args.max_steps)
    except ConfigurationError as e:
        print(f"error: {e}", file=sys.stderr)
        return 2

    print(format_history(solver))
    if args.check and solver.is_solved():
        if len(matrix.col_sequence) != matrix.dimension:
            print("Floating point check skipped: system has free variables.")
        elif check_solution(matrix, solver.final):
            print("Floating point check passed.")
        else:
            print("Floating point check FAILED.")
            return 1
    return 0 if solver.is_solved() else 1
