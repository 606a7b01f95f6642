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
"""Parsing matrices written as text

One row per line, each line ``(left|right)`` where both sides are
``;``-separated lists of integers or fractions ``integer/integer``:

    (1;3;2/3|2)
    (2;-4;0|9)
    (0/2;2/4;1/2|5)
"""

import re
from typing import List
from exactsolve.errors import ArithmeticOverflowError, DivisionByZeroError, ParseError
from exactsolve.fraction import Fraction
from exactsolve.matrix import Matrix
from exactsolve.row import Row

_ENTRY = re.compile(r'\s*([+-]?\d+)\s*(?:/\s*([+-]?\d+)\s*)?')


def parse_entry(token: str, line: str = None) -> Fraction:
    """Parses a single entry such as ``-3`` or ``2/4``"""
    match = _ENTRY.fullmatch(token)
    if match is None:
        raise ParseError(f"Fraction `{token}` can't be parsed.", line, token)
    numerator, denominator = match.groups()
    try:
        return Fraction(int(numerator), int(denominator) if denominator is not None else 1)
    except DivisionByZeroError:
        raise ParseError(f"Fraction `{token}` has a zero denominator.", line, token) from None
    except ArithmeticOverflowError as e:
        raise ParseError(f"Fraction `{token}` does not fit into {e.bits} bit integers.", line, token) from None


def parse_side(text: str, line: str = None) -> List[Fraction]:
    return [parse_entry(token, line) for token in text.split(';')]


def parse(text: str, optimize: bool = True) -> Matrix:
    """Parses a matrix from its textual form

    Blank lines and whitespace around lines and entries are ignored.

    Args:
        text (str):
            The matrix, one ``(a;b;c|d)`` row per line.

        optimize (optional (bool)): (Default: True)
            Use the pivot optimizer for the resulting matrix.

    Returns:
        (Matrix):
        The system in its Initial state.

    Raises:
        ParseError: a line is malformed, an entry is not a number or the
        coefficient side is not square.
    """
    lines = [line.strip() for line in text.splitlines() if line.strip()]
    if not lines:
        raise ParseError("The text contains no rows.")
    rows = []
    for line in lines:
        if not line.startswith('('):
            raise ParseError(f"`{line}` doesn't start with a `(`.", line)
        if not line.endswith(')'):
            raise ParseError(f"`{line}` doesn't end with a `)`.", line)
        body = line[1:-1]
        if '|' not in body:
            raise ParseError(f"`{line}` doesn't have a `|`.", line)
        left, right = body.split('|', 1)
        left_values = parse_side(left, line)
        if len(left_values) != len(lines):
            raise ParseError(f"`{line}` has not {len(lines)} fractions.", line)
        rows.append(Row(left_values, parse_side(right, line)))
    return Matrix.from_rows(rows, optimize=optimize)


def parse_file(path: str, optimize: bool = True) -> Matrix:
    """Reads and parses a matrix file"""
    with open(path, 'r') as fs:
        return parse(fs.read(), optimize=optimize)
