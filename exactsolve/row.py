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
"""Single equation of a linear system: coefficients and right hand sides"""

from typing import Iterable, Tuple, Union
from exactsolve.fraction import Fraction, to_fraction


class Row:
    """Immutable equation row

    A row holds the coefficients of one equation on the ``left`` and one or
    more constant columns on the ``right``. Several constant columns solve for
    several right hand sides in one pass.

    Indexing is signed: ``row[i]`` with ``i >= 0`` addresses ``left[i]``,
    negative indices address the right hand side, ``row[-1]`` being the first
    constant column and ``row[-2]`` the second.

    Args:
        left (iterable of numbers):
            Coefficients. Entries may be Fraction, int, fractions.Fraction or
            sympy.Rational.

        right (iterable of numbers):
            Constant columns.
    """

    __slots__ = ('_left', '_right')

    def __init__(self, left: Iterable, right: Iterable):
        self._left = tuple(to_fraction(v) for v in left)
        self._right = tuple(to_fraction(v) for v in right)

    @property
    def left(self) -> Tuple[Fraction, ...]:
        return self._left

    @property
    def right(self) -> Tuple[Fraction, ...]:
        return self._right

    def is_zero(self) -> bool:
        """True if every coefficient is zero"""
        return all(f.is_zero() for f in self._left)

    def _position(self, index: int) -> Tuple[bool, int]:
        if index < 0:
            pos = -1 - index
            if pos >= len(self._right):
                raise IndexError(f"Row has no right hand side column {index}.")
            return False, pos
        if index >= len(self._left):
            raise IndexError(f"Row has no coefficient {index}.")
        return True, index

    def __getitem__(self, index: int) -> Fraction:
        on_left, pos = self._position(index)
        return self._left[pos] if on_left else self._right[pos]

    def replace(self, index: int, value) -> 'Row':
        """Returns a copy of the row with the cell at (signed) index replaced"""
        on_left, pos = self._position(index)
        value = to_fraction(value)
        if on_left:
            return Row(self._left[:pos] + (value,) + self._left[pos + 1:], self._right)
        return Row(self._left, self._right[:pos] + (value,) + self._right[pos + 1:])

    def __mul__(self, factor: Union[Fraction, int]) -> 'Row':
        factor = to_fraction(factor)
        return Row((v * factor for v in self._left), (v * factor for v in self._right))

    __rmul__ = __mul__

    def __truediv__(self, factor: Union[Fraction, int]) -> 'Row':
        factor = to_fraction(factor)
        return Row((v / factor for v in self._left), (v / factor for v in self._right))

    def __sub__(self, other: 'Row') -> 'Row':
        if not isinstance(other, Row):
            return NotImplemented
        if len(self._left) != len(other._left) or len(self._right) != len(other._right):
            raise ValueError(f"Cannot subtract rows of different shape: "
                             f"{len(self._left)}|{len(self._right)} and {len(other._left)}|{len(other._right)}")
        return Row((a - b for a, b in zip(self._left, other._left)), (a - b for a, b in zip(self._right, other._right)))

    def __eq__(self, other) -> bool:
        if not isinstance(other, Row):
            return NotImplemented
        return self._left == other._left and self._right == other._right

    def __hash__(self) -> int:
        return hash((self._left, self._right))

    def __len__(self) -> int:
        return len(self._left)

    def __str__(self) -> str:
        return '(' + ';'.join(str(v) for v in self._left) + '|' + ';'.join(str(v) for v in self._right) + ')'

    def __repr__(self) -> str:
        return f"Row({[str(v) for v in self._left]}, {[str(v) for v in self._right]})"
