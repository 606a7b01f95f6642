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
"""Exact rational numbers with a fixed integer width

The Fraction class keeps sign, numerator and denominator apart. Numerator and
denominator are unsigned integers that must fit into ``Fraction.bits`` bits,
so numeric growth during elimination is detected instead of wrapping around.
Results of arithmetic are reduced to lowest terms; the unreduced products of
cross-multiplication are checked against the width before reduction.

Example:
    >>> Fraction(6, 8)
    Fraction(3, 4)
    >>> Fraction(1, 2) + Fraction(1, 3)
    Fraction(5, 6)
"""

import fractions
import math
from typing import Union
from sympy import Rational
from exactsolve.errors import ArithmeticOverflowError, ConfigurationError, DivisionByZeroError
from exactsolve.names import DEFAULT_INT_BITS


def _check_width(*values: int) -> None:
    limit = (1 << Fraction.bits) - 1
    for v in values:
        if v > limit:
            raise ArithmeticOverflowError(v, Fraction.bits)


class Fraction:
    """Exact rational number

    Instances behave like immutable values: every operator returns a new
    Fraction. Plain integers are accepted wherever a Fraction is expected.

    Args:
        numerator (int or Fraction):
            Signed numerator, or a Fraction to copy.

        denominator (optional (int)): (Default: 1)
            Signed denominator, must not be zero.
    """

    bits = DEFAULT_INT_BITS
    __slots__ = ('_negative', '_numerator', '_denominator')

    def __init__(self, numerator: Union[int, 'Fraction'] = 0, denominator: int = 1):
        if isinstance(numerator, Fraction):
            if denominator != 1:
                numerator = numerator / denominator
            self._negative = numerator._negative
            self._numerator = numerator._numerator
            self._denominator = numerator._denominator
            return
        if not isinstance(numerator, int) or not isinstance(denominator, int):
            raise TypeError(f"Fraction needs integer components, got {type(numerator)} and {type(denominator)}")
        if denominator == 0:
            raise DivisionByZeroError(f"Fraction {numerator}/0 has a zero denominator.")
        negative = (numerator < 0) != (denominator < 0)
        num, den = abs(numerator), abs(denominator)
        _check_width(num, den)
        gcd = math.gcd(num, den)
        self._set(negative, num // gcd, den // gcd)

    def _set(self, negative: bool, numerator: int, denominator: int) -> None:
        if numerator == 0:
            negative = False
            denominator = 1
        self._negative = negative
        self._numerator = numerator
        self._denominator = denominator

    @classmethod
    def raw(cls, negative: bool, numerator: int, denominator: int) -> 'Fraction':
        """Builds a fraction from unsigned components without reducing them

        The components are taken as they are, the integer width is only
        enforced where new numerators and denominators are computed.
        """
        if numerator < 0 or denominator < 0:
            raise ValueError("Raw fraction components must be unsigned.")
        if denominator == 0:
            raise DivisionByZeroError(f"Fraction {numerator}/0 has a zero denominator.")
        new = object.__new__(cls)
        new._set(bool(negative), numerator, denominator)
        return new

    @property
    def numerator(self) -> int:
        """Unsigned numerator as stored (not necessarily reduced)"""
        return self._numerator

    @property
    def denominator(self) -> int:
        """Unsigned denominator as stored (not necessarily reduced)"""
        return self._denominator

    def _signed(self) -> int:
        return -self._numerator if self._negative else self._numerator

    def sign(self) -> int:
        """Returns -1, 0 or 1"""
        if self._numerator == 0:
            return 0
        return -1 if self._negative else 1

    def is_negative(self) -> bool:
        return self._negative

    def is_zero(self) -> bool:
        return self._numerator == 0

    def is_one(self) -> bool:
        return not self._negative and self._numerator == self._denominator

    def reduced(self) -> 'Fraction':
        """Returns the fraction in lowest terms"""
        gcd = math.gcd(self._numerator, self._denominator)
        return Fraction.raw(self._negative, self._numerator // gcd, self._denominator // gcd)

    def swapped(self) -> 'Fraction':
        """Sign-preserving reciprocal

        Zero has no reciprocal and is returned unchanged, the division operator
        rejects it before swapping.
        """
        if self._numerator == 0:
            return self
        return Fraction.raw(self._negative, self._denominator, self._numerator)

    def to_sympy(self) -> Rational:
        return Rational(self._signed(), self._denominator)

    # arithmetic
    def __add__(self, other):
        other = _coerce(other)
        if other is NotImplemented:
            return other
        left = self._numerator * other._denominator
        right = other._numerator * self._denominator
        den = self._denominator * other._denominator
        _check_width(left, right, den)
        num = (-left if self._negative else left) + (-right if other._negative else right)
        _check_width(abs(num))
        return Fraction(num, den)

    def __sub__(self, other):
        other = _coerce(other)
        if other is NotImplemented:
            return other
        return self + -other

    def __mul__(self, other):
        other = _coerce(other)
        if other is NotImplemented:
            return other
        num = self._numerator * other._numerator
        den = self._denominator * other._denominator
        _check_width(num, den)
        gcd = math.gcd(num, den)
        return Fraction.raw(self._negative != other._negative, num // gcd, den // gcd)

    def __truediv__(self, other):
        other = _coerce(other)
        if other is NotImplemented:
            return other
        if other.is_zero():
            raise DivisionByZeroError(f"Cannot divide {self} by zero.")
        return self * other.swapped()

    def __radd__(self, other):
        return self + other

    def __rsub__(self, other):
        return -self + other

    def __rmul__(self, other):
        return self * other

    def __rtruediv__(self, other):
        other = _coerce(other)
        if other is NotImplemented:
            return other
        return other / self

    def __neg__(self):
        return Fraction.raw(not self._negative, self._numerator, self._denominator)

    def __pos__(self):
        return self

    def __abs__(self):
        return Fraction.raw(False, self._numerator, self._denominator)

    # comparison
    def __eq__(self, other) -> bool:
        other = _coerce(other)
        if other is NotImplemented:
            return other
        a, b = self.reduced(), other.reduced()
        return a._negative == b._negative and a._numerator == b._numerator and a._denominator == b._denominator

    def __hash__(self) -> int:
        return hash(fractions.Fraction(self._signed(), self._denominator))

    def __lt__(self, other):
        other = _coerce(other)
        if other is NotImplemented:
            return other
        return float(self) < float(other)

    def __le__(self, other):
        other = _coerce(other)
        if other is NotImplemented:
            return other
        return float(self) <= float(other)

    def __gt__(self, other):
        other = _coerce(other)
        if other is NotImplemented:
            return other
        return float(self) > float(other)

    def __ge__(self, other):
        other = _coerce(other)
        if other is NotImplemented:
            return other
        return float(self) >= float(other)

    def __float__(self) -> float:
        return self._signed() / self._denominator

    def __bool__(self) -> bool:
        return self._numerator != 0

    # formatting
    def __str__(self) -> str:
        text = ('-' if self._negative else '') + str(self._numerator)
        if self._denominator != 1:
            text += '/' + str(self._denominator)
        return text

    def __format__(self, format_spec: str) -> str:
        text = str(self)
        if '+' in format_spec:
            format_spec = format_spec.replace('+', '')
            if not self._negative:
                text = '+' + text
        return format(text, format_spec)

    def __repr__(self) -> str:
        return f"Fraction({self._signed()}, {self._denominator})"


def _coerce(value):
    if isinstance(value, Fraction):
        return value
    if isinstance(value, int):
        return Fraction(value)
    return NotImplemented


def to_fraction(value) -> Fraction:
    """Converts an exact number to a Fraction

    Args:
        value (int, Fraction, fractions.Fraction or sympy.Rational):
            The number to convert. Floats are rejected since they are not exact.

    Returns:
        (Fraction):
        The same value as Fraction.
    """
    if isinstance(value, Fraction):
        return value
    if isinstance(value, int):
        return Fraction(value)
    if isinstance(value, fractions.Fraction):
        return Fraction(value.numerator, value.denominator)
    if isinstance(value, Rational):
        return Fraction(int(value.p), int(value.q))
    raise TypeError(f"Cannot convert {type(value)} to an exact Fraction.")


class IntegerWidth():
    """Environment in which fractions use a different integer width

    The width is the class attribute ``Fraction.bits`` and applies to the
    whole process while the block runs. Fractions built inside the block keep
    whatever size they grew to after it ends: they can still be compared,
    negated, formatted and stored in rows, only new arithmetic on them is
    checked against the width in effect at that time.

    Example:
        with IntegerWidth(128):
            solver.solve()
    """

    def __init__(self, bits: int):
        if not isinstance(bits, int) or bits < 1:
            raise ConfigurationError(f"Integer width must be a positive number of bits, got {bits}.")
        self.bits = bits
        self._previous = None

    def __enter__(self):
        self._previous = Fraction.bits
        Fraction.bits = self.bits
        return self

    def __exit__(self, exit_type, exit_value, exit_traceback):
        Fraction.bits = self._previous


Fraction.ZERO = Fraction(0)
Fraction.ONE = Fraction(1)
Fraction.M_ONE = Fraction(-1)
