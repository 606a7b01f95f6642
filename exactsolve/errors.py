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
"""Exceptions raised by exactsolve"""


class ExactSolveError(Exception):
    """Base class of all exactsolve errors"""


class ConfigurationError(ExactSolveError, ValueError):
    """A matrix or a solver option is not set up correctly.

    Raised when building a matrix whose coefficient side is narrower than its
    row count, whose rows differ in length or that has no rows at all, and for
    unsupported solver keywords.
    """


class SingularSystemError(ExactSolveError, ArithmeticError):
    """The system has no unique solution.

    Raised by an elimination step that meets a zero pivot or a row whose
    coefficients all vanished. The state of the failing step is kept in
    ``state``.
    """

    def __init__(self, message, state=None):
        super().__init__(message)
        self.state = state


class DivisionByZeroError(ExactSolveError, ZeroDivisionError):
    """A fraction with a zero denominator was requested"""


class ArithmeticOverflowError(ExactSolveError, OverflowError):
    """A numerator or denominator left the fixed integer width.

    ``value`` is the offending magnitude, ``bits`` the width in effect.
    """

    def __init__(self, value, bits):
        super().__init__(f"{value} does not fit into an unsigned {bits} bit integer.")
        self.value = value
        self.bits = bits


class ParseError(ExactSolveError, ValueError):
    """Malformed matrix text.

    ``line`` holds the offending line, ``token`` the entry that could not be
    read as a number (if any).
    """

    def __init__(self, message, line=None, token=None):
        super().__init__(message)
        self.line = line
        self.token = token


class StepLimitError(ExactSolveError, RuntimeError):
    """A solve did not terminate within the allowed number of steps"""
