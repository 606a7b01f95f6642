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
"""Static strings used in the exactsolve package

    Solver options

        INT_BITS = 'int_bits'

        MAX_STEPS = 'max_steps'

    Solve outcomes

        DONE = 'done'

        SINGULAR = 'singular'

        OVERFLOW = 'overflow'

        STEP_LIMIT = 'step_limit'

        PENDING = 'pending'

"""
# Solver options
INT_BITS = 'int_bits'
MAX_STEPS = 'max_steps'

# Solve outcomes
DONE = 'done'
SINGULAR = 'singular'
OVERFLOW = 'overflow'
STEP_LIMIT = 'step_limit'
PENDING = 'pending'

# Defaults
DEFAULT_INT_BITS = 64
# letter of the first free variable in rendered solutions
FIRST_FREE_VARIABLE = 't'
