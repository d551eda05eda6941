# -*- coding: utf-8 -*-

#  Copyright 2020 Taylor R Campbell
#
#  Licensed under the Apache License, Version 2.0 (the "License");
#  you may not use this file except in compliance with the License.
#  You may obtain a copy of the License at
#
#      http://www.apache.org/licenses/LICENSE-2.0
#
#  Unless required by applicable law or agreed to in writing, software
#  distributed under the License is distributed on an "AS IS" BASIS,
#  WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
#  See the License for the specific language governing permissions and
#  limitations under the License.


from ._errors import InvalidArgument


def big_mod_pos(x, n):
    """Return x mod n in [0, n), whatever the sign of x."""
    if not _isint(x) or not _isint(n):
        raise InvalidArgument('big_mod_pos takes integers')
    if n <= 0:
        raise InvalidArgument('modulus must be positive: %r' % (n,))
    return x % n               # sign follows the divisor


def big_cmp(a, b):
    """Return -1 if a < b, 0 if a == b, and 1 if a > b."""
    return (a > b) - (a < b)


def _isint(x):
    return isinstance(x, int) and not isinstance(x, bool)
