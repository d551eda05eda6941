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


import pytest

from beframe import InvalidArgument
from beframe._numeric import big_cmp
from beframe._numeric import big_mod_pos


def test_big_mod_pos():
    cases = [
        (0, 0), (1, 1), (4, 4), (5, 0), (6, 1),
        (-1, 4), (-6, 4), (-10, 0),
    ]
    for x, r in cases:
        assert big_mod_pos(x, 5) == r


def test_big_mod_pos_large():
    x = 1234567890123456789012345678901234567890
    assert big_mod_pos(x, 97) == x - (x//97)*97
    assert big_mod_pos(-x, 2**255 - 19) == 2**255 - 19 - x
    n = 2**127 - 1
    for x in (-3*n - 5, -n, -1, 0, 1, n - 1, n, 7*n + 3, -x):
        r = big_mod_pos(x, n)
        assert 0 <= r < n
        assert r == big_mod_pos(x + n, n)


def test_big_mod_pos_rejects():
    with pytest.raises(InvalidArgument):
        big_mod_pos(3, 0)
    with pytest.raises(InvalidArgument):
        big_mod_pos(3, -5)
    with pytest.raises(InvalidArgument):
        big_mod_pos(None, 5)


def test_big_cmp():
    cases = [
        (-2, -1, -1),
        (-1, -1, 0),
        (-1, 0, -1),
        (0, 0, 0),
        (1, 0, 1),
        (1, 2, -1),
        (2, 1, 1),
    ]
    for a, b, c in cases:
        assert big_cmp(a, b) == c
        assert big_cmp(b, a) == -c


def test_big_cmp_large():
    A = 123456789012345678901234567890
    B = 123456789012345678901234567891
    assert big_cmp(A, B) == -1
    assert big_cmp(B, A) == 1
    assert big_cmp(-A, -B) == 1
    assert big_cmp(2**1000, 2**1000) == 0
