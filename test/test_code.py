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
from beframe import Overflow
from beframe._code import big_int_to_byte_array
from beframe._code import bytes_to_big_int
from beframe._code import concat_bytes
from beframe._code import int_to_bytes


def test_bytes_to_big_int():
    assert bytes_to_big_int(b'') == 0
    assert bytes_to_big_int(b'\x00') == 0
    assert bytes_to_big_int([1, 2]) == 0x0102
    assert bytes_to_big_int([1, 2, 3, 4, 5, 6]) == 0x010203040506
    assert bytes_to_big_int([1, 2, 3, 4, 5, 6, 7, 8, 9]) == \
        0x010203040506070809
    assert bytes_to_big_int(b'\xff') == 255   # unsigned even with high bit
    assert bytes_to_big_int(b'\x00\x00\x01') == 1


def test_big_int_to_byte_array():
    assert big_int_to_byte_array(0) == bytes([0])
    assert big_int_to_byte_array(0x0102) == bytes([1, 2])
    assert big_int_to_byte_array(0xff) == bytes([0xff])
    assert big_int_to_byte_array(0x100) == bytes([1, 0])
    assert big_int_to_byte_array(0x010203040506070809) == \
        bytes([1, 2, 3, 4, 5, 6, 7, 8, 9])
    assert big_int_to_byte_array(2**256) == b'\x01' + b'\x00'*32


def test_big_int_to_byte_array_rejects():
    with pytest.raises(InvalidArgument):
        big_int_to_byte_array(None)
    with pytest.raises(InvalidArgument):
        big_int_to_byte_array(-1)
    with pytest.raises(ValueError):
        big_int_to_byte_array(-2**100)


def test_round_trip():
    for v in (0, 1, 127, 128, 255, 256, 65535, 2**64 - 1, 2**64, 3**200):
        assert bytes_to_big_int(big_int_to_byte_array(v)) == v
    for b in (b'\x00', b'\x01', b'\x80\x00', b'\x12\x34\x56', b'\xff'*40):
        assert big_int_to_byte_array(bytes_to_big_int(b)) == b


def test_int_to_bytes():
    assert int_to_bytes(0, 1) == b'\x00'
    assert int_to_bytes(258, 2) == b'\x01\x02'
    assert int_to_bytes(1, 4) == b'\x00\x00\x00\x01'
    assert int_to_bytes(2**64 + 1, 9) == b'\x01' + b'\x00'*7 + b'\x01'
    for n in (1, 2, 3, 4, 8):
        for i in (0, 1, 2**(8*n) - 1, 2**(8*n - 1)):
            b = int_to_bytes(i, n)
            assert len(b) == n
            assert bytes_to_big_int(b) == i


def test_int_to_bytes_overflow():
    for n in (1, 2, 4, 16):
        assert int_to_bytes(2**(8*n) - 1, n) == b'\xff'*n
        with pytest.raises(Overflow):
            int_to_bytes(2**(8*n), n)
    with pytest.raises(OverflowError):
        int_to_bytes(256, 1)


def test_int_to_bytes_rejects():
    with pytest.raises(InvalidArgument):
        int_to_bytes(-1, 1)
    with pytest.raises(InvalidArgument):
        int_to_bytes(0, 0)
    with pytest.raises(InvalidArgument):
        int_to_bytes(0, -1)


def test_concat_bytes():
    assert concat_bytes() == b''
    assert concat_bytes(b'\x01', b'\x02\x03') == b'\x01\x02\x03'
    assert concat_bytes(b'', b'\xaa', b'', bytearray(b'\xbb')) == b'\xaa\xbb'
    a = bytearray(b'\x01')
    out = concat_bytes(a, b'\x02')
    a[0] = 0x7f
    assert out == b'\x01\x02'
    assert isinstance(out, bytes)
