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
from ._errors import Overflow


def bytes_to_big_int(b):
    """Interpret b as a big-endian unsigned integer; empty is zero."""
    x = 0
    for u in bytearray(b):
        x <<= 8
        x |= u
    return x


def big_int_to_byte_array(value):
    """Return the minimal big-endian encoding of a nonnegative integer.

    Zero encodes as a single zero byte, not as the empty string.
    Framing depends on that.
    """
    if value is None:
        raise InvalidArgument('big_int_to_byte_array: value is None')
    if value < 0:
        raise InvalidArgument(
            'big_int_to_byte_array only supports nonnegative values'
        )
    b = []
    while value >= 0x100:
        b.append(value & 0xff)
        value >>= 8
    b.append(value)             # always one byte even if zero
    return bytes(bytearray(reversed(b)))


def int_to_bytes(i, byte_len):
    """Encode nonnegative i in exactly byte_len big-endian bytes."""
    if byte_len <= 0:
        raise InvalidArgument('int_to_bytes: byte_len must be positive')
    if i < 0:
        raise InvalidArgument('int_to_bytes only supports nonnegative values')
    if i >> (8*byte_len):
        raise Overflow('%d does not fit in %d bytes' % (i, byte_len))
    b = bytearray(byte_len)
    for k in range(byte_len - 1, -1, -1):
        b[k] = i & 0xff
        i >>= 8
    assert i == 0
    return bytes(b)


def concat_bytes(*arrays):
    return b''.join(bytes(a) for a in arrays)
