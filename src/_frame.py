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


# Frame layout, all lengths big-endian in a fixed width w chosen by the
# caller:
#
#       bytes:          len(data) || data
#       integer:        len(mag) || sign || mag
#       string:         len(utf8) || utf8
#
# where sign is 0x01 for negative integers and 0x00 otherwise, and mag
# is the minimal big-endian magnitude (one zero byte for zero).  The
# integer prefix counts the magnitude only, not the sign byte.

import enum

from ._code import big_int_to_byte_array
from ._code import int_to_bytes
from ._errors import InvalidArgument
from ._errors import UnsupportedType


DEFAULT_LENGTH_PREFIX_BYTES = 4


class FrameKind(enum.Enum):
    BYTES = 'bytes'
    BIG_INT = 'big_int'
    STRING = 'string'


def framed_bytes_from_bytes(data, length_prefix_bytes):
    data = bytes(data)
    return int_to_bytes(len(data), length_prefix_bytes) + data


framed_bytes_from_uint8_array = framed_bytes_from_bytes


def framed_bytes_from_big_int(value, length_prefix_bytes):
    if value is None:
        raise InvalidArgument('framed_bytes_from_big_int: value is None')
    sign = b'\x01' if value < 0 else b'\x00'
    magnitude = big_int_to_byte_array(abs(value))
    prefix = int_to_bytes(len(magnitude), length_prefix_bytes)
    return prefix + sign + magnitude


def framed_bytes_from_string(s, length_prefix_bytes):
    return framed_bytes_from_bytes(s.encode('utf-8'), length_prefix_bytes)


_FRAMERS = {
    FrameKind.BYTES: framed_bytes_from_bytes,
    FrameKind.BIG_INT: framed_bytes_from_big_int,
    FrameKind.STRING: framed_bytes_from_string,
}


def frame_kind(value):
    """Classify value as one of the three frameable shapes.

    Booleans are ints in Python but are not accepted as integers here.
    """
    if isinstance(value, (bytes, bytearray, memoryview)):
        return FrameKind.BYTES
    if isinstance(value, int) and not isinstance(value, bool):
        return FrameKind.BIG_INT
    if isinstance(value, str):
        return FrameKind.STRING
    raise UnsupportedType(
        'cannot frame value of type %s' % (type(value).__name__,)
    )


def framed_bytes(value, length_prefix_bytes=DEFAULT_LENGTH_PREFIX_BYTES,
                 kind=None):
    """Frame bytes, an integer, or a string with a length prefix.

    If kind is given, value must be of that kind.
    """
    actual = frame_kind(value)
    if kind is not None and kind is not actual:
        raise UnsupportedType(
            'expected %r, got value of type %s'
            % (kind, type(value).__name__)
        )
    return _FRAMERS[actual](value, length_prefix_bytes)
