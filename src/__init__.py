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


"""Big-endian integer encoding and length-prefixed framing."""

import logging

from ._code import big_int_to_byte_array
from ._code import bytes_to_big_int
from ._code import concat_bytes
from ._code import int_to_bytes
from ._coding import dec_url_safe
from ._coding import enc_url_safe
from ._errors import BeframeError
from ._errors import InvalidArgument
from ._errors import InvalidEncoding
from ._errors import Overflow
from ._errors import UnsupportedType
from ._errors import UnsupportedVariant
from ._frame import DEFAULT_LENGTH_PREFIX_BYTES
from ._frame import FrameKind
from ._frame import frame_kind
from ._frame import framed_bytes
from ._frame import framed_bytes_from_big_int
from ._frame import framed_bytes_from_bytes
from ._frame import framed_bytes_from_string
from ._frame import framed_bytes_from_uint8_array
from ._hash import cshake_hash
from ._hash import digest
from ._hash import sha2_hash
from ._hash import sha3_hash
from ._hash import shake_hash
from ._numeric import big_cmp
from ._numeric import big_mod_pos


logging.getLogger(__name__).addHandler(logging.NullHandler())


__all__ = [
    'BeframeError',
    'DEFAULT_LENGTH_PREFIX_BYTES',
    'FrameKind',
    'InvalidArgument',
    'InvalidEncoding',
    'Overflow',
    'UnsupportedType',
    'UnsupportedVariant',
    'big_cmp',
    'big_int_to_byte_array',
    'big_mod_pos',
    'bytes_to_big_int',
    'concat_bytes',
    'cshake_hash',
    'dec_url_safe',
    'digest',
    'enc_url_safe',
    'frame_kind',
    'framed_bytes',
    'framed_bytes_from_big_int',
    'framed_bytes_from_bytes',
    'framed_bytes_from_string',
    'framed_bytes_from_uint8_array',
    'int_to_bytes',
    'sha2_hash',
    'sha3_hash',
    'shake_hash',
]
