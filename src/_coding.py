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


# URL-safe base64 (RFC 4648, section 5) with the padding omitted.

import base64
import binascii
import logging
import string

from ._errors import InvalidEncoding


log = logging.getLogger(__name__)

_ALPHABET = frozenset(string.ascii_letters + string.digits + '-_')


def enc_url_safe(data):
    return base64.urlsafe_b64encode(bytes(data)).rstrip(b'=').decode('ascii')


def dec_url_safe(s):
    """Decode unpadded URL-safe base64.

    Padding, the standard-alphabet characters '+' and '/', and
    whitespace are all rejected.  Unused low bits of the last
    character are ignored.
    """
    if not isinstance(s, str):
        raise InvalidEncoding('expected str, got %s' % (type(s).__name__,))
    bad = set(s) - _ALPHABET
    if bad:
        log.debug('rejecting base64 input with characters %r', sorted(bad))
        raise InvalidEncoding(
            'invalid URL-safe base64 characters: %r' % (''.join(sorted(bad)),)
        )
    if len(s) % 4 == 1:
        # 6 bits left over: not enough for a byte.
        raise InvalidEncoding('truncated URL-safe base64 input')
    padded = s + '='*(-len(s) % 4)
    try:
        return base64.urlsafe_b64decode(padded.encode('ascii'))
    except binascii.Error as e:
        raise InvalidEncoding(str(e)) from e
