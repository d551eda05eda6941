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


import logging

from Crypto.Hash.cSHAKE128 import cSHAKE_XOF
from cryptography.hazmat.backends import default_backend
from cryptography.hazmat.primitives import hashes

from ._errors import InvalidArgument
from ._errors import UnsupportedVariant


log = logging.getLogger(__name__)


_SHA2 = {
    256: hashes.SHA256,
    384: hashes.SHA384,
    512: hashes.SHA512,
}

_SHA3 = {
    224: hashes.SHA3_224,
    256: hashes.SHA3_256,
    384: hashes.SHA3_384,
    512: hashes.SHA3_512,
}

_SHAKE = {
    128: hashes.SHAKE128,
    256: hashes.SHAKE256,
}

# Keccak capacity in bits for cSHAKE128 and cSHAKE256.
_CSHAKE_CAPACITY = {
    128: 256,
    256: 512,
}


def sha2_hash(data, bits):
    return _hash(_select(_SHA2, 'SHA-2', bits)(), data)


def sha3_hash(data, bits):
    return _hash(_select(_SHA3, 'SHA-3', bits)(), data)


def shake_hash(data, bits, output_bits):
    shake = _select(_SHAKE, 'SHAKE', bits)
    nbytes = _output_bytes(output_bits)
    if nbytes == 0:
        return b''
    return _hash(shake(digest_size=nbytes), data)


def cshake_hash(data, bits, output_bits, function_name=b'',
                customization=b''):
    """cSHAKE (NIST SP 800-185) with function name N and customization S.

    With N and S both empty this is SHAKE of the same strength.
    """
    capacity = _select(_CSHAKE_CAPACITY, 'cSHAKE', bits)
    nbytes = _output_bytes(output_bits)
    if nbytes == 0:
        return b''
    xof = cSHAKE_XOF(
        bytes(data), _tobytes(customization), capacity,
        _tobytes(function_name),
    )
    return xof.read(nbytes)


def digest(data, algorithm, bits, output_bits=None, function_name=b'',
           customization=b''):
    """Hash data with one of 'sha2', 'sha3', 'shake', or 'cshake'.

    output_bits is required for the extendable-output functions and
    must be omitted for the fixed-length ones.
    """
    if algorithm in ('sha2', 'sha3'):
        if output_bits is not None and output_bits != bits:
            raise UnsupportedVariant(
                '%s output length is fixed at %d bits' % (algorithm, bits)
            )
        if algorithm == 'sha2':
            return sha2_hash(data, bits)
        return sha3_hash(data, bits)
    if algorithm in ('shake', 'cshake'):
        if output_bits is None:
            raise InvalidArgument('%s requires output_bits' % (algorithm,))
        if algorithm == 'shake':
            return shake_hash(data, bits, output_bits)
        return cshake_hash(
            data, bits, output_bits, function_name, customization
        )
    log.debug('rejecting hash algorithm %r', algorithm)
    raise UnsupportedVariant('unknown hash algorithm %r' % (algorithm,))


def _hash(algorithm, data):
    hasher = hashes.Hash(algorithm, backend=default_backend())
    hasher.update(bytes(data))
    return hasher.finalize()


def _select(table, name, bits):
    try:
        return table[bits]
    except (KeyError, TypeError) as e:
        log.debug('rejecting %s bit length %r', name, bits)
        raise UnsupportedVariant(
            'unsupported %s bit length: %r' % (name, bits)
        ) from e


def _output_bytes(output_bits):
    if (not isinstance(output_bits, int) or isinstance(output_bits, bool)
            or output_bits < 0 or output_bits % 8 != 0):
        raise InvalidArgument(
            'output length must be a nonnegative multiple of 8 bits: %r'
            % (output_bits,)
        )
    return output_bits//8


def _tobytes(s):
    if isinstance(s, str):
        return s.encode('utf-8')
    return bytes(s)
