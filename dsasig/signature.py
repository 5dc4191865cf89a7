# Copyright (c) 2026 by Ron Frederick <ronf@timeheart.net> and others.
#
# This program and the accompanying materials are made available under
# the terms of the Eclipse Public License v2.0 which accompanies this
# distribution and is available at:
#
#     http://www.eclipse.org/legal/epl-2.0/
#
# This program may also be made available under the following secondary
# licenses when the conditions for such availability set forth in the
# Eclipse Public License v2.0 are satisfied:
#
#    GNU General Public License, Version 2.0, or any later versions of
#    that license
#
# SPDX-License-Identifier: EPL-2.0 OR GPL-2.0-or-later
#
# Contributors:
#     Ron Frederick - initial implementation, API, and documentation

"""DSA signature encoding and decoding functions

   The native signature format is the concatenation of r and s, each
   written as a fixed-width big-endian unsigned integer just wide
   enough to hold a value of n_bits bits. There is no header, so both
   sides must agree on the parameter sizes out of band.

"""

from .crypto import decode_der_signature, encode_der_signature
from .misc import MalformedSignatureError


def component_size(n_bits):
    """Return the size in bytes of each signature component"""

    return (n_bits + 7) // 8


def signature_size(n_bits):
    """Return the size in bytes of an encoded signature"""

    return 2 * component_size(n_bits)


def encode_signature(r, s, n_bits):
    """Encode a signature as r || s

       OverflowError is raised if either value doesn't fit in its
       fixed-width block.

    """

    size = component_size(n_bits)

    return r.to_bytes(size, 'big') + s.to_bytes(size, 'big')


def decode_signature(data, n_bits):
    """Decode a signature into its r and s values"""

    size = component_size(n_bits)

    if not isinstance(data, (bytes, bytearray, memoryview)):
        raise MalformedSignatureError('Signature must be a byte string')

    if len(data) != 2 * size:
        raise MalformedSignatureError('Invalid signature length: '
                                      'expected %d, got %d' %
                                      (2 * size, len(data)))

    data = bytes(data)

    return (int.from_bytes(data[:size], 'big'),
            int.from_bytes(data[size:], 'big'))


def signature_to_der(data, n_bits):
    """Convert an r || s signature to a DER Dss-Sig-Value"""

    return encode_der_signature(*decode_signature(data, n_bits))


def der_to_signature(der, n_bits):
    """Convert a DER Dss-Sig-Value to an r || s signature

       OverflowError is raised if either value is negative or too
       large for the given parameter size.

    """

    try:
        r, s = decode_der_signature(bytes(der))
    except (TypeError, ValueError):
        raise MalformedSignatureError('Invalid DER signature') from None

    return encode_signature(r, s, n_bits)
