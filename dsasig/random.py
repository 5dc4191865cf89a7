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

"""Cryptographically secure random integer generation

   Integers are built from a byte-oriented random source, which
   defaults to :func:`os.urandom`. Any callable which takes a byte
   count and returns that many random bytes can be substituted.

"""

import os

from .constants import RANGE_OVERSAMPLE_BITS


class SecureRandom:
    """Generator of uniformly distributed random integers"""

    def __init__(self, rng=None):
        self._rng = rng or os.urandom

    def random_bytes(self, count):
        """Return the requested number of random bytes"""

        data = self._rng(count)

        if len(data) != count:
            raise ValueError('Random source returned %d bytes, '
                             'expected %d' % (len(data), count))

        return data

    def random_bits(self, bit_length):
        """Return a random integer in the range [0, 2**bit_length)"""

        if bit_length < 1:
            return 0

        nbytes, bits = divmod(bit_length, 8)

        # One extra byte is drawn and masked down to the leftover bits,
        # which may leave it empty when bit_length is a multiple of 8
        data = bytearray(self.random_bytes(nbytes + 1))
        data[-1] &= 0xff >> (8 - bits)

        return int.from_bytes(data, 'little')

    def random_range(self, low, high):
        """Return a random integer in the half-open range [low, high)

           The endpoints may be given in either order. When they are
           equal, that value is returned.

           Rather than reducing a random value modulo the span, which
           favors the low end of the range whenever the span isn't a
           power of two, the span is oversampled and each sample is
           scaled down by a fixed bucket size. Samples past the last
           complete bucket are drawn again, so every result has the
           same probability.

        """

        if low > high:
            low, high = high, low

        span = high - low

        if not span:
            return low

        bits = span.bit_length() + RANGE_OVERSAMPLE_BITS + 1
        bucket = (1 << bits) // span

        while True:
            value = self.random_bits(bits) // bucket

            if value < span:
                return low + value
