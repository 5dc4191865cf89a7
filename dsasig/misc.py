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

"""Miscellaneous utility classes and functions"""


def plural(length, label, suffix='s'):
    """Return a label with an optional plural suffix"""

    return '%d %s%s' % (length, label, suffix if length != 1 else '')


def all_ints(seq):
    """Return if a sequence contains all integers"""

    return all(isinstance(i, int) for i in seq)


def egcd(a, b):
    """Extended Euclidean algorithm

       Returns a tuple (gcd, x, y) such that a*x + b*y == gcd.

    """

    # Iterative form of the recursive descent, which returns (b, 0, 1)
    # once a reaches zero
    x0, y0, x1, y1 = 0, 1, 1, 0

    while a:
        quot = b // a
        a, b = b % a, a
        x0, x1 = x1, x0 - quot * x1
        y0, y1 = y1, y0 - quot * y1

    return b, x0, y0


def mod_inverse(a, m):
    """Return the inverse of a modulo m

       The result r satisfies 0 <= r < m and a*r == 1 (mod m). If
       a and m are not relatively prime, NoInverseError is raised.

    """

    gcd, x, _ = egcd(a % m, m)

    if gcd != 1:
        raise NoInverseError('%d has no inverse modulo %d' % (a, m))

    return x % m


def mod_pow(base, exponent, modulus):
    """Return base raised to exponent modulo modulus"""

    return pow(base, exponent, modulus)


class Options:
    """Container for configuration options"""

    def __init__(self, options=None, **kwargs):
        if options:
            if not isinstance(options, type(self)):
                raise TypeError('Invalid %s, got %s' %
                                (type(self).__name__, type(options).__name__))

            self.kwargs = options.kwargs.copy()
        else:
            self.kwargs = {}

        self.kwargs.update(kwargs)
        self.prepare(**self.kwargs)

    def prepare(self):
        """Pre-process configuration options"""

    def update(self, kwargs):
        """Update options based on keyword parameters passed in"""

        self.kwargs.update(kwargs)
        self.prepare(**self.kwargs)


class Error(Exception):
    """General DSA error"""

    def __init__(self, reason):
        super().__init__(reason)
        self.reason = reason


class DomainParameterError(Error):
    """DSA domain parameter error

       This exception is raised when the domain parameter provider
       returns values which don't form a valid DSA group, or when
       an unsupported set of parameter sizes is requested.

    """


class SignatureRetriesExceeded(Error):
    """DSA signing gave up

       This exception is raised when every signing attempt allowed by
       the configured retry limit produced a degenerate value. With a
       working random number generator this should never happen.

    """


class KeyNotAvailableError(Error):
    """DSA private key is not available

       This exception is raised when signing is attempted with an
       engine whose private key has been released.

    """


class NoInverseError(ValueError):
    """Modular inverse does not exist"""


class MalformedSignatureError(ValueError):
    """Signature decoding error"""
