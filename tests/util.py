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

"""Utility functions for unit tests"""

import functools
import os
import tempfile
import unittest

from unittest.mock import patch

from dsasig import DomainParameters, DSAEngine


# Textbook-sized domain parameters, small enough to check by hand
TOY_P = 23
TOY_Q = 11
TOY_G = 4
TOY_X = 7

# Public value for TOY_X: 4^7 mod 23
TOY_Y = 8

_test_params = {}


def get_test_params(l_bits=1024, n_bits=160):
    """Generate or return domain parameters with the requested sizes"""

    try:
        params = _test_params[l_bits, n_bits]
    except KeyError:
        params = DomainParameters.generate(l_bits, n_bits)
        _test_params[l_bits, n_bits] = params

    return params


def make_toy_engine(**kwargs):
    """Return an engine built on the textbook domain parameters"""

    return DSAEngine.construct(TOY_P, TOY_Q, TOY_G, TOY_X, **kwargs)


def patch_nonces(*nonces, **kwargs):
    """Patch the random range generator to return fixed nonces"""

    if len(nonces) == 1 and not kwargs:
        kwargs['return_value'] = nonces[0]
    elif nonces:
        kwargs['side_effect'] = list(nonces)

    return patch('dsasig.random.SecureRandom.random_range', **kwargs)


def zero_rng(count):
    """Random byte source which returns only zero bytes"""

    return bytes(count)


def counting_rng(func):
    """Decorator which records the byte counts requested from an RNG"""

    @functools.wraps(func)
    def rng_wrapper(count):
        """Record the request and pass it on"""

        rng_wrapper.requests.append(count)
        return func(count)

    rng_wrapper.requests = []

    return rng_wrapper


def chi_square(counts, expected):
    """Return the chi-square statistic of observed counts"""

    return sum((count - expected) ** 2 / expected for count in counts)


class TempDirTestCase(unittest.TestCase):
    """Unit test class which operates in a temporary directory"""

    _tempdir = None
    _orig_dir = None

    @classmethod
    def setUpClass(cls):
        """Create temporary directory and set it as current directory"""

        cls._orig_dir = os.getcwd()
        cls._tempdir = tempfile.TemporaryDirectory()
        os.chdir(cls._tempdir.name)

    @classmethod
    def tearDownClass(cls):
        """Clean up temporary directory"""

        os.chdir(cls._orig_dir)
        cls._tempdir.cleanup()
