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

"""Miscellaneous PyCA utility classes and functions"""

from cryptography.hazmat.primitives.hashes import Hash
from cryptography.hazmat.primitives.hashes import SHA1, SHA224
from cryptography.hazmat.primitives.hashes import SHA256, SHA384, SHA512


hashes = {h.name: h for h in (SHA1, SHA224, SHA256, SHA384, SHA512)}


def get_hash_algs():
    """Return the names of the supported hash algorithms"""

    return list(hashes)


class MessageDigest:
    """A reusable PyCA hash context

       A single context is created up front and copied for each
       message, so concurrent callers never share intermediate state.

    """

    def __init__(self, hash_alg):
        try:
            self._hash = hashes[hash_alg]
        except KeyError:
            raise ValueError('Unknown hash algorithm: %s' % hash_alg) from None

        self._ctx = Hash(self._hash())

    @property
    def name(self):
        """Return the name of the hash algorithm"""

        return self._hash.name

    def digest(self, data):
        """Return the digest of a block of data"""

        ctx = self._ctx.copy()
        ctx.update(data)
        return ctx.finalize()


class PyCAKey:
    """Base class for PyCA private/public keys"""

    def __init__(self, pyca_key):
        self._pyca_key = pyca_key

    @property
    def pyca_key(self):
        """Return the PyCA object associated with this key"""

        return self._pyca_key
