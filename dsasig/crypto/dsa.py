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

"""A shim around PyCA for DSA domain parameters and public keys"""

from cryptography.exceptions import InvalidSignature
from cryptography.hazmat.backends import default_backend
from cryptography.hazmat.primitives.asymmetric import dsa
from cryptography.hazmat.primitives.asymmetric.utils import \
    decode_dss_signature, encode_dss_signature

from .misc import PyCAKey


# Short variable names are used here, matching names in FIPS 186
# pylint: disable=invalid-name


def generate_domain_parameters(l_bits, n_bits):
    """Generate DSA primes p and q using PyCA

       PyCA picks the size of q from the size of p, so n_bits is
       only checked by the caller once the primes are returned.

    """

    # pylint: disable=unused-argument

    params = dsa.generate_parameters(l_bits, default_backend())
    numbers = params.parameter_numbers()

    return numbers.p, numbers.q


def encode_der_signature(r, s):
    """Encode r and s as a DER Dss-Sig-Value"""

    return encode_dss_signature(r, s)


def decode_der_signature(der):
    """Decode a DER Dss-Sig-Value into r and s"""

    return decode_dss_signature(der)


class DSAPublicKey(PyCAKey):
    """A shim around PyCA for DSA public keys"""

    def __init__(self, pyca_key, params, pub):
        super().__init__(pyca_key)

        self._params = params
        self._pub = pub

    @property
    def p(self):
        """Return the DSA public modulus"""

        return self._params.p

    @property
    def q(self):
        """Return the DSA sub-group order"""

        return self._params.q

    @property
    def g(self):
        """Return the DSA generator"""

        return self._params.g

    @property
    def y(self):
        """Return the DSA public value"""

        return self._pub.y

    @classmethod
    def construct(cls, p, q, g, y):
        """Construct a DSA public key"""

        params = dsa.DSAParameterNumbers(p, q, g)
        pub = dsa.DSAPublicNumbers(y, params)
        pub_key = pub.public_key(default_backend())

        return cls(pub_key, params, pub)

    def verify(self, data, sig, hash_alg):
        """Verify a DER signature on a block of data"""

        try:
            self.pyca_key.verify(sig, data, hash_alg)
            return True
        except InvalidSignature:
            return False
