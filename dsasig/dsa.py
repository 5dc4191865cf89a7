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

"""DSA signature engine

   An engine owns one set of DSA domain parameters (p, q, g) and one
   key pair (x, y). It signs byte or text messages with a fresh random
   nonce for every signature and verifies signatures against its own
   public key.

   .. note:: Modular exponentiation here uses Python's built-in
             integers and is not constant time. Timing side channels
             are a known limitation of this module.

"""

import codecs
import itertools

from .config import DSAConfig
from .constants import DEFAULT_ENCODING, DEFAULT_HASH_ALG
from .constants import DEFAULT_L_BITS, DEFAULT_N_BITS
from .constants import DEFAULT_MAX_SIGN_RETRIES, GENERATOR_BASE
from .constants import SUPPORTED_PARAMETER_SIZES
from .crypto import DSAPublicKey, MessageDigest, generate_domain_parameters
from .logging import logger
from .misc import DomainParameterError, KeyNotAvailableError
from .misc import MalformedSignatureError, NoInverseError, Options
from .misc import SignatureRetriesExceeded, all_ints, plural
from .misc import mod_inverse, mod_pow
from .random import SecureRandom
from .signature import decode_signature, encode_signature
from .signature import der_to_signature, signature_size, signature_to_der


# Short variable names are used here, matching names in FIPS 186
# pylint: disable=invalid-name


class DomainParameters:
    """DSA domain parameters p, q, and g"""

    __slots__ = ('_p', '_q', '_g')

    def __init__(self, p, q, g):
        self._p = p
        self._q = q
        self._g = g

    def __eq__(self, other):
        return (isinstance(other, type(self)) and
                (self._p, self._q, self._g) == (other.p, other.q, other.g))

    def __hash__(self):
        return hash((self._p, self._q, self._g))

    def __repr__(self):
        return 'DomainParameters(L=%d, N=%d)' % (self.l_bits, self.n_bits)

    @property
    def p(self):
        """Return the DSA public modulus"""

        return self._p

    @property
    def q(self):
        """Return the DSA sub-group order"""

        return self._q

    @property
    def g(self):
        """Return the DSA generator"""

        return self._g

    @property
    def l_bits(self):
        """Return the size of p in bits"""

        return self._p.bit_length()

    @property
    def n_bits(self):
        """Return the size of q in bits"""

        return self._q.bit_length()

    @property
    def sig_size(self):
        """Return the size of an encoded signature in bytes"""

        return signature_size(self.n_bits)

    @classmethod
    def from_primes(cls, p, q):
        """Derive the generator for a pair of primes with q | p-1"""

        if not all_ints((p, q)) or p < 3 or q < 2:
            raise DomainParameterError('Invalid DSA primes')

        return cls(p, q, mod_pow(GENERATOR_BASE, (p - 1) // q, p))

    @classmethod
    def generate(cls, l_bits=DEFAULT_L_BITS, n_bits=DEFAULT_N_BITS,
                 provider=None):
        """Generate new domain parameters of the requested sizes

           The primes come from the given provider, which is called
           as provider(l_bits, n_bits) and must return (p, q). By
           default, PyCA is used to generate them.

        """

        if provider is None:
            if (l_bits, n_bits) not in SUPPORTED_PARAMETER_SIZES:
                raise DomainParameterError('Unsupported DSA parameter '
                                           'sizes: L=%s, N=%s' %
                                           (l_bits, n_bits))

            provider = generate_domain_parameters

        logger.debug1('Generating DSA domain parameters, L=%d, N=%d',
                      l_bits, n_bits)

        try:
            p, q = provider(l_bits, n_bits)
        except ValueError as exc:
            raise DomainParameterError('DSA domain parameter generation '
                                       'failed: %s' % exc) from None

        params = cls.from_primes(p, q)
        params.validate(l_bits, n_bits)

        return params

    def validate(self, l_bits=None, n_bits=None):
        """Check that these values form a valid DSA group

           The primality of p and q isn't tested here. The provider
           of the primes is trusted for that.

        """

        p, q, g = self._p, self._q, self._g

        if not all_ints((p, q, g)) or p < 3 or q < 2:
            raise DomainParameterError('Invalid DSA domain parameters')

        if (p - 1) % q:
            raise DomainParameterError('DSA q does not divide p-1')

        if not 1 < g < p:
            raise DomainParameterError('DSA generator out of range')

        if mod_pow(g, q, p) != 1:
            raise DomainParameterError('DSA generator does not have order q')

        if l_bits is not None and p.bit_length() != l_bits:
            raise DomainParameterError('DSA p is %d bits, expected %d' %
                                       (p.bit_length(), l_bits))

        if n_bits is not None and q.bit_length() != n_bits:
            raise DomainParameterError('DSA q is %d bits, expected %d' %
                                       (q.bit_length(), n_bits))


class KeyPair:
    """A DSA private exponent and its public key"""

    __slots__ = ('_x', '_y')

    def __init__(self, x, y):
        self._x = x
        self._y = y

    def __repr__(self):
        return 'KeyPair(y=%#x%s)' % (self._y, '' if self.has_private
                                           else ', cleared')

    @property
    def x(self):
        """Return the DSA private value"""

        if self._x is None:
            raise KeyNotAvailableError('DSA private key has been cleared')

        return self._x

    @property
    def y(self):
        """Return the DSA public value"""

        return self._y

    @property
    def has_private(self):
        """Return whether the private value is still available"""

        return self._x is not None

    @classmethod
    def construct(cls, params, x):
        """Construct a key pair from a known private value"""

        if not isinstance(x, int) or not 0 < x < params.q:
            raise ValueError('DSA private value out of range')

        return cls(x, mod_pow(params.g, x, params.p))

    @classmethod
    def generate(cls, params, rng):
        """Generate a new key pair"""

        return cls.construct(params, rng.random_range(1, params.q))

    def clear(self):
        """Drop the private value"""

        self._x = None


class DSAEngineOptions(Options):
    """DSA engine options

       Options which aren't passed in explicitly are taken from the
       config file(s) given in `config`, and then from built-in
       defaults.

       :param config: (optional)
           Paths to config files to load, or a :class:`DSAConfig`
           object which has already been loaded.
       :param l_bits: (optional)
           The size of p in bits, used when generating parameters.
       :param n_bits: (optional)
           The size of q in bits, used when generating parameters.
       :param hash_alg: (optional)
           The name of the message digest, defaulting to `'sha256'`.
       :param max_sign_retries: (optional)
           The number of signing attempts before giving up.
       :param encoding: (optional)
           The encoding applied to `str` messages, defaulting to UTF-8.
           Characters it can't represent are replaced with `?`.
       :param rng: (optional)
           A callable returning a requested number of secure random
           bytes, defaulting to :func:`os.urandom`.
       :param param_provider: (optional)
           A callable taking `(l_bits, n_bits)` and returning the
           primes `(p, q)`, defaulting to PyCA parameter generation.
       :type config: `list` of `str`, or :class:`DSAConfig`
       :type l_bits: `int`
       :type n_bits: `int`
       :type hash_alg: `str`
       :type max_sign_retries: `int`
       :type encoding: `str`
       :type rng: `callable`
       :type param_provider: `callable`

    """

    # pylint: disable=arguments-differ
    def prepare(self, config=(), l_bits=(), n_bits=(), hash_alg=(),
                max_sign_retries=(), encoding=(), rng=None,
                param_provider=None):
        """Prepare DSA engine configuration options"""

        if not isinstance(config, DSAConfig):
            config = DSAConfig.load(None, config or ())

        sizes = config.get('ParameterSizes', (DEFAULT_L_BITS, DEFAULT_N_BITS))

        self.config = config
        self.l_bits = l_bits if l_bits != () else sizes[0]
        self.n_bits = n_bits if n_bits != () else sizes[1]

        self.hash_alg = hash_alg if hash_alg != () else \
            config.get('HashAlgorithm', DEFAULT_HASH_ALG)

        self.max_sign_retries = max_sign_retries if max_sign_retries != () \
            else config.get('MaxSignRetries', DEFAULT_MAX_SIGN_RETRIES)

        self.encoding = encoding if encoding != () else \
            config.get('Encoding', DEFAULT_ENCODING)

        self.rng = rng
        self.param_provider = param_provider

        # Fail early on an unknown hash name or text encoding
        MessageDigest(self.hash_alg)

        try:
            codecs.lookup(self.encoding)
        except (LookupError, TypeError):
            raise ValueError('Unknown text encoding: %s' %
                             self.encoding) from None

        if self.max_sign_retries < 1:
            raise ValueError('max_sign_retries must be positive')


class DSAEngine:
    """DSA signing and verification engine

       Engines are normally created by :func:`initialize`, or by
       :meth:`construct` when the domain parameters and private value
       are already known. The private value never leaves the engine.
       Only the public value `y` can be retrieved.

       An engine may be used as a context manager, releasing its
       private value on exit.

    """

    _engine_ids = itertools.count(1)

    def __init__(self, params, key, options):
        self._engine_id = next(self._engine_ids)
        self._params = params
        self._key = key
        self._options = options
        self._digest = MessageDigest(options.hash_alg)
        self._rng = SecureRandom(options.rng)
        self._encoding = options.encoding
        self._max_sign_retries = options.max_sign_retries

        self._logger = logger.get_child(context='engine=%d' %
                                        self._engine_id)

        self._logger.debug1('Initialized DSA engine, L=%d, N=%d, hash %s',
                            params.l_bits, params.n_bits, self._digest.name)

    def __enter__(self):
        return self

    def __exit__(self, *exc_info):
        self.close()

    def __repr__(self):
        return 'DSAEngine(L=%d, N=%d, hash=%s)' % \
            (self._params.l_bits, self._params.n_bits, self._digest.name)

    @classmethod
    def generate(cls, options=None, **kwargs):
        """Generate new domain parameters and a key pair"""

        options = DSAEngineOptions(options, **kwargs)

        params = DomainParameters.generate(options.l_bits, options.n_bits,
                                           options.param_provider)

        return cls.from_parameters(params, options)

    @classmethod
    def from_parameters(cls, params, options=None, **kwargs):
        """Generate a new key pair on existing domain parameters"""

        options = DSAEngineOptions(options, **kwargs)
        key = KeyPair.generate(params, SecureRandom(options.rng))

        return cls(params, key, options)

    @classmethod
    def construct(cls, p, q, g, x, options=None, **kwargs):
        """Construct an engine from known parameters and private value"""

        options = DSAEngineOptions(options, **kwargs)

        params = DomainParameters(p, q, g)
        params.validate()

        return cls(params, KeyPair.construct(params, x), options)

    @property
    def domain_parameters(self):
        """Return the domain parameters used by this engine"""

        return self._params

    @property
    def public_key(self):
        """Return the DSA public value y"""

        return self._key.y

    @property
    def n_bits(self):
        """Return the size of q in bits"""

        return self._params.n_bits

    @property
    def sig_size(self):
        """Return the size of an encoded signature in bytes"""

        return self._params.sig_size

    @property
    def hash_alg(self):
        """Return the name of the message digest"""

        return self._digest.name

    @property
    def logger(self):
        """A logger associated with this engine"""

        return self._logger

    def _hash(self, message):
        """Return the digest of a message as an integer

           When the digest is wider than q, only its leftmost bits
           are used.

           Characters in a text message which the configured encoding
           can't represent are replaced rather than raising an error.

        """

        if isinstance(message, str):
            message = message.encode(self._encoding, errors='replace')

        digest = self._digest.digest(message)
        h = int.from_bytes(digest, 'big')

        excess = 8 * len(digest) - self.n_bits

        return h >> excess if excess > 0 else h

    def generate_key(self):
        """Return a new engine with a fresh key on the same parameters"""

        return self.from_parameters(self._params, self._options)

    def export_public_key(self):
        """Return the public key as a PyCA-backed DSA public key"""

        p, q, g = self._params.p, self._params.q, self._params.g

        return DSAPublicKey.construct(p, q, g, self._key.y)

    def sign(self, message):
        """Return a signature of a message

           The message may be a byte string or a `str`, which is
           encoded using the engine's configured text encoding. The
           signature is returned as r || s, each `N/8` bytes.

        """

        x = self._key.x
        p, q, g = self._params.p, self._params.q, self._params.g
        h = self._hash(message)

        for attempt in range(1, self._max_sign_retries + 1):
            k = self._rng.random_range(1, q)

            r = mod_pow(g, k, p) % q
            if not r:
                self._logger.debug2('Signing attempt %d: r is zero', attempt)
                continue

            try:
                k_inv = mod_inverse(k, q)
            except NoInverseError:
                self._logger.debug2('Signing attempt %d: nonce not '
                                    'invertible', attempt)
                continue

            s = k_inv * (h + x * r) % q
            if not s:
                self._logger.debug2('Signing attempt %d: s is zero', attempt)
                continue

            return encode_signature(r, s, self.n_bits)

        self._logger.error('Signing failed after %s',
                           plural(self._max_sign_retries, 'attempt'))

        raise SignatureRetriesExceeded('No valid DSA signature after %s' %
                                       plural(self._max_sign_retries,
                                              'attempt'))

    def sign_der(self, message):
        """Return a DER-encoded signature of a message"""

        return signature_to_der(self.sign(message), self.n_bits)

    def verify(self, message, signature):
        """Verify an r || s signature of a message

           Returns `True` if the signature is valid. Malformed or out
           of range signatures return `False` rather than raising.

        """

        try:
            r, s = decode_signature(signature, self.n_bits)
        except MalformedSignatureError:
            return False

        p, q, g = self._params.p, self._params.q, self._params.g

        if not (0 < r < q and 0 < s < q):
            return False

        try:
            w = mod_inverse(s, q)
        except NoInverseError:
            return False

        h = self._hash(message)

        u1 = h * w % q
        u2 = r * w % q
        v = mod_pow(g, u1, p) * mod_pow(self._key.y, u2, p) % p % q

        return v == r

    def verify_der(self, message, der):
        """Verify a DER-encoded signature of a message"""

        try:
            signature = der_to_signature(der, self.n_bits)
        except (MalformedSignatureError, OverflowError):
            return False

        return self.verify(message, signature)

    def close(self):
        """Release the private value held by this engine

           The engine can still verify signatures after it is closed.

        """

        if self._key.has_private:
            self._key.clear()
            self._logger.debug1('Released DSA private key')


def initialize(l_bits=(), n_bits=(), *, options=None, **kwargs):
    """Create a DSA engine with new domain parameters and keys

       :param l_bits: (optional)
           The size of p in bits, defaulting to 2048
       :param n_bits: (optional)
           The size of q in bits, defaulting to 256
       :param options: (optional)
           Options to use when creating the engine. If not specified,
           they are built from keyword arguments, as described in
           :class:`DSAEngineOptions`.
       :type l_bits: `int`
       :type n_bits: `int`
       :type options: :class:`DSAEngineOptions`

       :returns: :class:`DSAEngine`

       :raises: :exc:`DomainParameterError` if the domain parameters
                can't be generated or are invalid

    """

    if l_bits != ():
        kwargs['l_bits'] = l_bits

    if n_bits != ():
        kwargs['n_bits'] = n_bits

    return DSAEngine.generate(options, **kwargs)
