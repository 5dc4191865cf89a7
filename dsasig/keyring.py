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

"""A collection of DSA keys sharing one set of domain parameters"""

from .dsa import DomainParameters, DSAEngine, DSAEngineOptions, KeyPair
from .logging import logger


class DSAKeyRing:
    """DSA keys indexed by key identifier

       Every key in the ring is generated on the same domain
       parameters, and each is held by its own :class:`DSAEngine`.
       Identifiers can be any hashable value.

    """

    def __init__(self, params, options=None, **kwargs):
        params.validate()

        self._params = params
        self._options = DSAEngineOptions(options, **kwargs)
        self._engines = {}
        self._logger = logger.get_child(context='keyring')

    def __enter__(self):
        return self

    def __exit__(self, *exc_info):
        self.close()

    def __contains__(self, key_id):
        return key_id in self._engines

    def __iter__(self):
        return iter(list(self._engines))

    def __len__(self):
        return len(self._engines)

    @classmethod
    def create(cls, l_bits=(), n_bits=(), *, options=None, **kwargs):
        """Create an empty key ring with new domain parameters"""

        if l_bits != ():
            kwargs['l_bits'] = l_bits

        if n_bits != ():
            kwargs['n_bits'] = n_bits

        options = DSAEngineOptions(options, **kwargs)

        params = DomainParameters.generate(options.l_bits, options.n_bits,
                                           options.param_provider)

        return cls(params, options)

    @property
    def domain_parameters(self):
        """Return the domain parameters shared by keys in this ring"""

        return self._params

    def _add_engine(self, key_id, engine):
        """Add an engine to the ring under a new identifier"""

        if key_id in self._engines:
            engine.close()
            raise ValueError('Key %r already exists' % (key_id,))

        self._engines[key_id] = engine
        self._logger.debug1('Added key %r', key_id)

        return engine.public_key

    def add_key(self, key_id):
        """Generate a new key and return its public value"""

        return self._add_engine(key_id, DSAEngine.from_parameters(
            self._params, self._options))

    def import_key(self, key_id, x):
        """Add a key with a known private value and return its public value"""

        key = KeyPair.construct(self._params, x)

        return self._add_engine(key_id, DSAEngine(self._params, key,
                                                  self._options))

    def remove_key(self, key_id):
        """Remove a key, releasing its private value"""

        self._engines.pop(key_id).close()
        self._logger.debug1('Removed key %r', key_id)

    def get_engine(self, key_id):
        """Return the engine holding a key"""

        return self._engines[key_id]

    def public_key(self, key_id):
        """Return the public value of a key"""

        return self._engines[key_id].public_key

    def sign(self, key_id, message):
        """Sign a message with a key"""

        return self._engines[key_id].sign(message)

    def verify(self, key_id, message, signature):
        """Verify a signature of a message against a key

           Returns `False` if the key identifier is unknown.

        """

        engine = self._engines.get(key_id)

        return engine.verify(message, signature) if engine else False

    def close(self):
        """Remove all keys, releasing their private values"""

        for engine in self._engines.values():
            engine.close()

        self._engines.clear()
