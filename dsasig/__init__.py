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

"""An implementation of the Digital Signature Algorithm (DSA)"""

from .version import __author__, __author_email__, __url__, __version__

from .config import DSAConfig, ConfigParseError

from .constants import DEFAULT_L_BITS, DEFAULT_N_BITS

from .crypto import DSAPublicKey, get_hash_algs

from .dsa import DomainParameters, DSAEngine, DSAEngineOptions, initialize

from .keyring import DSAKeyRing

from .logging import logger, set_debug_level, set_log_level

from .misc import Error, DomainParameterError, KeyNotAvailableError
from .misc import SignatureRetriesExceeded
from .misc import MalformedSignatureError, NoInverseError
from .misc import egcd, mod_inverse, mod_pow

from .random import SecureRandom

from .signature import encode_signature, decode_signature
from .signature import der_to_signature, signature_to_der
