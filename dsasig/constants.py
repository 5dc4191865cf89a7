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

"""DSA constants"""

# pylint: disable=bad-whitespace

# Default domain parameter sizes, in bits
DEFAULT_L_BITS           = 2048
DEFAULT_N_BITS           = 256

# (L, N) pairs the default domain parameter provider can produce
SUPPORTED_PARAMETER_SIZES = ((1024, 160), (2048, 256),
                             (3072, 256), (4096, 256))

# Default message digest
DEFAULT_HASH_ALG         = 'sha256'

# Default text encoding for string messages
DEFAULT_ENCODING         = 'utf-8'

# Upper bound on signing attempts before the RNG is considered broken
DEFAULT_MAX_SIGN_RETRIES = 1000

# Base used to derive the generator, g = h^((p-1)/q) mod p
GENERATOR_BASE           = 2

# Extra bits drawn when sampling a range, to keep the rejection rate low
RANGE_OVERSAMPLE_BITS    = 8

# pylint: enable=bad-whitespace
