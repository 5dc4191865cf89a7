#!/usr/bin/env python3
#
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

import dsasig, sys

from cryptography.hazmat.primitives.hashes import SHA256

message = ' '.join(sys.argv[1:]).encode('utf-8') or b'Hello, world!'

with dsasig.initialize(2048, 256, hash_alg='sha256') as engine:
    der = engine.sign_der(message)
    pub_key = engine.export_public_key()

    print('Verified by PyCA:', pub_key.verify(message, der, SHA256()))
