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

try:
    with dsasig.initialize() as engine:
        message = input('Input message: ')

        signature = engine.sign(message)
        print('\nSignature:', signature.hex().upper(), end='\n\n')

        print('Valid:', engine.verify(message, signature))
except (EOFError, dsasig.Error) as exc:
    sys.exit('DSA signing failed: ' + str(exc))
