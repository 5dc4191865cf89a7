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

"""Parser for dsasig config files

   Config files use the same keyword/argument syntax as OpenSSH config
   files. Keywords are case-insensitive, the first value set for an
   option wins, and unrecognized keywords are ignored. For example::

       # Default to 3072-bit domain parameters
       ParameterSizes 3072 256
       HashAlgorithm sha256
       MaxSignRetries 100
       Include conf.d/*.conf

"""

import shlex

from pathlib import Path, PurePath


class ConfigParseError(ValueError):
    """Configuration parsing exception"""


class DSAConfig:
    """Settings from a dsasig config file"""

    _handlers = {}

    def __init__(self):
        self._path = ''
        self._line_no = 0
        self._options = {}

    def _error(self, reason, *args):
        """Raise a configuration parsing error"""

        raise ConfigParseError('%s line %s: %s' % (self._path, self._line_no,
                                                   reason % args))

    def _include(self, option, args):
        """Read config from a list of other config files"""

        # pylint: disable=unused-argument

        for pattern in args:
            path = Path(pattern)

            if path.anchor:
                pattern = str(Path(*path.parts[1:]))
                path = Path(path.anchor)
            else:
                path = Path(self._path).parent

            for path in sorted(path.glob(pattern)):
                self.parse(path)

        args.clear()

    def _set_int(self, option, args):
        """Set a positive integer config option"""

        value = args.pop(0)

        try:
            value = int(value)
        except ValueError:
            self._error('Invalid %s integer value: %s', option, value)

        if value <= 0:
            self._error('%s must be positive: %d', option, value)

        if option not in self._options:
            self._options[option] = value

    def _set_string(self, option, args):
        """Set a string config option"""

        value = args.pop(0)

        if value.lower() == 'none':
            value = None

        if option not in self._options:
            self._options[option] = value

    def _set_parameter_sizes(self, option, args):
        """Set the (L, N) domain parameter sizes"""

        if len(args) < 2:
            self._error('Missing %s N value', option)

        try:
            sizes = int(args.pop(0)), int(args.pop(0))
        except ValueError:
            self._error('Invalid %s integer value', option)

        if option not in self._options:
            self._options[option] = sizes

    def parse(self, path):
        """Parse a dsasig config file and save its declarations"""

        parent_path, parent_line_no = self._path, self._line_no

        self._path = path
        self._line_no = 0

        with open(path) as file:
            for line in file:
                self._line_no += 1

                try:
                    args = shlex.split(line)
                except ValueError as exc:
                    self._error(str(exc))

                if not args or args[0][:1] == '#':
                    continue

                option = args.pop(0)
                loption = option.lower()

                try:
                    option, handler = self._handlers[loption]
                except KeyError:
                    continue

                if not args:
                    self._error('Missing %s value', option)

                handler(self, option, args)

                if args:
                    self._error('Extra data at end: %s', ' '.join(args))

        self._path, self._line_no = parent_path, parent_line_no

    @classmethod
    def load(cls, config, config_paths):
        """Load a list of dsasig config files into a config object"""

        if not config:
            config = cls()

        if isinstance(config_paths, (str, bytes, PurePath)):
            config_paths = [config_paths]

        for path in config_paths:
            config.parse(path)

        return config

    def get(self, option, default=None):
        """Get the value of a config option"""

        return self._options.get(option, default)

    # pylint: disable=bad-whitespace

    _handlers = {option.lower(): (option, handler) for option, handler in (
        ('Include',          _include),

        ('Encoding',         _set_string),
        ('HashAlgorithm',    _set_string),
        ('MaxSignRetries',   _set_int),
        ('ParameterSizes',   _set_parameter_sizes)
    )}
