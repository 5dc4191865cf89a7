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

"""Unit tests for parsing dsasig config files"""

import os

from pathlib import Path

import dsasig

from dsasig.config import ConfigParseError, DSAConfig
from dsasig.constants import DEFAULT_MAX_SIGN_RETRIES

from .util import TempDirTestCase, TOY_P, TOY_Q, make_toy_engine


class _TestConfig(TempDirTestCase):
    """Unit tests for config module"""

    def _parse_config(self, config_data, path='config'):
        """Return a config object based on the specified data"""

        with open(path, 'w') as f:
            f.write(config_data)

        return DSAConfig.load(None, path)

    def test_blank_and_comment(self):
        """Test blank and comment lines"""

        config = self._parse_config('\n#HashAlgorithm sha1\n   \n')
        self.assertIsNone(config.get('HashAlgorithm'))

    def test_set_int(self):
        """Test integer config option"""

        config = self._parse_config('MaxSignRetries 10')
        self.assertEqual(config.get('MaxSignRetries'), 10)

        config = self._parse_config('MaxSignRetries 10\nMaxSignRetries 20')
        self.assertEqual(config.get('MaxSignRetries'), 10)

    def test_set_string(self):
        """Test string config option"""

        config = self._parse_config('HashAlgorithm sha512')
        self.assertEqual(config.get('HashAlgorithm'), 'sha512')

        config = self._parse_config('HashAlgorithm sha1\n'
                                    'HashAlgorithm sha512')
        self.assertEqual(config.get('HashAlgorithm'), 'sha1')

        config = self._parse_config('Encoding none')
        self.assertIsNone(config.get('Encoding', 'utf-8'))

    def test_parameter_sizes(self):
        """Test domain parameter sizes config option"""

        config = self._parse_config('ParameterSizes 3072 256')
        self.assertEqual(config.get('ParameterSizes'), (3072, 256))

        config = self._parse_config('ParameterSizes 3072 256\n'
                                    'ParameterSizes 1024 160')
        self.assertEqual(config.get('ParameterSizes'), (3072, 256))

    def test_case_insensitive(self):
        """Test that keywords are case-insensitive"""

        config = self._parse_config('hashalgorithm sha384\n'
                                    'MAXSIGNRETRIES 5')
        self.assertEqual(config.get('HashAlgorithm'), 'sha384')
        self.assertEqual(config.get('MaxSignRetries'), 5)

    def test_unknown(self):
        """Test unknown config option"""

        config = self._parse_config('XXX')
        self.assertIsNone(config.get('XXX'))

    def test_include(self):
        """Test include config option"""

        os.makedirs('conf.d', exist_ok=True)

        with open(Path('conf.d', 'sizes.conf'), 'w') as f:
            f.write('ParameterSizes 1024 160\nHashAlgorithm sha1')

        config = self._parse_config('HashAlgorithm sha256\n'
                                    'Include conf.d/*.conf')
        self.assertEqual(config.get('ParameterSizes'), (1024, 160))
        self.assertEqual(config.get('HashAlgorithm'), 'sha256')

    def test_include_absolute(self):
        """Test include config option with an absolute path"""

        with open('abs.conf', 'w') as f:
            f.write('MaxSignRetries 7')

        config = self._parse_config('Include %s' % Path('abs.conf').resolve())
        self.assertEqual(config.get('MaxSignRetries'), 7)

    def test_multiple_files(self):
        """Test loading more than one config file"""

        with open('first', 'w') as f:
            f.write('HashAlgorithm sha1')

        with open('second', 'w') as f:
            f.write('HashAlgorithm sha512\nMaxSignRetries 9')

        config = DSAConfig.load(None, ['first', 'second'])
        self.assertEqual(config.get('HashAlgorithm'), 'sha1')
        self.assertEqual(config.get('MaxSignRetries'), 9)

    def test_errors(self):
        """Test config parsing errors"""

        for desc, config_data in (
                ('Missing value', 'HashAlgorithm'),
                ('Missing N', 'ParameterSizes 2048'),
                ('Invalid integer', 'MaxSignRetries x'),
                ('Invalid size', 'ParameterSizes 2048 x'),
                ('Non-positive integer', 'MaxSignRetries 0'),
                ('Extra data', 'HashAlgorithm sha1 sha256'),
                ('Unbalanced quotes', 'HashAlgorithm "sha1')):
            with self.subTest(desc):
                with self.assertRaises(ConfigParseError):
                    self._parse_config(config_data)

    def test_error_location(self):
        """Test that parse errors report the file and line"""

        with self.assertRaisesRegex(ConfigParseError, r'config line 3'):
            self._parse_config('\nHashAlgorithm sha1\nMaxSignRetries x')

    def test_error_is_value_error(self):
        """Test that parse errors are reported as ValueError"""

        with self.assertRaises(ValueError):
            self._parse_config('MaxSignRetries -5')


class _TestEngineConfig(TempDirTestCase):
    """Unit tests for engine options taken from config files"""

    def test_defaults(self):
        """Test engine options with no config"""

        options = dsasig.DSAEngineOptions()

        self.assertEqual((options.l_bits, options.n_bits), (2048, 256))
        self.assertEqual(options.hash_alg, 'sha256')
        self.assertEqual(options.encoding, 'utf-8')
        self.assertEqual(options.max_sign_retries, DEFAULT_MAX_SIGN_RETRIES)

    def test_config_values(self):
        """Test engine options taken from a config file"""

        with open('dsa.conf', 'w') as f:
            f.write('ParameterSizes 3072 256\nHashAlgorithm sha384\n'
                    'MaxSignRetries 50\nEncoding latin-1\n')

        options = dsasig.DSAEngineOptions(config='dsa.conf')

        self.assertEqual((options.l_bits, options.n_bits), (3072, 256))
        self.assertEqual(options.hash_alg, 'sha384')
        self.assertEqual(options.max_sign_retries, 50)
        self.assertEqual(options.encoding, 'latin-1')

    def test_explicit_overrides_config(self):
        """Test keyword arguments taking precedence over config"""

        with open('dsa.conf', 'w') as f:
            f.write('ParameterSizes 3072 256\nHashAlgorithm sha384\n')

        options = dsasig.DSAEngineOptions(config=['dsa.conf'], l_bits=1024,
                                          n_bits=160, hash_alg='sha1')

        self.assertEqual((options.l_bits, options.n_bits), (1024, 160))
        self.assertEqual(options.hash_alg, 'sha1')

    def test_loaded_config(self):
        """Test passing an already loaded config object"""

        with open('dsa.conf', 'w') as f:
            f.write('HashAlgorithm sha512\n')

        config = DSAConfig.load(None, 'dsa.conf')
        engine = make_toy_engine(config=config)

        self.assertEqual(engine.hash_alg, 'sha512')

    def test_bad_config_hash(self):
        """Test an unknown hash name in a config file"""

        with open('dsa.conf', 'w') as f:
            f.write('HashAlgorithm whirlpool\n')

        with self.assertRaises(ValueError):
            dsasig.DSAEngine.construct(TOY_P, TOY_Q, 4, 1, config='dsa.conf')

    def test_bad_config_encoding(self):
        """Test a missing or unknown text encoding in a config file"""

        for encoding in ('none', 'no-such-codec'):
            with self.subTest(encoding=encoding):
                with open('dsa.conf', 'w') as f:
                    f.write('Encoding %s\n' % encoding)

                with self.assertRaises(ValueError):
                    make_toy_engine(config='dsa.conf')

    def test_bad_encoding_option(self):
        """Test an invalid text encoding passed in directly"""

        for encoding in (None, 'no-such-codec'):
            with self.subTest(encoding=encoding):
                with self.assertRaises(ValueError):
                    dsasig.DSAEngineOptions(encoding=encoding)
