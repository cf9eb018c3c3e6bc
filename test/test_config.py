#-
# #%L
# Trav3 Python Client
# %%
# Copyright (C) 2025 Contrast Security, Inc.
# %%
# Contact: support@contrastsecurity.com
# License: Commercial
# NOTICE: This Software and the patented inventions embodied within may only be
# used as part of Contrast Security's commercial offerings. Even though it is
# made available through public repositories, use of this Software is subject to
# the applicable End User Licensing Agreement found at
# https://www.contrastsecurity.com/enduser-terms-0317a or as otherwise agreed
# between Contrast Security and the End User. The Software may not be reverse
# engineered, modified, repackaged, sold, redistributed or otherwise used in a
# way not consistent with the End User License Agreement.
# #L%
#

import io
import unittest
from unittest.mock import patch

# Test setup imports (path is set up by conftest.py)
from trav3 import utils
from trav3.config import Trav3Config


class TestTrav3Config(unittest.TestCase):
    """Tests for configuration loaded from environment variables"""

    def test_defaults(self):
        config = Trav3Config(env_vars={})
        self.assertEqual(config.api_endpoint, 'https://api.travis-ci.org')
        self.assertIsNone(config.token)
        self.assertEqual(config.default_limit, 25)
        self.assertEqual(config.timeout, 30.0)
        self.assertFalse(config.debug_mode)

    @patch('sys.stdout', new_callable=io.StringIO)
    @patch.object(utils, 'DEBUG_MODE', False)
    def test_values_from_env_vars(self, mock_stdout):
        config = Trav3Config(env_vars={
            'TRAV3_API_ENDPOINT': 'https://api.travis-ci.com',
            'TRAVIS_TOKEN': 'abc',
            'TRAV3_DEFAULT_LIMIT': '50',
            'TRAV3_TIMEOUT': '2.5',
            'TRAV3_DEBUG_MODE': 'TRUE',
        })
        self.assertEqual(config.api_endpoint, 'https://api.travis-ci.com')
        self.assertEqual(config.token, 'abc')
        self.assertEqual(config.default_limit, 50)
        self.assertEqual(config.timeout, 2.5)
        self.assertTrue(config.debug_mode)

    @patch('sys.stdout', new_callable=io.StringIO)
    @patch.object(utils, 'DEBUG_MODE', False)
    def test_debug_mode_enables_debug_output(self, mock_stdout):
        Trav3Config(env_vars={'TRAV3_DEBUG_MODE': 'true'})

        self.assertTrue(utils.DEBUG_MODE)
        self.assertIn('Debug Mode: True', mock_stdout.getvalue())
        utils.debug_log('GET', 'https://api.travis-ci.org/repo/1')
        self.assertIn('GET https://api.travis-ci.org/repo/1', mock_stdout.getvalue())

    @patch('sys.stdout', new_callable=io.StringIO)
    @patch.object(utils, 'DEBUG_MODE', False)
    def test_debug_mode_off_stays_quiet(self, mock_stdout):
        Trav3Config(env_vars={'TRAV3_DEBUG_MODE': 'false'})

        self.assertFalse(utils.DEBUG_MODE)
        self.assertEqual(mock_stdout.getvalue(), '')

    def test_empty_values_fall_back_to_defaults(self):
        config = Trav3Config(env_vars={'TRAVIS_TOKEN': '', 'TRAV3_DEFAULT_LIMIT': ''})
        self.assertIsNone(config.token)
        self.assertEqual(config.default_limit, 25)

    def test_reads_os_environ_when_no_env_vars_given(self):
        with patch.dict('os.environ', {'TRAVIS_TOKEN': 'from-env'}, clear=True):
            config = Trav3Config()
        self.assertEqual(config.token, 'from-env')

    @patch('trav3.config.trav3_config.log')
    def test_invalid_limit_uses_default(self, mock_log):
        config = Trav3Config(env_vars={'TRAV3_DEFAULT_LIMIT': 'lots'})
        self.assertEqual(config.default_limit, 25)
        mock_log.assert_called_once()
        self.assertTrue(mock_log.call_args[1]['is_warning'])

    @patch('trav3.config.trav3_config.log')
    def test_limit_is_clamped(self, mock_log):
        self.assertEqual(Trav3Config(env_vars={'TRAV3_DEFAULT_LIMIT': '0'}).default_limit, 1)
        self.assertEqual(Trav3Config(env_vars={'TRAV3_DEFAULT_LIMIT': '500'}).default_limit, 100)
        self.assertEqual(mock_log.call_count, 2)

    @patch('trav3.config.trav3_config.log')
    def test_invalid_timeout_uses_default(self, mock_log):
        self.assertEqual(Trav3Config(env_vars={'TRAV3_TIMEOUT': 'soon'}).timeout, 30.0)
        self.assertEqual(Trav3Config(env_vars={'TRAV3_TIMEOUT': '-1'}).timeout, 30.0)
        self.assertEqual(mock_log.call_count, 2)


if __name__ == '__main__':
    unittest.main()
