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

import unittest

# Test setup imports (path is set up by conftest.py)
from trav3.options import Options


class TestOptionsBuild(unittest.TestCase):
    """Tests for building query strings"""

    def setUp(self):
        self.opts = Options(a='b', c='d')

    def test_creates_url_friendly_parameter_list(self):
        """Test that options render as a query string"""
        self.assertEqual(str(self.opts), '?a=b&c=d')
        self.assertEqual(self.opts.opts, '?a=b&c=d')

    def test_appends_to_current_options(self):
        """Test that new keys are added at the end"""
        self.opts.build(e='f')
        self.assertEqual(str(self.opts), '?a=b&c=d&e=f')

    def test_existing_key_is_replaced_in_place(self):
        """Test upsert keeps the original position of an existing key"""
        self.opts.build(a='z')
        self.assertEqual(str(self.opts), '?a=z&c=d')

    def test_build_accepts_a_mapping(self):
        """Test that build takes a dict for keys that are not identifiers"""
        self.opts.build({'sort_by': 'id:desc'})
        self.assertEqual(str(self.opts), '?a=b&c=d&sort_by=id:desc')

    def test_booleans_render_lowercase(self):
        """Test that booleans render the way the API expects"""
        opts = Options(include_private=True, active=False)
        self.assertEqual(str(opts), '?include_private=true&active=false')

    def test_empty_options_render_empty_string(self):
        """Test that no options means no query string"""
        self.assertEqual(str(Options()), '')

    def test_build_returns_self(self):
        """Test chaining"""
        self.assertIs(self.opts.build(x=1), self.opts)


class TestOptionsFetch(unittest.TestCase):
    """Tests for fetch and fetch_and_remove"""

    def setUp(self):
        self.opts = Options(a='b', c='d')

    def test_fetches_existing_pair(self):
        self.assertEqual(self.opts.fetch('a'), 'a=b')

    def test_raises_for_missing_key(self):
        with self.assertRaises(KeyError) as context:
            self.opts.fetch('z')
        self.assertIn('key not found', str(context.exception))

    def test_default_is_called_when_missing(self):
        self.assertEqual(self.opts.fetch('z', lambda: 1), 1)

    def test_default_not_called_when_present(self):
        """Test that the default is lazy"""
        def fail():
            raise AssertionError("default should not be evaluated")
        self.assertEqual(self.opts.fetch('a', fail), 'a=b')

    def test_fetch_and_remove(self):
        """Test that fetch_and_remove behaves like fetch and also removes the result"""
        self.assertEqual(self.opts.fetch_and_remove('a'), 'a=b')
        self.assertEqual(len(self.opts.to_h()), 1)
        self.assertNotIn('a', self.opts)


class TestOptionsRemove(unittest.TestCase):
    """Tests for remove and reset"""

    def setUp(self):
        self.opts = Options(a='b', c='d')

    def test_removes_a_parameter(self):
        self.opts.remove('a')
        self.assertEqual(str(self.opts), '?c=d')

    def test_returns_previous_value(self):
        self.assertEqual(self.opts.remove('a'), 'b')

    def test_returns_none_when_absent(self):
        self.assertIsNone(self.opts.remove('z'))

    def test_empty_string_when_all_removed(self):
        self.opts.remove('a')
        self.opts.remove('c')
        self.assertEqual(str(self.opts), '')

    def test_readding_removed_key_goes_to_end(self):
        self.opts.remove('a')
        self.opts.build(a='b')
        self.assertEqual(str(self.opts), '?c=d&a=b')

    def test_reset_removes_all_options(self):
        self.opts.reset()
        self.assertEqual(str(self.opts), '')


class TestOptionsImmutable(unittest.TestCase):
    """Tests for the scoped override"""

    def setUp(self):
        self.opts = Options(limit=25, sort_by='id')

    def test_restores_after_block(self):
        with self.opts.immutable() as opts:
            opts.remove('limit')
            opts.build(branch='master')
            self.assertEqual(str(opts), '?sort_by=id&branch=master')
        self.assertEqual(str(self.opts), '?limit=25&sort_by=id')

    def test_restores_when_block_raises(self):
        with self.assertRaises(RuntimeError):
            with self.opts.immutable() as opts:
                opts.reset()
                raise RuntimeError("boom")
        self.assertEqual(str(self.opts), '?limit=25&sort_by=id')


class TestOptionsMerge(unittest.TestCase):
    """Tests for merging two option sets"""

    def test_merges_two_options_together(self):
        result = Options(w='x') + Options(y='z')
        self.assertIn('w=x&y=z', str(result))

    def test_other_wins_on_collision(self):
        result = Options(limit=25, a='b').merge(Options(limit=10))
        self.assertEqual(result.to_h(), {'limit': '10', 'a': 'b'})

    def test_rejects_other_types(self):
        with self.assertRaises(TypeError):
            Options(a='b') + {'c': 'd'}

    def test_to_h(self):
        self.assertEqual(Options(a='b', c='d').to_h(), {'c': 'd', 'a': 'b'})


if __name__ == '__main__':
    unittest.main()
