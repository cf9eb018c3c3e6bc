"""Test helpers package for the trav3 test suite.

This package provides HTTP fakes and client builders shared by the tests.
"""

from .http_helpers import (
    REQUEST_PATCH,
    TEST_ENDPOINT,
    TEST_REPOSITORY,
    load_fixture,
    make_response,
    make_travis,
    patch_requests,
    requested_method,
    requested_url,
)

__all__ = [
    'REQUEST_PATCH',
    'TEST_ENDPOINT',
    'TEST_REPOSITORY',
    'load_fixture',
    'make_response',
    'make_travis',
    'patch_requests',
    'requested_method',
    'requested_url',
]
