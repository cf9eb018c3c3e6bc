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

"""Exceptions raised by the Travis CI client.

Validation errors are raised before any request is made. Responses with a
non-success status are not exceptions; they come back as ``RequestError``
results.
"""


class Trav3Error(Exception):
    """Base class for all errors raised by this package."""


class InvalidRepository(Trav3Error):
    def __init__(self, repository=None):
        super().__init__(
            "The repository format was invalid. "
            "You must either provide the digit name for the repository, "
            "or `user/repo` or `user%2Frepo` as the name."
        )
        self.repository = repository


class InvalidAPIEndpoint(Trav3Error):
    def __init__(self, endpoint=None, valid_endpoints=None):
        valid = valid_endpoints or []
        super().__init__(
            f"The API endpoint must be one of {', '.join(repr(v) for v in valid)}; got {endpoint!r}"
        )
        self.endpoint = endpoint


class InvalidArgument(Trav3Error):
    """An endpoint argument had the wrong type or an unknown value."""


class EnvVarError(Trav3Error):
    def __init__(self):
        super().__init__(
            "You must provide the keys `name`, `value`, and `public` "
            "where name and value are given String values and public is a Boolean."
        )


class Unimplemented(Trav3Error):
    def __init__(self, message="This feature is not implemented."):
        super().__init__(message)


class InvalidJsonResponse(Trav3Error):
    """The response body could not be parsed as JSON."""

    def __init__(self, status_code, body, url=None):
        super().__init__(f"Invalid JSON in response (HTTP {status_code}) from {url}: {body!r}")
        self.status_code = status_code
        self.body = body
        self.url = url


class KeyNotFound(Trav3Error, KeyError):
    """An object-shaped response node has no such key."""

    def __init__(self, key):
        super().__init__(f"key not found: {key!r}")
        self.key = key

    def __str__(self):
        return self.args[0]


class IndexOutOfRange(Trav3Error, IndexError):
    """A list-shaped response node has no such index."""

    def __init__(self, index, length):
        super().__init__(f"index {index} outside of list bounds: {-length}...{length}")
        self.index = index
        self.length = length


class NotFollowable(Trav3Error):
    """The node carries no ``@href`` to follow."""


class PaginationError(Trav3Error):
    pass


class NotPaginated(PaginationError):
    def __init__(self):
        super().__init__("The response has no @pagination block")


class NoSuchPage(PaginationError):
    def __init__(self, page):
        super().__init__(f"The response has no {page!r} page")
        self.page = page
