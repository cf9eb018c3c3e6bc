"""Trav3 Python Client

A client for the Travis CI v3 REST API. Responses wrap the returned JSON so
nested objects and lists can be navigated, hyperlinked resources (``@href``)
followed, and paginated listings paged through.

The library is organized into modules:
- travis: the client, one method per API resource or action
- rest: HTTP transport built on requests
- response: Success and RequestError results
- response_collection: navigation over parsed JSON
- pagination: first, next and last pages of list responses
- options / headers: query options and request headers
- config: configuration from environment variables
- errors: exception types

Example usage:
    ```python
    from trav3 import Travis

    travis = Travis("danielpclark/trav3")
    builds = travis.builds()
    for build in builds["builds"]:
        print(build["id"], build["state"])

    repo = builds["builds"].first()["repository"].follow()
    next_page = builds.page.next()
    ```
"""

from trav3.config import Trav3Config
from trav3.errors import (
    EnvVarError,
    IndexOutOfRange,
    InvalidAPIEndpoint,
    InvalidArgument,
    InvalidJsonResponse,
    InvalidRepository,
    KeyNotFound,
    NoSuchPage,
    NotFollowable,
    NotPaginated,
    PaginationError,
    Trav3Error,
    Unimplemented,
)
from trav3.headers import Headers
from trav3.options import Options
from trav3.pagination import Pagination
from trav3.response import RequestError, Response, Success
from trav3.response_collection import ResponseCollection
from trav3.travis import Travis

__version__ = Trav3Config.VERSION

__all__ = [
    "Travis",
    "Trav3Config",
    "Options",
    "Headers",
    "Response",
    "Success",
    "RequestError",
    "ResponseCollection",
    "Pagination",
    "Trav3Error",
    "InvalidRepository",
    "InvalidAPIEndpoint",
    "InvalidArgument",
    "EnvVarError",
    "Unimplemented",
    "InvalidJsonResponse",
    "KeyNotFound",
    "IndexOutOfRange",
    "NotFollowable",
    "PaginationError",
    "NotPaginated",
    "NoSuchPage",
]
