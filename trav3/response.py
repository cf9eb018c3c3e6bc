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

import json

from trav3.errors import InvalidJsonResponse, Unimplemented
from trav3.pagination import Pagination
from trav3.response_collection import ResponseCollection
from trav3.utils import log, truncate


class Response:
    """
    The parsed result of one API request.

    Navigation methods act on the parsed JSON body. Transport details
    (status_code, headers, body, url) are read from the underlying
    ``requests.Response``.
    """

    def __init__(self, travis, response):
        """
        Args:
            travis: The client the request was made through
            response: A ``requests.Response``

        Raises:
            InvalidJsonResponse: If the body is not valid JSON
        """
        self._travis = travis
        self._response = response
        try:
            parsed = json.loads(response.text)
        except json.JSONDecodeError as e:
            log(f"Error decoding JSON response (HTTP {response.status_code}): {truncate(response.text)}", is_error=True)
            raise InvalidJsonResponse(response.status_code, response.text, getattr(response, "url", None)) from e
        self._collection = ResponseCollection(travis, parsed)

    def success(self) -> bool:
        raise Unimplemented()

    def failure(self) -> bool:
        raise Unimplemented()

    # --- Transport metadata ---

    @property
    def response(self):
        return self._response

    @property
    def status_code(self) -> int:
        return self._response.status_code

    @property
    def headers(self):
        return self._response.headers

    @property
    def body(self) -> str:
        return self._response.text

    @property
    def url(self):
        return self._response.url

    @property
    def reason(self):
        return self._response.reason

    # --- JSON navigation ---

    @property
    def collection(self) -> ResponseCollection:
        return self._collection

    @property
    def raw(self):
        return self._collection.raw

    def is_hash(self) -> bool:
        return self._collection.is_hash()

    def get(self, target):
        return self._collection.get(target)

    def fetch(self, target, default=None):
        return self._collection.fetch(target, default)

    def __getitem__(self, target):
        return self._collection[target]

    def dig(self, *path, strict=False):
        return self._collection.dig(*path, strict=strict)

    def each(self, visit):
        self._collection.each(visit)
        return self

    def __iter__(self):
        return iter(self._collection)

    def first(self):
        return self._collection.first()

    def last(self):
        return self._collection.last()

    def follow(self, idx=None):
        return self._collection.follow(idx)

    def count(self) -> int:
        return self._collection.count()

    def __len__(self):
        return len(self._collection)

    def keys(self) -> list:
        return self._collection.keys()

    def values(self) -> list:
        return self._collection.values()

    def items(self) -> list:
        return self._collection.items()

    def has_key(self, key) -> bool:
        return self._collection.has_key(key)

    def __contains__(self, key):
        return key in self._collection

    def is_empty(self) -> bool:
        return self._collection.is_empty()

    def __repr__(self):
        return f"<{type(self).__name__} Response: keys = {self.keys()}>"


class Success(Response):
    """A response with status 200, 201 or 202."""

    @property
    def page(self) -> Pagination:
        """Navigation to the first, next and last pages of a list response."""
        return Pagination(self._travis, self)

    def success(self) -> bool:
        return True

    def failure(self) -> bool:
        return False


class RequestError(Response):
    """A response with any other status; its JSON error body stays navigable."""

    def success(self) -> bool:
        return False

    def failure(self) -> bool:
        return True
