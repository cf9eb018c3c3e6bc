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

from trav3.errors import NoSuchPage, NotPaginated
from trav3.utils import debug_log

PAGINATION = "@pagination"


class Pagination:
    """Fetches sibling pages of a paginated list response."""

    def __init__(self, travis, result):
        self._travis = travis
        self._result = result

    def next(self):
        return self._get(self._action("next"))

    def first(self):
        return self._get(self._action("first"))

    def last(self):
        return self._get(self._action("last"))

    def _action(self, action):
        if self._result.get(PAGINATION) is None:
            raise NotPaginated()
        href = self._result.dig(PAGINATION, action, "@href")
        if not isinstance(href, str):
            raise NoSuchPage(action)
        debug_log(f"Following {action} page: {href}")
        return href

    def _get(self, path):
        # The page href already carries its own offset and limit
        return self._travis.get_path(path)
