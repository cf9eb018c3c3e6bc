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

"""Navigation over parsed JSON from the Travis CI API.

A ``ResponseCollection`` wraps one JSON object or list. Any object or list
taken out of it comes back wrapped again, bound to the same client, so
lookups chain and any nested ``@href`` can be followed. Scalars come back
as-is and a missing key or index comes back as ``None``.
"""

from trav3.errors import KeyNotFound, IndexOutOfRange, NotFollowable

HREF = "@href"

_MISSING = object()


def wrap(travis, value):
    """Wraps JSON objects and lists; returns scalars unchanged."""
    if isinstance(value, (dict, list)):
        return ResponseCollection(travis, value)
    return value


class ResponseCollection:
    """
    A JSON object or list with uniform keyed or indexed access.

    Objects are looked up by string key, lists by integer index (negative
    indices count from the end). Falsy values such as False, 0, "" and null
    are present values; only a missing key or an out-of-range index is
    absent.
    """

    def __init__(self, travis, collection):
        if not isinstance(collection, (dict, list)):
            raise TypeError(f"JSON object or list expected, {type(collection).__name__} given")
        self._travis = travis
        self._collection = collection
        self._hash = isinstance(collection, dict)

    def is_hash(self) -> bool:
        """True for a JSON object, False for a JSON list."""
        return self._hash

    @property
    def raw(self):
        """The wrapped JSON node."""
        return self._collection

    def _lookup(self, target):
        if self._hash:
            return self._collection.get(target, _MISSING)
        if isinstance(target, bool) or not isinstance(target, int):
            return _MISSING
        size = len(self._collection)
        if -size <= target < size:
            return self._collection[target]
        return _MISSING

    def _not_found(self, target):
        if self._hash:
            return KeyNotFound(target)
        if isinstance(target, bool) or not isinstance(target, int):
            return TypeError(f"list indices must be integers, not {type(target).__name__}")
        return IndexOutOfRange(target, len(self._collection))

    def get(self, target):
        """Returns the value at key or index, or None when absent."""
        value = self._lookup(target)
        if value is _MISSING:
            return None
        return wrap(self._travis, value)

    def fetch(self, target, default=None):
        """
        Returns the value at key or index.

        Args:
            target: Key for objects, integer index for lists
            default: Optional zero-argument callable; its result is returned
                (wrapped if it is an object or list) when target is absent

        Raises:
            KeyNotFound: Object has no such key and no default was given
            IndexOutOfRange: List has no such index and no default was given
        """
        value = self._lookup(target)
        if value is not _MISSING:
            return wrap(self._travis, value)
        if default is None:
            raise self._not_found(target)
        return wrap(self._travis, default())

    def __getitem__(self, target):
        return self.fetch(target)

    def dig(self, *path, strict=False):
        """
        Descends through nested objects and lists one step per path element.

        Stops at the first scalar or absent value and returns it, ignoring the
        rest of the path. With strict=True a missing step raises instead of
        returning None.
        """
        if not path:
            raise TypeError("dig() requires at least one key or index")

        head, rest = path[0], path[1:]
        step = self.fetch(head) if strict else self.get(head)
        if rest and isinstance(step, ResponseCollection):
            return step.dig(*rest, strict=strict)
        return step

    def each(self, visit):
        """
        Calls visit for every entry.

        Objects pass each key and its raw value. Lists pass each item,
        wrapped when it is an object or list.
        """
        if self._hash:
            for key, value in self._collection.items():
                visit(key, value)
        else:
            for item in self:
                visit(item)
        return self

    def __iter__(self):
        if self._hash:
            return iter(list(self._collection.items()))
        return (wrap(self._travis, item) for item in self._collection)

    def first(self):
        if self._hash:
            return None
        return self.get(0)

    def last(self):
        if self._hash:
            return None
        return self.get(-1)

    def follow(self, idx=None):
        """
        Fetches the resource an ``@href`` points to.

        On an object, follows its own ``@href``. On a list, idx selects the
        item whose ``@href`` is followed. The current query options of the
        client are sent along.

        Returns:
            Success or RequestError for the followed resource

        Raises:
            NotFollowable: The object, or the selected item, has no @href
            TypeError: idx was omitted on a list
            ValueError: idx was given on an object
        """
        if self._hash:
            if idx is not None:
                raise ValueError("follow() on an object takes no index")
            href = self._collection.get(HREF)
            if not isinstance(href, str):
                raise NotFollowable(f"No {HREF} to follow in object with keys {self.keys()}")
            return self._travis.get_path_with_opts(href)

        if idx is None:
            raise TypeError("follow() on a list requires an index")
        item = self.fetch(idx)
        if not isinstance(item, ResponseCollection) or not item.is_hash():
            raise NotFollowable(f"Item {idx} is not an object with an {HREF}")
        return item.follow()

    def count(self) -> int:
        return len(self._collection)

    def __len__(self):
        return len(self._collection)

    def keys(self) -> list:
        return list(self._collection.keys()) if self._hash else []

    def values(self) -> list:
        return list(self._collection.values()) if self._hash else []

    def items(self) -> list:
        return list(self._collection.items()) if self._hash else []

    def has_key(self, key) -> bool:
        return self._hash and key in self._collection

    def __contains__(self, key):
        return self.has_key(key)

    def is_empty(self) -> bool:
        return not self._collection

    def __eq__(self, other):
        if not isinstance(other, ResponseCollection):
            return NotImplemented
        return self._travis is other._travis and self._collection == other._collection

    __hash__ = None

    def __repr__(self):
        if self._hash:
            return f"<ResponseCollection keys = {self.keys()}>"
        return f"<ResponseCollection count = {self.count()}>"
