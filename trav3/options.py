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

from contextlib import contextmanager


def _render(value) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


class Options:
    """
    Query string options sent with list requests.

    Keys keep the order in which they were first added. Building with an
    existing key replaces its value in place.
    """

    def __init__(self, args=None, **kwargs):
        self._opts = {}
        self.build(args, **kwargs)

    @property
    def opts(self) -> str:
        """The options as a URL query string, or an empty string."""
        if not self._opts:
            return ""
        return "?" + "&".join(f"{key}={value}" for key, value in self._opts.items())

    def build(self, args=None, **kwargs):
        """Adds or replaces options. Returns self for chaining."""
        pairs = dict(args or {})
        pairs.update(kwargs)
        for key, value in pairs.items():
            self._opts[str(key)] = _render(value)
        return self

    def fetch(self, key, default=None):
        """
        Returns the ``key=value`` entry for key.

        Args:
            key: Option name
            default: Optional callable whose result is returned when key is missing

        Raises:
            KeyError: If key is missing and no default was supplied
        """
        key = str(key)
        if key in self._opts:
            return f"{key}={self._opts[key]}"
        if default is None:
            raise KeyError(f"key not found {key}")
        return default()

    def fetch_and_remove(self, key, default=None):
        """Like fetch, and also removes the option."""
        result = self.fetch(key, default)
        self.remove(key)
        return result

    @contextmanager
    def immutable(self):
        """
        Snapshot the options, yield them for temporary changes, and restore
        the snapshot afterwards, even if the block raises.
        """
        snapshot = dict(self._opts)
        try:
            yield self
        finally:
            self._opts = snapshot

    def remove(self, key):
        """Removes an option and returns its previous value, or None."""
        return self._opts.pop(str(key), None)

    def reset(self):
        self._opts = {}
        return self

    def merge(self, other):
        """Merges other into these options; other's values win on collision."""
        if not isinstance(other, Options):
            raise TypeError(f"Options type expected, {type(other).__name__} given")
        return self.build(other.to_h())

    __add__ = merge

    def to_h(self) -> dict:
        return dict(self._opts)

    def __contains__(self, key):
        return str(key) in self._opts

    def __len__(self):
        return len(self._opts)

    def __str__(self):
        return self.opts

    def __repr__(self):
        return f"<Options {self.opts!r}>"
