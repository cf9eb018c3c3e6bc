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


class Headers:
    """Request headers attached to every call made through a client."""

    def __init__(self, args=None, **kwargs):
        self._heads = {}
        self.build(args, **kwargs)

    def build(self, args=None, **kwargs):
        """Adds or replaces headers. Returns self for chaining."""
        pairs = dict(args or {})
        pairs.update(kwargs)
        for key, value in pairs.items():
            self._heads[key] = value
        return self

    def fetch(self, key, default=None):
        if key in self._heads:
            return self._heads[key]
        if default is None:
            raise KeyError(f"key not found {key}")
        return default()

    def remove(self, key):
        """Removes a header and returns its previous value, or None."""
        return self._heads.pop(key, None)

    def items(self):
        return self._heads.items()

    def merge(self, other):
        """Merges other into these headers; other's values win on collision."""
        if not isinstance(other, Headers):
            raise TypeError(f"Headers type expected, {type(other).__name__} given")
        self._heads.update(other.to_h())
        return self

    __add__ = merge

    def to_h(self) -> dict:
        return dict(self._heads)

    def __contains__(self, key):
        return key in self._heads

    def __len__(self):
        return len(self._heads)

    def __repr__(self):
        # Authorization values stay out of reprs and logs
        shown = {k: ("***" if str(k).lower() == "authorization" else v) for k, v in self._heads.items()}
        return f"<Headers {shown!r}>"
