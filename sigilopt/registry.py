"""
Option registry: sole owner of descriptor storage.

Descriptors live in an append-only arena; the short-name and long-name lookups
map keys to arena indices, and caller handles hold an index too. Re-registering
a key only repoints the lookup, so a handle issued earlier keeps reading its own
descriptor and reports itself as stale.
"""
from .options import Option


class Handle:
    """
    Caller-side reference to a registered descriptor.

    Attribute reads (passed, value, values, count, short, long, help, ...) are
    forwarded to the descriptor, resolved through the registry on every access.
    """
    __slots__ = ("_registry", "_index")

    def __init__(self, registry, index, /):
        self._registry = registry
        self._index = index

    @property
    def descriptor(self):
        return self._registry.resolve(self._index)

    @property
    def stale(self):
        """
        True once neither the short nor the long name maps to this descriptor.
        """
        return not self._registry.reachable(self._index)

    def __getattr__(self, name):
        if name.startswith("_"):
            raise AttributeError(name)
        return getattr(self.descriptor, name)

    def __eq__(self, other):
        if not isinstance(other, Handle):
            return NotImplemented
        return self._registry is other._registry and self._index == other._index

    def __hash__(self):
        return hash((id(self._registry), self._index))

    def __repr__(self):
        return "handle(%r%s)" % (self.descriptor, ", stale" if self.stale else "")

    def __rich_repr__(self):
        yield self.descriptor
        yield "stale", self.stale, False


class Registry:
    """
    Short-name and long-name lookups over a single descriptor arena.

    Rules
    - last registration for a key wins; there is no removal.
    - a key identifies at most one descriptor at any time.
    - iteration yields every still-reachable descriptor once, in registration order.
    """

    def __init__(self):
        self._arena = []
        self._by_short = {}
        self._by_long = {}

    def register(self, option, /):
        if not isinstance(option, Option):
            raise TypeError("register() argument must be an option descriptor")
        index = len(self._arena)
        self._arena.append(option)
        self._by_short[option.short] = index
        self._by_long[option.long] = index
        return Handle(self, index)

    def resolve(self, index, /):
        return self._arena[index]

    def reachable(self, index, /):
        option = self._arena[index]
        return self._by_short.get(option.short) == index or self._by_long.get(option.long) == index

    def short(self, char, /):
        """
        descriptor registered under the short character, or None.
        """
        try:
            return self._arena[self._by_short[char]]
        except KeyError:
            return None

    def long(self, name, /):
        """
        descriptor registered under the long name, or None.
        """
        try:
            return self._arena[self._by_long[name]]
        except KeyError:
            return None

    def __iter__(self):
        for index, option in enumerate(self._arena):
            if self.reachable(index):
                yield option

    def __len__(self):
        return sum(1 for _ in self)

    def __contains__(self, key):
        return key in self._by_short or key in self._by_long


__all__ = (
    "Handle",
    "Registry",
)
