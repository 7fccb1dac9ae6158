"""Insertion-ordered associative container backing every board lookup.

WHY: Every lookup in the board (top-level symbol → category, image →
spoken text) needs unique keys and a stable display order. The order in
which symbols were first added is the order they appear on screen, and
that order must survive value updates and unrelated removals.

HOW: A growable array of slots scanned linearly. Each slot is either an
occupied _Slot(key, value) or None (never used, or cleared by remove).
New keys go into the next never-used slot, so slot order is first-insertion
order. When that slot would be past the end of the array, the occupied
slots are compacted into a fresh array, doubling the capacity if the
occupied slots alone fill it.

RULES:
- Keys are compared by equality, not identity, and need not be hashable
- set() on an existing key replaces the value in place (order unchanged)
- remove() clears the slot; a later set() of the same key appends it at the end
- size() always equals the number of occupied slots
- Capacity only ever grows; removals never shrink the backing array
- get()/remove() on a missing key raise KeyNotFound
- Do not mutate the map while iterating over it
"""

from __future__ import annotations

from typing import Any, Generic, Iterator, List, Optional, Tuple, TypeVar

from aac_board.errors import KeyNotFound

K = TypeVar("K")
V = TypeVar("V")

DEFAULT_CAPACITY = 16
"""Initial number of slots in a new OrderedMap."""


class _Slot(Generic[K, V]):
    """One occupied key/value slot."""

    __slots__ = ("key", "value")

    def __init__(self, key: K, value: V) -> None:
        self.key = key
        self.value = value


class _KeysView(Generic[K]):
    """Lazy, restartable view over the keys of an OrderedMap.

    Each call to iter() starts a fresh pass in insertion order, so the
    same view can be iterated any number of times.
    """

    def __init__(self, owner: "OrderedMap[K, Any]") -> None:
        self._owner = owner

    def __iter__(self) -> Iterator[K]:
        for slot in self._owner._occupied():
            yield slot.key

    def __len__(self) -> int:
        return self._owner.size()

    def __repr__(self) -> str:
        return "{}({!r})".format(type(self).__name__, list(self))


class OrderedMap(Generic[K, V]):
    """Resizable, insertion-ordered map from unique keys to values.

    Supports both the explicit method names (set, get, has_key, remove,
    size, keys_in_order) and the usual Python protocols (m[k], k in m,
    del m[k], len(m), iter(m)).
    """

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        if capacity < 1:
            raise ValueError("capacity must be at least 1, got {}".format(capacity))
        self._slots: List[Optional[_Slot[K, V]]] = [None] * capacity
        self._next = 0  # index of the first never-used slot
        self._size = 0

    # -- internals ---------------------------------------------------------

    def _find(self, key: K) -> int:
        """Return the slot index holding key, or -1."""
        for i in range(self._next):
            slot = self._slots[i]
            if slot is not None and slot.key == key:
                return i
        return -1

    def _occupied(self) -> Iterator[_Slot[K, V]]:
        for i in range(self._next):
            slot = self._slots[i]
            if slot is not None:
                yield slot

    def _grow(self) -> None:
        """Compact occupied slots into a new array, doubling if it is full.

        The relative order of occupied slots is preserved, so the logical
        iteration order does not change.
        """
        occupied: List[Optional[_Slot[K, V]]] = list(self._occupied())
        capacity = len(self._slots)
        if len(occupied) >= capacity:
            capacity *= 2
        self._slots = occupied + [None] * (capacity - len(occupied))
        self._next = len(occupied)

    # -- public API ----------------------------------------------------------

    @property
    def capacity(self) -> int:
        """Current number of slots in the backing array."""
        return len(self._slots)

    def set(self, key: K, value: V) -> None:
        """Insert key with value, or replace the value of an existing key."""
        index = self._find(key)
        if index >= 0:
            self._slots[index].value = value  # type: ignore[union-attr]
            return
        if self._next == len(self._slots):
            self._grow()
        self._slots[self._next] = _Slot(key, value)
        self._next += 1
        self._size += 1

    def get(self, key: K) -> V:
        """Return the value mapped to key.

        Raises:
            KeyNotFound: If key is not present.
        """
        index = self._find(key)
        if index < 0:
            raise KeyNotFound(key)
        return self._slots[index].value  # type: ignore[union-attr]

    def has_key(self, key: K) -> bool:
        return self._find(key) >= 0

    def remove(self, key: K) -> V:
        """Remove key and return the value it was mapped to.

        Raises:
            KeyNotFound: If key is not present.
        """
        index = self._find(key)
        if index < 0:
            raise KeyNotFound(key)
        value = self._slots[index].value  # type: ignore[union-attr]
        self._slots[index] = None
        self._size -= 1
        return value

    def size(self) -> int:
        return self._size

    def keys_in_order(self) -> _KeysView[K]:
        """Keys in first-insertion order, as a view that can be re-iterated."""
        return _KeysView(self)

    def values(self) -> List[V]:
        return [slot.value for slot in self._occupied()]

    def items(self) -> List[Tuple[K, V]]:
        return [(slot.key, slot.value) for slot in self._occupied()]

    # -- Python protocols ----------------------------------------------------

    def __len__(self) -> int:
        return self._size

    def __contains__(self, key: object) -> bool:
        return self.has_key(key)  # type: ignore[arg-type]

    def __iter__(self) -> Iterator[K]:
        return iter(self.keys_in_order())

    def __getitem__(self, key: K) -> V:
        return self.get(key)

    def __setitem__(self, key: K, value: V) -> None:
        self.set(key, value)

    def __delitem__(self, key: K) -> None:
        self.remove(key)

    def __repr__(self) -> str:
        body = ", ".join("{!r}: {!r}".format(k, v) for k, v in self.items())
        return "{}({{{}}})".format(type(self).__name__, body)
