"""
IntervalMap implementation for assigning values to whole key ranges at once.
"""

from logging import DEBUG
from typing import Any, Generic, Optional, Tuple, TypeVar, Union

from intervalmap import conf
from intervalmap.log import l
from intervalmap.struct.store import BreakpointStore, make_store
from intervalmap.typ import LOWEST, Comparable

K = TypeVar("K", bound=Comparable)  # Key (ordering) type
V = TypeVar("V")  # Value type


class IntervalMap(Generic[K, V]):
    """Map every key of an ordered domain to a value

    The map is a piecewise-constant function stored as breakpoints: a
    breakpoint ``(k, v)`` says that keys from ``k`` up to the next breakpoint
    map to ``v``. The first breakpoint always sits at the domain minimum and no
    two neighbouring breakpoints carry equal values, so memory grows with the
    number of value changes rather than with the size of the domain.

    The breakpoint at the minimum is held apart from the store, so the store
    only ever compares keys the caller supplied.

    Lookups are O(logN). Assigning a range is O(logN + k) where k is the
    number of breakpoints it covers.
    """

    __slots__ = ("_store", "_minimum", "_head")

    def __init__(
        self,
        initial: V,
        minimum: Any = LOWEST,
        store: Optional[Union[str, BreakpointStore]] = None,
    ) -> None:
        """
        Initialize the map so that every key maps to ``initial``.

        :param initial: The value of the whole domain.
        :param minimum: The least key of the domain. Defaults to ``LOWEST``,
            which orders below any key; pass a concrete bound (eg 0 for
            unsigned keys) to reject keys below it.
        :param store: Name of the backing store (see ``STORES``) or an empty
            store instance. Defaults to ``conf.DEFAULT_STORE``.
        """
        if store is None:
            store = conf.DEFAULT_STORE
        if isinstance(store, str):
            store = make_store(store)
        elif len(store):
            raise ValueError(f"Backing store must be empty, it holds {len(store)} keys")

        self._minimum = minimum
        self._store: BreakpointStore[K, V] = store
        self._head = initial  # value of the breakpoint at the minimum

    @property
    def minimum(self) -> Any:
        """
        The least key of the domain, where the first breakpoint lives.
        """
        return self._minimum

    def _check_key(self, key: K) -> None:
        if self._minimum is LOWEST:
            return
        if key < self._minimum:
            l(DEBUG, "Rejecting key %r below domain minimum %r", key, self._minimum)
            raise KeyError(f"Key {key!r} is below the domain minimum {self._minimum!r}")

    def _is_minimum(self, key: K) -> bool:
        # Only called on keys that passed _check_key.
        if self._minimum is LOWEST:
            return key is LOWEST
        return not self._minimum < key

    def _floor(self, key: K) -> V:
        found = self._store.floor(key)
        return self._head if found is None else found[1]

    def _lower(self, key: K) -> Tuple[Optional[K], V]:
        """
        Return the breakpoint before ``key``, with ``None`` standing for the
        minimum.
        """
        found = self._store.lower(key)
        if found is None:
            return None, self._head
        return found

    def assign(self, key_begin: K, key_end: K, value: V) -> None:
        """
        Assign ``value`` to every key in ``[key_begin, key_end)``.

        Keys outside the interval keep their values. An empty or inverted
        interval, ie ``not key_begin < key_end``, changes nothing.

        :param key_begin: First key of the interval.
        :param key_end: First key after the interval.
        :param value: The value.
        """
        if key_end is LOWEST or not key_begin < key_end:
            l(DEBUG, "Empty interval [%r, %r), nothing assigned", key_begin, key_end)
            return
        self._check_key(key_begin)

        store = self._store
        # Value that must resume at key_end, taken before anything moves.
        end_value = self._floor(key_end)

        # Left boundary. An exact breakpoint is overwritten in place and
        # folded into its predecessor if they now agree. None marks the
        # breakpoint at the minimum.
        left: Optional[K]
        if self._is_minimum(key_begin):
            self._head = value
            left = None
        elif key_begin in store:
            store[key_begin] = value
            left = key_begin
            before, before_value = self._lower(key_begin)
            if before_value == value:
                l(DEBUG, "Merging breakpoint %r into its predecessor", key_begin)
                del store[key_begin]
                left = before
        else:
            before, before_value = self._lower(key_begin)
            if before_value != value:
                store[key_begin] = value
                left = key_begin
            else:
                left = before

        # Right boundary.
        if key_end in store:
            if store[key_end] == value:
                l(DEBUG, "Dropping breakpoint %r, it repeats %r", key_end, value)
                del store[key_end]
        elif end_value != value:
            store[key_end] = end_value
            # Only a non-canonical store can leave a follower equal to end_value.
            after = store.higher(key_end)
            if after is not None and after[1] == end_value:
                del store[after[0]]

        # Whatever lies between the boundaries has been overwritten.
        store.remove_between(left, key_end)

    def lookup(self, key: K) -> V:
        """
        Return the value mapped to ``key``.

        :param key: The key to look up.
        """
        if key is LOWEST and self._minimum is LOWEST:
            return self._head
        self._check_key(key)
        return self._floor(key)

    def __getitem__(self, key: K) -> V:
        return self.lookup(key)

    def __len__(self) -> int:
        """
        Return the number of breakpoints.
        """
        return len(self._store) + 1

    def breakpoints(self) -> Tuple[Tuple[K, V], ...]:
        """
        Return a snapshot of the ``(key, value)`` breakpoints in key order.
        """
        return ((self._minimum, self._head),) + tuple(self._store.items())

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self.breakpoints())!r})"
