"""
Ordered breakpoint stores backing an IntervalMap.

A store maps keys to values in key order and answers nearest-neighbour
queries. Two implementations are provided: ``ListStore`` keeps parallel
sorted lists searched with ``bisect`` and suits small maps, while
``SortedDictStore`` sits on ``sortedcontainers.SortedDict`` for large ones.
"""

from abc import abstractmethod
from bisect import bisect_left, bisect_right
from collections.abc import MutableMapping
from typing import Dict, Generator, Generic, List, Optional, Tuple, Type, TypeVar

from sortedcontainers import SortedDict

from intervalmap.typ import Comparable

K = TypeVar("K", bound=Comparable)  # Key (ordering) type
V = TypeVar("V")  # Value type


class BreakpointStore(MutableMapping, Generic[K, V]):
    """
    An ordered mapping with nearest-neighbour search.

    Iteration yields keys in increasing order. The neighbour queries return a
    ``(key, value)`` pair, or ``None`` when no key qualifies.
    """

    __slots__ = ()

    @abstractmethod
    def floor(self, key: K) -> Optional[Tuple[K, V]]:
        """
        Return the pair with the greatest key less than or equal to ``key``.
        """

    @abstractmethod
    def lower(self, key: K) -> Optional[Tuple[K, V]]:
        """
        Return the pair with the greatest key strictly less than ``key``.
        """

    @abstractmethod
    def higher(self, key: K) -> Optional[Tuple[K, V]]:
        """
        Return the pair with the least key strictly greater than ``key``.
        """

    @abstractmethod
    def remove_between(self, low: Optional[K], high: K) -> int:
        """
        Delete every key strictly between ``low`` and ``high``.

        :param low: Exclusive lower bound, or ``None`` for no lower bound.
        :param high: Exclusive upper bound.
        :return: The number of keys removed.
        """


class ListStore(BreakpointStore[K, V]):
    """Breakpoints in two parallel sorted lists

    Lookups are O(logN); insertions and removals shift the lists and cost
    O(N), which is cheaper than a tree while N stays small.
    """

    __slots__ = ("_keys", "_values")

    def __init__(self) -> None:
        self._keys: List[K] = []
        self._values: List[V] = []

    def _find(self, key: K) -> Tuple[int, bool]:
        """
        Locate the insertion index for ``key`` and whether it is present.
        """
        i = bisect_left(self._keys, key)
        return i, i < len(self._keys) and not key < self._keys[i]

    def __len__(self) -> int:
        return len(self._keys)

    def __iter__(self) -> Generator[K, None, None]:
        yield from self._keys

    def __contains__(self, key: object) -> bool:
        return self._find(key)[1]  # type: ignore

    def __getitem__(self, key: K) -> V:
        i, found = self._find(key)
        if not found:
            raise KeyError(key)
        return self._values[i]

    def __setitem__(self, key: K, value: V) -> None:
        i, found = self._find(key)
        if found:
            self._values[i] = value
        else:
            self._keys.insert(i, key)
            self._values.insert(i, value)

    def __delitem__(self, key: K) -> None:
        i, found = self._find(key)
        if not found:
            raise KeyError(key)
        del self._keys[i]
        del self._values[i]

    def floor(self, key: K) -> Optional[Tuple[K, V]]:
        i = bisect_right(self._keys, key)
        if i == 0:
            return None
        return self._keys[i - 1], self._values[i - 1]

    def lower(self, key: K) -> Optional[Tuple[K, V]]:
        i = bisect_left(self._keys, key)
        if i == 0:
            return None
        return self._keys[i - 1], self._values[i - 1]

    def higher(self, key: K) -> Optional[Tuple[K, V]]:
        i = bisect_right(self._keys, key)
        if i >= len(self._keys):
            return None
        return self._keys[i], self._values[i]

    def remove_between(self, low: Optional[K], high: K) -> int:
        lo = 0 if low is None else bisect_right(self._keys, low)
        hi = bisect_left(self._keys, high)
        if lo >= hi:
            return 0
        del self._keys[lo:hi]
        del self._values[lo:hi]
        return hi - lo


class SortedDictStore(BreakpointStore[K, V]):
    """Breakpoints in a ``SortedDict``

    Keys must be hashable as well as ordered.
    """

    __slots__ = ("_map",)

    def __init__(self) -> None:
        self._map: SortedDict = SortedDict()

    def __len__(self) -> int:
        return len(self._map)

    def __iter__(self) -> Generator[K, None, None]:
        yield from self._map

    def __contains__(self, key: object) -> bool:
        return key in self._map

    def __getitem__(self, key: K) -> V:
        return self._map[key]

    def __setitem__(self, key: K, value: V) -> None:
        self._map[key] = value

    def __delitem__(self, key: K) -> None:
        del self._map[key]

    def floor(self, key: K) -> Optional[Tuple[K, V]]:
        i = self._map.bisect_right(key)
        if i == 0:
            return None
        return self._map.peekitem(i - 1)

    def lower(self, key: K) -> Optional[Tuple[K, V]]:
        i = self._map.bisect_left(key)
        if i == 0:
            return None
        return self._map.peekitem(i - 1)

    def higher(self, key: K) -> Optional[Tuple[K, V]]:
        i = self._map.bisect_right(key)
        if i >= len(self._map):
            return None
        return self._map.peekitem(i)

    def remove_between(self, low: Optional[K], high: K) -> int:
        lo = 0 if low is None else self._map.bisect_right(low)
        hi = self._map.bisect_left(high)
        for _ in range(hi - lo):
            self._map.popitem(lo)
        return max(hi - lo, 0)


STORES: Dict[str, Type[BreakpointStore]] = {
    "list": ListStore,
    "sorteddict": SortedDictStore,
}


def make_store(name: str) -> BreakpointStore:
    """
    Build an empty store by its registered name.

    :param name: One of the keys of ``STORES``.
    """
    try:
        cls = STORES[name]
    except KeyError:
        raise ValueError(
            f"Unknown store {name!r}, expected one of {sorted(STORES)}"
        ) from None
    return cls()
