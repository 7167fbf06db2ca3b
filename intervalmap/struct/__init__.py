"""
Data structures for intervalmap
"""

from intervalmap.struct.intervalmap import IntervalMap
from intervalmap.struct.store import (
    STORES,
    BreakpointStore,
    ListStore,
    SortedDictStore,
    make_store,
)
