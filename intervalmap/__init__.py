"""
Top level exports from intervalmap
"""

import intervalmap.log
from intervalmap.log import l
from intervalmap.struct import IntervalMap, make_store
from intervalmap.typ import LOWEST, Comparable
