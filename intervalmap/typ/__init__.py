"""
Type helpers for intervalmap
"""

from intervalmap.typ.comparable import CT, LOWEST, Comparable, Lowest
