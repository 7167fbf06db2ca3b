"""
Default config for intervalmap.

Everything here can be overridden per call with keyword arguments; these are
only the values used when a caller says nothing.
"""

DEFAULT_STORE = "sorteddict"  # backing store used by IntervalMap()

ORACLE_DOMAIN = 10  # keys and values are drawn from range(ORACLE_DOMAIN)
ORACLE_ROUNDS = 2048  # assign calls per oracle run
ORACLE_SEED = 0
