"""
Utilities for intervalmap
"""

from intervalmap.util.oracle import (
    ArrayModel,
    OracleMismatch,
    adjacent_duplicates,
    check_against_model,
    random_assignments,
)
from intervalmap.util.replayable import MethodReplayable
