"""
A "replayable" is a method name and the args it was called with, so a
sequence of calls can be recorded once and played back against several
objects that share a surface, like an IntervalMap and its reference model.
"""

from dataclasses import dataclass
from typing import Any, Tuple


@dataclass(frozen=True)
class MethodReplayable:
    """
    Replayable method call with arguments
    """

    func: str
    args: Tuple[Any, ...]

    def replay(self, obj: Any) -> Any:
        """
        Replay the method call on ``obj``.
        """
        return getattr(obj, self.func)(*self.args)

    def __str__(self) -> str:
        return f"{self.func}({', '.join(map(repr, self.args))})"
