"""
Comparable type annotation and the unbounded-below key marker
"""
from abc import ABCMeta, abstractmethod
from typing import Any, TypeVar


class Comparable(metaclass=ABCMeta):
    """
    Type hint for key types ordered by ``<``. Use like:

    ```
    K = TypeVar("K", bound=Comparable)
    ```
    """

    @abstractmethod
    def __lt__(self, other: Any) -> bool:
        ...


class Lowest:
    """
    A key that orders below every other value and equals only itself.

    Python keys like ``int`` have no queryable minimum, so an interval map
    over them anchors its first breakpoint here instead.
    """

    __slots__ = ()
    _instance = None

    def __new__(cls) -> "Lowest":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __lt__(self, other: Any) -> bool:
        return other is not self

    def __le__(self, other: Any) -> bool:
        return True

    def __gt__(self, other: Any) -> bool:
        return False

    def __ge__(self, other: Any) -> bool:
        return other is self

    def __eq__(self, other: Any) -> bool:
        return other is self

    def __hash__(self) -> int:
        return hash(Lowest)

    def __reduce__(self) -> str:
        return "LOWEST"

    def __repr__(self) -> str:
        return "LOWEST"


LOWEST = Lowest()

CT = TypeVar("CT", bound=Comparable)
