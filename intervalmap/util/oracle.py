"""
Brute-force reference model and a seeded cross-check for IntervalMap.

The check replays random assignments over a small integer domain on both an
IntervalMap and a plain list, comparing every key after every call. Runs
are driven by an injected ``random.Random`` so a failing seed reproduces.
"""

from logging import ERROR, INFO
from random import Random
from typing import Any, Generator, List, Optional, Sequence, Union

from intervalmap import conf
from intervalmap.log import l
from intervalmap.struct import BreakpointStore, IntervalMap
from intervalmap.util.replayable import MethodReplayable


class OracleMismatch(Exception):
    """
    An IntervalMap disagreed with the reference model.
    """

    def __init__(
        self, seed: int, index: int, calls: Sequence[MethodReplayable], detail: str
    ) -> None:
        self.seed = seed
        self.index = index
        self.calls = list(calls)
        self.detail = detail
        super().__init__(f"seed {seed}, call #{index} {calls[index]}: {detail}")


class ArrayModel:
    """
    One slot per key of ``range(size)``, updated one key at a time.
    """

    def __init__(self, size: int, initial: Any = 0) -> None:
        self.values: List[Any] = [initial] * size

    def assign(self, key_begin: int, key_end: int, value: Any) -> None:
        for key in range(max(key_begin, 0), min(key_end, len(self.values))):
            self.values[key] = value

    def lookup(self, key: int) -> Any:
        return self.values[key]

    def __len__(self) -> int:
        return len(self.values)


def random_assignments(
    rng: Random, domain: int, rounds: int
) -> Generator[MethodReplayable, None, None]:
    """
    Generate ``rounds`` assign calls with begin, end and value drawn from
    ``range(domain)``. Inverted and empty intervals are left in on purpose.

    :param rng: Source of randomness, seeded by the caller.
    :param domain: Size of the key and value domain.
    :param rounds: Number of calls to generate.
    """
    for _ in range(rounds):
        begin = rng.randrange(domain)
        end = rng.randrange(domain)
        value = rng.randrange(domain)
        yield MethodReplayable("assign", (begin, end, value))


def adjacent_duplicates(imap: IntervalMap) -> List[Any]:
    """
    Return the keys of breakpoints that repeat their predecessor's value.
    """
    points = imap.breakpoints()
    return [
        key for (_, prev), (key, value) in zip(points, points[1:]) if prev == value
    ]


def check_against_model(
    seed: Optional[int] = None,
    domain: Optional[int] = None,
    rounds: Optional[int] = None,
    store: Optional[Union[str, BreakpointStore]] = None,
) -> IntervalMap:
    """
    Cross-check an IntervalMap against ``ArrayModel`` on random assignments.

    Unset arguments fall back to the ``ORACLE_*`` defaults in ``conf``.

    :param seed: Seed for the call generator.
    :param domain: Keys and values are drawn from ``range(domain)``.
    :param rounds: Number of assign calls.
    :param store: Backing store for the map, as accepted by ``IntervalMap``.
    :return: The map after the last call.
    """
    seed = conf.ORACLE_SEED if seed is None else seed
    domain = conf.ORACLE_DOMAIN if domain is None else domain
    rounds = conf.ORACLE_ROUNDS if rounds is None else rounds

    imap: IntervalMap[int, int] = IntervalMap(0, minimum=0, store=store)
    model = ArrayModel(domain, 0)
    calls: List[MethodReplayable] = []

    for index, call in enumerate(random_assignments(Random(seed), domain, rounds)):
        calls.append(call)
        call.replay(imap)
        call.replay(model)

        detail = None
        for key in range(domain):
            got, want = imap.lookup(key), model.lookup(key)
            if got != want:
                detail = f"lookup({key}) returned {got!r}, model has {want!r}"
                break
        else:
            duplicates = adjacent_duplicates(imap)
            if duplicates:
                detail = f"breakpoints {duplicates!r} repeat their predecessor"

        if detail is not None:
            l(ERROR, "Oracle mismatch, seed %d call #%d %s: %s", seed, index, call, detail)
            raise OracleMismatch(seed, index, calls, detail)

    l(
        INFO,
        "Oracle seed %d: %d assignments over %d keys agree, %d breakpoints left",
        seed,
        rounds,
        domain,
        len(imap),
    )
    return imap
