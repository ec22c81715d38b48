from __future__ import annotations

from operator import index
from typing import Iterator

import structlog

from inrange._core import Counter, FrozenCounter
from inrange.errors import StepError, ZeroStepError

logger = structlog.get_logger(__name__)

DEFAULT_STEP = 1


class Range:
    """
    A lazy sequence view; iterating it yields `begin`, `begin ± step`, ... stopping before `end` is reached or passed.

    The direction is inferred from the bounds; `step` is only the distance between yielded values.
    Both bounding counters carry the same signed step.
    """
    __slots__ = ("_start", "_end")

    def __init__(self, begin: int, end: int, step: int = DEFAULT_STEP):
        begin, end = index(begin), index(end)
        magnitude = index(step)
        if magnitude < 0:
            logger.warning("Rejected negative step", begin=begin, end=end, step=magnitude)
            raise StepError(magnitude)
        if magnitude == 0 and begin != end:
            logger.warning("Rejected zero step", begin=begin, end=end)
            raise ZeroStepError(begin, end)
        signed_step = magnitude if begin <= end else -magnitude
        self._start = FrozenCounter(begin, signed_step)
        self._end = FrozenCounter(end, signed_step)

    @property
    def step(self) -> int:
        return self._start.step

    def begin(self) -> Counter:
        return self._start.copy()

    def end(self) -> Counter:
        return self._end.copy()

    def cbegin(self) -> FrozenCounter:
        """ The stored start counter, read-only; `begin()` gives an advancing copy. """
        return self._start

    def cend(self) -> FrozenCounter:
        """ The stored sentinel, read-only; `end()` gives an advancing copy. """
        return self._end

    def __iter__(self) -> Iterator[int]:
        cursor = self.begin()
        sentinel = self._end
        while cursor != sentinel:
            yield cursor.post_advance().value

    def __len__(self) -> int:
        if self.step == 0:
            return 0
        distance = abs(self._end.position - self._start.position)
        return -(-distance // abs(self.step))

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self._start.position}, {self._end.position}, {abs(self.step)})"


def in_(begin: int, end: int, step: int = DEFAULT_STEP) -> Range:
    """ Iterate `for i in in_(0, 10, 2)`; `in` itself is reserved. """
    return Range(begin, end, step)
