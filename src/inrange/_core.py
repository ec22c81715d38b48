from __future__ import annotations

from enum import Enum


class Boundary(str, Enum):
    """ Where a counter sits relative to a sentinel, in its direction of travel """
    Before = "before"
    At = "at"
    Past = "past"


def _locate(position: int, boundary: int, step: int) -> Boundary:
    distance = position - boundary
    if distance == 0:
        return Boundary.At
    # a zero step falls into the descending case
    if (distance > 0) == (step > 0):
        return Boundary.Past
    return Boundary.Before


class Counter:
    """
    A lazily evaluated position in an arithmetic sequence.

    The step is signed and fixed at construction; the position moves by `step` on every advance.
    Comparing two counters with `==` is NOT a general equality; it is the sentinel test used to end iteration:
    the left counter is the moving cursor, the right one is the boundary it is travelling towards.
    """
    __slots__ = ("_position", "_step")

    def __init__(self, position: int, step: int):
        self._position = position
        self._step = step

    @property
    def position(self) -> int:
        return self._position

    @position.setter
    def position(self, value: int):
        self._position = value

    @property
    def step(self) -> int:
        return self._step

    @property
    def value(self) -> int:
        return self.position

    def __int__(self) -> int:
        return self.position

    def __index__(self) -> int:
        return self.position

    def copy(self) -> Counter:
        return Counter(self.position, self._step)

    def __copy__(self) -> Counter:
        return self.copy()

    def advance(self) -> Counter:
        self.position += self._step
        return self

    def post_advance(self) -> Counter:
        previous = self.copy()
        self.advance()
        return previous

    def boundary(self, sentinel: Counter) -> Boundary:
        return _locate(self.position, sentinel.position, self._step)

    def reached(self, sentinel: Counter) -> bool:
        return self.boundary(sentinel) is not Boundary.Before

    def __eq__(self, other):
        if not isinstance(other, Counter):
            return NotImplemented
        # True on the advance that moves the cursor onto (or over) the sentinel; False before and after.
        #   Landing exactly on the sentinel keeps this True for one more advance, the previous position being `At`.
        previous = _locate(self.position - self._step, other.position, self._step)
        return self.reached(other) and previous is not Boundary.Past

    def __ne__(self, other):
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    __hash__ = None

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(position={self.position}, step={self._step})"


class FrozenCounter(Counter):
    """ A counter that can be read and compared but never moved; `copy()` gives back a mutable `Counter`. """
    __slots__ = ()

    @property
    def position(self) -> int:
        return self._position

    def advance(self) -> Counter:
        raise AttributeError(f"'{self.__class__.__name__}' cannot be advanced; advance a copy instead")

    def post_advance(self) -> Counter:
        raise AttributeError(f"'{self.__class__.__name__}' cannot be advanced; advance a copy instead")
