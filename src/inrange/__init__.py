from inrange._core import Boundary, Counter, FrozenCounter
from inrange._range import DEFAULT_STEP, Range, in_
from inrange.errors import RangeError, StepError, ZeroStepError
from inrange.log import setup_logging

__all__ = [
    "Counter",
    "FrozenCounter",
    "Boundary",
    "Range",
    "in_",
    "DEFAULT_STEP",

    "RangeError",
    "StepError",
    "ZeroStepError",

    "setup_logging",
]
