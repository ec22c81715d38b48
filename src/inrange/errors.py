from typing import Any


def _print_step(msg: str, step: Any = None):
    if step is None:
        return msg + "!"
    return msg + f"; got `{step}`!"


class RangeError(Exception):
    pass


class StepError(RangeError, ValueError):
    def __init__(self, step: int = None, *args):
        super().__init__(*args)
        self.step = step

    def __str__(self):
        return _print_step("Step must be a non-negative magnitude", self.step)


class ZeroStepError(StepError):
    def __init__(self, begin: int, end: int, *args):
        super().__init__(0, *args)
        self.begin = begin
        self.end = end

    def __str__(self):
        return f"Step must not be zero; the range `{self.begin}` -> `{self.end}` would never end!"
