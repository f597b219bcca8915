"""
a minimal trampoline: logically recursive code returns a pending step
instead of calling itself, and run_to_completion drives the steps in a loop
so the call stack never grows with the number of steps.
"""
from __future__ import annotations
import logging
from .errors import UnsupportedOperationError
from .types import *

logger = logging.getLogger(__name__)


class Trampoline(Generic[T]):
    """either done with a result, or pending with a function producing the next step"""

    __slots__ = ('_next', '_result', '_is_done')

    def __init__(self, next_step: Optional[Thunk['Trampoline[T]']], result: Optional[T], is_done: bool):
        self._next = next_step
        self._result = result
        self._is_done = is_done

    @property
    def is_done(self) -> bool:
        return self._is_done

    @property
    def result(self) -> T:
        if not self._is_done:
            raise UnsupportedOperationError("a pending trampoline has no result yet")
        return self._result

    def advance(self) -> 'Trampoline[T]':
        """compute the next step"""
        if self._is_done:
            raise UnsupportedOperationError("cannot advance a completed trampoline")
        return self._next()

    def run(self) -> T:
        return run_to_completion(self)

    def __repr__(self) -> str:
        if self._is_done:
            return f"Trampoline.done({self._result!r})"
        return "Trampoline.pending(...)"


def done(value: T) -> Trampoline[T]:
    return Trampoline(None, value, True)


def pending(next_step: Thunk[Trampoline[T]]) -> Trampoline[T]:
    if next_step is None:
        raise ValueError("a pending trampoline needs a next step")
    return Trampoline(next_step, None, False)


def run_to_completion(step: Trampoline[T]) -> T:
    """advance until done and return the result. may never return if the steps never finish."""
    steps = 0
    while not step.is_done:
        step = step.advance()
        steps += 1
    if logger.isEnabledFor(logging.DEBUG):
        logger.debug("trampoline completed after %d steps", steps)
    return step.result
