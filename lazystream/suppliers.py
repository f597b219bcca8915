from __future__ import annotations
import logging
import threading
from .types import *

logger = logging.getLogger(__name__)

_UNSET = object()


class Memoized(Generic[T]):
    """
    wraps a zero-argument function so it runs at most once.
    the first successful call caches the value, later calls (from any thread)
    return the cached value. a raised exception is not cached, so the next
    call retries the function.

    the lock is reentrant: a function that forces its own thunk on the same
    thread recurses until RecursionError instead of waiting on itself.
    """

    __slots__ = ('_func', '_value', '_lock')

    def __init__(self, func: Thunk[T]):
        self._func = func
        self._value = _UNSET
        self._lock = threading.RLock()

    @property
    def is_evaluated(self) -> bool:
        return self._value is not _UNSET

    def get(self) -> T:
        value = self._value
        if value is not _UNSET:
            return value
        with self._lock:
            # another thread may have finished while we waited
            if self._value is _UNSET:
                try:
                    self._value = self._func()
                except Exception:
                    logger.debug("memoized function %r raised, result not cached", self._func)
                    raise
                # the closure is no longer needed once the value is cached
                self._func = None
            return self._value

    __call__ = get

    def __repr__(self) -> str:
        if self.is_evaluated:
            return f"Memoized({self._value!r})"
        return "Memoized(<pending>)"


def memoize(func: Thunk[T]) -> Memoized[T]:
    """wrap func in a Memoized, unless it already is one"""
    if func is None:
        raise ValueError("cannot memoize None")
    if isinstance(func, Memoized):
        return func
    if not callable(func):
        raise TypeError(f"expected a zero-argument callable, got {type(func).__name__}")
    return Memoized(func)


def supplier(value: T) -> Thunk[T]:
    """a function that always returns value"""
    return lambda: value


def tap(func: Thunk[T], consumer: Consumer[T]) -> Thunk[T]:
    """a function that evaluates func, hands the value to consumer, then returns it"""
    def tapped():
        value = func()
        consumer(value)
        return value
    return tapped
