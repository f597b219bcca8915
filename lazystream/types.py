from typing import (
    TypeVar, Generic, Callable, Iterator, Iterable, Any, Optional, Union,
    Dict, List, Tuple, Set, Type
)

T = TypeVar('T')
U = TypeVar('U')
K = TypeVar('K')
V = TypeVar('V')
S = TypeVar('S')

Thunk = Callable[[], T]
Predicate = Callable[[T], bool]
Selector = Callable[[T], U]
KeySelector = Callable[[T], K]
Consumer = Callable[[T], Any]
Accumulator = Callable[[U, T], U]


class Pair(Generic[T, U]):
    """immutable two-slot container, neither slot may be None"""

    __slots__ = ('_one', '_two')

    def __init__(self, one: T, two: U):
        if one is None or two is None:
            raise ValueError("pair slots cannot be None")
        object.__setattr__(self, '_one', one)
        object.__setattr__(self, '_two', two)

    @classmethod
    def of(cls, one: T, two: U) -> 'Pair[T, U]':
        return cls(one, two)

    @property
    def one(self) -> T: return self._one

    @property
    def two(self) -> U: return self._two

    def __iter__(self) -> Iterator[Any]:
        # allows `value, state = pair`
        yield self._one
        yield self._two

    def __setattr__(self, *args, **kwargs):
        raise TypeError(f"'{type(self).__name__}' object is immutable")

    def __repr__(self) -> str:
        return f"Pair({self._one!r}, {self._two!r})"


class Result(Generic[T]):
    """
    the outcome of a single left-fold step.
    a terminal result stops the fold with its value, a non-terminal one
    becomes the accumulator for the next element.
    """

    __slots__ = ('_value', '_terminal')

    def __init__(self, value: T, terminal: bool):
        if value is None:
            raise ValueError("result value cannot be None")
        object.__setattr__(self, '_value', value)
        object.__setattr__(self, '_terminal', bool(terminal))

    @classmethod
    def continue_with(cls, value: T) -> 'Result[T]':
        return cls(value, False)

    @classmethod
    def stop_with(cls, value: T) -> 'Result[T]':
        return cls(value, True)

    @classmethod
    def of(cls, flag: bool) -> 'Result[bool]':
        """terminal when the flag is set, carrying the flag itself"""
        return cls(flag, flag)

    @property
    def value(self) -> T: return self._value

    @property
    def terminal(self) -> bool: return self._terminal

    def __setattr__(self, *args, **kwargs):
        raise TypeError(f"'{type(self).__name__}' object is immutable")

    def __repr__(self) -> str:
        kind = "stop" if self._terminal else "continue"
        return f"Result.{kind}_with({self._value!r})"


StepFunction = Callable[[T, Thunk[U]], Result[U]]
