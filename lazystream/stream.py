from __future__ import annotations

from .suppliers import memoize, supplier
from .trampoline import Trampoline, done, pending, run_to_completion
from .types import *

# --- derived operations ---
from .extensions.core import _CoreOperations

# --- accessors ---
from .extensions.terminal import TerminalAccessor

_REPR_LIMIT = 20

# --- base stream implementation ---

class _BaseStream(Generic[T]):
    """
    a stream is either the shared empty instance or a node holding a pair of
    memoized thunks: one for the head value and one for the rest of the stream.
    """

    __slots__ = ('_cell',)

    def __init__(self, cell: Optional[Pair[Thunk[T], Thunk['Stream[T]']]]):
        object.__setattr__(self, '_cell', cell)

    def __setattr__(self, *args, **kwargs):
        raise TypeError(f"'{type(self).__name__}' object is immutable")

    def is_empty(self) -> bool:
        return self is EMPTY

    def head(self) -> T:
        """the first element. only the head thunk is evaluated."""
        if self.is_empty():
            raise ValueError("sequence contains no elements")
        return self._cell.one()

    def tail(self) -> 'Stream[T]':
        """the rest of the stream. only the tail thunk is evaluated."""
        if self.is_empty():
            raise ValueError("sequence contains no elements")
        return self._cell.two()

    # --- primitive reducers ---

    def fold_right(self, base: Thunk[U], combine: Callable[[T, Thunk[U]], U]) -> U:
        """
        right fold: combine(head, continuation) where the continuation folds the rest.

        this is plain recursion. the stack depth equals the number of elements
        combine forces through its continuation, so combine should look at the
        head and hand the continuation back unevaluated (as map and take_while do).
        a combine that forces every continuation fails with RecursionError on
        streams deeper than the interpreter recursion limit; use fold_left there.
        """
        if self.is_empty():
            return base()
        head, tail = self._cell
        return combine(head(), lambda: tail().fold_right(base, combine))

    def fold_left(self, base: Thunk[U], step: StepFunction[T, U]) -> U:
        """
        left fold driven by a trampoline, so it runs in constant stack depth.
        step(head, accumulator) returns a Result. a terminal result ends the fold
        immediately with its value; otherwise its value becomes the next accumulator.
        """
        return run_to_completion(_fold_left_step(self, memoize(base), step))

    # --- traversal ---

    def for_each(self, consumer: Consumer[T]) -> None:
        """apply consumer to every element. handles unbounded streams (it just never returns)."""
        current = self
        while not current.is_empty():
            head, tail = current._cell
            consumer(head())
            current = tail()

    def to_list(self) -> List[T]:
        """force the whole (finite) stream into a list"""
        def append_item(item, accumulator):
            items = accumulator()
            items.append(item)
            return Result.continue_with(items)
        return self.fold_left(list, append_item)

    def __iter__(self) -> Iterator[T]:
        current = self
        while not current.is_empty():
            head, tail = current._cell
            yield head()
            current = tail()

    def __repr__(self) -> str:
        # only show what has already been evaluated
        parts = []
        current = self
        while not current.is_empty():
            if len(parts) == _REPR_LIMIT:
                parts.append('...')
                break
            head, tail = current._cell
            parts.append(repr(head()) if head.is_evaluated else '?')
            if not tail.is_evaluated:
                parts.append('...')
                break
            current = tail()
        return f"Stream({', '.join(parts)})"


def _fold_left_step(stream: _BaseStream[T], accumulator: Thunk[U], step: StepFunction[T, U]) -> Trampoline[U]:
    if stream.is_empty():
        return done(accumulator())
    head, tail = stream._cell
    result = step(head(), accumulator)
    if result.terminal:
        return done(result.value)
    value = result.value
    rest = tail()
    # never recurse directly, the trampoline loop takes the next step
    return pending(lambda: _fold_left_step(rest, supplier(value), step))

# --- main stream class ---

class Stream(
    _BaseStream[T],
    _CoreOperations[T]
):
    """a lazy, memoized, immutable linked sequence."""

    __slots__ = ()

    @property
    def to(self) -> TerminalAccessor[T]:
        return TerminalAccessor(self)


EMPTY: Stream[Any] = Stream(None)


def empty() -> Stream[Any]:
    """the canonical empty stream, always the same instance"""
    return EMPTY


def cons(head: Thunk[T], tail: Thunk[Stream[T]]) -> Stream[T]:
    """build a node from a head function and a tail function. neither is called here."""
    if head is None or tail is None:
        raise ValueError("head and tail functions cannot be None")
    return Stream(Pair(memoize(head), memoize(tail)))
