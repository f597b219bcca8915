from __future__ import annotations
import operator
import typing
from ..suppliers import supplier, tap
from ..types import *

if typing.TYPE_CHECKING:
    from ..stream import Stream


class _CoreOperations(Generic[T]):
    """lazy operations, all built from fold_right / fold_left or from the node structure itself"""

    __slots__ = ()

    def fold_right_to_stream(self: 'Stream[T]', combine: Callable[[T, Thunk['Stream[U]']], 'Stream[U]']) -> 'Stream[U]':
        """right fold that reduces to a stream, starting from the empty stream"""
        from ..stream import empty
        return self.fold_right(empty, combine)

    def fold_left_to_stream(self: 'Stream[T]', combine: Callable[[T, Thunk['Stream[U]']], 'Stream[U]']) -> 'Stream[U]':
        """left fold that reduces to a stream. forces the whole (finite) source."""
        from ..stream import empty
        return self.fold_left(empty, lambda item, accumulator: Result.continue_with(combine(item, accumulator)))

    def take(self: 'Stream[T]', count: int) -> 'Stream[T]':
        """at most the first 'count' elements. nothing past the last taken element is evaluated."""
        from ..stream import cons, empty
        count = operator.index(count)
        if count <= 0 or self.is_empty():
            return empty()
        head, tail = self._cell
        if count == 1:
            return cons(head, empty)
        return cons(head, lambda: tail().take(count - 1))

    def peek(self: 'Stream[T]', consumer: Consumer[T]) -> 'Stream[T]':
        """
        an equivalent stream that passes each element to consumer when it is first
        demanded downstream. elements that are never demanded never reach consumer.
        """
        from ..stream import cons, empty
        if self.is_empty():
            return empty()
        head, tail = self._cell
        return cons(tap(head, consumer), lambda: tail().peek(consumer))

    def take_while(self: 'Stream[T]', predicate: Predicate[T]) -> 'Stream[T]':
        """elements from the start while predicate holds. stops at the first failing element."""
        from ..stream import cons, empty
        return self.fold_right_to_stream(
            lambda item, rest: cons(supplier(item), rest) if predicate(item) else empty())

    def map(self: 'Stream[T]', func: Selector[T, U]) -> 'Stream[U]':
        """transform each element. func runs only when a mapped element is demanded."""
        from ..stream import cons
        return self.fold_right_to_stream(lambda item, rest: cons(lambda: func(item), rest))

    def filter(self: 'Stream[T]', predicate: Predicate[T]) -> 'Stream[T]':
        """
        keep elements matching predicate.

        skipped elements are passed over by recursing into the fold continuation,
        so a run of consecutive non-matching elements costs stack depth. very long
        runs (hundreds of elements with the default recursion limit) raise RecursionError.
        """
        from ..stream import cons
        return self.fold_right_to_stream(
            lambda item, rest: cons(supplier(item), rest) if predicate(item) else rest())

    def append(self: 'Stream[T]', other: 'Stream[T]') -> 'Stream[T]':
        """this stream's elements followed by other's"""
        from ..stream import _BaseStream
        if not isinstance(other, _BaseStream):
            raise TypeError(f"can only append a stream, got {type(other).__name__}")
        return self._append_lazily(supplier(other))

    def _append_lazily(self: 'Stream[T]', other: Thunk['Stream[T]']) -> 'Stream[T]':
        # other is only evaluated once this stream is exhausted
        from ..stream import cons
        return self.fold_right(other, lambda item, rest: cons(supplier(item), rest))

    def flat_map(self: 'Stream[T]', func: Selector[T, Union['Stream[U]', Iterable[U]]]) -> 'Stream[U]':
        """
        map each element to a sub-stream and flatten. func may also return a plain
        iterable. consecutive empty sub-streams recurse like skipped elements in filter.
        """
        return self.fold_right_to_stream(lambda item, rest: _as_stream(func(item))._append_lazily(rest))

    def reverse(self: 'Stream[T]') -> 'Stream[T]':
        """the elements in reverse order. forces the whole (finite) source."""
        from ..stream import cons
        return self.fold_left_to_stream(lambda item, accumulator: cons(supplier(item), accumulator))

    def exists(self: 'Stream[T]', predicate: Predicate[T]) -> bool:
        """true as soon as one element matches. terminates on infinite streams that eventually match."""
        return self.fold_left(lambda: False, lambda item, _: Result.of(bool(predicate(item))))

    def for_all(self: 'Stream[T]', predicate: Predicate[T]) -> bool:
        """false as soon as one element fails. terminates on infinite streams that eventually fail."""
        return self.fold_left(
            lambda: True,
            lambda item, _: Result.continue_with(True) if predicate(item) else Result.stop_with(False))


def _as_stream(values: Union['Stream[U]', Iterable[U]]) -> 'Stream[U]':
    from ..stream import _BaseStream
    from ..factories import of_collection
    if isinstance(values, _BaseStream):
        return values
    return of_collection(values)
