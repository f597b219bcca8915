from .stream import Stream, EMPTY, empty, cons
from .suppliers import supplier
from .types import *

_EXHAUSTED = object()


def unfold(seed: S, step: Callable[[S], Optional[Union[Pair[T, S], Tuple[T, S]]]]) -> Stream[T]:
    """
    corecursive constructor. step(state) returns None to end the stream, or a
    (value, next_state) pair. step runs once here to decide whether the stream is
    empty, and once more each time a tail is first evaluated.
    """
    produced = step(seed)
    if produced is None:
        return empty()
    value, state = produced
    return cons(supplier(value), lambda: unfold(state, step))


def of_collection(values: Iterable[T]) -> Stream[T]:
    """create a stream from a finite collection. the collection is copied, then peeled one element per step."""
    items = tuple(values)
    def peel(index: int):
        return (items[index], index + 1) if index < len(items) else None
    return unfold(0, peel)


def from_iterator(values: Iterable[T]) -> Stream[T]:
    """create a stream that pulls from an iterator as elements are demanded"""
    def pull(iterator: Iterator[T]):
        value = next(iterator, _EXHAUSTED)
        return None if value is _EXHAUSTED else (value, iterator)
    return unfold(iter(values), pull)


def constant(value: T) -> Stream[T]:
    """infinite stream of the same value"""
    return unfold(value, lambda current: (current, current))


def from_(start: int) -> Stream[int]:
    """infinite stream of integers counting up from start"""
    return unfold(start, lambda current: (current, current + 1))


def from_range(start: int, count: int) -> Stream[int]:
    """create stream from range"""
    return from_(start).take(count)


def repeat(item: T, count: int) -> Stream[T]:
    """create stream with repeated item"""
    return constant(item).take(count)


def generate(generator_func: Callable[[], T], count: Optional[int] = None) -> Stream[T]:
    """
    generate a stream by calling a function, once per element as each is demanded.
    infinite unless count is given.
    """
    generated = constant(generator_func).map(lambda func: func())
    return generated if count is None else generated.take(count)


def iterate(seed: T, func: Selector[T, T]) -> Stream[T]:
    """seed, func(seed), func(func(seed)), ..."""
    return unfold(seed, lambda current: (current, func(current)))

# --- aliases ---
stream = cons
count_from = from_
from_iterable = of_collection
