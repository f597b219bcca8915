from __future__ import annotations
import typing
import numpy as np
import pandas as pd
from ..suppliers import supplier
from ..types import *

if typing.TYPE_CHECKING:
    from ..stream import Stream


class TerminalAccessor(Generic[T]):
    """
    conversions and reductions that consume a stream.
    everything here goes through fold_left, so long streams do not grow the stack.
    """

    def __init__(self, stream_instance: 'Stream[T]'):
        self._stream = stream_instance

    def list(self) -> List[T]:
        """convert to list"""
        return self._stream.to_list()

    def tuple(self) -> Tuple[T, ...]:
        """convert to tuple"""
        return tuple(self._stream.to_list())

    def set(self) -> Set[T]:
        """convert to set"""
        return set(self._stream.to_list())

    def dict(self, key_selector: KeySelector[T, K],
             value_selector: Optional[Selector[T, V]] = None) -> Dict[K, V]:
        """convert to dictionary"""
        val_sel = value_selector if value_selector else lambda item: item
        return {key_selector(item): val_sel(item) for item in self._stream.to_list()}

    def array(self) -> np.ndarray:
        """convert to numpy array"""
        return np.array(self._stream.to_list())

    def pandas(self) -> pd.Series:
        """convert to pandas series"""
        return pd.Series(self._stream.to_list())

    def df(self) -> pd.DataFrame:
        """convert to pandas dataframe"""
        return pd.DataFrame(self._stream.to_list())

    def count(self, predicate: Optional[Predicate[T]] = None) -> int:
        """count elements"""
        def count_step(item, accumulator):
            matched = predicate is None or predicate(item)
            return Result.continue_with(accumulator() + 1 if matched else accumulator())
        return self._stream.fold_left(lambda: 0, count_step)

    def sum(self, start: Any = 0) -> Any:
        """sum of all elements"""
        return self._stream.fold_left(supplier(start), lambda item, accumulator: Result.continue_with(accumulator() + item))

    def aggregate(self, accumulator: Accumulator[T, T], seed: Optional[T] = None) -> T:
        """
        applies accumulator over the sequence, left to right.
        without a seed the first element is used; the accumulator must not return None.
        """
        stream = self._stream
        if seed is None:
            if stream.is_empty(): raise ValueError("cannot aggregate empty sequence without seed")
            seed, stream = stream.head(), stream.tail()
        return stream.fold_left(supplier(seed), lambda item, acc: Result.continue_with(accumulator(acc(), item)))

    def first(self, predicate: Optional[Predicate[T]] = None) -> T:
        """get first element, stops at the first match"""
        if predicate is None:
            return self._stream.head()
        # wrapped in a tuple because a result cannot carry None and the match might be None
        found = self._stream.fold_left(
            tuple, lambda item, _: Result.stop_with((item,)) if predicate(item) else Result.continue_with(()))
        if not found: raise ValueError("no element satisfies the condition")
        return found[0]

    def first_or_default(self, predicate: Optional[Predicate[T]] = None,
                         default: Optional[T] = None) -> Optional[T]:
        """get first element or default"""
        try: return self.first(predicate)
        except ValueError: return default

    def any(self, predicate: Optional[Predicate[T]] = None) -> bool:
        """check if any element satisfies condition"""
        if predicate is None: return not self._stream.is_empty()
        return self._stream.exists(predicate)

    def all(self, predicate: Predicate[T]) -> bool:
        """check if all elements satisfy condition"""
        return self._stream.for_all(predicate)
