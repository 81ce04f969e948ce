from __future__ import annotations
import typing
import numpy as np
import pandas as pd
from ..types import *

if typing.TYPE_CHECKING:
    from ..producer import Producer, Segments

_MISSING = object()


class TerminalAccessor(Generic[T, R]):
    """
    operations that drain a producer.
    everything here except `first` reads the whole stream into memory or at least
    to its end, so none of it terminates on an infinite producer. meant for bounded
    input, prefixes cut by a boundary view, and tests.
    """
    def __init__(self, producer_instance: 'Producer[T, R]'):
        self._producer = producer_instance

    def list(self) -> List[T]:
        """convert to list"""
        return [element for element in self._producer]

    def result(self) -> R:
        """drain the stream, discarding elements, and return its final result"""
        return _drain(self._producer)

    def list_and_result(self) -> Tuple[List[T], R]:
        """the elements and the final result"""
        elements: List[T] = []
        result = _drain(self._producer, elements.append)
        return elements, result

    def for_each(self, action: Callable[[T], Any]) -> R:
        """run an action on every element as it is produced; returns the final result"""
        return _drain(self._producer, action)

    def count(self) -> int:
        """count elements"""
        return sum(1 for _ in self._producer)

    def first(self, default: Any = _MISSING) -> T:
        """the first element, without consuming anything past it"""
        current = self._producer.step()
        if isinstance(current, Yield):
            return current.value
        if default is _MISSING:
            raise ValueError("sequence contains no elements")
        return default

    def array(self) -> np.ndarray:
        """convert to numpy array"""
        return np.array(self.list())

    def pandas(self) -> pd.Series:
        """convert to pandas series"""
        return pd.Series(self.list())


class SegmentsTerminalAccessor(Generic[T, R]):
    """operations that drain a whole segment sequence; same caveats as `TerminalAccessor`"""
    def __init__(self, segments_instance: 'Segments[T, R]'):
        self._segments = segments_instance

    def lists(self) -> List[List[T]]:
        """every group as a list"""
        return [elements for _, elements in self._indexed()[0]]

    def result(self) -> R:
        """drain every group and return the final result of the source stream"""
        return self._indexed(keep=False)[1]

    def lengths(self) -> List[Tuple[int, int]]:
        """(index, length) for every group"""
        return [(index, len(elements)) for index, elements in self._indexed()[0]]

    def frame(self) -> pd.DataFrame:
        """one row per element, tagged with the index of its group"""
        rows = [(index, element) for index, elements in self._indexed()[0] for element in elements]
        return pd.DataFrame(rows, columns=['index', 'element'])

    def _indexed(self, keep: bool = True) -> Tuple[List[Tuple[int, List[T]]], R]:
        groups: List[Tuple[int, List[T]]] = []
        segments = self._segments
        while True:
            current = segments.step()
            if isinstance(current, Done):
                return groups, current.result
            elements: List[T] = []
            segments = _drain(current.group, elements.append if keep else None)
            if keep:
                groups.append((current.index, elements))


def _drain(node: 'Producer[T, R]', action: Optional[Callable[[T], Any]] = None) -> R:
    while True:
        current = node.step()
        if isinstance(current, Return):
            return current.result
        if action is not None:
            action(current.value)
        node = current.rest
