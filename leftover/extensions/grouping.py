from __future__ import annotations
import typing
import operator
from .split import _span_adjacent
from ..types import *

if typing.TYPE_CHECKING:
    from ..producer import Producer, Segments

# builds the bounded group that opens with `first`, given the stream after it
Opener = Callable[[T, 'Producer[T, R]'], 'Producer[T, Producer[T, R]]']


class GroupingAccessor(Generic[T, R]):
    """splitters: carve a producer into a lazy sequence of groups"""
    def __init__(self, producer_instance: 'Producer[T, R]'):
        self._producer = producer_instance

    def by(self, equals: Equality[T]) -> 'Segments[T, R]':
        """runs of elements equal to the first element of their run"""
        def opener(first, rest):
            return rest.split.span(lambda element: equals(first, element)).prepend(first)
        return _segments(self._producer, opener, 0)

    def equal(self) -> 'Segments[T, R]':
        """runs of consecutive equal elements"""
        return self.by(operator.eq)

    def by_adjacent(self, equals: Equality[T]) -> 'Segments[T, R]':
        """runs where every element is equal to the one before it"""
        def opener(first, rest):
            return _span_adjacent(rest, equals, first).prepend(first)
        return _segments(self._producer, opener, 0)

    def runs(self, predicate: Predicate[T]) -> 'Segments[T, R]':
        """
        each group opens with the next element, which is never tested, and extends
        over the following elements for which the predicate holds. the boundary is the
        first element after the opening one for which the predicate is false; that
        element opens the next group. so `[5, 1, 2]` with `lambda n: n < 3` is a single
        group `[5, 1, 2]`. with `lambda line: not line.startswith('#')` every header
        line starts a section.
        """
        def opener(first, rest):
            return rest.split.span(predicate).prepend(first)
        return _segments(self._producer, opener, 0)

    def chunks(self, size: int) -> 'Segments[T, R]':
        """groups of `size` elements; the last one may be shorter"""
        if size <= 0:
            raise ValueError("chunk size must be positive")
        def opener(first, rest):
            return rest.split.at(size - 1).prepend(first)
        return _segments(self._producer, opener, 0)

    def splits(self, delimiter: T) -> 'Segments[T, R]':
        """
        groups separated by `delimiter`, which is dropped.
        empty groups are kept, so `a,,b,` gives `[a], [], [b], []`.
        """
        return _delimited(self._producer, lambda element: element == delimiter, 0, False)


def _segments(producer: 'Producer[T, R]', opener: Opener, index: int) -> 'Segments[T, R]':
    from ..producer import Segments
    def step():
        current = producer.step()
        if isinstance(current, Return):
            return Done(current.result)
        group = opener(current.value, current.rest)
        return Segment(index, group.map_result(lambda rest: _segments(rest, opener, index + 1)))
    return Segments(step)


def _delimited(producer: 'Producer[T, R]', is_delimiter: Predicate[T], index: int, opened: bool) -> 'Segments[T, R]':
    from ..producer import Segments
    def step():
        if not opened and isinstance(producer.step(), Return):
            return Done(producer.step().result)
        group = producer.split.break_(is_delimiter)
        return Segment(index, group.map_result(lambda rest: _after_delimiter(rest, is_delimiter, index + 1)))
    return Segments(step)


def _after_delimiter(producer: 'Producer[T, R]', is_delimiter: Predicate[T], index: int) -> 'Segments[T, R]':
    from ..producer import Segments
    def step():
        current = producer.step()
        if isinstance(current, Return):
            return Done(current.result)
        # a delimiter always opens another group, even at the very end
        return _delimited(current.rest, is_delimiter, index, True).step()
    return Segments(step)
