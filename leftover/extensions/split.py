from __future__ import annotations
import typing
from ..types import *

if typing.TYPE_CHECKING:
    from ..lenses import Lens
    from ..producer import Producer


class SplitAccessor(Generic[T, R]):
    """
    boundary views over a producer.

    each method returns the bounded prefix as a producer whose final result is the
    continuation, i.e. the rest of the stream starting exactly where the prefix
    stopped. the split point is found while the prefix is drawn, never ahead of it.
    """
    def __init__(self, producer_instance: 'Producer[T, R]'):
        self._producer = producer_instance

    def at(self, count: int) -> 'Producer[T, Producer[T, R]]':
        """at most `count` leading elements; a count of zero or less gives an empty prefix"""
        return _split_at(self._producer, count)

    def span(self, predicate: Predicate[T]) -> 'Producer[T, Producer[T, R]]':
        """the longest leading run of elements satisfying the predicate"""
        return _span(self._producer, predicate)

    def break_(self, predicate: Predicate[T]) -> 'Producer[T, Producer[T, R]]':
        """the longest leading run of elements that do not satisfy the predicate"""
        return _span(self._producer, lambda element: not predicate(element))

    def bounded(self, lens: 'Lens[Producer[T, R], Any]') -> Tuple['Producer[T, Any]', 'Producer[T, R]']:
        """the (bounded, continuation) pair for a boundary lens; see `lenses.bounded`"""
        from ..lenses import bounded
        return bounded(lens, self._producer)


def _split_at(producer: 'Producer[T, R]', count: int) -> 'Producer[T, Producer[T, R]]':
    from ..producer import Producer
    def step():
        if count <= 0:
            return Return(producer)
        current = producer.step()
        if isinstance(current, Return):
            return Return(producer)
        return Yield(current.value, _split_at(current.rest, count - 1))
    return Producer(step)


def _span(producer: 'Producer[T, R]', predicate: Predicate[T]) -> 'Producer[T, Producer[T, R]]':
    from ..producer import Producer
    def step():
        current = producer.step()
        if isinstance(current, Yield) and predicate(current.value):
            return Yield(current.value, _span(current.rest, predicate))
        # the rejected element stays in `producer`, whose step is already cached
        return Return(producer)
    return Producer(step)


def _span_adjacent(producer: 'Producer[T, R]', equals: Equality[T], previous: T) -> 'Producer[T, Producer[T, R]]':
    from ..producer import Producer
    def step():
        current = producer.step()
        if isinstance(current, Yield) and equals(previous, current.value):
            return Yield(current.value, _span_adjacent(current.rest, equals, current.value))
        return Return(producer)
    return Producer(step)
