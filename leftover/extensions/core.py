from __future__ import annotations
import typing
from ..types import *

if typing.TYPE_CHECKING:
    from ..lenses import Lens
    from ..producer import Producer


class _CoreOperations(Generic[T, R]):
    __slots__ = ()

    def then(self: 'Producer[T, R]', continuation: Callable[[R], 'Producer[T, S]']) -> 'Producer[T, S]':
        """emit these elements, then carry on with the producer built from the final result"""
        from ..producer import Producer
        def step():
            current = self.step()
            if isinstance(current, Return):
                return continuation(current.result).step()
            return Yield(current.value, current.rest.then(continuation))
        return Producer(step)

    def join(self: 'Producer[T, Producer[T, R]]') -> 'Producer[T, R]':
        """flatten a producer whose final result is the rest of the stream"""
        return self.then(lambda rest: rest)

    def map_result(self: 'Producer[T, R]', selector: Selector[R, S]) -> 'Producer[T, S]':
        """transform the final result, leaving the elements alone"""
        from ..producer import Producer
        return self.then(lambda result: Producer.returning(selector(result)))

    def concat(self: 'Producer[T, Any]', other: 'Producer[T, S]') -> 'Producer[T, S]':
        """these elements followed by the other producer; the first final result is dropped"""
        return self.then(lambda _: other)

    def prepend(self: 'Producer[T, R]', element: T) -> 'Producer[T, R]':
        """adds a value to the beginning of the stream"""
        from ..producer import Producer
        return Producer.yielding(element, self)

    def append(self: 'Producer[T, R]', element: T) -> 'Producer[T, R]':
        """appends a value to the end of the stream, before the final result"""
        from ..producer import Producer
        return self.then(lambda result: Producer.yielding(element, Producer.returning(result)))

    def select(self: 'Producer[T, R]', selector: Selector[T, U]) -> 'Producer[U, R]':
        """project each element to a new form"""
        from ..producer import Producer
        def step():
            current = self.step()
            if isinstance(current, Return):
                return current
            return Yield(selector(current.value), current.rest.select(selector))
        return Producer(step)

    def where(self: 'Producer[T, R]', predicate: Predicate[T]) -> 'Producer[T, R]':
        """filter elements based on a predicate"""
        from ..producer import Producer
        def step():
            node = self
            while True:
                current = node.step()
                if isinstance(current, Return):
                    return current
                if predicate(current.value):
                    return Yield(current.value, current.rest.where(predicate))
                node = current.rest
        return Producer(step)

    def over(self: 'Producer[T, R]', lens: 'Lens[Producer[T, R], A]',
             transform: Callable[[A], A]) -> 'Producer[T, R]':
        """view this producer through a lens, transform the focus and splice it back"""
        return lens.over(self, transform)
