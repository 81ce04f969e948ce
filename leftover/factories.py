import itertools
from .types import *
from .producer import Producer


def from_iterable(data: Iterable[T], result: Any = None) -> Producer[T, Any]:
    """
    create a producer from any iterable.
    a generator's `return` value becomes the final result; otherwise `result` does.
    the iterable is pulled one element at a time, as the producer is stepped.
    """
    iterator = iter(data)

    def node() -> Producer[T, Any]:
        def step():
            try:
                value = next(iterator)
            except StopIteration as stop:
                return Return(result if stop.value is None else stop.value)
            return Yield(value, node())
        return Producer(step)

    return node()


def from_range(start: int, count: int) -> Producer[int, None]:
    """create producer from range"""
    return from_iterable(range(start, start + count))


def naturals(start: int = 0) -> Producer[int, None]:
    """start, start + 1, start + 2, ... forever"""
    return from_iterable(itertools.count(start))


def repeat(item: T, count: Optional[int] = None) -> Producer[T, None]:
    """create producer with repeated item; infinite when count is None"""
    if count is None:
        return from_iterable(itertools.repeat(item))
    return from_iterable(itertools.repeat(item, count))


def generate(generator_func: Callable[[], T], count: Optional[int] = None) -> Producer[T, None]:
    """produce by calling a function, `count` times or forever"""
    calls = itertools.count() if count is None else range(count)
    return from_iterable(generator_func() for _ in calls)


def empty(result: Any = None) -> Producer[Any, Any]:
    """create empty producer, carrying only a final result"""
    return Producer.returning(result)


# --- aliases ---
each = from_iterable
returning = empty
P = from_iterable
p = from_iterable
