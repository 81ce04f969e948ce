from typing import (
    TypeVar, Generic, Callable, Iterator, Iterable, Any, Optional, Union,
    Dict, List, Tuple, TYPE_CHECKING
)

if TYPE_CHECKING:
    from .cursor import Cursor
    from .producer import Producer, Segments

T = TypeVar('T')
U = TypeVar('U')
R = TypeVar('R')
S = TypeVar('S')
A = TypeVar('A')
V = TypeVar('V')

Predicate = Callable[[T], bool]
Equality = Callable[[T, T], bool]
Selector = Callable[[T], U]
Accumulator = Callable[[U, T], U]
Parser = Callable[['Cursor[T]'], U]


class Yield(Generic[T, R]):
    """one produced element together with the rest of the stream"""
    __slots__ = ('value', 'rest')

    def __init__(self, value: T, rest: 'Producer[T, R]'):
        self.value = value
        self.rest = rest

    def __repr__(self) -> str:
        return f"Yield(value={self.value!r})"


class Return(Generic[R]):
    """end of a stream, carrying its final result"""
    __slots__ = ('result',)

    def __init__(self, result: R):
        self.result = result

    def __repr__(self) -> str:
        return f"Return(result={self.result!r})"


Step = Union[Yield[T, R], Return[R]]


class Segment(Generic[T, R]):
    """
    one group of a segment sequence.
    the group's final result is the rest of the sequence, so the next segment
    can only be reached by draining this group.
    """
    __slots__ = ('index', 'group')

    def __init__(self, index: int, group: 'Producer[T, Segments[T, R]]'):
        self.index = index
        self.group = group

    def __repr__(self) -> str:
        return f"Segment(index={self.index})"


class Done(Generic[R]):
    """end of a segment sequence, carrying the final result of the source stream"""
    __slots__ = ('result',)

    def __init__(self, result: R):
        self.result = result

    def __repr__(self) -> str:
        return f"Done(result={self.result!r})"


SegmentStep = Union[Segment[T, R], Done[R]]


class Group(Generic[T]):
    """a group handed out while iterating a segment sequence, read through its own cursor"""

    def __init__(self, index: int, cursor: 'Cursor[T]'):
        self.index = index
        self.cursor = cursor

    def draw_all(self) -> List[T]:
        return self.cursor.draw_all()

    def __iter__(self) -> Iterator[T]:
        return iter(self.cursor)

    def __repr__(self) -> str:
        return f"Group(index={self.index})"
