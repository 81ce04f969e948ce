from __future__ import annotations

import logging

from .types import *

# --- core functionality ---
from .extensions.core import _CoreOperations
from .extensions.transforms import _SegmentTransforms

# --- accessors ---
from .extensions.split import SplitAccessor
from .extensions.grouping import GroupingAccessor
from .extensions.terminal import TerminalAccessor, SegmentsTerminalAccessor

logger = logging.getLogger(__name__)


# --- producer ---

class Producer(_CoreOperations[T, R]):
    """
    a lazy stream of elements that ends with a final result.

    every node is a value: stepping it yields the next element and the rest of the
    stream as another producer, or the final result. steps are computed at most
    once per node, so any node can be kept and resumed later without pulling the
    underlying source twice. a node is what a cursor holds, what a boundary view
    splits and what leftovers get spliced onto.
    """
    __slots__ = ('_step_func', '_step')

    def __init__(self, step_func: Optional[Callable[[], Step[T, R]]]):
        """init with a function that computes the first step when called"""
        self._step_func = step_func
        self._step: Optional[Step[T, R]] = None

    @classmethod
    def yielding(cls, value: T, rest: 'Producer[T, R]') -> 'Producer[T, R]':
        """a node whose first element is already known"""
        node = cls(None)
        node._step = Yield(value, rest)
        return node

    @classmethod
    def returning(cls, result: R) -> 'Producer[Any, R]':
        """an exhausted node carrying `result`"""
        node = cls(None)
        node._step = Return(result)
        return node

    def step(self) -> Step[T, R]:
        """the next step, computed once and cached"""
        if self._step is None:
            # a step function that raises leaves the node unsettled
            self._step = self._step_func()
            self._step_func = None
        return self._step

    @property
    def split(self) -> SplitAccessor[T, R]:
        return SplitAccessor(self)

    @property
    def group(self) -> GroupingAccessor[T, R]:
        return GroupingAccessor(self)

    @property
    def to(self) -> TerminalAccessor[T, R]:
        return TerminalAccessor(self)

    def __iter__(self) -> Iterator[T]:
        return _elements(self)

    def __repr__(self) -> str:
        if self._step is None:
            return "Producer(<pending>)"
        return f"Producer({self._step!r})"


def _elements(node: Producer[T, Any]) -> Iterator[T]:
    # rebinds `node` as it goes so the generator never pins the head of the stream
    while True:
        step = node.step()
        if isinstance(step, Return):
            return
        yield step.value
        node = step.rest


# --- segment sequence ---

class Segments(_SegmentTransforms[T, R]):
    """
    a lazily produced sequence of groups carved out of one stream.

    `step()` gives either a `Segment` whose group is a producer ending with the rest
    of the sequence, or `Done` with the final result of the source stream. the next
    group is only split off once the current one has been drained.
    """
    __slots__ = ('_step_func', '_step')

    def __init__(self, step_func: Optional[Callable[[], SegmentStep[T, R]]]):
        self._step_func = step_func
        self._step: Optional[SegmentStep[T, R]] = None

    @classmethod
    def finished(cls, result: R) -> 'Segments[Any, R]':
        """an empty sequence carrying `result`"""
        segments = cls(None)
        segments._step = Done(result)
        return segments

    def step(self) -> SegmentStep[T, R]:
        if self._step is None:
            self._step = self._step_func()
            self._step_func = None
        return self._step

    @property
    def to(self) -> SegmentsTerminalAccessor[T, R]:
        return SegmentsTerminalAccessor(self)

    def __iter__(self) -> Iterator[Group[T]]:
        """
        iterate the groups, each read through its own cursor.
        when the loop moves on, whatever the group's cursor has not drawn is skipped,
        so the next group always starts where the source says it does. a group can
        only be read until the loop advances past it.
        the generator returns the final result of the source stream.
        """
        return _groups(self)

    def __repr__(self) -> str:
        if self._step is None:
            return "Segments(<pending>)"
        return f"Segments({self._step!r})"


def _groups(segments: Segments[T, R]) -> Iterator[Group[T]]:
    from .cursor import Cursor
    while True:
        step = segments.step()
        if isinstance(step, Done):
            return step.result
        cursor = Cursor(step.group)
        yield Group(step.index, cursor)
        skipped = 0
        while cursor.skip():
            skipped += 1
        if skipped:
            logger.debug("skipped %d unread elements of group %d", skipped, step.index)
        # a drained group ends with the rest of the sequence
        segments = cursor.producer.step().result
