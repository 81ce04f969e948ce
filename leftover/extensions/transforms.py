from __future__ import annotations
import typing
import logging
from ..types import *

if typing.TYPE_CHECKING:
    from ..producer import Producer, Segments

logger = logging.getLogger(__name__)


class _SegmentTransforms(Generic[T, R]):
    """
    transformations and joiners over a segment sequence.
    transformations only count groups; none of them looks inside a group.
    """
    __slots__ = ()

    # --- transformations ---

    def takes(self: 'Segments[T, R]', count: int) -> 'Segments[T, Segments[T, R]]':
        """
        keep the first `count` groups.
        the final result is the rest of the sequence, untouched, so the groups that
        were not taken can still be recovered (e.g. `concats()` on it).
        """
        from ..producer import Segments
        def step():
            if count <= 0:
                return Done(self)
            current = self.step()
            if isinstance(current, Done):
                return Done(self)
            return Segment(current.index, current.group.map_result(lambda rest: rest.takes(count - 1)))
        return Segments(step)

    def takes_discarding(self: 'Segments[T, R]', count: int) -> 'Segments[T, None]':
        """
        keep the first `count` groups and drop everything after them.
        the remaining groups are never drained and the final result is None; once
        this sequence has been consumed the dropped content cannot be recovered.
        keep a reference to the original sequence if it may be needed later.
        """
        from ..producer import Segments
        def step():
            if count <= 0:
                return Done(None)
            current = self.step()
            if isinstance(current, Done):
                return Done(None)
            return Segment(current.index,
                           current.group.map_result(lambda rest: rest.takes_discarding(count - 1)))
        return Segments(step)

    def takes_draining(self: 'Segments[T, R]', count: int) -> 'Segments[T, R]':
        """keep the first `count` groups, then drain the rest to reach the final result"""
        from ..producer import Segments
        def step():
            if count <= 0:
                return Done(_drain(self))
            current = self.step()
            if isinstance(current, Done):
                return current
            return Segment(current.index,
                           current.group.map_result(lambda rest: rest.takes_draining(count - 1)))
        return Segments(step)

    def drops(self: 'Segments[T, R]', count: int) -> 'Segments[T, R]':
        """skip the first `count` groups, draining each of them without exposing its content"""
        from ..producer import Segments
        def step():
            segments = self
            for dropped in range(count):
                current = segments.step()
                if isinstance(current, Done):
                    logger.debug("drops: sequence ended after %d of %d groups", dropped, count)
                    return current
                segments = current.group.to.result()
            return segments.step()
        return Segments(step)

    def maps(self: 'Segments[T, R]', transform: Callable[['Producer[T, Any]'], 'Producer[U, Any]']) -> 'Segments[U, R]':
        """
        apply `transform` to every group.
        the transform must keep the group's final result, e.g. `lambda g: g.select(str.upper)`.
        """
        from ..producer import Segments
        def step():
            current = self.step()
            if isinstance(current, Done):
                return current
            return Segment(current.index, transform(current.group).map_result(lambda rest: rest.maps(transform)))
        return Segments(step)

    # --- joiners ---

    def concats(self: 'Segments[T, R]') -> 'Producer[T, R]':
        """collapse the groups back into one stream, element by element"""
        from ..producer import Producer
        def step():
            segments = self
            while True:
                current = segments.step()
                if isinstance(current, Done):
                    return Return(current.result)
                first = current.group.step()
                if isinstance(first, Yield):
                    return Yield(first.value, first.rest.then(lambda rest: rest.concats()))
                # empty group
                segments = first.result
        return Producer(step)

    def intercalates(self: 'Segments[T, R]', separator: 'Producer[T, Any]') -> 'Producer[T, R]':
        """like `concats`, with the separator's elements between consecutive groups"""
        from ..producer import Producer
        def step():
            current = self.step()
            if isinstance(current, Done):
                return Return(current.result)
            return current.group.then(lambda rest: _separated(rest, separator)).step()
        return Producer(step)

    def folds(self: 'Segments[T, R]', accumulator: Accumulator[U, T], initial: U,
              done: Optional[Selector[U, V]] = None) -> 'Producer[Any, R]':
        """fold every group into a single value"""
        from ..producer import Producer
        def step():
            current = self.step()
            if isinstance(current, Done):
                return Return(current.result)
            value = initial
            node = current.group
            while True:
                item = node.step()
                if isinstance(item, Return):
                    break
                value = accumulator(value, item.value)
                node = item.rest
            return Yield(done(value) if done else value, item.result.folds(accumulator, initial, done))
        return Producer(step)


def _separated(segments: 'Segments[T, R]', separator: 'Producer[T, Any]') -> 'Producer[T, R]':
    from ..producer import Producer
    def step():
        current = segments.step()
        if isinstance(current, Done):
            return Return(current.result)
        following = current.group.then(lambda rest: _separated(rest, separator))
        return separator.concat(following).step()
    return Producer(step)


def _drain(segments: 'Segments[T, R]') -> R:
    drained = 0
    while True:
        current = segments.step()
        if isinstance(current, Done):
            if drained:
                logger.debug("drained %d trailing groups", drained)
            return current.result
        segments = current.group.to.result()
        drained += 1
