"""
boundary views.

a `Lens` pairs a view with a splice. the view narrows a producer to the part a
parser should see (a bounded prefix, or a sequence of groups); the splice turns a
possibly half-consumed focus back into a plain producer. `Cursor.zoom` runs a
parser through a lens, `Lens.over` transforms a focus and splices it straight back.

these lenses are not lawful optics: splicing ignores the original source and only
looks at the focus it is given, which is exactly what leftover handling needs.
"""
from __future__ import annotations

import operator

from .types import *
from .producer import Producer, Segments


class Lens(Generic[S, A]):
    """a view of a source of type S as a focus of type A, and the way back"""

    def __init__(self, view: Callable[[S], A], splice: Callable[[A], S], name: str = 'lens'):
        self._view = view
        self._splice = splice
        self.name = name

    def view(self, source: S) -> A:
        return self._view(source)

    def splice(self, focus: A) -> S:
        """rebuild a source from a focus, including whatever of it was left unread"""
        return self._splice(focus)

    def over(self, source: S, transform: Callable[[A], A]) -> S:
        """view, transform, splice"""
        return self.splice(transform(self.view(source)))

    def compose(self, inner: 'Lens[A, Any]') -> 'Lens[S, Any]':
        """focus further with `inner` inside what this lens focuses on"""
        return Lens(lambda source: inner.view(self.view(source)),
                    lambda focus: self.splice(inner.splice(focus)),
                    f"{self.name} . {inner.name}")

    def __repr__(self) -> str:
        return f"Lens({self.name})"


def identity() -> Lens[Any, Any]:
    """the unbounded view: zooming through it is the same as not zooming"""
    return Lens(lambda source: source, lambda focus: focus, 'identity')


# --- boundary lenses ---

def _join(bounded: Producer[T, Producer[T, R]]) -> Producer[T, R]:
    return bounded.join()


def splits_at(count: int) -> Lens[Producer[T, R], Producer[T, Producer[T, R]]]:
    """at most `count` leading elements"""
    return Lens(lambda producer: producer.split.at(count), _join, f"splits_at({count})")


def spans(predicate: Predicate[T]) -> Lens[Producer[T, R], Producer[T, Producer[T, R]]]:
    """the longest leading run satisfying `predicate`"""
    return Lens(lambda producer: producer.split.span(predicate), _join, 'spans')


def breaks(predicate: Predicate[T]) -> Lens[Producer[T, R], Producer[T, Producer[T, R]]]:
    """the longest leading run not satisfying `predicate`"""
    return Lens(lambda producer: producer.split.break_(predicate), _join, 'breaks')


def bounded(lens: Lens[Producer[T, R], Any], producer: Producer[T, R]) -> Tuple[Producer[T, Any], Producer[T, R]]:
    """
    split a producer into (bounded, continuation) for read-only traversal.

    the continuation behaves as if the bounded part had been drained first, however
    much of it has actually been drawn, even nothing. it is derived lazily from the
    bounded part's nodes, so holding on to it while drawing the bounded part keeps
    the drawn nodes alive.
    """
    focus = lens.view(producer)
    if not isinstance(focus, Producer):
        raise TypeError(f"{lens!r} does not view a producer as a bounded producer")
    continuation = Producer(lambda: lens.splice(Producer.returning(focus.to.result())).step())
    return focus, continuation


# --- grouping lenses ---

def _concats(segments: Segments[T, R]) -> Producer[T, R]:
    return segments.concats()


def groups_by(equals: Equality[T]) -> Lens[Producer[T, R], Segments[T, R]]:
    """runs of elements equal (by `equals`) to the first element of the run"""
    return Lens(lambda producer: producer.group.by(equals), _concats, 'groups_by')


def groups() -> Lens[Producer[T, R], Segments[T, R]]:
    """runs of consecutive equal elements"""
    return Lens(lambda producer: producer.group.by(operator.eq), _concats, 'groups')


def groups_by_adjacent(equals: Equality[T]) -> Lens[Producer[T, R], Segments[T, R]]:
    """runs where each element is equal (by `equals`) to its predecessor"""
    return Lens(lambda producer: producer.group.by_adjacent(equals), _concats, 'groups_by_adjacent')


def runs(predicate: Predicate[T]) -> Lens[Producer[T, R], Segments[T, R]]:
    """groups opened by any element and closed before the next element failing `predicate`"""
    return Lens(lambda producer: producer.group.runs(predicate), _concats, 'runs')


def chunks_of(size: int) -> Lens[Producer[T, R], Segments[T, R]]:
    """fixed-size groups"""
    if size <= 0:
        raise ValueError("chunk size must be positive")
    return Lens(lambda producer: producer.group.chunks(size), _concats, f"chunks_of({size})")


def splits(delimiter: T) -> Lens[Producer[T, R], Segments[T, R]]:
    """groups separated by `delimiter`; splicing puts the delimiters back"""
    separator = Producer.yielding(delimiter, Producer.returning(None))
    return Lens(lambda producer: producer.group.splits(delimiter),
                lambda segments: segments.intercalates(separator),
                'splits')
