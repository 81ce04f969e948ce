"""
parsers and the cursor they read through.

a parser is any callable taking a `Cursor` and returning a value. the cursor owns
the remaining producer: every draw advances it, every push back extends it, and
when the parser finishes the cursor's producer is the leftover stream.
"""
from __future__ import annotations

import logging

from .types import *
from .producer import Producer

if TYPE_CHECKING:
    from .lenses import Lens

logger = logging.getLogger(__name__)


class Cursor(Generic[T]):
    """
    a resumable reading position over a producer.

    end of input is never an error: `draw` and `peek` return `default` (None unless
    given) once the producer is exhausted. streams that may contain None should pass
    their own sentinel as `default` or ask `is_end_of_input()` first.
    """

    def __init__(self, producer: Producer[T, Any]):
        self.producer = producer

    def draw(self, default: Any = None) -> Optional[T]:
        """consume and return the next element"""
        current = self.producer.step()
        if isinstance(current, Return):
            return default
        self.producer = current.rest
        return current.value

    def skip(self) -> bool:
        """consume the next element without returning it; False at end of input"""
        current = self.producer.step()
        if isinstance(current, Return):
            return False
        self.producer = current.rest
        return True

    def peek(self, default: Any = None) -> Optional[T]:
        """the next element, left in place"""
        current = self.producer.step()
        if isinstance(current, Return):
            return default
        return current.value

    def un_draw(self, element: T) -> None:
        """push an element back; the last one pushed is the first one drawn"""
        self.producer = Producer.yielding(element, self.producer)

    def is_end_of_input(self) -> bool:
        return isinstance(self.producer.step(), Return)

    def draw_all(self) -> List[T]:
        """
        draw every remaining element into a list.
        this loads the entire rest of the input into memory and never returns on an
        infinite producer; bound the input first, e.g. `zoom(splits_at(10), Cursor.draw_all)`.
        """
        return list(self)

    def skip_all(self) -> None:
        """consume every remaining element"""
        while self.skip():
            pass

    def fold_all(self, accumulator: Accumulator[U, T], initial: U,
                 done: Optional[Selector[U, V]] = None) -> Any:
        """fold every remaining element into one value"""
        value = initial
        for element in self:
            value = accumulator(value, element)
        return done(value) if done else value

    def zoom(self, lens: 'Lens[Producer[T, Any], Any]', parser: Parser[Any, U]) -> U:
        """
        run `parser` on the part of the stream the lens focuses on.

        the parser gets its own cursor over `lens.view(self.producer)`. when it
        returns, whatever is left in that cursor (unread elements of the bounded part,
        and anything the parser pushed back) is spliced in front of the rest of the
        stream and becomes this cursor's producer.
        """
        focus = lens.view(self.producer)
        if not isinstance(focus, Producer):
            raise TypeError(f"cannot zoom through {lens!r}: it does not focus on a producer")
        inner = Cursor(focus)
        logger.debug("zoom: entering %r", lens)
        result = parser(inner)
        self.producer = lens.splice(inner.producer)
        logger.debug("zoom: leaving %r", lens)
        return result

    def __iter__(self) -> Iterator[T]:
        """draw elements until end of input"""
        while True:
            current = self.producer.step()
            if isinstance(current, Return):
                return
            self.producer = current.rest
            yield current.value

    def __repr__(self) -> str:
        return f"Cursor({self.producer!r})"


# --- connect and resume ---

def run(parser: Parser[T, U], producer: Producer[T, R]) -> Tuple[U, Producer[T, R]]:
    """feed a producer to a parser; returns the parser's result and the leftover producer"""
    cursor = Cursor(producer)
    result = parser(cursor)
    return result, cursor.producer


def evaluate(parser: Parser[T, U], producer: Producer[T, R]) -> U:
    """feed a producer to a parser, keeping only the result"""
    return run(parser, producer)[0]


def execute(parser: Parser[T, U], producer: Producer[T, R]) -> Producer[T, R]:
    """feed a producer to a parser, keeping only the leftover producer"""
    return run(parser, producer)[1]


def parsed(parser: Parser[T, Optional[U]], producer: Producer[T, R]) -> Producer[U, Producer[T, R]]:
    """
    run a parser over and over, producing its results.

    stops at end of input, or as soon as the parser returns None. the final result
    is the leftover producer at that point: exhausted (still carrying the source's
    final result) in the first case, whatever the failed attempt left in the second.
    the parser should push back what it drew when it fails.
    """
    def step():
        cursor = Cursor(producer)
        if cursor.is_end_of_input():
            return Return(producer)
        value = parser(cursor)
        if value is None:
            logger.debug("parsed: parser gave up before end of input")
            return Return(cursor.producer)
        return Yield(value, parsed(parser, cursor.producer))
    return Producer(step)
