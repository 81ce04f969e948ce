r"""
'  .__          _____  __
'  |  |   _____/ ____\/  |_  _______  __ ___________
'  |  | _/ __ \   __\\   __\/  _ \  \/ // __ \_  __ \
'  |  |_\  ___/|  |   |  | (  <_> )   /\  ___/|  | \/
'  |____/\___  >__|   |__|  \____/ \_/  \___  >__|
'            \/                             \/
"""
import logging

# expose the main classes
from .producer import Producer, Segments
from .cursor import Cursor, run, evaluate, execute, parsed
from .lenses import (
    Lens,
    identity,
    splits_at,
    spans,
    breaks,
    bounded,
    groups,
    groups_by,
    groups_by_adjacent,
    runs,
    chunks_of,
    splits
)

# expose the factory functions
from .factories import (
    from_iterable,
    from_range,
    naturals,
    repeat,
    generate,
    empty,
    returning,
    each,
    P
)

# expose supporting data classes
from .types import (
    Yield,
    Return,
    Segment,
    Done,
    Group
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

# define what `import *` does
__all__ = [
    "Producer",
    "Segments",
    "Cursor",
    "run",
    "evaluate",
    "execute",
    "parsed",
    "Lens",
    "identity",
    "splits_at",
    "spans",
    "breaks",
    "bounded",
    "groups",
    "groups_by",
    "groups_by_adjacent",
    "runs",
    "chunks_of",
    "splits",
    "from_iterable",
    "from_range",
    "naturals",
    "repeat",
    "generate",
    "empty",
    "returning",
    "each",
    "P",
    "Yield",
    "Return",
    "Segment",
    "Done",
    "Group"
]
