"""
Four classic monads, each described by unit and bind.

- Identity: plain sequencing
- Maybe: Just / Nothing, stops at the first Nothing
- Either: Right / Left, stops at the first Left and keeps its value
- Writer: value plus Log, concatenates logs across binds

Each monad lives in its own subpackage and never imports another one.
"""

# Core types
from ._types import NoValue, Operation

# Helpers
from ._helpers import chain

# Identity monad
from . import identity
from .identity import id_bind, id_unit

# Maybe monad
from . import maybe
from .maybe import Just, Maybe, Nothing, maybe_bind, maybe_unit

# Either monad
from . import either
from .either import Either, Left, Right, either_bind, either_fail, either_unit

# Writer monad
from . import writer
from .writer import Log, Writer, writer_bind, writer_tell, writer_unit

# kungfu interop
from . import lift

# Errors
from ._errors import UnexpectedMonadError

__all__ = (
    # Types
    "NoValue",
    "Operation",
    # Helpers
    "chain",
    # Identity
    "identity",
    "id_unit",
    "id_bind",
    # Maybe
    "maybe",
    "Just",
    "Nothing",
    "Maybe",
    "maybe_unit",
    "maybe_bind",
    # Either
    "either",
    "Left",
    "Right",
    "Either",
    "either_unit",
    "either_fail",
    "either_bind",
    # Writer
    "writer",
    "Log",
    "Writer",
    "writer_unit",
    "writer_tell",
    "writer_bind",
    # Lift module (namespace import)
    "lift",
    # Errors
    "UnexpectedMonadError",
)
