"""
Lift helpers with semantic namespaces.

Bridge between unitbind values and kungfu's Option / Result:

    from unitbind import lift as L

    L.up.*    - kungfu / plain Python -> Maybe, Either
    L.down.*  - Maybe, Either, Writer -> kungfu / plain Python

Examples:
    from unitbind import lift as L

    maybe = L.up.optional(cache.get("user"))      # Just(...) or Nothing()
    either = L.up.from_result(Ok(42))             # Right(42)
    parsed = L.up.catching(lambda: int(raw), on_error=str)

    option = L.down.to_option(maybe)              # Some(...) or Nothing()
    result = L.down.to_result(either)             # Ok(42)
"""

from __future__ import annotations

from . import down, up

# Convenience: the most common conversions in root
from .down import to_option, to_result, to_tuple
from .up import catching, from_option, from_result, optional

__all__ = (
    # Namespaces (L.up.*, L.down.*)
    "up",
    "down",
    # Up
    "from_option",
    "from_result",
    "optional",
    "catching",
    # Down
    "to_option",
    "to_result",
    "to_tuple",
)
