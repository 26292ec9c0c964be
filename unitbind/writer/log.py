"""
Log - monoidal accumulator for Writer
=====================================
"""

from __future__ import annotations

from collections.abc import Iterable


class Log[A](tuple[A, ...]):
    """
    Ordered, append-only log for the Writer monad.

    Backed by a tuple so a Writer never shares mutable state:
    - empty: Log()
    - combine: concatenation, returns a new Log

    Monoid laws hold:
    - Left identity: Log().combine(x) == x
    - Right identity: x.combine(Log()) == x
    - Associativity: x.combine(y).combine(z) == x.combine(y.combine(z))
    """

    __slots__ = ()

    @staticmethod
    def of[T](*entries: T) -> Log[T]:
        """Create a log holding ``entries`` in order."""
        return Log(entries)

    def combine(self, other: Iterable[A], /) -> Log[A]:
        """
        Concatenate two logs, ``self`` first.

        Example:
            Log.of("a", "b").combine(Log.of("c"))  # Log(['a', 'b', 'c'])
        """
        return Log((*self, *other))

    def tell(self, entry: A, /) -> Log[A]:
        """Append a single entry. Same as self.combine(Log.of(entry))."""
        return Log((*self, entry))

    def __repr__(self) -> str:
        return f"Log({list(self)!r})"


__all__ = ("Log",)
