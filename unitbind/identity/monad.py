"""Identity monad.

The identity monad places no requirements on its value, so unit does
nothing and bind only sequences the operation after the value."""

from __future__ import annotations

from .._types import Operation


def id_unit[T](value: T, /) -> T:
    """Lift a value into the identity monad (returns it unchanged)."""
    return value


def id_bind[T, U](value: T, operation: Operation[T, U], /) -> U:
    """
    Monadic bind (>>=) for identity.

    Passes ``value`` to ``operation`` exactly once and returns its result.

    Example:
        id_bind(id_unit("orly"), lambda text: text + " yarly")  # "orly yarly"
    """
    return operation(value)


__all__ = (
    "id_unit",
    "id_bind",
)
