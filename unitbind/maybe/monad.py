"""Maybe Monad

Closed sum of two shapes:
- Just(value) - a value is present (any value, None included)
- Nothing()   - no value

Monadic laws:
- Left identity: maybe_bind(maybe_unit(a), f) == f(a)
- Right identity: maybe_bind(m, maybe_unit) == m
- Associativity: maybe_bind(maybe_bind(m, f), g) == maybe_bind(m, lambda x: maybe_bind(f(x), g))"""

from __future__ import annotations

import typing
from collections.abc import Callable

from .._errors import UnexpectedMonadError
from .._types import Operation


class Just[T]:
    """Successful Maybe holding exactly one value."""

    __slots__ = ("_value",)
    __match_args__ = ("value",)

    def __init__(self, value: T, /) -> None:
        self._value = value

    @property
    def value(self) -> T:
        """The wrapped value."""
        return self._value

    def is_just(self) -> bool:
        return True

    def is_nothing(self) -> bool:
        return False

    def bind[U](self, operation: Operation[T, Maybe[U]], /) -> Maybe[U]:
        """Feed the wrapped value to ``operation`` and return its Maybe."""
        return _expect_maybe(operation(self._value))

    def map[U](self, f: Callable[[T], U], /) -> Maybe[U]:
        """Functor fmap - apply ``f`` to the wrapped value."""
        return Just(f(self._value))

    def or_else(self, default: T, /) -> T:
        return self._value

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Just):
            return NotImplemented
        return self._value == other._value

    def __hash__(self) -> int:
        return hash((Just, self._value))

    def __repr__(self) -> str:
        return f"Just({self._value!r})"


class Nothing:
    """Empty Maybe. Every Nothing equals every other Nothing."""

    __slots__ = ()
    __match_args__ = ()

    def is_just(self) -> bool:
        return False

    def is_nothing(self) -> bool:
        return True

    def bind(self, operation: Operation[typing.Any, Maybe[typing.Any]], /) -> Nothing:
        """Short-circuit: ``operation`` is never called."""
        return self

    def map(self, f: Callable[[typing.Any], typing.Any], /) -> Nothing:
        return self

    def or_else[D](self, default: D, /) -> D:
        return default

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Nothing):
            return NotImplemented
        return True

    def __hash__(self) -> int:
        return hash(Nothing)

    def __repr__(self) -> str:
        return "Nothing()"


type Maybe[T] = Just[T] | Nothing


def _expect_maybe(value: typing.Any) -> Maybe[typing.Any]:
    if isinstance(value, (Just, Nothing)):
        return value
    raise UnexpectedMonadError("Maybe", value)


def maybe_unit[T](value: T, /) -> Maybe[T]:
    """Lift a value into Maybe. Always succeeds, even for None."""
    return Just(value)


def maybe_bind[T, U](maybe_value: Maybe[T], operation: Operation[T, Maybe[U]], /) -> Maybe[U]:
    """
    Monadic bind (>>=) for Maybe.

    - On Just(v): calls ``operation(v)`` once and returns its result
    - On Nothing: short-circuit, ``operation`` is not called

    Example:
        maybe_bind(Just("thingy"), lambda text: maybe_unit("other" + text))
        # Just("otherthingy")

    Raises UnexpectedMonadError if ``maybe_value`` or the operation's
    result is not a Maybe.
    """
    match maybe_value:
        case Just(value):
            return _expect_maybe(operation(value))
        case Nothing():
            return maybe_value
        case _:
            raise UnexpectedMonadError("Maybe", maybe_value)


__all__ = (
    "Just",
    "Nothing",
    "Maybe",
    "maybe_unit",
    "maybe_bind",
)
