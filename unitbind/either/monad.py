"""Either Monad

Closed sum of two shapes:
- Right(value) - success, the chain continues
- Left(value)  - failure, the chain ends and the value is kept

Monadic laws:
- Left identity: either_bind(either_unit(a), f) == f(a)
- Right identity: either_bind(m, either_unit) == m
- Associativity: either_bind(either_bind(m, f), g) == either_bind(m, lambda x: either_bind(f(x), g))"""

from __future__ import annotations

import typing
from collections.abc import Callable

from .._errors import UnexpectedMonadError
from .._types import Operation


class Right[R]:
    """Successful Either."""

    __slots__ = ("_value",)
    __match_args__ = ("value",)

    def __init__(self, value: R, /) -> None:
        self._value = value

    @property
    def value(self) -> R:
        return self._value

    def is_left(self) -> bool:
        return False

    def is_right(self) -> bool:
        return True

    def bind[L, U](self, operation: Operation[R, Either[L, U]], /) -> Either[L, U]:
        """Feed the success value to ``operation`` and return its Either."""
        return _expect_either(operation(self._value))

    def map[U](self, f: Callable[[R], U], /) -> Right[U]:
        """Functor fmap - apply ``f`` to the success value."""
        return Right(f(self._value))

    def map_left(self, f: Callable[[typing.Any], typing.Any], /) -> Right[R]:
        return self

    def or_else(self, default: R, /) -> R:
        return self._value

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Right):
            return NotImplemented
        return self._value == other._value

    def __hash__(self) -> int:
        return hash((Right, self._value))

    def __repr__(self) -> str:
        return f"Right({self._value!r})"


class Left[L]:
    """Failed Either. Binding over it returns it unchanged."""

    __slots__ = ("_value",)
    __match_args__ = ("value",)

    def __init__(self, value: L, /) -> None:
        self._value = value

    @property
    def value(self) -> L:
        return self._value

    def is_left(self) -> bool:
        return True

    def is_right(self) -> bool:
        return False

    def bind(self, operation: Operation[typing.Any, typing.Any], /) -> Left[L]:
        """Short-circuit: ``operation`` is never called."""
        return self

    def map(self, f: Callable[[typing.Any], typing.Any], /) -> Left[L]:
        return self

    def map_left[F](self, f: Callable[[L], F], /) -> Left[F]:
        """Map over the failure value."""
        return Left(f(self._value))

    def or_else[D](self, default: D, /) -> D:
        return default

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Left):
            return NotImplemented
        return self._value == other._value

    def __hash__(self) -> int:
        return hash((Left, self._value))

    def __repr__(self) -> str:
        return f"Left({self._value!r})"


type Either[L, R] = Left[L] | Right[R]


def _expect_either(value: typing.Any) -> Either[typing.Any, typing.Any]:
    if isinstance(value, (Left, Right)):
        return value
    raise UnexpectedMonadError("Either", value)


def either_unit[R](value: R, /) -> Either[typing.Never, R]:
    """Lift a value into Either as a success."""
    return Right(value)


def either_fail[L](value: L, /) -> Either[L, typing.Never]:
    """
    Create a failed Either. Dual of either_unit().

    NOTE: the failure value is free-form; a message string is the common case.
    """
    return Left(value)


def either_bind[L, R, U](
    either_value: Either[L, R],
    operation: Operation[R, Either[L, U]],
    /,
) -> Either[L, U]:
    """
    Monadic bind (>>=) for Either.

    - On Right(v): calls ``operation(v)`` once and returns its result
    - On Left(e): short-circuit, returns the same Left

    Raises UnexpectedMonadError if ``either_value`` or the operation's
    result is not an Either.
    """
    match either_value:
        case Right(value):
            return _expect_either(operation(value))
        case Left(_):
            return either_value
        case _:
            raise UnexpectedMonadError("Either", either_value)


__all__ = (
    "Left",
    "Right",
    "Either",
    "either_unit",
    "either_fail",
    "either_bind",
)
