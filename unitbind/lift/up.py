"""
Lift values into Maybe / Either.

Functions for turning kungfu Option/Result, Optional values and
exception-based code into unitbind's sum types.
"""

from __future__ import annotations

from collections.abc import Callable

import kungfu

from .._errors import UnexpectedMonadError
from ..either import Either, Left, Right
from ..maybe import Just, Maybe, Nothing

def from_option[T](option: kungfu.Option[T]) -> Maybe[T]:
    """
    Convert kungfu Option to Maybe.

    Some(v) becomes Just(v), kungfu's Nothing becomes Nothing().

    Example:
        from unitbind import lift as L

        L.up.from_option(Some(42))  # Just(42)
    """
    match option:
        case kungfu.Some():
            return Just(option.unwrap())
        case kungfu.Nothing():
            return Nothing()
        case _:
            raise UnexpectedMonadError("Option", option)

def from_result[T, E](result: kungfu.Result[T, E]) -> Either[E, T]:
    """
    Convert kungfu Result to Either.

    Ok(v) becomes Right(v), Error(e) becomes Left(e).

    **When to use:** a function already returns Result and the rest of
    the chain is written with either_bind.
    """
    match result:
        case kungfu.Ok(value):
            return Right(value)
        case kungfu.Error(error):
            return Left(error)
        case _:
            raise UnexpectedMonadError("Result", result)

def optional[T](value: T | None) -> Maybe[T]:
    """
    Convert Optional to Maybe. None becomes Nothing().

    NOTE: differs from maybe_unit, which wraps None as Just(None).
    """
    if value is None:
        return Nothing()
    return Just(value)

def catching[T, E](
    thunk: Callable[[], T],
    *,
    on_error: Callable[[Exception], E],
) -> Either[E, T]:
    """
    Run ``thunk``, turn a raised exception into Left(on_error(exc)).

    Example:
        from unitbind import lift as L

        L.up.catching(lambda: int("nope"), on_error=str)
        # Left("invalid literal for int() with base 10: 'nope'")

    NOTE: Catches Exception subclasses only. Filter specific ones in
          on_error or use try/except manually.
    """
    try:
        value = thunk()
    except Exception as exc:
        return Left(on_error(exc))
    return Right(value)

__all__ = (
    "from_option",
    "from_result",
    "optional",
    "catching",
)

