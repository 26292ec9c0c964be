"""
Lower unitbind values.

Functions for handing Maybe / Either / Writer results to code that
speaks kungfu or plain Python.
"""

from __future__ import annotations

import kungfu

from .._errors import UnexpectedMonadError
from ..either import Either, Left, Right
from ..maybe import Just, Maybe, Nothing
from ..writer import Writer


def to_option[T](maybe: Maybe[T]) -> kungfu.Option[T]:
    """Just(v) -> Some(v), Nothing() -> kungfu Nothing."""
    match maybe:
        case Just(value):
            return kungfu.Some(value)
        case Nothing():
            return kungfu.Nothing()
        case _:
            raise UnexpectedMonadError("Maybe", maybe)


def to_result[L, R](either: Either[L, R]) -> kungfu.Result[R, L]:
    """Right(v) -> Ok(v), Left(e) -> Error(e)."""
    match either:
        case Right(value):
            return kungfu.Ok(value)
        case Left(error):
            return kungfu.Error(error)
        case _:
            raise UnexpectedMonadError("Either", either)


def to_tuple[T, W](writer: Writer[T, W]) -> tuple[T, list[W]]:
    """Return (value, log) with the log as a plain list."""
    match writer:
        case Writer(value, log):
            return (value, list(log))
        case _:
            raise UnexpectedMonadError("Writer", writer)


__all__ = (
    "to_option",
    "to_result",
    "to_tuple",
)
