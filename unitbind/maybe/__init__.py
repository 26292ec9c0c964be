"""
Maybe Monad
===========

Maybe[T] - presence (Just) or absence (Nothing) of a value.
A bind chain stops at the first Nothing it meets.
"""

from .monad import Just, Maybe, Nothing, maybe_bind, maybe_unit

__all__ = (
    "Just",
    "Nothing",
    "Maybe",
    "maybe_unit",
    "maybe_bind",
)
