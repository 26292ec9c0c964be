"""
Either Monad
============

Either[L, R] - success (Right) or failure (Left) with an explanation.
Unlike Maybe's Nothing, Left carries a value through the rest of the chain.
"""

from .monad import Either, Left, Right, either_bind, either_fail, either_unit

__all__ = (
    "Left",
    "Right",
    "Either",
    "either_unit",
    "either_fail",
    "either_bind",
)
