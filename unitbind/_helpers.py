"""Small helpers shared by every monad.

Not tied to any one monad: bind is passed in explicitly."""

from __future__ import annotations

import typing
from collections.abc import Callable

from ._types import Operation


def chain[M](
    value: M,
    *operations: Operation[typing.Any, M],
    bind: Callable[[M, Operation[typing.Any, M]], M],
) -> M:
    """
    Bind ``operations`` over ``value`` left to right.

    chain(m, f, g, bind=maybe_bind) == maybe_bind(maybe_bind(m, f), g)

    Short-circuiting is whatever ``bind`` does: with maybe_bind a Nothing
    stops the remaining operations from running.
    """
    result = value
    for operation in operations:
        result = bind(result, operation)
    return result


__all__ = (
    "chain",
)
