"""
Core type definitions for unitbind.

Aliases shared by every monad in the package.
"""

from __future__ import annotations

from collections.abc import Callable

# ============================================================================
# Type aliases
# ============================================================================

# Operation = the dependent step handed to bind: plain value in, monadic value out
type Operation[A, M] = Callable[[A], M]

# NoValue = value carried by a computation that exists only for its effect
# NOTE: None is Python's unit type, so writer_tell yields Writer[None, W].
type NoValue = None

__all__ = (
    "Operation",
    "NoValue",
)
