from __future__ import annotations

import typing


class UnexpectedMonadError(TypeError):
    """A value of the wrong monad reached bind or a lift conversion."""

    expected: str
    got: typing.Any

    def __init__(self, expected: str, got: typing.Any) -> None:
        self.expected = expected
        self.got = got
        super().__init__(f"Expected {expected}, got {type(got).__name__}: {got!r}")


__all__ = ("UnexpectedMonadError",)
