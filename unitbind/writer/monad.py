"""Writer Monad

Pairs a value with a Log. The value flows through bind like identity,
the logs of every step are concatenated.

Monadic laws:
- Left identity: writer_bind(writer_unit(a), f) == f(a)
- Right identity: writer_bind(m, writer_unit) == m
- Associativity: writer_bind(writer_bind(m, f), g) == writer_bind(m, lambda x: writer_bind(f(x), g))"""

from __future__ import annotations

import typing
from collections.abc import Callable, Iterable

from .._errors import UnexpectedMonadError
from .._types import NoValue, Operation
from .log import Log


class Writer[T, W]:
    """
    Value with accumulated log.

    ``log`` accepts any iterable of entries and is stored as a Log,
    so Writer(5, []) == Writer(5, Log()).
    """

    __slots__ = ("_value", "_log")
    __match_args__ = ("value", "log")

    def __init__(self, value: T, log: Iterable[W] = (), /) -> None:
        self._value = value
        self._log: Log[W] = log if isinstance(log, Log) else Log(log)

    @property
    def value(self) -> T:
        return self._value

    @property
    def log(self) -> Log[W]:
        """The accumulated log."""
        return self._log

    # Monad operations

    def bind[U](self, operation: Operation[T, Writer[U, W]], /) -> Writer[U, W]:
        """Run ``operation`` on the value, append its log after ours."""
        next_writer = _expect_writer(operation(self._value))
        return Writer(next_writer._value, self._log.combine(next_writer._log))

    def map[U](self, f: Callable[[T], U], /) -> Writer[U, W]:
        """Functor fmap - apply ``f`` to the value, keep the log."""
        return Writer(f(self._value), self._log)

    # Writer operations

    def with_log(self, *entries: W) -> Writer[T, W]:
        """Add entries to the log without touching the value."""
        return Writer(self._value, self._log.combine(entries))

    def listen(self) -> Writer[tuple[T, Log[W]], W]:
        """Expose the log alongside the value."""
        return Writer((self._value, self._log), self._log)

    def censor(self, f: Callable[[Log[W]], Iterable[W]], /) -> Writer[T, W]:
        """Rewrite the log."""
        return Writer(self._value, f(self._log))

    def run(self) -> tuple[T, Log[W]]:
        return (self._value, self._log)

    # Protocol methods

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Writer):
            return NotImplemented
        return self._value == other._value and self._log == other._log

    def __hash__(self) -> int:
        return hash((Writer, self._value, self._log))

    def __repr__(self) -> str:
        return f"Writer({self._value!r}, {list(self._log)!r})"


def _expect_writer(value: typing.Any) -> Writer[typing.Any, typing.Any]:
    if isinstance(value, Writer):
        return value
    raise UnexpectedMonadError("Writer", value)


def writer_unit[T](value: T, /) -> Writer[T, typing.Any]:
    """Attach an empty log to ``value``."""
    return Writer(value, Log())


def writer_tell[W](entry: W, /) -> Writer[NoValue, W]:
    """
    Record a single log entry without producing a value.

    The value slot holds None. Meant to be used inside a bind chain:

    Example:
        writer_bind(writer_unit(0), lambda n: writer_tell(f"Got {n}"))
        # Writer(None, ['Got 0'])
    """
    return Writer(None, Log.of(entry))


def writer_bind[T, U, W](
    writer_value: Writer[T, W],
    operation: Operation[T, Writer[U, W]],
    /,
) -> Writer[U, W]:
    """
    Monadic bind (>>=) for Writer.

    Calls ``operation`` once with the current value. The result carries
    the operation's value and the first log followed by the second.

    Raises UnexpectedMonadError if ``writer_value`` or the operation's
    result is not a Writer.
    """
    match writer_value:
        case Writer(value, log):
            next_writer = _expect_writer(operation(value))
            return Writer(next_writer.value, log.combine(next_writer.log))
        case _:
            raise UnexpectedMonadError("Writer", writer_value)


__all__ = (
    "Writer",
    "writer_unit",
    "writer_tell",
    "writer_bind",
)
