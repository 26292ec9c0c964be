"""
Writer Monad
============

Writer[T, W] - a value paired with an accumulated log.
Binding concatenates logs in the order the binds happen.
"""

from .log import Log
from .monad import Writer, writer_bind, writer_tell, writer_unit

__all__ = (
    "Log",
    "Writer",
    "writer_unit",
    "writer_tell",
    "writer_bind",
)
