"""
Identity Monad
==============

No wrapper, no extra behavior: only sequencing.
"""

from .monad import id_bind, id_unit

__all__ = (
    "id_unit",
    "id_bind",
)
