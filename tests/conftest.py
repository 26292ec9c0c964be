from __future__ import annotations

import typing

import pytest


@pytest.fixture
def unreachable() -> typing.Callable[..., typing.NoReturn]:
    """Operation that fails the test if a bind chain ever calls it."""

    def operation(*_: object) -> typing.NoReturn:
        pytest.fail("Should not get here")

    return operation
