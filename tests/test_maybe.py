import pytest

from unitbind import Just, Nothing, UnexpectedMonadError, maybe_bind, maybe_unit


# ============================================================================
# unit
# ============================================================================


def test_maybe_unit_always_creates_a_successful_result() -> None:
    assert maybe_unit("yeop") == Just("yeop")
    assert maybe_unit(None) == Just(None)


def test_equality() -> None:
    assert Just(1) == Just(1)
    assert Just(1) != Just(2)
    assert Nothing() == Nothing()
    assert Just(None) != Nothing()
    assert len({Just("a"), Just("a"), Nothing(), Nothing()}) == 2


# ============================================================================
# bind
# ============================================================================


def test_maybe_bind_returns_its_last_value_if_no_nothing_is_encountered() -> None:
    assert maybe_bind(Just("thingy"), lambda text: maybe_unit("other" + text)) == Just("otherthingy")

    result = maybe_bind(Just("o_O"), lambda face_one:
             maybe_bind(Just("X.X"), lambda face_two:
             maybe_bind(Just("-____-"), lambda face_three:
             maybe_unit(face_one + face_two + face_three))))
    assert result == Just("o_OX.X-____-")


def test_maybe_bind_ends_the_sequence_on_nothing(unreachable) -> None:
    assert maybe_bind(Nothing(), unreachable) == Nothing()

    last = maybe_bind(Just("o_O"), lambda face_one:
           maybe_bind(Just("-____-"), lambda face_two:
           maybe_bind(Nothing(), unreachable)))
    assert last == Nothing()

    middle = maybe_bind(Just("o_O"), lambda face_one:
             maybe_bind(Nothing(), lambda _:
             maybe_bind(Just("-____-"), unreachable)))
    assert middle == Nothing()


def test_maybe_bind_propagates_operation_errors() -> None:
    def boom(_: str) -> Just[str]:
        raise ValueError("boom")

    with pytest.raises(ValueError, match="boom"):
        maybe_bind(Just("x"), boom)


def test_maybe_bind_rejects_non_maybe_result() -> None:
    with pytest.raises(UnexpectedMonadError) as exc_info:
        maybe_bind(Just(1), lambda x: x + 1)

    assert exc_info.value.expected == "Maybe"
    assert exc_info.value.got == 2


def test_maybe_bind_rejects_non_maybe_input(unreachable) -> None:
    with pytest.raises(UnexpectedMonadError):
        maybe_bind(1, unreachable)


# ============================================================================
# Methods
# ============================================================================


def test_bind_method_matches_maybe_bind(unreachable) -> None:
    assert Just(2).bind(lambda x: Just(x * 3)) == Just(6)
    assert Nothing().bind(unreachable) == Nothing()


def test_map() -> None:
    assert Just(2).map(str) == Just("2")
    assert Nothing().map(str) == Nothing()


def test_or_else() -> None:
    assert Just(2).or_else(0) == 2
    assert Nothing().or_else(0) == 0


def test_predicates() -> None:
    assert Just(1).is_just() and not Just(1).is_nothing()
    assert Nothing().is_nothing() and not Nothing().is_just()


def test_pattern_matching() -> None:
    def describe(value: Just[int] | Nothing) -> str:
        match value:
            case Just(inner):
                return f"just {inner}"
            case Nothing():
                return "nothing"

    assert describe(Just(4)) == "just 4"
    assert describe(Nothing()) == "nothing"


def test_values_are_read_only() -> None:
    with pytest.raises(AttributeError):
        Just(1).value = 2  # type: ignore[misc]
