from unitbind import id_bind, id_unit


def test_id_unit_returns_the_value_it_is_given() -> None:
    assert id_unit("ohai") == "ohai"
    assert id_unit(5) == 5
    assert id_unit({}) == {}


def test_id_unit_does_not_copy() -> None:
    payload: list[int] = []
    assert id_unit(payload) is payload


def test_id_bind_passes_its_first_argument_to_the_operation() -> None:
    assert id_bind(id_unit("orly"), lambda text: text + " yarly") == "orly yarly"


def test_id_bind_calls_operation_exactly_once() -> None:
    calls: list[int] = []

    def record(value: int) -> int:
        calls.append(value)
        return value * 2

    assert id_bind(21, record) == 42
    assert calls == [21]


def test_id_bind_sequences_nested_operations() -> None:
    result = id_bind(id_unit(1), lambda a:
             id_bind(id_unit(2), lambda b:
             id_unit(a + b)))
    assert result == 3
