import pytest

from scenescript.domain.state import GameState
from scenescript.parsing import parse_bool_expr
from scenescript.services.condition_evaluator import evaluate_condition


def _eval(source: str, flags=(), inventory=()) -> bool:
    state = GameState(flags=set(flags), inventory=set(inventory))
    return evaluate_condition(parse_bool_expr(source), state)


@pytest.mark.parametrize(
    ("flags", "inventory", "expected"),
    [
        ({"a", "b"}, set(), True),
        ({"a"}, {"b"}, True),
        ({"a"}, set(), False),
        (set(), set(), False),
    ],
)
def test_has_and_has(flags, inventory, expected) -> None:
    assert _eval("has a and has b", flags, inventory) is expected


def test_identifier_is_the_same_as_has() -> None:
    assert _eval("key", inventory={"key"}) is True
    assert _eval("key") is False


def test_not_and_constants() -> None:
    assert _eval("not a") is True
    assert _eval("not not a", flags={"a"}) is True
    assert _eval("true and not false") is True


def test_precedence_evaluates_as_grouped() -> None:
    assert _eval("not a and b or c", flags={"c", "a"}) is True
    assert _eval("not a and b or c", flags={"b"}) is True
    assert _eval("not a and b or c", flags={"a", "b"}) is False


def test_identifiers_are_case_sensitive() -> None:
    assert _eval("Key", inventory={"key"}) is False


def test_or_short_circuits() -> None:
    class CountingState:
        def __init__(self) -> None:
            self.lookups: list[str] = []

        def has(self, name: str) -> bool:
            self.lookups.append(name)
            return name == "a"

    context = CountingState()
    assert evaluate_condition(parse_bool_expr("a or b"), context) is True
    assert context.lookups == ["a"]
