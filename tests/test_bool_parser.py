import pytest

from scenescript.domain.defs import (
    AndExpr,
    FalseExpr,
    HasExpr,
    IdentExpr,
    NotExpr,
    OrExpr,
    TrueExpr,
)
from scenescript.parsing import (
    InvalidCharacterError,
    MalformedExpressionError,
    TrailingTokensError,
    parse_bool_expr,
    tokenize,
)


def test_tokenize_keywords_are_case_insensitive_identifiers_keep_case() -> None:
    tokens = tokenize("NOT Has Key AND (open_door)")
    assert [(token.kind, token.value) for token in tokens] == [
        ("not", "not"),
        ("has", "has"),
        ("identifier", "Key"),
        ("and", "and"),
        ("(", "("),
        ("identifier", "open_door"),
        (")", ")"),
    ]


def test_tokenize_rejects_invalid_character() -> None:
    with pytest.raises(InvalidCharacterError):
        tokenize("a & b")


def test_not_binds_tighter_than_and_then_or() -> None:
    expr = parse_bool_expr("not a and b or c")
    assert expr == OrExpr(
        left=AndExpr(left=NotExpr(operand=IdentExpr("a")), right=IdentExpr("b")),
        right=IdentExpr("c"),
    )


def test_and_or_are_left_associative() -> None:
    assert parse_bool_expr("a or b or c") == OrExpr(
        left=OrExpr(left=IdentExpr("a"), right=IdentExpr("b")), right=IdentExpr("c")
    )
    assert parse_bool_expr("a and b and c") == AndExpr(
        left=AndExpr(left=IdentExpr("a"), right=IdentExpr("b")), right=IdentExpr("c")
    )


def test_parentheses_override_precedence() -> None:
    assert parse_bool_expr("a and (b or c)") == AndExpr(
        left=IdentExpr("a"), right=OrExpr(left=IdentExpr("b"), right=IdentExpr("c"))
    )


def test_double_not_and_constants() -> None:
    assert parse_bool_expr("not not true") == NotExpr(operand=NotExpr(operand=TrueExpr()))
    assert parse_bool_expr("FALSE") == FalseExpr()


def test_has_builds_has_node() -> None:
    assert parse_bool_expr("has a and has b") == AndExpr(left=HasExpr("a"), right=HasExpr("b"))


@pytest.mark.parametrize(
    "source",
    ["", "a and", "(a or b", "has", "has and", "not", ")", "has true"],
)
def test_malformed_expressions(source: str) -> None:
    with pytest.raises(MalformedExpressionError):
        parse_bool_expr(source)


def test_trailing_tokens() -> None:
    with pytest.raises(TrailingTokensError):
        parse_bool_expr("a b")
    with pytest.raises(TrailingTokensError):
        parse_bool_expr("(a))")
