"""Tokenizer and recursive-descent parser for boolean conditions.

Grammar, lowest precedence first::

    or_expr  := and_expr ("or" and_expr)*
    and_expr := not_expr ("and" not_expr)*
    not_expr := "not" not_expr | atom
    atom     := "(" or_expr ")" | "has" IDENT | IDENT | "true" | "false"

Keywords are matched case-insensitively; identifiers keep their case.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import List, Literal, Sequence

from scenescript.domain.defs import (
    AndExpr,
    BoolExpr,
    FalseExpr,
    HasExpr,
    IdentExpr,
    NotExpr,
    OrExpr,
    TrueExpr,
)

from .errors import InvalidCharacterError, MalformedExpressionError, TrailingTokensError

TokenKind = Literal["(", ")", "and", "or", "not", "has", "true", "false", "identifier"]

KEYWORDS: frozenset[str] = frozenset({"and", "or", "not", "has", "true", "false"})


@dataclass(frozen=True, slots=True)
class Token:
    kind: TokenKind
    value: str


def _is_word_char(char: str) -> bool:
    return char == "_" or ("0" <= char <= "9") or ("a" <= char <= "z") or ("A" <= char <= "Z")


def tokenize(expr: str) -> List[Token]:
    """Split a condition string into tokens."""
    tokens: List[Token] = []
    index = 0
    length = len(expr)
    while index < length:
        char = expr[index]
        if char.isspace():
            index += 1
            continue
        if char in "()":
            tokens.append(Token(kind=char, value=char))
            index += 1
            continue
        if _is_word_char(char):
            end = index
            while end < length and _is_word_char(expr[end]):
                end += 1
            word = expr[index:end]
            lower = word.lower()
            if lower in KEYWORDS:
                tokens.append(Token(kind=lower, value=lower))
            else:
                tokens.append(Token(kind="identifier", value=word))
            index = end
            continue
        raise InvalidCharacterError(f"Invalid character {char!r} in condition '{expr}'.")
    return tokens


class BoolExprParser:
    """Parses a token list; the parser owns the only cursor."""

    def __init__(self, tokens: Sequence[Token]) -> None:
        self._tokens = list(tokens)
        self._pos = 0

    @property
    def position(self) -> int:
        return self._pos

    def parse(self) -> BoolExpr:
        """Parse a complete expression, rejecting leftover tokens."""
        expr = self._parse_or()
        if self._pos < len(self._tokens):
            leftover = " ".join(token.value for token in self._tokens[self._pos :])
            raise TrailingTokensError(f"Unexpected tokens after condition: '{leftover}'.")
        return expr

    def _peek(self) -> Token | None:
        if self._pos < len(self._tokens):
            return self._tokens[self._pos]
        return None

    def _accept(self, kind: TokenKind) -> bool:
        token = self._peek()
        if token is not None and token.kind == kind:
            self._pos += 1
            return True
        return False

    def _parse_or(self) -> BoolExpr:
        left = self._parse_and()
        while self._accept("or"):
            left = OrExpr(left=left, right=self._parse_and())
        return left

    def _parse_and(self) -> BoolExpr:
        left = self._parse_not()
        while self._accept("and"):
            left = AndExpr(left=left, right=self._parse_not())
        return left

    def _parse_not(self) -> BoolExpr:
        if self._accept("not"):
            return NotExpr(operand=self._parse_not())
        return self._parse_atom()

    def _parse_atom(self) -> BoolExpr:
        token = self._peek()
        if token is None:
            raise MalformedExpressionError("Condition ended unexpectedly.")
        self._pos += 1
        if token.kind == "(":
            inner = self._parse_or()
            if not self._accept(")"):
                raise MalformedExpressionError("Unbalanced parentheses in condition.")
            return inner
        if token.kind == "has":
            name = self._peek()
            if name is None or name.kind != "identifier":
                raise MalformedExpressionError("'has' must be followed by an identifier.")
            self._pos += 1
            return HasExpr(name=name.value)
        if token.kind == "identifier":
            return IdentExpr(name=token.value)
        if token.kind == "true":
            return TrueExpr()
        if token.kind == "false":
            return FalseExpr()
        raise MalformedExpressionError(f"Unexpected token '{token.value}' in condition.")


def parse_bool_expr(expr: str) -> BoolExpr:
    """Tokenize and parse a condition string."""
    return BoolExprParser(tokenize(expr)).parse()
