"""Exceptions raised while parsing scene scripts."""
from __future__ import annotations


class ScriptError(Exception):
    """Base exception for scene script failures."""


class ParseError(ScriptError):
    """Raised when script source is malformed; no Program is produced."""

    def __init__(self, message: str, *, line_number: int | None = None, line: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.line_number = line_number
        self.line = line

    def locate(self, line_number: int, line: str) -> None:
        """Attach the source position unless an inner parser already did."""
        if self.line_number is None:
            self.line_number = line_number
            self.line = line

    def __str__(self) -> str:
        if self.line_number is None:
            return self.message
        return f"line {self.line_number}: {self.message}"


class UnterminatedStringError(ParseError):
    """Raised when a string literal has no closing quote on its line."""


class MissingArgumentError(ParseError):
    """Raised when a statement keyword lacks a required argument."""

    def __init__(self, keyword: str, expected: str, **kwargs) -> None:
        super().__init__(f"'{keyword}' requires {expected}.", **kwargs)
        self.keyword = keyword
        self.expected = expected


class InvalidNumberError(ParseError):
    """Raised when a numeric argument is not an integer."""


class InvalidCharacterError(ParseError):
    """Raised when a boolean expression contains an unsupported character."""


class MalformedExpressionError(ParseError):
    """Raised when a boolean expression does not follow the grammar."""


class TrailingTokensError(ParseError):
    """Raised when tokens remain after a complete boolean expression."""
