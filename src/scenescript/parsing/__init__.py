"""Scene script language front end."""

from .bool_parser import BoolExprParser, Token, parse_bool_expr, tokenize
from .errors import (
    InvalidCharacterError,
    InvalidNumberError,
    MalformedExpressionError,
    MissingArgumentError,
    ParseError,
    ScriptError,
    TrailingTokensError,
    UnterminatedStringError,
)
from .lexer import clean_line, split_lines, strip_comments
from .statement_parser import BlockResult, ScriptParser, parse_lines, parse_script
from .string_literal import find_string_literal, read_string_literal

__all__ = [
    "BlockResult",
    "BoolExprParser",
    "InvalidCharacterError",
    "InvalidNumberError",
    "MalformedExpressionError",
    "MissingArgumentError",
    "ParseError",
    "ScriptError",
    "ScriptParser",
    "Token",
    "TrailingTokensError",
    "UnterminatedStringError",
    "clean_line",
    "find_string_literal",
    "parse_bool_expr",
    "parse_lines",
    "parse_script",
    "read_string_literal",
    "split_lines",
    "strip_comments",
]
