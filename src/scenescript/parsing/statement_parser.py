"""Line-oriented recursive-descent parser that builds a Program."""
from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Callable, Dict, List, Sequence, Tuple

from scenescript.domain.defs import (
    AddItemStatement,
    ChoiceStatement,
    GotoStatement,
    IfStatement,
    ImageStatement,
    PrintStatement,
    Program,
    RemoveItemStatement,
    SceneBody,
    SetFlagStatement,
    Statement,
    StyleChangeStatement,
    UnsetFlagStatement,
)

from .bool_parser import parse_bool_expr
from .errors import InvalidNumberError, MissingArgumentError, ParseError
from .lexer import clean_line, split_lines
from .string_literal import find_string_literal

_LOG = logging.getLogger(__name__)

_SCENE_RE = re.compile(r"^scene\b", re.IGNORECASE)
_LEADING_INT_RE = re.compile(r"^[+-]?\d+")

BLOCK_END: Tuple[str, ...] = ("end",)
BLOCK_ELSE_OR_END: Tuple[str, ...] = ("else", "end")

_IDENTIFIER_STATEMENTS: Dict[str, Tuple[Callable[[str], Statement], str]] = {
    "go": (lambda value: GotoStatement(target_scene_id=value), "a target scene id"),
    "set": (lambda value: SetFlagStatement(flag_id=value), "a flag identifier"),
    "unset": (lambda value: UnsetFlagStatement(flag_id=value), "a flag identifier"),
    "add": (lambda value: AddItemStatement(item_id=value), "an item identifier"),
    "remove": (lambda value: RemoveItemStatement(item_id=value), "an item identifier"),
}


@dataclass(frozen=True, slots=True)
class BlockResult:
    """Statements collected by a nested block and the terminator that closed it."""

    statements: Tuple[Statement, ...]
    terminator: str | None


class ScriptParser:
    """Single-pass parser over the script lines.

    The line cursor is the only mutable parsing state. It only moves forward.
    """

    def __init__(self, lines: Sequence[str]) -> None:
        self._lines = list(lines)
        self._pos = 0

    @property
    def position(self) -> int:
        return self._pos

    def parse(self) -> Program:
        scenes: Dict[str, SceneBody] = {}
        duplicates: List[str] = []
        while not self._at_end():
            trimmed = self._current()
            if not trimmed:
                self._pos += 1
                continue
            if not _SCENE_RE.match(trimmed):
                # Lines outside a scene are ignored.
                self._pos += 1
                continue
            parts = trimmed.split()
            if len(parts) < 2:
                raise self._locate(MissingArgumentError("scene", "a scene id"))
            scene_id = parts[1]
            self._pos += 1
            body = self._parse_scene_body()
            if scene_id in scenes:
                _LOG.warning("Scene %s is defined more than once; the last definition wins.", scene_id)
                duplicates.append(scene_id)
            scenes[scene_id] = body
        _LOG.debug("Parsed %d scene(s) from %d line(s).", len(scenes), len(self._lines))
        return Program.from_scenes(scenes, tuple(duplicates))

    def _at_end(self) -> bool:
        return self._pos >= len(self._lines)

    def _current(self) -> str:
        return clean_line(self._lines[self._pos])

    def _locate(self, error: ParseError) -> ParseError:
        error.locate(self._pos + 1, self._lines[self._pos])
        return error

    def _parse_scene_body(self) -> SceneBody:
        statements: List[Statement] = []
        while not self._at_end():
            trimmed = self._current()
            if not trimmed:
                self._pos += 1
                continue
            if _SCENE_RE.match(trimmed):
                break
            statement = self._parse_statement(trimmed)
            if statement is not None:
                statements.append(statement)
        return tuple(statements)

    def parse_block(self, terminators: Sequence[str]) -> BlockResult:
        """Collect statements until a line starting with one of ``terminators``.

        The terminator line is left for the caller to consume. Reaching the end
        of input closes the block with ``terminator=None``.
        """
        statements: List[Statement] = []
        while not self._at_end():
            trimmed = self._current()
            if not trimmed:
                self._pos += 1
                continue
            lower = trimmed.lower()
            for terminator in terminators:
                if lower.startswith(terminator):
                    return BlockResult(statements=tuple(statements), terminator=terminator)
            statement = self._parse_statement(trimmed)
            if statement is not None:
                statements.append(statement)
        return BlockResult(statements=tuple(statements), terminator=None)

    def _parse_statement(self, trimmed: str) -> Statement | None:
        """Parse the statement at the cursor; always advances past it."""
        start = self._pos
        try:
            return self._dispatch(trimmed)
        except ParseError as exc:
            exc.locate(start + 1, self._lines[start])
            raise

    def _dispatch(self, trimmed: str) -> Statement | None:
        parts = trimmed.split()
        keyword = parts[0].lower()
        if keyword in _IDENTIFIER_STATEMENTS:
            factory, expected = _IDENTIFIER_STATEMENTS[keyword]
            value = self._require_word(parts, keyword, expected)
            self._pos += 1
            return factory(value)
        if keyword == "print":
            text = self._require_string(trimmed, keyword)
            self._pos += 1
            return PrintStatement(text=text)
        if keyword == "image":
            source = self._require_string(trimmed, keyword)
            self._pos += 1
            return ImageStatement(source=source)
        if keyword in ("background", "foreground"):
            value = self._require_word(parts, keyword, "a value")
            self._pos += 1
            return StyleChangeStatement(property=keyword, value=value)
        if keyword == "font":
            literal = find_string_literal(trimmed)
            if literal is not None:
                font = literal[0]
            else:
                font = self._require_word(parts, keyword, "a font name")
            self._pos += 1
            return StyleChangeStatement(property="font", value=font)
        if keyword == "fontsize":
            raw_size = self._require_word(parts, keyword, "a size")
            self._pos += 1
            return StyleChangeStatement(property="fontsize", value=_parse_int(raw_size))
        if keyword == "choice":
            return self._parse_choice(trimmed)
        if keyword == "if":
            return self._parse_if(parts)
        # Unknown keywords, including stray 'else'/'end', are skipped.
        _LOG.debug("Skipping unknown statement on line %d: %s", self._pos + 1, trimmed)
        self._pos += 1
        return None

    def _parse_choice(self, trimmed: str) -> ChoiceStatement:
        label = self._require_string(trimmed, "choice")
        self._pos += 1
        block = self.parse_block(BLOCK_END)
        if block.terminator == "end":
            self._pos += 1
        return ChoiceStatement(label=label, body=block.statements)

    def _parse_if(self, parts: Sequence[str]) -> IfStatement:
        then_index = next(
            (index for index, part in enumerate(parts) if index > 0 and part.lower() == "then"),
            None,
        )
        if then_index is None:
            raise MissingArgumentError("if", "a 'then' after the condition")
        condition = parse_bool_expr(" ".join(parts[1:then_index]))
        self._pos += 1
        then_block = self.parse_block(BLOCK_ELSE_OR_END)
        else_body: Tuple[Statement, ...] = ()
        if then_block.terminator == "else":
            self._pos += 1
            else_block = self.parse_block(BLOCK_END)
            else_body = else_block.statements
            if else_block.terminator == "end":
                self._pos += 1
        elif then_block.terminator == "end":
            self._pos += 1
        return IfStatement(condition=condition, then_body=then_block.statements, else_body=else_body)

    @staticmethod
    def _require_word(parts: Sequence[str], keyword: str, expected: str) -> str:
        if len(parts) < 2:
            raise MissingArgumentError(keyword, expected)
        return parts[1]

    @staticmethod
    def _require_string(trimmed: str, keyword: str) -> str:
        literal = find_string_literal(trimmed)
        if literal is None:
            raise MissingArgumentError(keyword, "a quoted string")
        return literal[0]


def _parse_int(raw: str) -> int:
    match = _LEADING_INT_RE.match(raw)
    if match is None:
        raise InvalidNumberError(f"'{raw}' is not a valid integer.")
    return int(match.group(0))


def parse_lines(lines: Sequence[str]) -> Program:
    """Parse pre-split script lines."""
    return ScriptParser(lines).parse()


def parse_script(text: str) -> Program:
    """Parse full script source into a Program."""
    return parse_lines(split_lines(text))
