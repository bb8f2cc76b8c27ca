"""Double-quoted string literal reader."""
from __future__ import annotations

from typing import Dict, List, Tuple

from .errors import UnterminatedStringError

_ESCAPES: Dict[str, str] = {
    "n": "\n",
    "t": "\t",
    '"': '"',
    "\\": "\\",
}


def read_string_literal(line: str, start: int) -> Tuple[str, int]:
    """Decode the literal whose opening quote sits at ``start``.

    Returns the decoded value and the index just past the closing quote.
    Unknown escapes keep the escaped character.
    """
    if start >= len(line) or line[start] != '"':
        raise ValueError(f"No opening quote at index {start}.")
    out: List[str] = []
    index = start + 1
    length = len(line)
    while index < length:
        char = line[index]
        if char == "\\":
            index += 1
            if index >= length:
                break
            escaped = line[index]
            out.append(_ESCAPES.get(escaped, escaped))
            index += 1
            continue
        if char == '"':
            return "".join(out), index + 1
        out.append(char)
        index += 1
    raise UnterminatedStringError("Unterminated string literal.")


def find_string_literal(line: str) -> Tuple[str, int] | None:
    """Read the first string literal on the line, or None when there is no quote."""
    start = line.find('"')
    if start == -1:
        return None
    return read_string_literal(line, start)
