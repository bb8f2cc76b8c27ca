"""Line scanning helpers: comment stripping and line splitting."""
from __future__ import annotations

import re
from typing import List

_LINE_SPLIT_RE = re.compile(r"\r?\n")


def split_lines(text: str) -> List[str]:
    """Split script source into raw lines."""
    return _LINE_SPLIT_RE.split(text)


def strip_comments(line: str) -> str:
    """Drop everything from the first unquoted ';' to the end of the line.

    Quote state toggles on every unescaped '"'. A backslash and the character
    after it are copied verbatim; decoding escapes is left to the string
    literal reader.
    """
    result: List[str] = []
    in_string = False
    index = 0
    length = len(line)
    while index < length:
        char = line[index]
        if char == "\\":
            result.append(line[index : index + 2])
            index += 2
            continue
        if char == '"':
            in_string = not in_string
        elif char == ";" and not in_string:
            break
        result.append(char)
        index += 1
    return "".join(result)


def clean_line(line: str) -> str:
    """Return the comment-free, trimmed form of a raw line ('' when blank)."""
    return strip_comments(line).strip()
