"""Reading and parsing scene script files."""
from __future__ import annotations

from pathlib import Path

from scenescript.domain.defs import Program
from scenescript.parsing import parse_script

from .errors import DataLoadError


def read_script_text(path: Path | str) -> str:
    """Return the UTF-8 source of a script file."""
    script_path = Path(path)
    try:
        return script_path.read_text(encoding="utf-8-sig")
    except FileNotFoundError as exc:
        raise DataLoadError(f"Script file not found: {script_path}") from exc
    except UnicodeDecodeError as exc:
        raise DataLoadError(f"Script file is not valid UTF-8: {script_path}") from exc
    except OSError as exc:
        raise DataLoadError(f"Unable to read script file: {script_path}") from exc


def load_program(path: Path | str) -> Program:
    """Read and parse a script file; parse errors propagate unchanged."""
    return parse_script(read_script_text(path))
