"""Data layer utilities for loading scripts and string tables."""

from .errors import DataError, DataLoadError, DataValidationError
from .paths import get_repo_root, get_scripts_path, get_strings_path
from .script_loader import load_program, read_script_text

__all__ = [
    "DataError",
    "DataLoadError",
    "DataValidationError",
    "get_repo_root",
    "get_scripts_path",
    "get_strings_path",
    "load_program",
    "read_script_text",
]
