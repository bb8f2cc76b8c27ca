"""Repository for localization string tables."""
from __future__ import annotations

from pathlib import Path
from typing import Dict

from scenescript.data import paths
from scenescript.data.errors import DataValidationError
from scenescript.data.repositories.base import RepositoryBase


def strings_filename(language: str) -> str:
    return f"strings.{language}.json"


class StringTableRepository(RepositoryBase[str]):
    """Loads a key -> display string table for one language."""

    def __init__(self, language: str, base_path: Path | str | None = None) -> None:
        if not language or not language.replace("_", "").replace("-", "").isalnum():
            raise ValueError(f"Invalid language code '{language}'.")
        super().__init__(strings_filename(language), paths.get_strings_path, base_path)
        self.language = language

    def _build(self, raw: dict[str, object]) -> Dict[str, str]:
        table: Dict[str, str] = {}
        for key, value in raw.items():
            if not isinstance(value, str):
                raise DataValidationError(f"String table entry '{key}' must be a string.")
            table[key] = value
        return table

    def get(self, key: str, default: str | None = None) -> str | None:
        """Return the display string for ``key`` or ``default``, like ``Mapping.get``."""
        return self._ensure_loaded().get(key, default)
