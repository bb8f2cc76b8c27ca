"""Localizer implementations for print text and choice labels."""
from __future__ import annotations

from typing import Mapping

from scenescript.data.repositories import StringTableRepository


class IdentityLocalizer:
    """Returns text unchanged."""

    def resolve(self, text: str) -> str:
        return text


class TableLocalizer:
    """Resolves symbolic keys through a string table; unknown text passes through."""

    def __init__(self, table: Mapping[str, str] | StringTableRepository) -> None:
        self._table = table

    def resolve(self, text: str) -> str:
        return self._table.get(text, text)
