"""Base repository implementation for JSON data files."""
from __future__ import annotations

from pathlib import Path
from typing import Callable, Dict, Generic, TypeVar

from scenescript.data.errors import DataValidationError
from scenescript.data.json_loader import load_json

T = TypeVar("T")


class RepositoryBase(Generic[T]):
    """Common caching and loading behavior for repositories."""

    def __init__(
        self,
        filename: str,
        directory_resolver: Callable[[Path | None], Path],
        base_path: Path | str | None = None,
    ) -> None:
        self._filename = filename
        self._directory_resolver = directory_resolver
        self._base_path = Path(base_path) if base_path is not None else None
        self._definitions: Dict[str, T] | None = None

    def _get_file_path(self) -> Path:
        return self._directory_resolver(self._base_path) / self._filename

    def _load_raw(self) -> dict[str, object]:
        file_path = self._get_file_path()
        raw = load_json(file_path)
        if not isinstance(raw, dict):
            raise DataValidationError(f"Expected top-level object in {file_path}")
        return raw

    def _build(self, raw: dict[str, object]) -> Dict[str, T]:
        """Convert a raw dict into typed definitions."""
        raise NotImplementedError

    def _ensure_loaded(self) -> Dict[str, T]:
        if self._definitions is None:
            raw = self._load_raw()
            self._definitions = self._build(raw)
        return self._definitions

    def load(self) -> None:
        """Read and validate the backing file now instead of on first access."""
        self._ensure_loaded()

    def keys(self) -> list[str]:
        return sorted(self._ensure_loaded().keys())
