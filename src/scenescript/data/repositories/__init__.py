"""Repository exports."""

from .strings_repo import StringTableRepository

__all__ = ["StringTableRepository"]
