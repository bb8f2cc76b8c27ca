"""Domain-level state tracking."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Set


@dataclass
class GameState:
    """Flags and inventory items set by the running script."""

    flags: Set[str] = field(default_factory=set)
    inventory: Set[str] = field(default_factory=set)

    def set_flag(self, flag_id: str) -> None:
        self.flags.add(flag_id)

    def unset_flag(self, flag_id: str) -> None:
        self.flags.discard(flag_id)

    def add_item(self, item_id: str) -> None:
        self.inventory.add(item_id)

    def remove_item(self, item_id: str) -> None:
        self.inventory.discard(item_id)

    def has(self, name: str) -> bool:
        """Return True when the name is a set flag or a held item."""
        return name in self.flags or name in self.inventory
