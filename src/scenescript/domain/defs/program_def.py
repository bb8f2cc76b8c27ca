"""Parsed script program: scene ids mapped to statement sequences."""
from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Dict, Iterator, Mapping, Tuple

from scenescript.domain.defs.statement_def import Statement

SceneBody = Tuple[Statement, ...]


@dataclass(frozen=True, slots=True)
class Program:
    """Immutable result of parsing one script."""

    scenes: Mapping[str, SceneBody] = field(default_factory=dict)
    duplicate_scene_ids: Tuple[str, ...] = ()

    @classmethod
    def from_scenes(
        cls,
        scenes: Dict[str, SceneBody],
        duplicate_scene_ids: Tuple[str, ...] = (),
    ) -> Program:
        return cls(scenes=MappingProxyType(dict(scenes)), duplicate_scene_ids=duplicate_scene_ids)

    @property
    def scene_ids(self) -> list[str]:
        """Scene ids in source order."""
        return list(self.scenes.keys())

    def get(self, scene_id: str) -> SceneBody | None:
        """Return the body for an exact scene id, or None when absent."""
        return self.scenes.get(scene_id)

    def __contains__(self, scene_id: object) -> bool:
        return scene_id in self.scenes

    def __len__(self) -> int:
        return len(self.scenes)

    def __iter__(self) -> Iterator[str]:
        return iter(self.scenes)
