"""Runs scenes by id and follows scene transfers."""
from __future__ import annotations

import logging
from collections import deque
from typing import Deque, Literal

from scenescript.domain.defs import Program
from scenescript.domain.state import GameState
from scenescript.domain.style import StyleState
from scenescript.services.interpreter import Interpreter, TransferredTo
from scenescript.services.ports import ChoicePresenter, Localizer, Renderer

_LOG = logging.getLogger(__name__)

DEFAULT_START_SCENE = "CH0"
SCENE_HISTORY_LIMIT = 50

RunnerPhase = Literal["idle", "executing", "awaiting_choice", "transferring"]


class SceneRunner:
    """Application service that drives a parsed program."""

    def __init__(
        self,
        program: Program,
        renderer: Renderer,
        chooser: ChoicePresenter,
        *,
        state: GameState | None = None,
        style: StyleState | None = None,
        localizer: Localizer | None = None,
    ) -> None:
        self._program = program
        self._renderer = renderer
        self._interpreter = Interpreter(
            renderer,
            chooser,
            state=state,
            style=style,
            localizer=localizer,
        )
        self._running = False
        self._transferring = False
        self.current_scene_id: str | None = None
        self.scenes_entered = 0
        # Holds the most recent scenes only.
        self.visited_scene_ids: Deque[str] = deque(maxlen=SCENE_HISTORY_LIMIT)

    @property
    def interpreter(self) -> Interpreter:
        return self._interpreter

    @property
    def state(self) -> GameState:
        return self._interpreter.state

    @property
    def style(self) -> StyleState:
        return self._interpreter.style

    @property
    def phase(self) -> RunnerPhase:
        if not self._running:
            return "idle"
        if self._transferring:
            return "transferring"
        if self._interpreter.awaiting_choice:
            return "awaiting_choice"
        return "executing"

    def run(self, start_scene_id: str = DEFAULT_START_SCENE) -> None:
        """Start a session: push the initial style, then play from ``start_scene_id``."""
        self._renderer.apply_style(self.style.snapshot())
        self.run_scene(start_scene_id)

    def run_scene(self, scene_id: str) -> None:
        """Run a scene and every scene it transfers to.

        Each `go` unwinds the executor back here and the target starts fresh.
        The runner reports the "transferring" phase from the unwind until the
        target scene has been looked up. A missing scene renders a diagnostic
        line and ends the run.
        """
        self._running = True
        try:
            next_scene_id: str | None = scene_id
            while next_scene_id is not None:
                next_scene_id = self._enter_scene(next_scene_id)
                self._transferring = next_scene_id is not None
        finally:
            self._running = False
            self._transferring = False

    def _enter_scene(self, scene_id: str) -> str | None:
        self._renderer.clear_transient_output()
        self.current_scene_id = scene_id
        body = self._program.get(scene_id)
        self._transferring = False
        if body is None:
            _LOG.warning("Scene not found: %s", scene_id)
            self._renderer.render_text(f"Scene not found: {scene_id}")
            return None
        _LOG.debug("Entering scene %s.", scene_id)
        self.scenes_entered += 1
        self.visited_scene_ids.append(scene_id)
        result = self._interpreter.execute(body)
        if isinstance(result, TransferredTo):
            return result.scene_id
        return None
