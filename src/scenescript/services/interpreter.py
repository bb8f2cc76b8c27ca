"""Tree-walking statement executor."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Sequence, Tuple, Union

from scenescript.domain.defs import (
    AddItemStatement,
    ChoiceStatement,
    GotoStatement,
    IfStatement,
    ImageStatement,
    PrintStatement,
    RemoveItemStatement,
    SetFlagStatement,
    Statement,
    StyleChangeStatement,
    UnsetFlagStatement,
)
from scenescript.domain.state import GameState
from scenescript.domain.style import StyleState
from scenescript.services.condition_evaluator import evaluate_condition
from scenescript.services.errors import ChoiceSelectionError
from scenescript.services.localization import IdentityLocalizer
from scenescript.services.ports import ChoicePresenter, Localizer, MenuOption, Renderer

_LOG = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class Completed:
    """The statement sequence ran to its end."""


@dataclass(frozen=True, slots=True)
class TransferredTo:
    """A `go` ran; every enclosing sequence must stop immediately."""

    scene_id: str


RunResult = Union[Completed, TransferredTo]

COMPLETED = Completed()


def _only_choices(statements: Sequence[Statement]) -> bool:
    return all(isinstance(item, ChoiceStatement) for item in statements)


class Interpreter:
    """Runs statement sequences against one GameState and StyleState."""

    def __init__(
        self,
        renderer: Renderer,
        chooser: ChoicePresenter,
        *,
        state: GameState | None = None,
        style: StyleState | None = None,
        localizer: Localizer | None = None,
    ) -> None:
        self._renderer = renderer
        self._chooser = chooser
        self._state = state if state is not None else GameState()
        self._style = style if style is not None else StyleState()
        self._localizer = localizer or IdentityLocalizer()
        self.awaiting_choice = False

    @property
    def state(self) -> GameState:
        return self._state

    @property
    def style(self) -> StyleState:
        return self._style

    def execute(self, statements: Sequence[Statement]) -> RunResult:
        """Run ``statements`` in order and report how the run ended."""
        index = 0
        while index < len(statements):
            statement = statements[index]
            if isinstance(statement, ChoiceStatement):
                menu, index = self.collect_menu(statements, index)
                result = self._run_menu(menu)
            else:
                result = self._execute_statement(statement)
                index += 1
            if isinstance(result, TransferredTo):
                return result
        return COMPLETED

    def collect_menu(
        self, statements: Sequence[Statement], start: int
    ) -> Tuple[List[ChoiceStatement], int]:
        """Gather the menu that begins at ``start``.

        Consecutive choices are merged, and so is any `if` whose selected
        branch holds only choices. An `if` whose selected branch is empty is
        merged only when its other branch holds only choices too; otherwise
        it stops the scan and runs after the selection. Conditions are
        evaluated once, in scan order. Returns the menu and the index of the
        first statement after it.
        """
        menu: List[ChoiceStatement] = []
        index = start
        while index < len(statements):
            statement = statements[index]
            if isinstance(statement, ChoiceStatement):
                menu.append(statement)
                index += 1
                continue
            if isinstance(statement, IfStatement):
                branch = self._select_branch(statement)
                if branch:
                    absorbed = _only_choices(branch)
                else:
                    absorbed = _only_choices(statement.then_body) and _only_choices(statement.else_body)
                if absorbed:
                    menu.extend(branch)
                    index += 1
                    continue
            break
        return menu, index

    def _select_branch(self, statement: IfStatement) -> Tuple[Statement, ...]:
        if evaluate_condition(statement.condition, self._state):
            return statement.then_body
        return statement.else_body

    def _run_menu(self, menu: Sequence[ChoiceStatement]) -> RunResult:
        options = [
            MenuOption(label=self._localizer.resolve(choice.label), body=choice.body) for choice in menu
        ]
        _LOG.debug("Presenting %d choice(s).", len(options))
        self.awaiting_choice = True
        try:
            selected = self._chooser.present_choices(options)
        finally:
            self.awaiting_choice = False
        if not isinstance(selected, int) or not 0 <= selected < len(options):
            raise ChoiceSelectionError(f"Choice index {selected!r} is invalid for a menu of {len(options)}.")
        _LOG.debug("Selected choice %d: %s", selected, options[selected].label)
        return self.execute(options[selected].body)

    def _execute_statement(self, statement: Statement) -> RunResult:
        if isinstance(statement, PrintStatement):
            self._renderer.render_text(self._localizer.resolve(statement.text))
        elif isinstance(statement, ImageStatement):
            self._renderer.render_image(statement.source)
        elif isinstance(statement, SetFlagStatement):
            self._state.set_flag(statement.flag_id)
        elif isinstance(statement, UnsetFlagStatement):
            self._state.unset_flag(statement.flag_id)
        elif isinstance(statement, AddItemStatement):
            self._state.add_item(statement.item_id)
        elif isinstance(statement, RemoveItemStatement):
            self._state.remove_item(statement.item_id)
        elif isinstance(statement, StyleChangeStatement):
            self._style.apply(statement.property, statement.value)
            self._renderer.apply_style(self._style.snapshot())
        elif isinstance(statement, IfStatement):
            branch = self._select_branch(statement)
            if branch:
                return self.execute(branch)
        elif isinstance(statement, GotoStatement):
            return TransferredTo(scene_id=statement.target_scene_id)
        else:
            raise TypeError(f"Unsupported statement: {type(statement).__name__}")
        return COMPLETED
