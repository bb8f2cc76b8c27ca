"""Service layer exports."""

from .condition_evaluator import evaluate_condition
from .errors import ChoiceSelectionError
from .interpreter import COMPLETED, Completed, Interpreter, RunResult, TransferredTo
from .localization import IdentityLocalizer, TableLocalizer
from .ports import ChoicePresenter, ConditionContext, Localizer, MenuOption, Renderer
from .program_validator import Issue, format_issue, has_errors, validate_program
from .scene_runner import DEFAULT_START_SCENE, SCENE_HISTORY_LIMIT, SceneRunner

__all__ = [
    "COMPLETED",
    "ChoicePresenter",
    "ChoiceSelectionError",
    "Completed",
    "ConditionContext",
    "DEFAULT_START_SCENE",
    "SCENE_HISTORY_LIMIT",
    "IdentityLocalizer",
    "Interpreter",
    "Issue",
    "Localizer",
    "MenuOption",
    "Renderer",
    "RunResult",
    "SceneRunner",
    "TableLocalizer",
    "TransferredTo",
    "evaluate_condition",
    "format_issue",
    "has_errors",
    "validate_program",
]
