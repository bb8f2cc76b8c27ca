"""Static program validation utilities."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Mapping, MutableMapping, Sequence, Tuple

from scenescript.core.types import Severity
from scenescript.domain.defs import ChoiceStatement, GotoStatement, IfStatement, Program, Statement


@dataclass(frozen=True, slots=True)
class Issue:
    severity: Severity
    code: str
    message: str
    context: dict[str, str]


@dataclass(frozen=True, slots=True)
class GotoRef:
    target_scene_id: str
    path: str


@dataclass(frozen=True, slots=True)
class SceneInfo:
    scene_id: str
    gotos: list[GotoRef]
    auto_transfer_target: str | None


def format_issue(issue: Issue) -> str:
    context = " ".join(f"{key}={value}" for key, value in issue.context.items())
    suffix = f" ({context})" if context else ""
    return f"[{issue.severity}] {issue.code}: {issue.message}{suffix}"


def has_errors(issues: Sequence[Issue]) -> bool:
    return any(issue.severity == "ERROR" for issue in issues)


def validate_program(
    program: Program,
    entry_scene_ids: Sequence[str],
    *,
    error_on_autotransfer_cycle: bool = True,
) -> list[Issue]:
    issues: list[Issue] = []
    for scene_id in program.duplicate_scene_ids:
        issues.append(
            Issue(
                severity="WARN",
                code="DUPLICATE_SCENE_ID",
                message="Scene id defined more than once; the last definition wins.",
                context={"scene_id": scene_id},
            )
        )
    for entry_id in entry_scene_ids:
        if entry_id not in program:
            issues.append(
                Issue(
                    severity="ERROR",
                    code="MISSING_ENTRY_SCENE",
                    message="Entry scene is not defined.",
                    context={"referenced_id": entry_id},
                )
            )

    scene_infos: dict[str, SceneInfo] = {}
    for scene_id, body in program.scenes.items():
        scene_infos[scene_id] = _build_scene_info(scene_id, body)
        _warn_on_unreachable_statements(scene_id, body, scene_id, issues)

    for info in scene_infos.values():
        for ref in info.gotos:
            if ref.target_scene_id not in program:
                issues.append(
                    Issue(
                        severity="ERROR",
                        code="MISSING_SCENE_REF",
                        message="Statement goes to a scene that is not defined.",
                        context={
                            "scene_id": info.scene_id,
                            "field_path": ref.path,
                            "referenced_id": ref.target_scene_id,
                        },
                    )
                )

    _validate_reachability(scene_infos, entry_scene_ids, issues)
    _validate_autotransfer_cycles(
        scene_infos, issues, error_on_autotransfer_cycle=error_on_autotransfer_cycle
    )
    return issues


def iter_statements(
    statements: Sequence[Statement], path: str
) -> Iterator[Tuple[str, Statement]]:
    """Yield every statement with its path, depth first."""
    for index, statement in enumerate(statements):
        statement_path = f"{path}[{index}]"
        yield statement_path, statement
        if isinstance(statement, ChoiceStatement):
            yield from iter_statements(statement.body, f"{statement_path}.body")
        elif isinstance(statement, IfStatement):
            yield from iter_statements(statement.then_body, f"{statement_path}.then")
            yield from iter_statements(statement.else_body, f"{statement_path}.else")


def _build_scene_info(scene_id: str, body: Sequence[Statement]) -> SceneInfo:
    gotos = [
        GotoRef(target_scene_id=statement.target_scene_id, path=path)
        for path, statement in iter_statements(body, scene_id)
        if isinstance(statement, GotoStatement)
    ]
    return SceneInfo(
        scene_id=scene_id,
        gotos=gotos,
        auto_transfer_target=_auto_transfer_target(body),
    )


def _auto_transfer_target(body: Sequence[Statement]) -> str | None:
    """Return the target of a top-level `go` reached before any choice."""
    for statement in body:
        if isinstance(statement, ChoiceStatement):
            return None
        if isinstance(statement, GotoStatement):
            return statement.target_scene_id
    return None


def _warn_on_unreachable_statements(
    scene_id: str, statements: Sequence[Statement], path: str, issues: list[Issue]
) -> None:
    for index, statement in enumerate(statements):
        statement_path = f"{path}[{index}]"
        if isinstance(statement, GotoStatement) and index < len(statements) - 1:
            issues.append(
                Issue(
                    severity="WARN",
                    code="UNREACHABLE_STATEMENT",
                    message="Statements after 'go' never run.",
                    context={"scene_id": scene_id, "field_path": f"{path}[{index + 1}]"},
                )
            )
        if isinstance(statement, ChoiceStatement):
            _warn_on_unreachable_statements(scene_id, statement.body, f"{statement_path}.body", issues)
        elif isinstance(statement, IfStatement):
            _warn_on_unreachable_statements(scene_id, statement.then_body, f"{statement_path}.then", issues)
            _warn_on_unreachable_statements(scene_id, statement.else_body, f"{statement_path}.else", issues)


def _validate_reachability(
    scene_infos: Mapping[str, SceneInfo],
    entry_scene_ids: Sequence[str],
    issues: list[Issue],
) -> None:
    scene_ids = set(scene_infos.keys())
    reachable: set[str] = set()
    stack: list[str] = [entry for entry in entry_scene_ids if entry in scene_ids]
    while stack:
        scene_id = stack.pop()
        if scene_id in reachable:
            continue
        reachable.add(scene_id)
        for ref in scene_infos[scene_id].gotos:
            if ref.target_scene_id in scene_ids:
                stack.append(ref.target_scene_id)
    for scene_id in sorted(scene_ids - reachable):
        issues.append(
            Issue(
                severity="WARN",
                code="UNREACHABLE_SCENE",
                message="Scene is unreachable from the entry scenes.",
                context={"scene_id": scene_id},
            )
        )


def _validate_autotransfer_cycles(
    scene_infos: Mapping[str, SceneInfo],
    issues: list[Issue],
    *,
    error_on_autotransfer_cycle: bool,
) -> None:
    adjacency: MutableMapping[str, str] = {}
    for scene_id, info in scene_infos.items():
        target = info.auto_transfer_target
        if target is not None and target in scene_infos:
            adjacency[scene_id] = target

    visited: set[str] = set()
    stack: list[str] = []
    stack_set: set[str] = set()
    cycles: list[list[str]] = []

    for start in sorted(adjacency):
        current: str | None = start
        while current is not None and current not in visited:
            visited.add(current)
            stack.append(current)
            stack_set.add(current)
            next_scene = adjacency.get(current)
            if next_scene is not None and next_scene in stack_set:
                cycles.append(stack[stack.index(next_scene) :])
                break
            current = next_scene
        stack.clear()
        stack_set.clear()

    if not cycles:
        return
    severity: Severity = "ERROR" if error_on_autotransfer_cycle else "WARN"
    for cycle in cycles:
        cycle_path = " -> ".join(cycle + [cycle[0]])
        issues.append(
            Issue(
                severity=severity,
                code="AUTOTRANSFER_CYCLE",
                message="Scenes transfer to each other before any choice is offered.",
                context={"cycle": cycle_path},
            )
        )
