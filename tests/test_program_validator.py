from scenescript.data import get_scripts_path, load_program
from scenescript.parsing import parse_script
from scenescript.services.program_validator import (
    format_issue,
    has_errors,
    iter_statements,
    validate_program,
)


def _codes(issues):
    return sorted(issue.code for issue in issues)


def test_clean_program_has_no_issues() -> None:
    program = parse_script('scene CH0\nchoice "a"\ngo B\nend\nscene B\nprint "b"\n')
    assert validate_program(program, ["CH0"]) == []


def test_missing_goto_target_is_reported_with_path() -> None:
    program = parse_script('scene CH0\nif has k then\nchoice "x"\ngo NOPE\nend\nend\n')
    issues = validate_program(program, ["CH0"])

    assert _codes(issues) == ["MISSING_SCENE_REF"]
    assert issues[0].context["field_path"] == "CH0[0].then[0].body[0]"
    assert issues[0].context["referenced_id"] == "NOPE"
    assert has_errors(issues)


def test_missing_entry_scene() -> None:
    program = parse_script('scene A\nprint "a"\n')
    issues = validate_program(program, ["CH0"])
    assert "MISSING_ENTRY_SCENE" in _codes(issues)
    assert "UNREACHABLE_SCENE" in _codes(issues)


def test_unreachable_statement_after_goto() -> None:
    program = parse_script('scene CH0\nchoice "x"\ngo CH0\nprint "dead"\nend\n')
    issues = validate_program(program, ["CH0"])
    assert _codes(issues) == ["UNREACHABLE_STATEMENT"]
    assert issues[0].context["field_path"] == "CH0[0].body[1]"
    assert not has_errors(issues)


def test_duplicate_scene_is_a_warning() -> None:
    program = parse_script('scene CH0\nprint "1"\nscene CH0\nprint "2"\n')
    assert _codes(validate_program(program, ["CH0"])) == ["DUPLICATE_SCENE_ID"]


def test_autotransfer_cycle() -> None:
    program = parse_script("scene CH0\ngo A\nscene A\ngo B\nscene B\ngo A\n")
    issues = validate_program(program, ["CH0"])
    cycles = [issue for issue in issues if issue.code == "AUTOTRANSFER_CYCLE"]

    assert len(cycles) == 1
    assert cycles[0].context["cycle"] == "A -> B -> A"
    assert cycles[0].severity == "ERROR"


def test_goto_behind_choice_is_not_a_cycle() -> None:
    program = parse_script('scene CH0\nchoice "again"\ngo CH0\nend\n')
    assert validate_program(program, ["CH0"]) == []


def test_autotransfer_cycle_can_be_downgraded() -> None:
    program = parse_script("scene CH0\ngo CH0\n")
    issues = validate_program(program, ["CH0"], error_on_autotransfer_cycle=False)
    assert [issue.severity for issue in issues] == ["WARN"]


def test_format_issue() -> None:
    program = parse_script("scene CH0\ngo X\n")
    text = format_issue(validate_program(program, ["CH0"])[0])
    assert text.startswith("[ERROR] MISSING_SCENE_REF:")
    assert "referenced_id=X" in text


def test_iter_statements_walks_nested_bodies() -> None:
    program = parse_script('scene A\nif true then\nprint "t"\nelse\nprint "e"\nend\n')
    paths = [path for path, _ in iter_statements(program.get("A"), "A")]
    assert paths == ["A[0]", "A[0].then[0]", "A[0].else[0]"]


def test_sample_script_validates() -> None:
    program = load_program(get_scripts_path() / "castle.csl")
    assert validate_program(program, ["CH0"]) == []
