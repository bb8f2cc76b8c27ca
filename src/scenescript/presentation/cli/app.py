"""Console entry point: load a script and play it interactively."""
from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import Sequence

from scenescript.data import DataError, load_program
from scenescript.data.paths import get_default_script_path
from scenescript.data.repositories import StringTableRepository
from scenescript.domain.defs import Program
from scenescript.parsing import ScriptError
from scenescript.presentation.cli.config import load_config
from scenescript.presentation.cli.console import ConsoleChoicePresenter, ConsoleRenderer
from scenescript.presentation.cli.render import debug_enabled, render_heading, set_text_display_mode
from scenescript.services import (
    Localizer,
    SceneRunner,
    TableLocalizer,
    format_issue,
    has_errors,
    validate_program,
)


def parse_args(argv: Sequence[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="scenescript", description="Play a scene script.")
    parser.add_argument(
        "script",
        nargs="?",
        help="Path to the script file (default: scenes.csl in the working directory).",
    )
    parser.add_argument("--start", help="Scene id to start from (default from config, else CH0).")
    parser.add_argument("--lang", help="Language code of the string table used for print/choice keys.")
    parser.add_argument("--check", action="store_true", help="Validate the script and exit.")
    parser.add_argument("--step", action="store_true", help="Pause before clearing each scene.")
    return parser.parse_args(argv)


def configure_logging() -> None:
    logging.basicConfig(
        level=logging.DEBUG if debug_enabled() else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


def main(argv: Sequence[str] | None = None) -> int:
    """Run the CLI and return a process exit status."""
    args = parse_args(argv)
    configure_logging()
    config = load_config()
    set_text_display_mode("step" if args.step else config["text_display_mode"])
    script_path = Path(args.script) if args.script else get_default_script_path()
    start_scene = args.start or config["start_scene"]

    try:
        program = load_program(script_path)
    except (DataError, ScriptError) as exc:
        print(f"Error: {exc}")
        return 1

    if args.check:
        return run_check(program, start_scene)

    try:
        localizer = build_localizer(args.lang or config["language"])
    except (DataError, ValueError) as exc:
        print(f"Error: {exc}")
        return 1

    renderer = ConsoleRenderer()
    runner = SceneRunner(
        program,
        renderer,
        ConsoleChoicePresenter(renderer),
        localizer=localizer,
    )
    try:
        runner.run(start_scene)
    except (KeyboardInterrupt, EOFError):
        print("\nGoodbye!")
        return 0
    render_heading("The End")
    return 0


def run_check(program: Program, start_scene: str) -> int:
    issues = validate_program(program, [start_scene])
    for issue in issues:
        print(format_issue(issue))
    if has_errors(issues):
        print(f"Validation failed: {len(program)} scene(s), {len(issues)} issue(s).")
        return 1
    print(f"Validation passed: {len(program)} scene(s), {len(issues)} warning(s).")
    return 0


def build_localizer(language: str) -> Localizer | None:
    """Return a table-backed localizer, or None when no language is set."""
    if not language:
        return None
    repo = StringTableRepository(language)
    repo.load()
    return TableLocalizer(repo)
