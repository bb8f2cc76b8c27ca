from pathlib import Path

import pytest

from scenescript.presentation.cli import app


@pytest.fixture(autouse=True)
def _isolated_config(monkeypatch, tmp_path: Path):
    monkeypatch.setattr(app, "load_config", lambda: {
        "text_display_mode": "instant",
        "language": "",
        "start_scene": "CH0",
    })
    monkeypatch.delenv("SCENESCRIPT_DEBUG", raising=False)


def _write(tmp_path: Path, source: str) -> Path:
    path = tmp_path / "scenes.csl"
    path.write_text(source, encoding="utf-8")
    return path


def test_main_plays_script(monkeypatch, tmp_path: Path, capsys) -> None:
    script = _write(tmp_path, 'scene CH0\nprint "Hi"\nchoice "Go"\ngo END\nend\nscene END\nprint "Bye"\n')
    monkeypatch.setattr("builtins.input", lambda _: "1")

    assert app.main([str(script)]) == 0
    output = capsys.readouterr().out
    assert "Hi" in output
    assert "1. Go" in output
    assert "Bye" in output
    assert "The End" in output


def test_main_uses_default_script_in_working_directory(monkeypatch, tmp_path: Path, capsys) -> None:
    _write(tmp_path, 'scene CH0\nprint "default"\n')
    monkeypatch.chdir(tmp_path)
    assert app.main([]) == 0
    assert "default" in capsys.readouterr().out


def test_main_reports_parse_error(tmp_path: Path, capsys) -> None:
    script = _write(tmp_path, "scene CH0\nprint\n")
    assert app.main([str(script)]) == 1
    assert "Error: line 2:" in capsys.readouterr().out


def test_main_reports_missing_file(tmp_path: Path, capsys) -> None:
    assert app.main([str(tmp_path / "nope.csl")]) == 1
    assert "Error: Script file not found" in capsys.readouterr().out


def test_main_start_option_and_missing_scene(tmp_path: Path, capsys) -> None:
    script = _write(tmp_path, 'scene CH0\nprint "x"\n')
    assert app.main([str(script), "--start", "ELSEWHERE"]) == 0
    assert "Scene not found: ELSEWHERE" in capsys.readouterr().out


def test_main_check_passes_and_fails(tmp_path: Path, capsys) -> None:
    good = _write(tmp_path, 'scene CH0\nprint "x"\n')
    assert app.main([str(good), "--check"]) == 0
    assert "Validation passed" in capsys.readouterr().out

    bad = _write(tmp_path, "scene CH0\ngo MISSING\n")
    assert app.main([str(bad), "--check"]) == 1
    output = capsys.readouterr().out
    assert "MISSING_SCENE_REF" in output
    assert "Validation failed" in output


def test_main_localizes_with_lang(monkeypatch, tmp_path: Path, capsys) -> None:
    script = _write(tmp_path, 'scene CH0\nprint "intro.title"\n')
    assert app.main([str(script), "--lang", "it"]) == 0
    assert "IL CASTELLO" in capsys.readouterr().out


def test_main_unknown_language(tmp_path: Path, capsys) -> None:
    script = _write(tmp_path, 'scene CH0\nprint "x"\n')
    assert app.main([str(script), "--lang", "zz"]) == 1
    assert "Error:" in capsys.readouterr().out


def test_main_exits_cleanly_on_eof(monkeypatch, tmp_path: Path, capsys) -> None:
    script = _write(tmp_path, 'scene CH0\nchoice "a"\nend\n')

    def _eof(_: str) -> str:
        raise EOFError

    monkeypatch.setattr("builtins.input", _eof)
    assert app.main([str(script)]) == 0
    assert "Goodbye!" in capsys.readouterr().out


def test_build_localizer_without_language() -> None:
    assert app.build_localizer("") is None
