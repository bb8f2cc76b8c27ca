from scenescript.domain.state import GameState
from scenescript.domain.style import StyleState


def test_set_is_idempotent() -> None:
    state = GameState()
    state.set_flag("x")
    state.set_flag("x")
    assert state.has("x")
    assert state.flags == {"x"}


def test_unset_and_remove_absent_are_no_ops() -> None:
    state = GameState()
    state.unset_flag("missing")
    state.remove_item("missing")
    assert not state.has("missing")


def test_has_checks_flags_and_inventory() -> None:
    state = GameState()
    state.add_item("key")
    state.set_flag("door")
    assert state.has("key")
    assert state.has("door")
    state.remove_item("key")
    state.unset_flag("door")
    assert not state.has("key")
    assert not state.has("door")


def test_style_defaults_and_apply() -> None:
    style = StyleState()
    assert (style.background, style.foreground, style.font, style.fontsize) == (
        "#000000",
        "#f5f5dc",
        "'Garamond', serif",
        16,
    )
    style.apply("fontsize", 22)
    style.apply("background", "#111111")
    snapshot = style.snapshot()
    style.apply("font", "mono")

    assert snapshot.fontsize == 22
    assert snapshot.background == "#111111"
    assert snapshot.font == "'Garamond', serif"
