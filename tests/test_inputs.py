"""FilterState and InputSearchState transitions."""

from __future__ import annotations

import pytest

from searchpanel.domain.models import FilterValue, InputValue
from searchpanel.state import FilterState, InputSearchState


def _count(signal) -> list[int]:
    hits: list[int] = []
    signal.subscribe(lambda: hits.append(1))
    return hits


def test_filter_set_field_always_triggers():
    state = FilterState()
    triggers = _count(state.search)

    state.set_field("checked", True)
    state.set_field("checked", True)

    assert state.get_value() == FilterValue(checked=True)
    assert len(triggers) == 2


def test_filter_get_value_returns_copy():
    state = FilterState()
    value = state.get_value()
    value.checked = True
    assert state.get_value().checked is False


def test_filter_rejects_unknown_field():
    state = FilterState()
    triggers = _count(state.search)
    with pytest.raises(ValueError):
        state.set_field("archived", True)
    assert triggers == []


def test_input_initial_state():
    state = InputSearchState()
    assert state.get_value() == InputValue(keyword="", visible=False)


def test_non_empty_input_shows_panel_and_triggers():
    state = InputSearchState()
    triggers = _count(state.search)

    state.on_input("py")

    assert state.keyword == "py"
    assert state.visible is True
    assert len(triggers) == 1


def test_repeated_input_is_ignored():
    state = InputSearchState()
    state.on_input("py")
    triggers = _count(state.search)
    changes = _count(state.changed)

    state.on_input("py")

    assert triggers == []
    assert changes == []


@pytest.mark.parametrize("previous", ["a", "py"])
def test_empty_input_hides_without_trigger(previous):
    state = InputSearchState()
    state.on_input(previous)
    triggers = _count(state.search)

    state.on_input("")

    assert state.visible is False
    assert triggers == []


def test_empty_input_with_empty_keyword_is_ignored():
    state = InputSearchState()
    state.on_submit()
    triggers = _count(state.search)
    changes = _count(state.changed)

    state.on_input("")

    assert state.visible is True
    assert triggers == []
    assert changes == []


def test_submit_always_triggers_and_shows():
    state = InputSearchState()
    triggers = _count(state.search)

    state.on_submit()
    state.on_submit()

    assert state.visible is True
    assert state.keyword == ""
    assert len(triggers) == 2


def test_hide_does_not_trigger():
    state = InputSearchState()
    state.on_input("py")
    triggers = _count(state.search)
    visibility = _count(state.visibility_changed)

    state.on_hide()
    state.on_hide()

    assert state.visible is False
    assert state.keyword == "py"
    assert triggers == []
    assert len(visibility) == 1


def test_filter_state_does_not_share_initial_value():
    initial = FilterValue(checked=False)
    state = FilterState(initial)

    state.set_field("checked", True)

    assert initial.checked is False
    assert state.get_value().checked is True
