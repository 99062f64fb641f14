import pytest

from leptographic.hooks.checkbox_state import CheckboxState, CheckedState


@pytest.mark.parametrize(
    "state, text",
    [
        (CheckedState.FALSE, "false"),
        (CheckedState.TRUE, "true"),
        (CheckedState.INDETERMINATE, "indeterminate"),
    ],
)
def test_str(state, text):
    assert str(state) == text


def test_default_is_unchecked():
    state = CheckboxState()
    assert state.checked is CheckedState.FALSE
    assert state.state_attr == "unchecked"
    assert state.aria_checked == "false"
    assert state.form_value == ""


def test_toggle_cycles_true_and_false():
    state = CheckboxState()
    assert state.toggle() is CheckedState.TRUE
    assert state.checked is CheckedState.TRUE
    assert state.form_value == "on"
    state.toggle()
    assert state.checked is CheckedState.FALSE


def test_indeterminate_goes_to_true():
    state = CheckboxState(default_checked=CheckedState.INDETERMINATE)
    assert state.aria_checked == "mixed"
    assert state.state_attr == "indeterminate"
    assert state.form_value == "mixed"
    state.toggle()
    assert state.checked is CheckedState.TRUE
    assert state.state_attr == "checked"


def test_controlled_state_not_changed_but_callback_runs():
    seen = []
    state = CheckboxState(checked=CheckedState.TRUE, on_checked_change=seen.append)
    state.toggle()
    assert state.checked is CheckedState.TRUE
    assert seen == [CheckedState.FALSE]


def test_checked_takes_precedence_over_default_for_initial():
    state = CheckboxState(
        checked=CheckedState.TRUE, default_checked=CheckedState.INDETERMINATE
    )
    state.controlled = None
    assert state.checked is CheckedState.TRUE