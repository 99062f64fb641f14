"""Tri-state checkbox state with ARIA and form values."""

from __future__ import annotations

from enum import Enum
from typing import Callable, Optional


class CheckedState(Enum):
    """Checked state of a checkbox."""

    FALSE = "false"
    TRUE = "true"
    INDETERMINATE = "indeterminate"

    def __str__(self) -> str:
        return self.value


_NEXT = {
    CheckedState.FALSE: CheckedState.TRUE,
    CheckedState.TRUE: CheckedState.FALSE,
    CheckedState.INDETERMINATE: CheckedState.TRUE,
}

_ARIA = {
    CheckedState.TRUE: "true",
    CheckedState.FALSE: "false",
    CheckedState.INDETERMINATE: "mixed",
}

_DATA_STATE = {
    CheckedState.TRUE: "checked",
    CheckedState.FALSE: "unchecked",
    CheckedState.INDETERMINATE: "indeterminate",
}

_FORM_VALUE = {
    CheckedState.TRUE: "on",
    CheckedState.FALSE: "",
    CheckedState.INDETERMINATE: "mixed",
}


class CheckboxState:
    """Controlled or uncontrolled checkbox state.

    ``controlled`` may be reassigned to model a changing ``checked`` prop.
    """

    def __init__(
        self,
        checked: Optional[CheckedState] = None,
        default_checked: Optional[CheckedState] = None,
        on_checked_change: Optional[Callable[[CheckedState], None]] = None,
    ) -> None:
        self.controlled = checked
        if checked is not None:
            self._internal = checked
        elif default_checked is not None:
            self._internal = default_checked
        else:
            self._internal = CheckedState.FALSE
        self._on_checked_change = on_checked_change

    @property
    def checked(self) -> CheckedState:
        return self._internal if self.controlled is None else self.controlled

    @property
    def aria_checked(self) -> str:
        return _ARIA[self.checked]

    @property
    def state_attr(self) -> str:
        return _DATA_STATE[self.checked]

    @property
    def form_value(self) -> str:
        return _FORM_VALUE[self.checked]

    def toggle(self) -> CheckedState:
        """Advance the state (indeterminate becomes checked) and return it."""
        new_state = _NEXT[self.checked]
        if self.controlled is None:
            self._internal = new_state
        if self._on_checked_change is not None:
            self._on_checked_change(new_state)
        return new_state