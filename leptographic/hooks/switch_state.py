"""On/off switch state built on controllable state."""

from __future__ import annotations

from typing import Callable, Optional

from .controllable_state import ControllableState


class SwitchState:
    """Controlled or uncontrolled boolean switch state."""

    def __init__(
        self,
        checked: Optional[bool] = None,
        default_checked: Optional[bool] = None,
        on_checked_change: Optional[Callable[[bool], None]] = None,
    ) -> None:
        self._state: ControllableState[bool] = ControllableState(
            checked,
            False if default_checked is None else default_checked,
            on_checked_change,
        )

    @property
    def controlled(self) -> Optional[bool]:
        return self._state.controlled

    @controlled.setter
    def controlled(self, value: Optional[bool]) -> None:
        self._state.controlled = value

    @property
    def checked(self) -> bool:
        return bool(self._state.value)

    @property
    def is_controlled(self) -> bool:
        return self._state.is_controlled

    @property
    def aria_checked(self) -> str:
        return "true" if self.checked else "false"

    @property
    def state_attr(self) -> str:
        return "checked" if self.checked else "unchecked"

    @property
    def form_value(self) -> str:
        return "on" if self.checked else ""

    def toggle(self) -> bool:
        """Flip the value and return the new one."""
        new_value = not self.checked
        self._state.set_value(new_value)
        return new_value