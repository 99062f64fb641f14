"""Tri-state checkbox button with a hidden form input and an indicator."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import dataclass
from typing import Any, Optional

from ..dom import Element, element
from ..hooks.checkbox_state import CheckboxState, CheckedState
from ..hooks.escape_key import KeyEvent

ACTIVATION_KEYS = frozenset({" ", "Enter"})

HIDDEN_INPUT_CLASS = "absolute opacity-0 pointer-events-none"
HIDDEN_INPUT_STYLE = (
    "position: absolute; opacity: 0; pointer-events: none; margin: 0; width: 1px; height: 1px;"
)

_DATA_STATE = {
    CheckedState.TRUE: "checked",
    CheckedState.FALSE: "unchecked",
    CheckedState.INDETERMINATE: "indeterminate",
}


def _checkbox_classes(user_class: str) -> str:
    base = (
        "relative inline-flex h-6 w-6 shrink-0 items-center justify-center rounded border-0 "
        "bg-white transition-all duration-200 ease-in-out shadow-sm"
    )
    focus = "focus:outline-none focus:ring-2 focus:ring-black focus:ring-offset-0"
    states = (
        "data-[state=checked]:bg-white data-[state=unchecked]:bg-white "
        "data-[state=indeterminate]:bg-white"
    )
    hover = (
        "hover:bg-hover-purple data-[state=checked]:hover:bg-white "
        "data-[state=indeterminate]:hover:bg-white"
    )
    disabled = (
        "data-[disabled]:opacity-50 data-[disabled]:cursor-not-allowed "
        "data-[disabled]:hover:bg-white"
    )
    return f"{base} {focus} {states} {hover} {disabled} {user_class}"


def _indicator_classes(user_class: str) -> str:
    base = (
        "absolute inset-0 flex items-center justify-center text-white pointer-events-none"
    )
    animation = (
        "data-[state=checked]:animate-in data-[state=checked]:fade-in-0 "
        "data-[state=checked]:zoom-in-95 data-[state=unchecked]:animate-out "
        "data-[state=unchecked]:fade-out-0 data-[state=unchecked]:zoom-out-95"
    )
    return f"{base} {animation} {user_class}"


@dataclass(frozen=True)
class CheckboxContext:
    """State shared by a checkbox with the parts rendered inside it."""

    state: CheckedState
    disabled: bool


class CheckboxIndicator:
    """Content shown while the checkbox is checked or indeterminate."""

    def __init__(
        self,
        *children: Any,
        force_mount: Optional[bool] = None,
        class_: Optional[str] = None,
    ) -> None:
        self.children = list(children)
        self.force_mount = force_mount
        self.class_ = class_

    def render(self, context: Optional[CheckboxContext]) -> Optional[Element]:
        """Render the indicator, or None when it is not present."""
        if context is None:
            raise LookupError("CheckboxIndicator must be rendered inside a Checkbox")
        present = bool(self.force_mount) or context.state in (
            CheckedState.TRUE,
            CheckedState.INDETERMINATE,
        )
        if not present:
            return None
        return element(
            "div",
            {
                "data-state": _DATA_STATE[context.state],
                "class": _indicator_classes(self.class_ or ""),
            },
            _render_children(self.children, context),
        )


def _render_children(children: Iterable[Any], context: CheckboxContext) -> list[Any]:
    rendered: list[Any] = []
    for child in children:
        if isinstance(child, CheckboxIndicator):
            rendered.append(child.render(context))
        elif callable(child):
            rendered.append(child(context))
        else:
            rendered.append(child)
    return rendered


class Checkbox:
    """A checkbox button that may be controlled or keep its own state."""

    def __init__(
        self,
        *children: Any,
        checked: Optional[CheckedState] = None,
        default_checked: Optional[CheckedState] = None,
        on_checked_change: Optional[Callable[[CheckedState], None]] = None,
        disabled: Optional[bool] = None,
        required: Optional[bool] = None,
        name: Optional[str] = None,
        value: Optional[str] = None,
        form: Optional[str] = None,
        id: Optional[str] = None,
        class_: Optional[str] = None,
    ) -> None:
        self.children = list(children)
        self.state = CheckboxState(checked, default_checked, on_checked_change)
        self.disabled = disabled
        self.required = required
        self.name = name
        self.value = value
        self.form = form
        self.id = id
        self.class_ = class_

    @property
    def is_disabled(self) -> bool:
        return bool(self.disabled)

    @property
    def is_required(self) -> bool:
        return bool(self.required)

    @property
    def element_id(self) -> str:
        return "checkbox" if self.id is None else self.id

    @property
    def input_value(self) -> str:
        return "on" if self.value is None else self.value

    @property
    def context(self) -> CheckboxContext:
        return CheckboxContext(state=self.state.checked, disabled=self.is_disabled)

    def click(self) -> bool:
        """Toggle unless disabled; return whether a toggle happened."""
        if self.is_disabled:
            return False
        self.state.toggle()
        return True

    def keydown(self, event: KeyEvent) -> bool:
        """Toggle on Space or Enter unless disabled; return whether handled."""
        if self.is_disabled or event.key not in ACTIVATION_KEYS:
            return False
        event.prevent_default()
        self.state.toggle()
        return True

    def render(self) -> Element:
        """Render the hidden input and the checkbox button."""
        disabled = self.is_disabled
        required = self.is_required
        hidden_input = element(
            "input",
            {
                "type": "checkbox",
                "name": self.name,
                "value": self.input_value,
                "form": self.form,
                "checked": self.state.checked is CheckedState.TRUE,
                "required": required,
                "disabled": disabled,
                "class": HIDDEN_INPUT_CLASS,
                "style": HIDDEN_INPUT_STYLE,
                "tabindex": "-1",
            },
        )
        button = element(
            "button",
            {
                "id": self.element_id,
                "type": "button",
                "role": "checkbox",
                "aria-checked": self.state.aria_checked,
                "aria-disabled": "true" if disabled else None,
                "aria-required": "true" if required else None,
                "data-state": self.state.state_attr,
                "data-disabled": "" if disabled else None,
                "disabled": disabled,
                "class": _checkbox_classes(self.class_ or ""),
            },
            _render_children(self.children, self.context),
        )
        return element("div", {"class": "relative inline-flex"}, hidden_input, button)