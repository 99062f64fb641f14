"""On/off switch button with a hidden form input and a movable thumb."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import dataclass
from typing import Any, Optional

from ..dom import Element, element
from ..hooks.escape_key import KeyEvent
from ..hooks.switch_state import SwitchState

ACTIVATION_KEYS = frozenset({" ", "Enter"})

HIDDEN_INPUT_CLASS = "absolute opacity-0 pointer-events-none"
HIDDEN_INPUT_STYLE = (
    "position: absolute; opacity: 0; pointer-events: none; margin: 0; width: 1px; height: 1px;"
)


def _switch_classes(user_class: str) -> str:
    base = (
        "relative inline-flex h-6 w-11 shrink-0 items-center rounded-full border-0 "
        "transition-all duration-150 ease-in-out shadow-sm"
    )
    focus = "focus:outline-none focus:ring-2 focus:ring-black focus:ring-offset-0"
    states = "data-[state=checked]:bg-black data-[state=unchecked]:bg-[#221B3E]"
    disabled = "data-[disabled]:opacity-50 data-[disabled]:cursor-not-allowed"
    return f"{base} {focus} {states} {disabled} {user_class}"


def _switch_thumb_classes(user_class: str) -> str:
    # 44px track, 20px thumb: 2px gap on the left, 22px offset on the right.
    base = (
        "pointer-events-none block h-5 w-5 rounded-full bg-white shadow-lg ring-0 "
        "transition-transform duration-150 ease-in-out"
    )
    states = "data-[state=checked]:translate-x-5.5 data-[state=unchecked]:translate-x-0.5"
    return f"{base} {states} {user_class}"


@dataclass(frozen=True)
class SwitchContext:
    """State shared by a switch with the parts rendered inside it."""

    checked: bool
    disabled: bool


class SwitchThumb:
    """The thumb that moves inside the switch track."""

    def __init__(self, *, class_: Optional[str] = None) -> None:
        self.class_ = class_

    def render(self, context: Optional[SwitchContext]) -> Element:
        """Render the thumb; without a context it shows as unchecked."""
        checked = context is not None and context.checked
        disabled = context is not None and context.disabled
        return element(
            "div",
            {
                "data-state": "checked" if checked else "unchecked",
                "data-disabled": "" if disabled else None,
                "class": _switch_thumb_classes(self.class_ or ""),
            },
        )


def _render_children(children: Iterable[Any], context: SwitchContext) -> list[Any]:
    rendered: list[Any] = []
    for child in children:
        if isinstance(child, SwitchThumb):
            rendered.append(child.render(context))
        elif callable(child):
            rendered.append(child(context))
        else:
            rendered.append(child)
    return rendered


class Switch:
    """A switch button that may be controlled or keep its own state."""

    def __init__(
        self,
        *children: Any,
        checked: Optional[bool] = None,
        default_checked: Optional[bool] = None,
        on_checked_change: Optional[Callable[[bool], None]] = None,
        disabled: Optional[bool] = None,
        required: Optional[bool] = None,
        name: Optional[str] = None,
        value: Optional[str] = None,
        form: Optional[str] = None,
        id: Optional[str] = None,
        class_: Optional[str] = None,
    ) -> None:
        self.children = list(children)
        self.state = SwitchState(checked, default_checked, on_checked_change)
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
        return "switch" if self.id is None else self.id

    @property
    def input_value(self) -> str:
        return "on" if self.value is None else self.value

    @property
    def context(self) -> SwitchContext:
        return SwitchContext(checked=self.state.checked, disabled=self.is_disabled)

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
        """Render the hidden input and the switch button."""
        disabled = self.is_disabled
        required = self.is_required
        hidden_input = element(
            "input",
            {
                "type": "checkbox",
                "name": self.name,
                "value": self.input_value,
                "form": self.form,
                "checked": self.state.checked,
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
                "role": "switch",
                "aria-checked": self.state.aria_checked,
                "aria-disabled": "true" if disabled else None,
                "aria-required": "true" if required else None,
                "data-state": self.state.state_attr,
                "data-disabled": "" if disabled else None,
                "disabled": disabled,
                "class": _switch_classes(self.class_ or ""),
            },
            _render_children(self.children, self.context),
        )
        return element("div", {"class": "relative inline-flex"}, hidden_input, button)