"""Horizontal or vertical divider between content sections."""

from __future__ import annotations

from typing import Optional

from ..dom import Element, element

VERTICAL = "vertical"
HORIZONTAL = "horizontal"


def _separator_classes(orientation: str, decorative: bool, user_class: str) -> str:
    base = "inline-block w-px bg-gray-200" if orientation == VERTICAL else "block h-px w-full bg-gray-200"
    accessibility = (
        ""
        if decorative
        else "focus:outline-none focus:ring-2 focus:ring-blue-500 focus:ring-offset-2"
    )
    return f"{base} {accessibility} {user_class}".strip()


class Separator:
    """A divider; decorative separators carry no ARIA semantics."""

    def __init__(
        self,
        *,
        orientation: Optional[str] = None,
        decorative: Optional[bool] = None,
        class_: Optional[str] = None,
        id: Optional[str] = None,
    ) -> None:
        self.orientation = orientation
        self.decorative = decorative
        self.class_ = class_
        self.id = id

    @property
    def current_orientation(self) -> str:
        return HORIZONTAL if self.orientation is None else self.orientation

    @property
    def is_decorative(self) -> bool:
        return bool(self.decorative)

    @property
    def role(self) -> Optional[str]:
        return None if self.is_decorative else "separator"

    @property
    def aria_orientation(self) -> Optional[str]:
        if self.is_decorative:
            return None
        return VERTICAL if self.current_orientation == VERTICAL else HORIZONTAL

    def render(self) -> Element:
        """Render the separator element."""
        return element(
            "div",
            {
                "id": self.id,
                "role": self.role,
                "aria-orientation": self.aria_orientation,
                "data-orientation": self.current_orientation,
                "class": _separator_classes(
                    self.current_orientation, self.is_decorative, self.class_ or ""
                ),
            },
        )