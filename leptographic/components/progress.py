"""Progress bar with a sliding indicator."""

from __future__ import annotations

import math
from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any, Optional

from ..dom import Element, element, format_number

DEFAULT_MAX = 100.0

_ROOT_CLASS = "relative overflow-hidden bg-black/25 rounded-full h-[25px] drop-shadow-md"
_INDICATOR_CLASS = (
    "bg-white w-full h-full transition-transform duration-[660ms] "
    "ease-[cubic-bezier(0.65,0,0.35,1)]"
)


def _with_class(base: str, user_class: Optional[str]) -> str:
    return base if user_class is None else f"{base} {user_class}"


def _state(value: Optional[float], max_value: float) -> str:
    if value is None:
        return "indeterminate"
    return "complete" if value >= max_value else "loading"


@dataclass(frozen=True)
class ProgressContext:
    """Validated value and maximum shared with the indicator."""

    value: Optional[float]
    max: float = DEFAULT_MAX

    @property
    def state(self) -> str:
        return _state(self.value, self.max)


class ProgressIndicator:
    """The bar that slides in as the progress value grows."""

    def __init__(self, *, class_: Optional[str] = None) -> None:
        self.class_ = class_

    def render(self, context: Optional[ProgressContext]) -> Element:
        """Render the indicator; without a context it shows as indeterminate."""
        ctx = context if context is not None else ProgressContext(None, DEFAULT_MAX)
        percentage = 0.0 if ctx.value is None else ctx.value / ctx.max * 100.0
        return element(
            "div",
            {
                "class": _with_class(_INDICATOR_CLASS, self.class_),
                "style": f"transform: translateX(-{format_number(100.0 - percentage)}%)",
                "data-state": ctx.state,
                "data-value": ctx.value,
            },
        )


def _render_children(children: Iterable[Any], context: ProgressContext) -> list[Any]:
    rendered: list[Any] = []
    for child in children:
        if isinstance(child, ProgressIndicator):
            rendered.append(child.render(context))
        elif callable(child):
            rendered.append(child(context))
        else:
            rendered.append(child)
    return rendered


class Progress:
    """A progress bar; out-of-range values make it indeterminate."""

    def __init__(
        self,
        *children: Any,
        value: Optional[float] = None,
        max: Optional[float] = None,
        class_: Optional[str] = None,
    ) -> None:
        self.children = list(children)
        self.value = value
        self.max = max
        self.class_ = class_

    @property
    def max_value(self) -> float:
        """The maximum, falling back to 100 when missing, NaN or not positive."""
        candidate = DEFAULT_MAX if self.max is None else self.max
        if not math.isnan(candidate) and candidate > 0.0:
            return candidate
        return DEFAULT_MAX

    @property
    def current_value(self) -> Optional[float]:
        """The value if it lies within 0..max, else None."""
        value = self.value
        if value is None or math.isnan(value):
            return None
        if 0.0 <= value <= self.max_value:
            return value
        return None

    @property
    def context(self) -> ProgressContext:
        return ProgressContext(self.current_value, self.max_value)

    def render(self) -> Element:
        """Render the progress bar with its children."""
        ctx = self.context
        return element(
            "div",
            {
                "class": _with_class(_ROOT_CLASS, self.class_),
                "style": "transform: translateZ(0)",
                "role": "progressbar",
                "aria-valuemax": ctx.max,
                "aria-valuemin": "0",
                "aria-valuenow": ctx.value,
                "data-state": ctx.state,
                "data-value": ctx.value,
                "data-max": ctx.max,
            },
            _render_children(self.children, ctx),
        )