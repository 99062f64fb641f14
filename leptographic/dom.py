"""A small HTML element tree with rendering to markup."""

from __future__ import annotations

import html
import math
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from decimal import Decimal
from typing import Any, Union

VOID_ELEMENTS = frozenset(
    {
        "area",
        "base",
        "br",
        "col",
        "embed",
        "hr",
        "img",
        "input",
        "link",
        "meta",
        "source",
        "track",
        "wbr",
    }
)


def format_number(value: float) -> str:
    """Format a number the way plain decimal display does: 100.0 -> "100"."""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, int):
        return str(value)
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "inf" if value > 0 else "-inf"
    if value.is_integer():
        if value == 0 and math.copysign(1.0, value) < 0:
            return "-0"
        return str(int(value))
    return format(Decimal(repr(value)), "f")


def _attr_text(value: Any) -> str:
    if isinstance(value, (int, float)):
        return format_number(value)
    return str(value)


@dataclass
class Element:
    """An HTML element with attributes and child nodes."""

    tag: str
    attrs: dict[str, Any] = field(default_factory=dict)
    children: list[Any] = field(default_factory=list)

    def render(self) -> str:
        """Render this element and its children as HTML."""
        parts = [f"<{self.tag}"]
        for name, value in self.attrs.items():
            if value is None or value is False:
                continue
            if value is True:
                parts.append(f" {name}")
            else:
                parts.append(f' {name}="{html.escape(_attr_text(value), quote=True)}"')
        parts.append(">")
        if self.tag in VOID_ELEMENTS:
            return "".join(parts)
        parts.extend(render(child) for child in self.children)
        parts.append(f"</{self.tag}>")
        return "".join(parts)


Node = Union[Element, str, int, float, None, Iterable]


def _flatten(nodes: Iterable[Any]) -> list[Any]:
    flat: list[Any] = []
    for node in nodes:
        if node is None:
            continue
        if isinstance(node, (Element, str, int, float)):
            flat.append(node)
        elif isinstance(node, Iterable):
            flat.extend(_flatten(node))
        else:
            raise TypeError(f"cannot use {type(node).__name__} as a child node")
    return flat


def element(tag: str, attrs: Mapping[str, Any] | None = None, *args: Any) -> Element:
    """Build an element; nested child sequences are flattened and None is dropped."""
    children = _flatten(args)
    if tag in VOID_ELEMENTS and children:
        raise ValueError(f"<{tag}> cannot have children")
    return Element(tag, dict(attrs or {}), children)


def render(node: Any) -> str:
    """Render any node (element, text, number, sequence or None) to HTML."""
    if node is None:
        return ""
    if isinstance(node, Element):
        return node.render()
    if isinstance(node, str):
        return html.escape(node, quote=False)
    if isinstance(node, (int, float)):
        return format_number(node)
    if isinstance(node, Iterable):
        return "".join(render(child) for child in node)
    raise TypeError(f"cannot render {type(node).__name__}")


def class_names(*args: str | None) -> str:
    """Join the non-empty class strings with single spaces."""
    return " ".join(part.strip() for part in args if part and part.strip())