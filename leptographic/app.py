"""The component showcase application."""

from __future__ import annotations

import logging
from enum import Enum
from typing import Any

from .components.checkbox import Checkbox, CheckboxIndicator
from .components.progress import Progress, ProgressIndicator
from .components.separator import Separator
from .components.switch import Switch, SwitchThumb
from .dom import Element, element, render

log = logging.getLogger(__name__)

TITLE = "Leptonic UI Components"
STYLESHEET_HREF = "/pkg/leptos-radix-ui.css?v=3"
COMPONENT_NAMES = ("Checkbox", "Switch", "Progress", "Separator")
PROGRESS_STEP = 25.0
PROGRESS_MAX = 100.0

_CHECK_PATH = (
    "M11.4669 3.72684C11.7558 3.91574 11.8369 4.30308 11.648 4.59198L7.39799 11.092"
    "C7.29783 11.2452 7.13556 11.3467 6.95402 11.3699C6.77247 11.3931 6.58989 11.3355 "
    "6.45446 11.2124L3.70446 8.71241C3.44905 8.48022 3.43023 8.08494 3.66242 7.82953"
    "C3.89461 7.57412 4.28989 7.55529 4.5453 7.78749L6.75292 9.79441L10.6018 3.90792"
    "C10.7907 3.61902 11.178 3.53795 11.4669 3.72684Z"
)


class Theme(Enum):
    """Light or dark colour theme."""

    LIGHT = "light"
    DARK = "dark"

    def toggled(self) -> "Theme":
        return Theme.DARK if self is Theme.LIGHT else Theme.LIGHT


def check_icon_svg() -> Element:
    """Return the checkmark icon."""
    return element(
        "svg",
        {
            "width": "19",
            "height": "19",
            "viewBox": "0 0 15 15",
            "fill": "none",
            "xmlns": "http://www.w3.org/2000/svg",
            "class": "text-black",
        },
        element(
            "path",
            {
                "d": _CHECK_PATH,
                "fill": "currentColor",
                "fill-rule": "evenodd",
                "clip-rule": "evenodd",
            },
        ),
    )


def _nav_item(name: str, active: bool, theme: Theme) -> Element:
    state = (
        "text-gray-900 font-normal data-[theme=dark]:text-white"
        if active
        else "text-gray-500 hover:text-[#605ED6] font-light"
    )
    return element(
        "div",
        {
            "class": f"px-2 py-1 text-sm cursor-pointer transition-colors tracking-wide {state}",
            "data-theme": theme.value,
        },
        name,
    )


def _component_card(title: str, theme: Theme, code_base: str, content: Any) -> Element:
    if title in COMPONENT_NAMES:
        href = f"{code_base}/components/{title.lower()}.py"
    else:
        href = f"{code_base}/components"
    border = "border-[#dedede] data-[theme=dark]:border-white"
    return element(
        "div",
        {
            "class": (
                "rounded border bg-[#605ED6] w-5/6 h-40 sm:h-44 lg:h-48 mx-auto "
                f"overflow-hidden {border}"
            ),
            "data-theme": theme.value,
        },
        element(
            "div",
            {"class": f"px-3 py-2 border-b relative {border}", "data-theme": theme.value},
            element("h3", {"class": "font-normal text-sm sm:text-base text-white tracking-wide"}, title),
            element(
                "a",
                {
                    "href": href,
                    "target": "_blank",
                    "rel": "noopener noreferrer",
                    "class": (
                        "absolute top-2 right-3 text-xs text-white hover:text-gray-200 "
                        "transition-colors cursor-pointer"
                    ),
                },
                "Code",
            ),
        ),
        element("div", {"class": "flex-1 flex items-center justify-center p-4 sm:p-5 lg:p-6"}, content),
    )


def _labelled(control: Element, target: str, text: str) -> Element:
    return element(
        "div",
        {"class": "flex items-center space-x-3"},
        control,
        element("label", {"for": target, "class": "cursor-pointer text-white text-base"}, text),
    )


def _separator_showcase() -> Element:
    def section(text: str) -> Element:
        return element("div", {"class": "text-gray-300 text-xs"}, text)

    return element(
        "div",
        {"class": "space-y-4"},
        element(
            "div",
            {"class": "space-y-2"},
            element("label", {"class": "text-white text-sm"}, "Horizontal"),
            element(
                "div",
                {"class": "space-y-2"},
                section("Section A"),
                Separator().render(),
                section("Section B"),
            ),
        ),
        element(
            "div",
            {"class": "space-y-2"},
            element("label", {"class": "text-white text-sm"}, "Vertical"),
            element(
                "div",
                {"class": "flex items-center space-x-2 h-8"},
                section("Left"),
                Separator(orientation="vertical", class_="h-6").render(),
                section("Right"),
            ),
        ),
    )


class App:
    """The showcase page and the state its widgets keep between renders."""

    def __init__(self, theme: Theme = Theme.DARK, code_base: str = "/code") -> None:
        self.theme = theme
        self.code_base = code_base
        self.progress = PROGRESS_STEP
        self.checkbox = Checkbox(CheckboxIndicator(check_icon_svg()), id="demo-checkbox-1")
        self.switch = Switch(SwitchThumb(), id="demo-switch-1")

    def toggle_theme(self) -> Theme:
        """Switch between light and dark and return the new theme."""
        self.theme = self.theme.toggled()
        return self.theme

    def advance_progress(self) -> float:
        """Step the demo progress, wrapping to zero after it is full."""
        if self.progress < PROGRESS_MAX:
            self.progress += PROGRESS_STEP
        else:
            self.progress = 0.0
        return self.progress

    def _theme_toggle(self) -> Element:
        icon = "🌙" if self.theme is Theme.LIGHT else "☀️"
        return element(
            "button",
            {"class": "text-lg cursor-pointer transition-opacity hover:opacity-70"},
            icon,
        )

    def _header(self) -> Element:
        theme = self.theme.value
        return element(
            "header",
            {"class": "px-4 py-4 sm:px-6 sm:py-6 bg-white data-[theme=dark]:bg-dark-bg", "data-theme": theme},
            element(
                "div",
                {"class": "w-full flex flex-col sm:flex-row justify-between items-start sm:items-center gap-4"},
                element(
                    "div",
                    {"class": "flex-1"},
                    element("h1", {"class": "text-2xl sm:text-3xl font-bold mb-2"}, "Leptographic"),
                    element(
                        "p",
                        {"class": "text-xs sm:text-sm text-gray-600 data-[theme=dark]:text-gray-400", "data-theme": theme},
                        "A Leptos UI system with Switch, Progress, and Separator components"
                        " - styled with Tailwind CSS 4.",
                    ),
                ),
                element("div", {"class": "flex-shrink-0"}, self._theme_toggle()),
            ),
        )

    def _showcase(self) -> Element:
        theme = self.theme
        nav = element(
            "div",
            {"class": "w-48 flex-shrink-0 p-2 bg-white data-[theme=dark]:bg-dark-bg", "data-theme": theme.value},
            element(
                "h3",
                {
                    "class": (
                        "font-normal mb-3 text-sm uppercase tracking-wider opacity-60 "
                        "text-gray-700 data-[theme=dark]:text-gray-400"
                    ),
                    "data-theme": theme.value,
                },
                "Components",
            ),
            element(
                "div",
                {"class": "space-y-1"},
                [_nav_item(name, name == "Checkbox", theme) for name in COMPONENT_NAMES],
            ),
        )
        progress = Progress(ProgressIndicator(), value=self.progress, max=PROGRESS_MAX, class_="w-48")
        contents = {
            "Checkbox": _labelled(self.checkbox.render(), "demo-checkbox-1", "Accept terms"),
            "Switch": _labelled(self.switch.render(), "demo-switch-1", "Enable notifications"),
            "Progress": element("div", {"class": "flex justify-center items-center h-full"}, progress.render()),
            "Separator": _separator_showcase(),
        }
        cards = element(
            "div",
            {"class": "flex-1 grid grid-cols-1 sm:grid-cols-2 lg:grid-cols-3 xl:grid-cols-4 gap-3 p-2"},
            [
                element("div", {}, _component_card(name, theme, self.code_base, content))
                for name, content in contents.items()
            ],
        )
        return element("div", {"class": "flex min-h-screen"}, nav, cards)

    def render(self) -> Element:
        """Render the whole page body content."""
        log.debug("rendering app")
        return element(
            "div",
            {
                "class": (
                    "min-h-screen transition-colors duration-200 bg-white text-gray-900 "
                    "data-[theme=dark]:bg-dark-bg data-[theme=dark]:text-white"
                ),
                "data-theme": self.theme.value,
            },
            self._header(),
            element("main", {"class": "w-full px-4 py-2"}, self._showcase()),
        )


def render_document(app: App) -> str:
    """Render a full HTML document with the app in its body."""
    page = element(
        "html",
        {"lang": "en"},
        element(
            "head",
            {},
            element("meta", {"charset": "utf-8"}),
            element("meta", {"name": "viewport", "content": "width=device-width, initial-scale=1"}),
            element("title", {}, TITLE),
            element("link", {"id": "leptos", "rel": "stylesheet", "href": STYLESHEET_HREF}),
        ),
        element("body", {}, app.render()),
    )
    return "<!DOCTYPE html>" + render(page)