"""Keyboard event dispatch and handlers for Escape and other keys."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field
from typing import Callable, Optional, Union

ESCAPE = "Escape"


@dataclass
class KeyEvent:
    """A keydown event."""

    key: str
    default_prevented: bool = False
    propagation_stopped: bool = False

    def prevent_default(self) -> None:
        self.default_prevented = True

    def stop_propagation(self) -> None:
        self.propagation_stopped = True


Listener = Callable[[KeyEvent], None]


class KeyEventBus:
    """A document-level keydown target that listeners attach to."""

    def __init__(self) -> None:
        self._listeners: list[Listener] = []

    def add_listener(self, listener: Listener) -> Callable[[], None]:
        """Attach ``listener``; return a function that detaches it."""
        self._listeners.append(listener)

        def remove() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return remove

    def dispatch(self, event: KeyEvent) -> KeyEvent:
        """Deliver ``event`` to every listener in the order they were added."""
        for listener in list(self._listeners):
            listener(event)
        return event


@dataclass
class EscapeKeyConfig:
    """Options for :func:`use_escape_key_with_config`."""

    prevent_default: bool = False
    stop_propagation: bool = False
    enabled: bool = True
    additional_keys: list[str] = field(default_factory=list)


def use_escape_key(bus: KeyEventBus, on_escape: Listener) -> Callable[[], None]:
    """Call ``on_escape`` on every Escape keydown."""

    def listener(event: KeyEvent) -> None:
        if event.key == ESCAPE:
            on_escape(event)

    return bus.add_listener(listener)


def use_escape_key_when(
    bus: KeyEventBus,
    enabled: Union[bool, Callable[[], bool]],
    on_escape: Listener,
) -> Optional[Callable[[], None]]:
    """Like :func:`use_escape_key`, but only while ``enabled``.

    A plain False registers nothing; a callable is checked at each event.
    """
    if not callable(enabled):
        if not enabled:
            return None
        return use_escape_key(bus, on_escape)

    def listener(event: KeyEvent) -> None:
        if event.key == ESCAPE and enabled():
            on_escape(event)

    return bus.add_listener(listener)


def use_escape_key_with_config(
    bus: KeyEventBus, on_key: Listener, config: EscapeKeyConfig
) -> Optional[Callable[[], None]]:
    """Handle Escape and ``config.additional_keys`` with optional default/propagation control."""
    if not config.enabled:
        return None
    keys = {ESCAPE, *config.additional_keys}
    prevent_default = config.prevent_default
    stop_propagation = config.stop_propagation

    def listener(event: KeyEvent) -> None:
        if event.key not in keys:
            return
        if prevent_default:
            event.prevent_default()
        if stop_propagation:
            event.stop_propagation()
        on_key(event)

    return bus.add_listener(listener)


def use_key_combinations(
    bus: KeyEventBus, key_handlers: Iterable[Sequence]
) -> Callable[[], None]:
    """Call the handler of the first ``(key, handler)`` pair whose key matches."""
    handlers = [(key, handler) for key, handler in key_handlers]

    def listener(event: KeyEvent) -> None:
        for key, handler in handlers:
            if event.key == key:
                handler(event)
                break

    return bus.add_listener(listener)