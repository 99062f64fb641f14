"""State that is either controlled from outside or held internally."""

from __future__ import annotations

from typing import Callable, Generic, Optional, TypeVar

T = TypeVar("T")


class ControllableState(Generic[T]):
    """A value that an owner may control; otherwise it is kept internally.

    ``controlled`` may be reassigned at any time to model a changing prop.
    """

    def __init__(
        self,
        controlled: Optional[T] = None,
        default: Optional[T] = None,
        on_change: Optional[Callable[[T], None]] = None,
    ) -> None:
        self.controlled = controlled
        self._internal = default
        self._on_change = on_change

    @property
    def value(self) -> Optional[T]:
        """The controlled value if present, else the internal one."""
        return self._internal if self.controlled is None else self.controlled

    @property
    def is_controlled(self) -> bool:
        return self.controlled is not None

    def set_value(self, new_value: T) -> None:
        """Update internal state when uncontrolled and always notify the callback."""
        if self.controlled is None:
            self._internal = new_value
        if self._on_change is not None:
            self._on_change(new_value)