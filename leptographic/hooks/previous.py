"""Tracking of the previously seen value of changing state."""

from __future__ import annotations

from typing import Any, Callable, Generic, Optional, TypeVar

T = TypeVar("T")

_MISSING: Any = object()


class Previous(Generic[T]):
    """Remembers the value seen at the last update.

    Read ``previous`` after the value changes and before calling ``update``
    to get the value it had before.
    """

    def __init__(self) -> None:
        self._previous: Any = _MISSING

    @property
    def previous(self) -> Optional[T]:
        return None if self._previous is _MISSING else self._previous

    def update(self, value: T) -> Optional[T]:
        """Record ``value`` and return the value recorded before it."""
        before = self.previous
        self._previous = value
        return before


class PreviousWith(Generic[T]):
    """Previous value that only advances when ``should_update(last, current)`` holds."""

    def __init__(self, should_update: Callable[[T, T], bool]) -> None:
        self._should_update = should_update
        self._previous: Any = _MISSING
        self._last: Any = _MISSING

    @property
    def previous(self) -> Optional[T]:
        return None if self._previous is _MISSING else self._previous

    def update(self, value: T) -> Optional[T]:
        """Record ``value`` and return the current previous value."""
        if self._last is not _MISSING and self._should_update(self._last, value):
            self._previous = self._last
        self._last = value
        return self.previous


class PreviousDetailed(Generic[T]):
    """Previous value plus whether it changed and whether this is the first update."""

    def __init__(self) -> None:
        self._previous: Any = _MISSING
        self.has_changed = False
        self.is_first_render = True

    @property
    def previous(self) -> Optional[T]:
        return None if self._previous is _MISSING else self._previous

    def update(self, value: T) -> bool:
        """Record ``value`` and return whether it differs from the previous one."""
        if self._previous is _MISSING:
            self.has_changed = False
            self.is_first_render = True
        else:
            self.has_changed = self._previous != value
            self.is_first_render = False
        self._previous = value
        return self.has_changed