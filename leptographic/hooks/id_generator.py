"""Unique and stable element identifiers for ARIA relationships and forms."""

from __future__ import annotations

import itertools
import threading
from collections.abc import Iterable
from dataclasses import dataclass


class IdGenerator:
    """A thread-safe counter handing out increasing integers from ``start``."""

    def __init__(self, start: int = 0) -> None:
        self._counter = itertools.count(start)
        self._lock = threading.Lock()

    def next_id(self) -> int:
        """Return the next number; no number is ever returned twice."""
        with self._lock:
            return next(self._counter)


_GENERATOR = IdGenerator()


@dataclass(frozen=True)
class RelatedIds:
    """Identifiers for the parts of a composite widget."""

    base_id: str
    trigger_id: str
    content_id: str
    label_id: str
    description_id: str


@dataclass(frozen=True)
class FormIds:
    """Identifiers for a form field and the elements describing it."""

    input_id: str
    label_id: str
    description_id: str
    error_id: str


def use_id() -> str:
    """Return a new unique id of the form ``leptos-radix-<n>``."""
    return f"leptos-radix-{_GENERATOR.next_id()}"


def use_id_with_prefix(prefix: str) -> str:
    """Return a new unique id of the form ``<prefix>-<n>``."""
    return f"{prefix}-{_GENERATOR.next_id()}"


def use_related_ids(prefix: str) -> RelatedIds:
    """Return a set of ids sharing one new number."""
    base = f"{prefix}-{_GENERATOR.next_id()}"
    return RelatedIds(
        base_id=base,
        trigger_id=f"{base}-trigger",
        content_id=f"{base}-content",
        label_id=f"{base}-label",
        description_id=f"{base}-description",
    )


def use_form_ids(field_name: str) -> FormIds:
    """Return ids for a form field, all sharing one new number."""
    base = f"{field_name}-{_GENERATOR.next_id()}"
    return FormIds(
        input_id=f"{base}-input",
        label_id=f"{base}-label",
        description_id=f"{base}-description",
        error_id=f"{base}-error",
    )


def use_custom_id_pattern(prefix: str, suffixes: Iterable[str]) -> list[str]:
    """Return ``<prefix>-<n>-<suffix>`` for each suffix, all sharing one new number."""
    base = _GENERATOR.next_id()
    return [f"{prefix}-{base}-{suffix}" for suffix in suffixes]


def use_stable_id(key: str) -> str:
    """Return an id derived only from ``key`` (a 32-bit multiplicative hash)."""
    hash_value = 0
    for char in key:
        hash_value = (hash_value * 31 + ord(char)) & 0xFFFFFFFF
    return f"leptos-radix-stable-{hash_value}"