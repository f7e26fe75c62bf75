"""Primitive list helpers shared by the rule checks."""

from __future__ import annotations

from typing import Iterable, Sequence


def list_is_unique(values: Iterable[str]) -> bool:
    """Return True when no value appears more than once."""

    seen: set[str] = set()
    for value in values:
        if value in seen:
            return False
        seen.add(value)
    return True


def string_in_list(value: str, values: Sequence[str]) -> bool:
    return value in values
