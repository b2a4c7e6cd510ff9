"""Boolean triggers and ways of combining several of them."""

from __future__ import annotations

import functools
import operator
from collections.abc import Callable, Iterable

__all__ = ["Trigger", "all_of", "any_of", "none_of", "one_of"]


class Trigger:
    """A condition that is evaluated each time the trigger is called."""

    __slots__ = ("_condition",)

    def __init__(self, condition: Callable[[], bool]) -> None:
        self._condition = condition

    def __call__(self) -> bool:
        """Evaluate the condition now."""
        return bool(self._condition())

    def __and__(self, other: Trigger) -> Trigger:
        return Trigger(lambda: self() and other())

    def __or__(self, other: Trigger) -> Trigger:
        return Trigger(lambda: self() or other())

    def __invert__(self) -> Trigger:
        return Trigger(lambda: not self())


def _as_list(triggers: Iterable[Trigger]) -> list[Trigger]:
    items = list(triggers)
    if not items:
        raise ValueError("at least one trigger is required")
    return items


def one_of(triggers: Iterable[Trigger]) -> Trigger:
    """Trigger that is true when exactly one of the triggers is true."""
    items = _as_list(triggers)
    if len(items) == 1:
        return items[0]
    exclusive_checks = []
    for chosen, candidate in enumerate(items):
        check = candidate
        for other_index, other in enumerate(items):
            if other_index != chosen:
                check = check & ~other
        exclusive_checks.append(check)
    return functools.reduce(operator.or_, exclusive_checks)


def none_of(triggers: Iterable[Trigger]) -> Trigger:
    """Trigger that is true when none of the triggers is true."""
    return ~functools.reduce(operator.or_, _as_list(triggers))


def any_of(triggers: Iterable[Trigger]) -> Trigger:
    """Trigger that is true when any of the triggers is true."""
    return functools.reduce(operator.or_, _as_list(triggers))


def all_of(triggers: Iterable[Trigger]) -> Trigger:
    """Trigger that is true when all of the triggers are true."""
    return functools.reduce(operator.and_, _as_list(triggers))