"""Functional-style helpers over plain sequences."""

from __future__ import annotations

from typing import Callable, Iterable, List, TypeVar

from shellkit.exceptions import InvalidArgument

T = TypeVar("T")


def select(predicate: Callable[[T], object], items: Iterable[T]) -> List[T]:
    """Return the *items* for which *predicate* is truthy, in their original order."""

    if not callable(predicate):
        raise InvalidArgument("usage: select(predicate, items)")
    return [item for item in items if predicate(item)]


__all__ = ["select"]
