"""Tests for the functional helpers."""

from __future__ import annotations

import pytest

from shellkit.exceptions import InvalidArgument
from shellkit.functional import select


def test_select_keeps_matching_items_in_order() -> None:
    names = ["_test_b", "helper", "_test_a", "_test_"]

    assert select(lambda item: item.startswith("_test_") and len(item) > 6, names) == ["_test_b", "_test_a"]


def test_select_accepts_any_iterable() -> None:
    assert select(lambda value: value % 2, range(7)) == [1, 3, 5]


def test_select_on_empty_input() -> None:
    assert select(bool, []) == []


def test_select_requires_callable_predicate() -> None:
    with pytest.raises(InvalidArgument):
        select("[[ $item == ex ]]", ["ex"])  # type: ignore[arg-type]
