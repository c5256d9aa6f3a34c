"""QueryCount snapshot and category enum behavior."""

from __future__ import annotations

import dataclasses

import pytest

from sqlcount.models import QueryCount, StatementCategory


def test_query_count_defaults_to_zero() -> None:
    count = QueryCount()
    assert count.as_dict() == {"select": 0, "insert": 0, "update": 0, "delete": 0}
    assert count.total == 0


def test_query_count_get_by_category_and_value() -> None:
    count = QueryCount(select=4, insert=3, update=2, delete=1)
    assert count.get(StatementCategory.SELECT) == 4
    assert count.get(StatementCategory.DELETE) == 1
    assert count.get("update") == 2
    assert count.total == 10


def test_query_count_is_immutable() -> None:
    count = QueryCount(select=1)
    with pytest.raises(dataclasses.FrozenInstanceError):
        count.select = 2  # type: ignore[misc]


def test_query_count_equal_snapshots_are_interchangeable() -> None:
    assert QueryCount(select=2, delete=1) == QueryCount(select=2, delete=1)
    assert hash(QueryCount(select=2)) == hash(QueryCount(select=2))


@pytest.mark.parametrize("value", [-1, 1.5, True, "3"])
def test_query_count_rejects_invalid_counters(value) -> None:
    with pytest.raises(ValueError, match="insert count"):
        QueryCount(insert=value)


def test_statement_category_values() -> None:
    assert [c.value for c in StatementCategory] == ["select", "insert", "update", "delete"]
    assert StatementCategory("insert") is StatementCategory.INSERT
