"""
Statement counter aggregate.
Accumulates per-category DML statement counts between resets.
"""
from __future__ import annotations

import threading
from typing import Protocol

from .classify import classify_statement
from .logging import get_logger
from .models import QueryCount, StatementCategory

logger = get_logger(__name__)


class CounterAggregate(Protocol):
    def reset(self) -> None:
        """Zero every category counter for the active scope."""

    def current_totals(self) -> QueryCount:
        """Return the grand totals recorded since the last reset."""


class StatementCounter:
    """Thread-safe in-memory counter of executed DML statements.

    One instance is one scope: create a counter per unit of work (the pytest
    plugin does this per test) rather than sharing one across concurrent
    units of work, whose statements would otherwise be mixed together.
    """

    def __init__(self) -> None:
        self._counts: dict[StatementCategory, int] = dict.fromkeys(StatementCategory, 0)
        self._lock = threading.Lock()

    def record(self, category: StatementCategory, count: int = 1) -> None:
        """
        Add ``count`` statements to a category.

        Args:
            category: DML category the statements belong to
            count: Number of statements to add (default: 1)
        """
        category = StatementCategory(category)
        if isinstance(count, bool) or not isinstance(count, int) or count < 0:
            raise ValueError(f"count must be a non-negative integer, got {count!r}")
        with self._lock:
            self._counts[category] += count

    def record_statement(self, sql: str) -> StatementCategory | None:
        """
        Classify raw SQL text and record it.

        Returns:
            The category the statement was counted under, or None when the
            statement is not a DML statement and was ignored
        """
        category = classify_statement(sql)
        if category is None:
            logger.debug("Ignoring non-DML statement: %.60s", sql)
            return None
        self.record(category)
        return category

    def reset(self) -> None:
        with self._lock:
            for category in self._counts:
                self._counts[category] = 0
        logger.debug("Statement counter reset")

    def current_totals(self) -> QueryCount:
        with self._lock:
            return QueryCount(**{category.value: value for category, value in self._counts.items()})

    def __repr__(self) -> str:
        totals = self.current_totals()
        return f"StatementCounter({totals.as_dict()})"
