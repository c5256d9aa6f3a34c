"""Validates recorded statement counts.

First run some operations against the database, then check how many
statements of each kind were executed. This catches N+1 query problems and
suboptimal DML batching.

Usage::

    counter = StatementCounter()
    validator = SQLStatementCountValidator(counter)

    validator.reset()
    with count_statements(engine, counter):
        repo.load_order_graph(order_id)
    validator.assert_select_count(1, message="order graph loads in one select")
"""

from __future__ import annotations

from .counter import CounterAggregate
from .errors import StatementCountMismatch
from .logging import get_logger
from .models import QueryCount, StatementCategory

logger = get_logger(__name__)


class SQLStatementCountValidator:
    """Exact-count assertions against a counter aggregate.

    Holds no counts of its own; every assertion reads a fresh snapshot of the
    grand totals since the last reset.
    """

    def __init__(self, counter: CounterAggregate) -> None:
        self._counter = counter

    @property
    def counter(self) -> CounterAggregate:
        return self._counter

    def reset(self) -> None:
        """Reset the statement recorder."""
        self._counter.reset()

    def current_totals(self) -> QueryCount:
        return self._counter.current_totals()

    def assert_count(
        self,
        category: StatementCategory,
        expected: int,
        message: str | None = None,
    ) -> None:
        """
        Assert the number of statements recorded for a category.

        Args:
            category: DML category to check
            expected: Exact statement count expected since the last reset
            message: Optional explanation of the expectation, shown on failure

        Raises:
            StatementCountMismatch: The recorded count differs from ``expected``
            ValueError: ``expected`` is not a non-negative integer
        """
        category = StatementCategory(category)
        if isinstance(expected, bool) or not isinstance(expected, int) or expected < 0:
            raise ValueError(f"expected count must be a non-negative integer, got {expected!r}")

        recorded = self._counter.current_totals().get(category)
        if recorded != expected:
            logger.debug(
                "%s count mismatch: expected %d, recorded %d",
                category.value,
                expected,
                recorded,
            )
            raise StatementCountMismatch(category, expected, recorded, message)

    def assert_select_count(self, expected: int, message: str | None = None) -> None:
        """Assert select statement count."""
        self.assert_count(StatementCategory.SELECT, expected, message)

    def assert_insert_count(self, expected: int, message: str | None = None) -> None:
        """Assert insert statement count."""
        self.assert_count(StatementCategory.INSERT, expected, message)

    def assert_update_count(self, expected: int, message: str | None = None) -> None:
        """Assert update statement count."""
        self.assert_count(StatementCategory.UPDATE, expected, message)

    def assert_delete_count(self, expected: int, message: str | None = None) -> None:
        """Assert delete statement count."""
        self.assert_count(StatementCategory.DELETE, expected, message)
