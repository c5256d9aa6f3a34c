"""pytest fixtures for statement count assertions.

Enable in a conftest::

    pytest_plugins = ["sqlcount.pytest_plugin"]

Each test gets its own counter, so counts never leak between tests.
"""

from __future__ import annotations

import pytest
from sqlalchemy.engine import Engine

from .config import Settings, load_settings
from .counter import StatementCounter
from .instrument import StatementListener
from .validator import SQLStatementCountValidator


@pytest.fixture(scope="session")
def sql_count_settings() -> Settings:
    return load_settings()


@pytest.fixture
def statement_counter() -> StatementCounter:
    """Fresh counter scoped to the current test."""
    return StatementCounter()


@pytest.fixture
def sql_count(statement_counter: StatementCounter) -> SQLStatementCountValidator:
    """Validator bound to the current test's counter."""
    return SQLStatementCountValidator(statement_counter)


@pytest.fixture
def sql_count_instrument(statement_counter, sql_count_settings):
    """Attach counting listeners to engines for the duration of a test.

    Usage::

        def test_loads_order(sql_count, sql_count_instrument, engine):
            sql_count_instrument(engine)
            repo.load(order_id)
            sql_count.assert_select_count(1)
    """
    listeners: list[StatementListener] = []

    def _instrument(engine: Engine) -> StatementListener:
        listener = StatementListener(engine, statement_counter, sql_count_settings)
        listener.attach()
        listeners.append(listener)
        return listener

    yield _instrument

    for listener in reversed(listeners):
        if listener.attached:
            listener.detach()
