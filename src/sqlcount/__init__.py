"""Exact per-category SQL statement count assertions for tests."""

from .config import Settings, load_settings
from .counter import CounterAggregate, StatementCounter
from .classify import classify_statement
from .errors import ConfigError, InstrumentationError, SQLCountError, StatementCountMismatch
from .instrument import StatementListener, count_statements
from .models import QueryCount, StatementCategory
from .validator import SQLStatementCountValidator

__all__ = [
    "ConfigError",
    "CounterAggregate",
    "InstrumentationError",
    "QueryCount",
    "SQLCountError",
    "SQLStatementCountValidator",
    "Settings",
    "StatementCategory",
    "StatementCounter",
    "StatementCountMismatch",
    "StatementListener",
    "classify_statement",
    "count_statements",
    "load_settings",
]

__version__ = "0.1.0"
