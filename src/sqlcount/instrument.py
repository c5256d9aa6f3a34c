"""SQLAlchemy instrumentation feeding a statement counter.

Hooks into the engine's cursor execution events and records every DML
statement under its category.
"""

from __future__ import annotations

from contextlib import contextmanager
from typing import Iterator

from sqlalchemy import event
from sqlalchemy.engine import Engine

from .config import Settings, load_settings
from .counter import StatementCounter
from .errors import InstrumentationError
from .logging import get_logger

logger = get_logger(__name__)


class StatementListener:
    """Counts statements executed on one engine into one counter."""

    def __init__(
        self,
        engine: Engine,
        counter: StatementCounter,
        settings: Settings | None = None,
    ) -> None:
        self.engine = engine
        self.counter = counter
        self.settings = settings if settings is not None else load_settings()
        self._attached = False

    @property
    def attached(self) -> bool:
        return self._attached

    def _on_cursor_execute(self, conn, cursor, statement, parameters, context, executemany) -> None:
        # An executemany batch is a single statement.
        category = self.counter.record_statement(statement)
        if category is not None and self.settings.log_statements:
            logger.debug(
                "Recorded %s statement: %s",
                category.value,
                statement[: self.settings.statement_preview_chars],
            )

    def attach(self) -> None:
        if self._attached:
            raise InstrumentationError(f"Listener already attached to {self.engine!r}")
        event.listen(self.engine, self.settings.listen_event, self._on_cursor_execute)
        self._attached = True
        logger.debug("Attached %s listener to %r", self.settings.listen_event, self.engine)

    def detach(self) -> None:
        if not self._attached:
            raise InstrumentationError(f"Listener is not attached to {self.engine!r}")
        event.remove(self.engine, self.settings.listen_event, self._on_cursor_execute)
        self._attached = False
        logger.debug("Detached %s listener from %r", self.settings.listen_event, self.engine)

    def __enter__(self) -> StatementListener:
        self.attach()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.detach()


@contextmanager
def count_statements(
    engine: Engine,
    counter: StatementCounter | None = None,
    settings: Settings | None = None,
) -> Iterator[StatementCounter]:
    """Context manager that counts DML statements executed on ``engine``.

    Usage::

        with count_statements(engine) as counter:
            repo.query_run(run_id)
        SQLStatementCountValidator(counter).assert_select_count(2)
    """
    counter = counter if counter is not None else StatementCounter()
    with StatementListener(engine, counter, settings):
        yield counter
