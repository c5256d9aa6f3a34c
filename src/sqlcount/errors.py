"""Error taxonomy for stable module boundaries."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from sqlcount.models import StatementCategory


class SQLCountError(Exception):
    """Base exception for sqlcount."""


class ConfigError(SQLCountError):
    """Raised when settings are invalid."""


class InstrumentationError(SQLCountError):
    """Raised when a statement listener is attached or detached out of order."""


class StatementCountMismatch(SQLCountError, AssertionError):
    """Raised when the recorded count for a DML category differs from the expected one.

    A single type covers every category; ``category`` tells select, insert,
    update and delete failures apart. The numbers stay available as typed
    attributes and are also rendered into the exception text.
    """

    def __init__(
        self,
        category: StatementCategory,
        expected: int,
        actual: int,
        message: str | None = None,
    ) -> None:
        self.category = category
        self.expected = expected
        self.actual = actual
        self.message = message
        super().__init__(self._render())

    def _render(self) -> str:
        text = (
            f"Expected {self.expected} {self.category.value} statement(s) "
            f"but recorded {self.actual} instead!"
        )
        if self.message:
            return f"{self.message}: {text}"
        return text

    def __reduce__(self):
        return (
            self.__class__,
            (self.category, self.expected, self.actual, self.message),
        )
