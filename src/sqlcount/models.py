"""Data model contracts for cross-module use."""

from __future__ import annotations

from dataclasses import asdict, dataclass
from enum import Enum


class StatementCategory(str, Enum):
    SELECT = "select"
    INSERT = "insert"
    UPDATE = "update"
    DELETE = "delete"


@dataclass(frozen=True)
class QueryCount:
    """Read-only snapshot of statements recorded since the last reset."""

    select: int = 0
    insert: int = 0
    update: int = 0
    delete: int = 0

    def __post_init__(self) -> None:
        for category in StatementCategory:
            value = getattr(self, category.value)
            if isinstance(value, bool) or not isinstance(value, int) or value < 0:
                raise ValueError(
                    f"{category.value} count must be a non-negative integer, got {value!r}"
                )

    def get(self, category: StatementCategory) -> int:
        return getattr(self, StatementCategory(category).value)

    @property
    def total(self) -> int:
        return self.select + self.insert + self.update + self.delete

    def as_dict(self) -> dict[str, int]:
        return asdict(self)
