"""Attribute raw SQL text to a DML category by its leading keyword."""

from __future__ import annotations

import re

from sqlcount.models import StatementCategory

# Leading whitespace, comments and opening parentheses, repeated.
_PREFIX = re.compile(r"(?:\s+|--[^\n]*(?:\n|$)|/\*.*?\*/|\()*", re.DOTALL)
_KEYWORD = re.compile(r"[A-Za-z]+")

_KEYWORD_TO_CATEGORY: dict[str, StatementCategory] = {
    "select": StatementCategory.SELECT,
    "with": StatementCategory.SELECT,
    "insert": StatementCategory.INSERT,
    "update": StatementCategory.UPDATE,
    "delete": StatementCategory.DELETE,
}


def classify_statement(sql: str) -> StatementCategory | None:
    """Return the DML category of ``sql``, or ``None`` for anything else.

    Only the first keyword is inspected, so DDL, ``PRAGMA``, transaction
    control and empty text all come back as ``None``. A ``WITH`` clause is
    counted as a select.
    """
    if not sql:
        return None
    start = _PREFIX.match(sql).end()
    keyword = _KEYWORD.match(sql, start)
    if keyword is None:
        return None
    return _KEYWORD_TO_CATEGORY.get(keyword.group(0).lower())


__all__ = ["classify_statement"]
