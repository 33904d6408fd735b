"""Post-generation SQL validation using sqlglot."""

from __future__ import annotations

import sqlglot
from sqlglot.errors import SqlglotError


def validate_sql(sql: str) -> list[str]:
    """Parse SQL with sqlglot's dialect-neutral parser.

    Returns a list of error messages (empty if valid).
    Validation is non-blocking; callers should treat errors as warnings.
    """
    errors: list[str] = []
    try:
        sqlglot.transpile(sql)
    except SqlglotError as exc:
        errors.append(str(exc))
    return errors
