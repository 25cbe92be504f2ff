"""Shared helpers for the domain access functions."""

from __future__ import annotations

from publishing_store.collection_store import Predicate
from publishing_store.errors import NotFoundError, ValidationError
from publishing_store.result import Result

# Route placeholder that leaks through when a page renders before its params resolve
ROUTE_PLACEHOLDER = "[id]"


def require_id(value: str | None, what: str, table: str) -> None:
    """Raise ValidationError for a missing or placeholder id."""
    if not value or value == ROUTE_PLACEHOLDER:
        raise ValidationError(f"Invalid {what} ID", table)


def require_rows(result: Result, table: str, key: str, value: str) -> Result:
    """Turn an empty update result into a NotFoundError."""
    result.raise_for_error()
    if not result.data:
        raise NotFoundError(table, [Predicate(key, "eq", value)])
    return result
