"""Error types carried in store result envelopes."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Sequence

if TYPE_CHECKING:
    from publishing_store.collection_store import Predicate


class StoreError(Exception):
    """Base class for errors reported by the store."""

    code = "store_error"

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-compatible description of the error."""
        return {"code": self.code, "message": self.message, "details": dict(self.details)}


class NotFoundError(StoreError):
    """No record matched a query that requires exactly one result."""

    code = "not_found"

    def __init__(self, table: str, predicates: Sequence[Predicate] = ()) -> None:
        self.table = table
        self.predicates = tuple(predicates)
        conditions = " and ".join(p.describe() for p in self.predicates) or "no filter"
        super().__init__(
            f"Item not found in {table} with {conditions}",
            {"table": table, "predicates": [p.describe() for p in self.predicates]},
        )


class ValidationError(StoreError):
    """A call violated a structural contract of the store."""

    code = "validation"

    def __init__(self, message: str, table: str | None = None) -> None:
        self.table = table
        super().__init__(message, {"table": table} if table is not None else None)
