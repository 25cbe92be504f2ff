"""Chainable write-side stages.

Inserts take effect as soon as ``insert()`` is called; the terminal call
only decides what is returned. Updates and deletes must be scoped with
``eq``/``in_`` and take effect at the terminal call. An un-scoped update or
delete changes nothing and reports an empty result.
"""

from __future__ import annotations

import copy
from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any, Mapping

from publishing_store.collection_store import Predicate, Record
from publishing_store.errors import StoreError, ValidationError
from publishing_store.log import get_logger
from publishing_store.query_builder import StoreContext, in_predicate, parse_select_or_error
from publishing_store.result import Result

logger = get_logger(__name__)


def _returning(context: StoreContext, table: str, records: list[Record], spec: str | None) -> Result:
    """Build the envelope for mutated records, attaching any requested relations."""
    select, error = parse_select_or_error(table, spec)
    if error is not None:
        return Result.failure(error)
    with context.store.lock:
        return Result(data=context.enricher.enrich(table, records, select))


@dataclass(frozen=True)
class InsertMutation:
    """An insert that has already been applied."""

    context: StoreContext
    table: str
    inserted: tuple[Record, ...] = ()
    error: StoreError | None = None

    @classmethod
    def apply(cls, context: StoreContext, table: str, records: Any) -> InsertMutation:
        if isinstance(records, Mapping):
            records = [records]
        if not isinstance(records, Iterable) or isinstance(records, (str, bytes)):
            return cls(context, table, error=ValidationError(f"Cannot insert {type(records).__name__} into {table}", table))
        try:
            inserted = context.store.insert_all(table, list(records))
        except StoreError as e:
            logger.warning("Insert into %s failed: %s", table, e)
            return cls(context, table, error=e)
        return cls(context, table, inserted=tuple(inserted))

    def select(self, spec: str | None = "*") -> Result:
        """Return the inserted records with their generated ids."""
        if self.error is not None:
            return Result.failure(self.error)
        return _returning(self.context, self.table, copy.deepcopy(list(self.inserted)), spec)

    def execute(self) -> Result:
        return self.select()


@dataclass(frozen=True)
class ScopedUpdate:
    """An update restricted by at least one filter."""

    context: StoreContext
    table: str
    patch: Any
    predicates: tuple[Predicate, ...]
    error: StoreError | None = None

    def eq(self, field: str, value: Any) -> ScopedUpdate:
        return ScopedUpdate(self.context, self.table, self.patch, self.predicates + (Predicate(field, "eq", value),), self.error)

    def in_(self, field: str, values: Iterable[Any]) -> ScopedUpdate:
        try:
            predicate = in_predicate(self.table, field, values)
        except ValidationError as e:
            return ScopedUpdate(self.context, self.table, self.patch, self.predicates, e)
        return ScopedUpdate(self.context, self.table, self.patch, self.predicates + (predicate,), self.error)

    def select(self, spec: str | None = "*") -> Result:
        """Apply the patch and return the updated records."""
        if self.error is not None:
            return Result.failure(self.error)
        try:
            updated = self.context.store.update_where(self.table, self.predicates, self.patch)
        except StoreError as e:
            logger.warning("Update of %s failed: %s", self.table, e)
            return Result.failure(e)
        return _returning(self.context, self.table, updated, spec)

    def execute(self) -> Result:
        return self.select()


@dataclass(frozen=True)
class UpdateMutation:
    """An update that still needs a filter before it can change anything."""

    context: StoreContext
    table: str
    patch: Any

    def eq(self, field: str, value: Any) -> ScopedUpdate:
        return ScopedUpdate(self.context, self.table, self.patch, ()).eq(field, value)

    def in_(self, field: str, values: Iterable[Any]) -> ScopedUpdate:
        return ScopedUpdate(self.context, self.table, self.patch, ()).in_(field, values)

    def select(self, spec: str | None = "*") -> Result:
        logger.warning("Ignoring update of %s without a filter", self.table)
        self.context.store.ensure_table(self.table)
        return Result(data=[])

    def execute(self) -> Result:
        return self.select()


@dataclass(frozen=True)
class ScopedDelete:
    """A delete restricted by at least one filter."""

    context: StoreContext
    table: str
    predicates: tuple[Predicate, ...]
    error: StoreError | None = None

    def eq(self, field: str, value: Any) -> ScopedDelete:
        return ScopedDelete(self.context, self.table, self.predicates + (Predicate(field, "eq", value),), self.error)

    def in_(self, field: str, values: Iterable[Any]) -> ScopedDelete:
        try:
            predicate = in_predicate(self.table, field, values)
        except ValidationError as e:
            return ScopedDelete(self.context, self.table, self.predicates, e)
        return ScopedDelete(self.context, self.table, self.predicates + (predicate,), self.error)

    def execute(self) -> Result:
        """Remove the matching records; ``count`` says how many."""
        if self.error is not None:
            return Result.failure(self.error)
        try:
            removed = self.context.store.delete_where(self.table, self.predicates)
        except StoreError as e:
            return Result.failure(e)
        return Result(count=removed)


@dataclass(frozen=True)
class DeleteMutation:
    """A delete that still needs a filter before it can remove anything."""

    context: StoreContext
    table: str

    def eq(self, field: str, value: Any) -> ScopedDelete:
        return ScopedDelete(self.context, self.table, ()).eq(field, value)

    def in_(self, field: str, values: Iterable[Any]) -> ScopedDelete:
        return ScopedDelete(self.context, self.table, ()).in_(field, values)

    def execute(self) -> Result:
        logger.warning("Ignoring delete from %s without a filter", self.table)
        self.context.store.ensure_table(self.table)
        return Result(count=0)
