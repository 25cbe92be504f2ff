"""Chainable read-side query stages.

A chain moves through one stage class per step::

    client.table("projects")       # TableHandle
        .select("*, editions(*)")  # SelectedQuery
        .eq("user_id", "user-1")   # FilteredQuery
        .order("title")            # terminal -> Result

Stages are immutable; every non-terminal call returns a new stage, so a
partially built chain can be reused without the branches affecting each
other. Nothing touches the store until a terminal call.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, replace
from typing import Any

from publishing_store.collection_store import CollectionStore, Predicate, Record
from publishing_store.errors import StoreError, ValidationError
from publishing_store.log import get_logger
from publishing_store.parsing import SelectSpec, parse_select
from publishing_store.relations import RelationEnricher
from publishing_store.result import Result

logger = get_logger(__name__)


@dataclass(frozen=True)
class StoreContext:
    """The store and enricher a chain runs against."""

    store: CollectionStore
    enricher: RelationEnricher


@dataclass(frozen=True)
class QueryState:
    """Everything a chain has accumulated before termination."""

    table: str
    select: SelectSpec = SelectSpec()
    predicates: tuple[Predicate, ...] = ()
    error: StoreError | None = None

    def with_predicate(self, predicate: Predicate) -> QueryState:
        return replace(self, predicates=self.predicates + (predicate,))

    def describe(self) -> str:
        where = " and ".join(p.describe() for p in self.predicates)
        text = f"select {self.select} from {self.table}"
        return f"{text} where {where}" if where else text


def parse_select_or_error(table: str, spec: str | None) -> tuple[SelectSpec, StoreError | None]:
    """Parse a select spec, turning syntax errors into a ValidationError."""
    try:
        return parse_select(spec), None
    except SyntaxError as e:
        return SelectSpec(), ValidationError(f"Invalid select '{spec}' for {table}: {e}", table)


def in_predicate(table: str, field: str, values: Iterable[Any]) -> Predicate:
    if isinstance(values, (str, bytes)) or not isinstance(values, Iterable):
        raise ValidationError(f"in_ on {table}.{field} expects a collection of values", table)
    return Predicate(field, "in", values)


def sort_records(records: list[Record], field: str, ascending: bool = True) -> list[Record]:
    """Stable sort by ``field``; records without a value go last."""
    present = [r for r in records if r.get(field) is not None]
    missing = [r for r in records if r.get(field) is None]
    try:
        present.sort(key=lambda r: r[field], reverse=not ascending)
    except TypeError:
        present.sort(key=lambda r: str(r[field]), reverse=not ascending)
    return present + missing


@dataclass(frozen=True)
class _QueryStage:
    context: StoreContext
    state: QueryState

    def _fetch(
        self,
        extra: tuple[Predicate, ...] = (),
        spec: SelectSpec | None = None,
        order_by: str | None = None,
        ascending: bool = True,
    ) -> list[Record]:
        store = self.context.store
        spec = spec or self.state.select
        predicates = self.state.predicates + extra
        with store.lock:
            records = store.find_where(self.state.table, predicates)
            if order_by is not None:
                records = sort_records(records, order_by, ascending)
            return self.context.enricher.enrich(self.state.table, records, spec)

    def _terminate(self, **kwargs: Any) -> Result:
        if self.state.error is not None:
            return Result.failure(self.state.error)
        logger.debug("%s", self.state.describe())
        try:
            return Result(data=self._fetch(**kwargs))
        except StoreError as e:
            return Result.failure(e)

    def execute(self) -> Result:
        """Return every record matching the chain so far."""
        return self._terminate()

    def order(self, field: str | None = None, ascending: bool = True) -> Result:
        """Return matching records, sorted by ``field`` when one is given."""
        return self._terminate(order_by=field, ascending=ascending)

    def in_(self, field: str, values: Iterable[Any]) -> Result:
        """Return matching records whose ``field`` is one of ``values``."""
        if self.state.error is not None:
            return Result.failure(self.state.error)
        try:
            predicate = in_predicate(self.state.table, field, values)
        except ValidationError as e:
            return Result.failure(e)
        return self._terminate(extra=(predicate,))


@dataclass(frozen=True)
class SelectedQuery(_QueryStage):
    """A query with a column/relation selection but no filters yet."""

    def eq(self, field: str, value: Any) -> FilteredQuery:
        return FilteredQuery(self.context, self.state.with_predicate(Predicate(field, "eq", value)))


@dataclass(frozen=True)
class FilteredQuery(_QueryStage):
    """A query with at least one equality filter."""

    def eq(self, field: str, value: Any) -> FilteredQuery:
        return FilteredQuery(self.context, self.state.with_predicate(Predicate(field, "eq", value)))

    def single(self) -> Result:
        """Return the first matching record in insertion order.

        The envelope carries a NotFoundError when nothing matches.
        """
        if self.state.error is not None:
            return Result.failure(self.state.error)
        logger.debug("%s (single)", self.state.describe())
        store = self.context.store
        try:
            with store.lock:
                record = store.find_one(self.state.table, self.state.predicates)
                data = self.context.enricher.enrich_record(self.state.table, record, self.state.select)
        except StoreError as e:
            return Result.failure(e)
        return Result(data=data)

    def select(self, spec: str | None = "*") -> Result:
        """Return matching records with the relations named in ``spec`` attached."""
        nested, error = parse_select_or_error(self.state.table, spec)
        if error is not None:
            return Result.failure(error)
        return self._terminate(spec=self.state.select.merge(nested))
