"""Entry point for building query and mutation chains."""

from __future__ import annotations

from typing import Any, Mapping

from publishing_store import config
from publishing_store.collection_store import CollectionStore
from publishing_store.fixtures import seed_store
from publishing_store.log import get_logger
from publishing_store.mutation_builder import DeleteMutation, InsertMutation, UpdateMutation
from publishing_store.query_builder import QueryState, SelectedQuery, StoreContext, parse_select_or_error
from publishing_store.relations import RelationEnricher, RelationRegistry

logger = get_logger(__name__)


class TableHandle:
    """The start of a chain, bound to one table."""

    def __init__(self, context: StoreContext, table: str) -> None:
        self._context = context
        self.table = table

    def select(self, spec: str | None = "*") -> SelectedQuery:
        """Start a read; relations named in ``spec`` are attached to every result."""
        select, error = parse_select_or_error(self.table, spec)
        return SelectedQuery(self._context, QueryState(self.table, select=select, error=error))

    def insert(self, records: Any) -> InsertMutation:
        """Insert one record or a list of records immediately."""
        return InsertMutation.apply(self._context, self.table, records)

    def update(self, patch: Any) -> UpdateMutation:
        if isinstance(patch, Mapping):
            patch = dict(patch)
        return UpdateMutation(self._context, self.table, patch)

    def delete(self) -> DeleteMutation:
        return DeleteMutation(self._context, self.table)

    def __repr__(self) -> str:
        return f"TableHandle({self.table!r})"


class StoreClient:
    """Owns one store and hands out fresh chains over it.

    Each client is independent, so tests can build one per case.
    """

    def __init__(
        self,
        store: CollectionStore | None = None,
        relations: RelationRegistry | None = None,
        seed: bool = False,
    ) -> None:
        self.store = store or CollectionStore()
        self.relations = relations or RelationRegistry()
        self._context = StoreContext(self.store, RelationEnricher(self.store, self.relations))
        if seed:
            counts = seed_store(self.store)
            logger.debug("Seeded store: %s", counts)

    def table(self, name: str) -> TableHandle:
        return TableHandle(self._context, name)

    from_ = table


def create_client(seed: bool | None = None, **kwargs: Any) -> StoreClient:
    """Build a new client, seeded with fixtures unless configured otherwise."""
    if seed is None:
        seed = config.seed_on_start()
    return StoreClient(seed=seed, **kwargs)
