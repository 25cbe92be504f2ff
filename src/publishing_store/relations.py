"""Read-time attachment of related records."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Any, Callable, Iterable

from publishing_store.collection_store import CollectionStore, Predicate, Record
from publishing_store.log import get_logger
from publishing_store.parsing import SelectSpec

logger = get_logger(__name__)

PLACEHOLDER_BIOGRAPHY_TEXT = "Sample biography text for this author."


class RelationKind(enum.Enum):
    MANY_TO_ONE = "many_to_one"
    ONE_TO_MANY = "one_to_many"


@dataclass(frozen=True)
class RelationDescriptor:
    """A foreign-key attachment from ``table`` to ``target_table``.

    For MANY_TO_ONE, ``table.foreign_key`` references
    ``target_table.target_key`` and a single record (or None) is attached.
    For ONE_TO_MANY, ``target_table.foreign_key`` references
    ``table.target_key`` and a list is attached.
    """

    table: str
    name: str
    target_table: str
    foreign_key: str
    target_key: str = "id"
    kind: RelationKind = RelationKind.MANY_TO_ONE
    placeholder: Callable[[Record], Record] | None = None


def biography_placeholder(record: Record) -> Record:
    """Stand-in for a project author's biography that no longer exists."""
    return {
        "id": record.get("biography_id"),
        "biography_text": PLACEHOLDER_BIOGRAPHY_TEXT,
        "language": "de",
    }


DEFAULT_RELATIONS: tuple[RelationDescriptor, ...] = (
    RelationDescriptor("project_authors", "authors", "authors", "author_id"),
    RelationDescriptor(
        "project_authors", "author_biographies", "author_biographies", "biography_id",
        placeholder=biography_placeholder,
    ),
    RelationDescriptor("project_authors", "projects", "projects", "project_id"),
    RelationDescriptor("author_biographies", "authors", "authors", "author_id"),
    RelationDescriptor("editions", "projects", "projects", "project_id"),
    RelationDescriptor("projects", "editions", "editions", "project_id", kind=RelationKind.ONE_TO_MANY),
    RelationDescriptor("projects", "project_authors", "project_authors", "project_id", kind=RelationKind.ONE_TO_MANY),
    RelationDescriptor("authors", "author_biographies", "author_biographies", "author_id", kind=RelationKind.ONE_TO_MANY),
    RelationDescriptor("authors", "project_authors", "project_authors", "author_id", kind=RelationKind.ONE_TO_MANY),
    RelationDescriptor("series", "projects", "projects", "series", kind=RelationKind.ONE_TO_MANY),
    RelationDescriptor("publishers", "projects", "projects", "publisher_id", kind=RelationKind.ONE_TO_MANY),
)


class RelationRegistry:
    """Static set of relation descriptors keyed by (table, relation name)."""

    def __init__(self, descriptors: Iterable[RelationDescriptor] = DEFAULT_RELATIONS) -> None:
        self._descriptors: dict[tuple[str, str], RelationDescriptor] = {}
        for descriptor in descriptors:
            self.register(descriptor)

    def register(self, descriptor: RelationDescriptor) -> None:
        self._descriptors[(descriptor.table, descriptor.name)] = descriptor

    def get(self, table: str, name: str) -> RelationDescriptor | None:
        return self._descriptors.get((table, name))

    def for_table(self, table: str) -> list[RelationDescriptor]:
        return [d for (t, _), d in self._descriptors.items() if t == table]


class RelationEnricher:
    """Attaches related records to query results without touching the store."""

    def __init__(self, store: CollectionStore, registry: RelationRegistry | None = None) -> None:
        self.store = store
        self.registry = registry or RelationRegistry()

    def enrich(self, table: str, records: list[Record], spec: SelectSpec) -> list[Record]:
        """Attach every relation in ``spec`` to each record, recursively."""
        if not spec.relations:
            return records
        return [self.enrich_record(table, record, spec) for record in records]

    def enrich_record(self, table: str, record: Record, spec: SelectSpec) -> Record:
        enriched = dict(record)
        for relation in spec.relations:
            descriptor = self.registry.get(table, relation.name)
            if descriptor is None:
                logger.warning("No relation %r defined for table %s", relation.name, table)
                enriched[relation.attach_as] = None
                continue
            enriched[relation.attach_as] = self._resolve(descriptor, record, relation.spec)
        return enriched

    def _resolve(self, descriptor: RelationDescriptor, record: Record, spec: SelectSpec) -> Any:
        if descriptor.kind is RelationKind.ONE_TO_MANY:
            key = record.get(descriptor.target_key)
            if key is None:
                return []
            related = self.store.find_where(
                descriptor.target_table, [Predicate(descriptor.foreign_key, "eq", key)]
            )
            return self.enrich(descriptor.target_table, related, spec)

        key = record.get(descriptor.foreign_key)
        if key is None:
            return None
        matches = self.store.find_where(
            descriptor.target_table, [Predicate(descriptor.target_key, "eq", key)]
        )
        if not matches:
            if descriptor.placeholder is not None:
                return descriptor.placeholder(record)
            logger.debug(
                "Dangling reference %s.%s=%r -> %s",
                descriptor.table, descriptor.foreign_key, key, descriptor.target_table,
            )
            return None
        return self.enrich_record(descriptor.target_table, matches[0], spec)
