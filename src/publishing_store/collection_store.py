"""Named in-memory record collections."""

from __future__ import annotations

import copy
import threading
import uuid
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, Callable, Iterable, Mapping, Sequence

from publishing_store import config
from publishing_store.errors import NotFoundError, ValidationError
from publishing_store.log import get_logger

logger = get_logger(__name__)

Record = dict[str, Any]

# Tables whose records carry created_at/updated_at
TIMESTAMPED_TABLES = frozenset({
    "projects",
    "editions",
    "authors",
    "author_biographies",
    "project_authors",
    "series",
    "publishers",
})


@dataclass(frozen=True)
class Predicate:
    """A single field/operator/value filter."""

    field: str
    operator: str  # eq, in
    value: Any

    def __post_init__(self) -> None:
        if self.operator not in ("eq", "in"):
            raise ValueError(f"Unsupported operator: {self.operator}")
        if self.operator == "in":
            object.__setattr__(self, "value", tuple(self.value))

    def matches(self, record: Mapping[str, Any]) -> bool:
        actual = record.get(self.field)
        if self.operator == "eq":
            return actual == self.value
        return actual in self.value

    def describe(self) -> str:
        if self.operator == "eq":
            return f"{self.field}={self.value}"
        return f"{self.field} in ({', '.join(str(v) for v in self.value)})"


def utc_timestamp(moment: datetime | None = None) -> str:
    """Format an instant as ISO-8601 UTC with millisecond precision."""
    moment = moment or datetime.now(timezone.utc)
    return moment.astimezone(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


class IdGenerator:
    """Produces record ids that are unique within a table."""

    def __init__(self, prefix: str | None = None) -> None:
        self.prefix = config.id_prefix() if prefix is None else prefix

    def __call__(self, existing: Callable[[str], bool]) -> str:
        while True:
            candidate = f"{self.prefix}{uuid.uuid4().hex}"
            if not existing(candidate):
                return candidate


class CollectionStore:
    """Owns every collection; the only mutable state of the store.

    All primitives take the store lock, which is re-entrant so a caller can
    hold it across a read followed by relation enrichment.
    """

    def __init__(
        self,
        id_generator: IdGenerator | None = None,
        clock: Callable[[], datetime] | None = None,
        timestamped_tables: Iterable[str] = TIMESTAMPED_TABLES,
    ) -> None:
        self._collections: dict[str, list[Record]] = {}
        self._id_generator = id_generator or IdGenerator()
        self._clock = clock or (lambda: datetime.now(timezone.utc))
        self.timestamped_tables = frozenset(timestamped_tables)
        self.lock = threading.RLock()

    def _now(self) -> str:
        return utc_timestamp(self._clock())

    def _collection(self, table: str) -> list[Record]:
        """Return the live collection, creating it on first reference."""
        return self._collections.setdefault(table, [])

    def ensure_table(self, table: str) -> None:
        """Create an empty table if it does not exist yet."""
        with self.lock:
            self._collection(table)

    def tables(self) -> list[str]:
        """Return the names of all known tables."""
        with self.lock:
            return list(self._collections)

    def count(self, table: str) -> int:
        with self.lock:
            return len(self._collections.get(table, []))

    def get_all(self, table: str) -> list[Record]:
        """Return copies of every record in a table (empty for unknown tables)."""
        with self.lock:
            return copy.deepcopy(self._collections.get(table, []))

    def find_where(self, table: str, predicates: Sequence[Predicate]) -> list[Record]:
        """Return copies of the records matching all predicates, in insertion order."""
        with self.lock:
            return [
                copy.deepcopy(record)
                for record in self._collections.get(table, [])
                if all(p.matches(record) for p in predicates)
            ]

    def find_one(self, table: str, predicates: Sequence[Predicate]) -> Record:
        """Return the first matching record.

        Raises:
            NotFoundError: No record matches.
        """
        with self.lock:
            for record in self._collections.get(table, []):
                if all(p.matches(record) for p in predicates):
                    return copy.deepcopy(record)
        raise NotFoundError(table, predicates)

    def insert_all(self, table: str, partial_records: Sequence[Mapping[str, Any]]) -> list[Record]:
        """Append records with generated ids and return them in input order."""
        for partial in partial_records:
            if not isinstance(partial, Mapping):
                raise ValidationError(f"Cannot insert {type(partial).__name__} into {table}", table)

        with self.lock:
            collection = self._collection(table)
            known_ids = {record.get("id") for record in collection}
            stamped = table in self.timestamped_tables
            inserted = []
            for partial in partial_records:
                record = copy.deepcopy(dict(partial))
                if "id" in record:
                    logger.debug("Discarding caller-supplied id %r for %s", record["id"], table)
                record["id"] = self._id_generator(lambda candidate: candidate in known_ids)
                known_ids.add(record["id"])
                if stamped:
                    now = self._now()
                    record["created_at"] = record.get("created_at") or now
                    record["updated_at"] = now
                collection.append(record)
                inserted.append(copy.deepcopy(record))

        logger.debug("Inserted %d record(s) into %s", len(inserted), table)
        return inserted

    def update_where(self, table: str, predicates: Sequence[Predicate], patch: Mapping[str, Any]) -> list[Record]:
        """Shallow-merge ``patch`` onto every matching record.

        Returns the updated records; zero matches yields an empty list.
        """
        if not isinstance(patch, Mapping):
            raise ValidationError(f"Update patch for {table} must be a mapping", table)

        with self.lock:
            collection = self._collection(table)
            indices = [
                i for i, record in enumerate(collection)
                if all(p.matches(record) for p in predicates)
            ]
            for i in indices:
                if "id" in patch and patch["id"] != collection[i].get("id"):
                    raise ValidationError(f"Cannot change id of record {collection[i].get('id')} in {table}", table)

            updated = []
            for i in indices:
                merged = {**collection[i], **copy.deepcopy(dict(patch))}
                merged["updated_at"] = self._now()
                collection[i] = merged
                updated.append(copy.deepcopy(merged))

        logger.debug("Updated %d record(s) in %s", len(updated), table)
        return updated

    def delete_where(self, table: str, predicates: Sequence[Predicate]) -> int:
        """Remove matching records and return how many were removed."""
        with self.lock:
            collection = self._collection(table)
            kept = [record for record in collection if not all(p.matches(record) for p in predicates)]
            removed = len(collection) - len(kept)
            collection[:] = kept

        logger.debug("Deleted %d record(s) from %s", removed, table)
        return removed

    def load(self, table: str, records: Iterable[Mapping[str, Any]]) -> int:
        """Append fixture records verbatim, keeping their ids and timestamps."""
        with self.lock:
            collection = self._collection(table)
            known_ids = {record.get("id") for record in collection}
            loaded = 0
            for record in records:
                if record.get("id") is None or record["id"] in known_ids:
                    raise ValidationError(f"Fixture record in {table} needs a unique id, got {record.get('id')!r}", table)
                known_ids.add(record["id"])
                collection.append(copy.deepcopy(dict(record)))
                loaded += 1
        return loaded

    def clear(self, table: str | None = None) -> dict[str, int]:
        """Empty one table, or every table when ``table`` is None.

        Returns the number of records removed per table.
        """
        with self.lock:
            names = [table] if table is not None else list(self._collections)
            removed = {}
            for name in names:
                collection = self._collections.get(name, [])
                removed[name] = len(collection)
                collection.clear()
        return removed
