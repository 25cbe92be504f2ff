"""Tests for the collection store primitives."""

from datetime import datetime, timezone

import pytest

from publishing_store.collection_store import CollectionStore, IdGenerator, Predicate, utc_timestamp
from publishing_store.errors import NotFoundError, ValidationError

FIXED_NOW = datetime(2024, 5, 1, 12, 30, 0, 123456, tzinfo=timezone.utc)


@pytest.fixture
def store():
    return CollectionStore(id_generator=IdGenerator("t-"), clock=lambda: FIXED_NOW)


class TestPredicate:
    """Tests for filter predicates."""

    def test_eq_matches(self):
        """Test equality matching against a record."""
        assert Predicate("title", "eq", "T").matches({"title": "T"})
        assert not Predicate("title", "eq", "T").matches({"title": "U"})
        assert not Predicate("title", "eq", "T").matches({})

    def test_eq_none_matches_missing_field(self):
        """Test that a None value matches an absent field."""
        assert Predicate("series", "eq", None).matches({"id": "1"})

    def test_in_matches(self):
        """Test set membership matching."""
        predicate = Predicate("id", "in", ["1", "3"])
        assert predicate.matches({"id": "3"})
        assert not predicate.matches({"id": "2"})
        assert predicate.value == ("1", "3")

    def test_unknown_operator(self):
        """Test that unsupported operators are rejected."""
        with pytest.raises(ValueError):
            Predicate("id", "gt", 1)

    def test_describe(self):
        """Test the diagnostic rendering."""
        assert Predicate("id", "eq", "missing").describe() == "id=missing"
        assert Predicate("id", "in", ["a", "b"]).describe() == "id in (a, b)"


class TestReads:
    """Tests for get_all, find_where and find_one."""

    def test_unknown_table_is_empty(self, store):
        """Test that reading an unknown table never fails."""
        assert store.get_all("nothing") == []
        assert store.find_where("nothing", [Predicate("id", "eq", "1")]) == []

    def test_find_where_conjunction(self, store):
        """Test that all predicates must hold."""
        store.load("editions", [
            {"id": "1", "project_id": "p1", "status": "Draft"},
            {"id": "2", "project_id": "p1", "status": "Ready"},
            {"id": "3", "project_id": "p2", "status": "Draft"},
        ])
        rows = store.find_where("editions", [Predicate("project_id", "eq", "p1"), Predicate("status", "eq", "Draft")])
        assert [r["id"] for r in rows] == ["1"]

    def test_find_one_not_found(self, store):
        """Test that find_one signals NotFoundError with the table and filter."""
        store.load("authors", [{"id": "1"}])
        with pytest.raises(NotFoundError) as exc_info:
            store.find_one("authors", [Predicate("id", "eq", "missing")])
        assert exc_info.value.table == "authors"
        assert "id=missing" in exc_info.value.message

    def test_find_one_first_in_insertion_order(self, store):
        """Test the deterministic tie-break."""
        store.load("authors", [
            {"id": "a", "last_name": "Weber"},
            {"id": "b", "last_name": "Weber"},
        ])
        for _ in range(3):
            assert store.find_one("authors", [Predicate("last_name", "eq", "Weber")])["id"] == "a"

    def test_reads_return_copies(self, store):
        """Test that mutating a returned record does not touch the store."""
        store.load("projects", [{"id": "1", "languages": ["Deutsch"]}])
        record = store.get_all("projects")[0]
        record["languages"].append("English")
        record["title"] = "changed"
        assert store.get_all("projects") == [{"id": "1", "languages": ["Deutsch"]}]


class TestInsert:
    """Tests for insert_all."""

    def test_assigns_unique_ids(self, store):
        """Test that every inserted record gets a distinct id."""
        for _ in range(5):
            store.insert_all("projects", [{"title": "A"}, {"title": "B"}])
        ids = [r["id"] for r in store.get_all("projects")]
        assert len(ids) == 10
        assert len(set(ids)) == 10
        assert all(i.startswith("t-") for i in ids)

    def test_returns_records_in_input_order(self, store):
        """Test that finalized records come back in the order given."""
        inserted = store.insert_all("series", [{"name": "first"}, {"name": "second"}])
        assert [r["name"] for r in inserted] == ["first", "second"]
        assert store.get_all("series") == inserted

    def test_caller_id_is_replaced(self, store):
        """Test that a caller-supplied id is discarded."""
        inserted = store.insert_all("projects", [{"id": "mine", "title": "T"}])
        assert inserted[0]["id"] != "mine"

    def test_id_generator_skips_existing(self):
        """Test that a colliding id is drawn again."""
        generator = IdGenerator("x-")
        seen = []

        def existing(candidate):
            seen.append(candidate)
            return len(seen) == 1

        result = generator(existing)
        assert len(seen) == 2
        assert result == seen[1]

    def test_timestamps_for_timestamped_tables(self, store):
        """Test created_at/updated_at stamping."""
        record = store.insert_all("projects", [{"title": "T"}])[0]
        assert record["created_at"] == "2024-05-01T12:30:00.123Z"
        assert record["updated_at"] == "2024-05-01T12:30:00.123Z"

    def test_caller_created_at_is_kept(self, store):
        """Test that an explicit created_at survives insertion."""
        record = store.insert_all("projects", [{"title": "T", "created_at": "2023-01-01T00:00:00Z"}])[0]
        assert record["created_at"] == "2023-01-01T00:00:00Z"
        assert record["updated_at"] == "2024-05-01T12:30:00.123Z"

    def test_no_timestamps_for_other_tables(self, store):
        """Test that tables outside the convention are not stamped."""
        record = store.insert_all("genres", [{"name": "fiction"}])[0]
        assert "created_at" not in record
        assert "updated_at" not in record

    def test_creates_table(self, store):
        """Test that inserting into an unknown table creates it."""
        store.insert_all("new_table", [{"a": 1}])
        assert "new_table" in store.tables()

    def test_rejects_non_mapping(self, store):
        """Test that non-mapping records are a validation error."""
        with pytest.raises(ValidationError):
            store.insert_all("projects", ["not a record"])
        assert store.get_all("projects") == []


class TestUpdate:
    """Tests for update_where."""

    def test_update_is_merge(self, store):
        """Test that fields not in the patch survive."""
        store.load("items", [{"id": 1, "a": 1, "b": 2}])
        updated = store.update_where("items", [Predicate("id", "eq", 1)], {"b": 3})
        assert updated[0]["a"] == 1
        assert updated[0]["b"] == 3
        assert updated[0]["id"] == 1

    def test_update_refreshes_updated_at(self, store):
        """Test that updated_at is refreshed on every update."""
        store.load("projects", [{"id": "1", "updated_at": "2020-01-01T00:00:00Z"}])
        updated = store.update_where("projects", [Predicate("id", "eq", "1")], {"title": "new"})
        assert updated[0]["updated_at"] == "2024-05-01T12:30:00.123Z"

    def test_zero_matches(self, store):
        """Test that updating nothing is not an error."""
        assert store.update_where("projects", [Predicate("id", "eq", "missing")], {"title": "x"}) == []

    def test_id_is_immutable(self, store):
        """Test that a patch cannot change a record's id."""
        store.load("projects", [{"id": "1", "title": "T"}])
        with pytest.raises(ValidationError):
            store.update_where("projects", [Predicate("id", "eq", "1")], {"id": "2"})
        assert store.get_all("projects") == [{"id": "1", "title": "T"}]

    def test_same_id_in_patch_is_allowed(self, store):
        """Test that repeating the current id in a patch is harmless."""
        store.load("projects", [{"id": "1", "title": "T"}])
        updated = store.update_where("projects", [Predicate("id", "eq", "1")], {"id": "1", "title": "U"})
        assert updated[0]["title"] == "U"

    def test_rejects_non_mapping_patch(self, store):
        """Test that the patch must be a mapping."""
        with pytest.raises(ValidationError):
            store.update_where("projects", [], ["title"])


class TestDelete:
    """Tests for delete_where, load and clear."""

    def test_delete_counts(self, store):
        """Test that delete_where reports how many records it removed."""
        store.load("editions", [
            {"id": "1", "project_id": "p1"},
            {"id": "2", "project_id": "p1"},
            {"id": "3", "project_id": "p2"},
        ])
        assert store.delete_where("editions", [Predicate("project_id", "eq", "p1")]) == 2
        assert [r["id"] for r in store.get_all("editions")] == ["3"]
        assert store.delete_where("editions", [Predicate("project_id", "eq", "p1")]) == 0

    def test_load_requires_unique_ids(self, store):
        """Test that fixture loading rejects duplicate or missing ids."""
        store.load("series", [{"id": "s1"}])
        with pytest.raises(ValidationError):
            store.load("series", [{"id": "s1"}])
        with pytest.raises(ValidationError):
            store.load("series", [{"name": "no id"}])

    def test_clear(self, store):
        """Test clearing one table and all tables."""
        store.load("a", [{"id": "1"}, {"id": "2"}])
        store.load("b", [{"id": "1"}])
        assert store.clear("a") == {"a": 2}
        assert store.count("a") == 0
        assert store.count("b") == 1
        assert store.clear() == {"a": 0, "b": 1}


def test_utc_timestamp_format():
    """Test the ISO-8601 rendering used for timestamps."""
    assert utc_timestamp(datetime(2023, 1, 15, 10, 30, tzinfo=timezone.utc)) == "2023-01-15T10:30:00.000Z"
