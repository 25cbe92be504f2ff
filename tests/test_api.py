"""Tests for the domain access functions."""

import pytest

from publishing_store import NotFoundError, StoreClient, ValidationError
from publishing_store.api import (
    add_author_to_project,
    clear_all_data,
    create_author,
    create_edition,
    create_project,
    create_series,
    create_test_data_with_linking,
    delete_edition,
    delete_project,
    delete_series,
    fetch_all_series,
    fetch_authors,
    fetch_editions_by_project_id,
    fetch_project_authors,
    fetch_project_by_id,
    fetch_project_with_relations,
    fetch_projects,
    fetch_projects_by_series,
    fetch_series_by_id,
    remove_project_from_series,
    replace_biographies,
    update_edition,
    update_project,
    update_series,
)
from publishing_store.api.authors import DEFAULT_BIOGRAPHY


@pytest.fixture
def client():
    return StoreClient(seed=True)


class TestProjects:
    """Tests for project access functions."""

    def test_fetch_projects(self, client):
        """Test listing a user's projects."""
        result = fetch_projects(client, "user-1")
        assert [p["id"] for p in result.data] == ["1", "2", "3"]
        assert fetch_projects(client, "someone-else").data == []

    def test_fetch_project_by_id(self, client):
        """Test fetching one project."""
        assert fetch_project_by_id(client, "3").data["title"] == "Digitales Publizieren Meistern"

    @pytest.mark.parametrize("project_id", ["", "[id]", None])
    def test_invalid_id(self, client, project_id):
        """Test that missing and placeholder ids are rejected."""
        result = fetch_project_by_id(client, project_id)
        assert isinstance(result.error, ValidationError)
        assert result.error.message == "Invalid project ID"

    def test_fetch_missing_project(self, client):
        """Test the not-found envelope."""
        assert isinstance(fetch_project_by_id(client, "missing").error, NotFoundError)

    def test_fetch_with_relations(self, client):
        """Test the project detail view."""
        client.table("project_authors").update({"display_order": 5}).eq("id", "1").execute()
        project = fetch_project_with_relations(client, "1").data
        assert [e["id"] for e in project["editions"]] == ["1", "2", "3"]
        links = project["project_authors"]
        assert [pa["id"] for pa in links] == ["2", "3", "1"]
        assert links[2]["authors"]["last_name"] == "Schmidt"
        assert links[2]["author_biographies"]["id"] == "bio-1"

    def test_create_and_update_project(self, client):
        """Test creating then updating a project."""
        created = create_project(client, {"title": "Neu", "user_id": "user-2"}).data[0]
        updated = update_project(client, created["id"], {"subtitle": "Untertitel"})
        assert updated.data[0]["title"] == "Neu"
        assert updated.data[0]["subtitle"] == "Untertitel"
        assert [p["id"] for p in fetch_projects(client, "user-2").data] == [created["id"]]

    def test_update_missing_project(self, client):
        """Test that updating a missing project reports NotFoundError."""
        result = update_project(client, "missing", {"title": "x"})
        assert isinstance(result.error, NotFoundError)
        assert result.data is None

    def test_delete_project_cascades(self, client):
        """Test that deleting a project removes its editions and author links."""
        result = delete_project(client, "1")
        assert result.count == 1
        assert fetch_editions_by_project_id(client, "1").data == []
        assert client.table("project_authors").select("*").eq("project_id", "1").execute().data == []
        assert client.store.count("authors") == 7
        assert client.store.count("editions") == 3


class TestEditions:
    """Tests for edition access functions."""

    def test_fetch_by_project(self, client):
        """Test listing a project's editions."""
        assert [e["id"] for e in fetch_editions_by_project_id(client, "3").data] == ["5", "6"]

    def test_create_requires_project(self, client):
        """Test that an edition needs a project id."""
        result = create_edition(client, {"title": "Lose"})
        assert isinstance(result.error, ValidationError)

    def test_create_update_delete(self, client):
        """Test an edition's lifecycle."""
        edition = create_edition(client, {"project_id": "2", "title": "E-Book", "price": 9.99}).data[0]
        assert update_edition(client, edition["id"], {"price": 7.99}).data[0]["price"] == 7.99
        assert delete_edition(client, edition["id"]).count == 1
        assert isinstance(update_edition(client, edition["id"], {"price": 1}).error, NotFoundError)


class TestSeries:
    """Tests for series access functions."""

    def test_fetch_all_sorted_by_name(self, client):
        """Test that series are listed by name."""
        names = [s["name"] for s in fetch_all_series(client).data]
        assert names == ["Marketing für Autoren", "Schreiben & Publizieren"]

    def test_fetch_projects_by_series(self, client):
        """Test listing a series' projects sorted by title."""
        titles = [p["title"] for p in fetch_projects_by_series(client, "series-1").data]
        assert titles == ["Die Kunst des Schreibens", "Digitales Publizieren Meistern"]

    def test_crud(self, client):
        """Test creating, updating and deleting a series."""
        series = create_series(client, {"name": "Ratgeber", "project_count": 0}).data[0]
        assert fetch_series_by_id(client, series["id"]).data["name"] == "Ratgeber"
        assert update_series(client, series["id"], {"description": "Tipps"}).data[0]["description"] == "Tipps"
        assert delete_series(client, series["id"]).count == 1
        assert isinstance(fetch_series_by_id(client, series["id"]).error, NotFoundError)

    def test_remove_project_from_series(self, client):
        """Test detaching a project and decrementing the series count."""
        result = remove_project_from_series(client, "1")
        assert result.data[0]["series"] is None
        assert fetch_series_by_id(client, "series-1").data["project_count"] == 1
        assert [p["id"] for p in fetch_projects_by_series(client, "series-1").data] == ["3"]

    def test_remove_project_count_floor(self, client):
        """Test that the project count never goes below zero."""
        client.table("projects").update({"series": "series-2"}).eq("id", "2").execute()
        remove_project_from_series(client, "2")
        assert fetch_series_by_id(client, "series-2").data["project_count"] == 0

    def test_remove_project_without_series(self, client):
        """Test detaching a project that has no series."""
        result = remove_project_from_series(client, "2")
        assert result.ok
        assert fetch_series_by_id(client, "series-1").data["project_count"] == 2


class TestAuthors:
    """Tests for author access functions."""

    def test_fetch_authors(self, client):
        """Test listing authors with biographies."""
        authors = fetch_authors(client).data
        assert len(authors) == 7
        assert authors[0]["author_biographies"][0]["id"] == "bio-1"

    def test_create_person_gets_default_biography(self, client):
        """Test the default biography for persons."""
        author = create_author(client, {"first_name": "Eva", "last_name": "Klein", "author_type": "person"}).data
        assert len(author["author_biographies"]) == 1
        assert author["author_biographies"][0]["biography_text"] == DEFAULT_BIOGRAPHY["biography_text"]

    def test_create_organization_without_biography(self, client):
        """Test that organizations get no default biography."""
        author = create_author(client, {"company_name": "Verlag AG", "author_type": "organization"}).data
        assert author["author_biographies"] == []

    def test_create_with_biographies(self, client):
        """Test creating an author with explicit biographies."""
        author = create_author(
            client,
            {"first_name": "Eva", "last_name": "Klein"},
            [{"biography_text": "Kurz"}, {"biography_text": "Lang"}],
        ).data
        assert [b["biography_text"] for b in author["author_biographies"]] == ["Kurz", "Lang"]

    def test_replace_biographies(self, client):
        """Test replacing an author's biographies."""
        result = replace_biographies(client, "1", [{"biography_text": "Neu"}])
        assert result.data[0]["author_id"] == "1"
        bios = client.table("author_biographies").select("*").eq("author_id", "1").execute().data
        assert [b["biography_text"] for b in bios] == ["Neu"]

    def test_replaced_biography_becomes_placeholder(self, client):
        """Test that a link to a removed biography shows the placeholder."""
        replace_biographies(client, "1", [])
        links = fetch_project_authors(client, "1").data
        assert links[0]["author_biographies"]["id"] == "bio-1"
        assert links[0]["author_biographies"]["language"] == "de"

    def test_add_author_to_project(self, client):
        """Test linking an author to a project."""
        link = add_author_to_project(client, "3", "1", "Co-Autor").data[0]
        assert link["biography_id"] == "bio-1"
        assert link["display_order"] == 1
        assert link["author_role"] == "Co-Autor"

    def test_add_author_already_linked(self, client):
        """Test that an existing link is returned without a duplicate."""
        result = add_author_to_project(client, "1", "2")
        assert [pa["id"] for pa in result.data] == ["2"]
        assert client.store.count("project_authors") == 7

    def test_add_author_creates_biography(self, client):
        """Test that an author without biographies gets a default one."""
        author = create_author(client, {"company_name": "Studio", "author_type": "organization"}).data
        link = add_author_to_project(client, "2", author["id"]).data[0]
        bio = client.table("author_biographies").select("*").eq("id", link["biography_id"]).single().data
        assert bio["author_id"] == author["id"]
        assert link["display_order"] == 3

    def test_add_missing_author(self, client):
        """Test that linking an unknown author reports NotFoundError."""
        assert isinstance(add_author_to_project(client, "1", "missing").error, NotFoundError)

    def test_fetch_project_authors(self, client):
        """Test listing a project's author links with relations."""
        links = fetch_project_authors(client, "2").data
        assert [pa["authors"]["id"] for pa in links] == ["4", "5", "6"]
        assert links[2]["authors"]["company_name"] == "Buchmarketing Institut"


class TestTestData:
    """Tests for the store reset and sample data helpers."""

    def test_clear_all_data(self, client):
        """Test that every table is emptied."""
        result = clear_all_data(client)
        assert result.data["projects"] == 3
        assert result.count == 3 + 6 + 7 + 7 + 7 + 2 + 4
        assert fetch_projects(client, "user-1").data == []

    def test_create_linked_test_data(self, client):
        """Test the linked sample data set."""
        clear_all_data(client)
        data = create_test_data_with_linking(client).data
        project_id = data["project"]["id"]
        assert len(data["authors"]) == 3
        assert len(data["editions"]) == 3

        project = fetch_project_with_relations(client, project_id).data
        assert [pa["display_order"] for pa in project["project_authors"]] == [0, 1, 2]
        first = project["project_authors"][0]
        assert first["authors"]["first_name"] == "Mock1"
        assert first["author_biographies"]["biography_text"] == "Biography for Mock1 Author1"
