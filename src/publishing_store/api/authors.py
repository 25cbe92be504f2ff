"""Author, biography and project-author access functions."""

from __future__ import annotations

from typing import Any, Iterable, Mapping

from publishing_store.api._common import require_id
from publishing_store.client import StoreClient
from publishing_store.errors import StoreError
from publishing_store.log import get_logger
from publishing_store.result import Result

logger = get_logger(__name__)

DEFAULT_BIOGRAPHY = {
    "biography_text": "Keine Biografie vorhanden.",
    "biography_label": "Standard",
    "language": "Deutsch",
}


def fetch_authors(client: StoreClient) -> Result:
    """Return every author with their biographies attached."""
    try:
        return client.table("authors").select("*, author_biographies(*)").order().raise_for_error()
    except StoreError as e:
        logger.error("Error fetching authors: %s", e)
        return Result.failure(e)


def create_author(
    client: StoreClient,
    author_data: Mapping[str, Any],
    biographies: Iterable[Mapping[str, Any]] | None = None,
) -> Result:
    """Create an author and their biographies.

    A person created without biographies gets a default one; organizations
    do not.
    """
    try:
        author = client.table("authors").insert([author_data]).select().raise_for_error().data[0]
        bios = [dict(b) for b in biographies or ()]
        if not bios and author.get("author_type", "person") == "person":
            bios = [dict(DEFAULT_BIOGRAPHY)]
        if bios:
            client.table("author_biographies").insert(
                [{**bio, "author_id": author["id"]} for bio in bios]
            ).execute().raise_for_error()
        return client.table("authors").select("*, author_biographies(*)").eq("id", author["id"]).single().raise_for_error()
    except StoreError as e:
        logger.error("Error creating author: %s", e)
        return Result.failure(e)


def replace_biographies(
    client: StoreClient, author_id: str, biographies: Iterable[Mapping[str, Any]]
) -> Result:
    """Replace all biographies of an author with ``biographies``."""
    try:
        require_id(author_id, "author", "author_biographies")
        client.table("author_biographies").delete().eq("author_id", author_id).execute().raise_for_error()
        rows = [{**bio, "author_id": author_id} for bio in biographies]
        if not rows:
            return Result(data=[])
        return client.table("author_biographies").insert(rows).select().raise_for_error()
    except StoreError as e:
        logger.error("Error replacing biographies of author %s: %s", author_id, e)
        return Result.failure(e)


def add_author_to_project(
    client: StoreClient, project_id: str, author_id: str, author_role: str = "Autor"
) -> Result:
    """Link an author to a project.

    Reuses the author's first biography, creating a default one when the
    author has none. An existing link is returned unchanged. New links are
    appended after the project's current authors.
    """
    try:
        require_id(project_id, "project", "project_authors")
        require_id(author_id, "author", "project_authors")
        client.table("authors").select("id").eq("id", author_id).single().raise_for_error()

        existing = client.table("project_authors").select("*").eq("project_id", project_id).eq("author_id", author_id).execute()
        if existing.raise_for_error().data:
            logger.info("Author %s is already linked to project %s", author_id, project_id)
            return Result(data=existing.data)

        biographies = client.table("author_biographies").select("*").eq("author_id", author_id).execute().raise_for_error()
        if biographies.data:
            biography_id = biographies.data[0]["id"]
        else:
            created = client.table("author_biographies").insert(
                [{**DEFAULT_BIOGRAPHY, "author_id": author_id}]
            ).select().raise_for_error()
            biography_id = created.data[0]["id"]

        current = client.table("project_authors").select("display_order").eq("project_id", project_id).execute().raise_for_error()
        next_order = max((pa.get("display_order") or 0 for pa in current.data), default=-1) + 1

        return client.table("project_authors").insert([{
            "project_id": project_id,
            "author_id": author_id,
            "author_role": author_role,
            "biography_id": biography_id,
            "display_order": next_order,
        }]).select().raise_for_error()
    except StoreError as e:
        logger.error("Error adding author %s to project %s: %s", author_id, project_id, e)
        return Result.failure(e)


def fetch_project_authors(client: StoreClient, project_id: str) -> Result:
    """Return a project's author links with author and biography attached."""
    try:
        require_id(project_id, "project", "project_authors")
        return (
            client.table("project_authors")
            .select("*")
            .eq("project_id", project_id)
            .select("authors(*), author_biographies(*)")
            .raise_for_error()
        )
    except StoreError as e:
        logger.error("Error fetching authors of project %s: %s", project_id, e)
        return Result.failure(e)
