"""Project access functions."""

from __future__ import annotations

from typing import Any, Mapping

from publishing_store.api._common import require_id, require_rows
from publishing_store.client import StoreClient
from publishing_store.errors import StoreError
from publishing_store.log import get_logger
from publishing_store.result import Result

logger = get_logger(__name__)

PROJECT_DETAIL_SELECT = """
    *,
    editions(*),
    project_authors(*, authors(*), author_biographies(*))
"""


def fetch_projects(client: StoreClient, user_id: str) -> Result:
    """Return all projects owned by ``user_id`` in creation order."""
    try:
        return client.table("projects").select("*").eq("user_id", user_id).order().raise_for_error()
    except StoreError as e:
        logger.error("Error fetching projects for %s: %s", user_id, e)
        return Result.failure(e)


def fetch_project_by_id(client: StoreClient, project_id: str) -> Result:
    try:
        require_id(project_id, "project", "projects")
        return client.table("projects").select("*").eq("id", project_id).single().raise_for_error()
    except StoreError as e:
        logger.error("Error fetching project %s: %s", project_id, e)
        return Result.failure(e)


def fetch_project_with_relations(client: StoreClient, project_id: str) -> Result:
    """Return one project with its editions and authors attached.

    Project authors come back sorted by ``display_order``.
    """
    try:
        require_id(project_id, "project", "projects")
        result = client.table("projects").select(PROJECT_DETAIL_SELECT).eq("id", project_id).single()
        result.raise_for_error()
    except StoreError as e:
        logger.error("Error fetching project %s with relations: %s", project_id, e)
        return Result.failure(e)
    result.data["project_authors"].sort(key=lambda pa: pa.get("display_order") or 0)
    return result


def create_project(client: StoreClient, project_data: Mapping[str, Any]) -> Result:
    try:
        result = client.table("projects").insert([project_data]).select().raise_for_error()
    except StoreError as e:
        logger.error("Error creating project: %s", e)
        return Result.failure(e)
    logger.info("Project created: %s", result.data[0]["id"])
    return result


def update_project(client: StoreClient, project_id: str, project_data: Mapping[str, Any]) -> Result:
    try:
        require_id(project_id, "project", "projects")
        result = client.table("projects").update(project_data).eq("id", project_id).select()
        return require_rows(result, "projects", "id", project_id)
    except StoreError as e:
        logger.error("Error updating project %s: %s", project_id, e)
        return Result.failure(e)


def delete_project(client: StoreClient, project_id: str) -> Result:
    """Delete a project together with its author links and editions."""
    try:
        require_id(project_id, "project", "projects")
        client.table("project_authors").delete().eq("project_id", project_id).execute().raise_for_error()
        client.table("editions").delete().eq("project_id", project_id).execute().raise_for_error()
        return client.table("projects").delete().eq("id", project_id).execute().raise_for_error()
    except StoreError as e:
        logger.error("Error deleting project %s: %s", project_id, e)
        return Result.failure(e)
