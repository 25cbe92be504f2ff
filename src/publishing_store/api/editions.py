"""Edition access functions."""

from __future__ import annotations

from typing import Any, Mapping

from publishing_store.api._common import require_id, require_rows
from publishing_store.client import StoreClient
from publishing_store.errors import StoreError
from publishing_store.log import get_logger
from publishing_store.result import Result

logger = get_logger(__name__)


def fetch_editions_by_project_id(client: StoreClient, project_id: str) -> Result:
    try:
        require_id(project_id, "project", "editions")
        return client.table("editions").select("*").eq("project_id", project_id).execute().raise_for_error()
    except StoreError as e:
        logger.error("Error fetching editions for project %s: %s", project_id, e)
        return Result.failure(e)


def create_edition(client: StoreClient, edition_data: Mapping[str, Any]) -> Result:
    try:
        require_id(edition_data.get("project_id"), "project", "editions")
        return client.table("editions").insert([edition_data]).select().raise_for_error()
    except StoreError as e:
        logger.error("Error creating edition: %s", e)
        return Result.failure(e)


def update_edition(client: StoreClient, edition_id: str, edition_data: Mapping[str, Any]) -> Result:
    try:
        require_id(edition_id, "edition", "editions")
        result = client.table("editions").update(edition_data).eq("id", edition_id).select()
        return require_rows(result, "editions", "id", edition_id)
    except StoreError as e:
        logger.error("Error updating edition %s: %s", edition_id, e)
        return Result.failure(e)


def delete_edition(client: StoreClient, edition_id: str) -> Result:
    try:
        require_id(edition_id, "edition", "editions")
        return client.table("editions").delete().eq("id", edition_id).execute().raise_for_error()
    except StoreError as e:
        logger.error("Error deleting edition %s: %s", edition_id, e)
        return Result.failure(e)
