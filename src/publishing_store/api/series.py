"""Series access functions."""

from __future__ import annotations

from typing import Any, Mapping

from publishing_store.api._common import require_id, require_rows
from publishing_store.client import StoreClient
from publishing_store.errors import StoreError
from publishing_store.log import get_logger
from publishing_store.result import Result

logger = get_logger(__name__)


def fetch_all_series(client: StoreClient) -> Result:
    try:
        return client.table("series").select("*").order("name", ascending=True).raise_for_error()
    except StoreError as e:
        logger.error("Error fetching series: %s", e)
        return Result.failure(e)


def fetch_projects_by_series(client: StoreClient, series_id: str) -> Result:
    try:
        require_id(series_id, "series", "projects")
        return (
            client.table("projects")
            .select("id, title")
            .eq("series", series_id)
            .order("title", ascending=True)
            .raise_for_error()
        )
    except StoreError as e:
        logger.error("Error fetching projects by series %s: %s", series_id, e)
        return Result.failure(e)


def fetch_series_by_id(client: StoreClient, series_id: str) -> Result:
    try:
        require_id(series_id, "series", "series")
        return client.table("series").select("*").eq("id", series_id).single().raise_for_error()
    except StoreError as e:
        logger.error("Error fetching series %s: %s", series_id, e)
        return Result.failure(e)


def create_series(client: StoreClient, series_data: Mapping[str, Any]) -> Result:
    try:
        return client.table("series").insert([series_data]).select().raise_for_error()
    except StoreError as e:
        logger.error("Error creating series: %s", e)
        return Result.failure(e)


def update_series(client: StoreClient, series_id: str, series_data: Mapping[str, Any]) -> Result:
    try:
        require_id(series_id, "series", "series")
        result = client.table("series").update(series_data).eq("id", series_id).select()
        return require_rows(result, "series", "id", series_id)
    except StoreError as e:
        logger.error("Error updating series %s: %s", series_id, e)
        return Result.failure(e)


def delete_series(client: StoreClient, series_id: str) -> Result:
    try:
        require_id(series_id, "series", "series")
        return client.table("series").delete().eq("id", series_id).execute().raise_for_error()
    except StoreError as e:
        logger.error("Error deleting series %s: %s", series_id, e)
        return Result.failure(e)


def remove_project_from_series(client: StoreClient, project_id: str) -> Result:
    """Detach a project from its series and decrement the series' project count.

    The count never drops below zero.
    """
    try:
        require_id(project_id, "project", "projects")
        project = client.table("projects").select("series").eq("id", project_id).single().raise_for_error()
        series_id = project.data.get("series")

        result = client.table("projects").update({"series": None}).eq("id", project_id).select()
        result.raise_for_error()

        if series_id:
            series = client.table("series").select("project_count").eq("id", series_id).single()
            if series.ok:
                current = series.data.get("project_count") or 0
                client.table("series").update({"project_count": max(0, current - 1)}).eq("id", series_id).execute()
            else:
                logger.warning("Project %s referenced missing series %s", project_id, series_id)
        return result
    except StoreError as e:
        logger.error("Error removing project %s from series: %s", project_id, e)
        return Result.failure(e)
