"""Domain access functions for projects, editions, series and authors.

Every function takes a StoreClient and returns a Result; failures are
logged and returned in the envelope.
"""

from publishing_store.api.authors import (
    add_author_to_project,
    create_author,
    fetch_authors,
    fetch_project_authors,
    replace_biographies,
)
from publishing_store.api.editions import (
    create_edition,
    delete_edition,
    fetch_editions_by_project_id,
    update_edition,
)
from publishing_store.api.projects import (
    create_project,
    delete_project,
    fetch_project_by_id,
    fetch_project_with_relations,
    fetch_projects,
    update_project,
)
from publishing_store.api.series import (
    create_series,
    delete_series,
    fetch_all_series,
    fetch_projects_by_series,
    fetch_series_by_id,
    remove_project_from_series,
    update_series,
)
from publishing_store.api.test_data import clear_all_data, create_test_data_with_linking

__all__ = [
    "add_author_to_project",
    "create_author",
    "fetch_authors",
    "fetch_project_authors",
    "replace_biographies",
    "create_edition",
    "delete_edition",
    "fetch_editions_by_project_id",
    "update_edition",
    "create_project",
    "delete_project",
    "fetch_project_by_id",
    "fetch_project_with_relations",
    "fetch_projects",
    "update_project",
    "create_series",
    "delete_series",
    "fetch_all_series",
    "fetch_projects_by_series",
    "fetch_series_by_id",
    "remove_project_from_series",
    "update_series",
    "clear_all_data",
    "create_test_data_with_linking",
]
