"""Publishing Store - an in-memory publishing data store with chainable queries."""

from publishing_store.client import StoreClient, TableHandle, create_client
from publishing_store.collection_store import CollectionStore, IdGenerator, Predicate
from publishing_store.errors import NotFoundError, StoreError, ValidationError
from publishing_store.parsing import SelectSpec, parse_select
from publishing_store.relations import (
    DEFAULT_RELATIONS,
    RelationDescriptor,
    RelationEnricher,
    RelationKind,
    RelationRegistry,
)
from publishing_store.result import Result

__all__ = [
    # Main API
    "StoreClient",
    "TableHandle",
    "create_client",
    "Result",
    # Storage
    "CollectionStore",
    "IdGenerator",
    "Predicate",
    # Relations
    "DEFAULT_RELATIONS",
    "RelationDescriptor",
    "RelationEnricher",
    "RelationKind",
    "RelationRegistry",
    "SelectSpec",
    "parse_select",
    # Errors
    "StoreError",
    "NotFoundError",
    "ValidationError",
]

__version__ = "0.1.0"
