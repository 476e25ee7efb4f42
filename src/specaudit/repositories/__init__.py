"""Document stores: the boundary that supplies and persists artifacts."""

from specaudit.repositories.document_store import (
    FileDocumentStore,
    validate_feature_name,
)
from specaudit.repositories.fakes import InMemoryDocumentStore
from specaudit.repositories.protocols import DocumentStore

__all__ = [
    "DocumentStore",
    "FileDocumentStore",
    "InMemoryDocumentStore",
    "validate_feature_name",
]
