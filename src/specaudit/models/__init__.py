"""Value objects shared across the engine and its boundary layers."""

from specaudit.models.document import Corpus, Document

__all__ = ["Corpus", "Document"]
