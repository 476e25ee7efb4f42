"""Document snapshots and the per-call corpus they form."""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

from specaudit.constants import CORE_ARTIFACTS


@dataclass(frozen=True)
class Document:
    """Immutable snapshot of one artifact for a single operation."""

    key: str
    text: str


def _order_key(key: str) -> tuple[int, str]:
    if key in CORE_ARTIFACTS:
        return (CORE_ARTIFACTS.index(key), "")
    return (len(CORE_ARTIFACTS), key)


@dataclass(frozen=True)
class Corpus:
    """Read-only document map for one analysis call.

    Only present documents are stored. Iteration follows the canonical
    order: constitution, spec, plan, tasks, then supporting documents
    sorted by key.
    """

    _documents: Mapping[str, Document] = field(
        default_factory=lambda: MappingProxyType({})
    )

    @classmethod
    def from_texts(cls, texts: Mapping[str, str | None]) -> Corpus:
        """Build a corpus from key → text; ``None`` marks absence."""
        docs = {
            key: Document(key=key, text=text)
            for key, text in sorted(
                texts.items(), key=lambda kv: _order_key(kv[0])
            )
            if text is not None
        }
        return cls(MappingProxyType(docs))

    @classmethod
    def from_documents(cls, documents: list[Document]) -> Corpus:
        return cls.from_texts({d.key: d.text for d in documents})

    def get(self, key: str) -> str | None:
        """Return the text for *key*, or None when absent."""
        doc = self._documents.get(key)
        return doc.text if doc is not None else None

    def has(self, key: str) -> bool:
        return key in self._documents

    @property
    def keys(self) -> list[str]:
        return list(self._documents)

    def __iter__(self) -> Iterator[Document]:
        return iter(self._documents.values())

    def __len__(self) -> int:
        return len(self._documents)
