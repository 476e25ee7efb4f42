"""In-memory fake store for testing.

Dict-backed DocumentStore. No I/O.
"""

from __future__ import annotations

from specaudit.models.document import Document
from specaudit.resilience.errors import DocumentWriteError


class InMemoryDocumentStore:
    """Dict-backed DocumentStore for testing."""

    def __init__(
        self,
        texts: dict[str, str] | None = None,
        *,
        fail_writes: bool = False,
    ) -> None:
        self._store: dict[str, str] = dict(texts or {})
        self._fail_writes = fail_writes
        self.write_count = 0

    def read(self, key: str) -> Document | None:
        text = self._store.get(key)
        return Document(key=key, text=text) if text is not None else None

    def write(self, document: Document) -> None:
        if self._fail_writes:
            msg = f"Simulated write failure for '{document.key}'"
            raise DocumentWriteError(msg)
        self._store[document.key] = document.text
        self.write_count += 1

    def list_keys(self) -> list[str]:
        return list(self._store)
