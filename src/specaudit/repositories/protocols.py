"""Protocol-based store interface.

File and in-memory stores satisfy this structurally (no inheritance).
"""

from typing import Protocol

from specaudit.models.document import Document


class DocumentStore(Protocol):
    def read(self, key: str) -> Document | None: ...
    def write(self, document: Document) -> None: ...
    def list_keys(self) -> list[str]: ...
