"""Filesystem document store over the spec-kit project layout.

    <root>/.specify/memory/constitution.md       -> "constitution"
    <root>/specs/<feature>/<name>.md             -> "<name>"
    <root>/specs/<feature>/contracts/<name>.md   -> "contracts/<name>"
    <root>/specs/<feature>/checklists/<name>.md  -> "checklists/<name>"
"""

from __future__ import annotations

import contextlib
import logging
import os
import re
import tempfile
from pathlib import Path

from specaudit.constants import (
    COLLECTION_PREFIXES,
    MAX_FEATURE_NAME_LENGTH,
    ArtifactKey,
)
from specaudit.models.document import Document
from specaudit.resilience.errors import (
    DocumentWriteError,
    InvalidFeatureNameError,
    PathTraversalError,
)

logger = logging.getLogger(__name__)

_NAME_RE = re.compile(r"^[a-zA-Z0-9][a-zA-Z0-9_-]*$")


def validate_feature_name(name: str, label: str = "Feature name") -> str:
    """Reject names that could escape the specs folder."""
    if not name:
        msg = f"{label} cannot be empty"
        raise InvalidFeatureNameError(msg)
    if len(name) > MAX_FEATURE_NAME_LENGTH:
        msg = f"{label} too long"
        raise InvalidFeatureNameError(msg)
    if _NAME_RE.match(name) is None:
        msg = (
            f"{label} must start with alphanumeric and contain "
            "only alphanumeric, dash, or underscore characters"
        )
        raise InvalidFeatureNameError(msg)
    return name


def assert_within_root(path: Path, root: Path) -> Path:
    """Resolve *path* and make sure it stays under *root*."""
    resolved = path.resolve()
    if not resolved.is_relative_to(root.resolve()):
        msg = f"Path traversal detected: {path} escapes project root {root}"
        raise PathTraversalError(msg)
    return resolved


def atomic_write_text(target: Path, text: str) -> None:
    """Write via a temp file in the same folder, then ``os.replace``."""
    target.parent.mkdir(parents=True, exist_ok=True)
    fd, temp_name = tempfile.mkstemp(
        prefix=f".{target.name}.", suffix=".tmp", dir=str(target.parent)
    )
    temp_path = Path(temp_name)
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as handle:
            handle.write(text)
            handle.flush()
            os.fsync(handle.fileno())
        os.replace(temp_path, target)
    except Exception:
        with contextlib.suppress(OSError):
            temp_path.unlink(missing_ok=True)
        raise


class FileDocumentStore:
    """DocumentStore reading one feature folder plus the constitution."""

    def __init__(self, root: Path, feature_name: str) -> None:
        self._root = root.resolve()
        self._feature = validate_feature_name(feature_name)
        self._feature_dir = assert_within_root(
            self._root / "specs" / self._feature, self._root
        )

    @property
    def root(self) -> Path:
        return self._root

    @property
    def feature_name(self) -> str:
        return self._feature

    @property
    def feature_dir(self) -> Path:
        return self._feature_dir

    def path_for(self, key: str) -> Path:
        """Map a logical key onto its file path."""
        if key == ArtifactKey.CONSTITUTION:
            return self._root / ".specify" / "memory" / "constitution.md"
        for prefix in COLLECTION_PREFIXES:
            if key.startswith(prefix):
                name = validate_feature_name(
                    key[len(prefix):], "Document name"
                )
                folder = prefix.rstrip("/")
                return assert_within_root(
                    self._feature_dir / folder / f"{name}.md", self._root
                )
        name = validate_feature_name(key, "Document key")
        return assert_within_root(
            self._feature_dir / f"{name}.md", self._root
        )

    def read(self, key: str) -> Document | None:
        path = self.path_for(key)
        if not path.is_file():
            return None
        text = path.read_text(encoding="utf-8", errors="replace")
        return Document(key=key, text=text)

    def write(self, document: Document) -> None:
        path = self.path_for(document.key)
        try:
            atomic_write_text(path, document.text)
        except OSError as exc:
            msg = f"Failed to write '{document.key}' to {path}: {exc}"
            raise DocumentWriteError(msg) from exc
        logger.info(
            "event=document_written key=%s bytes=%d",
            document.key,
            len(document.text.encode("utf-8")),
        )

    def list_keys(self) -> list[str]:
        keys: list[str] = []
        if self.path_for(ArtifactKey.CONSTITUTION).is_file():
            keys.append(ArtifactKey.CONSTITUTION)
        if not self._feature_dir.is_dir():
            return keys
        keys.extend(
            p.stem for p in sorted(self._feature_dir.glob("*.md"))
            if _NAME_RE.match(p.stem)
        )
        for prefix in COLLECTION_PREFIXES:
            folder = self._feature_dir / prefix.rstrip("/")
            if folder.is_dir():
                keys.extend(
                    f"{prefix}{p.stem}" for p in sorted(folder.glob("*.md"))
                    if _NAME_RE.match(p.stem)
                )
        return keys
