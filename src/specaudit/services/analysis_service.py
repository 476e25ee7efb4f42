"""Feature-level operations over a DocumentStore.

Documents are loaded fresh on every call; nothing is cached between
calls. Answer is the only operation that writes, and it writes the
specification only.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date

from specaudit.analysis.annotator import apply_answer
from specaudit.analysis.pipeline import analyze_corpus
from specaudit.analysis.scanner import scan_specification
from specaudit.analysis.schemas import AnalysisReport, ScanResult
from specaudit.analysis.vocabulary import (
    DEFAULT_VOCABULARY,
    AnalysisVocabulary,
)
from specaudit.constants import AppliedAt, ArtifactKey
from specaudit.models.document import Corpus, Document
from specaudit.repositories.protocols import DocumentStore
from specaudit.resilience.errors import (
    DocumentWriteError,
    InputMissingError,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AnswerOutcome:
    """Result of an Answer call, including whether the write landed.

    On a failed write ``document`` is the original text and ``error``
    explains why.
    """

    document: str
    applied_at: AppliedAt
    marker_index: int
    marker_count: int
    written: bool
    error: str | None = None


def load_corpus(store: DocumentStore) -> Corpus:
    """Read every document the store lists, skipping vanished ones."""
    documents: list[Document] = []
    for key in store.list_keys():
        doc = store.read(key)
        if doc is not None:
            documents.append(doc)
    return Corpus.from_documents(documents)


def _require_spec(store: DocumentStore, operation: str) -> Document:
    spec = store.read(ArtifactKey.SPEC)
    if spec is None:
        raise InputMissingError(ArtifactKey.SPEC, operation)
    return spec


def scan_feature(
    store: DocumentStore,
    vocabulary: AnalysisVocabulary = DEFAULT_VOCABULARY,
) -> ScanResult:
    """Scan the feature specification for ambiguities.

    Raises InputMissingError when there is no specification.
    """
    spec = _require_spec(store, "scan for ambiguities")
    return scan_specification(spec.text, vocabulary)


def answer_feature(
    store: DocumentStore,
    marker_index: int,
    answer: str,
    *,
    session_date: date | None = None,
) -> AnswerOutcome:
    """Resolve one marker in the specification and persist it.

    Raises InputMissingError without a specification and ValueError for
    an empty answer. A failed write is reported, not raised.
    """
    spec = _require_spec(store, "record a clarification")
    result = apply_answer(
        spec.text, marker_index, answer, session_date=session_date
    )
    try:
        store.write(Document(key=spec.key, text=result.document))
    except (DocumentWriteError, OSError) as exc:
        logger.warning(
            "event=answer_write_failed marker=%d error=%s",
            marker_index,
            exc,
        )
        return AnswerOutcome(
            document=spec.text,
            applied_at=result.applied_at,
            marker_index=marker_index,
            marker_count=result.marker_count,
            written=False,
            error=str(exc),
        )

    logger.info(
        "event=answer_applied marker=%d applied_at=%s",
        marker_index,
        result.applied_at,
    )
    return AnswerOutcome(
        document=result.document,
        applied_at=result.applied_at,
        marker_index=marker_index,
        marker_count=result.marker_count,
        written=True,
    )


def analyze_feature(
    store: DocumentStore,
    vocabulary: AnalysisVocabulary = DEFAULT_VOCABULARY,
) -> AnalysisReport:
    """Cross-artifact consistency analysis; absent documents degrade
    the findings instead of failing."""
    return analyze_corpus(load_corpus(store), vocabulary)
