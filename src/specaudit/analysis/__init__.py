"""Analysis engine: ambiguity scanning, annotation and consistency passes.

Everything here is a pure function of document text; no I/O.
"""

from specaudit.analysis.annotator import apply_answer
from specaudit.analysis.pipeline import analyze_artifacts, analyze_corpus
from specaudit.analysis.scanner import scan_specification
from specaudit.analysis.schemas import (
    AmbiguityCandidate,
    AnalysisReport,
    AnswerResult,
    Finding,
    ScanResult,
    TaskProgress,
)
from specaudit.analysis.vocabulary import (
    DEFAULT_VOCABULARY,
    AnalysisVocabulary,
)

__all__ = [
    "DEFAULT_VOCABULARY",
    "AmbiguityCandidate",
    "AnalysisReport",
    "AnalysisVocabulary",
    "AnswerResult",
    "Finding",
    "ScanResult",
    "TaskProgress",
    "analyze_artifacts",
    "analyze_corpus",
    "apply_answer",
    "scan_specification",
]
