"""Consistency passes: pure functions from a corpus to findings."""

from collections.abc import Callable

from specaudit.analysis.passes.ambiguity import check_ambiguity
from specaudit.analysis.passes.constitution import (
    check_constitution_alignment,
)
from specaudit.analysis.passes.coverage import check_coverage_gaps
from specaudit.analysis.passes.duplication import check_duplication
from specaudit.analysis.passes.inconsistency import check_inconsistency
from specaudit.analysis.passes.underspecification import (
    check_underspecification,
)
from specaudit.analysis.schemas import Finding
from specaudit.analysis.vocabulary import AnalysisVocabulary
from specaudit.constants import PassName
from specaudit.models.document import Corpus

type ConsistencyPass = Callable[[Corpus, AnalysisVocabulary], list[Finding]]

# Execution order is part of the output contract
PASSES: tuple[tuple[PassName, ConsistencyPass], ...] = (
    (PassName.DUPLICATION, check_duplication),
    (PassName.AMBIGUITY, check_ambiguity),
    (PassName.UNDERSPECIFICATION, check_underspecification),
    (PassName.CONSTITUTION_ALIGNMENT, check_constitution_alignment),
    (PassName.COVERAGE_GAPS, check_coverage_gaps),
    (PassName.INCONSISTENCY, check_inconsistency),
)

__all__ = [
    "PASSES",
    "ConsistencyPass",
    "check_ambiguity",
    "check_constitution_alignment",
    "check_coverage_gaps",
    "check_duplication",
    "check_inconsistency",
    "check_underspecification",
]
