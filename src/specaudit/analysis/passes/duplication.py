"""Duplication pass: requirement-like lines repeated across artifacts."""

from __future__ import annotations

import logging
from itertools import combinations

from specaudit.analysis.patterns import requirement_lines
from specaudit.analysis.schemas import Finding
from specaudit.analysis.vocabulary import (
    DEFAULT_VOCABULARY,
    AnalysisVocabulary,
)
from specaudit.constants import (
    DUPLICATE_MIN_LINE_LENGTH,
    PassName,
    Severity,
)
from specaudit.models.document import Corpus

logger = logging.getLogger(__name__)


def check_duplication(
    corpus: Corpus,
    vocabulary: AnalysisVocabulary = DEFAULT_VOCABULARY,
) -> list[Finding]:
    """One MEDIUM finding per artifact pair sharing list-item lines."""
    lines = {
        doc.key: requirement_lines(doc.text, DUPLICATE_MIN_LINE_LENGTH)
        for doc in corpus
    }
    findings: list[Finding] = []
    for first, second in combinations(corpus.keys, 2):
        shared = lines[first] & lines[second]
        if not shared:
            continue
        findings.append(
            Finding(
                severity=Severity.MEDIUM,
                pass_name=PassName.DUPLICATION,
                message=(
                    f"{len(shared)} duplicate requirement line(s) "
                    f"between '{first}' and '{second}'"
                ),
            )
        )
    logger.debug("Duplication: %d finding(s)", len(findings))
    return findings
