"""Underspecification pass: missing artifacts and missing spec sections."""

from __future__ import annotations

from specaudit.analysis.patterns import (
    REQUIREMENTS_HEADING_RE,
    has_acceptance_criteria,
)
from specaudit.analysis.schemas import Finding
from specaudit.analysis.vocabulary import (
    DEFAULT_VOCABULARY,
    AnalysisVocabulary,
)
from specaudit.constants import ArtifactKey, PassName, Severity
from specaudit.models.document import Corpus

_MISSING_SEVERITY: tuple[tuple[str, Severity], ...] = (
    (ArtifactKey.SPEC, Severity.CRITICAL),
    (ArtifactKey.PLAN, Severity.MEDIUM),
    (ArtifactKey.TASKS, Severity.MEDIUM),
)


def check_underspecification(
    corpus: Corpus,
    vocabulary: AnalysisVocabulary = DEFAULT_VOCABULARY,
) -> list[Finding]:
    findings: list[Finding] = []
    for key, severity in _MISSING_SEVERITY:
        if not corpus.has(key):
            findings.append(
                Finding(
                    severity=severity,
                    pass_name=PassName.UNDERSPECIFICATION,
                    message=f"Missing artifact: '{key}' does not exist",
                )
            )

    spec = corpus.get(ArtifactKey.SPEC)
    if spec is None:
        return findings

    if not has_acceptance_criteria(spec):
        findings.append(
            Finding(
                severity=Severity.HIGH,
                pass_name=PassName.UNDERSPECIFICATION,
                message=(
                    "Specification has no acceptance criteria "
                    "(no acceptance section or Given/When/Then scenario)"
                ),
            )
        )
    if REQUIREMENTS_HEADING_RE.search(spec) is None:
        findings.append(
            Finding(
                severity=Severity.HIGH,
                pass_name=PassName.UNDERSPECIFICATION,
                message="Specification has no requirements section heading",
            )
        )
    return findings
