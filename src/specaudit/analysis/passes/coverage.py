"""Coverage gaps pass: spec IDs missing from the plan, plan sections
missing from the tasks."""

from __future__ import annotations

from specaudit.analysis.patterns import requirement_ids, section_headings
from specaudit.analysis.schemas import Finding
from specaudit.analysis.vocabulary import (
    DEFAULT_VOCABULARY,
    AnalysisVocabulary,
)
from specaudit.constants import (
    COVERAGE_HEADING_DISPLAY,
    COVERAGE_ID_DISPLAY,
    ArtifactKey,
    PassName,
    Severity,
)
from specaudit.models.document import Corpus


def truncated_list(items: list[str], limit: int) -> str:
    """Comma-join the first *limit* items, noting how many were cut."""
    shown = ", ".join(items[:limit])
    hidden = len(items) - limit
    if hidden > 0:
        return f"{shown} (+{hidden} more)"
    return shown


def check_coverage_gaps(
    corpus: Corpus,
    vocabulary: AnalysisVocabulary = DEFAULT_VOCABULARY,
) -> list[Finding]:
    spec = corpus.get(ArtifactKey.SPEC)
    plan = corpus.get(ArtifactKey.PLAN)
    tasks = corpus.get(ArtifactKey.TASKS)
    findings: list[Finding] = []

    if spec is not None and plan is not None:
        uncovered = [rid for rid in requirement_ids(spec) if rid not in plan]
        if uncovered:
            findings.append(
                Finding(
                    severity=Severity.HIGH,
                    pass_name=PassName.COVERAGE_GAPS,
                    message=(
                        f"{len(uncovered)} requirement(s) not referenced "
                        "in the plan: "
                        + truncated_list(uncovered, COVERAGE_ID_DISPLAY)
                    ),
                )
            )

    if plan is not None and tasks is not None:
        tasks_lower = tasks.lower()
        untasked = [
            h for h in section_headings(plan) if h.lower() not in tasks_lower
        ]
        if untasked:
            findings.append(
                Finding(
                    severity=Severity.MEDIUM,
                    pass_name=PassName.COVERAGE_GAPS,
                    message=(
                        f"{len(untasked)} plan section(s) with no "
                        "matching tasks: "
                        + truncated_list(untasked, COVERAGE_HEADING_DISPLAY)
                    ),
                )
            )
    return findings
