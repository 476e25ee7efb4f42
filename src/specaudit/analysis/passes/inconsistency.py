"""Inconsistency pass: one unit, different numbers, different artifacts.

Units are compared by their raw lowercased spelling only; "s" and "ms"
are separate buckets.
"""

from __future__ import annotations

from specaudit.analysis.patterns import measurements
from specaudit.analysis.schemas import Finding
from specaudit.analysis.vocabulary import (
    DEFAULT_VOCABULARY,
    AnalysisVocabulary,
)
from specaudit.constants import PassName, Severity
from specaudit.models.document import Corpus


def check_inconsistency(
    corpus: Corpus,
    vocabulary: AnalysisVocabulary = DEFAULT_VOCABULARY,
) -> list[Finding]:
    # unit -> value -> artifact keys (all in first-seen order)
    by_unit: dict[str, dict[str, list[str]]] = {}
    for doc in corpus:
        for value, unit in measurements(doc.text):
            owners = by_unit.setdefault(unit, {}).setdefault(value, [])
            if doc.key not in owners:
                owners.append(doc.key)

    findings: list[Finding] = []
    for unit, values in by_unit.items():
        artifacts = {key for owners in values.values() for key in owners}
        if len(values) < 2 or len(artifacts) < 2:
            continue
        listed = ", ".join(f"{v}{unit}" for v in values)
        sources = ", ".join(
            dict.fromkeys(k for owners in values.values() for k in owners)
        )
        findings.append(
            Finding(
                severity=Severity.MEDIUM,
                pass_name=PassName.INCONSISTENCY,
                message=(
                    f"Conflicting values for unit '{unit}': {listed} "
                    f"(across {sources})"
                ),
            )
        )
    return findings
