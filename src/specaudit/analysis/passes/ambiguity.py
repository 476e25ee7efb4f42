"""Ambiguity pass: markers, placeholders and vague wording per artifact."""

from __future__ import annotations

from specaudit.analysis.patterns import (
    count_markers,
    count_placeholders,
    find_vague_quantifiers,
)
from specaudit.analysis.schemas import Finding
from specaudit.analysis.vocabulary import (
    DEFAULT_VOCABULARY,
    AnalysisVocabulary,
)
from specaudit.constants import (
    VAGUE_QUANTIFIER_THRESHOLD,
    ArtifactKey,
    PassName,
    Severity,
)
from specaudit.models.document import Corpus


def check_ambiguity(
    corpus: Corpus,
    vocabulary: AnalysisVocabulary = DEFAULT_VOCABULARY,
) -> list[Finding]:
    """Flag unresolved markers (HIGH), placeholders (MEDIUM) and heavy
    vague wording (LOW, only above the threshold).

    The constitution is left to the alignment pass.
    """
    findings: list[Finding] = []
    for doc in corpus:
        if doc.key == ArtifactKey.CONSTITUTION:
            continue

        markers = count_markers(doc.text)
        if markers > 0:
            findings.append(
                Finding(
                    severity=Severity.HIGH,
                    pass_name=PassName.AMBIGUITY,
                    message=(
                        f"'{doc.key}' has {markers} unresolved "
                        "[NEEDS CLARIFICATION] marker(s)"
                    ),
                )
            )

        placeholders = count_placeholders(doc.text, vocabulary)
        if placeholders > 0:
            findings.append(
                Finding(
                    severity=Severity.MEDIUM,
                    pass_name=PassName.AMBIGUITY,
                    message=(
                        f"'{doc.key}' has {placeholders} placeholder(s) "
                        "(TODO/TBD/FIXME or unfilled template slots)"
                    ),
                )
            )

        vague = find_vague_quantifiers(doc.text, vocabulary)
        if len(vague) > VAGUE_QUANTIFIER_THRESHOLD:
            sample = ", ".join(dict.fromkeys(vague))
            findings.append(
                Finding(
                    severity=Severity.LOW,
                    pass_name=PassName.AMBIGUITY,
                    message=(
                        f"'{doc.key}' uses {len(vague)} vague "
                        f"quantifiers ({sample})"
                    ),
                )
            )
    return findings
