"""Constitution alignment pass: declared technology vs. the specification."""

from __future__ import annotations

from specaudit.analysis.patterns import (
    count_markers,
    technology_declarations,
)
from specaudit.analysis.schemas import Finding
from specaudit.analysis.vocabulary import (
    DEFAULT_VOCABULARY,
    AnalysisVocabulary,
)
from specaudit.constants import (
    MARKER_TAG,
    ArtifactKey,
    PassName,
    Severity,
)
from specaudit.models.document import Corpus


def is_placeholder_value(
    value: str,
    vocabulary: AnalysisVocabulary = DEFAULT_VOCABULARY,
) -> bool:
    """True for template slots and "not decided" values."""
    return (
        value.startswith("[")
        or MARKER_TAG.lower() in value.lower()
        or value.strip().lower() in vocabulary.undecided_values
    )


def check_constitution_alignment(
    corpus: Corpus,
    vocabulary: AnalysisVocabulary = DEFAULT_VOCABULARY,
) -> list[Finding]:
    """CRITICAL per declared choice the specification never names verbatim;
    HIGH when the constitution itself still has markers.
    """
    constitution = corpus.get(ArtifactKey.CONSTITUTION)
    if constitution is None:
        return []

    findings: list[Finding] = []
    spec = corpus.get(ArtifactKey.SPEC)
    if spec is not None:
        for key, value in technology_declarations(constitution, vocabulary):
            if is_placeholder_value(value, vocabulary) or value in spec:
                continue
            findings.append(
                Finding(
                    severity=Severity.CRITICAL,
                    pass_name=PassName.CONSTITUTION_ALIGNMENT,
                    message=(
                        f"Constitution declares {key}: {value}, "
                        "but the specification never mentions "
                        f"'{value}'"
                    ),
                )
            )

    markers = count_markers(constitution)
    if markers > 0:
        findings.append(
            Finding(
                severity=Severity.HIGH,
                pass_name=PassName.CONSTITUTION_ALIGNMENT,
                message=(
                    f"Constitution has {markers} unresolved "
                    "[NEEDS CLARIFICATION] marker(s)"
                ),
            )
        )
    return findings
