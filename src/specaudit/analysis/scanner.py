"""Ambiguity scanner: turn one specification into clarification questions.

Detection is per line (markers, vague quantifiers, undefined terms,
Given/When without Then) plus two whole-document checks (error
handling, non-functional requirements). Candidates are deduplicated by
(category, excerpt), ranked by taxonomy priority and capped.
"""

from __future__ import annotations

import logging

from specaudit.analysis import patterns
from specaudit.analysis.schemas import AmbiguityCandidate, ScanResult
from specaudit.analysis.vocabulary import (
    DEFAULT_VOCABULARY,
    AnalysisVocabulary,
)
from specaudit.constants import (
    MAX_QUESTIONS,
    WELL_SPECIFIED_MESSAGE,
    AmbiguityCategory,
    ScanStatus,
)

logger = logging.getLogger(__name__)

_NO_ERROR_HANDLING = "No error or failure handling is described"
_NO_NFR = (
    "No non-functional requirements (performance, availability, "
    "latency) are stated"
)


def detect_line_candidates(
    text: str,
    vocabulary: AnalysisVocabulary = DEFAULT_VOCABULARY,
) -> list[AmbiguityCandidate]:
    """Run the per-line detectors in fixed order over every line."""
    candidates: list[AmbiguityCandidate] = []
    for number, line in enumerate(text.splitlines(), 1):
        if not line.strip():
            continue
        snippet = patterns.excerpt(line)

        if patterns.has_unresolved_marker(line):
            candidates.append(
                AmbiguityCandidate(
                    location=number,
                    category=AmbiguityCategory.MISSING_ACCEPTANCE_CRITERIA,
                    excerpt=snippet,
                )
            )

        if patterns.find_vague_quantifiers(line, vocabulary):
            candidates.append(
                AmbiguityCandidate(
                    location=number,
                    category=AmbiguityCategory.VAGUE_QUANTIFIERS,
                    excerpt=snippet,
                )
            )

        for term in patterns.undefined_terms(line, vocabulary):
            candidates.append(
                AmbiguityCandidate(
                    location=number,
                    category=AmbiguityCategory.UNDEFINED_TERMS,
                    excerpt=term,
                )
            )

        if patterns.given_when_without_then(line):
            candidates.append(
                AmbiguityCandidate(
                    location=number,
                    category=AmbiguityCategory.MISSING_ACCEPTANCE_CRITERIA,
                    excerpt=snippet,
                )
            )
    return candidates


def detect_document_candidates(text: str) -> list[AmbiguityCandidate]:
    """Whole-document checks; each fires at most once."""
    candidates: list[AmbiguityCandidate] = []
    if patterns.ERROR_HANDLING_RE.search(text) is None:
        candidates.append(
            AmbiguityCandidate(
                location=0,
                category=AmbiguityCategory.MISSING_ERROR_HANDLING,
                excerpt=_NO_ERROR_HANDLING,
            )
        )
    if patterns.NON_FUNCTIONAL_RE.search(text) is None:
        candidates.append(
            AmbiguityCandidate(
                location=0,
                category=AmbiguityCategory.MISSING_NFR,
                excerpt=_NO_NFR,
            )
        )
    return candidates


def dedupe_candidates(
    candidates: list[AmbiguityCandidate],
) -> list[AmbiguityCandidate]:
    """Drop repeats of (category, excerpt), keeping first-seen order."""
    seen: set[tuple[str, str]] = set()
    unique: list[AmbiguityCandidate] = []
    for candidate in candidates:
        key = (candidate.category, candidate.excerpt)
        if key in seen:
            continue
        seen.add(key)
        unique.append(candidate)
    return unique


def prioritize_candidates(
    candidates: list[AmbiguityCandidate],
    vocabulary: AnalysisVocabulary = DEFAULT_VOCABULARY,
) -> list[AmbiguityCandidate]:
    """Stable sort by taxonomy priority."""
    return sorted(
        candidates, key=lambda c: vocabulary.priority(c.category)
    )


def format_question(number: int, candidate: AmbiguityCandidate) -> str:
    """Render one candidate as a numbered question."""
    where = (
        ""
        if candidate.is_document_level
        else f" (line {candidate.location})"
    )
    return (
        f"Q{number} [{candidate.category}]{where}: "
        f'Regarding "{candidate.excerpt}" — please clarify'
    )


def scan_specification(
    text: str,
    vocabulary: AnalysisVocabulary = DEFAULT_VOCABULARY,
) -> ScanResult:
    """Scan a specification and return at most five questions.

    An empty candidate list yields the WELL_SPECIFIED status rather
    than an empty question list.
    """
    found = detect_line_candidates(text, vocabulary)
    found.extend(detect_document_candidates(text))
    unique = dedupe_candidates(found)
    ranked = prioritize_candidates(unique, vocabulary)
    taxonomy = list(vocabulary.taxonomy)

    logger.debug(
        "Scan: %d raw candidates, %d after dedupe",
        len(found),
        len(unique),
    )

    if not ranked:
        return ScanResult(
            status=ScanStatus.WELL_SPECIFIED,
            candidate_count=0,
            taxonomy=taxonomy,
            questions=[],
            message=WELL_SPECIFIED_MESSAGE,
        )

    questions = [
        format_question(i, candidate)
        for i, candidate in enumerate(ranked[:MAX_QUESTIONS], 1)
    ]
    return ScanResult(
        status=ScanStatus.AMBIGUITIES_FOUND,
        candidate_count=len(unique),
        taxonomy=taxonomy,
        questions=questions,
        message=(
            f"{len(unique)} candidate ambiguities; "
            f"showing top {len(questions)}."
        ),
    )
