"""Tests for the ambiguity scanner."""

from __future__ import annotations

from specaudit.analysis.scanner import (
    dedupe_candidates,
    detect_document_candidates,
    detect_line_candidates,
    format_question,
    prioritize_candidates,
    scan_specification,
)
from specaudit.analysis.schemas import AmbiguityCandidate
from specaudit.constants import (
    MAX_QUESTIONS,
    WELL_SPECIFIED_MESSAGE,
    AmbiguityCategory,
    ScanStatus,
)


class TestLineDetection:
    def test_detectors_run_in_fixed_order(self) -> None:
        found = detect_line_candidates(
            "Some ACME users [NEEDS CLARIFICATION]"
        )
        assert [c.category for c in found] == [
            AmbiguityCategory.MISSING_ACCEPTANCE_CRITERIA,
            AmbiguityCategory.VAGUE_QUANTIFIERS,
            AmbiguityCategory.UNDEFINED_TERMS,
        ]
        assert all(c.location == 1 for c in found)

    def test_undefined_term_excerpt_is_the_token(self) -> None:
        found = detect_line_candidates("\nRoutes through ACME.")
        assert found == [
            AmbiguityCandidate(
                location=2,
                category=AmbiguityCategory.UNDEFINED_TERMS,
                excerpt="ACME",
            )
        ]

    def test_given_when_without_then(self) -> None:
        found = detect_line_candidates("Given a user, when they log in.")
        assert [c.category for c in found] == [
            AmbiguityCategory.MISSING_ACCEPTANCE_CRITERIA
        ]

    def test_blank_lines_skipped(self) -> None:
        assert detect_line_candidates("\n   \n\t\n") == []


class TestDocumentDetection:
    def test_both_checks_fire_on_bare_text(self) -> None:
        found = detect_document_candidates("Users upload files.")
        assert [c.category for c in found] == [
            AmbiguityCategory.MISSING_ERROR_HANDLING,
            AmbiguityCategory.MISSING_NFR,
        ]
        assert all(c.is_document_level for c in found)

    def test_silent_when_covered(self) -> None:
        text = "On failure, retry. Latency stays low."
        assert detect_document_candidates(text) == []


class TestDedupeAndPriority:
    def test_dedupe_keeps_first(self) -> None:
        a = AmbiguityCandidate(
            location=3,
            category=AmbiguityCategory.VAGUE_QUANTIFIERS,
            excerpt="- It is fast.",
        )
        b = AmbiguityCandidate(
            location=9,
            category=AmbiguityCategory.VAGUE_QUANTIFIERS,
            excerpt="- It is fast.",
        )
        assert dedupe_candidates([a, b]) == [a]

    def test_priority_is_stable(self) -> None:
        vague_1 = AmbiguityCandidate(
            location=1,
            category=AmbiguityCategory.VAGUE_QUANTIFIERS,
            excerpt="one",
        )
        vague_2 = AmbiguityCandidate(
            location=2,
            category=AmbiguityCategory.VAGUE_QUANTIFIERS,
            excerpt="two",
        )
        marker = AmbiguityCandidate(
            location=3,
            category=AmbiguityCategory.MISSING_ACCEPTANCE_CRITERIA,
            excerpt="three",
        )
        ranked = prioritize_candidates([vague_1, vague_2, marker])
        assert ranked == [marker, vague_1, vague_2]


class TestFormatQuestion:
    def test_line_level(self) -> None:
        cand = AmbiguityCandidate(
            location=7,
            category=AmbiguityCategory.UNDEFINED_TERMS,
            excerpt="ACME",
        )
        assert format_question(2, cand) == (
            'Q2 [Undefined terms] (line 7): Regarding "ACME" — please clarify'
        )

    def test_document_level_has_no_line(self) -> None:
        cand = AmbiguityCandidate(
            location=0,
            category=AmbiguityCategory.MISSING_NFR,
            excerpt="x",
        )
        assert "(line" not in format_question(1, cand)


class TestScanSpecification:
    def test_marker_spec_lists_markers_first(self, marker_spec: str) -> None:
        result = scan_specification(marker_spec)
        assert result.status == ScanStatus.AMBIGUITIES_FOUND
        assert result.candidate_count == 4
        assert result.questions[0].startswith(
            "Q1 [Missing acceptance criteria] (line 5): "
            'Regarding "- FR-001: Users authenticate via'
        )
        assert result.questions[1].startswith(
            "Q2 [Missing acceptance criteria] (line 6)"
        )
        assert result.questions[2].startswith("Q3 [Missing error handling]:")
        assert result.questions[3].startswith(
            "Q4 [Missing non-functional requirements]:"
        )

    def test_well_specified(self, well_specified_spec: str) -> None:
        result = scan_specification(well_specified_spec)
        assert result.status == ScanStatus.WELL_SPECIFIED
        assert result.candidate_count == 0
        assert result.questions == []
        assert result.message == WELL_SPECIFIED_MESSAGE

    def test_taxonomy_always_nine_labels(
        self, marker_spec: str, well_specified_spec: str
    ) -> None:
        for text in (marker_spec, well_specified_spec, ""):
            result = scan_specification(text)
            assert result.taxonomy == list(AmbiguityCategory)
            assert len(result.taxonomy) == 9

    def test_questions_capped(self) -> None:
        text = "\n".join(f"- Item {i} is fast." for i in range(8))
        result = scan_specification(text)
        assert result.candidate_count == 10
        assert len(result.questions) == MAX_QUESTIONS
        assert result.questions[0].startswith("Q1 [Missing error handling]")
        assert result.questions[-1].startswith("Q5 [Vague quantifiers]")

    def test_repeated_lines_deduplicated(self) -> None:
        text = "- The cache is fast.\n- The cache is fast.\n"
        result = scan_specification(text)
        # one vague candidate plus the two document-level checks
        assert result.candidate_count == 3

    def test_numbering_is_sequential(self, marker_spec: str) -> None:
        result = scan_specification(marker_spec)
        for i, question in enumerate(result.questions, 1):
            assert question.startswith(f"Q{i} [")

    def test_deterministic(self, marker_spec: str) -> None:
        assert scan_specification(marker_spec) == scan_specification(
            marker_spec
        )

    def test_empty_document(self) -> None:
        result = scan_specification("")
        assert result.status == ScanStatus.AMBIGUITIES_FOUND
        assert result.candidate_count == 2
