"""Inline annotator: resolve one clarification marker per call."""

from __future__ import annotations

from datetime import UTC, date, datetime

from specaudit.analysis.patterns import MARKER_RE, find_markers
from specaudit.analysis.schemas import AnswerResult
from specaudit.constants import CLARIFICATIONS_HEADING, RESOLVED_TAG


def resolved_annotation(answer: str) -> str:
    """Inline replacement text for a resolved marker."""
    return f"[{RESOLVED_TAG}: {answer}]"


def _clean_answer(answer: str) -> str:
    cleaned = " ".join(answer.split())
    if not cleaned:
        msg = "Answer text is empty"
        raise ValueError(msg)
    # Checked in annotated form so an unclosed tag counts too
    if MARKER_RE.search(resolved_annotation(cleaned)) is not None:
        msg = "Answer text must not contain a [NEEDS CLARIFICATION] marker"
        raise ValueError(msg)
    return cleaned


def append_clarification(
    text: str,
    marker_index: int,
    answer: str,
    session_date: date,
) -> str:
    """Append a dated clarification session; *text* is kept verbatim."""
    separator = "" if text.endswith("\n") or not text else "\n"
    block = (
        f"\n{CLARIFICATIONS_HEADING}\n\n"
        f"### Session {session_date.isoformat()}\n\n"
        f"- Answer (marker {marker_index}): {answer}\n"
    )
    return text + separator + block


def apply_answer(
    text: str,
    marker_index: int,
    answer: str,
    *,
    session_date: date | None = None,
) -> AnswerResult:
    """Resolve marker *marker_index* in *text* with *answer*.

    Only the addressed occurrence changes. An index with no marker
    (negative or past the end) appends a dated section instead of
    failing. Raises ValueError for an empty answer or one that would
    itself read as a new marker.
    """
    cleaned = _clean_answer(answer)
    markers = find_markers(text)

    if 0 <= marker_index < len(markers):
        match = markers[marker_index]
        updated = (
            text[: match.start()]
            + resolved_annotation(cleaned)
            + text[match.end():]
        )
        return AnswerResult(
            document=updated,
            applied_at="inline",
            marker_index=marker_index,
            marker_count=len(markers),
        )

    when = session_date or datetime.now(UTC).date()
    return AnswerResult(
        document=append_clarification(text, marker_index, cleaned, when),
        applied_at="appended",
        marker_index=marker_index,
        marker_count=len(markers),
    )
