"""Markdown rendering for scan, answer and analysis results."""

from __future__ import annotations

import re

from specaudit.analysis.schemas import AnalysisReport, ScanResult
from specaudit.constants import (
    ARTIFACT_LABELS,
    AnalysisStatus,
    ScanStatus,
)
from specaudit.services.analysis_service import AnswerOutcome

_BACKTICK_RUN_RE = re.compile(r"`+")


def _label(key: str) -> str:
    return ARTIFACT_LABELS.get(key, key)


def _fence(text: str) -> str:
    """Backtick fence longer than any backtick run in *text*."""
    longest = max(
        (len(run) for run in _BACKTICK_RUN_RE.findall(text)), default=0
    )
    return "`" * max(3, longest + 1)


def render_scan(result: ScanResult, feature_name: str = "") -> str:
    """Render clarification questions (or the well-specified notice)."""
    title = f"# Clarification Scan: {feature_name}" if feature_name else (
        "# Clarification Scan"
    )
    parts = [title, ""]
    if result.status == ScanStatus.WELL_SPECIFIED:
        parts.extend([result.message, ""])
        return "\n".join(parts)

    parts.append(
        f"**Candidates**: {result.candidate_count} "
        f"(showing {len(result.questions)})"
    )
    parts.extend(["", "## Questions", ""])
    parts.extend(f"- {q}" for q in result.questions)
    parts.extend(["", "## Taxonomy", ""])
    parts.extend(
        f"{i}. {category}" for i, category in enumerate(result.taxonomy, 1)
    )
    parts.append("")
    return "\n".join(parts)


def render_answer(outcome: AnswerOutcome) -> str:
    """Render the result of recording one answer.

    A recorded answer is followed by the full updated specification.
    """
    if not outcome.written:
        return (
            f"Clarification NOT recorded: {outcome.error}\n\n"
            "The specification was left unchanged."
        )
    if outcome.applied_at == "inline":
        summary = (
            f"Resolved marker {outcome.marker_index} inline "
            f"({outcome.marker_count} marker(s) before this answer)."
        )
    else:
        summary = (
            f"No marker at index {outcome.marker_index} "
            f"({outcome.marker_count} marker(s) present); "
            "answer appended to the Clarifications section."
        )
    fence = _fence(outcome.document)
    document = outcome.document.rstrip("\n")
    return (
        f"{summary}\n\n## Updated Specification\n\n"
        f"{fence}markdown\n{document}\n{fence}\n"
    )


def render_report(report: AnalysisReport, feature_name: str = "") -> str:
    """Render an analysis report grouped by severity."""
    title = (
        f"# Analysis Report: {feature_name}"
        if feature_name
        else "# Analysis Report"
    )
    parts = [title, "", "## Artifact Inventory", ""]
    for key, exists in report.inventory.items():
        parts.append(f"- {_label(key)}: {'EXISTS' if exists else 'MISSING'}")
    parts.append("")

    progress = report.task_progress
    if progress is not None:
        parts.extend([
            "## Task Progress",
            "",
            f"- Total tasks: {progress.total}",
            f"- Completed: {progress.completed}",
            f"- Remaining: {progress.total - progress.completed}",
            f"- Progress: {progress.percent}%",
            "",
        ])

    parts.append("## Findings")
    parts.append("")
    if report.status == AnalysisStatus.NO_ISSUES:
        parts.extend([report.message, ""])
    else:
        shown = len(report.findings)
        total = report.total_finding_count
        summary = f"{total} finding(s)"
        if total > shown:
            summary += f", showing the first {shown}"
        parts.extend([summary, ""])
        for severity, findings in report.findings_by_severity.items():
            if not findings:
                continue
            parts.append(f"### {severity} ({len(findings)})")
            parts.append("")
            parts.extend(
                f"- [{f.pass_name}] {f.message}" for f in findings
            )
            parts.append("")

    if report.pass_errors:
        for name, error in report.pass_errors.items():
            parts.append(f"> Pass '{name}' failed: {error}")
        parts.append("")
    parts.append(
        "Passes run: " + ", ".join(str(p) for p in report.passes_run)
    )
    parts.append("")
    return "\n".join(parts)
