"""Analysis orchestrator: inventory, task progress, passes, aggregation."""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass

from specaudit.analysis.aggregator import aggregate_findings
from specaudit.analysis.passes import PASSES, ConsistencyPass
from specaudit.analysis.patterns import CHECKBOX_RE
from specaudit.analysis.schemas import (
    AnalysisReport,
    Finding,
    TaskProgress,
)
from specaudit.analysis.vocabulary import (
    DEFAULT_VOCABULARY,
    AnalysisVocabulary,
)
from specaudit.constants import (
    CORE_ARTIFACTS,
    NO_ISSUES_MESSAGE,
    AnalysisStatus,
    ArtifactKey,
    PassName,
)
from specaudit.models.document import Corpus

logger = logging.getLogger(__name__)


@dataclass
class PassResult:
    """Outcome of a single consistency pass."""

    pass_name: PassName
    findings: list[Finding]
    duration_ms: float
    error: str | None = None


def run_pass(
    name: PassName,
    check: ConsistencyPass,
    corpus: Corpus,
    vocabulary: AnalysisVocabulary,
) -> PassResult:
    """Execute one pass, capturing timing and errors.

    A failing pass contributes no findings; the others still run.
    """
    start = time.monotonic()
    try:
        findings = check(corpus, vocabulary)
    except Exception as exc:
        elapsed = (time.monotonic() - start) * 1000
        logger.warning("event=pass_failed pass=%s error=%s", name, exc)
        return PassResult(
            pass_name=name,
            findings=[],
            duration_ms=elapsed,
            error=str(exc),
        )
    elapsed = (time.monotonic() - start) * 1000
    logger.debug(
        "event=pass_done pass=%s findings=%d duration_ms=%.2f",
        name,
        len(findings),
        elapsed,
    )
    return PassResult(
        pass_name=name, findings=findings, duration_ms=elapsed
    )


def build_inventory(corpus: Corpus) -> dict[str, bool]:
    """Core artifacts always appear; supporting ones only when present."""
    inventory = {key: corpus.has(key) for key in CORE_ARTIFACTS}
    for key in corpus.keys:
        inventory.setdefault(key, True)
    return inventory


def compute_task_progress(tasks: str | None) -> TaskProgress | None:
    """Checkbox counts, or None when there is no usable task list."""
    if tasks is None:
        return None
    states = CHECKBOX_RE.findall(tasks)
    if not states:
        return None
    completed = sum(1 for s in states if s in ("x", "X"))
    return TaskProgress(completed=completed, total=len(states))


def analyze_corpus(
    corpus: Corpus,
    vocabulary: AnalysisVocabulary = DEFAULT_VOCABULARY,
) -> AnalysisReport:
    """Run all six passes over *corpus* and assemble the report."""
    results = [
        run_pass(name, check, corpus, vocabulary)
        for name, check in PASSES
    ]
    aggregated = aggregate_findings(r.findings for r in results)
    errors = {r.pass_name: r.error for r in results if r.error}

    logger.info(
        "event=analysis_done artifacts=%d findings=%d returned=%d",
        len(corpus),
        aggregated.total_count,
        len(aggregated.findings),
    )

    status = (
        AnalysisStatus.ISSUES_FOUND
        if aggregated.total_count
        else AnalysisStatus.NO_ISSUES
    )
    return AnalysisReport(
        status=status,
        inventory=build_inventory(corpus),
        task_progress=compute_task_progress(
            corpus.get(ArtifactKey.TASKS)
        ),
        findings=aggregated.findings,
        findings_by_severity=aggregated.by_severity(),
        total_finding_count=aggregated.total_count,
        passes_run=[r.pass_name for r in results],
        pass_errors=errors,
        message=NO_ISSUES_MESSAGE if not aggregated.total_count else "",
    )


def analyze_artifacts(
    artifacts: dict[str, str | None],
    vocabulary: AnalysisVocabulary = DEFAULT_VOCABULARY,
) -> AnalysisReport:
    """Analyze a plain key → text map (``None`` marks absence)."""
    return analyze_corpus(Corpus.from_texts(artifacts), vocabulary)
