"""Finding aggregation: rank by severity, cap, keep the true total."""

from __future__ import annotations

from collections.abc import Iterable

from specaudit.analysis.schemas import AggregatedFindings, Finding
from specaudit.constants import MAX_FINDINGS


def aggregate_findings(
    pass_outputs: Iterable[list[Finding]],
    limit: int = MAX_FINDINGS,
) -> AggregatedFindings:
    """Concatenate in pass order, stable-sort by severity, truncate.

    Ties keep their pass order; ``total_count`` is measured before
    truncation.
    """
    merged = [f for output in pass_outputs for f in output]
    ranked = sorted(merged, key=lambda f: f.severity.rank)
    return AggregatedFindings(
        findings=ranked[:limit],
        total_count=len(merged),
    )
