"""Pydantic models for scan, answer and analysis output."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, computed_field

from specaudit.constants import (
    AmbiguityCategory,
    AnalysisStatus,
    AppliedAt,
    PassName,
    ScanStatus,
    Severity,
)


class AmbiguityCandidate(BaseModel):
    """One candidate ambiguity. Line 0 means document-level."""

    model_config = ConfigDict(frozen=True)

    location: int = Field(ge=0)
    category: AmbiguityCategory
    excerpt: str

    @property
    def is_document_level(self) -> bool:
        return self.location == 0


class ScanResult(BaseModel):
    """Prioritized clarification questions for one specification."""

    status: ScanStatus
    candidate_count: int = 0
    taxonomy: list[AmbiguityCategory] = Field(
        default_factory=lambda: list[AmbiguityCategory]()
    )
    questions: list[str] = Field(default_factory=lambda: list[str]())
    message: str = ""


class AnswerResult(BaseModel):
    """Outcome of resolving one marker."""

    document: str
    applied_at: AppliedAt
    marker_index: int
    marker_count: int


class Finding(BaseModel):
    """One issue reported by a consistency pass."""

    model_config = ConfigDict(frozen=True)

    severity: Severity
    pass_name: PassName
    message: str


class TaskProgress(BaseModel):
    """Checkbox completion counts from the task list."""

    completed: int
    total: int

    @computed_field  # type: ignore[prop-decorator]
    @property
    def percent(self) -> int:
        if self.total == 0:
            return 0
        return round(self.completed / self.total * 100)


class AggregatedFindings(BaseModel):
    """Ranked, capped findings with the true total."""

    findings: list[Finding] = Field(
        default_factory=lambda: list[Finding]()
    )
    total_count: int = 0

    @property
    def truncated(self) -> bool:
        return self.total_count > len(self.findings)

    def by_severity(self) -> dict[Severity, list[Finding]]:
        """Findings grouped CRITICAL → LOW; every level present."""
        groups: dict[Severity, list[Finding]] = {s: [] for s in Severity}
        for finding in self.findings:
            groups[finding.severity].append(finding)
        return groups


class AnalysisReport(BaseModel):
    """Cross-artifact consistency report."""

    status: AnalysisStatus
    inventory: dict[str, bool] = Field(
        default_factory=lambda: dict[str, bool]()
    )
    task_progress: TaskProgress | None = None
    findings: list[Finding] = Field(
        default_factory=lambda: list[Finding]()
    )
    findings_by_severity: dict[Severity, list[Finding]] = Field(
        default_factory=lambda: dict[Severity, list[Finding]]()
    )
    total_finding_count: int = 0
    passes_run: list[PassName] = Field(
        default_factory=lambda: list[PassName]()
    )
    pass_errors: dict[PassName, str] = Field(
        default_factory=lambda: dict[PassName, str]()
    )
    message: str = ""
