"""Shared constants: single source of truth for cross-module values.

All magic strings and numbers that appear in 2+ files belong here.
StrEnum members are str-compatible, so downstream code (JSON, MCP
payloads, Markdown reports) works unchanged.
"""

from __future__ import annotations

from enum import StrEnum
from typing import Literal

# ── String Enums ─────────────────────────────────────────


class Severity(StrEnum):
    """Finding severity. Declaration order is the sort order."""

    CRITICAL = "CRITICAL"
    HIGH = "HIGH"
    MEDIUM = "MEDIUM"
    LOW = "LOW"

    @property
    def rank(self) -> int:
        """0 for CRITICAL up to 3 for LOW."""
        return _SEVERITY_RANK[self]


_SEVERITY_RANK: dict[Severity, int] = {
    s: i for i, s in enumerate(Severity)
}


class PassName(StrEnum):
    """Consistency pass identifiers, in execution order."""

    DUPLICATION = "duplication"
    AMBIGUITY = "ambiguity"
    UNDERSPECIFICATION = "underspecification"
    CONSTITUTION_ALIGNMENT = "constitution_alignment"
    COVERAGE_GAPS = "coverage_gaps"
    INCONSISTENCY = "inconsistency"


class AmbiguityCategory(StrEnum):
    """The nine clarification taxonomy labels."""

    MISSING_ACCEPTANCE_CRITERIA = "Missing acceptance criteria"
    MISSING_ERROR_HANDLING = "Missing error handling"
    MISSING_NFR = "Missing non-functional requirements"
    UNDEFINED_TERMS = "Undefined terms"
    VAGUE_QUANTIFIERS = "Vague quantifiers"
    SCOPE_BOUNDARIES = "Scope boundaries"
    DATA_MODEL_GAPS = "Data model gaps"
    INTEGRATION_DEPENDENCIES = "Integration dependencies"
    TERMINOLOGY_DRIFT = "Terminology drift"


class ScanStatus(StrEnum):
    """Outcome of an ambiguity scan."""

    AMBIGUITIES_FOUND = "ambiguities_found"
    WELL_SPECIFIED = "well_specified"


class AnalysisStatus(StrEnum):
    """Outcome of a consistency analysis."""

    ISSUES_FOUND = "issues_found"
    NO_ISSUES = "no_issues"


class ExportFormat(StrEnum):
    """Supported report formats."""

    MARKDOWN = "markdown"
    JSON = "json"


class ArtifactKey(StrEnum):
    """Well-known artifact keys."""

    CONSTITUTION = "constitution"
    SPEC = "spec"
    PLAN = "plan"
    TASKS = "tasks"
    RESEARCH = "research"
    DATA_MODEL = "data-model"
    QUICKSTART = "quickstart"
    CHECKLIST = "checklist"


type AppliedAt = Literal["inline", "appended"]

# Keys listed in every inventory, present or not
CORE_ARTIFACTS: tuple[str, ...] = (
    ArtifactKey.CONSTITUTION,
    ArtifactKey.SPEC,
    ArtifactKey.PLAN,
    ArtifactKey.TASKS,
)

# Human labels for report headings
ARTIFACT_LABELS: dict[str, str] = {
    ArtifactKey.CONSTITUTION: "Constitution",
    ArtifactKey.SPEC: "Specification",
    ArtifactKey.PLAN: "Plan",
    ArtifactKey.TASKS: "Tasks",
    ArtifactKey.RESEARCH: "Research",
    ArtifactKey.DATA_MODEL: "Data Model",
    ArtifactKey.QUICKSTART: "Quickstart",
    ArtifactKey.CHECKLIST: "Checklist",
}

# Prefixes for keys that name a folder of documents
COLLECTION_PREFIXES: tuple[str, ...] = ("contracts/", "checklists/")

# ── Limits ───────────────────────────────────────────────

MAX_QUESTIONS = 5
MAX_FINDINGS = 50
EXCERPT_MAX_CHARS = 80
DUPLICATE_MIN_LINE_LENGTH = 20
VAGUE_QUANTIFIER_THRESHOLD = 3
COVERAGE_ID_DISPLAY = 5
COVERAGE_HEADING_DISPLAY = 3
MAX_FEATURE_NAME_LENGTH = 255

# ── Marker Text ──────────────────────────────────────────

MARKER_TAG = "NEEDS CLARIFICATION"
RESOLVED_TAG = "RESOLVED"
CLARIFICATIONS_HEADING = "## Clarifications"

WELL_SPECIFIED_MESSAGE = (
    "Specification is well-specified: no ambiguities detected."
)
NO_ISSUES_MESSAGE = "No issues found across the analyzed artifacts."

# ── External CLI ─────────────────────────────────────────

CLI_EXIT_TIMEOUT = 124
CLI_EXIT_NOT_FOUND = 127
CLI_MAX_OUTPUT_CHARS = 10_000

INSTALL_INSTRUCTIONS = """spec-kit (specify CLI) is not installed.

Install with one of:
  uv tool install --from git+https://github.com/github/spec-kit.git specify-cli
  pip install git+https://github.com/github/spec-kit.git

Then verify: specify version"""
