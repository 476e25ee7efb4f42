"""MCP tool definitions: 4 tools over the analysis services."""

# pyright: reportUnusedFunction=false
# All functions are registered via @mcp.tool decorator

from __future__ import annotations

import logging

from fastmcp import FastMCP

from specaudit.repositories.document_store import FileDocumentStore
from specaudit.resilience.errors import SpecAuditError, describe_error

logger = logging.getLogger(__name__)


def register_tools(mcp: FastMCP) -> None:
    """Register all 4 MCP tools."""

    @mcp.tool()
    async def speckit_clarify_scan(
        feature_name: str,
        project_path: str = "",
    ) -> str:
        """Scan a feature specification for ambiguities.

        Returns up to five prioritized clarification questions, or a
        notice that the specification is well-specified.
        """
        from specaudit.export import render_scan
        from specaudit.services.analysis_service import scan_feature

        try:
            store = _open_store(feature_name, project_path)
            result = scan_feature(store)
        except (SpecAuditError, ValueError) as exc:
            return describe_error(exc)
        return render_scan(result, feature_name)

    @mcp.tool()
    async def speckit_clarify_answer(
        feature_name: str,
        marker_index: int,
        answer: str,
        project_path: str = "",
    ) -> str:
        """Record an answer for one [NEEDS CLARIFICATION] marker.

        marker_index is zero-based in document order. When no marker
        exists at that index the answer is appended to a dated
        Clarifications section instead.
        """
        from specaudit.export import render_answer
        from specaudit.services.analysis_service import answer_feature

        try:
            store = _open_store(feature_name, project_path)
            outcome = answer_feature(store, marker_index, answer)
        except (SpecAuditError, ValueError) as exc:
            return describe_error(exc)
        return render_answer(outcome)

    @mcp.tool()
    async def speckit_analyze(
        feature_name: str,
        project_path: str = "",
        output_format: str = "markdown",
    ) -> str:
        """Analyze cross-artifact consistency for a feature.

        Checks that constitution, spec, plan and tasks agree; reports
        gaps, contradictions and missing items by severity.
        """
        from specaudit.export import export_report
        from specaudit.services.analysis_service import analyze_feature

        try:
            store = _open_store(feature_name, project_path)
            report = analyze_feature(store)
            return export_report(report, feature_name, output_format)
        except (SpecAuditError, ValueError) as exc:
            return describe_error(exc)

    @mcp.tool()
    async def speckit_check() -> str:
        """Check that the spec-kit CLI and its prerequisites are installed."""
        from specaudit.mcp.server import get_settings
        from specaudit.services.prerequisites import check_prerequisites

        report = check_prerequisites(get_settings())
        if not report.installed:
            return report.message
        return "\n".join(
            part
            for part in (
                "=== spec-kit Version ===",
                report.version,
                "=== Prerequisites Check ===",
                report.check_output,
                report.message,
            )
            if part
        )


def _open_store(feature_name: str, project_path: str) -> FileDocumentStore:
    """Resolve the project root and open the feature's document store."""
    from specaudit.config import resolve_project_root
    from specaudit.mcp.server import get_settings

    root = resolve_project_root(project_path or None, get_settings())
    logger.debug("event=open_store root=%s feature=%s", root, feature_name)
    return FileDocumentStore(root, feature_name)
