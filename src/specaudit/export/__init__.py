"""Export module: report rendering in Markdown or JSON."""

from collections.abc import Callable

from specaudit.analysis.schemas import AnalysisReport, ScanResult
from specaudit.constants import ExportFormat
from specaudit.export.json_export import export_json
from specaudit.export.markdown import (
    render_answer,
    render_report,
    render_scan,
)

__all__ = [
    "export_json",
    "export_report",
    "export_scan",
    "render_answer",
    "render_report",
    "render_scan",
]

_REPORT_EXPORTERS: dict[str, Callable[[AnalysisReport, str], str]] = {
    ExportFormat.MARKDOWN: render_report,
    ExportFormat.JSON: export_json,
}

_SCAN_EXPORTERS: dict[str, Callable[[ScanResult, str], str]] = {
    ExportFormat.MARKDOWN: render_scan,
    ExportFormat.JSON: export_json,
}


def _dispatch[T](
    exporters: dict[str, Callable[[T, str], str]],
    result: T,
    feature_name: str,
    fmt: str,
) -> str:
    exporter = exporters.get(fmt)
    if exporter is None:
        valid = ", ".join(exporters)
        msg = f"Unsupported format: {fmt}. Use: {valid}"
        raise ValueError(msg)
    return exporter(result, feature_name)


def export_report(
    report: AnalysisReport, feature_name: str = "", fmt: str = "markdown"
) -> str:
    """Dispatch analysis report export by format string."""
    return _dispatch(_REPORT_EXPORTERS, report, feature_name, fmt)


def export_scan(
    result: ScanResult, feature_name: str = "", fmt: str = "markdown"
) -> str:
    """Dispatch scan result export by format string."""
    return _dispatch(_SCAN_EXPORTERS, result, feature_name, fmt)
