"""CLI entry point: ``specaudit scan|answer|analyze|check|mcp``."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from specaudit import __version__
from specaudit.config import Settings, resolve_project_root
from specaudit.constants import ExportFormat
from specaudit.logging_config import setup_logging
from specaudit.repositories.document_store import FileDocumentStore
from specaudit.resilience.errors import SpecAuditError, describe_error


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point. Returns the process exit code."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.version:
        print(f"specaudit {__version__}")
        return 0

    settings = Settings()
    verbose = getattr(args, "verbose", False)
    setup_logging("DEBUG" if verbose else settings.log_level)

    handlers = {
        "scan": _run_scan,
        "answer": _run_answer,
        "analyze": _run_analyze,
        "check": _run_check,
        "mcp": _run_mcp,
    }
    handler = handlers.get(args.command)
    if handler is None:
        parser.print_help()
        return 0
    try:
        return handler(args, settings)
    except (SpecAuditError, ValueError) as exc:
        print(describe_error(exc), file=sys.stderr)
        return 1


def _build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog="specaudit",
        description=(
            "Ambiguity scanning and cross-artifact consistency "
            "analysis for spec-kit projects."
        ),
    )
    parser.add_argument(
        "--version",
        action="store_true",
        help="Print version and exit",
    )

    sub = parser.add_subparsers(dest="command")

    def _feature_command(name: str, help_text: str) -> argparse.ArgumentParser:
        cmd = sub.add_parser(name, help=help_text)
        cmd.add_argument(
            "feature_name",
            help="Feature folder name under specs/",
        )
        cmd.add_argument(
            "--project",
            "-p",
            default=None,
            help=(
                "Project root (default: SPECKIT_PROJECT_PATH "
                "or current directory)"
            ),
        )
        cmd.add_argument(
            "--verbose",
            "-v",
            action="store_true",
            help="Enable debug logging",
        )
        return cmd

    scan = _feature_command(
        "scan", "List clarification questions for a specification"
    )
    scan.add_argument(
        "--format",
        "-f",
        choices=[f.value for f in ExportFormat],
        default=ExportFormat.MARKDOWN.value,
        help="Output format (default: markdown)",
    )

    answer = _feature_command(
        "answer", "Resolve one [NEEDS CLARIFICATION] marker"
    )
    answer.add_argument(
        "--index",
        "-i",
        type=int,
        required=True,
        help="Zero-based marker index",
    )
    answer.add_argument(
        "--text",
        "-t",
        required=True,
        help="Answer text",
    )

    analyze = _feature_command(
        "analyze", "Check cross-artifact consistency"
    )
    analyze.add_argument(
        "--format",
        "-f",
        choices=[f.value for f in ExportFormat],
        default=ExportFormat.MARKDOWN.value,
        help="Output format (default: markdown)",
    )
    analyze.add_argument(
        "--output",
        "-o",
        default=None,
        help="Write the report to this file instead of stdout",
    )

    sub.add_parser(
        "check",
        help="Check spec-kit CLI prerequisites",
    )

    mcp_parser = sub.add_parser(
        "mcp",
        help="Start MCP server",
    )
    mcp_parser.add_argument(
        "--transport",
        "-t",
        choices=["stdio", "sse"],
        default="stdio",
        help="Transport protocol (default: stdio)",
    )
    mcp_parser.add_argument(
        "--host",
        default="127.0.0.1",
        help="Bind address for SSE transport (default: 127.0.0.1)",
    )
    mcp_parser.add_argument(
        "--port",
        type=int,
        default=8001,
        help="Port for SSE transport (default: 8001)",
    )

    return parser


def _open_store(
    args: argparse.Namespace, settings: Settings
) -> FileDocumentStore:
    root = resolve_project_root(args.project, settings)
    return FileDocumentStore(root, args.feature_name)


def _run_scan(args: argparse.Namespace, settings: Settings) -> int:
    """Execute the scan command."""
    from specaudit.export import export_scan
    from specaudit.services.analysis_service import scan_feature

    result = scan_feature(_open_store(args, settings))
    print(export_scan(result, args.feature_name, args.format))
    return 0


def _run_answer(args: argparse.Namespace, settings: Settings) -> int:
    """Execute the answer command."""
    from specaudit.export import render_answer
    from specaudit.services.analysis_service import answer_feature

    outcome = answer_feature(
        _open_store(args, settings), args.index, args.text
    )
    print(render_answer(outcome))
    return 0 if outcome.written else 1


def _run_analyze(args: argparse.Namespace, settings: Settings) -> int:
    """Execute the analyze command."""
    from specaudit.export import export_report
    from specaudit.services.analysis_service import analyze_feature

    report = analyze_feature(_open_store(args, settings))
    rendered = export_report(report, args.feature_name, args.format)
    if args.output:
        output = Path(args.output)
        output.parent.mkdir(parents=True, exist_ok=True)
        output.write_text(rendered, encoding="utf-8")
        print(
            f"Report written to {output} "
            f"({report.total_finding_count} finding(s))"
        )
    else:
        print(rendered)
    return 0


def _run_check(args: argparse.Namespace, settings: Settings) -> int:
    """Execute the check command."""
    from specaudit.services.prerequisites import check_prerequisites

    report = check_prerequisites(settings)
    if not report.installed:
        print(report.message, file=sys.stderr)
        return 1
    print(report.version)
    if report.check_output:
        print(report.check_output)
    print(report.message)
    return 0 if report.passed else 1


def _run_mcp(args: argparse.Namespace, settings: Settings) -> int:
    """Start the MCP server."""
    from specaudit.mcp import configure, mcp

    configure(settings)
    if args.transport == "stdio":
        mcp.run(transport="stdio")
    else:
        mcp.run(transport="sse", host=args.host, port=args.port)
    return 0


if __name__ == "__main__":
    sys.exit(main())
