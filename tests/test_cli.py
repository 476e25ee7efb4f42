"""Tests for CLI argument parsing and command handlers."""

from __future__ import annotations

import json
from pathlib import Path
from unittest.mock import patch

import pytest

from specaudit import __version__
from specaudit.cli import _build_parser, main
from specaudit.services.prerequisites import PrerequisiteReport

FEATURE_NAME = "001-login"


class TestArgParser:
    def test_version_flag(self) -> None:
        args = _build_parser().parse_args(["--version"])
        assert args.version is True

    def test_scan_defaults(self) -> None:
        args = _build_parser().parse_args(["scan", FEATURE_NAME])
        assert args.command == "scan"
        assert args.feature_name == FEATURE_NAME
        assert args.project is None
        assert args.format == "markdown"
        assert args.verbose is False

    def test_answer_options(self) -> None:
        args = _build_parser().parse_args(
            ["answer", FEATURE_NAME, "-i", "2", "-t", "OAuth2", "-p", "/tmp/x"]
        )
        assert args.index == 2
        assert args.text == "OAuth2"
        assert args.project == "/tmp/x"

    def test_answer_requires_index(self) -> None:
        with pytest.raises(SystemExit):
            _build_parser().parse_args(["answer", FEATURE_NAME, "-t", "x"])

    def test_analyze_options(self) -> None:
        args = _build_parser().parse_args(
            ["analyze", FEATURE_NAME, "--format", "json", "-o", "r.json", "-v"]
        )
        assert args.format == "json"
        assert args.output == "r.json"
        assert args.verbose is True

    def test_rejects_unknown_format(self) -> None:
        with pytest.raises(SystemExit):
            _build_parser().parse_args(["analyze", FEATURE_NAME, "-f", "pdf"])

    def test_mcp_defaults(self) -> None:
        args = _build_parser().parse_args(["mcp"])
        assert args.transport == "stdio"
        assert args.host == "127.0.0.1"
        assert args.port == 8001

    def test_no_command(self) -> None:
        assert _build_parser().parse_args([]).command is None


class TestMain:
    def test_version(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["--version"]) == 0
        assert capsys.readouterr().out.strip() == f"specaudit {__version__}"

    def test_no_command_prints_help(
        self, capsys: pytest.CaptureFixture[str]
    ) -> None:
        assert main([]) == 0
        assert "usage: specaudit" in capsys.readouterr().out

    def test_scan(
        self,
        project: Path,
        feature: str,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        code = main(["scan", feature, "--project", str(project)])
        assert code == 0
        out = capsys.readouterr().out
        assert "Q1 [Missing acceptance criteria] (line 5)" in out

    def test_scan_json(
        self,
        project: Path,
        feature: str,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        code = main(["scan", feature, "-p", str(project), "-f", "json"])
        assert code == 0
        payload = json.loads(capsys.readouterr().out)
        assert payload["result"]["status"] == "ambiguities_found"

    def test_scan_missing_spec(
        self, tmp_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        code = main(["scan", "nothing-here", "-p", str(tmp_path)])
        assert code == 1
        assert capsys.readouterr().err.startswith("Missing input:")

    def test_invalid_feature_name(
        self, tmp_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        code = main(["analyze", "../escape", "-p", str(tmp_path)])
        assert code == 1
        assert capsys.readouterr().err.startswith("Invalid input:")

    def test_answer(
        self,
        project: Path,
        feature: str,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        code = main(
            ["answer", feature, "-p", str(project), "-i", "1", "-t", "1 day"]
        )
        assert code == 0
        assert "Resolved marker 1 inline" in capsys.readouterr().out
        spec = project / "specs" / feature / "spec.md"
        assert "[RESOLVED: 1 day]" in spec.read_text(encoding="utf-8")

    def test_analyze_to_file(
        self,
        project: Path,
        feature: str,
        tmp_path: Path,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        output = tmp_path / "reports" / "analysis.md"
        code = main(
            ["analyze", feature, "-p", str(project), "-o", str(output)]
        )
        assert code == 0
        assert "Report written to" in capsys.readouterr().out
        assert output.read_text(encoding="utf-8").startswith(
            f"# Analysis Report: {feature}"
        )

    def test_check_not_installed(
        self, capsys: pytest.CaptureFixture[str]
    ) -> None:
        report = PrerequisiteReport(installed=False, message="install me")
        with patch(
            "specaudit.services.prerequisites.check_prerequisites",
            return_value=report,
        ):
            assert main(["check"]) == 1
        assert "install me" in capsys.readouterr().err

    def test_check_passed(self, capsys: pytest.CaptureFixture[str]) -> None:
        report = PrerequisiteReport(
            installed=True,
            version="0.0.20",
            check_output="ok",
            passed=True,
            message="All prerequisites satisfied.",
        )
        with patch(
            "specaudit.services.prerequisites.check_prerequisites",
            return_value=report,
        ):
            assert main(["check"]) == 0
        out = capsys.readouterr().out
        assert "0.0.20" in out
        assert "All prerequisites satisfied." in out
