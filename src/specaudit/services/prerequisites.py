"""Best-effort checks against the external ``specify`` CLI.

Nothing here raises: a missing executable, a timeout or any OS error
becomes a non-zero CliResult so callers can report it and carry on.
"""

from __future__ import annotations

import logging
import shlex
import subprocess
from dataclasses import dataclass

from specaudit.config import Settings
from specaudit.constants import (
    CLI_EXIT_NOT_FOUND,
    CLI_EXIT_TIMEOUT,
    CLI_MAX_OUTPUT_CHARS,
    INSTALL_INSTRUCTIONS,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CliResult:
    stdout: str
    stderr: str
    exit_code: int

    @property
    def ok(self) -> bool:
        return self.exit_code == 0


@dataclass(frozen=True)
class PrerequisiteReport:
    """What the environment looks like to the spec-kit tooling."""

    installed: bool
    version: str = ""
    check_output: str = ""
    passed: bool = False
    message: str = ""


def run_cli(
    args: list[str],
    *,
    command: str = "specify",
    timeout: float = 60,
    cwd: str | None = None,
) -> CliResult:
    """Run ``<command> <args>`` and capture its output."""
    argv = [*shlex.split(command), *args]
    try:
        completed = subprocess.run(  # noqa: S603
            argv,
            capture_output=True,
            text=True,
            timeout=timeout,
            cwd=cwd,
            check=False,
        )
    except FileNotFoundError:
        return CliResult(
            stdout="",
            stderr=f"Command not found: {argv[0]}",
            exit_code=CLI_EXIT_NOT_FOUND,
        )
    except subprocess.TimeoutExpired as exc:
        partial = exc.stdout if isinstance(exc.stdout, str) else ""
        return CliResult(
            stdout=partial,
            stderr=(
                f"Command timed out after {timeout}s. "
                "Try increasing the timeout."
            ),
            exit_code=CLI_EXIT_TIMEOUT,
        )
    except OSError as exc:
        return CliResult(stdout="", stderr=str(exc), exit_code=1)

    return CliResult(
        stdout=completed.stdout[:CLI_MAX_OUTPUT_CHARS],
        stderr=completed.stderr[:CLI_MAX_OUTPUT_CHARS],
        exit_code=completed.returncode,
    )


def check_prerequisites(settings: Settings | None = None) -> PrerequisiteReport:
    """Report CLI availability, version and ``check`` output."""
    settings = settings or Settings()
    version = run_cli(
        ["version"],
        command=settings.cli_command,
        timeout=settings.cli_version_timeout_seconds,
    )
    if not version.ok:
        logger.warning(
            "event=cli_unavailable command=%s exit=%d",
            settings.cli_command,
            version.exit_code,
        )
        return PrerequisiteReport(
            installed=False, message=INSTALL_INSTRUCTIONS
        )

    check = run_cli(
        ["check"],
        command=settings.cli_command,
        timeout=settings.cli_check_timeout_seconds,
    )
    output = "\n".join(part for part in (check.stdout, check.stderr) if part)
    if not check.ok:
        logger.warning(
            "event=cli_check_failed exit=%d", check.exit_code
        )
    return PrerequisiteReport(
        installed=True,
        version=version.stdout.strip(),
        check_output=output,
        passed=check.ok,
        message=(
            "All prerequisites satisfied."
            if check.ok
            else "Prerequisite check reported problems."
        ),
    )
