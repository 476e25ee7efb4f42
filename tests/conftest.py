"""Shared test fixtures: sample artifacts and an on-disk project."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest

FIXTURE_DIR = Path(__file__).resolve().parent / "fixtures" / "sample_feature"

ProjectFactory = Callable[..., Path]


def _read_fixture(*parts: str) -> str:
    return FIXTURE_DIR.joinpath(*parts).read_text(encoding="utf-8")


@pytest.fixture
def feature() -> str:
    return "001-report-export"


@pytest.fixture
def well_specified_spec() -> str:
    """Scans clean: no markers, vague words, unknown acronyms or open
    Given/When, and it names both error handling and performance."""
    return _read_fixture("well_specified_spec.md")


@pytest.fixture
def marker_spec() -> str:
    """Two requirements, each with an open clarification marker."""
    return _read_fixture("marker_spec.md")


@pytest.fixture
def consistent_artifacts() -> dict[str, str | None]:
    """A corpus on which all six passes stay silent."""
    return {
        key: _read_fixture("consistent", f"{key}.md")
        for key in ("constitution", "spec", "plan", "tasks")
    }


@pytest.fixture
def make_project(tmp_path: Path) -> ProjectFactory:
    """Lay out documents under the spec-kit folder structure."""

    def _make(
        feature: str,
        documents: dict[str, str],
        *,
        root_name: str = "project",
    ) -> Path:
        root = tmp_path / root_name
        for key, text in documents.items():
            if key == "constitution":
                path = root / ".specify" / "memory" / "constitution.md"
            else:
                path = root / "specs" / feature / f"{key}.md"
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(text, encoding="utf-8")
        return root

    return _make


@pytest.fixture
def project(
    make_project: ProjectFactory, feature: str, marker_spec: str
) -> Path:
    """Project root with constitution, spec (two markers), plan, tasks."""
    return make_project(
        feature,
        {
            "constitution": "# Constitution\n\n- **Language**: Python\n",
            "spec": marker_spec,
            "plan": "# Plan\n\n## Auth Flow\n\nCovers FR-001.\n",
            "tasks": "# Tasks\n\n- [x] T001 Auth Flow\n- [ ] T002 Docs\n",
        },
    )
