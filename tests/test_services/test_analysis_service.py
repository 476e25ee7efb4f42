"""Tests for feature-level operations over a document store."""

from __future__ import annotations

from datetime import date
from pathlib import Path

import pytest

from specaudit.constants import AnalysisStatus, ScanStatus, Severity
from specaudit.repositories.document_store import FileDocumentStore
from specaudit.repositories.fakes import InMemoryDocumentStore
from specaudit.resilience.errors import InputMissingError
from specaudit.services.analysis_service import (
    analyze_feature,
    answer_feature,
    load_corpus,
    scan_feature,
)


class TestLoadCorpus:
    def test_reads_every_listed_key(self) -> None:
        store = InMemoryDocumentStore({"spec": "s", "plan": "p"})
        corpus = load_corpus(store)
        assert corpus.keys == ["spec", "plan"]


class TestScanFeature:
    def test_scan(self, marker_spec: str) -> None:
        store = InMemoryDocumentStore({"spec": marker_spec})
        result = scan_feature(store)
        assert result.status == ScanStatus.AMBIGUITIES_FOUND
        assert len(result.questions) == 4

    def test_well_specified(self, well_specified_spec: str) -> None:
        store = InMemoryDocumentStore({"spec": well_specified_spec})
        assert scan_feature(store).status == ScanStatus.WELL_SPECIFIED

    def test_missing_spec(self) -> None:
        with pytest.raises(InputMissingError, match="'spec' is missing"):
            scan_feature(InMemoryDocumentStore({"plan": "p"}))


class TestAnswerFeature:
    def test_inline_answer_persisted(self, marker_spec: str) -> None:
        store = InMemoryDocumentStore({"spec": marker_spec})
        outcome = answer_feature(store, 1, "24 hours")
        assert outcome.written
        assert outcome.applied_at == "inline"
        assert outcome.marker_count == 2
        stored = store.read("spec")
        assert stored is not None
        assert stored.text == outcome.document
        assert "after [RESOLVED: 24 hours]." in stored.text
        assert store.write_count == 1

    def test_appended_answer_persisted(self) -> None:
        store = InMemoryDocumentStore({"spec": "No markers.\n"})
        outcome = answer_feature(
            store, 0, "Use UTC", session_date=date(2026, 1, 2)
        )
        assert outcome.applied_at == "appended"
        stored = store.read("spec")
        assert stored is not None
        assert "### Session 2026-01-02" in stored.text

    def test_failed_write_returns_original(self, marker_spec: str) -> None:
        store = InMemoryDocumentStore({"spec": marker_spec}, fail_writes=True)
        outcome = answer_feature(store, 0, "OAuth2")
        assert not outcome.written
        assert outcome.document == marker_spec
        assert outcome.error is not None
        assert "Simulated write failure" in outcome.error

    def test_missing_spec(self) -> None:
        with pytest.raises(InputMissingError):
            answer_feature(InMemoryDocumentStore(), 0, "x")

    def test_empty_answer(self, marker_spec: str) -> None:
        store = InMemoryDocumentStore({"spec": marker_spec})
        with pytest.raises(ValueError, match="empty"):
            answer_feature(store, 0, " ")
        assert store.write_count == 0

    def test_answer_with_marker_not_written(self, marker_spec: str) -> None:
        store = InMemoryDocumentStore({"spec": marker_spec})
        with pytest.raises(ValueError, match="must not contain"):
            answer_feature(store, 0, "[NEEDS CLARIFICATION: later]")
        assert store.write_count == 0
        stored = store.read("spec")
        assert stored is not None and stored.text == marker_spec

    def test_on_disk(self, project: Path, feature: str) -> None:
        store = FileDocumentStore(project, feature)
        answer_feature(store, 0, "OAuth2 with PKCE")
        text = (project / "specs" / feature / "spec.md").read_text(
            encoding="utf-8"
        )
        assert "[RESOLVED: OAuth2 with PKCE]" in text
        assert "[NEEDS CLARIFICATION: duration?]" in text


class TestAnalyzeFeature:
    def test_empty_store_degrades(self) -> None:
        report = analyze_feature(InMemoryDocumentStore())
        assert report.status == AnalysisStatus.ISSUES_FOUND
        assert report.findings[0].severity == Severity.CRITICAL

    def test_reads_fresh_documents(self, project: Path, feature: str) -> None:
        store = FileDocumentStore(project, feature)
        first = analyze_feature(store)
        (project / "specs" / feature / "plan.md").unlink()
        second = analyze_feature(store)
        assert first.inventory["plan"] is True
        assert second.inventory["plan"] is False
