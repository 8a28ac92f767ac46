"""Tests for compscan.models."""

from __future__ import annotations

import dataclasses

import pytest

from compscan.models import FileFinding, Report


def test_file_finding_requires_names() -> None:
    with pytest.raises(ValueError):
        FileFinding(path="src/App.tsx", names=())


def test_report_totals_are_derived_from_findings() -> None:
    report = Report.from_findings(
        [
            FileFinding(path="a.tsx", names=("App",)),
            FileFinding(path="b.tsx", names=("Button", "IconButton")),
        ],
        elapsed_ms=12,
    )

    assert report.total_components == 3
    assert report.files_with_components == 2
    assert isinstance(report.findings, tuple)


def test_empty_report() -> None:
    report = Report.from_findings([], elapsed_ms=0)
    assert report.total_components == 0
    assert report.files_with_components == 0


def test_report_is_immutable() -> None:
    report = Report.from_findings([], elapsed_ms=1)
    with pytest.raises(dataclasses.FrozenInstanceError):
        report.elapsed_ms = 2  # type: ignore[misc]


def test_report_to_dict() -> None:
    report = Report.from_findings([FileFinding(path="a.tsx", names=("App",))], elapsed_ms=5)

    assert report.to_dict() == {
        "total_components": 1,
        "files_with_components": 1,
        "elapsed_ms": 5,
        "findings": [{"path": "a.tsx", "names": ["App"]}],
    }
