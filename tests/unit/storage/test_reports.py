# storage/test_reports.py

import json
import os
from pathlib import Path

import pytest

from validation_triage.exceptions import ArtifactWriteError, ReportLoadError
from validation_triage.schemas import CuratedList, CuratedSummary
from validation_triage.storage.reports import (
    dump_model,
    load_validation_report,
    write_artifacts,
)

pytestmark = pytest.mark.unit


def test_load_validation_report_reads_tiers(tmp_path: Path) -> None:
    """
    ARRANGE: report JSON with one folder per tier
    ACT:     load_validation_report
    ASSERT:  folder names land in their tiers
    """
    path = tmp_path / "VALIDATION_REPORT.json"
    path.write_text(
        json.dumps(
            {
                "tier1": [{"folderName": "a", "report": {"results": []}}],
                "tier2": [{"folderName": "b", "filteredIssues": ["x"]}],
                "tier3": [{"folderName": "c", "error": "boom"}],
            },
        ),
    )

    actual = load_validation_report(path)

    assert [f.folder_name for f in (*actual.tier1, *actual.tier2, *actual.tier3)] == [
        "a",
        "b",
        "c",
    ]


def test_load_validation_report_missing_file_is_fatal(tmp_path: Path) -> None:
    """
    ARRANGE: no report on disk
    ACT:     load_validation_report
    ASSERT:  raises ReportLoadError naming the path
    """
    path = tmp_path / "VALIDATION_REPORT.json"

    with pytest.raises(ReportLoadError) as excinfo:
        load_validation_report(path)

    assert excinfo.value.path == path


def test_load_validation_report_invalid_json_is_fatal(tmp_path: Path) -> None:
    """
    ARRANGE: report file with broken JSON
    ACT:     load_validation_report
    ASSERT:  raises ReportLoadError mentioning invalid JSON
    """
    path = tmp_path / "VALIDATION_REPORT.json"
    path.write_text("{oops")

    with pytest.raises(ReportLoadError, match="invalid JSON"):
        load_validation_report(path)


def test_load_validation_report_wrong_structure_is_fatal(tmp_path: Path) -> None:
    """
    ARRANGE: report whose tier1 is not a list
    ACT:     load_validation_report
    ASSERT:  raises ReportLoadError
    """
    path = tmp_path / "VALIDATION_REPORT.json"
    path.write_text(json.dumps({"tier1": "nope"}))

    with pytest.raises(ReportLoadError, match="unexpected structure"):
        load_validation_report(path)


def test_dump_model_uses_camel_case_keys() -> None:
    """
    ARRANGE: curated list model
    ACT:     dump_model
    ASSERT:  output keys are camelCase
    """
    curated = CuratedList(
        generated_at="2025-01-01T00:00:00+00:00",
        high_confidence=(),
        medium_confidence=(),
        excluded=(),
        summary=CuratedSummary(total=0, included=0, excluded=0),
    )

    actual = json.loads(dump_model(curated))

    assert "highConfidence" in actual


def test_write_artifacts_writes_every_file(tmp_path: Path) -> None:
    """
    ARRANGE: two artifacts
    ACT:     write_artifacts
    ASSERT:  both files hold their content
    """
    first, second = tmp_path / "a.json", tmp_path / "b.md"

    write_artifacts({first: "{}\n", second: "# B\n"})

    assert (first.read_text(), second.read_text()) == ("{}\n", "# B\n")


def test_write_artifacts_leaves_no_temporary_files(tmp_path: Path) -> None:
    """
    ARRANGE: one artifact
    ACT:     write_artifacts
    ASSERT:  directory holds only the artifact
    """
    write_artifacts({tmp_path / "a.json": "{}"})

    assert sorted(p.name for p in tmp_path.iterdir()) == ["a.json"]


def test_write_artifacts_keeps_previous_files_on_failure(
    tmp_path: Path,
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    """
    ARRANGE: existing artifacts and a rename that always fails
    ACT:     write_artifacts
    ASSERT:  raises ArtifactWriteError and old content is untouched
    """
    first = tmp_path / "a.json"
    first.write_text("old")

    def _fail(src: object, dst: object) -> None:
        raise OSError("disk full")

    monkeypatch.setattr(os, "replace", _fail)

    with pytest.raises(ArtifactWriteError):
        write_artifacts({first: "new"})

    assert first.read_text() == "old"


def test_write_artifacts_cleans_up_staged_files_on_failure(
    tmp_path: Path,
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    """
    ARRANGE: a rename that always fails
    ACT:     write_artifacts
    ASSERT:  no staged temporary files remain
    """

    def _fail(src: object, dst: object) -> None:
        raise OSError("disk full")

    monkeypatch.setattr(os, "replace", _fail)

    with pytest.raises(ArtifactWriteError):
        write_artifacts({tmp_path / "a.json": "new", tmp_path / "b.md": "new"})

    assert list(tmp_path.iterdir()) == []
