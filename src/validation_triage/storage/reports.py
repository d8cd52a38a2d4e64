# storage/reports.py

import json
import logging
import os
import tempfile
from collections.abc import Mapping
from pathlib import Path

from pydantic import BaseModel, ValidationError

from validation_triage.exceptions import ArtifactWriteError, ReportLoadError
from validation_triage.schemas import AnalysisOutput, ValidationReport

logger = logging.getLogger(__name__)


def load_validation_report(path: Path) -> ValidationReport:
    """
    Load the upstream validation report.

    Args:
        path: Location of the report JSON.

    Returns:
        ValidationReport: The parsed, validated report.

    Raises:
        ReportLoadError: If the file is missing, unreadable or malformed.
    """
    report = _load_model(path, ValidationReport)
    logger.info(
        "Loaded validation report from %s: %d/%d/%d folders in tiers 1/2/3",
        path,
        len(report.tier1),
        len(report.tier2),
        len(report.tier3),
    )
    return report


def load_analysis_output(path: Path) -> AnalysisOutput:
    """
    Load a previously written analysis report.

    Raises:
        ReportLoadError: If the file is missing, unreadable or malformed.
    """
    return _load_model(path, AnalysisOutput)


def dump_model(model: BaseModel) -> str:
    """
    Serialise a model as indented camelCase JSON.

    Returns:
        str: JSON text terminated by a newline.
    """
    return (
        json.dumps(
            model.model_dump(mode="json", by_alias=True, exclude_none=True),
            indent=2,
            ensure_ascii=False,
        )
        + "\n"
    )


def write_artifacts(artifacts: Mapping[Path, str]) -> tuple[Path, ...]:
    """
    Write a set of text artifacts so that none is left half-written.

    Every artifact is first staged to a temporary file beside its
    destination. Only once all of them are staged are they renamed into
    place, so a failure while writing leaves every previous artifact intact.

    Args:
        artifacts: Destination path mapped to the text to write.

    Returns:
        tuple[Path, ...]: The destination paths, in input order.

    Raises:
        ArtifactWriteError: If any artifact cannot be staged or moved.
    """
    staged: list[tuple[Path, Path]] = []

    for dest, content in artifacts.items():
        try:
            staged.append((_stage(dest, content), dest))
        except OSError as error:
            _discard(tmp for tmp, _ in staged)
            raise ArtifactWriteError(dest, str(error)) from error

    for index, (tmp, dest) in enumerate(staged):
        try:
            os.replace(tmp, dest)
        except OSError as error:
            _discard(tmp for tmp, _ in staged[index:])
            raise ArtifactWriteError(dest, str(error)) from error
        logger.info("Wrote %s", dest)

    return tuple(dest for _, dest in staged)


def _load_model(path: Path, model: type[BaseModel]) -> BaseModel:
    """
    Read a JSON file and validate it against a pydantic model.

    Returns:
        BaseModel: The validated model instance.
    """
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError as error:
        raise ReportLoadError(path, "file does not exist") from error
    except (OSError, UnicodeDecodeError) as error:
        raise ReportLoadError(path, str(error)) from error

    try:
        return model.model_validate_json(text)
    except ValidationError as error:
        if any(detail["type"] == "json_invalid" for detail in error.errors()):
            raise ReportLoadError(path, f"invalid JSON: {error}") from error
        raise ReportLoadError(path, f"unexpected structure: {error}") from error


def _stage(dest: Path, content: str) -> Path:
    """
    Write content to a temporary sibling of the destination.

    Returns:
        Path: Location of the staged temporary file.
    """
    dest.parent.mkdir(parents=True, exist_ok=True)
    fd, name = tempfile.mkstemp(
        dir=dest.parent,
        prefix=f".{dest.name}.",
        suffix=".tmp",
    )
    staged = Path(name)
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as handle:
            handle.write(content)
    except OSError:
        staged.unlink(missing_ok=True)
        raise
    return staged


def _discard(paths) -> None:
    for path in paths:
        path.unlink(missing_ok=True)
