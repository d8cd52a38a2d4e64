# triage/report.py

import logging
from datetime import UTC, datetime
from pathlib import Path

from validation_triage.schemas import (
    AnalysisOutput,
    ChecklistEntryOutput,
    FileCheckOutput,
    FileChecksOutput,
    IssueTypesOutput,
    SchemaCheckOutput,
    Tier1VerdictOutput,
    Tier2VerdictOutput,
    Tier3VerdictOutput,
    WeaknessOutput,
)
from validation_triage.storage import (
    FileCheckResult,
    RequiredFiles,
    dump_model,
    write_artifacts,
)

from .models import (
    ChecklistEntry,
    IssueTypes,
    SchemaFlexibility,
    Tier1Verdict,
    Tier2Verdict,
    Tier3Verdict,
    TriagePaths,
    TriageResult,
    WeaknessAssessment,
)

logger = logging.getLogger(__name__)


def build_analysis_output(
    result: TriageResult,
    generated_at: str | None = None,
) -> AnalysisOutput:
    """
    Convert internal verdict dataclasses into a Pydantic AnalysisOutput.

    Args:
        result: Verdicts and checklist entries from the evaluators.
        generated_at: ISO timestamp to stamp the output with (defaults to now).

    Returns:
        AnalysisOutput: Machine-readable analysis envelope.
    """
    tier1 = tuple(_convert_tier_one(verdict) for verdict in result.tier1)
    tier2 = tuple(_convert_tier_two(verdict) for verdict in result.tier2)
    tier3 = tuple(_convert_tier_three(verdict) for verdict in result.tier3)

    file_checks = {
        verdict.folder_name: verdict.file_checks for verdict in (*tier1, *tier2, *tier3)
    }

    return AnalysisOutput(
        generated_at=generated_at or datetime.now(UTC).isoformat(),
        tier1=tier1,
        tier2=tier2,
        tier3=tier3,
        file_checks=file_checks,
        review_checklist=tuple(
            _convert_entry(entry) for entry in result.review_checklist
        ),
    )


def save_analysis_artifacts(
    analysis: AnalysisOutput,
    checklist: str,
    paths: TriagePaths,
) -> tuple[Path, ...]:
    """
    Persist the analysis JSON and the review checklist together.

    Both files are staged before either replaces its predecessor, so a
    failed write never leaves one artifact from a different run than the
    other.

    Returns:
        tuple[Path, ...]: Paths of the written analysis and checklist.
    """
    written = write_artifacts(
        {
            paths.analysis_path: dump_model(analysis),
            paths.checklist_path: checklist,
        },
    )
    logger.info("Analysis artifacts saved to %s", paths.analysis_path.parent)
    return written


def _convert_tier_one(verdict: Tier1Verdict) -> Tier1VerdictOutput:
    return Tier1VerdictOutput(
        folder_name=verdict.folder_name,
        confidence=verdict.confidence,
        file_checks=_convert_files(verdict.files),
        ready=verdict.ready,
        notes=verdict.notes,
        weakness=_convert_weakness(verdict.weakness),
    )


def _convert_tier_two(verdict: Tier2Verdict) -> Tier2VerdictOutput:
    return Tier2VerdictOutput(
        folder_name=verdict.folder_name,
        confidence=verdict.confidence,
        file_checks=_convert_files(verdict.files),
        schema_checks={
            name: _convert_schema_check(check)
            for name, check in verdict.schema_checks.items()
        },
        schema_checks_available=verdict.schema_checks_available,
        filtered_issues=verdict.filtered_issues,
        safe_to_filter=verdict.safe_to_filter,
        ready=verdict.ready,
        notes=verdict.notes,
        weakness=_convert_weakness(verdict.weakness),
    )


def _convert_tier_three(verdict: Tier3Verdict) -> Tier3VerdictOutput:
    return Tier3VerdictOutput(
        folder_name=verdict.folder_name,
        confidence=verdict.confidence,
        file_checks=_convert_files(verdict.files),
        issue_types=_convert_issue_types(verdict.issue_types),
        fixable=verdict.fixable,
        disqualifying=verdict.disqualifying,
        ready=verdict.ready,
        notes=verdict.notes,
        weakness=_convert_weakness(verdict.weakness),
    )


def _convert_files(files: RequiredFiles) -> FileChecksOutput:
    return FileChecksOutput(
        components_ts=_convert_file(files.components_ts),
        canvas_html=_convert_file(files.canvas_html),
        conversation_json=_convert_file(files.conversation_json),
    )


def _convert_file(check: FileCheckResult) -> FileCheckOutput:
    return FileCheckOutput(exists=check.exists, size=check.size, reason=check.reason)


def _convert_schema_check(check: SchemaFlexibility) -> SchemaCheckOutput:
    return SchemaCheckOutput(
        flexible=check.flexible,
        reason=check.reason,
        schema_key=check.schema_key,
        closest_key=check.closest_key,
    )


def _convert_issue_types(issue_types: IssueTypes) -> IssueTypesOutput:
    return IssueTypesOutput(
        export_interface=issue_types.export_interface,
        react_node=issue_types.react_node,
        props_mismatch=issue_types.props_mismatch,
        schema_mismatch=issue_types.schema_mismatch,
        validation_error=issue_types.validation_error,
    )


def _convert_weakness(weakness: WeaknessAssessment) -> WeaknessOutput:
    signals = weakness.signals
    return WeaknessOutput(
        safe_mismatches=signals.safe_mismatches,
        missing_files=signals.missing_files,
        component_count=signals.component_count,
        total_props=signals.total_props,
        avg_props_per_component=float(signals.avg_props_per_component),
        message_count=signals.message_count,
        component_usage_count=signals.component_usage_count,
        has_grading_guidance=signals.has_grading_guidance,
        score=float(weakness.score),
    )


def _convert_entry(entry: ChecklistEntry) -> ChecklistEntryOutput:
    return ChecklistEntryOutput(
        folder_name=entry.folder_name,
        tier=entry.tier,
        questions=entry.questions,
        issues=entry.issues,
    )
