# triage/analyse.py

import logging
from pathlib import Path

from validation_triage.schemas import FolderReport, ValidationReport
from validation_triage.storage import (
    check_required_files,
    load_conversation,
    load_validation_report,
    read_components_source,
)

from .checklist import render_review_checklist
from .evaluators import evaluate_tier_one, evaluate_tier_three, evaluate_tier_two
from .models import (
    AnalysisArtifacts,
    ChecklistEntry,
    FolderContext,
    TriagePaths,
    TriageResult,
    TriageSettings,
    default_settings,
)
from .report import build_analysis_output, save_analysis_artifacts
from .weakness import assess_weakness

logger = logging.getLogger(__name__)


def analyse_validation_report(
    paths: TriagePaths,
    settings: TriageSettings | None = None,
) -> AnalysisArtifacts:
    """
    Run the complete triage over a validation report and persist the results.

    Loads the report, evaluates every folder against its tier, renders the
    review checklist and writes both artifacts. A missing or malformed
    report aborts the run before anything is written.

    Args:
        paths: Input report, folder root and output locations.
        settings: Optional thresholds and weights (defaults to standard settings).

    Returns:
        AnalysisArtifacts: The analysis and checklist that were written.
    """
    report = load_validation_report(paths.report_path)
    result = run_triage(report, paths.data_dir, settings)

    analysis = build_analysis_output(result)
    checklist = render_review_checklist(analysis)
    save_analysis_artifacts(analysis, checklist, paths)

    logger.info(
        "Triage complete: %d tier 1, %d tier 2, %d tier 3 folders, %d review items",
        len(analysis.tier1),
        len(analysis.tier2),
        len(analysis.tier3),
        len(analysis.review_checklist),
    )

    return AnalysisArtifacts(analysis, checklist)


def run_triage(
    report: ValidationReport,
    data_dir: Path,
    settings: TriageSettings | None = None,
) -> TriageResult:
    """
    Evaluate every folder of a report in input order.

    Folders are independent of each other; the only shared state is the
    growing review checklist.

    Args:
        report: Tiered validation report.
        data_dir: Root directory holding the dataset folders.
        settings: Optional thresholds and weights.

    Returns:
        TriageResult: Verdicts per tier and the review checklist.
    """
    active = settings or default_settings()
    checklist: list[ChecklistEntry] = []

    tier1 = tuple(
        evaluate_tier_one(build_context(folder, data_dir, active), active)
        for folder in report.tier1
    )

    tier2 = []
    for folder in report.tier2:
        verdict, entry = evaluate_tier_two(
            build_context(folder, data_dir, active),
            active,
        )
        tier2.append(verdict)
        if entry is not None:
            checklist.append(entry)

    tier3 = []
    for folder in report.tier3:
        verdict, entry = evaluate_tier_three(
            build_context(folder, data_dir, active),
            active,
        )
        tier3.append(verdict)
        checklist.append(entry)

    return TriageResult(
        tier1=tier1,
        tier2=tuple(tier2),
        tier3=tuple(tier3),
        review_checklist=tuple(checklist),
    )


def build_context(
    folder: FolderReport,
    data_dir: Path,
    settings: TriageSettings,
) -> FolderContext:
    """
    Gather a folder's file checks, conversation and weakness from disk.

    Returns:
        FolderContext: Fresh inputs for the folder's evaluator.
    """
    name = folder.folder_name
    files = check_required_files(data_dir, name)
    conversation = load_conversation(data_dir, name)

    weakness = assess_weakness(
        folder,
        files,
        read_components_source(data_dir, name),
        conversation.data,
        settings,
    )

    return FolderContext(
        folder=folder,
        files=files,
        conversation=conversation,
        weakness=weakness,
    )
