# triage/curation.py

import logging
from datetime import UTC, datetime

from validation_triage.schemas import (
    AnalysisOutput,
    CuratedFolder,
    CuratedList,
    CuratedSummary,
)
from validation_triage.storage import dump_model, load_analysis_output, write_artifacts

from .models import TriagePaths, TriageSettings, default_settings

logger = logging.getLogger(__name__)


def curate_analysis(
    paths: TriagePaths,
    settings: TriageSettings | None = None,
) -> CuratedList:
    """
    Build and persist the curated delivery list from a saved analysis.

    Args:
        paths: Location of the analysis and the curated outputs.
        settings: Optional confidence levels (defaults to standard settings).

    Returns:
        CuratedList: The curated list that was written.
    """
    active = settings or default_settings()
    analysis = load_analysis_output(paths.analysis_path)
    curated = build_curated_list(analysis, active)

    write_artifacts(
        {
            paths.curated_json_path: dump_model(curated),
            paths.curated_markdown_path: render_curated_markdown(
                curated,
                active.max_confidence,
            ),
        },
    )

    logger.info(
        "Curated %d of %d folders (%d high, %d medium confidence)",
        curated.summary.included,
        curated.summary.total,
        len(curated.high_confidence),
        len(curated.medium_confidence),
    )
    return curated


def build_curated_list(
    analysis: AnalysisOutput,
    settings: TriageSettings | None = None,
) -> CuratedList:
    """
    Partition analysed folders into delivery buckets.

    Ready tier 1 folders and ready, safe-to-filter tier 2 folders are high
    confidence; other ready tier 2 folders are medium confidence; everything
    else, including every tier 3 folder, is excluded.

    Returns:
        CuratedList: Folders grouped by confidence, with summary counts.
    """
    active = settings or default_settings()
    high: list[CuratedFolder] = []
    medium: list[CuratedFolder] = []
    excluded: list[CuratedFolder] = []

    for verdict in analysis.tier1:
        if verdict.ready and verdict.confidence >= active.safe_confidence:
            high.append(
                CuratedFolder(
                    folder_name=verdict.folder_name,
                    tier=1,
                    confidence=verdict.confidence,
                    reason="All validation checks passed",
                    notes=verdict.notes,
                ),
            )
        else:
            excluded.append(
                CuratedFolder(
                    folder_name=verdict.folder_name,
                    tier=1,
                    reason="Missing required files or not ready",
                    notes=verdict.notes,
                ),
            )

    for verdict in analysis.tier2:
        if (
            verdict.ready
            and verdict.safe_to_filter
            and verdict.confidence >= active.safe_confidence
        ):
            bucket, reason = high, "Schema mismatches are safe-to-filter issues"
        elif verdict.ready and verdict.confidence >= active.review_confidence:
            bucket, reason = medium, "May have minor schema issues"
        else:
            excluded.append(
                CuratedFolder(
                    folder_name=verdict.folder_name,
                    tier=2,
                    reason="Schema issues need review or files missing",
                    notes=verdict.notes,
                ),
            )
            continue

        bucket.append(
            CuratedFolder(
                folder_name=verdict.folder_name,
                tier=2,
                confidence=verdict.confidence,
                reason=reason,
                notes=verdict.notes,
                filtered_issues=verdict.filtered_issues,
            ),
        )

    for verdict in analysis.tier3:
        fixable = verdict.fixable and verdict.confidence >= active.fixable_confidence
        excluded.append(
            CuratedFolder(
                folder_name=verdict.folder_name,
                tier=3,
                reason=(
                    "Has fixable issues - review and fix before inclusion"
                    if fixable
                    else "Critical validation failures"
                ),
                notes=verdict.notes,
                fixable=fixable,
            ),
        )

    included = len(high) + len(medium)
    return CuratedList(
        generated_at=datetime.now(UTC).isoformat(),
        high_confidence=tuple(high),
        medium_confidence=tuple(medium),
        excluded=tuple(excluded),
        summary=CuratedSummary(
            total=included + len(excluded),
            included=included,
            excluded=len(excluded),
        ),
    )


def render_curated_markdown(
    curated: CuratedList,
    max_confidence: int = default_settings().max_confidence,
) -> str:
    """
    Render a curated list as a markdown document.

    Returns:
        str: Markdown with a summary and one section per non-empty bucket.
    """
    lines = [
        "# Curated Folders List",
        "",
        f"Generated: {curated.generated_at}",
        "",
        "## Summary",
        "",
        f"- **High Confidence**: {len(curated.high_confidence)} folders",
        f"- **Medium Confidence**: {len(curated.medium_confidence)} folders",
        f"- **Excluded**: {len(curated.excluded)} folders",
        f"- **Total Included**: {curated.summary.included} folders",
        "",
        "---",
        "",
    ]

    sections = (
        (
            "High Confidence Folders",
            "These folders pass all validation checks and are ready for delivery.",
            curated.high_confidence,
        ),
        (
            "Medium Confidence Folders",
            "These folders have minor issues that may be acceptable. "
            "Review recommended.",
            curated.medium_confidence,
        ),
        (
            "Excluded Folders",
            "These folders have validation failures or missing files and are "
            "not recommended for delivery.",
            curated.excluded,
        ),
    )

    for title, blurb, folders in sections:
        if not folders:
            continue
        lines += [f"## {title}", "", blurb, ""]
        for position, folder in enumerate(folders, start=1):
            lines += _render_folder(position, folder, max_confidence)

    return "\n".join(lines) + "\n"


def _render_folder(
    position: int,
    folder: CuratedFolder,
    max_confidence: int,
) -> list[str]:
    lines = [f"### {position}. {folder.folder_name}", ""]
    if folder.confidence is not None:
        lines.append(f"- **Confidence**: {folder.confidence}/{max_confidence}")
        lines.append(f"- **Tier**: {folder.tier}")
    lines.append(f"- **Reason**: {folder.reason}")
    lines.append(f"- **Notes**: {folder.notes}")
    if folder.filtered_issues:
        lines.append(f"- **Filtered Issues**: {len(folder.filtered_issues)}")
    if folder.fixable:
        lines.append("- **Fixable**: Yes - review and fix before inclusion")
    lines.append("")
    return lines
