# triage/checklist.py

from validation_triage.schemas import AnalysisOutput, ChecklistEntryOutput, CheckResult

NO_REVIEW_HEADING = "## No Review Needed"
NO_REVIEW_MESSAGE = (
    "All folders have been automatically categorized. No manual review required."
)


def render_review_checklist(analysis: AnalysisOutput) -> str:
    """
    Render the folders still needing human judgment as a markdown checklist.

    The document opens with per-tier counts, then has one section per
    checklist entry in order. When nothing needs review it says so
    explicitly instead of being left empty.

    Args:
        analysis: The completed analysis to render.

    Returns:
        str: Markdown document.
    """
    needing_review = sum(1 for verdict in analysis.tier2 if not verdict.safe_to_filter)
    lines = [
        "# Review Checklist",
        "",
        f"Generated: {analysis.generated_at}",
        "",
        "## Summary",
        "",
        f"- Tier 1 folders: {len(analysis.tier1)}",
        f"- Tier 2 folders needing review: {needing_review}",
        f"- Tier 3 folders: {len(analysis.tier3)}",
        "",
    ]

    if not analysis.review_checklist:
        lines += [NO_REVIEW_HEADING, "", NO_REVIEW_MESSAGE]
        return "\n".join(lines) + "\n"

    lines += ["## Review Items", ""]
    for position, entry in enumerate(analysis.review_checklist, start=1):
        lines += _render_entry(position, entry)

    return "\n".join(lines) + "\n"


def format_issue(issue: str | CheckResult) -> str:
    """
    Render one raw issue as bullet text.

    Returns:
        str: Strings verbatim, structured results as "check: message".
    """
    if isinstance(issue, str):
        return issue
    return f"{issue.check}: {issue.message}"


def _render_entry(position: int, entry: ChecklistEntryOutput) -> list[str]:
    return [
        f"### {position}. {entry.folder_name} (Tier {entry.tier})",
        "",
        "**Questions:**",
        *(f"- [ ] {question}" for question in entry.questions),
        "",
        "**Issues:**",
        *(f"- {format_issue(issue)}" for issue in entry.issues),
        "",
        "---",
        "",
    ]
