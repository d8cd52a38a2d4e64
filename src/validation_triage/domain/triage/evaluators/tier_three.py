# evaluators/tier_three.py

from validation_triage.schemas import FolderReport

from ..models import (
    EXPORT_INTERFACE_CHECK,
    INTERFACE_SCHEMA_CHECK,
    PROPS_MATCH_CHECK,
    REACT_NODE_CHECK,
    ChecklistEntry,
    FolderContext,
    IssueTypes,
    Tier3Verdict,
    TriageSettings,
)
from ._helpers import conversation_note


def evaluate_tier_three(
    context: FolderContext,
    settings: TriageSettings,
) -> tuple[Tier3Verdict, ChecklistEntry]:
    """
    Evaluate a folder that failed at least one critical check.

    Tier 3 folders never qualify automatically; each one gets a checklist
    entry with questions for the issue categories it actually exhibits.

    Args:
        context: Report entry, file checks and weakness for the folder.
        settings: Confidence levels.

    Returns:
        tuple[Tier3Verdict, ChecklistEntry]: The verdict and its review entry.
    """
    folder = context.folder
    issue_types = categorise_issues(folder)
    fixable = is_fixable(issue_types)
    disqualifying = is_disqualifying(issue_types)

    verdict = Tier3Verdict(
        folder_name=folder.folder_name,
        confidence=(
            settings.fixable_confidence if fixable else settings.min_confidence
        ),
        files=context.files,
        issue_types=issue_types,
        fixable=fixable,
        disqualifying=disqualifying,
        ready=False,
        notes=_notes(context, fixable, disqualifying),
        weakness=context.weakness,
    )

    entry = ChecklistEntry(
        folder_name=folder.folder_name,
        tier=3,
        questions=_questions(folder.folder_name, issue_types),
        issues=folder.critical_issues,
    )
    return verdict, entry


def categorise_issues(folder: FolderReport) -> IssueTypes:
    """
    Flag which critical issue categories a folder exhibits.

    Returns:
        IssueTypes: Category flags, plus whether validation itself errored.
    """
    checks = {issue.check for issue in folder.critical_issues}
    return IssueTypes(
        export_interface=EXPORT_INTERFACE_CHECK in checks,
        react_node=REACT_NODE_CHECK in checks,
        props_mismatch=PROPS_MATCH_CHECK in checks,
        schema_mismatch=INTERFACE_SCHEMA_CHECK in checks,
        validation_error=bool(folder.error),
    )


def is_fixable(issue_types: IssueTypes) -> bool:
    """
    A folder is fixable when its only issues are superficial code fixes.

    Returns:
        bool: True if export-interface or ReactNode issues are present and
            no props or schema mismatch is.
    """
    superficial = issue_types.export_interface or issue_types.react_node
    structural = issue_types.props_mismatch or issue_types.schema_mismatch
    return superficial and not structural


def is_disqualifying(issue_types: IssueTypes) -> bool:
    """
    Props diverging from the schema while the interface matches it is a
    deeper defect than a plain interface mismatch.

    Returns:
        bool: True for a props mismatch without a schema mismatch.
    """
    return issue_types.props_mismatch and not issue_types.schema_mismatch


def _questions(folder_name: str, issue_types: IssueTypes) -> tuple[str, ...]:
    conditional = (
        (
            issue_types.export_interface,
            'Can "export interface" be changed to "interface"?',
        ),
        (
            issue_types.react_node,
            "Can ReactNode types be replaced with more specific types?",
        ),
        (
            issue_types.props_mismatch,
            "Are props in conversation actually valid according to schema?",
        ),
        (
            issue_types.schema_mismatch,
            "Do the interface mismatches only concern optional/array/dict parameters?",
        ),
    )
    return (
        f"Are the issues for {folder_name} fixable?",
        *(question for present, question in conditional if present),
        "Are all required files present?",
    )


def _notes(context: FolderContext, fixable: bool, disqualifying: bool) -> str:
    folder = context.folder
    if fixable:
        notes = "Issues appear fixable (export interface, ReactNode)"
    elif disqualifying:
        notes = "Critical issues that may disqualify"
    else:
        notes = "Multiple validation failures"

    if folder.error:
        notes += f"; validation run failed: {folder.error}"
    problem = conversation_note(context.conversation)
    if problem:
        notes += f"; {problem}"
    return notes
