# evaluators/tier_one.py

from ..models import FolderContext, Tier1Verdict, TriageSettings
from ._helpers import conversation_note, describe_missing_files


def evaluate_tier_one(context: FolderContext, settings: TriageSettings) -> Tier1Verdict:
    """
    Evaluate a folder that passed every upstream check.

    Confidence is always at its maximum; readiness additionally requires all
    three files to be present, so a passing verdict never hides a missing
    artifact.

    Args:
        context: Report entry, file checks and weakness for the folder.
        settings: Confidence levels.

    Returns:
        Tier1Verdict: The folder's verdict.
    """
    ready = context.files.all_exist
    notes = (
        "All validation checks passed and all required files exist"
        if ready
        else "Validation passed but some files missing: "
        + describe_missing_files(context.files)
    )
    problem = conversation_note(context.conversation)
    if problem:
        notes += f"; {problem}"

    return Tier1Verdict(
        folder_name=context.folder.folder_name,
        confidence=settings.max_confidence,
        files=context.files,
        ready=ready,
        notes=notes,
        weakness=context.weakness,
    )
