# evaluators/tier_two.py

import re

from validation_triage.schemas import CheckReport
from validation_triage.storage import ConversationRecord

from ..issues import classify_issues
from ..models import (
    INTERFACE_SCHEMA_CHECK,
    ChecklistEntry,
    FolderContext,
    SchemaFlexibility,
    Tier2Verdict,
    TriageSettings,
)
from ..schema_flexibility import ComponentSchemaIndex
from ._helpers import REQUIRED_FILES_LABEL, conversation_note, describe_missing_files

_COMPONENT_PREFIX = re.compile(r"^([^.]+)\.")


def evaluate_tier_two(
    context: FolderContext,
    settings: TriageSettings,
) -> tuple[Tier2Verdict, ChecklistEntry | None]:
    """
    Evaluate a folder whose only upstream failures were schema mismatches.

    Confidence is raised to the safe level only when every filtered issue is
    safe and all required files exist. Folders with any issue needing human
    judgment get a checklist entry.

    Args:
        context: Report entry, file checks, conversation and weakness.
        settings: Confidence levels and the safe-issue marker.

    Returns:
        tuple[Tier2Verdict, ChecklistEntry | None]: The verdict, and a review
            entry when the folder cannot be cleared automatically.
    """
    folder = context.folder
    schema_checks, available = _resolve_schema_checks(
        mismatched_components(folder.report),
        context.conversation,
    )

    safe_to_filter = classify_issues(
        folder.filtered_issues,
        settings.safe_issue_marker,
    ).all_safe
    all_files = context.files.all_exist

    confidence = (
        settings.safe_confidence
        if safe_to_filter and all_files
        else settings.review_confidence
    )

    verdict = Tier2Verdict(
        folder_name=folder.folder_name,
        confidence=confidence,
        files=context.files,
        schema_checks=schema_checks,
        schema_checks_available=available,
        filtered_issues=folder.filtered_issues,
        safe_to_filter=safe_to_filter,
        ready=confidence >= settings.safe_confidence and all_files,
        notes=_notes(context, safe_to_filter),
        weakness=context.weakness,
    )

    if safe_to_filter:
        return verdict, None

    entry = ChecklistEntry(
        folder_name=folder.folder_name,
        tier=2,
        questions=(
            f"Are the schema mismatches for {folder.folder_name} only for "
            "optional/array/dict parameters?",
            "Does the schema allow additionalProperties for flexible objects?",
            f"Are all required files present ({REQUIRED_FILES_LABEL})?",
        ),
        issues=folder.filtered_issues,
    )
    return verdict, entry


def mismatched_components(report: CheckReport) -> tuple[str, ...]:
    """
    Component names named by a failed interface-to-schema check.

    Each detail line is expected to start with "ComponentName." and lines
    without a dotted prefix are ignored.

    Returns:
        tuple[str, ...]: Distinct component names in first-seen order.
    """
    check = report.find(INTERFACE_SCHEMA_CHECK)
    if check is None or check.passed:
        return ()

    matches = (_COMPONENT_PREFIX.match(detail) for detail in check.details)
    names = (match.group(1) for match in matches if match)
    return tuple(dict.fromkeys(names))


def _resolve_schema_checks(
    component_names: tuple[str, ...],
    conversation: ConversationRecord,
) -> tuple[dict[str, SchemaFlexibility], bool]:
    """
    Resolve schema flexibility for each mismatched component.

    The schema index is only built when there is something to look up. An
    unavailable conversation makes every component fall back to not
    flexible.

    Returns:
        tuple[dict[str, SchemaFlexibility], bool]: Checks keyed by component
            name, and whether the conversation record was usable.
    """
    if not component_names:
        return {}, conversation.available

    index = ComponentSchemaIndex.from_conversation(conversation.data)
    return (
        {name: index.resolve(name) for name in component_names},
        conversation.available,
    )


def _notes(context: FolderContext, safe_to_filter: bool) -> str:
    notes = [
        "Schema mismatches appear to be safe-to-filter issues"
        if safe_to_filter
        else "Schema mismatches need review",
    ]
    if not context.files.all_exist:
        notes.append(f"required files missing: {describe_missing_files(context.files)}")
    problem = conversation_note(context.conversation)
    if problem:
        notes.append(problem)
    return "; ".join(notes)
