# triage/weakness.py

import re
from collections.abc import Mapping, Sequence
from decimal import Decimal
from typing import TypeVar

from validation_triage.schemas import FolderReport
from validation_triage.storage import REQUIRED_FILES, RequiredFiles

from .models import (
    INTERFACE_SCHEMA_CHECK,
    TriageSettings,
    Verdict,
    WeaknessAssessment,
    WeaknessSignals,
)

V = TypeVar("V", bound=Verdict)

_PROPS_INTERFACE = re.compile(r"interface\s+\w+Props\s*\{")
_PROP_MEMBER = re.compile(r"(\w+)(\??):\s*[^;]+;")


def assess_weakness(
    folder: FolderReport,
    files: RequiredFiles,
    components_source: str | None,
    conversation: Mapping[str, object] | None,
    settings: TriageSettings,
) -> WeaknessAssessment:
    """
    Collect a folder's completeness signals and score them.

    Returns:
        WeaknessAssessment: Signals and their weighted score.
    """
    signals = collect_signals(folder, files, components_source, conversation)
    return WeaknessAssessment(signals, score_weakness(signals, settings))


def collect_signals(
    folder: FolderReport,
    files: RequiredFiles,
    components_source: str | None,
    conversation: Mapping[str, object] | None,
) -> WeaknessSignals:
    """
    Derive weakness signals from the report, file checks and folder contents.

    Unreadable or missing contents contribute zero counts.

    Returns:
        WeaknessSignals: The folder's completeness signals.
    """
    schema_check = folder.report.find(INTERFACE_SCHEMA_CHECK)
    safe_mismatches = (
        schema_check.metadata.total_safe_mismatches
        if schema_check and schema_check.metadata
        else 0
    )

    source = components_source or ""
    messages = _messages(conversation)

    return WeaknessSignals(
        safe_mismatches=safe_mismatches,
        missing_files=len(files.missing()),
        component_count=len(_PROPS_INTERFACE.findall(source)),
        total_props=len(_PROP_MEMBER.findall(source)),
        message_count=len(messages),
        component_usage_count=sum(_component_uses(message) for message in messages),
        has_grading_guidance=any(
            isinstance(message, Mapping) and message.get("grading_guidance")
            for message in messages
        ),
    )


def score_weakness(signals: WeaknessSignals, settings: TriageSettings) -> Decimal:
    """
    Compute the weighted weakness score; higher means weaker.

    The score is advisory and only used to rank folders for triage.

    Returns:
        Decimal: Non-negative weighted sum of the signals.
    """
    missing_files = min(max(signals.missing_files, 0), len(REQUIRED_FILES))

    flags = (
        (
            signals.component_count < settings.min_component_count,
            settings.low_component_weight,
        ),
        (
            signals.message_count < settings.min_message_count,
            settings.low_message_weight,
        ),
        (not signals.has_grading_guidance, settings.no_guidance_weight),
        (
            signals.avg_props_per_component < settings.min_props_per_component,
            settings.low_props_weight,
        ),
    )

    return (
        max(signals.safe_mismatches, 0) * settings.safe_mismatch_weight
        + missing_files * settings.missing_file_weight
        + sum((weight for flagged, weight in flags if flagged), Decimal("0"))
    )


def rank_by_weakness(verdicts: Sequence[V]) -> list[V]:
    """
    Order verdicts weakest first; ties keep their input order.

    Returns:
        list[V]: Verdicts sorted by descending weakness score.
    """
    return sorted(verdicts, key=lambda verdict: verdict.weakness.score, reverse=True)


def exclusion_candidates(ranked: Sequence[V], limit: int) -> list[V]:
    """
    The weakest verdicts of a ranking, candidates for exclusion.

    Returns:
        list[V]: Up to `limit` verdicts, weakest first.
    """
    return list(ranked[: max(limit, 0)])


def strongest(ranked: Sequence[V], limit: int) -> list[V]:
    """
    The strongest verdicts of a ranking.

    Returns:
        list[V]: Up to `limit` verdicts, strongest first.
    """
    if limit <= 0:
        return []
    return list(reversed(ranked[-limit:]))


def _messages(conversation: Mapping[str, object] | None) -> list:
    if not isinstance(conversation, Mapping):
        return []
    messages = conversation.get("conversation")
    return messages if isinstance(messages, list) else []


def _component_uses(message: object) -> int:
    content = message.get("content") if isinstance(message, Mapping) else None
    if not isinstance(content, list):
        return 0
    return sum(
        1
        for item in content
        if isinstance(item, Mapping) and item.get("type") == "component"
    )
