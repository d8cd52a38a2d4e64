# triage/test_checklist.py

import pytest

from validation_triage.domain.triage.checklist import (
    NO_REVIEW_MESSAGE,
    format_issue,
    render_review_checklist,
)
from validation_triage.schemas import (
    AnalysisOutput,
    ChecklistEntryOutput,
    CheckResult,
)

pytestmark = pytest.mark.unit


def _analysis(*entries: ChecklistEntryOutput) -> AnalysisOutput:
    """
    Build an analysis holding only checklist entries.

    Returns:
        AnalysisOutput: Analysis with empty tiers and the given entries.
    """
    return AnalysisOutput(
        generated_at="2025-01-01T00:00:00+00:00",
        tier1=(),
        tier2=(),
        tier3=(),
        file_checks={},
        review_checklist=entries,
    )


def _entry(name: str, tier: int = 3) -> ChecklistEntryOutput:
    return ChecklistEntryOutput(
        folder_name=name,
        tier=tier,
        questions=(f"Are the issues for {name} fixable?",),
        issues=("raw issue",),
    )


def test_empty_checklist_states_no_review_needed() -> None:
    """
    ARRANGE: analysis without checklist entries
    ACT:     render_review_checklist
    ASSERT:  explicit no-review message present
    """
    actual = render_review_checklist(_analysis())

    assert NO_REVIEW_MESSAGE in actual


def test_empty_checklist_has_no_review_items_heading() -> None:
    """
    ARRANGE: analysis without checklist entries
    ACT:     render_review_checklist
    ASSERT:  no "Review Items" section
    """
    actual = render_review_checklist(_analysis())

    assert "## Review Items" not in actual


def test_checklist_has_one_section_per_entry_in_order() -> None:
    """
    ARRANGE: two entries, beta then alpha
    ACT:     render_review_checklist
    ASSERT:  numbered sections appear in entry order
    """
    actual = render_review_checklist(_analysis(_entry("beta", 2), _entry("alpha")))

    assert actual.index("### 1. beta (Tier 2)") < actual.index("### 2. alpha (Tier 3)")


def test_checklist_questions_rendered_as_checkboxes() -> None:
    """
    ARRANGE: one entry with one question
    ACT:     render_review_checklist
    ASSERT:  question rendered as an unchecked box
    """
    actual = render_review_checklist(_analysis(_entry("alpha")))

    assert "- [ ] Are the issues for alpha fixable?" in actual


def test_checklist_summary_counts_tiers() -> None:
    """
    ARRANGE: analysis with no folders
    ACT:     render_review_checklist
    ASSERT:  summary lists zero tier 1 folders
    """
    actual = render_review_checklist(_analysis())

    assert "- Tier 1 folders: 0" in actual


def test_checklist_carries_generation_timestamp() -> None:
    """
    ARRANGE: analysis stamped 2025-01-01
    ACT:     render_review_checklist
    ASSERT:  timestamp line present
    """
    actual = render_review_checklist(_analysis())

    assert "Generated: 2025-01-01T00:00:00+00:00" in actual


def test_format_issue_keeps_strings() -> None:
    """
    ARRANGE: plain string issue
    ACT:     format_issue
    ASSERT:  returned unchanged
    """
    actual = format_issue("Card.title: missing")

    assert actual == "Card.title: missing"


def test_format_issue_renders_check_results() -> None:
    """
    ARRANGE: structured check result
    ACT:     format_issue
    ASSERT:  rendered as "check: message"
    """
    issue = CheckResult(check="No export interface", message="found 2")

    actual = format_issue(issue)

    assert actual == "No export interface: found 2"
