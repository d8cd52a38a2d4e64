# triage/issues.py

from collections.abc import Iterable

from .models import IssueClassification

SAFE_ISSUE_MARKER = "No matching schema found"


def is_safe_issue(issue: str, marker: str = SAFE_ISSUE_MARKER) -> bool:
    """
    Check whether an issue is inherently safe to filter.

    Only issues reporting that no schema matched a component qualify; the
    match is a case-sensitive substring test against `marker`.

    Returns:
        bool: True if the issue can be filtered without human review.
    """
    return marker in issue


def classify_issues(
    issues: Iterable[str],
    marker: str = SAFE_ISSUE_MARKER,
) -> IssueClassification:
    """
    Partition issues into safe ones and ones needing human judgment.

    An empty input is vacuously all safe.

    Args:
        issues: Raw issue strings from the validation report.
        marker: Phrase identifying safe issues.

    Returns:
        IssueClassification: Issues split by safety, order preserved.
    """
    safe: list[str] = []
    needs_review: list[str] = []
    for issue in issues:
        (safe if is_safe_issue(issue, marker) else needs_review).append(issue)

    return IssueClassification(safe=tuple(safe), needs_review=tuple(needs_review))
