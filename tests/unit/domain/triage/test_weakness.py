# triage/test_weakness.py

from dataclasses import replace
from decimal import Decimal
from types import SimpleNamespace

import pytest

from validation_triage.domain.triage.models import (
    IssueTypes,
    Tier1Verdict,
    Tier3Verdict,
    TriageSettings,
    WeaknessAssessment,
    WeaknessSignals,
    default_settings,
)
from validation_triage.domain.triage.weakness import (
    collect_signals,
    exclusion_candidates,
    rank_by_weakness,
    score_weakness,
    strongest,
)
from validation_triage.schemas import FolderReport
from validation_triage.storage import FileCheckResult, RequiredFiles

pytestmark = pytest.mark.unit

_PRESENT = FileCheckResult(exists=True, size=10)
_ABSENT = FileCheckResult(exists=False, reason="File does not exist")

_COMPONENTS = """
interface TaskListProps {
  title: string;
  items: string[];
  owner?: string;
}

interface SummaryCardProps {
  heading: string;
  total: number;
  note?: string;
}
"""


def _settings() -> TriageSettings:
    return default_settings()


def _strong_signals(**overrides: object) -> WeaknessSignals:
    base = WeaknessSignals(
        safe_mismatches=0,
        missing_files=0,
        component_count=5,
        total_props=20,
        message_count=6,
        component_usage_count=4,
        has_grading_guidance=True,
    )
    return replace(base, **overrides)


def _ranked(name: str, score: str) -> SimpleNamespace:
    return SimpleNamespace(
        folder_name=name,
        weakness=WeaknessAssessment(WeaknessSignals(), Decimal(score)),
    )


def test_strong_folder_scores_zero() -> None:
    """
    ARRANGE: signals clearing every threshold
    ACT:     score_weakness
    ASSERT:  score is 0
    """
    actual = score_weakness(_strong_signals(), _settings())

    assert actual == 0


def test_each_missing_file_adds_missing_file_weight() -> None:
    """
    ARRANGE: otherwise identical folders with 1 and 2 missing files
    ACT:     score_weakness
    ASSERT:  scores differ by exactly 2
    """
    one = score_weakness(_strong_signals(missing_files=1), _settings())
    two = score_weakness(_strong_signals(missing_files=2), _settings())

    assert two - one == 2


def test_missing_files_capped_at_three() -> None:
    """
    ARRANGE: signals claiming 4 missing files
    ACT:     score_weakness
    ASSERT:  counted as 3 files
    """
    actual = score_weakness(_strong_signals(missing_files=4), _settings())

    assert actual == 6


def test_safe_mismatches_weighted_per_mismatch() -> None:
    """
    ARRANGE: two safe mismatches
    ACT:     score_weakness
    ASSERT:  score is 0.6
    """
    actual = score_weakness(_strong_signals(safe_mismatches=2), _settings())

    assert actual == Decimal("0.6")


def test_all_binary_signals_combine() -> None:
    """
    ARRANGE: empty folder signals with no files
    ACT:     score_weakness
    ASSERT:  3*2 + 1 + 0.5 + 0.5 + 0.5 = 8.5
    """
    actual = score_weakness(WeaknessSignals(missing_files=3), _settings())

    assert actual == Decimal("8.5")


def test_low_props_average_flagged() -> None:
    """
    ARRANGE: five components averaging two props each
    ACT:     score_weakness
    ASSERT:  only the low-props weight applies
    """
    actual = score_weakness(
        _strong_signals(component_count=5, total_props=10),
        _settings(),
    )

    assert actual == Decimal("0.5")


def test_collect_signals_counts_components_and_props() -> None:
    """
    ARRANGE: components source with two Props interfaces and six members
    ACT:     collect_signals
    ASSERT:  component and prop counts match
    """
    folder = FolderReport(folder_name="alpha")
    files = RequiredFiles(_PRESENT, _PRESENT, _PRESENT)

    actual = collect_signals(folder, files, _COMPONENTS, None)

    assert (actual.component_count, actual.total_props) == (2, 6)


def test_collect_signals_reads_conversation() -> None:
    """
    ARRANGE: conversation with two messages, one component use and guidance
    ACT:     collect_signals
    ASSERT:  message count, usage count and guidance flag are read
    """
    folder = FolderReport(folder_name="alpha")
    files = RequiredFiles(_PRESENT, _PRESENT, _PRESENT)
    conversation = {
        "conversation": [
            {"role": "user", "content": "hi"},
            {
                "role": "assistant",
                "content": [{"type": "text"}, {"type": "component"}],
                "grading_guidance": {"criteria": ["x"]},
            },
        ],
    }

    actual = collect_signals(folder, files, None, conversation)

    assert (
        actual.message_count,
        actual.component_usage_count,
        actual.has_grading_guidance,
    ) == (2, 1, True)


def test_collect_signals_reads_safe_mismatch_metadata() -> None:
    """
    ARRANGE: schema check carrying totalSafeMismatches=3
    ACT:     collect_signals
    ASSERT:  safe_mismatches is 3
    """
    folder = FolderReport.model_validate(
        {
            "folderName": "alpha",
            "report": {
                "results": [
                    {
                        "check": "Interface matches schema",
                        "passed": True,
                        "metadata": {"totalSafeMismatches": 3},
                    },
                ],
            },
        },
    )
    files = RequiredFiles(_PRESENT, _PRESENT, _PRESENT)

    actual = collect_signals(folder, files, None, None)

    assert actual.safe_mismatches == 3


def test_collect_signals_counts_missing_files() -> None:
    """
    ARRANGE: canvas and conversation missing
    ACT:     collect_signals
    ASSERT:  missing_files is 2
    """
    folder = FolderReport(folder_name="alpha")
    files = RequiredFiles(_PRESENT, _ABSENT, _ABSENT)

    actual = collect_signals(folder, files, None, None)

    assert actual.missing_files == 2


def test_avg_props_zero_without_components() -> None:
    """
    ARRANGE: signals with no components
    ACT:     avg_props_per_component
    ASSERT:  0
    """
    actual = WeaknessSignals(total_props=4).avg_props_per_component

    assert actual == 0


def test_rank_by_weakness_orders_weakest_first() -> None:
    """
    ARRANGE: three verdicts with distinct scores
    ACT:     rank_by_weakness
    ASSERT:  highest score first
    """
    verdicts = [_ranked("a", "1"), _ranked("b", "3"), _ranked("c", "2")]

    actual = [v.folder_name for v in rank_by_weakness(verdicts)]

    assert actual == ["b", "c", "a"]


def test_rank_by_weakness_is_stable_for_ties() -> None:
    """
    ARRANGE: three verdicts with equal scores
    ACT:     rank_by_weakness
    ASSERT:  input order preserved
    """
    verdicts = [_ranked("a", "1"), _ranked("b", "1"), _ranked("c", "1")]

    actual = [v.folder_name for v in rank_by_weakness(verdicts)]

    assert actual == ["a", "b", "c"]


def test_exclusion_candidates_and_strongest_slice_ranking() -> None:
    """
    ARRANGE: ranking of four verdicts
    ACT:     take 1 weakest and 2 strongest
    ASSERT:  weakest first, strongest reversed
    """
    ranked = rank_by_weakness(
        [_ranked("a", "4"), _ranked("b", "3"), _ranked("c", "2"), _ranked("d", "1")],
    )

    actual = (
        [v.folder_name for v in exclusion_candidates(ranked, 1)],
        [v.folder_name for v in strongest(ranked, 2)],
    )

    assert actual == (["a"], ["d", "c"])


def test_strongest_with_zero_limit_is_empty() -> None:
    """
    ARRANGE: non-empty ranking
    ACT:     strongest with limit 0
    ASSERT:  empty list
    """
    actual = strongest([_ranked("a", "1")], 0)

    assert actual == []


def test_rank_by_weakness_accepts_mixed_tier_verdicts() -> None:
    """
    ARRANGE: a tier 1 and a tier 3 verdict with different scores
    ACT:     rank_by_weakness
    ASSERT:  the weaker tier 3 verdict ranks first
    """
    files = RequiredFiles(_PRESENT, _PRESENT, _PRESENT)
    strong = Tier1Verdict(
        folder_name="alpha",
        confidence=5,
        files=files,
        ready=True,
        notes="",
        weakness=WeaknessAssessment(WeaknessSignals(), Decimal("0.5")),
    )
    weak = Tier3Verdict(
        folder_name="gamma",
        confidence=1,
        files=files,
        issue_types=IssueTypes(props_mismatch=True),
        fixable=False,
        disqualifying=True,
        ready=False,
        notes="",
        weakness=WeaknessAssessment(WeaknessSignals(), Decimal("4")),
    )

    actual = [verdict.folder_name for verdict in rank_by_weakness([strong, weak])]

    assert actual == ["gamma", "alpha"]
