# triage/models.py

from dataclasses import dataclass
from decimal import Decimal
from pathlib import Path
from typing import NamedTuple

from validation_triage.schemas import AnalysisOutput, CheckResult, FolderReport
from validation_triage.storage import ConversationRecord, RequiredFiles

# Check names emitted by the upstream validator
EXPORT_INTERFACE_CHECK = "No export interface"
REACT_NODE_CHECK = "No ReactNode attributes"
PROPS_MATCH_CHECK = "Props match schema"
INTERFACE_SCHEMA_CHECK = "Interface matches schema"


@dataclass(frozen=True)
class TriageSettings:
    """
    Configuration values controlling confidence levels and weakness scoring.
    """

    # Confidence for folders that passed every upstream check
    max_confidence: int = 5
    # Tier 2 folders whose mismatches are all safe and whose files exist
    safe_confidence: int = 4
    # Tier 2 folders that still need a human decision
    review_confidence: int = 3
    # Tier 3 folders with only superficial, correctable issues
    fixable_confidence: int = 2
    # Tier 3 folders with deeper defects
    min_confidence: int = 1
    # Issues containing this phrase are safe to filter
    safe_issue_marker: str = "No matching schema found"
    # Folders declaring fewer component interfaces than this are weaker
    min_component_count: int = 3
    # Conversations shorter than this are weaker
    min_message_count: int = 4
    # Interfaces averaging fewer declared fields than this are weaker
    min_props_per_component: Decimal = Decimal("3")
    # Weight per missing required file
    missing_file_weight: Decimal = Decimal("2")
    # Weight when the component count is below the minimum
    low_component_weight: Decimal = Decimal("1")
    # Weight when the message count is below the minimum
    low_message_weight: Decimal = Decimal("0.5")
    # Weight when no message carries grading guidance
    no_guidance_weight: Decimal = Decimal("0.5")
    # Weight when the average field count is below the minimum
    low_props_weight: Decimal = Decimal("0.5")
    # Weight per safe schema mismatch filtered upstream
    safe_mismatch_weight: Decimal = Decimal("0.3")


def default_settings() -> TriageSettings:
    """
    Return default triage thresholds and weights.

    Returns:
        TriageSettings: Default configuration values.
    """
    return TriageSettings()


@dataclass(frozen=True)
class TriagePaths:
    """
    Input and output locations for one triage run.
    """

    data_dir: Path
    report_path: Path
    analysis_path: Path
    checklist_path: Path
    curated_json_path: Path
    curated_markdown_path: Path

    @classmethod
    def under(cls, root: Path) -> "TriagePaths":
        """
        Build the conventional layout with every artifact inside `root`.

        Returns:
            TriagePaths: Paths rooted at the given directory.
        """
        return cls(
            data_dir=root,
            report_path=root / "VALIDATION_REPORT.json",
            analysis_path=root / "ANALYSIS_REPORT.json",
            checklist_path=root / "REVIEW_CHECKLIST.md",
            curated_json_path=root / "CURATED_FOLDERS.json",
            curated_markdown_path=root / "CURATED_FOLDERS.md",
        )


@dataclass(frozen=True)
class SchemaFlexibility:
    """
    Whether a component's props schema tolerates undeclared properties.
    """

    flexible: bool
    reason: str
    schema_key: str | None = None
    closest_key: str | None = None


@dataclass(frozen=True)
class IssueClassification:
    """
    Issues split into those safe to filter and those needing a human.
    """

    safe: tuple[str, ...] = ()
    needs_review: tuple[str, ...] = ()

    @property
    def all_safe(self) -> bool:
        return not self.needs_review


@dataclass(frozen=True)
class WeaknessSignals:
    """
    Structural and content completeness signals for one folder.
    """

    safe_mismatches: int = 0
    missing_files: int = 0
    component_count: int = 0
    total_props: int = 0
    message_count: int = 0
    component_usage_count: int = 0
    has_grading_guidance: bool = False

    @property
    def avg_props_per_component(self) -> Decimal:
        if self.component_count == 0:
            return Decimal("0")
        average = Decimal(self.total_props) / Decimal(self.component_count)
        return average.quantize(Decimal("0.1"))


@dataclass(frozen=True)
class WeaknessAssessment:
    """
    Weakness signals with their weighted score; higher is weaker.
    """

    signals: WeaknessSignals
    score: Decimal


@dataclass(frozen=True)
class FolderContext:
    """
    Everything gathered from disk for one folder before evaluation.
    """

    folder: FolderReport
    files: RequiredFiles
    conversation: ConversationRecord
    weakness: WeaknessAssessment


@dataclass(frozen=True)
class IssueTypes:
    """
    Categories of critical issues present for a tier 3 folder.
    """

    export_interface: bool = False
    react_node: bool = False
    props_mismatch: bool = False
    schema_mismatch: bool = False
    validation_error: bool = False


@dataclass(frozen=True)
class ChecklistEntry:
    """
    Questions a reviewer must answer for one folder.
    """

    folder_name: str
    tier: int
    questions: tuple[str, ...]
    issues: tuple[str | CheckResult, ...]


@dataclass(frozen=True)
class Tier1Verdict:
    folder_name: str
    confidence: int
    files: RequiredFiles
    ready: bool
    notes: str
    weakness: WeaknessAssessment


@dataclass(frozen=True)
class Tier2Verdict:
    folder_name: str
    confidence: int
    files: RequiredFiles
    schema_checks: dict[str, SchemaFlexibility]
    schema_checks_available: bool
    filtered_issues: tuple[str, ...]
    safe_to_filter: bool
    ready: bool
    notes: str
    weakness: WeaknessAssessment


@dataclass(frozen=True)
class Tier3Verdict:
    folder_name: str
    confidence: int
    files: RequiredFiles
    issue_types: IssueTypes
    fixable: bool
    disqualifying: bool
    ready: bool
    notes: str
    weakness: WeaknessAssessment


@dataclass(frozen=True)
class TriageResult:
    """
    Verdicts for every tier plus the folders left for human review.
    """

    tier1: tuple[Tier1Verdict, ...]
    tier2: tuple[Tier2Verdict, ...]
    tier3: tuple[Tier3Verdict, ...]
    review_checklist: tuple[ChecklistEntry, ...]


class AnalysisArtifacts(NamedTuple):
    """
    The persisted analysis and its rendered review checklist.
    """

    analysis: AnalysisOutput
    checklist: str


# Any tier's verdict; every one carries a folder name and a weakness
Verdict = Tier1Verdict | Tier2Verdict | Tier3Verdict
