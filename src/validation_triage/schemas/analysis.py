# schemas/analysis.py

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from .validation import CheckResult

_OUTPUT_CONFIG = ConfigDict(
    alias_generator=to_camel,
    populate_by_name=True,
    strict=True,
    frozen=True,
)


class FileCheckOutput(BaseModel):
    """
    Presence check for one required file.
    """

    model_config = _OUTPUT_CONFIG

    exists: bool
    size: int | None = None
    reason: str | None = None


class FileChecksOutput(BaseModel):
    """
    Presence checks for the three files every folder must ship.
    """

    model_config = _OUTPUT_CONFIG

    components_ts: FileCheckOutput
    canvas_html: FileCheckOutput
    conversation_json: FileCheckOutput


class SchemaCheckOutput(BaseModel):
    """
    Whether a component's schema tolerates props it does not declare.
    """

    model_config = _OUTPUT_CONFIG

    flexible: bool
    reason: str
    schema_key: str | None = None
    # nearest $defs key when no matching rule found one
    closest_key: str | None = None


class WeaknessOutput(BaseModel):
    """
    Completeness signals behind a folder's weakness score.
    """

    model_config = _OUTPUT_CONFIG

    safe_mismatches: int
    missing_files: int
    component_count: int
    total_props: int
    avg_props_per_component: float
    message_count: int
    component_usage_count: int
    has_grading_guidance: bool
    score: float


class Tier1VerdictOutput(BaseModel):
    """
    Verdict for a folder that passed every upstream check.
    """

    model_config = _OUTPUT_CONFIG

    folder_name: str
    confidence: int
    file_checks: FileChecksOutput
    ready: bool
    notes: str
    weakness: WeaknessOutput


class Tier2VerdictOutput(BaseModel):
    """
    Verdict for a folder whose only failures were schema mismatches.
    """

    model_config = _OUTPUT_CONFIG

    folder_name: str
    confidence: int
    file_checks: FileChecksOutput
    schema_checks: dict[str, SchemaCheckOutput]
    schema_checks_available: bool
    filtered_issues: tuple[str, ...]
    safe_to_filter: bool
    ready: bool
    notes: str
    weakness: WeaknessOutput


class IssueTypesOutput(BaseModel):
    """
    Categories of critical issues observed for a tier 3 folder.
    """

    model_config = _OUTPUT_CONFIG

    export_interface: bool
    react_node: bool
    props_mismatch: bool
    schema_mismatch: bool
    validation_error: bool


class Tier3VerdictOutput(BaseModel):
    """
    Verdict for a folder that failed at least one critical check.
    """

    model_config = _OUTPUT_CONFIG

    folder_name: str
    confidence: int
    file_checks: FileChecksOutput
    issue_types: IssueTypesOutput
    fixable: bool
    disqualifying: bool
    ready: bool
    notes: str
    weakness: WeaknessOutput


class ChecklistEntryOutput(BaseModel):
    """
    Targeted questions for a folder that still needs a human decision.
    """

    model_config = _OUTPUT_CONFIG

    folder_name: str
    tier: int
    questions: tuple[str, ...]
    issues: tuple[str | CheckResult, ...]


class AnalysisOutput(BaseModel):
    """
    Machine-readable envelope for one complete triage run.

    Produced fresh on every run and serialised with camelCase keys so
    downstream tooling can consume it unchanged.
    """

    model_config = _OUTPUT_CONFIG

    generated_at: str
    tier1: tuple[Tier1VerdictOutput, ...]
    tier2: tuple[Tier2VerdictOutput, ...]
    tier3: tuple[Tier3VerdictOutput, ...]
    file_checks: dict[str, FileChecksOutput]
    review_checklist: tuple[ChecklistEntryOutput, ...]
