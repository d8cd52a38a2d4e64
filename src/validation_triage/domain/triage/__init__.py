# triage/__init__.py

from .analyse import analyse_validation_report, build_context, run_triage
from .checklist import format_issue, render_review_checklist
from .curation import build_curated_list, curate_analysis, render_curated_markdown
from .issues import SAFE_ISSUE_MARKER, classify_issues, is_safe_issue
from .models import (
    AnalysisArtifacts,
    TriagePaths,
    TriageSettings,
    Verdict,
    default_settings,
)
from .report import build_analysis_output, save_analysis_artifacts
from .schema_flexibility import (
    SCHEMA_KEY_RULES,
    ComponentSchemaIndex,
    resolve_schema_flexibility,
)
from .weakness import (
    assess_weakness,
    collect_signals,
    exclusion_candidates,
    rank_by_weakness,
    score_weakness,
    strongest,
)

__all__ = [
    "SAFE_ISSUE_MARKER",
    "SCHEMA_KEY_RULES",
    "AnalysisArtifacts",
    "ComponentSchemaIndex",
    "TriagePaths",
    "TriageSettings",
    "Verdict",
    "analyse_validation_report",
    "assess_weakness",
    "build_analysis_output",
    "build_context",
    "build_curated_list",
    "classify_issues",
    "collect_signals",
    "curate_analysis",
    "default_settings",
    "exclusion_candidates",
    "format_issue",
    "is_safe_issue",
    "rank_by_weakness",
    "render_curated_markdown",
    "render_review_checklist",
    "resolve_schema_flexibility",
    "run_triage",
    "save_analysis_artifacts",
    "score_weakness",
    "strongest",
]
