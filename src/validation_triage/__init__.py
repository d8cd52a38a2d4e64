# validation_triage/__init__.py

from .domain import (
    TriagePaths,
    TriageSettings,
    analyse_validation_report,
    curate_analysis,
    default_settings,
    run_triage,
)
from .schemas import AnalysisOutput, CuratedList, ValidationReport

__all__ = [
    "analyse_validation_report",
    "curate_analysis",
    "default_settings",
    "run_triage",
    "AnalysisOutput",
    "CuratedList",
    "TriagePaths",
    "TriageSettings",
    "ValidationReport",
]
