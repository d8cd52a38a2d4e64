# domain/__init__.py

from .triage import (
    TriagePaths,
    TriageSettings,
    analyse_validation_report,
    curate_analysis,
    default_settings,
    run_triage,
)

__all__ = [
    "TriagePaths",
    "TriageSettings",
    "analyse_validation_report",
    "curate_analysis",
    "default_settings",
    "run_triage",
]
