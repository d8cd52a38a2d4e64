# schemas/__init__.py

from .analysis import (
    AnalysisOutput,
    ChecklistEntryOutput,
    FileCheckOutput,
    FileChecksOutput,
    IssueTypesOutput,
    SchemaCheckOutput,
    Tier1VerdictOutput,
    Tier2VerdictOutput,
    Tier3VerdictOutput,
    WeaknessOutput,
)
from .curated import CuratedFolder, CuratedList, CuratedSummary
from .validation import (
    CheckMetadata,
    CheckReport,
    CheckResult,
    FolderReport,
    ValidationReport,
)

__all__ = [
    # validation input
    "CheckMetadata",
    "CheckReport",
    "CheckResult",
    "FolderReport",
    "ValidationReport",
    # analysis output
    "AnalysisOutput",
    "ChecklistEntryOutput",
    "FileCheckOutput",
    "FileChecksOutput",
    "IssueTypesOutput",
    "SchemaCheckOutput",
    "Tier1VerdictOutput",
    "Tier2VerdictOutput",
    "Tier3VerdictOutput",
    "WeaknessOutput",
    # curation
    "CuratedFolder",
    "CuratedList",
    "CuratedSummary",
]
