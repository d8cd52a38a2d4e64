# validation_triage/exceptions.py

from pathlib import Path


class TriageError(Exception):
    """
    Base class for failures that abort a triage run.
    """


class ReportLoadError(TriageError):
    """
    Raised when an input report is missing, unreadable or malformed.
    """

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"Failed to load report {path}: {reason}")
        self.path = path
        self.reason = reason


class ArtifactWriteError(TriageError):
    """
    Raised when an output artifact cannot be written.
    """

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"Failed to write artifact {path}: {reason}")
        self.path = path
        self.reason = reason
