# storage/files.py

import json
import logging
from dataclasses import dataclass
from pathlib import Path

logger = logging.getLogger(__name__)

COMPONENTS_FILE = "components.ts"
CANVAS_FILE = "canvas.html"
CONVERSATION_FILE = "conversation.json"

REQUIRED_FILES = (COMPONENTS_FILE, CANVAS_FILE, CONVERSATION_FILE)


@dataclass(frozen=True)
class FileCheckResult:
    """
    Presence of one file at the moment it was checked.
    """

    exists: bool
    size: int | None = None
    reason: str | None = None


@dataclass(frozen=True)
class RequiredFiles:
    """
    Presence checks for the three files every folder must ship.
    """

    components_ts: FileCheckResult
    canvas_html: FileCheckResult
    conversation_json: FileCheckResult

    def by_filename(self) -> dict[str, FileCheckResult]:
        """
        Map each required filename to its check result.

        Returns:
            dict[str, FileCheckResult]: Results keyed by filename.
        """
        return {
            COMPONENTS_FILE: self.components_ts,
            CANVAS_FILE: self.canvas_html,
            CONVERSATION_FILE: self.conversation_json,
        }

    def missing(self) -> tuple[str, ...]:
        """
        Filenames that are absent, empty or could not be checked.

        Returns:
            tuple[str, ...]: Missing filenames in canonical order.
        """
        return tuple(
            name for name, check in self.by_filename().items() if not check.exists
        )

    @property
    def all_exist(self) -> bool:
        return not self.missing()


@dataclass(frozen=True)
class ConversationRecord:
    """
    A folder's parsed conversation.json, or the reason it is unavailable.
    """

    data: dict | None = None
    problem: str | None = None

    @property
    def available(self) -> bool:
        return self.data is not None


def check_file(data_dir: Path, folder_name: str, filename: str) -> FileCheckResult:
    """
    Report whether a folder's file exists and is non-empty.

    Never raises: stat failures such as permission errors or symlink loops
    degrade to a negative result carrying the error message.

    Args:
        data_dir: Root directory holding the dataset folders.
        folder_name: Name of the dataset folder.
        filename: File expected inside the folder.

    Returns:
        FileCheckResult: Existence, size and, when negative, the reason.
    """
    path = data_dir / folder_name / filename
    try:
        if not path.exists():
            return FileCheckResult(exists=False, reason="File does not exist")
        size = path.stat().st_size
    except OSError as error:
        logger.warning("Could not check %s: %s", path, error)
        return FileCheckResult(exists=False, reason=f"Error checking file: {error}")

    if size == 0:
        return FileCheckResult(exists=False, reason="File is empty")

    return FileCheckResult(exists=True, size=size)


def check_required_files(data_dir: Path, folder_name: str) -> RequiredFiles:
    """
    Check every required file for one folder.

    Returns:
        RequiredFiles: Fresh presence results for the folder.
    """
    return RequiredFiles(
        components_ts=check_file(data_dir, folder_name, COMPONENTS_FILE),
        canvas_html=check_file(data_dir, folder_name, CANVAS_FILE),
        conversation_json=check_file(data_dir, folder_name, CONVERSATION_FILE),
    )


def load_conversation(data_dir: Path, folder_name: str) -> ConversationRecord:
    """
    Load and parse a folder's conversation.json.

    A missing, unreadable or malformed file is not fatal; the returned record
    carries the problem so callers can degrade gracefully.

    Returns:
        ConversationRecord: Parsed data, or a description of the problem.
    """
    path = data_dir / folder_name / CONVERSATION_FILE

    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        return ConversationRecord(problem=f"{CONVERSATION_FILE} not found")
    except (OSError, UnicodeDecodeError) as error:
        logger.warning("Could not read %s: %s", path, error)
        return ConversationRecord(problem=f"{CONVERSATION_FILE} unreadable: {error}")

    try:
        data = json.loads(text)
    except json.JSONDecodeError as error:
        logger.warning("Malformed JSON in %s: %s", path, error)
        return ConversationRecord(
            problem=f"{CONVERSATION_FILE} is not valid JSON: {error}",
        )

    if not isinstance(data, dict):
        return ConversationRecord(
            problem=f"{CONVERSATION_FILE} does not contain a JSON object",
        )

    return ConversationRecord(data=data)


def read_components_source(data_dir: Path, folder_name: str) -> str | None:
    """
    Read a folder's components.ts source.

    Returns:
        str | None: The file contents, or None if it cannot be read.
    """
    path = data_dir / folder_name / COMPONENTS_FILE
    try:
        return path.read_text(encoding="utf-8")
    except FileNotFoundError:
        return None
    except (OSError, UnicodeDecodeError) as error:
        logger.warning("Could not read %s: %s", path, error)
        return None
