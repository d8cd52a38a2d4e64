# evaluators/_helpers.py

from validation_triage.storage import REQUIRED_FILES, ConversationRecord, RequiredFiles

REQUIRED_FILES_LABEL = ", ".join(REQUIRED_FILES)


def describe_missing_files(files: RequiredFiles) -> str:
    """
    Describe which required files are missing and why.

    Returns:
        str: e.g. "canvas.html (File does not exist)", or "" if none missing.
    """
    checks = files.by_filename()
    return ", ".join(f"{name} ({checks[name].reason})" for name in files.missing())


def conversation_note(conversation: ConversationRecord) -> str | None:
    """
    Describe why a folder's conversation record could not be used.

    Returns:
        str | None: e.g. "conversation unavailable: conversation.json not
            found", or None when the record loaded.
    """
    if conversation.problem is None:
        return None
    return f"conversation unavailable: {conversation.problem}"
