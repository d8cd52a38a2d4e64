# storage/__init__.py

from .files import (
    REQUIRED_FILES,
    ConversationRecord,
    FileCheckResult,
    RequiredFiles,
    check_file,
    check_required_files,
    load_conversation,
    read_components_source,
)
from .reports import (
    dump_model,
    load_analysis_output,
    load_validation_report,
    write_artifacts,
)

__all__ = [
    # files
    "REQUIRED_FILES",
    "ConversationRecord",
    "FileCheckResult",
    "RequiredFiles",
    "check_file",
    "check_required_files",
    "load_conversation",
    "read_components_source",
    # reports
    "dump_model",
    "load_analysis_output",
    "load_validation_report",
    "write_artifacts",
]
