# evaluators/__init__.py

from ._helpers import conversation_note, describe_missing_files
from .tier_one import evaluate_tier_one
from .tier_three import (
    categorise_issues,
    evaluate_tier_three,
    is_disqualifying,
    is_fixable,
)
from .tier_two import evaluate_tier_two, mismatched_components

__all__ = [
    "categorise_issues",
    "conversation_note",
    "describe_missing_files",
    "evaluate_tier_one",
    "evaluate_tier_three",
    "evaluate_tier_two",
    "is_disqualifying",
    "is_fixable",
    "mismatched_components",
]
