# schemas/curated.py

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

_CURATED_CONFIG = ConfigDict(
    alias_generator=to_camel,
    populate_by_name=True,
    strict=True,
    frozen=True,
)


class CuratedFolder(BaseModel):
    """
    One folder's placement in the curated delivery list.
    """

    model_config = _CURATED_CONFIG

    folder_name: str
    reason: str
    notes: str
    tier: int
    confidence: int | None = None
    filtered_issues: tuple[str, ...] | None = None
    fixable: bool = False


class CuratedSummary(BaseModel):
    """
    Headline counts for a curated list.
    """

    model_config = _CURATED_CONFIG

    total: int
    included: int
    excluded: int


class CuratedList(BaseModel):
    """
    Folders partitioned into delivery buckets from a completed analysis.
    """

    model_config = _CURATED_CONFIG

    generated_at: str
    high_confidence: tuple[CuratedFolder, ...]
    medium_confidence: tuple[CuratedFolder, ...]
    excluded: tuple[CuratedFolder, ...]
    summary: CuratedSummary
