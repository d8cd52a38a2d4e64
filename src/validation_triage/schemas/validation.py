# schemas/validation.py

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


def _none_to_empty(value: object) -> object:
    """
    Map an explicit JSON null to an empty collection.

    Returns:
        object: () for None, otherwise the value unchanged.
    """
    return () if value is None else value


class CheckMetadata(BaseModel):
    """
    Optional metadata attached to a check result by the upstream validator.

    Only the safe-mismatch counter is interpreted; any other keys are kept
    untouched so they survive a round trip into the analysis output.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="allow",
        frozen=True,
    )

    # absent or null counter means no safe mismatches were filtered
    total_safe_mismatches: int = 0

    @field_validator("total_safe_mismatches", mode="before")
    @classmethod
    def _none_to_zero(cls, value: object) -> object:
        return 0 if value is None else value


class CheckResult(BaseModel):
    """
    Outcome of one named validation rule for a single folder.

    Each entry in `details` describes one violation and may be prefixed with
    a dotted component name, e.g. "TaskList.items: missing from schema".
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
        frozen=True,
    )

    check: str
    passed: bool = False
    message: str = ""
    details: tuple[str, ...] = ()
    metadata: CheckMetadata | None = None

    @field_validator("details", mode="before")
    @classmethod
    def _none_to_empty_details(cls, value: object) -> object:
        return _none_to_empty(value)


class CheckReport(BaseModel):
    """
    Container for every check result produced for one folder.
    """

    model_config = ConfigDict(extra="ignore", frozen=True)

    results: tuple[CheckResult, ...] = ()

    @field_validator("results", mode="before")
    @classmethod
    def _none_to_empty_results(cls, value: object) -> object:
        return _none_to_empty(value)

    def find(self, check_name: str) -> CheckResult | None:
        """
        Return the first result for the named check, if any.

        Returns:
            CheckResult | None: The matching result, or None if absent.
        """
        return next(
            (result for result in self.results if result.check == check_name),
            None,
        )


class FolderReport(BaseModel):
    """
    Upstream validation outcome for one component dataset folder.

    `folder_name` is the join key used to locate the folder's files. Optional
    collections default to empty, whether absent or null, so callers never
    have to special-case missing keys.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
        frozen=True,
    )

    folder_name: str = Field(min_length=1)
    # folders that crashed the validator carry no report
    report: CheckReport = CheckReport()
    filtered_issues: tuple[str, ...] = ()
    critical_issues: tuple[CheckResult, ...] = ()
    error: str | None = None

    @field_validator("filtered_issues", "critical_issues", mode="before")
    @classmethod
    def _none_to_empty_issues(cls, value: object) -> object:
        return _none_to_empty(value)

    @field_validator("report", mode="before")
    @classmethod
    def _none_to_empty_report(cls, value: object) -> object:
        return CheckReport() if value is None else value


class ValidationReport(BaseModel):
    """
    Top-level validator output: folders already partitioned into three tiers.
    """

    model_config = ConfigDict(extra="ignore", frozen=True)

    tier1: tuple[FolderReport, ...] = ()
    tier2: tuple[FolderReport, ...] = ()
    tier3: tuple[FolderReport, ...] = ()

    @field_validator("tier1", "tier2", "tier3", mode="before")
    @classmethod
    def _none_to_empty_tiers(cls, value: object) -> object:
        return _none_to_empty(value)
