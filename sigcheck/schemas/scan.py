import enum
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field


class Classification(str, enum.Enum):
    MATCHED = "matched"
    MISMATCHED = "mismatched"
    UNREADABLE = "unreadable"


class ClassificationOutcome(BaseModel):
    model_config = ConfigDict(frozen=True)

    path: Path
    classification: Classification


class ScanReport(BaseModel):
    """
    Paths flagged during one scan, in the order they were visited.

    Matched files are only counted; the report lists mismatching and
    unreadable files.
    """

    mismatching_extensions: list[Path] = Field(default_factory=list)
    failed_to_open: list[Path] = Field(default_factory=list)
    scanned: int = 0
    skipped: int = 0

    def record(self, outcome: ClassificationOutcome) -> None:
        self.scanned += 1
        if outcome.classification == Classification.MISMATCHED:
            self.mismatching_extensions.append(outcome.path)
        elif outcome.classification == Classification.UNREADABLE:
            self.failed_to_open.append(outcome.path)

    def record_skipped(self) -> None:
        self.skipped += 1

    @property
    def has_findings(self) -> bool:
        return bool(self.mismatching_extensions or self.failed_to_open)
