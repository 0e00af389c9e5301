"""Results of component generation runs."""

from __future__ import annotations

import enum

from pydantic import BaseModel, Field


class GeneratedComponent(BaseModel):
    icon_name: str
    component_name: str
    source: str


class IconOutcome(str, enum.Enum):
    GENERATED = "generated"
    SKIPPED = "skipped"  # overwrite declined
    CANCELLED = "cancelled"  # suggestion prompt cancelled
    NOT_FOUND = "not_found"  # no icon and no suggestions
    FAILED = "failed"


class IconResult(BaseModel):
    requested: str
    outcome: IconOutcome
    # Name actually generated; differs from `requested` when a suggestion was picked
    resolved: str | None = None
    message: str = ""


class AddSummary(BaseModel):
    """Per-batch statistics for one `add` invocation."""

    results: list[IconResult] = Field(default_factory=list)

    def with_outcome(self, outcome: IconOutcome) -> list[IconResult]:
        return [r for r in self.results if r.outcome == outcome]

    @property
    def generated(self) -> list[IconResult]:
        return self.with_outcome(IconOutcome.GENERATED)

    @property
    def failed(self) -> list[IconResult]:
        return self.with_outcome(IconOutcome.FAILED)

    @property
    def skipped(self) -> list[IconResult]:
        return self.with_outcome(IconOutcome.SKIPPED) + self.with_outcome(IconOutcome.CANCELLED)

    @property
    def not_found(self) -> list[IconResult]:
        return self.with_outcome(IconOutcome.NOT_FOUND)


class GenerationStats(BaseModel):
    """Bulk generation counters."""

    total_files: int = 0
    successful_files: int = 0
    failed_files: list[str] = Field(default_factory=list)
