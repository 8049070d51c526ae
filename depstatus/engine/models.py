"""Data models produced by the dependency analysis engine."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import timedelta

from depstatus.models.crates import AnalyzedDependencies, CrateName


@dataclass(frozen=True)
class AnalyzeDependenciesOutcome:
    """Result of analyzing every crate of one repository."""

    crates: dict[CrateName, AnalyzedDependencies] = field(default_factory=dict)
    duration: timedelta = field(default_factory=timedelta)

    def __post_init__(self) -> None:
        if self.duration < timedelta(0):
            raise ValueError("analysis duration must not be negative")

    def any_outdated(self) -> bool:
        return any(deps.any_outdated() for deps in self.crates.values())

    def count_total(self) -> int:
        return sum(deps.count_total() for deps in self.crates.values())

    def count_outdated(self) -> int:
        return sum(deps.count_outdated() for deps in self.crates.values())
