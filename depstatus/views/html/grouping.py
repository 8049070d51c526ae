"""Per-category dependency summaries and table rows."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass

from depstatus.models.crates import AnalyzedDependency, CrateName

NOT_AVAILABLE = "N/A"


@dataclass(frozen=True)
class DependencyRow:
    name: CrateName
    required: str
    latest: str | None
    outdated: bool

    @property
    def status(self) -> str:
        return "out of date" if self.outdated else "up to date"

    @property
    def crate_url(self) -> str:
        return f"https://crates.io/crates/{self.name}"


@dataclass(frozen=True)
class DependencySummary:
    count_total: int
    count_outdated: int
    rows: tuple[DependencyRow, ...]

    @property
    def count_up_to_date(self) -> int:
        return self.count_total - self.count_outdated

    @property
    def text(self) -> str:
        if self.count_outdated == 0:
            return f"({self.count_total} total, all up-to-date)"
        return (
            f"({self.count_total} total, {self.count_up_to_date} up-to-date, "
            f"{self.count_outdated} outdated)"
        )


def summarize(deps: Mapping[CrateName, AnalyzedDependency]) -> DependencySummary:
    """Count and project one dependency category, keeping manifest order."""
    rows = tuple(
        DependencyRow(
            name=name,
            required=str(dep.required),
            latest=str(dep.latest) if dep.latest is not None else None,
            outdated=dep.outdated,
        )
        for name, dep in deps.items()
    )
    return DependencySummary(
        count_total=len(rows),
        count_outdated=sum(1 for row in rows if row.outdated),
        rows=rows,
    )
