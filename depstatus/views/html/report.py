"""Per-crate report sections built from an analysis outcome."""

from __future__ import annotations

from dataclasses import dataclass

from depstatus.engine.models import AnalyzeDependenciesOutcome
from depstatus.models.crates import AnalyzedDependencies, CrateName, DependencyKind
from depstatus.views.html.grouping import DependencySummary, summarize


@dataclass(frozen=True)
class CategorySection:
    """A non-empty dependency category rendered as one table."""

    kind: DependencyKind
    summary: DependencySummary

    @property
    def title(self) -> str:
        return self.kind.title


@dataclass(frozen=True)
class NoExternalDependencies:
    """Placeholder for a crate that declares no dependencies at all."""

    message: str = "No external dependencies! 🙌"


Subsection = CategorySection | NoExternalDependencies


@dataclass(frozen=True)
class CrateSection:
    name: CrateName
    subsections: tuple[Subsection, ...]


def build_crate_section(name: CrateName, deps: AnalyzedDependencies) -> CrateSection:
    if deps.is_empty():
        return CrateSection(name=name, subsections=(NoExternalDependencies(),))

    # Category order is fixed: main, dev, build. Empty categories are skipped.
    subsections = tuple(
        CategorySection(kind=kind, summary=summarize(deps.by_kind(kind)))
        for kind in (DependencyKind.MAIN, DependencyKind.DEV, DependencyKind.BUILD)
        if deps.by_kind(kind)
    )
    return CrateSection(name=name, subsections=subsections)


def build_sections(outcome: AnalyzeDependenciesOutcome) -> list[CrateSection]:
    """One section per analyzed crate, in the order the engine reported them."""
    return [build_crate_section(name, deps) for name, deps in outcome.crates.items()]
