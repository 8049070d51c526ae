"""StatusService — run the analysis engine for one repository."""

from __future__ import annotations

import time

import structlog

from depstatus.engine.base import AnalysisEngine, AnalysisError
from depstatus.engine.models import AnalyzeDependenciesOutcome
from depstatus.models.repo import RepoPath
from depstatus.services import NotFoundError

log = structlog.get_logger("depstatus.service")


def parse_repo_path(site: str, qual: str, name: str) -> RepoPath:
    """Build a RepoPath from URL segments, mapping bad input to NotFoundError."""
    try:
        return RepoPath.from_parts(site, qual, name)
    except ValueError as exc:
        raise NotFoundError(str(exc)) from exc


class StatusService:
    """Turns engine failures into a missing outcome instead of an error."""

    def __init__(self, engine: AnalysisEngine) -> None:
        self._engine = engine

    async def analyze(self, repo_path: RepoPath) -> AnalyzeDependenciesOutcome | None:
        start = time.perf_counter()
        try:
            outcome = await self._engine.analyze_repo_dependencies(repo_path)
        except AnalysisError as exc:
            log.warning(
                "analysis.failed",
                site=repo_path.site.slug,
                qual=repo_path.qual,
                name=repo_path.name,
                error=str(exc),
            )
            return None

        log.info(
            "analysis.completed",
            site=repo_path.site.slug,
            qual=repo_path.qual,
            name=repo_path.name,
            crates=len(outcome.crates),
            total=outcome.count_total(),
            outdated=outcome.count_outdated(),
            duration_ms=round((time.perf_counter() - start) * 1000, 1),
        )
        return outcome
