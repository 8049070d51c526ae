"""Interface of the external dependency analysis engine."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from depstatus.engine.models import AnalyzeDependenciesOutcome
from depstatus.models.repo import RepoPath


class AnalysisError(Exception):
    """The repository could not be analyzed (missing or unsupported manifests)."""


@runtime_checkable
class AnalysisEngine(Protocol):
    """Fetches manifests, resolves latest versions and computes an outcome."""

    async def analyze_repo_dependencies(
        self, repo_path: RepoPath
    ) -> AnalyzeDependenciesOutcome: ...
