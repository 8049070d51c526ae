"""Domain models shared by the engine boundary and the views."""

from depstatus.models.crates import (
    AnalyzedDependencies,
    AnalyzedDependency,
    CrateName,
    DependencyKind,
    VersionReq,
)
from depstatus.models.repo import RepoPath, RepoSite

__all__ = [
    "AnalyzedDependencies",
    "AnalyzedDependency",
    "CrateName",
    "DependencyKind",
    "RepoPath",
    "RepoSite",
    "VersionReq",
]
