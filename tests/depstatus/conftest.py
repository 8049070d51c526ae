"""Shared builders for depstatus tests."""

from __future__ import annotations

from datetime import timedelta

import pytest
from semantic_version import Version

from depstatus.core.config import Settings
from depstatus.engine.models import AnalyzeDependenciesOutcome
from depstatus.models.crates import (
    AnalyzedDependencies,
    AnalyzedDependency,
    CrateName,
    VersionReq,
)
from depstatus.models.repo import RepoPath, RepoSite


def _dep(required: str, latest: str | None = None) -> AnalyzedDependency:
    return AnalyzedDependency(
        required=VersionReq.parse(required),
        latest=Version(latest) if latest is not None else None,
    )


def _dep_map(*items: tuple[str, AnalyzedDependency]) -> dict[CrateName, AnalyzedDependency]:
    return {CrateName(name): d for name, d in items}


def _outcome(
    *crates: tuple[str, AnalyzedDependencies],
    duration: timedelta = timedelta(milliseconds=42),
) -> AnalyzeDependenciesOutcome:
    return AnalyzeDependenciesOutcome(
        crates={CrateName(name): deps for name, deps in crates},
        duration=duration,
    )


@pytest.fixture
def settings() -> Settings:
    return Settings(base_url="https://deps.rs")


@pytest.fixture
def repo_path() -> RepoPath:
    return RepoPath(site=RepoSite.GITHUB, qual="rust-lang", name="cargo")


@pytest.fixture
def up_to_date_outcome() -> AnalyzeDependenciesOutcome:
    return _outcome(
        (
            "cargo",
            AnalyzedDependencies(
                main=_dep_map(
                    ("serde", _dep(">=1.0,<2.0", "1.0.197")),
                    ("libc", _dep("0.2.150", "0.2.153")),
                ),
                dev=_dep_map(("tempfile", _dep(">=3.0", "3.10.1"))),
            ),
        )
    )


@pytest.fixture
def outdated_outcome() -> AnalyzeDependenciesOutcome:
    return _outcome(
        (
            "cargo",
            AnalyzedDependencies(
                main=_dep_map(
                    ("serde", _dep(">=1.0,<2.0", "1.0.197")),
                    ("toml", _dep("0.5.*", "0.8.10")),
                ),
                build=_dep_map(("cc", _dep(">=1.0", None))),
            ),
        ),
        ("cargo-util", AnalyzedDependencies()),
        duration=timedelta(seconds=1, microseconds=234_999),
    )
