"""Crate dependency models — names, version requirements, analysis results."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from enum import Enum
from typing import assert_never

from semantic_version import Version

from depstatus.models.semver import VersionReq

_CRATE_NAME_RE = re.compile(r"^[A-Za-z0-9_-]+$")


class CrateName(str):
    """Validated crate name. Behaves as a plain ``str`` once constructed."""

    __slots__ = ()

    def __new__(cls, value: str) -> CrateName:
        if not value:
            raise ValueError("crate name must not be empty")
        if not _CRATE_NAME_RE.match(value):
            raise ValueError(f"invalid crate name: {value!r}")
        return super().__new__(cls, value)


@dataclass(frozen=True)
class AnalyzedDependency:
    """One declared dependency together with the newest known release."""

    required: VersionReq
    latest: Version | None = None

    @property
    def outdated(self) -> bool:
        # An unknown latest version never counts as outdated.
        if self.latest is None:
            return False
        return not self.required.matches(self.latest)


class DependencyKind(Enum):
    """Dependency categories of a single crate manifest."""

    MAIN = "main"
    DEV = "dev"
    BUILD = "build"

    @property
    def title(self) -> str:
        match self:
            case DependencyKind.MAIN:
                return "Dependencies"
            case DependencyKind.DEV:
                return "Dev dependencies"
            case DependencyKind.BUILD:
                return "Build dependencies"
            case _:
                assert_never(self)


@dataclass(frozen=True)
class AnalyzedDependencies:
    """Main, dev and build dependencies of one crate, in manifest order."""

    main: dict[CrateName, AnalyzedDependency] = field(default_factory=dict)
    dev: dict[CrateName, AnalyzedDependency] = field(default_factory=dict)
    build: dict[CrateName, AnalyzedDependency] = field(default_factory=dict)

    def by_kind(self, kind: DependencyKind) -> dict[CrateName, AnalyzedDependency]:
        match kind:
            case DependencyKind.MAIN:
                return self.main
            case DependencyKind.DEV:
                return self.dev
            case DependencyKind.BUILD:
                return self.build
            case _:
                assert_never(kind)

    def is_empty(self) -> bool:
        return not (self.main or self.dev or self.build)

    def count_total(self) -> int:
        return len(self.main) + len(self.dev) + len(self.build)

    def count_outdated(self) -> int:
        return sum(
            1
            for kind in DependencyKind
            for dep in self.by_kind(kind).values()
            if dep.outdated
        )

    def any_outdated(self) -> bool:
        return any(
            dep.outdated for kind in DependencyKind for dep in self.by_kind(kind).values()
        )
