"""Repository identity — hosting site and owner/name path."""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from typing import assert_never
from urllib.parse import quote

_SEGMENT_RE = re.compile(r"^[A-Za-z0-9._-]+$")


class RepoSite(Enum):
    """Supported code hosting sites."""

    GITHUB = "github"
    GITLAB = "gitlab"
    BITBUCKET = "bitbucket"

    @property
    def slug(self) -> str:
        return self.value

    @property
    def base_uri(self) -> str:
        match self:
            case RepoSite.GITHUB:
                return "https://github.com"
            case RepoSite.GITLAB:
                return "https://gitlab.com"
            case RepoSite.BITBUCKET:
                return "https://bitbucket.org"
            case _:
                assert_never(self)

    @classmethod
    def from_slug(cls, slug: str) -> RepoSite:
        try:
            return cls(slug)
        except ValueError:
            raise ValueError(f"unsupported repository site: {slug!r}") from None


def _validate_segment(kind: str, value: str) -> None:
    if not value:
        raise ValueError(f"repository {kind} must not be empty")
    if not _SEGMENT_RE.match(value):
        raise ValueError(f"invalid repository {kind}: {value!r}")


@dataclass(frozen=True)
class RepoPath:
    """A single repository on a hosting site (``site/qual/name``)."""

    site: RepoSite
    qual: str
    name: str

    def __post_init__(self) -> None:
        _validate_segment("qualifier", self.qual)
        _validate_segment("name", self.name)

    @classmethod
    def from_parts(cls, site: str, qual: str, name: str) -> RepoPath:
        """Build from raw URL path segments. Raises ValueError on bad input."""
        return cls(site=RepoSite.from_slug(site), qual=qual, name=name)

    @property
    def origin_url(self) -> str:
        return f"{self.site.base_uri}/{quote(self.qual, safe='')}/{quote(self.name, safe='')}"

    @property
    def display_name(self) -> str:
        return f"{self.qual} / {self.name}"
