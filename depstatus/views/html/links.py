"""Canonical status URLs and badge embed snippets.

The snippet strings are pasted verbatim into READMEs; their exact bytes
are part of the public contract.
"""

from __future__ import annotations

from dataclasses import dataclass

from depstatus.models.repo import RepoPath

ALT_TEXT = "dependency status"


@dataclass(frozen=True)
class BadgeLinks:
    self_url: str

    @classmethod
    def for_repo(cls, base_url: str, repo_path: RepoPath) -> BadgeLinks:
        self_url = (
            f"{base_url}/repo/{repo_path.site.slug}/{repo_path.qual}/{repo_path.name}"
        )
        return cls(self_url=self_url)

    @property
    def status_image_url(self) -> str:
        return f"{self.self_url}/status.svg"

    @property
    def markdown(self) -> str:
        return f"[![{ALT_TEXT}]({self.status_image_url})]({self.self_url})\n"

    @property
    def asciidoc(self) -> str:
        return f'image::{self.status_image_url}[link="{self.self_url}",alt="{ALT_TEXT}"]\n'
