"""Tests for canonical status URLs and embed snippets.

The snippet strings are copied verbatim by users; these tests pin them byte for byte.
"""

from __future__ import annotations

import pytest

from depstatus.models.repo import RepoPath, RepoSite
from depstatus.views.html.links import BadgeLinks


@pytest.fixture
def links():
    return BadgeLinks.for_repo(
        "https://deps.rs", RepoPath(site=RepoSite.GITHUB, qual="rust-lang", name="cargo")
    )


class TestBadgeLinks:
    def test_self_url(self, links):
        assert links.self_url == "https://deps.rs/repo/github/rust-lang/cargo"

    def test_status_image_url(self, links):
        assert links.status_image_url == "https://deps.rs/repo/github/rust-lang/cargo/status.svg"

    def test_markdown_snippet(self, links):
        assert links.markdown == (
            "[![dependency status](https://deps.rs/repo/github/rust-lang/cargo/status.svg)]"
            "(https://deps.rs/repo/github/rust-lang/cargo)\n"
        )

    def test_asciidoc_snippet(self, links):
        assert links.asciidoc == (
            "image::https://deps.rs/repo/github/rust-lang/cargo/status.svg"
            '[link="https://deps.rs/repo/github/rust-lang/cargo",alt="dependency status"]\n'
        )

    @pytest.mark.parametrize(
        "site,slug",
        [(RepoSite.GITHUB, "github"), (RepoSite.GITLAB, "gitlab"), (RepoSite.BITBUCKET, "bitbucket")],
    )
    def test_site_slug_in_url(self, site, slug):
        links = BadgeLinks.for_repo("http://localhost:8080", RepoPath(site, "org", "repo"))
        assert links.self_url == f"http://localhost:8080/repo/{slug}/org/repo"
