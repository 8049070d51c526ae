"""Repository status page — dependency tables, badge and embed snippets."""

from __future__ import annotations

from typing import assert_never

import structlog

from depstatus.badge import BadgeRenderer, render_badge
from depstatus.core.config import Settings
from depstatus.engine.models import AnalyzeDependenciesOutcome
from depstatus.models.repo import RepoPath, RepoSite
from depstatus.views.html import (
    Document,
    esc,
    render_footer,
    render_html,
    render_navbar,
)
from depstatus.views.html.grouping import NOT_AVAILABLE, DependencySummary
from depstatus.views.html.links import BadgeLinks
from depstatus.views.html.report import (
    CategorySection,
    CrateSection,
    NoExternalDependencies,
    build_sections,
)

log = structlog.get_logger("depstatus.views")


def get_site_icon(site: RepoSite) -> str:
    match site:
        case RepoSite.GITHUB:
            return "fa-github"
        case RepoSite.GITLAB:
            return "fa-gitlab"
        case RepoSite.BITBUCKET:
            return "fa-bitbucket"
        case _:
            assert_never(site)


def hero_class(outcome: AnalyzeDependenciesOutcome | None) -> str:
    if outcome is None:
        return "is-danger"
    return "is-warning" if outcome.any_outdated() else "is-success"


def _render_repo_title(repo_path: RepoPath) -> str:
    icon = get_site_icon(repo_path.site)
    return (
        '<h1 class="title is-1">'
        f'<a href="{esc(repo_path.origin_url)}">'
        f'<i class="fa {icon}"></i> {esc(repo_path.display_name)}'
        "</a></h1>"
    )


def _render_table(title: str, summary: DependencySummary) -> str:
    rows: list[str] = []
    for row in summary.rows:
        if row.latest is not None:
            latest = f"<code>{esc(row.latest)}</code>"
        else:
            latest = NOT_AVAILABLE
        tag = "is-warning" if row.outdated else "is-success"
        rows.append(
            "<tr>"
            f'<td><a href="{esc(row.crate_url)}">{esc(row.name)}</a></td>'
            f'<td class="has-text-right"><code>{esc(row.required)}</code></td>'
            f'<td class="has-text-right">{latest}</td>'
            f'<td class="has-text-right"><span class="tag {tag}">{row.status}</span></td>'
            "</tr>"
        )
    body = "\n".join(rows)
    return f"""\
<h3 class="title is-4">{esc(title)}</h3>
<p class="subtitle is-5">{summary.text}</p>
<table class="table is-fullwidth is-striped is-hoverable">
<thead>
<tr><th>Crate</th><th class="has-text-right">Required</th>\
<th class="has-text-right">Latest</th><th class="has-text-right">Status</th></tr>
</thead>
<tbody>
{body}
</tbody>
</table>"""


def _render_crate_section(section: CrateSection) -> str:
    parts = [f'<h2 class="title is-3">Crate <code>{esc(section.name)}</code></h2>']
    for sub in section.subsections:
        match sub:
            case NoExternalDependencies():
                parts.append(f'<p class="notification has-text-centered">{esc(sub.message)}</p>')
            case CategorySection():
                parts.append(_render_table(sub.title, sub.summary))
            case _:
                assert_never(sub)
    return "\n".join(parts)


def _render_snippets(links: BadgeLinks) -> str:
    return f"""\
<div class="hero-footer">
<div class="container">
<div class="tabs">
<ul>
<li class="is-active"><a href="#markdown">Markdown</a></li>
<li><a href="#asciidoc">Asciidoc</a></li>
</ul>
</div>
</div>
<div class="container">
<div class="sources">
<div id="markdown" class="is-active"><pre class="is-size-7">{esc(links.markdown)}</pre></div>
<div id="asciidoc" class="is-hidden"><pre class="is-size-7">{esc(links.asciidoc)}</pre></div>
</div>
</div>
</div>"""


def render_failure(repo_path: RepoPath, settings: Settings) -> str:
    return f"""\
<section class="hero {hero_class(None)}">
<div class="hero-head">{render_navbar(settings)}</div>
<div class="hero-body">
<div class="container">
{_render_repo_title(repo_path)}
</div>
</div>
</section>
<section class="section">
<div class="container">
<div class="notification is-danger">
<h2 class="title is-3">Failed to analyze repository</h2>
<p>The repository you requested might be structured in an uncommon way \
that is not yet supported.</p>
</div>
</div>
</section>
{render_footer(None)}"""


def render_success(
    outcome: AnalyzeDependenciesOutcome,
    repo_path: RepoPath,
    settings: Settings,
    badge_renderer: BadgeRenderer = render_badge,
) -> str:
    links = BadgeLinks.for_repo(settings.base_url, repo_path)
    # Inline the badge so viewers need no second request.
    status_data_uri = badge_renderer(outcome).to_svg_data_uri()
    sections = "\n".join(_render_crate_section(s) for s in build_sections(outcome))

    return f"""\
<section class="hero {hero_class(outcome)}">
<div class="hero-head">{render_navbar(settings)}</div>
<div class="hero-body">
<div class="container">
{_render_repo_title(repo_path)}
<img src="{esc(status_data_uri)}">
</div>
</div>
{_render_snippets(links)}
</section>
<section class="section">
<div class="container">
{sections}
</div>
</section>
{render_footer(outcome.duration)}"""


def render(
    outcome: AnalyzeDependenciesOutcome | None,
    repo_path: RepoPath,
    *,
    settings: Settings,
    badge_renderer: BadgeRenderer = render_badge,
) -> Document:
    """Render the status page; a missing outcome yields the failure page."""
    title = repo_path.display_name
    if outcome is None:
        log.debug("status.render_failure", site=repo_path.site.slug, repo=title)
        return render_html(title, render_failure(repo_path, settings), settings)

    log.debug(
        "status.render_success",
        site=repo_path.site.slug,
        repo=title,
        crates=len(outcome.crates),
        outdated=outcome.count_outdated(),
    )
    return render_html(
        title, render_success(outcome, repo_path, settings, badge_renderer), settings
    )
