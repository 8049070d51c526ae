"""HTML page chrome — document shell, navbar, footer, escaping helpers."""

from __future__ import annotations

import json
from dataclasses import dataclass
from datetime import timedelta

from depstatus.core.config import Settings

HTML_MEDIA_TYPE = "text/html"

_STYLESHEETS = (
    "/static/style.css",
    "https://fonts.googleapis.com/css?family=Fira+Sans:400,500,600",
    "https://fonts.googleapis.com/css?family=Source+Code+Pro",
    "https://maxcdn.bootstrapcdn.com/font-awesome/4.7.0/css/font-awesome.min.css",
)

_GAUGES_SNIPPET = """\
var _gauges = _gauges || [];
(function() {
    var t   = document.createElement('script');
    t.type  = 'text/javascript';
    t.async = true;
    t.id    = 'gauges-tracker';
    t.setAttribute('data-site-id', %s);
    t.setAttribute('data-track-path', 'https://track.gaug.es/track.gif');
    t.src = 'https://d2fuc4clr7gvcn.cloudfront.net/track.js';
    var s = document.getElementsByTagName('script')[0];
    s.parentNode.insertBefore(t, s);
})();"""


@dataclass(frozen=True)
class Document:
    """A fully rendered page, ready to be served as-is."""

    body: str
    media_type: str = HTML_MEDIA_TYPE


def esc(text: str) -> str:
    """Escape text for HTML element content and double-quoted attributes."""
    return (
        text.replace("&", "&amp;")
        .replace("<", "&lt;")
        .replace(">", "&gt;")
        .replace('"', "&quot;")
        .replace("'", "&#x27;")
    )


def render_html(title: str, body: str, settings: Settings) -> Document:
    links = "\n".join(
        f'<link rel="stylesheet" type="text/css" href="{esc(href)}">' for href in _STYLESHEETS
    )
    tracker = ""
    if settings.gauges_site_id is not None:
        site_id = json.dumps(settings.gauges_site_id).replace("</", "<\\/")
        tracker = f'\n<script type="text/javascript">{_GAUGES_SNIPPET % site_id}</script>'

    page = f"""\
<!DOCTYPE html>
<html>
<head>
<meta charset="utf-8">
<meta name="viewport" content="width=device-width, initial-scale=1">
<title>{esc(title)} - Deps.rs</title>
{links}
</head>
<body>
{body}
<script type="text/javascript" src="/static/app.js"></script>{tracker}
</body>
</html>
"""
    return Document(body=page)


def render_navbar(settings: Settings) -> str:
    return f"""\
<header class="navbar">
<div class="container">
<div class="navbar-brand">
<a class="navbar-item is-dark" href="{esc(settings.base_url)}"><h1 class="title is-3">Deps.rs</h1></a>
</div>
</div>
</header>"""


def duration_millis(duration: timedelta) -> int:
    """Whole milliseconds of ``duration``, sub-millisecond remainder dropped."""
    seconds = duration.days * 86_400 + duration.seconds
    return seconds * 1000 + duration.microseconds // 1000


def render_footer(duration: timedelta | None) -> str:
    timing = ""
    if duration is not None:
        timing = (
            '\n<p class="has-text-grey is-size-7">'
            f"(rendered in {duration_millis(duration)} ms)</p>"
        )
    return f"""\
<footer class="footer">
<div class="container">
<div class="content has-text-centered">
<p><strong>Deps.rs</strong> is a service for the Rust community. It is open source on \
<a href="https://github.com/srijs/deps.rs">GitHub</a>.</p>
<p>Please report any issues on the \
<a href="https://github.com/srijs/deps.rs/issues">issue tracker</a>.</p>{timing}
</div>
</div>
</footer>"""
