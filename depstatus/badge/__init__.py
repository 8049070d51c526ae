"""Status badge rendering — flat SVG badges for repositories."""

from __future__ import annotations

import base64
from collections.abc import Callable
from dataclasses import dataclass

from depstatus.engine.models import AnalyzeDependenciesOutcome

_COLORS: dict[str, str] = {
    "up to date": "#4c1",
    "out of date": "#dfb317",
    "unknown": "#9f9f9f",
}

# Approximate advance width of Verdana 11px, good enough for short labels.
_CHAR_WIDTH = 7
_PADDING = 10


@dataclass(frozen=True)
class Badge:
    subject: str
    status: str
    color: str

    def to_svg(self) -> str:
        left = len(self.subject) * _CHAR_WIDTH + _PADDING
        right = len(self.status) * _CHAR_WIDTH + _PADDING
        total = left + right
        return (
            f'<svg xmlns="http://www.w3.org/2000/svg" width="{total}" height="20">'
            '<linearGradient id="smooth" x2="0" y2="100%">'
            '<stop offset="0" stop-color="#bbb" stop-opacity=".1"/>'
            '<stop offset="1" stop-opacity=".1"/>'
            "</linearGradient>"
            f'<mask id="round"><rect width="{total}" height="20" rx="3" fill="#fff"/></mask>'
            '<g mask="url(#round)">'
            f'<rect width="{left}" height="20" fill="#555"/>'
            f'<rect x="{left}" width="{right}" height="20" fill="{self.color}"/>'
            f'<rect width="{total}" height="20" fill="url(#smooth)"/>'
            "</g>"
            '<g fill="#fff" text-anchor="middle" '
            'font-family="DejaVu Sans,Verdana,Geneva,sans-serif" font-size="11">'
            f'<text x="{left / 2}" y="15" fill="#010101" fill-opacity=".3">{self.subject}</text>'
            f'<text x="{left / 2}" y="14">{self.subject}</text>'
            f'<text x="{left + right / 2}" y="15" fill="#010101" fill-opacity=".3">'
            f"{self.status}</text>"
            f'<text x="{left + right / 2}" y="14">{self.status}</text>'
            "</g></svg>"
        )

    def to_svg_data_uri(self) -> str:
        encoded = base64.b64encode(self.to_svg().encode("utf-8")).decode("ascii")
        return f"data:image/svg+xml;base64,{encoded}"


BadgeRenderer = Callable[[AnalyzeDependenciesOutcome | None], Badge]


def render_badge(outcome: AnalyzeDependenciesOutcome | None) -> Badge:
    """Badge for an analysis outcome; ``None`` yields the "unknown" badge."""
    if outcome is None:
        status = "unknown"
    elif outcome.any_outdated():
        status = "out of date"
    else:
        status = "up to date"
    return Badge(subject="dependencies", status=status, color=_COLORS[status])


__all__ = ["Badge", "BadgeRenderer", "render_badge"]
