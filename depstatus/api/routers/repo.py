"""Repository status router — HTML status page and SVG badge."""

from __future__ import annotations

from fastapi import APIRouter, Depends
from fastapi.responses import HTMLResponse, Response

from depstatus.api.deps import get_badge_renderer, get_settings, get_status_service
from depstatus.badge import BadgeRenderer
from depstatus.core.config import Settings
from depstatus.services.status_service import StatusService, parse_repo_path
from depstatus.views.html import status as status_view

router = APIRouter()


@router.get("/{site}/{qual}/{name}/status.svg")
async def get_status_badge(
    site: str,
    qual: str,
    name: str,
    svc: StatusService = Depends(get_status_service),
    badge_renderer: BadgeRenderer = Depends(get_badge_renderer),
) -> Response:
    repo_path = parse_repo_path(site, qual, name)
    outcome = await svc.analyze(repo_path)
    return Response(
        content=badge_renderer(outcome).to_svg(),
        media_type="image/svg+xml",
        headers={"Cache-Control": "no-cache, no-store, must-revalidate"},
    )


@router.get("/{site}/{qual}/{name}", response_class=HTMLResponse)
async def get_status_page(
    site: str,
    qual: str,
    name: str,
    svc: StatusService = Depends(get_status_service),
    settings: Settings = Depends(get_settings),
    badge_renderer: BadgeRenderer = Depends(get_badge_renderer),
) -> HTMLResponse:
    repo_path = parse_repo_path(site, qual, name)
    outcome = await svc.analyze(repo_path)
    document = status_view.render(
        outcome, repo_path, settings=settings, badge_renderer=badge_renderer
    )
    return HTMLResponse(content=document.body, media_type=document.media_type)
