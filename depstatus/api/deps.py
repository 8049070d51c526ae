"""Dependency injection — collaborators stored on ``app.state`` by create_app()."""

from __future__ import annotations

from fastapi import Request

from depstatus.badge import BadgeRenderer
from depstatus.core.config import Settings
from depstatus.services.status_service import StatusService


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_status_service(request: Request) -> StatusService:
    return request.app.state.status_service


def get_badge_renderer(request: Request) -> BadgeRenderer:
    return request.app.state.badge_renderer
