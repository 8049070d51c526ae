"""Process-wide settings, resolved once at startup."""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass

DEFAULT_BASE_URL = "http://localhost:8080"


@dataclass(frozen=True)
class Settings:
    """Immutable service configuration passed explicitly to the views."""

    base_url: str = DEFAULT_BASE_URL
    gauges_site_id: str | None = None
    log_level: str = "INFO"
    log_format: str = "console"


def load_settings(environ: Mapping[str, str] | None = None) -> Settings:
    """Read settings from the environment.

    Reads:
        DEPSTATUS_BASE_URL        — canonical base URL (default: http://localhost:8080)
        DEPSTATUS_GAUGES_SITE_ID  — Gauges analytics site id (optional)
        DEPSTATUS_LOG_LEVEL       — log level (default: INFO)
        DEPSTATUS_LOG_FORMAT      — console | json (default: console)
    """
    env = os.environ if environ is None else environ

    base_url = env.get("DEPSTATUS_BASE_URL", "").strip().rstrip("/") or DEFAULT_BASE_URL
    gauges_site_id = env.get("DEPSTATUS_GAUGES_SITE_ID", "").strip() or None

    return Settings(
        base_url=base_url,
        gauges_site_id=gauges_site_id,
        log_level=env.get("DEPSTATUS_LOG_LEVEL", "INFO").upper(),
        log_format=env.get("DEPSTATUS_LOG_FORMAT", "console").lower(),
    )
