from __future__ import annotations

from geckotail.infrastructure.clients.geckoterminal_client import GeckoTerminalClient
from geckotail.shared.config import Settings, get_settings


def get_geckoterminal_client(settings: Settings | None = None) -> GeckoTerminalClient:
    settings = settings or get_settings()
    return GeckoTerminalClient(
        settings.geckoterminal_api_base,
        timeout_seconds=settings.geckoterminal_timeout_seconds,
    )
