from __future__ import annotations

import os
from dataclasses import dataclass

from dotenv import load_dotenv


load_dotenv()


DEFAULT_GECKOTERMINAL_API_BASE = "https://api.geckoterminal.com/api/v2"


def _env(name: str, default: str | None = None) -> str | None:
    return os.getenv(name, default)


@dataclass(frozen=True)
class Settings:
    geckoterminal_api_base: str
    geckoterminal_timeout_seconds: float


def get_settings() -> Settings:
    return Settings(
        geckoterminal_api_base=_env("GECKOTERMINAL_API_BASE", DEFAULT_GECKOTERMINAL_API_BASE),
        geckoterminal_timeout_seconds=float(_env("GECKOTERMINAL_TIMEOUT_SECONDS", "10")),
    )
