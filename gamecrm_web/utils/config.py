from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional

from dotenv import load_dotenv

ENV_PATH = Path(__file__).parent.parent.parent / ".env"

DEFAULT_PORT = 3000
DEFAULT_HOST = "0.0.0.0"
DEFAULT_API_BASE = "https://api.hubapi.com"
DEFAULT_OBJECT_TYPE = "2-57074073"
PAGE_LIMIT = 100

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Settings:
    access_token: Optional[str] = None
    port: int = DEFAULT_PORT
    host: str = DEFAULT_HOST
    api_base: str = DEFAULT_API_BASE
    object_type: str = DEFAULT_OBJECT_TYPE
    page_limit: int = PAGE_LIMIT

    @property
    def is_configured(self) -> bool:
        return bool(self.access_token)

    @property
    def collection_url(self) -> str:
        return f"{self.api_base.rstrip('/')}/crm/v3/objects/{self.object_type}"


def _env_int(env: Mapping[str, str], name: str, default: int) -> int:
    raw = env.get(name)
    if raw is None or not str(raw).strip():
        return default
    try:
        return int(raw)
    except (TypeError, ValueError):
        logger.warning(f"[config] Invalid {name}='{raw}', defaulting to {default}")
        return default


def load_settings(env: Optional[Mapping[str, str]] = None) -> Settings:
    """
    Build the settings once from the process environment (.env included).

    A missing ACCESS_TOKEN is reported but tolerated: the app still starts
    and every CRM call fails on its own.
    """
    if env is None:
        load_dotenv(dotenv_path=ENV_PATH)
        env = os.environ

    token = (env.get("ACCESS_TOKEN") or "").strip() or None
    if not token:
        logger.warning("[config] ACCESS_TOKEN is not set; CRM requests will fail until it is configured")

    return Settings(
        access_token=token,
        port=_env_int(env, "PORT", DEFAULT_PORT),
        host=(env.get("HOST") or DEFAULT_HOST).strip(),
        api_base=(env.get("CRM_API_BASE") or DEFAULT_API_BASE).strip(),
        object_type=(env.get("CRM_OBJECT_TYPE") or DEFAULT_OBJECT_TYPE).strip(),
    )
