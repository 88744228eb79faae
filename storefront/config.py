"""Environment-driven application settings."""
from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path

from dotenv import load_dotenv

PACKAGE_DIR = Path(__file__).resolve().parent
ROOT_DIR = PACKAGE_DIR.parent
DEFAULT_CATALOG_PATH = PACKAGE_DIR / "data" / "catalog.json"

load_dotenv(dotenv_path=ROOT_DIR / ".env")


def _get_env(*keys: str, default: str | None = None) -> str | None:
    for k in keys:
        v = os.getenv(k)
        if v is not None and str(v).strip() != "":
            return v.strip()
    return default


def _get_int(*keys: str, default: int) -> int:
    v = _get_env(*keys, default=None)
    if v is None:
        return default
    return int(v)


def _get_list(*keys: str, default: str) -> tuple[str, ...]:
    raw = _get_env(*keys, default=default) or default
    return tuple(part.strip() for part in raw.split(",") if part.strip())


@dataclass(frozen=True)
class Settings:
    app_env: str
    log_level: str
    catalog_path: str
    cors_origins: tuple[str, ...]
    # Idle carts are dropped after this long (24h, like abandoned carts)
    cart_session_ttl_seconds: int = 86400
    max_cart_sessions: int = 10000

    @property
    def is_production(self) -> bool:
        return self.app_env == "production"


def load_settings() -> Settings:
    """Read settings from the current environment."""
    return Settings(
        app_env=(_get_env("APP_ENV", default="development") or "development").lower(),
        log_level=(_get_env("LOG_LEVEL", default="INFO") or "INFO").upper(),
        catalog_path=_get_env("CATALOG_PATH", default=str(DEFAULT_CATALOG_PATH)) or str(DEFAULT_CATALOG_PATH),
        cors_origins=_get_list("CORS_ORIGINS", default="*"),
        cart_session_ttl_seconds=_get_int("CART_SESSION_TTL_SECONDS", default=86400),
        max_cart_sessions=_get_int("MAX_CART_SESSIONS", default=10000),
    )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Get settings (read once per process)."""
    return load_settings()
