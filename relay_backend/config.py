"""Helpers for working with project paths and environment configuration."""
from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

PACKAGE_ROOT: Path = Path(__file__).resolve().parent
PROJECT_ROOT: Path = PACKAGE_ROOT.parent
STATIC_DIR: Path = PACKAGE_ROOT / "static"
DEFAULT_DASHBOARD_FILE: Path = STATIC_DIR / "dashboard.html"

USER_AGENT = "Webhook-Dashboard/1.0"
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        value = int(raw)
    except ValueError:
        return default
    return value if value > 0 else default


def _env_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        value = float(raw)
    except ValueError:
        return default
    return value if value > 0 else default


def _env_log_level(name: str, default: str) -> str:
    level = (os.getenv(name) or "").strip().upper()
    return level if level in LOG_LEVELS else default


@dataclass(frozen=True)
class Settings:
    """Runtime settings, read from the environment once at start-up."""

    host: str = "0.0.0.0"
    port: int = 3000
    max_entries: int = 1000
    max_log_entries: int = 500
    max_activity_entries: int = 4000
    fetch_url: str = "http://localhost:5678/webhook/dashboard-data"
    action_url: str = "http://localhost:5678/webhook/price-action"
    chat_url: str = "http://localhost:5678/webhook/chat"
    timeout: float = 10.0
    chat_timeout: float = 30.0
    log_level: str = "INFO"
    dashboard_file: Path = DEFAULT_DASHBOARD_FILE


def load_settings() -> Settings:
    defaults = Settings()
    dashboard: Optional[str] = os.getenv("RELAY_DASHBOARD_FILE")
    return Settings(
        host=os.getenv("HOST", defaults.host),
        port=_env_int("PORT", defaults.port),
        max_entries=_env_int("RELAY_MAX_ENTRIES", defaults.max_entries),
        max_log_entries=_env_int("RELAY_MAX_LOG_ENTRIES", defaults.max_log_entries),
        max_activity_entries=_env_int("RELAY_MAX_ACTIVITY_ENTRIES", defaults.max_activity_entries),
        fetch_url=os.getenv("RELAY_FETCH_URL", defaults.fetch_url),
        action_url=os.getenv("RELAY_ACTION_URL", defaults.action_url),
        chat_url=os.getenv("RELAY_CHAT_URL", defaults.chat_url),
        timeout=_env_float("RELAY_TIMEOUT", defaults.timeout),
        chat_timeout=_env_float("RELAY_CHAT_TIMEOUT", defaults.chat_timeout),
        log_level=_env_log_level("RELAY_LOG_LEVEL", defaults.log_level),
        dashboard_file=Path(dashboard) if dashboard else defaults.dashboard_file,
    )


__all__ = [
    "PACKAGE_ROOT",
    "PROJECT_ROOT",
    "STATIC_DIR",
    "DEFAULT_DASHBOARD_FILE",
    "USER_AGENT",
    "Settings",
    "load_settings",
]
