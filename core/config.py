from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field

from core.errors import ConfigError
from core.outage_fetcher import DEFAULT_CONCURRENCY_LIMIT
from providers.pingdom_provider import DEFAULT_API_URL, DEFAULT_TIMEOUT_SECONDS


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    s = raw.strip().lower()
    if s in {"1", "true", "yes", "y", "on"}:
        return True
    if s in {"0", "false", "no", "n", "off"}:
        return False
    return default


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None:
        return default
    try:
        return int(raw.strip())
    except ValueError:
        return default


def _env_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None:
        return default
    try:
        return float(raw.strip())
    except ValueError:
        return default


def _env_str(name: str, default: str) -> str:
    raw = os.getenv(name)
    if raw is None:
        return default
    s = raw.strip()
    return s if s else default


def _env_log_level(name: str, default: str) -> str:
    level = _env_str(name, default).upper()
    if not isinstance(logging.getLevelName(level), int):
        return default
    return level


@dataclass(frozen=True)
class Settings:
    # Pingdom credentials, consumed only by the provider client.
    email: str = field(default_factory=lambda: os.getenv("EMAIL", ""))
    password: str = field(default_factory=lambda: os.getenv("PASSWORD", ""))
    api_key: str = field(default_factory=lambda: os.getenv("APIKEY", ""))

    api_url: str = field(default_factory=lambda: _env_str("PINGDOM_API_URL", DEFAULT_API_URL))
    timeout_seconds: float = field(
        default_factory=lambda: _env_float("PINGDOM_TIMEOUT_SECONDS", DEFAULT_TIMEOUT_SECONDS)
    )
    concurrency_limit: int = field(
        default_factory=lambda: _env_int("PINGDOM_CONCURRENCY_LIMIT", DEFAULT_CONCURRENCY_LIMIT)
    )
    tag_hostname: bool = field(default_factory=lambda: _env_bool("PINGDOM_TAG_HOSTNAME", False))

    listen_host: str = field(default_factory=lambda: _env_str("LISTEN_HOST", "0.0.0.0"))
    listen_port: int = field(default_factory=lambda: _env_int("LISTEN_PORT", 8080))
    log_level: str = field(default_factory=lambda: _env_log_level("LOG_LEVEL", "INFO"))

    def require_credentials(self) -> None:
        missing = [
            env
            for env, value in (
                ("EMAIL", self.email),
                ("PASSWORD", self.password),
                ("APIKEY", self.api_key),
            )
            if not value
        ]
        if missing:
            raise ConfigError(f"missing Pingdom credentials: {', '.join(missing)}")
