"""Application configuration.

AppConfig is a frozen dataclass: immutable after creation,
IDE-autocompletable, no string-key dict lookups.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass

from demo_api.errors import ConfigurationError

_LOG_LEVELS = ("critical", "error", "warning", "info", "debug")
_TRUTHY = ("1", "true", "yes", "on")


@dataclass(frozen=True, slots=True)
class AppConfig:
    """Application configuration. Immutable after creation.

    All fields have defaults matching the process contract (port 3000 on
    all interfaces). Override what you need::

        config = AppConfig(port=8080, debug=True)
    """

    # Server
    host: str = "0.0.0.0"
    port: int = 3000
    debug: bool = False

    # Logging
    log_level: str = "info"
    access_log: bool = True

    # Limits
    max_content_length: int = 1024 * 1024  # 1 MB

    def __post_init__(self) -> None:
        if not 0 <= self.port <= 65535:
            msg = f"port must be between 0 and 65535, got {self.port}"
            raise ConfigurationError(msg)
        if self.log_level not in _LOG_LEVELS:
            msg = f"log_level must be one of {', '.join(_LOG_LEVELS)}, got {self.log_level!r}"
            raise ConfigurationError(msg)

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> AppConfig:
        """Build a config from ``PORT``, ``HOST``, ``LOG_LEVEL`` and ``DEBUG``.

        Unset or empty variables fall back to the field defaults.
        Raises ``ConfigurationError`` when ``PORT`` is not an integer.
        """
        env = os.environ if environ is None else environ
        overrides: dict[str, object] = {}

        port = env.get("PORT", "").strip()
        if port:
            try:
                overrides["port"] = int(port)
            except ValueError:
                msg = f"PORT must be an integer, got {port!r}"
                raise ConfigurationError(msg) from None

        host = env.get("HOST", "").strip()
        if host:
            overrides["host"] = host

        log_level = env.get("LOG_LEVEL", "").strip().lower()
        if log_level:
            overrides["log_level"] = log_level

        debug = env.get("DEBUG", "").strip().lower()
        if debug:
            overrides["debug"] = debug in _TRUTHY

        return cls(**overrides)  # type: ignore[arg-type]
