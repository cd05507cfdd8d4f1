"""DashboardSettings - where audit data lives and how to fetch it."""

import logging
import os
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import ClassVar

from dotenv import dotenv_values

_log = logging.getLogger(__name__)

DEFAULT_ENV_PATH = Path(".env")

ENV_BASE_URL = "DIFR_BASE_URL"
ENV_HTTP_TIMEOUT = "DIFR_HTTP_TIMEOUT"
ENV_MAX_CONNECTIONS = "DIFR_MAX_CONNECTIONS"
ENV_LOG_LEVEL = "DIFR_LOG_LEVEL"


@dataclass
class DashboardSettings:
    """Configuration for fetching audit results."""

    DEFAULT_TIMEOUT: ClassVar[float] = 30.0
    DEFAULT_MAX_CONNECTIONS: ClassVar[int] = 8
    DEFAULT_LOG_LEVEL: ClassVar[str] = "WARNING"

    base_url: str = ""
    timeout: float = DEFAULT_TIMEOUT
    max_connections: int = DEFAULT_MAX_CONNECTIONS
    log_level: str = DEFAULT_LOG_LEVEL


class DashboardSettingsManager:
    """Loads settings from a .env file, overridden by the process environment."""

    def __init__(
        self,
        env_path: Path = DEFAULT_ENV_PATH,
        environ: Mapping[str, str] | None = None,
    ) -> None:
        self._env_path = env_path
        self._environ = os.environ if environ is None else environ

    def _read_env(self) -> dict[str, str]:
        values: dict[str, str] = {}
        if self._env_path.exists():
            values.update(
                {k: v for k, v in dotenv_values(self._env_path).items() if v is not None}
            )
        values.update(self._environ)
        return values

    def load(self) -> DashboardSettings:
        """Load settings. Missing or invalid values fall back to defaults."""
        env_vars = self._read_env()
        defaults = DashboardSettings()
        return DashboardSettings(
            base_url=env_vars.get(ENV_BASE_URL, "").strip().rstrip("/"),
            timeout=_positive(
                env_vars.get(ENV_HTTP_TIMEOUT), float, defaults.timeout, ENV_HTTP_TIMEOUT
            ),
            max_connections=_positive(
                env_vars.get(ENV_MAX_CONNECTIONS),
                int,
                defaults.max_connections,
                ENV_MAX_CONNECTIONS,
            ),
            log_level=(env_vars.get(ENV_LOG_LEVEL) or defaults.log_level).upper(),
        )


def _positive(raw: str | None, kind: type, default, name: str):
    if raw is None or not raw.strip():
        return default
    try:
        value = kind(raw)
    except ValueError:
        _log.warning("Ignoring invalid %s=%r", name, raw)
        return default
    if value <= 0:
        _log.warning("Ignoring non-positive %s=%r", name, raw)
        return default
    return value
