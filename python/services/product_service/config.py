"""Product service configuration.

Loads settings from environment variables (and a ``.env`` file if present)
with defaults suitable for local development.
"""

from __future__ import annotations

import os
from dataclasses import dataclass

from dotenv import load_dotenv

load_dotenv()


def _env_flag(name: str, default: str) -> bool:
    return os.getenv(name, default).strip().lower() in {"1", "true", "yes", "on"}


@dataclass
class Settings:
    service_name: str = "product-service"
    log_level: str = "INFO"
    json_logs: bool = False
    seed_sample_data: bool = True
    host: str = "127.0.0.1"
    port: int = 8000

    @classmethod
    def from_env(cls) -> Settings:
        """Build settings from the environment.

        Raises:
            ValueError: If PORT is not an integer.
        """
        return cls(
            service_name=os.getenv("SERVICE_NAME", "product-service"),
            log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
            json_logs=_env_flag("JSON_LOGS", "false"),
            seed_sample_data=_env_flag("SEED_SAMPLE_DATA", "true"),
            host=os.getenv("HOST", "127.0.0.1"),
            port=int(os.getenv("PORT", "8000")),
        )


_settings: Settings | None = None


def get_settings() -> Settings:
    """Return the process-wide settings, loading them on first use."""
    global _settings
    if _settings is None:
        _settings = Settings.from_env()
    return _settings
