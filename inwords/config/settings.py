"""Library settings module.

Centralized configuration using environment variables with sane defaults.
Only logging reads these; conversions depend on their arguments alone.
"""
from __future__ import annotations

from functools import lru_cache
import os

from pydantic import BaseModel, ConfigDict


class Settings(BaseModel):
    model_config = ConfigDict(frozen=True)

    # Observability
    LOG_LEVEL: str = "INFO"
    LOG_JSON: bool = True

    @classmethod
    def load(cls) -> "Settings":
        """Load settings from environment with type coercion and defaults."""
        def _get_bool(name: str, default: bool) -> bool:
            raw = os.getenv(name)
            if raw is None:
                return default
            return raw.lower() in {"1", "true", "yes", "on"}

        return cls(
            LOG_LEVEL=os.getenv("LOG_LEVEL", "INFO").upper(),
            LOG_JSON=_get_bool("LOG_JSON", True),
        )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return cached Settings instance (singleton pattern)."""
    return Settings.load()


__all__ = ["Settings", "get_settings"]
