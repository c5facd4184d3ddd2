"""Settings for create-chatterino-plugin.

Values come from ``C2_PLUGIN_*`` environment variables or a ``.env`` file in
the working directory.
"""

import logging
from functools import lru_cache
from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from create_chatterino_plugin.manifest import DEFAULT_MANIFEST, ManifestDefaults

logger = logging.getLogger(__name__)

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="C2_PLUGIN_", env_file=".env", extra="ignore")

    base_dir: Path | None = Field(
        default=None,
        description="Chatterino data directory; overrides the per-platform default",
    )

    # Manifest placeholders
    author: str = Field(default=DEFAULT_MANIFEST.authors[0], description="Manifest author")
    homepage: str = Field(default=DEFAULT_MANIFEST.homepage, description="Manifest homepage")
    description: str = Field(
        default=DEFAULT_MANIFEST.description, description="Manifest description"
    )

    log_level: str = Field(default="WARNING", description="Root log level, e.g. DEBUG")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        level = value.strip().upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(LOG_LEVELS)}, got {value!r}")
        return level

    def manifest_defaults(self) -> ManifestDefaults:
        return ManifestDefaults(
            description=self.description,
            authors=(self.author,),
            homepage=self.homepage,
        )


@lru_cache
def _load_settings() -> Settings:
    return Settings()


def get_settings(force_reload: bool = False) -> Settings:
    """Get cached settings instance."""
    if force_reload:
        _load_settings.cache_clear()
    return _load_settings()
