"""Runtime settings.

Values come from keyword overrides, then ``RIOKEYS_*`` environment
variables, then a ``.env`` file, then the defaults below.
"""

from pathlib import Path
from typing import Any, Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_BASE_URL = "https://raider.io/api/v1"
DEFAULT_SEASON = "season-tww-2"
DEFAULT_CACHE_PATH = Path("cache.json")


class RioSettings(BaseSettings):
    """Top-level riokeys settings."""

    base_url: str = DEFAULT_BASE_URL
    season: str = DEFAULT_SEASON
    cache_path: Path = DEFAULT_CACHE_PATH
    pretty_cache: bool = True
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "WARNING"

    model_config = SettingsConfigDict(
        env_prefix="RIOKEYS_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    def as_dict(self) -> dict[str, object]:
        return self.model_dump(mode="json")


def load_settings(**overrides: Any) -> RioSettings:
    """Load settings; ``None`` overrides are ignored so CLI defaults fall through."""
    explicit = {key: value for key, value in overrides.items() if value is not None}
    return RioSettings(**explicit)
