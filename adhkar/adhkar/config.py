"""
Configuration management for Adhkar library.

Uses Pydantic Settings for type-safe configuration with environment variable support.
All settings can be overridden via environment variables with the ADHKAR_ prefix.
"""

from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class AdhkarSettings(BaseSettings):
    """
    Configuration settings for Adhkar library.

    All settings can be overridden via environment variables with ADHKAR_ prefix.

    Example:
        export ADHKAR_CORPUS_ROOT="/srv/hadith-json/db/by_book"
        export ADHKAR_CONCURRENT_LOADS="false"
        export ADHKAR_CORPUS_BASE_URL="https://example.org/db/by_book"
    """

    model_config = SettingsConfigDict(
        env_prefix="ADHKAR_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # ============ Corpus Source ============

    corpus_root: Path = Field(
        default=Path("db/by_book"),
        description="Directory holding the_9_books/, other_books/ and forties/",
    )

    corpus_base_url: str | None = Field(
        default=None,
        description="Base URL of the corpus; when set, books are fetched over HTTP",
    )

    request_timeout: float = Field(
        default=30.0,
        description="Timeout in seconds for a single HTTP document fetch",
        gt=0.0,
    )

    # ============ Corpus Scan ============

    concurrent_loads: bool = Field(
        default=True,
        description="Fan out book loads concurrently during the corpus scan",
    )

    max_concurrent_loads: int = Field(
        default=4,
        description="Maximum number of book loads in flight at once",
        ge=1,
        le=17,
    )

    # ============ Entity Conversion ============

    title_max_length: int = Field(
        default=50,
        description="Maximum length of a supplication title synopsis (including ellipsis)",
        ge=4,
        le=500,
    )

    # ============ Favorites ============

    favorites_path: Path | None = Field(
        default=None,
        description="JSON file for favorites; defaults to the user data directory",
    )

    # ============ Logging ============

    log_level: str = Field(
        default="WARNING",
        description="Log level used by the command-line interface",
    )

    # ============ Validators ============

    @field_validator("corpus_root", "favorites_path", mode="before")
    @classmethod
    def convert_to_path(cls, v: str | Path | None) -> Path | None:
        """Convert string paths to Path objects."""
        if isinstance(v, str):
            return Path(v)
        return v

    @field_validator("corpus_base_url")
    @classmethod
    def strip_trailing_slash(cls, v: str | None) -> str | None:
        """Drop trailing slashes so relative paths join cleanly."""
        if v is None:
            return None
        v = v.strip().rstrip("/")
        return v or None

    @field_validator("log_level")
    @classmethod
    def upper_log_level(cls, v: str) -> str:
        return v.upper()


# Default settings instance
_default_settings: AdhkarSettings | None = None


def get_settings() -> AdhkarSettings:
    """
    Get the default settings instance (lazily created).

    Returns:
        AdhkarSettings: The default settings
    """
    global _default_settings
    if _default_settings is None:
        _default_settings = AdhkarSettings()
    return _default_settings


def configure(**kwargs) -> AdhkarSettings:
    """
    Create and set new default settings.

    Args:
        **kwargs: Settings to override

    Returns:
        AdhkarSettings: The new settings instance
    """
    global _default_settings
    _default_settings = AdhkarSettings(**kwargs)
    return _default_settings
