"""
Configuration management for url-suffix.
"""

from pathlib import Path
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class RulesConfig(BaseSettings):
    """Configuration for the suffix rule table."""

    suffix_list_path: Optional[Path] = Field(
        default=None,
        description=(
            "Path to a public suffix list file (plain or .zst). "
            "Defaults to the list bundled with publicsuffixlist."
        ),
    )
    cache_size: int = Field(
        default=4096, description="Per-matcher LRU cache size for resolved hosts"
    )

    model_config = SettingsConfigDict(env_prefix="RULES_")


class Config(BaseSettings):
    """Main configuration."""

    rules: RulesConfig = Field(default_factory=RulesConfig)

    log_level: str = Field(default="INFO", description="Logging level")

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", env_nested_delimiter="__"
    )


# Global config instance
_config: Optional[Config] = None


def get_config() -> Config:
    """Get or create the global configuration instance."""
    global _config
    if _config is None:
        _config = Config()
    return _config


def reset_config() -> None:
    """Reset the global configuration (mainly for testing)."""
    global _config
    _config = None
