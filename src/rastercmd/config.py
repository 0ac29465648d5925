"""Configuration management for rastercmd."""

import logging
from pathlib import Path

import yaml
from pydantic_settings import BaseSettings, SettingsConfigDict

from rastercmd.models.config import ImageCommandConfig

logger = logging.getLogger(__name__)


class Settings(BaseSettings):
    """Environment-based settings."""

    model_config = SettingsConfigDict(
        env_prefix="RASTERCMD_",
        env_file=".env",
        extra="ignore",
    )

    config_file: Path = Path("rastercmd.yaml")
    debug: bool = False


def load_config(config_path: Path) -> ImageCommandConfig:
    """Load encoding configuration from a YAML file.

    A missing file yields the default configuration.
    """
    if not config_path.exists():
        logger.debug(f"Config file {config_path} not found, using defaults")
        return ImageCommandConfig()

    with open(config_path) as f:
        data = yaml.safe_load(f) or {}

    if not isinstance(data, dict):
        raise ValueError(f"Config file {config_path} must contain a mapping, not {type(data).__name__}")

    # Handle None values for nested sections (YAML returns None for empty keys)
    for section in ("quantization", "params"):
        if data.get(section) is None:
            data.pop(section, None)

    return ImageCommandConfig.model_validate(data)


# Global settings instance
settings = Settings()
