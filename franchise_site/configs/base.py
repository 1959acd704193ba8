"""
Shared settings base.

Every config class reads the same ``.env`` file, case-insensitively, and
ignores keys meant for other classes. Subclasses only add an ``env_prefix``;
pydantic merges their ``model_config`` with this one.

Dependencies: pydantic_settings
System role: Foundation for all configuration classes
"""

from pydantic_settings import BaseSettings as PydanticBaseSettings, SettingsConfigDict


class BaseSettings(PydanticBaseSettings):
    """Common ``.env`` loading for the site's configuration classes."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )
