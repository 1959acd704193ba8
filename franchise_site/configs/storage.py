"""
S3 media bucket configuration.

Settings for uploaded media storage (franchise logos, agent photos, page images).
Works against AWS S3 or any S3-compatible endpoint.

Dependencies: pydantic_settings
System role: Media storage configuration
"""

from pydantic import Field
from pydantic_settings import SettingsConfigDict

from franchise_site.configs.base import BaseSettings


class StorageSettings(BaseSettings):
    """Settings for S3 media bucket operations."""

    model_config = SettingsConfigDict(env_prefix="S3_MEDIA_")

    bucket: str = Field(
        default="future-franchise-owners-media",
        description="S3 bucket for uploaded media",
    )
    region: str = Field(
        default="us-east-1",
        description="AWS region for S3 bucket",
    )
    endpoint_url: str | None = Field(
        default=None,
        description="Custom endpoint for S3-compatible storage (R2, MinIO, Supabase)",
    )
    key_prefix: str = Field(
        default="media",
        description="Object key prefix for uploaded files",
    )
    public_base_url: str | None = Field(
        default=None,
        description="Public base URL serving the bucket; presigned URLs are used when unset",
    )
    presigned_url_expiry: int = Field(
        default=3600,
        description="Presigned URL expiry in seconds (default 1 hour)",
    )
    max_upload_bytes: int = Field(
        default=10 * 1024 * 1024,
        description="Maximum accepted upload size in bytes",
    )
