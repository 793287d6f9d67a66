# src/file_links_api/settings.py
from functools import lru_cache
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_FILES_COLLECTION = "files"


class Settings(BaseSettings):
    """
    Single source of truth for the service settings.

    Configuration precedence:
    1. Environment variables (highest priority)
    2. .env file (if exists)
    3. Default values in this class (lowest priority)

    ``MONGODB_URI``, ``BUCKET_NAME`` and ``REGION`` have no defaults: the
    service refuses to start without them.

    Usage:
        from file_links_api.settings import get_settings
        settings = get_settings()
        bucket_name = settings.bucket_name
    """

    # Metadata store
    mongodb_uri: str = Field(
        alias="MONGODB_URI",
        description="MongoDB connection string (database name taken from the path)",
    )

    files_collection: str = Field(
        default=DEFAULT_FILES_COLLECTION,
        alias="FILES_COLLECTION",
        description="Collection holding file records",
    )

    # Blob store
    bucket_name: str = Field(
        alias="BUCKET_NAME",
        description="S3 bucket holding the file bytes",
    )

    region: str = Field(
        alias="REGION",
        description="AWS region of the bucket",
    )

    aws_endpoint_url: Optional[str] = Field(
        default=None,
        alias="AWS_ENDPOINT_URL",
        description="Custom S3 endpoint for local or mocked AWS",
    )

    # Logging
    log_level: str = Field(
        default="INFO",
        alias="LOG_LEVEL",
        description="Logging level",
    )

    @field_validator("log_level")
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        """Accept lower-case level names from the environment."""
        return v.upper()

    @field_validator("aws_endpoint_url")
    @classmethod
    def empty_endpoint_is_none(cls, v: Optional[str]) -> Optional[str]:
        return v or None

    model_config = SettingsConfigDict(
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )


@lru_cache()
def get_settings() -> Settings:
    """
    Get cached settings instance.
    This ensures we only create one Settings instance per process.
    """
    return Settings()
