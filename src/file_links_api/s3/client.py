"""S3 client construction."""
import logging
from functools import lru_cache
from typing import Optional

import boto3
from botocore.config import Config

from file_links_api.settings import get_settings

try:
    from mypy_boto3_s3 import S3Client
except ImportError:
    ...

logger = logging.getLogger(__name__)


@lru_cache()
def _build_s3_client(region: str, endpoint_url: Optional[str]) -> "S3Client":
    logger.info(f"Creating S3 client for region {region}" + (f" at {endpoint_url}" if endpoint_url else ""))
    return boto3.client(
        "s3",
        region_name=region,
        endpoint_url=endpoint_url,
        # pre-signed URLs must be SigV4 for regions launched after 2014
        config=Config(signature_version="s3v4"),
    )


def get_s3_client(region: str, endpoint_url: Optional[str] = None) -> "S3Client":
    """
    Get the process-wide S3 client for a region.

    :param region: AWS region of the bucket.
    :param endpoint_url: Optional custom endpoint, e.g. a local moto server.
    """
    return _build_s3_client(region, endpoint_url)


def clear_s3_clients() -> None:
    """Drop cached clients (used when credentials or mocks change)."""
    _build_s3_client.cache_clear()


def get_default_s3_client() -> "S3Client":
    """Get the S3 client configured by the process settings."""
    settings = get_settings()
    return get_s3_client(settings.region, settings.aws_endpoint_url)
